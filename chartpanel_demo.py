import logging

from chartpanel.style import load_style
from chartpanel.ui_window import ChartWindow

log = logging.getLogger("chartpanel_demo")

# -----------------------------
# Sample data
# -----------------------------

SERIES_1 = [5.0, 7.0, 2.0, 1.5, 9.0, 4.0, 7.0, 7.0, 1.0, 3.0]
SERIES_2 = [100.0, 90.0, 110.0, 75.5, 30.0, 35.0, 20.0]

KEY_HELP = (
    "Keys: arrows nudge guides, v/h guides, t tips, k legend, "
    "m cursor, x maximize, 0-9 toggle series, q quit"
)


def build_window() -> ChartWindow:
    win = ChartWindow(title="Chart", geometry="800x600", style=load_style())
    panel = win.panel
    panel.add_series(SERIES_1, "Series 1", "#FF0000")
    panel.add_series(SERIES_2, "Series 2", "#C0C0C0")
    panel.set_tips([f"Sample {i}" for i in range(len(SERIES_1))])
    return win


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    log.info(KEY_HELP)
    app = build_window()
    app.mainloop()


if __name__ == "__main__":
    main()
