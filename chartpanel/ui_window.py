from __future__ import annotations

import logging
import platform
import tkinter as tk
from typing import Optional

from .panel import ChartPanel
from .style import ChartStyle
from .ui_canvas import ChartCanvas

log = logging.getLogger(__name__)


class ChartWindow(tk.Tk):
    """Top-level window holding one ChartCanvas; acts as the frame host for q/x keys."""

    def __init__(self, *, title: str = "Chart", geometry: str = "800x600", style: Optional[ChartStyle] = None):
        super().__init__()
        self.title(title)
        self.geometry(geometry)
        self.resizable(True, True)

        self.panel = ChartPanel(style)
        self.chart = ChartCanvas(self, self.panel, frame=self)
        self.chart.pack(side="top", fill="both", expand=True)
        self.chart.focus_set()

        self.protocol("WM_DELETE_WINDOW", self.close)

    def close(self) -> None:
        log.debug("chart window closing")
        self.destroy()

    def is_maximized(self) -> bool:
        if platform.system().lower() in ("windows", "darwin"):
            return self.state() == "zoomed"
        return self.tk.getboolean(self.attributes("-zoomed"))

    def toggle_maximized(self) -> None:
        # current state comes from the window manager, not a cached flag
        maximized = not self.is_maximized()
        if platform.system().lower() in ("windows", "darwin"):
            self.state("zoomed" if maximized else "normal")
        else:
            self.attributes("-zoomed", maximized)
