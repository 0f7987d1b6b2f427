from __future__ import annotations

import tkinter as tk
from typing import Optional

from .data_model import FontSpec, KeyEvent, Point, Size
from .panel import ChartPanel


_TAG = "chart"


class CanvasSurface:
    """Render surface backed by a tk.Canvas; every item carries the "chart" tag."""

    def __init__(self, canvas: tk.Canvas) -> None:
        self.canvas = canvas

    def size(self) -> Size:
        return Size(max(1, self.canvas.winfo_width()), max(1, self.canvas.winfo_height()))

    def clear(self) -> None:
        self.canvas.delete(_TAG)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: str) -> None:
        self.canvas.create_rectangle(x, y, x + width, y + height, fill=color, outline="", tags=(_TAG,))

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: str) -> None:
        self.canvas.create_line(x0, y0, x1, y1, fill=color, width=1, tags=(_TAG,))

    def draw_text(self, text: str, x: int, y: int, color: str, font: FontSpec) -> None:
        if not text:
            return
        self.canvas.create_text(x, y, text=text, fill=color, font=font.as_tk(), anchor="sw", tags=(_TAG,))


class ChartCanvas(tk.Canvas):
    """
    Tk widget hosting a ChartPanel.

    Pointer motion, key presses and resizes are forwarded to the panel.
    Redraw requests are coalesced into one idle-time paint. Close and
    maximize requests go to `frame` when one is attached.
    """

    def __init__(self, parent: tk.Misc, panel: Optional[ChartPanel] = None, *, frame=None, **kwargs) -> None:
        kwargs.setdefault("highlightthickness", 0)
        super().__init__(parent, **kwargs)
        self.panel = panel if panel is not None else ChartPanel()
        self.panel.set_host(self)
        self.frame = frame
        self.surface = CanvasSurface(self)
        self._redraw_after_id: Optional[str] = None

        self.configure(takefocus=1)
        self.bind("<Configure>", self._on_configure)
        self.bind("<Motion>", self._on_motion)
        self.bind("<KeyPress>", self._on_key_press)
        self.bind("<Enter>", lambda _e: self.focus_set())

    # ---------- host services ----------

    def request_redraw(self) -> None:
        if self._redraw_after_id is not None:
            return
        self._redraw_after_id = self.after_idle(self._paint)

    def close(self) -> None:
        if self.frame is not None:
            self.frame.close()

    def toggle_maximized(self) -> None:
        if self.frame is not None:
            self.frame.toggle_maximized()

    def set_cursor_visible(self, visible: bool) -> None:
        self.configure(cursor="" if visible else "none")

    # ---------- events ----------

    def _on_configure(self, evt) -> None:
        self.panel.resize(Size(evt.width, evt.height))
        self.request_redraw()

    def _on_motion(self, evt) -> None:
        self.panel.on_pointer_move(Point(evt.x, evt.y))

    def _on_key_press(self, evt) -> None:
        self.panel.on_key_event(KeyEvent(evt.keysym, evt.char or ""))

    def _paint(self) -> None:
        self._redraw_after_id = None
        self.surface.clear()
        self.panel.render(self.surface)

    def destroy(self) -> None:
        if self._redraw_after_id is not None:
            self.after_cancel(self._redraw_after_id)
            self._redraw_after_id = None
        self.panel.set_host(None)
        super().destroy()
