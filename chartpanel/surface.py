from __future__ import annotations

from typing import Protocol

from .data_model import FontSpec, Size


class RenderSurface(Protocol):
    """Drawing primitives a host toolkit provides to ChartPanel.render()."""

    def size(self) -> Size: ...

    def fill_rect(self, x: int, y: int, width: int, height: int, color: str) -> None: ...

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: str) -> None: ...

    # (x, y) is the left end of the text baseline
    def draw_text(self, text: str, x: int, y: int, color: str, font: FontSpec) -> None: ...


class ChartHost(Protocol):
    """Window-side services the panel may ask for. Every call is fire-and-forget."""

    def request_redraw(self) -> None: ...

    def close(self) -> None: ...

    def toggle_maximized(self) -> None: ...

    def set_cursor_visible(self, visible: bool) -> None: ...
