from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from .data_model import ChartSeriesEntry, FontSpec, KeyEvent, Point, Size
from .placement import SeriesPlacement
from .style import ChartStyle, DEFAULT_SERIES_COLOR
from .surface import ChartHost, RenderSurface
from .ui_state import ChartDisplayState

log = logging.getLogger(__name__)

_ARROW_STEPS = {
    "Left": (-1, 0),
    "Right": (1, 0),
    "Up": (0, -1),
    "Down": (0, 1),
}


class ChartPanel:
    """
    Toolkit-independent line chart.

    Owns the series entries and the display state. A host binding feeds it
    pointer/key events and calls render() with a surface whenever it paints.
    """

    def __init__(self, style: Optional[ChartStyle] = None, *, host: Optional[ChartHost] = None) -> None:
        # setters and toggle keys mutate the panel's own copy of the style
        self.state = ChartDisplayState(style=replace(style) if style is not None else ChartStyle())
        self._host = host
        # index -> entry; dict keeps insertion order for the legend
        self._entries: Dict[int, ChartSeriesEntry] = {}
        self._next_series_index = 0
        self._tips: Optional[List[str]] = None

    @property
    def style(self) -> ChartStyle:
        return self.state.style

    def set_host(self, host: Optional[ChartHost]) -> None:
        self._host = host

    def apply_style(self, style: Optional[ChartStyle]) -> None:
        if style is None:
            return
        self.state.style = replace(style)
        self._request_redraw()

    # ---------- series ----------

    def add_series(self, values: Optional[Sequence[float]], name: str = "", color: Optional[str] = DEFAULT_SERIES_COLOR) -> int:
        """Add a series and return its index, or -1 if it was rejected."""
        if values is None or color is None:
            log.debug("add_series rejected: missing %s", "values" if values is None else "color")
            return -1
        if len(values) == 0:
            log.debug("add_series rejected: empty series %r", name)
            return -1

        placement = SeriesPlacement(values)
        index = self._next_series_index
        self._next_series_index += 1
        self._entries[index] = ChartSeriesEntry(index=index, name=name or "", color=color, placement=placement)
        log.debug("added series %d %r (%d values)", index, name, placement.series_size)
        return index

    def remove_series(self, index: int) -> bool:
        if self._entries.pop(index, None) is None:
            return False
        log.debug("removed series %d", index)
        return True

    def remove_all_series(self) -> None:
        self._entries.clear()

    def set_series_visible(self, index: int, visible: bool) -> bool:
        entry = self._entries.get(index)
        if entry is None:
            return False
        entry.visible = bool(visible)
        return True

    def toggle_series_visible(self, index: int) -> bool:
        entry = self._entries.get(index)
        if entry is None:
            return False
        entry.visible = not entry.visible
        return True

    def set_series_color(self, index: int, color: Optional[str]) -> bool:
        if color is None:
            return False
        entry = self._entries.get(index)
        if entry is None:
            return False
        entry.color = color
        return True

    def get_series(self, index: int) -> Optional[ChartSeriesEntry]:
        return self._entries.get(index)

    def series_indices(self) -> List[int]:
        return list(self._entries)

    @property
    def series_count(self) -> int:
        return len(self._entries)

    # ---------- display settings ----------

    def set_background_color(self, color: Optional[str]) -> None:
        if color is not None:
            self.style.background_color = color

    def set_vertical_guide_color(self, color: Optional[str]) -> None:
        if color is not None:
            self.style.vertical_guide_color = color

    def set_horizontal_guide_color(self, color: Optional[str]) -> None:
        if color is not None:
            self.style.horizontal_guide_color = color

    def set_tip_color(self, color: Optional[str]) -> None:
        if color is not None:
            self.style.tip_color = color

    def set_tip_font(self, font: Optional[FontSpec]) -> None:
        if font is not None:
            self.style.tip_font = font

    def set_tip_position(self, position: Optional[Point]) -> None:
        if position is not None:
            self.style.tip_position = Point(*position)

    def set_legend_font(self, font: Optional[FontSpec]) -> None:
        if font is not None:
            self.style.legend_font = font

    def set_legend_position(self, position: Optional[Point]) -> None:
        if position is not None:
            self.style.legend_position = Point(*position)

    def set_legend_row_delta(self, delta: Optional[int]) -> None:
        if delta is not None:
            self.style.legend_row_delta = int(delta)

    def show_tips(self, flag: Optional[bool]) -> None:
        if flag is not None:
            self.style.show_tips = bool(flag)

    def show_vertical_guide(self, flag: Optional[bool]) -> None:
        if flag is not None:
            self.style.show_vertical_guide = bool(flag)

    def show_horizontal_guide(self, flag: Optional[bool]) -> None:
        if flag is not None:
            self.style.show_horizontal_guide = bool(flag)

    def show_legend(self, flag: Optional[bool]) -> None:
        if flag is not None:
            self.style.show_legend = bool(flag)

    # ---------- tips ----------

    def set_tips(self, tips: Optional[Sequence[str]]) -> None:
        self._tips = list(tips) if tips is not None else None

    def get_tip(self, pointer_x: int) -> str:
        """
        Pick the tip label for a horizontal pixel position.

        The panel width is split into len(tips) - 1 buckets and bucket i shows
        tips[i + 1]; the first label is only ever shown when it is the sole one.
        """
        tips = self._tips
        width = self.state.size.width
        if not tips or pointer_x < 0 or pointer_x >= width:
            return ""
        if len(tips) == 1:
            return tips[0]

        per_tip = width / (len(tips) - 1.0)
        idx = int(pointer_x / per_tip)
        if 0 <= idx + 1 < len(tips):
            return tips[idx + 1]
        return ""

    # ---------- rendering ----------

    def resize(self, size: Optional[Size]) -> None:
        if size is not None:
            self.state.size = Size(int(size[0]), int(size[1]))

    def render(self, surface: RenderSurface) -> None:
        style = self.style
        size = Size(*surface.size())
        self.state.size = size
        width, height = size

        surface.fill_rect(0, 0, width, height, style.background_color)

        entries = list(self._entries.values())
        for entry in entries:
            entry.placement.apply_dimension(size)

        for entry in entries:
            if not entry.visible:
                continue
            pts = entry.placement.points
            for p0, p1 in zip(pts, pts[1:]):
                surface.draw_line(p0.x, p0.y, p1.x, p1.y, entry.color)

        pointer = self.state.pointer
        if style.show_tips:
            tip = self.get_tip(pointer.x)
            surface.draw_text(tip, style.tip_position.x, style.tip_position.y, style.tip_color, style.tip_font)

        if style.show_vertical_guide:
            surface.draw_line(pointer.x, 0, pointer.x, height, style.vertical_guide_color)

        if style.show_horizontal_guide:
            surface.draw_line(0, pointer.y, width, pointer.y, style.horizontal_guide_color)

        if style.show_legend:
            row = style.legend_position
            for entry in entries:
                # hidden series keep their row so the legend lines up with indices
                if entry.visible:
                    surface.draw_text(entry.legend_text, row.x, row.y, entry.color, style.legend_font)
                row = row.offset(dy=style.legend_row_delta)

    # ---------- interaction ----------

    def on_pointer_move(self, position: Point) -> None:
        self.state.pointer = Point(int(position[0]), int(position[1]))
        self._request_redraw()

    def on_key_event(self, event: KeyEvent) -> None:
        step = _ARROW_STEPS.get(event.keysym)
        if step is not None:
            self._nudge_pointer(*step)
            return

        ch = event.char
        style = self.style
        if ch == "q":
            if self._host is not None:
                self._host.close()
        elif ch == "v":
            style.show_vertical_guide = not style.show_vertical_guide
            self._request_redraw()
        elif ch == "h":
            style.show_horizontal_guide = not style.show_horizontal_guide
            self._request_redraw()
        elif ch == "t":
            style.show_tips = not style.show_tips
            self._request_redraw()
        elif ch == "m":
            self.state.cursor_hidden = not self.state.cursor_hidden
            if self._host is not None:
                self._host.set_cursor_visible(not self.state.cursor_hidden)
        elif ch == "x":
            if self._host is not None:
                self._host.toggle_maximized()
        elif ch == "k":
            style.show_legend = not style.show_legend
            self._request_redraw()
        elif len(ch) == 1 and "0" <= ch <= "9":
            self.toggle_series_visible(int(ch))
            self._request_redraw()

    def _nudge_pointer(self, dx: int, dy: int) -> None:
        width, height = self.state.size
        x, y = self.state.pointer
        if (dx < 0 and x > 0) or (dx > 0 and x < width - 1):
            x += dx
        elif (dy < 0 and y > 0) or (dy > 0 and y < height - 1):
            y += dy
        else:
            return
        self.state.pointer = Point(x, y)
        self._request_redraw()

    def _request_redraw(self) -> None:
        if self._host is not None:
            self._host.request_redraw()
