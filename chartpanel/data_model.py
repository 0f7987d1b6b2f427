from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .placement import SeriesPlacement


class Point(NamedTuple):
    x: int
    y: int

    def offset(self, dx: int = 0, dy: int = 0) -> "Point":
        return Point(self.x + dx, self.y + dy)


class Size(NamedTuple):
    width: int
    height: int


@dataclass(frozen=True)
class FontSpec:
    family: str = "Arial"
    size: int = 20
    bold: bool = True

    def as_tk(self) -> tuple:
        """Tk font descriptor, e.g. ("Arial", 20, "bold")."""
        if self.bold:
            return (self.family, self.size, "bold")
        return (self.family, self.size)


@dataclass(frozen=True)
class KeyEvent:
    # keysym follows Tk naming ("Left", "Right", "Up", "Down", "q", ...)
    keysym: str
    char: str = ""


@dataclass
class ChartSeriesEntry:
    index: int
    name: str
    color: str
    placement: "SeriesPlacement"
    visible: bool = True

    @property
    def legend_text(self) -> str:
        return f"{self.index}: {self.name}"
