from __future__ import annotations

from dataclasses import dataclass, field

from .data_model import Point, Size
from .style import ChartStyle


@dataclass
class ChartDisplayState:
    style: ChartStyle = field(default_factory=ChartStyle)

    # panel size as last reported by the host (0x0 until laid out)
    size: Size = Size(0, 0)

    # last pointer position in panel pixels
    pointer: Point = Point(0, 0)

    cursor_hidden: bool = False
