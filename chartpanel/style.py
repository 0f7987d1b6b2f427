from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from .data_model import FontSpec, Point

log = logging.getLogger(__name__)

# -----------------------------
# Defaults
# -----------------------------

DEFAULT_CHART_BACKGROUND_COLOR = "#000000"
DEFAULT_SERIES_COLOR = "#FFFFFF"
DEFAULT_VERTICAL_GUIDE_COLOR = "#00FF00"
DEFAULT_HORIZONTAL_GUIDE_COLOR = "#00FF00"
DEFAULT_TIP_COLOR = "#00FF00"
DEFAULT_TIP_POSITION = Point(0, 20)
DEFAULT_LEGEND_POSITION = Point(0, 45)
DEFAULT_LEGEND_ROW_DELTA = 25
DEFAULT_TIP_FONT = FontSpec("Arial", 20, True)
DEFAULT_LEGEND_FONT = FontSpec("Arial", 20, True)

CONFIG_PATH = Path.home() / ".chartpanel_style.json"

_POINT_FIELDS = ("tip_position", "legend_position")
_FONT_FIELDS = ("tip_font", "legend_font")


@dataclass
class ChartStyle:
    background_color: str = DEFAULT_CHART_BACKGROUND_COLOR
    vertical_guide_color: str = DEFAULT_VERTICAL_GUIDE_COLOR
    horizontal_guide_color: str = DEFAULT_HORIZONTAL_GUIDE_COLOR
    tip_color: str = DEFAULT_TIP_COLOR
    tip_font: FontSpec = DEFAULT_TIP_FONT
    tip_position: Point = DEFAULT_TIP_POSITION
    legend_font: FontSpec = DEFAULT_LEGEND_FONT
    legend_position: Point = DEFAULT_LEGEND_POSITION
    legend_row_delta: int = DEFAULT_LEGEND_ROW_DELTA

    show_tips: bool = True
    show_vertical_guide: bool = True
    show_horizontal_guide: bool = True
    show_legend: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "ChartStyle":
        """Build a style from a (possibly partial) dict; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for k, v in data.items():
            if k not in known:
                continue
            if k in _POINT_FIELDS:
                v = Point(int(v[0]), int(v[1]))
            elif k in _FONT_FIELDS:
                v = FontSpec(**v)
            kwargs[k] = v
        return cls(**kwargs)

    def to_dict(self) -> dict:
        d = asdict(self)
        for k in _POINT_FIELDS:
            d[k] = list(getattr(self, k))
        return d


# -----------------------------
# Persistence
# -----------------------------

def load_style(path: Optional[Path] = None) -> ChartStyle:
    """
    Read a style file, merging it over the defaults.
    A missing or unreadable file yields the default style.
    """
    path = Path(path) if path is not None else CONFIG_PATH
    if not path.exists():
        return ChartStyle()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("style file must hold a JSON object")
        return ChartStyle.from_dict(data)
    except (OSError, ValueError, TypeError, KeyError, IndexError) as e:
        log.warning("Ignoring unreadable style file %s: %s", path, e)
        return ChartStyle()


def save_style(style: ChartStyle, path: Optional[Path] = None) -> None:
    path = Path(path) if path is not None else CONFIG_PATH
    path.write_text(json.dumps(style.to_dict(), indent=2), encoding="utf-8")
