from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from .data_model import Point, Size

log = logging.getLogger(__name__)

# Layout used until the host reports a real panel size
DEFAULT_DIMENSION = Size(1000, 800)


class SeriesPlacement:
    """
    Raw samples of one series plus their pixel coordinates for a panel size.

    Extrema are taken once from the raw data. Coordinates are recomputed only
    when apply_dimension() sees a size different from the cached one.

    Degenerate series:
      - a single sample sits at the horizontal center of the panel
      - a constant series (value_span == 0) is drawn at mid-height
    """

    def __init__(self, series: Sequence[float]) -> None:
        values = np.array(series, dtype=float).ravel()
        if values.size == 0:
            raise ValueError("Series must contain at least one value.")
        if not np.all(np.isfinite(values)):
            raise ValueError("Series values must be finite.")
        self._values = values
        self._values.flags.writeable = False

        self.series_size = int(values.size)
        self.min_value = float(values.min())
        self.max_value = float(values.max())
        self.value_span = self.max_value - self.min_value

        self.pixel_width = 0
        self.pixel_height = 0
        self.pixels_per_value = 0.0
        self._points: Tuple[Point, ...] = ()

        self.apply_dimension(DEFAULT_DIMENSION)

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    def apply_dimension(self, size: Optional[Size]) -> bool:
        """Return True when the size changed and points were recomputed."""
        if size is None:
            return False
        width, height = int(size[0]), int(size[1])
        if width == self.pixel_width and height == self.pixel_height:
            return False
        self.pixel_width = width
        self.pixel_height = height
        self._recompute()
        return True

    def _recompute(self) -> None:
        w = self.pixel_width
        h = self.pixel_height
        n = self.series_size

        if n > 1:
            self.pixels_per_value = w / (n - 1.0)
            xs = self.pixels_per_value * np.arange(n, dtype=float)
        else:
            self.pixels_per_value = 0.0
            xs = np.full(n, w // 2, dtype=float)

        if self.value_span > 0:
            frac = (self._values - self.min_value) / self.value_span
            ys = h - frac * h
        else:
            ys = np.full(n, h // 2, dtype=float)

        # astype(int) truncates toward zero, matching integer pixel placement
        xi = xs.astype(np.int64)
        yi = ys.astype(np.int64)
        self._points = tuple(Point(int(x), int(y)) for x, y in zip(xi, yi))
        log.debug("placement recomputed: %d points at %dx%d", n, w, h)
