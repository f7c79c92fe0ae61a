from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from surfplot.errors import PreconditionError


Interval = tuple[float, float]


@dataclass(frozen=True)
class RasterTransform:
    """Maps a domain rectangle onto a `width` x `height` raster and back.

    Raster cell (rx, ry) samples the domain at its lower-left corner:
    `x = xrange[0] + rx * dx`. The inverse clamps into the rectangle and floors,
    so it is lossy near cell edges.
    """

    width: int
    height: int
    xrange: Interval
    yrange: Interval
    dx: float
    dy: float

    @classmethod
    def build(cls, width: int, height: int, xrange: Interval, yrange: Interval) -> RasterTransform:
        if width <= 0 or height <= 0:
            raise PreconditionError(f"raster width/height must be > 0, got {width}x{height}")
        xr = _check_interval(xrange, "xrange")
        yr = _check_interval(yrange, "yrange")
        dx = abs(xr[1] - xr[0]) / width
        dy = abs(yr[1] - yr[0]) / height
        return cls(width=width, height=height, xrange=xr, yrange=yr, dx=dx, dy=dy)

    def raster_to_domain(self, rx: int, ry: int) -> tuple[float, float]:
        if not (0 <= rx < self.width and 0 <= ry < self.height):
            raise PreconditionError(f"raster index ({rx}, {ry}) outside {self.width}x{self.height}")
        return (self.xrange[0] + rx * self.dx, self.yrange[0] + ry * self.dy)

    def domain_to_raster(self, x: float, y: float) -> tuple[int, int]:
        x = min(max(x, self.xrange[0]), self.xrange[1])
        y = min(max(y, self.yrange[0]), self.yrange[1])
        rx = min(int(math.floor((x - self.xrange[0]) / self.dx)), self.width - 1)
        ry = min(int(math.floor((y - self.yrange[0]) / self.dy)), self.height - 1)
        return (max(0, rx), max(0, ry))

    def sample_grid(self) -> tuple[np.ndarray, np.ndarray]:
        """Domain coordinates of every cell as two `(height, width)` arrays."""
        xs = self.xrange[0] + np.arange(self.width, dtype=np.float64) * self.dx
        ys = self.yrange[0] + np.arange(self.height, dtype=np.float64) * self.dy
        gx, gy = np.meshgrid(xs, ys)
        return gx, gy

    def domain_to_raster_array(self, x: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        cx = np.clip(np.asarray(x, dtype=np.float64), self.xrange[0], self.xrange[1])
        cy = np.clip(np.asarray(y, dtype=np.float64), self.yrange[0], self.yrange[1])
        rx = np.floor((cx - self.xrange[0]) / self.dx).astype(np.int64)
        ry = np.floor((cy - self.yrange[0]) / self.dy).astype(np.int64)
        np.clip(rx, 0, self.width - 1, out=rx)
        np.clip(ry, 0, self.height - 1, out=ry)
        return rx, ry


def _check_interval(interval: Interval, label: str) -> Interval:
    try:
        start, end = interval
    except (TypeError, ValueError) as exc:
        raise PreconditionError(f"{label} must be a (start, end) pair") from exc
    start = float(start)
    end = float(end)
    if not (math.isfinite(start) and math.isfinite(end)):
        raise PreconditionError(f"{label} bounds must be finite, got ({start}, {end})")
    if start == end:
        raise PreconditionError(f"{label} is degenerate: ({start}, {end})")
    if end < start:
        raise PreconditionError(f"{label} must be ascending, got ({start}, {end})")
    return (start, end)
