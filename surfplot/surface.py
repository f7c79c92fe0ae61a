from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

from surfplot.transform import Interval


DEFAULT_XRANGE: Interval = (-1.0, 1.0)
DEFAULT_YRANGE: Interval = (-1.0, 1.0)

SurfaceFn = Callable[[tuple[Any, Any]], Any]


@dataclass(frozen=True)
class Surface2:
    """A scalar function of `(x, y)` together with the domain it is plotted over.

    `f` receives a single `(x, y)` tuple and must be pure. With
    `vectorized=True` it is called once with a tuple of `(height, width)` numpy
    arrays and must return an array of the same shape.
    """

    f: SurfaceFn
    xrange: Interval = DEFAULT_XRANGE
    yrange: Interval = DEFAULT_YRANGE
    vectorized: bool = False

    @property
    def width(self) -> float:
        return abs(self.xrange[1] - self.xrange[0])

    @property
    def height(self) -> float:
        return abs(self.yrange[1] - self.yrange[0])

    def with_xrange(self, xrange: Interval) -> Surface2:
        return replace(self, xrange=(float(xrange[0]), float(xrange[1])))

    def with_yrange(self, yrange: Interval) -> Surface2:
        return replace(self, yrange=(float(yrange[0]), float(yrange[1])))

    def evaluate(self, point: tuple[float, float]) -> float:
        return float(self.f(point))
