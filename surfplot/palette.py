from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, Iterator, Protocol, runtime_checkable

import numpy as np

from surfplot.color import BLACK, WHITE, Color, ColorLike
from surfplot.errors import PreconditionError


DEFAULT_GRADIENT_SIZE = 256


@dataclass(frozen=True)
class ScalarRange:
    """Inclusive [min, max] range of sampled surface values."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if math.isnan(self.min) or math.isnan(self.max):
            raise PreconditionError("scalar range bounds must not be NaN")
        if self.max < self.min:
            raise PreconditionError(f"scalar range is inverted: [{self.min}, {self.max}]")

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        return self.max == self.min


@runtime_checkable
class ColorMap(Protocol):
    def map(self, z: float, zrange: ScalarRange) -> Color: ...


class ColorPalette:
    """Ordered colors plus the scalar-to-color mapping used by the rasterizer.

    `map` splits the range into `len(palette)` equal buckets and returns the
    color of the bucket `z` falls into. Values at the top of the range land in
    the last bucket; a degenerate range always yields the first color.
    """

    def __init__(self, colors: Iterable[ColorLike] = ()) -> None:
        self._colors: list[Color] = [Color.coerce(c) for c in colors]
        self._lut: np.ndarray | None = None

    @classmethod
    def from_colors(cls, colors: Iterable[ColorLike]) -> ColorPalette:
        palette = cls(colors)
        if not palette._colors:
            raise PreconditionError("palette requires at least one color")
        return palette

    @classmethod
    def grayscale(cls, n: int) -> ColorPalette:
        return cls.linear_gradient(n, BLACK, WHITE)

    @classmethod
    def linear_gradient(cls, n: int, start: ColorLike, end: ColorLike) -> ColorPalette:
        if n <= 1:
            raise PreconditionError(f"gradient needs more than one color, got n={n}")
        c0 = Color.coerce(start).as_tuple()
        c1 = Color.coerce(end).as_tuple()
        palette = cls()
        for i in range(n):
            channels = []
            for a, b in zip(c0, c1):
                value = a + ((b - a) * i) / (n - 1)
                channels.append(int(max(0.0, min(255.0, value))))
            palette.add_color(Color(*channels))
        return palette

    @property
    def colors(self) -> tuple[Color, ...]:
        return tuple(self._colors)

    def add_color(self, color: ColorLike) -> None:
        self._colors.append(Color.coerce(color))
        self._lut = None

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __getitem__(self, index: int) -> Color:
        return self._colors[index]

    def __repr__(self) -> str:
        return f"ColorPalette(n={len(self._colors)})"

    def index_of(self, z: float, zrange: ScalarRange) -> int:
        if not self._colors:
            raise PreconditionError("cannot map a value through an empty palette")
        if zrange.is_degenerate:
            return 0
        n = len(self._colors)
        t = _fraction(z, zrange)
        if math.isnan(t):
            return 0
        t = min(1.0, max(0.0, t))
        return max(0, min(n - 1, math.floor(t * n)))

    def map(self, z: float, zrange: ScalarRange) -> Color:
        return self._colors[self.index_of(z, zrange)]

    def map_array(self, zs: np.ndarray, zrange: ScalarRange) -> np.ndarray:
        """Vectorized `map`: returns a uint8 array of shape `zs.shape + (3,)`."""
        if not self._colors:
            raise PreconditionError("cannot map values through an empty palette")
        lut = self._color_lut()
        values = np.asarray(zs, dtype=np.float64)
        if zrange.is_degenerate:
            idx = np.zeros(values.shape, dtype=np.intp)
        else:
            n = len(self._colors)
            with np.errstate(over="ignore", invalid="ignore"):
                t = _fraction(values, zrange)
            t = np.where(np.isnan(t), 0.0, t)
            np.clip(t, 0.0, 1.0, out=t)
            idx = np.floor(t * n).astype(np.intp)
            np.clip(idx, 0, n - 1, out=idx)
        return lut[idx]

    def _color_lut(self) -> np.ndarray:
        if self._lut is None:
            self._lut = np.asarray([c.as_tuple() for c in self._colors], dtype=np.uint8)
        return self._lut


def _fraction(z, zrange: ScalarRange):
    # Position of z inside the range, 0 at min and 1 at max. A span wider than
    # the float range is measured in halves so it stays finite.
    span = zrange.max - zrange.min
    if math.isfinite(span):
        return (z - zrange.min) / span
    return (z * 0.5 - zrange.min * 0.5) / (zrange.max * 0.5 - zrange.min * 0.5)
