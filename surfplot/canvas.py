from __future__ import annotations

from pathlib import Path

import numpy as np

from surfplot.color import Color, ColorLike
from surfplot.palette import ColorMap, ScalarRange
from surfplot.raster import (
    DEFAULT_BACKGROUND,
    PixelBuffer,
    draw_filled_circle,
    draw_hline,
    draw_hline_signed,
    draw_pixel,
    draw_rect,
    draw_square,
    draw_vline,
    rasterize_surface,
    sample_zrange,
)
from surfplot.surface import Surface2
from surfplot.transform import Interval, RasterTransform


class Canvas:
    """Pixel canvas that surface plots and clipped primitives draw into.

    Drawing methods never raise for off-canvas coordinates; whatever falls
    outside the buffer is dropped.
    """

    def __init__(self, width: int, height: int, background: ColorLike = DEFAULT_BACKGROUND) -> None:
        self._buffer = PixelBuffer(width=width, height=height, background=Color.coerce(background))

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def buffer(self) -> PixelBuffer:
        return self._buffer

    def clear(self, color: ColorLike | None = None) -> Canvas:
        self._buffer.fill(self._buffer.background if color is None else color)
        return self

    def draw_pixel(self, x: int, y: int, color: ColorLike) -> None:
        draw_pixel(self._buffer, x, y, color)

    def draw_hline(self, x: int, y: int, width: int, color: ColorLike) -> None:
        draw_hline(self._buffer, x, y, width, color)

    def draw_hline_signed(self, x: int, y: int, width: int, color: ColorLike) -> None:
        draw_hline_signed(self._buffer, x, y, width, color)

    def draw_vline(self, x: int, y: int, height: int, color: ColorLike) -> None:
        draw_vline(self._buffer, x, y, height, color)

    def draw_rect(self, x: int, y: int, width: int, height: int, color: ColorLike) -> None:
        draw_rect(self._buffer, x, y, width, height, color)

    def draw_square(self, x: int, y: int, size: int, color: ColorLike) -> None:
        draw_square(self._buffer, x, y, size, color)

    def draw_filled_circle(self, cx: int, cy: int, radius: int, color: ColorLike) -> None:
        draw_filled_circle(self._buffer, cx, cy, radius, color)

    def make_transform(self, xrange: Interval, yrange: Interval) -> RasterTransform:
        return RasterTransform.build(self.width, self.height, xrange, yrange)

    def sample_surface_zrange(self, surface: Surface2) -> ScalarRange:
        return sample_zrange(surface, self.make_transform(surface.xrange, surface.yrange))

    def splot(self, surface: Surface2, color_map: ColorMap) -> Canvas:
        rasterize_surface(self._buffer, surface, color_map, self.make_transform(surface.xrange, surface.yrange))
        return self

    def to_rgb(self) -> np.ndarray:
        return self._buffer.to_rgb()

    def save(self, path: str | Path) -> Path:
        return self._buffer.save(path)
