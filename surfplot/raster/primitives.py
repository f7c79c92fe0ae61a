from __future__ import annotations

import math

from surfplot.color import Color, ColorLike
from surfplot.raster.buffer import PixelBuffer


# Every function here clips against the buffer and never raises for
# off-canvas geometry.


def draw_pixel(dst: PixelBuffer, x: int, y: int, color: ColorLike) -> None:
    if not dst.in_bounds(x, y):
        return
    dst.pixels_rgb[y, x] = Color.coerce(color).as_tuple()


def draw_hline(dst: PixelBuffer, x: int, y: int, width: int, color: ColorLike) -> None:
    """Paint `width` pixels on row `y` starting at column `x`."""
    if y < 0 or y >= dst.height:
        return
    xa = max(0, x)
    xb = min(dst.width, x + width)
    if xa >= xb:
        return
    dst.pixels_rgb[y, xa:xb] = Color.coerce(color).as_tuple()


def draw_hline_signed(dst: PixelBuffer, x: int, y: int, width: int, color: ColorLike) -> None:
    """Horizontal span whose start may lie left of the canvas.

    Nothing is drawn when the whole span ends before column 0; otherwise the
    negative part is cut off and the remainder starts at column 0.
    """
    if y < 0:
        return
    if x + width < 0:
        return
    if x >= 0:
        draw_hline(dst, x, y, width, color)
    else:
        draw_hline(dst, 0, y, width + x, color)


def draw_vline(dst: PixelBuffer, x: int, y: int, height: int, color: ColorLike) -> None:
    """Paint column `x` from row `y` down to row `y + height` inclusive."""
    if x < 0 or x >= dst.width:
        return
    ya = max(0, y)
    yb = min(dst.height - 1, y + height)
    if ya > yb:
        return
    dst.pixels_rgb[ya : yb + 1, x] = Color.coerce(color).as_tuple()


def draw_rect(dst: PixelBuffer, x: int, y: int, width: int, height: int, color: ColorLike) -> None:
    c = Color.coerce(color)
    draw_hline(dst, x, y, width, c)
    draw_hline(dst, x, y + height, width, c)
    draw_vline(dst, x, y, height, c)
    draw_vline(dst, x + width, y, height, c)


def draw_square(dst: PixelBuffer, x: int, y: int, size: int, color: ColorLike) -> None:
    draw_rect(dst, x, y, size, size, color)


def draw_filled_circle(dst: PixelBuffer, cx: int, cy: int, radius: int, color: ColorLike) -> None:
    """Fill a disk with horizontal spans, one per row offset from the center.

    Row `cy +/- i` spans `cx - w ..= cx + w` with `w = int(sqrt(r^2 - i^2))`.
    """
    if radius < 0:
        return
    c = Color.coerce(color)
    draw_hline_signed(dst, cx - radius, cy, 2 * radius + 1, c)
    r2 = radius * radius
    for i in range(1, radius + 1):
        w = int(math.sqrt(r2 - i * i))
        draw_hline_signed(dst, cx - w, cy - i, 2 * w + 1, c)
        draw_hline_signed(dst, cx - w, cy + i, 2 * w + 1, c)
