from __future__ import annotations

from surfplot.canvas import Canvas
from surfplot.palette import DEFAULT_GRADIENT_SIZE, ColorMap, ColorPalette
from surfplot.surface import DEFAULT_XRANGE, DEFAULT_YRANGE, Surface2, SurfaceFn
from surfplot.transform import Interval


DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 1024


def canvas(width: int | None = None, height: int | None = None) -> Canvas:
    """Create a canvas; a missing side copies the given one, or falls back to the defaults."""
    if width is None and height is None:
        width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT
    elif width is None:
        width = height
    elif height is None:
        height = width
    assert width is not None and height is not None
    return Canvas(width=width, height=height)


def plot_surface(
    f: SurfaceFn,
    *,
    xrange: Interval = DEFAULT_XRANGE,
    yrange: Interval = DEFAULT_YRANGE,
    color_map: ColorMap | None = None,
    width: int | None = None,
    height: int | None = None,
    vectorized: bool = False,
) -> Canvas:
    surface = Surface2(f, vectorized=vectorized).with_xrange(xrange).with_yrange(yrange)
    if color_map is None:
        color_map = ColorPalette.grayscale(DEFAULT_GRADIENT_SIZE)
    return canvas(width, height).splot(surface, color_map)
