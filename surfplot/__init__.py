from surfplot.api import canvas, plot_surface
from surfplot.canvas import Canvas
from surfplot.color import BLACK, BLUE, GREEN, NAMED_COLORS, RED, WHITE, Color
from surfplot.errors import PreconditionError, SurfaceDataError, SurfacePlotError
from surfplot.palette import ColorMap, ColorPalette, ScalarRange
from surfplot.raster import PixelBuffer
from surfplot.surface import Surface2
from surfplot.transform import RasterTransform

__all__ = [
    "BLACK",
    "BLUE",
    "Canvas",
    "Color",
    "ColorMap",
    "ColorPalette",
    "GREEN",
    "NAMED_COLORS",
    "PixelBuffer",
    "PreconditionError",
    "RED",
    "RasterTransform",
    "ScalarRange",
    "Surface2",
    "SurfaceDataError",
    "SurfacePlotError",
    "WHITE",
    "canvas",
    "plot_surface",
]
