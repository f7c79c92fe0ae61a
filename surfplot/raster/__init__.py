from .buffer import DEFAULT_BACKGROUND, PixelBuffer
from .primitives import (
    draw_filled_circle,
    draw_hline,
    draw_hline_signed,
    draw_pixel,
    draw_rect,
    draw_square,
    draw_vline,
)
from .sampling import evaluate_grid, rasterize_surface, sample_zrange

__all__ = [
    "DEFAULT_BACKGROUND",
    "PixelBuffer",
    "draw_filled_circle",
    "draw_hline",
    "draw_hline_signed",
    "draw_pixel",
    "draw_rect",
    "draw_square",
    "draw_vline",
    "evaluate_grid",
    "rasterize_surface",
    "sample_zrange",
]
