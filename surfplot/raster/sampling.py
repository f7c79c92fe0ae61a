from __future__ import annotations

import logging
import math

import numpy as np

from surfplot.errors import PreconditionError, SurfaceDataError
from surfplot.palette import ColorMap, ColorPalette, ScalarRange
from surfplot.raster.buffer import PixelBuffer
from surfplot.surface import Surface2
from surfplot.transform import RasterTransform


LOGGER = logging.getLogger(__name__)


def sample_zrange(surface: Surface2, transform: RasterTransform) -> ScalarRange:
    """First pass: the min/max of `surface` over every raster cell."""
    if surface.vectorized:
        values = evaluate_grid(surface, transform)
        return ScalarRange(float(np.min(values)), float(np.max(values)))

    min_z = _sample(surface, transform, 0, 0)
    max_z = min_z
    for py in range(transform.height):
        for px in range(transform.width):
            z = _sample(surface, transform, px, py)
            if z < min_z:
                min_z = z
            elif z > max_z:
                max_z = z
    return ScalarRange(min_z, max_z)


def evaluate_grid(surface: Surface2, transform: RasterTransform) -> np.ndarray:
    xs, ys = transform.sample_grid()
    values = np.asarray(surface.f((xs, ys)), dtype=np.float64)
    if values.shape != xs.shape:
        values = _broadcast_result(values, xs.shape)
    bad = ~np.isfinite(values)
    if np.any(bad):
        py, px = (int(v) for v in np.argwhere(bad)[0])
        raise SurfaceDataError(f"surface is not finite at raster cell ({px}, {py})")
    return values


def rasterize_surface(
    dst: PixelBuffer,
    surface: Surface2,
    color_map: ColorMap,
    transform: RasterTransform | None = None,
) -> ScalarRange:
    """Color every pixel of `dst` from `surface` sampled through `color_map`.

    The full value range is discovered before the first pixel is written, so a
    failing surface leaves `dst` untouched. Returns the discovered range.
    """
    if transform is None:
        transform = RasterTransform.build(dst.width, dst.height, surface.xrange, surface.yrange)
    elif (transform.width, transform.height) != (dst.width, dst.height):
        raise PreconditionError(
            f"transform raster {transform.width}x{transform.height} does not match buffer {dst.width}x{dst.height}"
        )
    if isinstance(color_map, ColorPalette) and len(color_map) == 0:
        raise PreconditionError("cannot plot through an empty palette")

    if surface.vectorized:
        values = evaluate_grid(surface, transform)
        zrange = ScalarRange(float(np.min(values)), float(np.max(values)))
        _log_range(dst, zrange)
        if isinstance(color_map, ColorPalette):
            dst.pixels_rgb[:, :, :] = color_map.map_array(values, zrange)
        else:
            for py in range(dst.height):
                for px in range(dst.width):
                    dst.pixels_rgb[py, px] = color_map.map(float(values[py, px]), zrange).as_tuple()
        return zrange

    zrange = sample_zrange(surface, transform)
    _log_range(dst, zrange)
    for py in range(dst.height):
        for px in range(dst.width):
            z = surface.evaluate(transform.raster_to_domain(px, py))
            dst.pixels_rgb[py, px] = color_map.map(z, zrange).as_tuple()
    return zrange


def _sample(surface: Surface2, transform: RasterTransform, px: int, py: int) -> float:
    z = surface.evaluate(transform.raster_to_domain(px, py))
    if not math.isfinite(z):
        raise SurfaceDataError(f"surface is not finite at raster cell ({px}, {py}): {z}")
    return z


def _broadcast_result(values: np.ndarray, shape: tuple[int, ...]) -> np.ndarray:
    # Constant functions written as `lambda p: 1.0` come back as scalars.
    if values.ndim == 0:
        return np.full(shape, float(values), dtype=np.float64)
    raise SurfaceDataError(f"vectorized surface returned shape {values.shape}, expected {shape}")


def _log_range(dst: PixelBuffer, zrange: ScalarRange) -> None:
    if zrange.is_degenerate:
        LOGGER.warning("surface is constant (z=%g); plot collapses to the first palette color", zrange.min)
    LOGGER.debug("rasterizing %dx%d surface over z in [%g, %g]", dst.width, dst.height, zrange.min, zrange.max)
