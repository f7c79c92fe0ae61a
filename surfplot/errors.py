from __future__ import annotations


class SurfacePlotError(Exception):
    """Base class for every error raised by surfplot."""


class PreconditionError(SurfacePlotError, ValueError):
    """A caller passed arguments that violate an operation's contract.

    Raised before any pixel buffer is mutated: non-positive raster sizes,
    empty palettes, degenerate domain ranges, out-of-range color channels.
    """


class SurfaceDataError(SurfacePlotError, ValueError):
    """A surface function produced values that cannot be colored."""
