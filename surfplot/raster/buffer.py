from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Iterator

import numpy as np
from PIL import Image

from surfplot.color import BLACK, Color, ColorLike
from surfplot.errors import PreconditionError


LOGGER = logging.getLogger(__name__)
DEFAULT_BACKGROUND = BLACK


@dataclass(eq=False)
class PixelBuffer:
    """Fixed-size RGB pixel grid backed by a `(height, width, 3)` uint8 array.

    `get`/`set` are bounds-checked and raise `IndexError`; clipping belongs to
    the draw functions that sit on top of the buffer.
    """

    width: int
    height: int
    background: Color = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise PreconditionError(f"pixel buffer width/height must be > 0, got {self.width}x{self.height}")
        self.pixels_rgb = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.fill(self.background)

    @classmethod
    def from_array(cls, rgb: np.ndarray) -> PixelBuffer:
        if rgb.ndim != 3 or rgb.shape[2] != 3:
            raise PreconditionError("rgb array must have shape (H, W, 3)")
        height, width, _ = rgb.shape
        buf = cls(width=int(width), height=int(height))
        buf.pixels_rgb[:, :, :] = rgb.astype(np.uint8, copy=False)
        return buf

    @classmethod
    def load(cls, path: str | Path) -> PixelBuffer:
        with Image.open(path) as image:
            rgb = np.asarray(image.convert("RGB"), dtype=np.uint8)
        return cls.from_array(rgb)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Color:
        self._check(x, y)
        r, g, b = self.pixels_rgb[y, x].tolist()
        return Color(r, g, b)

    def set(self, x: int, y: int, color: ColorLike) -> None:
        self._check(x, y)
        self.pixels_rgb[y, x] = Color.coerce(color).as_tuple()

    def fill(self, color: ColorLike) -> None:
        self.pixels_rgb[:, :] = Color.coerce(color).as_tuple()

    def pixels(self) -> Iterator[tuple[int, int, Color]]:
        for y in range(self.height):
            row = self.pixels_rgb[y].tolist()
            for x, (r, g, b) in enumerate(row):
                yield x, y, Color(r, g, b)

    def __iter__(self) -> Iterator[tuple[int, int, Color]]:
        return self.pixels()

    def to_rgb(self) -> np.ndarray:
        return self.pixels_rgb.copy()

    def save(self, path: str | Path) -> Path:
        out = Path(path)
        Image.fromarray(self.pixels_rgb).save(out)
        LOGGER.debug("saved %dx%d pixel buffer to %s", self.width, self.height, out)
        return out

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
