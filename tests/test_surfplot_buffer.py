from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

import numpy as np
from PIL import Image

from surfplot import BLACK, BLUE, GREEN, RED, PixelBuffer, PreconditionError, canvas, plot_surface


class PixelBufferTests(unittest.TestCase):
    def test_rejects_non_positive_size(self) -> None:
        with self.assertRaises(PreconditionError):
            PixelBuffer(0, 3)
        with self.assertRaises(PreconditionError):
            PixelBuffer(3, -1)

    def test_get_set_are_bounds_checked(self) -> None:
        buf = PixelBuffer(3, 2)
        buf.set(2, 1, RED)
        self.assertEqual(buf.get(2, 1), RED)
        self.assertEqual(buf.get(0, 0), BLACK)
        with self.assertRaises(IndexError):
            buf.get(3, 0)
        with self.assertRaises(IndexError):
            buf.set(0, -1, RED)

    def test_pixels_iterate_row_major(self) -> None:
        buf = PixelBuffer(2, 2, background=GREEN)
        coords = [(x, y) for x, y, _ in buf.pixels()]
        self.assertEqual(coords, [(0, 0), (1, 0), (0, 1), (1, 1)])
        self.assertTrue(all(c == GREEN for _, _, c in buf))

    def test_from_array_validates_shape(self) -> None:
        with self.assertRaises(PreconditionError):
            PixelBuffer.from_array(np.zeros((2, 2, 4), dtype=np.uint8))
        buf = PixelBuffer.from_array(np.full((2, 5, 3), 7, dtype=np.uint8))
        self.assertEqual((buf.width, buf.height), (5, 2))
        self.assertEqual(buf.get(4, 1).as_tuple(), (7, 7, 7))

    def test_save_and_load_png(self) -> None:
        buf = PixelBuffer(4, 3)
        buf.set(1, 2, BLUE)
        with tempfile.TemporaryDirectory() as tmp:
            path = buf.save(Path(tmp) / "out.png")
            with Image.open(path) as image:
                self.assertEqual(image.size, (4, 3))
                self.assertEqual(image.mode, "RGB")
            loaded = PixelBuffer.load(path)
        np.testing.assert_array_equal(loaded.to_rgb(), buf.to_rgb())

    def test_save_unknown_extension_fails(self) -> None:
        buf = PixelBuffer(2, 2)
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                buf.save(Path(tmp) / "out.notanimage")


class ApiTests(unittest.TestCase):
    def test_canvas_fills_missing_side(self) -> None:
        c = canvas(width=8)
        self.assertEqual((c.width, c.height), (8, 8))
        c = canvas(height=5)
        self.assertEqual((c.width, c.height), (5, 5))
        c = canvas(6, 2)
        self.assertEqual((c.width, c.height), (6, 2))

    def test_plot_surface_defaults_to_grayscale(self) -> None:
        c = plot_surface(lambda p: p[0], xrange=(0.0, 1.0), yrange=(0.0, 1.0), width=4, height=1)
        self.assertEqual([c.buffer.get(x, 0).r for x in range(4)], [0, 85, 170, 255])


if __name__ == "__main__":
    unittest.main()
