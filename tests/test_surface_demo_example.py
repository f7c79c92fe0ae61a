from __future__ import annotations

import importlib.util
from pathlib import Path
import tempfile
import unittest

from surfplot import GREEN, PixelBuffer


def _load_demo():
    path = Path(__file__).resolve().parents[1] / "examples" / "surface_demo.py"
    spec = importlib.util.spec_from_file_location("surface_demo", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class SurfaceDemoExampleTests(unittest.TestCase):
    def test_demo_writes_color_and_gray_images(self) -> None:
        demo = _load_demo()
        with tempfile.TemporaryDirectory() as tmp:
            written = demo.render(Path(tmp), size=64)
            self.assertEqual([p.name for p in written], ["color.png", "gray.png"])
            color = PixelBuffer.load(written[0])
            gray = PixelBuffer.load(written[1])

        self.assertEqual((color.width, color.height), (64, 64))
        self.assertEqual(color.get(50, 50), GREEN)
        rgb = gray.to_rgb()
        self.assertGreater(float(rgb.std()), 0.0)
        self.assertTrue((rgb[:, :, 0] == rgb[:, :, 1]).all())


if __name__ == "__main__":
    unittest.main()
