from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path

from surfplot import BLACK, BLUE, GREEN, RED, Canvas, ColorPalette, Surface2


def wave(point: tuple[float, float]) -> float:
    x, y = point
    return math.sin(x) * math.sin(y)


def render(out_dir: Path, size: int = 1024) -> list[Path]:
    surface = Surface2(wave).with_xrange((-10.0, 10.0)).with_yrange((-10.0, 10.0))
    redish = ColorPalette.linear_gradient(256, BLACK, RED)
    gray = ColorPalette.grayscale(256)

    canvas = Canvas(size, size)
    canvas.splot(surface, redish)
    canvas.draw_rect(50, 50, 100, 100, GREEN)
    canvas.draw_filled_circle(200, 200, 20, BLUE)

    out_dir.mkdir(parents=True, exist_ok=True)
    written = [canvas.save(out_dir / "color.png")]
    written.append(Canvas(size, size).splot(surface, gray).save(out_dir / "gray.png"))
    return written


def main() -> None:
    parser = argparse.ArgumentParser(prog="surface_demo")
    parser.add_argument("out_dir", type=Path)
    parser.add_argument("--size", type=int, default=1024)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    for path in render(args.out_dir, size=args.size):
        print(path)


if __name__ == "__main__":
    main()
