from __future__ import annotations

from dataclasses import dataclass
import numbers
from typing import Union

from surfplot.errors import PreconditionError


RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Color:
    """Opaque 8-bit RGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not _is_channel_int(value):
                raise PreconditionError(f"channel {name} must be an int, got {value!r}")
            value = int(value)
            object.__setattr__(self, name, value)
            if value < 0 or value > 255:
                raise PreconditionError(f"channel {name} must be in [0, 255], got {value}")

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int) -> Color:
        return cls(int(r), int(g), int(b))

    @classmethod
    def from_floats(cls, r: float, g: float, b: float) -> Color:
        """Build a color from normalized channels in [0, 1].

        Values outside [0, 1] are rejected rather than clamped.
        """
        for name, value in (("r", r), ("g", g), ("b", b)):
            if not 0.0 <= value <= 1.0:
                raise PreconditionError(f"normalized channel {name} must be in [0, 1], got {value!r}")
        return cls(int(r * 255.0), int(g * 255.0), int(b * 255.0))

    @classmethod
    def from_hex(cls, value: str) -> Color:
        text = value.strip().lstrip("#")
        if len(text) != 6:
            raise PreconditionError(f"hex color must look like #rrggbb, got {value!r}")
        try:
            packed = int(text, 16)
        except ValueError as exc:
            raise PreconditionError(f"hex color must look like #rrggbb, got {value!r}") from exc
        return cls((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF)

    @classmethod
    def coerce(cls, value: ColorLike) -> Color:
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (tuple, list)) and len(value) == 3:
            if all(_is_channel_int(v) for v in value):
                return cls.from_bytes(*value)
            if all(isinstance(v, numbers.Real) and not isinstance(v, numbers.Integral) for v in value):
                return cls.from_floats(*value)
        raise PreconditionError(f"cannot interpret {value!r} as a color")

    def as_tuple(self) -> RGB:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


def _is_channel_int(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


ColorLike = Union[Color, RGB, tuple[float, float, float], str]

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)

NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
}
