"""RGBA color value type."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class Color:
    """An RGBA color with components normalized to 0-1.

    Attributes:
        red: Red component
        green: Green component
        blue: Blue component
        alpha: Opacity (0 = fully transparent, 1 = opaque)
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    GRAY: ClassVar[Color]
    ORANGE: ClassVar[Color]
    CLEAR: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Color component '{name}' must be a number, got {value!r}")
            if math.isnan(value) or not 0.0 <= value <= 1.0:
                raise ValueError(f"Color component '{name}' must be in [0, 1], got {value!r}")
            object.__setattr__(self, name, float(value))

    def to_tuple(self) -> tuple[float, float, float, float]:
        return self.red, self.green, self.blue, self.alpha

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """Convert to 0-255 integer components."""
        return tuple(int(round(c * 255)) for c in self.to_tuple())  # type: ignore[return-value]

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` or ``#rrggbbaa``."""
        digits = value[1:] if value.startswith("#") else value
        if len(digits) not in (6, 8) or not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Invalid hex color: {value!r}")
        components = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        return cls(*components)

    @classmethod
    def parse(cls, value: Any) -> Color:
        """Build a color from a name, hex string, component sequence or Color.

        Args:
            value: ``Color``, a name from NAMED_COLORS, ``#rrggbb[aa]``, or
                a sequence of 3 or 4 floats in [0, 1]

        Returns:
            The parsed Color

        Raises:
            ValueError: If the value cannot be interpreted as a color
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            if value.startswith("#"):
                return cls.from_hex(value)
            color = NAMED_COLORS.get(value.lower())
            if color is None:
                raise ValueError(f"Unknown color name: {value!r}")
            return color
        if isinstance(value, (list, tuple)) and len(value) in (3, 4):
            return cls(*value)
        raise ValueError(f"Cannot interpret {value!r} as a color")


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0)
Color.CYAN = Color(0.0, 1.0, 1.0)
Color.GRAY = Color(0.5, 0.5, 0.5)
Color.ORANGE = Color(1.0, 0.5, 0.0)
Color.CLEAR = Color(0.0, 0.0, 0.0, 0.0)

NAMED_COLORS: dict[str, Color] = {
    "black": Color.BLACK,
    "white": Color.WHITE,
    "red": Color.RED,
    "green": Color.GREEN,
    "blue": Color.BLUE,
    "magenta": Color.MAGENTA,
    "yellow": Color.YELLOW,
    "cyan": Color.CYAN,
    "gray": Color.GRAY,
    "grey": Color.GRAY,
    "orange": Color.ORANGE,
    "clear": Color.CLEAR,
}
