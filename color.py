"""
RGBA colors.
"""

from __future__ import annotations

import string
from typing import Final, NamedTuple

import numpy as np


class ColorParseError(ValueError):
    """Raised when a hexadecimal color code cannot be parsed."""

    pass


def check_channel(name: str, value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name}={value!r} is not a byte in [0, 255]")
    return value


class Color(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def from_hex(cls, hex_code: str) -> Color:
        """
        Parse a `#RRGGBB` or `#RRGGBBAA` color code.

        The leading '#' is optional. Without an alpha component the color
        is fully opaque.

        Raises:
            ColorParseError: On a wrong length or a non hexadecimal channel.
        """
        code = hex_code.removeprefix("#")
        if len(code) not in (6, 8):
            raise ColorParseError(
                f"hex code must be 6 or 8 characters long, got {len(code)}"
            )

        channels = []
        for name, start in zip("RGBA", range(0, len(code), 2)):
            digits = code[start : start + 2]
            if not all(c in string.hexdigits for c in digits):
                raise ColorParseError(
                    f"invalid hexadecimal value for {name}: {digits!r}"
                )
            channels.append(int(digits, 16))
        return cls(*channels)

    @classmethod
    def random(cls, rng: np.random.Generator | int | None = None) -> Color:
        """A random opaque color."""
        generator = np.random.default_rng(rng)
        red, green, blue = (int(v) for v in generator.integers(0, 256, size=3))
        return cls(red, green, blue)

    def check(self) -> Color:
        """Return the color unchanged after checking every channel is a byte."""
        for name, value in zip(self._fields, self):
            check_channel(name, value)
        return self

    def hex(self) -> str:
        return "#" + "".join(f"{channel:02X}" for channel in self)

    def blend(self, color: Color, opacity: int) -> Color:
        """
        Mix with `color`: opacity 0 keeps `self`, 255 gives `color`.

        Raises:
            ValueError: If opacity is outside [0, 255].
        """
        check_channel("opacity", opacity)
        inverse = 255 - opacity
        return Color(
            *(
                (own * inverse + other * opacity) // 255
                for own, other in zip(self, color)
            )
        )

    def grayscale(self) -> Color:
        """Perceptual (Rec. 601 luma) gray, alpha preserved."""
        luma = (299 * self.red + 587 * self.green + 114 * self.blue) // 1000
        return Color(luma, luma, luma, self.alpha)


BLACK: Final[Color] = Color(0, 0, 0, 255)
WHITE: Final[Color] = Color(255, 255, 255, 255)


__all__ = ["Color", "ColorParseError", "check_channel", "BLACK", "WHITE"]
