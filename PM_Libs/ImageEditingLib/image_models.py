"""
Image editing data models for Pixel Manipulator.

This module defines core data structures used throughout the image editing system.

Classes:
    RgbColor: Immutable RGB pixel value with channels in 0-255
    HslColor: Immutable HSL pixel value (hue in degrees, saturation/lightness in 0-1)

Type Aliases:
    RgbTuple: A tuple of 3 integers representing RGB channel values (0-255)
"""

from dataclasses import dataclass
from typing import Tuple

from PM_Libs.constants import CHANNEL_MAX, CHANNEL_MIN
from PM_Libs.errors import InvalidParameterError

RgbTuple = Tuple[int, int, int]


def clamp_channel(value: float) -> int:
    """Truncate toward zero and clamp to the 0-255 channel range."""
    return int(max(CHANNEL_MIN, min(CHANNEL_MAX, value)))


@dataclass(frozen=True)
class RgbColor:
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameterError(f"{name} must be an int, got {type(value).__name__}")
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise InvalidParameterError(f"{name} must be 0-255, got {value}")

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float) -> "RgbColor":
        """Build a colour from arbitrary numbers, truncating and clamping each channel."""
        return cls(clamp_channel(red), clamp_channel(green), clamp_channel(blue))

    @classmethod
    def from_tuple(cls, values) -> "RgbColor":
        """Build a colour from the first three entries of a pixel tuple."""
        red, green, blue = tuple(values)[:3]
        return cls(int(red), int(green), int(blue))

    def as_tuple(self) -> RgbTuple:
        return (self.red, self.green, self.blue)


@dataclass(frozen=True)
class HslColor:
    """HSL colour value.

    Attributes:
        hue: Hue in degrees, 0 <= hue < 360 (0 for achromatic colours)
        saturation: Saturation in 0-1
        lightness: Lightness in 0-1
    """
    hue: float
    saturation: float
    lightness: float
