"""
RGB <-> HSL colour conversions for Pixel Manipulator.

Conversions go through the standard library ``colorsys`` module, which works
in unit floats and HLS ordering. Hue is exposed in degrees.

Functions:
    rgb_to_hsl: Convert an RgbColor to an HslColor
    hsl_to_rgb: Convert an HslColor back to an RgbColor
    set_hue: Replace the hue of an HslColor (wraps modulo 360)
    set_saturation: Replace the saturation of an HslColor (clamped to 0-1)
    set_lightness: Replace the lightness of an HslColor (clamped to 0-1)
    require_finite: Validate a numeric parameter
"""

import math
from colorsys import hls_to_rgb, rgb_to_hls
from dataclasses import replace

from PM_Libs.constants import CHANNEL_MAX, HUE_DEGREES
from PM_Libs.errors import InvalidParameterError
from PM_Libs.ImageEditingLib.image_models import HslColor, RgbColor


def rgb_to_hsl(color: RgbColor) -> HslColor:
    """
    Convert an RGB colour to HSL.

    Achromatic colours (all channels equal) get saturation 0 and hue 0.

    Args:
        color: Source RGB colour

    Returns:
        HslColor with hue in [0, 360) and saturation/lightness in [0, 1]
    """
    hue, lightness, saturation = rgb_to_hls(
        color.red / CHANNEL_MAX,
        color.green / CHANNEL_MAX,
        color.blue / CHANNEL_MAX,
    )
    return HslColor((hue * HUE_DEGREES) % HUE_DEGREES, saturation, lightness)


def hsl_to_rgb(hsl: HslColor) -> RgbColor:
    """
    Convert an HSL colour to RGB.

    Each channel is rounded to the nearest integer and clamped to 0-255.

    Args:
        hsl: Source HSL colour

    Returns:
        The corresponding RgbColor
    """
    rr, gg, bb = hls_to_rgb(
        (hsl.hue % HUE_DEGREES) / HUE_DEGREES,
        max(0.0, min(1.0, hsl.lightness)),
        max(0.0, min(1.0, hsl.saturation)),
    )
    return RgbColor.from_floats(round(rr * CHANNEL_MAX), round(gg * CHANNEL_MAX), round(bb * CHANNEL_MAX))


def require_finite(name: str, value: float) -> float:
    """
    Return value as a float, rejecting non-numbers, NaN and infinities.

    Raises:
        InvalidParameterError: If value is not a finite int or float
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{name} must be a number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}")
    return value


def normalize_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    return require_finite("hue", hue) % HUE_DEGREES


def normalize_unit(name: str, value: float) -> float:
    """Clamp a saturation/lightness value into [0, 1]."""
    return max(0.0, min(1.0, require_finite(name, value)))


def set_hue(hsl: HslColor, hue: float) -> HslColor:
    return replace(hsl, hue=normalize_hue(hue))


def set_saturation(hsl: HslColor, saturation: float) -> HslColor:
    return replace(hsl, saturation=normalize_unit("saturation", saturation))


def set_lightness(hsl: HslColor, lightness: float) -> HslColor:
    return replace(hsl, lightness=normalize_unit("lightness", lightness))
