"""
Pixel-level image transformations for Pixel Manipulator.

Each function takes a PixelGrid (or a PIL Image, which is wrapped) and returns
a new PixelGrid. Inputs are never modified.

Example:
    >>> grid = load_image("photo.png")
    >>> gray = convert_to_grayscale(grid)
    >>> rotated = rotate_image(gray)
    >>> tinted = set_image_hue(grid, 200)
"""

import logging
import math
from typing import Any, Callable, List, Sequence, Tuple

from PM_Libs.constants import (
    BW_BLACK,
    BW_WHITE,
    CHANNEL_MAX,
    LUMINANCE_WEIGHTS,
    SEPIA_BLUE,
    SEPIA_GREEN,
    SEPIA_RED,
    WARM_BLUE_DIVISOR,
    WARM_RED_FACTOR,
)
from PM_Libs.errors import InvalidDimensionsError, InvalidParameterError
from PM_Libs.ImageEditingLib.color_model import (
    hsl_to_rgb,
    normalize_hue,
    normalize_unit,
    require_finite,
    rgb_to_hsl,
    set_hue,
    set_lightness,
    set_saturation,
)
from PM_Libs.ImageEditingLib.image_models import RgbColor
from PM_Libs.ImageEditingLib.pixel_grid import PixelGrid, ensure_grid

logger = logging.getLogger(__name__)

PixelFunction = Callable[[RgbColor], RgbColor]


def map_pixels(image: Any, func: PixelFunction) -> PixelGrid:
    """
    Apply a per-pixel function to every pixel of a copy of the image.

    Args:
        image: PixelGrid or PIL Image
        func: Function mapping one RgbColor to another

    Returns:
        New PixelGrid with func applied to each pixel
    """
    grid = ensure_grid(image)
    result = grid.copy()
    for x, y in grid.coordinates():
        result.set_pixel(x, y, func(grid.get_pixel(x, y)))
    return result


# ============================================================================
# Simple per-pixel filters
# ============================================================================

def _grayscale_pixel(pixel: RgbColor) -> RgbColor:
    avg = (pixel.red + pixel.green + pixel.blue) // 3
    return RgbColor(avg, avg, avg)


def convert_to_grayscale(image: Any) -> PixelGrid:
    """
    Convert the image to grayscale.

    Every channel is set to the integer average of the pixel's three channels.
    """
    return map_pixels(image, _grayscale_pixel)


def _invert_pixel(pixel: RgbColor) -> RgbColor:
    return RgbColor(
        CHANNEL_MAX - pixel.red,
        CHANNEL_MAX - pixel.green,
        CHANNEL_MAX - pixel.blue,
    )


def invert_image(image: Any) -> PixelGrid:
    """Invert every channel of every pixel (c = 255 - c)."""
    return map_pixels(image, _invert_pixel)


def _weighted(weights: Tuple[float, float, float], r: int, g: int, b: int) -> float:
    return weights[0] * r + weights[1] * g + weights[2] * b


def _sepia_pixel(pixel: RgbColor) -> RgbColor:
    r, g, b = pixel.as_tuple()
    # The blue row applies its last coefficient to green, not blue.
    return RgbColor.from_floats(
        _weighted(SEPIA_RED, r, g, b),
        _weighted(SEPIA_GREEN, r, g, b),
        _weighted(SEPIA_BLUE, r, g, g),
    )


def convert_to_sepia(image: Any) -> PixelGrid:
    """
    Convert the image to sepia.

    New channels are weighted sums of the old ones, truncated and clamped:
        r = .393r + .769g + .189b
        g = .349r + .686g + .168b
        b = .272r + .534g + .131g
    """
    return map_pixels(image, _sepia_pixel)


def validate_warm_tone(red_factor: float, blue_divisor: float) -> Tuple[float, float]:
    """Check warm-tone factors and return them as floats."""
    red_factor = require_finite("red_factor", red_factor)
    blue_divisor = require_finite("blue_divisor", blue_divisor)
    if blue_divisor == 0:
        raise InvalidParameterError("blue_divisor must be non-zero")
    return red_factor, blue_divisor


def apply_warm_tone(
    image: Any,
    red_factor: float = WARM_RED_FACTOR,
    blue_divisor: float = WARM_BLUE_DIVISOR,
) -> PixelGrid:
    """
    Warm the image by reducing blue and increasing red.

    red = int(red * red_factor) clamped to 255, green unchanged,
    blue = int(blue / blue_divisor).

    Raises:
        InvalidParameterError: If a factor is not a finite number or
            blue_divisor is zero
    """
    red_factor, blue_divisor = validate_warm_tone(red_factor, blue_divisor)
    return map_pixels(
        image,
        lambda pixel: RgbColor.from_floats(
            pixel.red * red_factor,
            pixel.green,
            pixel.blue / blue_divisor,
        ),
    )


# ============================================================================
# Black / white stylization
# ============================================================================

def compute_luminance(pixel: RgbColor) -> float:
    """Luminance = sqrt(.299 r^2 + .587 g^2 + .114 b^2)."""
    wr, wg, wb = LUMINANCE_WEIGHTS
    return math.sqrt(wr * pixel.red ** 2 + wg * pixel.green ** 2 + wb * pixel.blue ** 2)


def median_luminance(values: Sequence[float]) -> float:
    """
    Pick the threshold luminance from a sequence of values.

    The sorted element at index int(0.5 + n / 2) is used, which is the
    upper-middle element rather than a true median for even n. For a single
    value the index is clamped to the last element.

    Raises:
        InvalidDimensionsError: If values is empty
    """
    if not values:
        raise InvalidDimensionsError("Cannot compute median luminance of an empty image")
    ordered = sorted(values)
    index = min(int(0.5 + len(ordered) / 2.0), len(ordered) - 1)
    return ordered[index]


def convert_to_bw(image: Any) -> PixelGrid:
    """
    Create a stylized black/white image (no gray).

    1) compute the luminance of each pixel
    2) find the median luminance
    3) pixels with luminance >= median become white, the rest black
    """
    grid = ensure_grid(image)
    lums: List[float] = [compute_luminance(grid.get_pixel(x, y)) for x, y in grid.coordinates()]
    threshold = median_luminance(lums)
    logger.debug(f"BW threshold for {grid.width}x{grid.height} image: {threshold:.3f}")

    result = PixelGrid(grid.width, grid.height)
    for (x, y), lum in zip(grid.coordinates(), lums):
        result.set_pixel(x, y, BW_WHITE if lum >= threshold else BW_BLACK)
    return result


# ============================================================================
# Geometry
# ============================================================================

def rotate_image(image: Any) -> PixelGrid:
    """
    Rotate the image 90 degrees clockwise.

    The output is width x height swapped; input (x, y) moves to
    (height - 1 - y, x).
    """
    grid = ensure_grid(image)
    rotated = PixelGrid(grid.height, grid.width)
    for x, y in grid.coordinates():
        rotated.set_pixel(grid.height - 1 - y, x, grid.get_pixel(x, y))
    return rotated


# ============================================================================
# HSL setters
# ============================================================================

def set_image_hue(image: Any, hue: float) -> PixelGrid:
    """
    Set the hue of every pixel.

    Args:
        image: PixelGrid or PIL Image
        hue: Hue in degrees; wrapped into [0, 360)

    Raises:
        InvalidParameterError: If hue is not a finite number
    """
    hue = normalize_hue(hue)
    return map_pixels(image, lambda pixel: hsl_to_rgb(set_hue(rgb_to_hsl(pixel), hue)))


def set_image_saturation(image: Any, saturation: float) -> PixelGrid:
    """
    Set the saturation of every pixel.

    Args:
        image: PixelGrid or PIL Image
        saturation: Saturation in 0-1; clamped

    Raises:
        InvalidParameterError: If saturation is not a finite number
    """
    saturation = normalize_unit("saturation", saturation)
    return map_pixels(
        image, lambda pixel: hsl_to_rgb(set_saturation(rgb_to_hsl(pixel), saturation))
    )


def set_image_lightness(image: Any, lightness: float) -> PixelGrid:
    """
    Set the lightness of every pixel.

    Args:
        image: PixelGrid or PIL Image
        lightness: Lightness in 0-1; clamped

    Raises:
        InvalidParameterError: If lightness is not a finite number
    """
    lightness = normalize_unit("lightness", lightness)
    return map_pixels(
        image, lambda pixel: hsl_to_rgb(set_lightness(rgb_to_hsl(pixel), lightness))
    )


# ============================================================================
# Blending
# ============================================================================

def validate_blend_weights(weights: Any) -> Tuple[float, float]:
    """Check that weights is a (w1, w2) pair of finite numbers."""
    if isinstance(weights, (str, bytes)) or not hasattr(weights, "__len__") or len(weights) != 2:
        raise InvalidParameterError(f"Blend weights must be a pair of numbers, got {weights!r}")
    return require_finite("weight", weights[0]), require_finite("weight", weights[1])


def blend_images(first: Any, second: Any, weights: Tuple[float, float]) -> PixelGrid:
    """
    Blend two images channel by channel.

    Each output channel is int(w1 * a + w2 * b), clamped to 0-255. The
    weights are not required to sum to 1.

    Args:
        first: PixelGrid or PIL Image
        second: PixelGrid or PIL Image of the same size
        weights: (w1, w2) weights applied to first and second

    Raises:
        InvalidDimensionsError: If the images differ in size
        InvalidParameterError: If weights is not a pair of finite numbers
    """
    w1, w2 = validate_blend_weights(weights)
    a = ensure_grid(first)
    b = ensure_grid(second)
    if a.size != b.size:
        raise InvalidDimensionsError(
            f"Cannot blend images of different sizes: {a.size} vs {b.size}"
        )

    result = PixelGrid(a.width, a.height)
    for x, y in a.coordinates():
        pa = a.get_pixel(x, y)
        pb = b.get_pixel(x, y)
        result.set_pixel(
            x,
            y,
            RgbColor.from_floats(
                w1 * pa.red + w2 * pb.red,
                w1 * pa.green + w2 * pb.green,
                w1 * pa.blue + w2 * pb.blue,
            ),
        )
    return result
