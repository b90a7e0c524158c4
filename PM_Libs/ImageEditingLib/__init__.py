"""
ImageEditingLib - Core image editing functionality

This module provides the colour model, pixel grid, image I/O and
transformation operations for the Pixel Manipulator project.
"""

from PM_Libs.ImageEditingLib.image_models import HslColor, RgbColor
from PM_Libs.ImageEditingLib.color_model import (
    hsl_to_rgb,
    rgb_to_hsl,
    set_hue,
    set_lightness,
    set_saturation,
)
from PM_Libs.ImageEditingLib.pixel_grid import PixelGrid, ensure_grid
from PM_Libs.ImageEditingLib.image_editing_ops import (
    load_image,
    load_image_bytes,
    save_image,
)
from PM_Libs.ImageEditingLib.transformations import (
    apply_warm_tone,
    blend_images,
    convert_to_bw,
    convert_to_grayscale,
    convert_to_sepia,
    invert_image,
    rotate_image,
    set_image_hue,
    set_image_lightness,
    set_image_saturation,
)
from PM_Libs.ImageEditingLib.decorative_filter import (
    DecorativeFilterOptions,
    ReferenceAssets,
    apply_decorative_filter,
)

__all__ = [
    "HslColor",
    "RgbColor",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "set_hue",
    "set_lightness",
    "set_saturation",
    "PixelGrid",
    "ensure_grid",
    "load_image",
    "load_image_bytes",
    "save_image",
    "apply_warm_tone",
    "blend_images",
    "convert_to_bw",
    "convert_to_grayscale",
    "convert_to_sepia",
    "invert_image",
    "rotate_image",
    "set_image_hue",
    "set_image_lightness",
    "set_image_saturation",
    "DecorativeFilterOptions",
    "ReferenceAssets",
    "apply_decorative_filter",
]
