"""
Decorative ("Instagram-like") filter for Pixel Manipulator.

The filter applies three steps in a fixed order:
1) a warm tone (red * 1.2, blue / 1.5)
2) a vignette, by blending 65% of the image with 35% of a halo image
3) decorative grain, by blending with a grain image at .95 / .5

The halo and grain images are reference assets supplied by the caller, either
directly, from file paths, from encoded bytes, or from the PM_HALO_IMAGE and
PM_GRAIN_IMAGE environment variables.

Classes:
    DecorativeFilterOptions: Tunable factors and blend weights
    ReferenceAssets: Halo and grain overlay images

Functions:
    apply_decorative_filter: Run the three-step filter
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

from PM_Libs.constants import (
    ENV_GRAIN_IMAGE,
    ENV_HALO_IMAGE,
    GRAIN_BLEND_WEIGHTS,
    HALO_BLEND_WEIGHTS,
    WARM_BLUE_DIVISOR,
    WARM_RED_FACTOR,
)
from PM_Libs.errors import (
    ImageDecodeError,
    InvalidDimensionsError,
    ResourceUnavailableError,
)
from PM_Libs.ImageEditingLib.image_editing_ops import load_image, load_image_bytes
from PM_Libs.ImageEditingLib.pixel_grid import PixelGrid, ensure_grid
from PM_Libs.ImageEditingLib.transformations import (
    apply_warm_tone,
    blend_images,
    validate_blend_weights,
    validate_warm_tone,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class DecorativeFilterOptions:
    red_factor: float = WARM_RED_FACTOR
    blue_divisor: float = WARM_BLUE_DIVISOR
    halo_weights: Tuple[float, float] = HALO_BLEND_WEIGHTS
    # Not normalized to 1; the grain pass brightens the image.
    grain_weights: Tuple[float, float] = GRAIN_BLEND_WEIGHTS

    def __post_init__(self):
        validate_warm_tone(self.red_factor, self.blue_divisor)
        validate_blend_weights(self.halo_weights)
        validate_blend_weights(self.grain_weights)


@dataclass
class ReferenceAssets:
    """Overlay images used by the decorative filter.

    Attributes:
        halo: Vignette/halo overlay, same size as the images it is applied to
        grain: Decorative grain overlay, same size as the images it is applied to
    """

    halo: PixelGrid
    grain: PixelGrid

    @classmethod
    def from_paths(cls, halo_path: PathLike, grain_path: PathLike) -> "ReferenceAssets":
        """
        Load both overlays from disk.

        Raises:
            ResourceUnavailableError: If either file is missing or unreadable
        """
        return cls(
            halo=_load_asset("halo", lambda: load_image(halo_path)),
            grain=_load_asset("grain", lambda: load_image(grain_path)),
        )

    @classmethod
    def from_bytes(cls, halo_bytes: bytes, grain_bytes: bytes) -> "ReferenceAssets":
        """
        Decode both overlays from encoded image buffers.

        Raises:
            ResourceUnavailableError: If either buffer cannot be decoded
        """
        return cls(
            halo=_load_asset("halo", lambda: load_image_bytes(halo_bytes)),
            grain=_load_asset("grain", lambda: load_image_bytes(grain_bytes)),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReferenceAssets":
        """
        Load both overlays from the paths named by PM_HALO_IMAGE and PM_GRAIN_IMAGE.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ResourceUnavailableError: If a variable is unset or a file cannot be loaded
        """
        env = os.environ if environ is None else environ
        missing = [name for name in (ENV_HALO_IMAGE, ENV_GRAIN_IMAGE) if not env.get(name)]
        if missing:
            raise ResourceUnavailableError(
                f"Reference image paths not configured: {', '.join(missing)}"
            )
        return cls.from_paths(env[ENV_HALO_IMAGE], env[ENV_GRAIN_IMAGE])


def _load_asset(name: str, loader) -> PixelGrid:
    try:
        return loader()
    except (FileNotFoundError, ImageDecodeError) as e:
        raise ResourceUnavailableError(f"Could not load {name} reference image: {e}") from e


def _check_asset_size(name: str, asset: PixelGrid, size: Tuple[int, int]) -> None:
    if asset.size != size:
        raise InvalidDimensionsError(
            f"{name} reference image is {asset.width}x{asset.height}, "
            f"expected {size[0]}x{size[1]}"
        )


def apply_decorative_filter(
    image: Any,
    assets: Optional[ReferenceAssets] = None,
    options: Optional[DecorativeFilterOptions] = None,
) -> PixelGrid:
    """
    Apply the decorative filter.

    Args:
        image: PixelGrid or PIL Image
        assets: Halo and grain overlays; read from the environment when None
        options: Factors and weights; defaults when None

    Returns:
        New PixelGrid with warm tone, vignette and grain applied

    Raises:
        ResourceUnavailableError: If assets are None and cannot be loaded
        InvalidDimensionsError: If an overlay is not the same size as the image
    """
    grid = ensure_grid(image)
    if assets is None:
        assets = ReferenceAssets.from_env()
    if options is None:
        options = DecorativeFilterOptions()

    _check_asset_size("halo", assets.halo, grid.size)
    _check_asset_size("grain", assets.grain, grid.size)

    warmed = apply_warm_tone(grid, options.red_factor, options.blue_divisor)
    vignetted = blend_images(warmed, assets.halo, options.halo_weights)
    result = blend_images(vignetted, assets.grain, options.grain_weights)

    logger.debug(f"Applied decorative filter to {grid.width}x{grid.height} image")
    return result
