"""
Image loading and saving operations for Pixel Manipulator.

This module is the boundary between image files and in-memory pixel grids.
Decoding and encoding are delegated to Pillow.

Functions:
    is_supported_format: Check a path's extension against supported formats
    load_image: Load an image file into a PixelGrid
    load_image_bytes: Decode an in-memory image buffer into a PixelGrid
    save_image: Save a PixelGrid to disk
"""

import io
import logging
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from PM_Libs.constants import DEFAULT_OUTPUT_FORMAT, SUPPORTED_STANDARD_IMAGES
from PM_Libs.errors import ImageDecodeError, ImageWriteError
from PM_Libs.ImageEditingLib.pixel_grid import PixelGrid, ensure_grid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def is_supported_format(file_path: PathLike) -> bool:
    """
    Check if a file path has a supported image extension.

    Args:
        file_path: Path to the file

    Returns:
        True if the file extension is supported
    """
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def load_image(path: PathLike) -> PixelGrid:
    """
    Load the image at the given path.

    Args:
        path: Path to the image file

    Returns:
        PixelGrid holding the decoded image in RGB

    Raises:
        FileNotFoundError: If the path does not exist
        ImageDecodeError: If the path is not a file or cannot be decoded
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")

    if not path.is_file():
        raise ImageDecodeError(f"Path is not a file: {path}")

    try:
        with Image.open(path) as img:
            grid = PixelGrid.from_image(img)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"Failed to load image from {path}: {e}") from e

    logger.debug(f"Loaded {path} ({grid.width}x{grid.height})")
    return grid


def load_image_bytes(data: bytes) -> PixelGrid:
    """
    Decode an image held in memory.

    Args:
        data: Encoded image bytes (PNG, JPEG, ...)

    Returns:
        PixelGrid holding the decoded image in RGB

    Raises:
        ImageDecodeError: If the buffer cannot be decoded
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            return PixelGrid.from_image(img)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"Failed to decode image buffer: {e}") from e


def save_image(image, path: PathLike, image_format: str = DEFAULT_OUTPUT_FORMAT) -> Path:
    """
    Save an image to the given file location.

    Args:
        image: PixelGrid (or PIL Image) to save
        path: Destination path
        image_format: Pillow format name (default PNG)

    Returns:
        The path written

    Raises:
        ImageWriteError: If the file cannot be written
    """
    grid = ensure_grid(image)
    path = Path(path)

    try:
        grid.to_image().save(path, format=image_format)
    except (OSError, ValueError, KeyError) as e:
        raise ImageWriteError(f"Failed to save image to {path}: {e}") from e

    logger.debug(f"Saved {grid.width}x{grid.height} image to {path} as {image_format}")
    return path
