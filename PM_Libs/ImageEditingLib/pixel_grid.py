"""
Pixel grid container for Pixel Manipulator.

A PixelGrid is a bounds-checked, width x height grid of RGB pixels addressed
by (x, y). It is backed by a Pillow "RGB" image so that it can be handed to
and from Pillow (and NumPy) without copying pixel by pixel.

Classes:
    PixelGrid: Read/write RGB pixel grid

Functions:
    ensure_grid: Accept a PixelGrid or a PIL Image and return a PixelGrid
"""

from typing import Any, Iterator, Tuple, Union

import numpy as np
from PIL import Image

from PM_Libs.constants import IMAGE_MODE
from PM_Libs.errors import InvalidDimensionsError, OutOfBoundsError
from PM_Libs.ImageEditingLib.image_models import RgbColor, RgbTuple

PixelValue = Union[RgbColor, RgbTuple]


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(
            f"Pixel grid dimensions must be positive, got {width}x{height}"
        )


class PixelGrid:
    """
    Read/write grid of RGB pixels.

    Example:
        >>> grid = PixelGrid(2, 1)
        >>> grid.set_pixel(1, 0, RgbColor(255, 0, 0))
        >>> grid.get_pixel(1, 0)
        RgbColor(red=255, green=0, blue=0)
    """

    def __init__(self, width: int, height: int, fill: PixelValue = (0, 0, 0)):
        _check_size(width, height)
        if isinstance(fill, RgbColor):
            fill = fill.as_tuple()
        self._image = Image.new(IMAGE_MODE, (width, height), tuple(fill))
        self._pixels = self._image.load()

    @classmethod
    def from_image(cls, image: Any) -> "PixelGrid":
        """
        Build a grid from a PIL Image.

        The image is converted to RGB (alpha is dropped) and copied, so later
        changes to either side are not shared.

        Raises:
            InvalidDimensionsError: If the image has a zero width or height
        """
        _check_size(*image.size)
        grid = cls.__new__(cls)
        if image.mode != IMAGE_MODE:
            grid._image = image.convert(IMAGE_MODE)
        else:
            grid._image = image.copy()
        grid._pixels = grid._image.load()
        return grid

    @classmethod
    def from_array(cls, array: Any) -> "PixelGrid":
        """
        Build a grid from an (height, width, 3) array of 0-255 values.

        Raises:
            InvalidDimensionsError: If the array does not have that shape
        """
        data = np.asarray(array)
        if data.ndim != 3 or data.shape[2] != 3:
            raise InvalidDimensionsError(
                f"Expected an array of shape (height, width, 3), got {data.shape}"
            )
        _check_size(data.shape[1], data.shape[0])
        clipped = np.clip(data, 0, 255).astype(np.uint8)
        return cls.from_image(Image.fromarray(clipped))

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Coordinate ({x}, {y}) outside {self.width}x{self.height} grid"
            )

    def get_pixel(self, x: int, y: int) -> RgbColor:
        self._check_bounds(x, y)
        return RgbColor.from_tuple(self._pixels[x, y])

    def set_pixel(self, x: int, y: int, color: PixelValue) -> None:
        self._check_bounds(x, y)
        if not isinstance(color, RgbColor):
            color = RgbColor.from_tuple(color)
        self._pixels[x, y] = color.as_tuple()

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Yield every (x, y) in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def copy(self) -> "PixelGrid":
        return PixelGrid.from_image(self._image)

    def to_image(self) -> Any:
        """Return a copy of the grid as a PIL Image in RGB mode."""
        return self._image.copy()

    def to_array(self) -> np.ndarray:
        """Return the grid as a uint8 array of shape (height, width, 3)."""
        return np.array(self._image, dtype=np.uint8)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.size == other.size and self._image.tobytes() == other._image.tobytes()

    def __repr__(self) -> str:
        return f"PixelGrid(width={self.width}, height={self.height})"


def ensure_grid(image: Any) -> PixelGrid:
    """
    Accept a PixelGrid or a PIL Image and return a PixelGrid.

    Raises:
        TypeError: If image is neither
        InvalidDimensionsError: If the image has a zero width or height
    """
    if isinstance(image, PixelGrid):
        _check_size(image.width, image.height)
        return image
    if hasattr(image, "size") and hasattr(image, "getpixel"):
        return PixelGrid.from_image(image)
    raise TypeError(f"Expected PixelGrid or PIL Image, got {type(image)}")
