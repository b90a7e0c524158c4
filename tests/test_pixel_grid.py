"""
Tests for the PixelGrid container.

Tests cover:
- Creation and dimension validation
- Bounds-checked pixel access
- Conversion to and from PIL Images and NumPy arrays
- Equality and copying
"""

import unittest
from unittest.mock import Mock

import numpy as np
from PIL import Image

from PM_Libs.errors import InvalidDimensionsError, OutOfBoundsError
from PM_Libs.ImageEditingLib.image_models import RgbColor
from PM_Libs.ImageEditingLib.pixel_grid import PixelGrid, ensure_grid


class TestPixelGridCreation(unittest.TestCase):
    """Test creating pixel grids."""

    def test_new_grid_has_requested_size(self):
        grid = PixelGrid(5, 3)
        self.assertEqual(grid.width, 5)
        self.assertEqual(grid.height, 3)
        self.assertEqual(grid.size, (5, 3))

    def test_new_grid_is_filled(self):
        grid = PixelGrid(2, 2, fill=RgbColor(9, 8, 7))
        for x, y in grid.coordinates():
            self.assertEqual(grid.get_pixel(x, y), RgbColor(9, 8, 7))

    def test_zero_dimensions_raise_error(self):
        with self.assertRaises(InvalidDimensionsError):
            PixelGrid(0, 5)
        with self.assertRaises(InvalidDimensionsError):
            PixelGrid(5, 0)

    def test_negative_dimensions_raise_error(self):
        with self.assertRaises(InvalidDimensionsError):
            PixelGrid(-1, 5)

    def test_coordinates_cover_every_pixel_once(self):
        grid = PixelGrid(4, 3)
        coords = list(grid.coordinates())
        self.assertEqual(len(coords), 12)
        self.assertEqual(len(set(coords)), 12)


class TestPixelAccess(unittest.TestCase):
    """Test get/set pixel."""

    def setUp(self):
        self.grid = PixelGrid(3, 2)

    def test_set_and_get_pixel(self):
        self.grid.set_pixel(2, 1, RgbColor(1, 2, 3))
        self.assertEqual(self.grid.get_pixel(2, 1), RgbColor(1, 2, 3))

    def test_set_pixel_accepts_tuple(self):
        self.grid.set_pixel(0, 0, (40, 50, 60))
        self.assertEqual(self.grid.get_pixel(0, 0).as_tuple(), (40, 50, 60))

    def test_out_of_bounds_get_raises_error(self):
        with self.assertRaises(OutOfBoundsError):
            self.grid.get_pixel(3, 0)
        with self.assertRaises(OutOfBoundsError):
            self.grid.get_pixel(0, 2)
        with self.assertRaises(OutOfBoundsError):
            self.grid.get_pixel(-1, 0)

    def test_out_of_bounds_set_raises_index_error(self):
        with self.assertRaises(IndexError):
            self.grid.set_pixel(0, -1, (0, 0, 0))

    def test_in_bounds(self):
        self.assertTrue(self.grid.in_bounds(2, 1))
        self.assertFalse(self.grid.in_bounds(3, 1))


class TestPixelGridConversion(unittest.TestCase):
    """Test PIL Image and NumPy interop."""

    def test_from_rgba_image_drops_alpha(self):
        image = Image.new("RGBA", (2, 2), (10, 20, 30, 128))
        grid = PixelGrid.from_image(image)
        self.assertEqual(grid.get_pixel(1, 1).as_tuple(), (10, 20, 30))
        self.assertEqual(grid.to_image().mode, "RGB")

    def test_from_image_copies_data(self):
        image = Image.new("RGB", (2, 2), (0, 0, 0))
        grid = PixelGrid.from_image(image)
        image.putpixel((0, 0), (255, 255, 255))
        self.assertEqual(grid.get_pixel(0, 0).as_tuple(), (0, 0, 0))

    def test_from_image_with_zero_size_raises_error(self):
        image = Mock()
        image.size = (0, 3)
        with self.assertRaises(InvalidDimensionsError):
            PixelGrid.from_image(image)

    def test_to_array_shape(self):
        grid = PixelGrid(4, 3, fill=(1, 2, 3))
        array = grid.to_array()
        self.assertEqual(array.shape, (3, 4, 3))
        self.assertEqual(array.dtype, np.uint8)
        self.assertEqual(tuple(array[2, 3]), (1, 2, 3))

    def test_from_array(self):
        array = np.zeros((2, 3, 3), dtype=np.uint8)
        array[1, 2] = (7, 8, 9)
        grid = PixelGrid.from_array(array)
        self.assertEqual(grid.size, (3, 2))
        self.assertEqual(grid.get_pixel(2, 1).as_tuple(), (7, 8, 9))

    def test_from_array_clips_values(self):
        array = np.full((1, 1, 3), 400, dtype=np.int32)
        grid = PixelGrid.from_array(array)
        self.assertEqual(grid.get_pixel(0, 0).as_tuple(), (255, 255, 255))

    def test_from_array_bad_shape_raises_error(self):
        with self.assertRaises(InvalidDimensionsError):
            PixelGrid.from_array(np.zeros((2, 2)))
        with self.assertRaises(InvalidDimensionsError):
            PixelGrid.from_array(np.zeros((2, 2, 4)))


class TestPixelGridEquality(unittest.TestCase):
    """Test equality and copy."""

    def test_equal_grids(self):
        self.assertEqual(PixelGrid(2, 2, (1, 1, 1)), PixelGrid(2, 2, (1, 1, 1)))

    def test_different_pixels_not_equal(self):
        a = PixelGrid(2, 2)
        b = PixelGrid(2, 2)
        b.set_pixel(1, 1, (0, 0, 1))
        self.assertNotEqual(a, b)

    def test_different_sizes_not_equal(self):
        self.assertNotEqual(PixelGrid(2, 3), PixelGrid(3, 2))

    def test_copy_is_independent(self):
        grid = PixelGrid(2, 2)
        clone = grid.copy()
        clone.set_pixel(0, 0, (5, 5, 5))
        self.assertEqual(grid.get_pixel(0, 0).as_tuple(), (0, 0, 0))


class TestEnsureGrid(unittest.TestCase):
    """Test ensure_grid coercion."""

    def test_grid_passes_through(self):
        grid = PixelGrid(1, 1)
        self.assertIs(ensure_grid(grid), grid)

    def test_pil_image_is_wrapped(self):
        grid = ensure_grid(Image.new("L", (3, 2), 100))
        self.assertIsInstance(grid, PixelGrid)
        self.assertEqual(grid.get_pixel(0, 0).as_tuple(), (100, 100, 100))

    def test_other_types_raise_type_error(self):
        with self.assertRaises(TypeError):
            ensure_grid("not an image")
