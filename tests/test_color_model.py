"""
Tests for the colour model.

Tests cover:
- RgbColor validation and clamping constructors
- RGB -> HSL conversion of primaries and grays
- HSL -> RGB round trip tolerance
- Hue wrapping and saturation/lightness clamping
- Rejection of non-finite parameters
"""

import dataclasses
import math
import unittest

import pytest

from PM_Libs.constants import HSL_ROUND_TRIP_TOLERANCE
from PM_Libs.errors import InvalidParameterError
from PM_Libs.ImageEditingLib.color_model import (
    hsl_to_rgb,
    rgb_to_hsl,
    set_hue,
    set_lightness,
    set_saturation,
)
from PM_Libs.ImageEditingLib.image_models import HslColor, RgbColor


class TestRgbColor(unittest.TestCase):
    """Test RgbColor value type."""

    def test_valid_color(self):
        color = RgbColor(10, 20, 30)
        self.assertEqual(color.as_tuple(), (10, 20, 30))

    def test_out_of_range_channel_raises_error(self):
        with self.assertRaises(InvalidParameterError):
            RgbColor(256, 0, 0)
        with self.assertRaises(InvalidParameterError):
            RgbColor(0, -1, 0)

    def test_non_int_channel_raises_error(self):
        with self.assertRaises(InvalidParameterError):
            RgbColor(1.5, 0, 0)

    def test_invalid_channel_is_also_value_error(self):
        with self.assertRaises(ValueError):
            RgbColor(0, 0, 300)

    def test_from_floats_truncates_and_clamps(self):
        color = RgbColor.from_floats(300.7, -5, 12.9)
        self.assertEqual(color.as_tuple(), (255, 0, 12))

    def test_from_tuple_ignores_alpha(self):
        color = RgbColor.from_tuple((1, 2, 3, 255))
        self.assertEqual(color.as_tuple(), (1, 2, 3))

    def test_colors_are_immutable(self):
        color = RgbColor(1, 2, 3)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            color.red = 5


class TestRgbToHsl(unittest.TestCase):
    """Test RGB -> HSL conversion."""

    def test_red(self):
        hsl = rgb_to_hsl(RgbColor(255, 0, 0))
        self.assertAlmostEqual(hsl.hue, 0.0)
        self.assertAlmostEqual(hsl.saturation, 1.0)
        self.assertAlmostEqual(hsl.lightness, 0.5)

    def test_green(self):
        hsl = rgb_to_hsl(RgbColor(0, 255, 0))
        self.assertAlmostEqual(hsl.hue, 120.0, places=6)

    def test_blue(self):
        hsl = rgb_to_hsl(RgbColor(0, 0, 255))
        self.assertAlmostEqual(hsl.hue, 240.0, places=6)

    def test_gray_is_achromatic(self):
        hsl = rgb_to_hsl(RgbColor(128, 128, 128))
        self.assertEqual(hsl.hue, 0.0)
        self.assertEqual(hsl.saturation, 0.0)
        self.assertAlmostEqual(hsl.lightness, 128 / 255)

    def test_white_and_black_lightness(self):
        self.assertAlmostEqual(rgb_to_hsl(RgbColor(255, 255, 255)).lightness, 1.0)
        self.assertAlmostEqual(rgb_to_hsl(RgbColor(0, 0, 0)).lightness, 0.0)

    def test_hue_always_in_range(self):
        for color in [(255, 0, 1), (1, 0, 255), (200, 10, 180), (5, 6, 7)]:
            hue = rgb_to_hsl(RgbColor(*color)).hue
            self.assertGreaterEqual(hue, 0.0)
            self.assertLess(hue, 360.0)


class TestHslToRgb(unittest.TestCase):
    """Test HSL -> RGB conversion."""

    def test_primary_hues(self):
        self.assertEqual(hsl_to_rgb(HslColor(0.0, 1.0, 0.5)).as_tuple(), (255, 0, 0))
        self.assertEqual(hsl_to_rgb(HslColor(120.0, 1.0, 0.5)).as_tuple(), (0, 255, 0))
        self.assertEqual(hsl_to_rgb(HslColor(240.0, 1.0, 0.5)).as_tuple(), (0, 0, 255))

    def test_zero_saturation_is_gray(self):
        color = hsl_to_rgb(HslColor(200.0, 0.0, 0.25))
        self.assertEqual(color.red, color.green)
        self.assertEqual(color.green, color.blue)

    def test_extreme_lightness(self):
        self.assertEqual(hsl_to_rgb(HslColor(45.0, 0.8, 1.0)).as_tuple(), (255, 255, 255))
        self.assertEqual(hsl_to_rgb(HslColor(45.0, 0.8, 0.0)).as_tuple(), (0, 0, 0))


class TestHslSetters(unittest.TestCase):
    """Test single-field HSL setters."""

    def setUp(self):
        self.hsl = HslColor(30.0, 0.5, 0.5)

    def test_set_hue_replaces_only_hue(self):
        result = set_hue(self.hsl, 90)
        self.assertEqual(result, HslColor(90.0, 0.5, 0.5))

    def test_set_hue_wraps(self):
        self.assertAlmostEqual(set_hue(self.hsl, 370).hue, 10.0)
        self.assertAlmostEqual(set_hue(self.hsl, -30).hue, 330.0)
        self.assertEqual(set_hue(self.hsl, 360).hue, 0.0)

    def test_set_saturation_clamps(self):
        self.assertEqual(set_saturation(self.hsl, 1.5).saturation, 1.0)
        self.assertEqual(set_saturation(self.hsl, -0.5).saturation, 0.0)
        self.assertEqual(set_saturation(self.hsl, 0.25).saturation, 0.25)

    def test_set_lightness_clamps(self):
        self.assertEqual(set_lightness(self.hsl, 2).lightness, 1.0)
        self.assertEqual(set_lightness(self.hsl, -0.2).lightness, 0.0)

    def test_setters_do_not_modify_input(self):
        set_lightness(self.hsl, 0.9)
        self.assertEqual(self.hsl.lightness, 0.5)

    def test_non_finite_values_raise_error(self):
        with self.assertRaises(InvalidParameterError):
            set_hue(self.hsl, math.nan)
        with self.assertRaises(InvalidParameterError):
            set_saturation(self.hsl, math.inf)
        with self.assertRaises(InvalidParameterError):
            set_lightness(self.hsl, -math.inf)

    def test_non_numeric_values_raise_error(self):
        with self.assertRaises(InvalidParameterError):
            set_hue(self.hsl, "red")
        with self.assertRaises(InvalidParameterError):
            set_saturation(self.hsl, None)


def test_round_trip_within_tolerance():
    """Converting RGB -> HSL -> RGB stays within one unit per channel."""
    for r in range(0, 256, 17):
        for g in range(0, 256, 17):
            for b in range(0, 256, 17):
                color = RgbColor(r, g, b)
                back = hsl_to_rgb(rgb_to_hsl(color))
                for original, converted in zip(color.as_tuple(), back.as_tuple()):
                    assert abs(original - converted) <= HSL_ROUND_TRIP_TOLERANCE


def test_round_trip_sample_colors(sample_rgb_colors):
    for rgb in sample_rgb_colors:
        back = hsl_to_rgb(rgb_to_hsl(RgbColor(*rgb))).as_tuple()
        assert back == pytest.approx(rgb, abs=HSL_ROUND_TRIP_TOLERANCE)
