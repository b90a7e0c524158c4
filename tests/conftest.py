"""
Pytest configuration and shared fixtures for Pixel Manipulator tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest

from PM_Libs.ImageEditingLib.pixel_grid import PixelGrid


@pytest.fixture
def sample_rgb_colors():
    """
    Provide a list of sample RGB color tuples for testing.

    Returns:
        List of (R, G, B) tuples with common test colors
    """
    return [
        (255, 0, 0),      # Red
        (0, 255, 0),      # Green
        (0, 0, 255),      # Blue
        (255, 255, 255),  # White
        (0, 0, 0),        # Black
        (128, 128, 128),  # Gray
        (12, 200, 97),
        (250, 128, 3),
    ]


@pytest.fixture
def gradient_grid():
    """Provide a 6x4 grid with distinct pixel colours."""
    grid = PixelGrid(6, 4)
    for y in range(4):
        for x in range(6):
            grid.set_pixel(x, y, ((x * 47) % 256, (y * 83) % 256, (x * y * 29 + 13) % 256))
    return grid
