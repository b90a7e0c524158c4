"""
Constants and configuration values for Pixel Manipulator.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the library.
"""

# Channel bounds
CHANNEL_MIN = 0
CHANNEL_MAX = 255
IMAGE_MODE = "RGB"

# Colour model
HUE_DEGREES = 360.0
HSL_ROUND_TRIP_TOLERANCE = 1

# Sepia matrix (rows produce red, green, blue).
# The blue row weights green twice; kept as documented.
SEPIA_RED = (0.393, 0.769, 0.189)
SEPIA_GREEN = (0.349, 0.686, 0.168)
SEPIA_BLUE = (0.272, 0.534, 0.131)

# Luminance weights applied to squared channels
LUMINANCE_WEIGHTS = (0.299, 0.587, 0.114)

# Black/white stylization colours
BW_WHITE = (255, 255, 255)
BW_BLACK = (0, 0, 0)

# Decorative filter
WARM_RED_FACTOR = 1.2
WARM_BLUE_DIVISOR = 1.5
HALO_BLEND_WEIGHTS = (0.65, 0.35)
GRAIN_BLEND_WEIGHTS = (0.95, 0.5)

# Reference asset configuration (environment variables holding file paths)
ENV_HALO_IMAGE = "PM_HALO_IMAGE"
ENV_GRAIN_IMAGE = "PM_GRAIN_IMAGE"

# Output
DEFAULT_OUTPUT_FORMAT = "PNG"

# Supported file formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}

# Pipeline step field names
FIELD_OPERATION = "operation"
FIELD_PARAMS = "params"
