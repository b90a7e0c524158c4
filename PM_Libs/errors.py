"""
Error types for Pixel Manipulator.

Every error raised by the library derives from ImageManipulationError and
also from the builtin exception callers would naturally catch (ValueError,
IndexError or OSError).
"""


class ImageManipulationError(Exception):
    """Base class for all Pixel Manipulator errors."""


class InvalidDimensionsError(ImageManipulationError, ValueError):
    """Grid has a zero/negative size, or two grids that must match do not."""


class OutOfBoundsError(ImageManipulationError, IndexError):
    """A coordinate lies outside the pixel grid."""


class ResourceUnavailableError(ImageManipulationError, OSError):
    """A reference image required by a filter could not be obtained."""


class InvalidParameterError(ImageManipulationError, ValueError):
    """An operation parameter or channel value is not acceptable."""


class ImageDecodeError(ImageManipulationError, OSError):
    """An image file or buffer could not be decoded."""


class ImageWriteError(ImageManipulationError, OSError):
    """An image could not be written to disk."""


class PipelineStepError(ImageManipulationError):
    """A pipeline step failed; the original error is chained as __cause__."""

    def __init__(self, index: int, operation: str, message: str):
        super().__init__(f"Error executing step {index} ({operation}): {message}")
        self.index = index
        self.operation = operation
