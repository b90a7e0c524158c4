"""
Operation Registry and Manager.

This module provides a centralized registry of named image operations. It
enables registration, lookup, and execution of transformations by name, so
that a sequence of steps can be described as plain data.

Classes:
    OperationRegistry: Registry for image operations

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_operations: Register all built-in transformations
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from PM_Libs.constants import WARM_BLUE_DIVISOR, WARM_RED_FACTOR
from PM_Libs.errors import InvalidParameterError
from PM_Libs.ImageEditingLib.decorative_filter import (
    ReferenceAssets,
    apply_decorative_filter,
)
from PM_Libs.ImageEditingLib.pixel_grid import PixelGrid
from PM_Libs.ImageEditingLib.transformations import (
    apply_warm_tone,
    convert_to_bw,
    convert_to_grayscale,
    convert_to_sepia,
    invert_image,
    rotate_image,
    set_image_hue,
    set_image_lightness,
    set_image_saturation,
)

logger = logging.getLogger(__name__)

# Type alias for operation function
OperationFunction = Callable[[PixelGrid, Dict[str, Any]], PixelGrid]


class OperationRegistry:
    """
    Registry for image operations.

    Example:
        >>> registry = OperationRegistry()
        >>> registry.register("Invert", lambda image, params: invert_image(image))
        >>> result = registry.execute("Invert", grid, {})
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._operations: Dict[str, OperationFunction] = {}
        self._metadata: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        name: str,
        operation: OperationFunction,
        description: str = "",
        parameters: Optional[List[str]] = None,
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register an operation.

        Args:
            name: Unique operation name (e.g., "Grayscale")
            operation: Callable accepting (image, params) and returning a PixelGrid
            description: Human-readable description
            parameters: Names of the parameters the operation reads
            tags: Optional list of tags for categorization (e.g., ["color", "hsl"])

        Raises:
            ValueError: If name is empty or operation is not callable
            RuntimeError: If name is already registered
        """
        name = str(name).strip()

        if not name:
            raise ValueError("Operation name cannot be empty")

        if not callable(operation):
            raise ValueError(f"operation must be callable, got {type(operation)}")

        if name in self._operations:
            raise RuntimeError(
                f"Operation '{name}' is already registered. "
                f"Use unregister() first to replace it."
            )

        self._operations[name] = operation
        self._metadata[name] = {
            "description": str(description),
            "parameters": list(parameters) if parameters else [],
            "tags": list(tags) if tags else [],
        }

        logger.debug(f"Registered operation: {name}")

    def unregister(self, name: str) -> bool:
        """
        Unregister an operation.

        Returns:
            True if unregistered, False if name was not registered
        """
        name = str(name).strip()

        if name in self._operations:
            del self._operations[name]
            del self._metadata[name]
            logger.debug(f"Unregistered operation: {name}")
            return True

        return False

    def get_operation(self, name: str) -> OperationFunction:
        """
        Get an operation by name.

        Raises:
            KeyError: If name is not registered
        """
        name = str(name).strip()

        if name not in self._operations:
            available = ", ".join(self.list_operations())
            raise KeyError(
                f"No operation registered under '{name}'. "
                f"Available operations: {available}"
            )

        return self._operations[name]

    def has_operation(self, name: str) -> bool:
        return str(name).strip() in self._operations

    def execute(self, name: str, image: Any, params: Optional[Dict[str, Any]] = None) -> PixelGrid:
        """
        Execute an operation by name.

        Args:
            name: Operation name
            image: Input PixelGrid (or PIL Image)
            params: Operation parameters

        Returns:
            Result from the operation

        Raises:
            KeyError: If name is not registered
            Exception: Any exception raised by the operation
        """
        operation = self.get_operation(name)
        return operation(image, dict(params or {}))

    def list_operations(self) -> List[str]:
        """Sorted list of all registered operation names."""
        return sorted(self._operations.keys())

    def get_metadata(self, name: str) -> Dict[str, Any]:
        """
        Get metadata for an operation.

        Returns:
            Dictionary with description, parameters, tags

        Raises:
            KeyError: If name is not registered
        """
        name = str(name).strip()

        if name not in self._metadata:
            raise KeyError(f"No metadata for operation: {name}")

        return dict(self._metadata[name])

    def clear(self) -> None:
        """Clear all registered operations. Use with caution."""
        self._operations.clear()
        self._metadata.clear()
        logger.warning("Operation registry cleared")


# Global singleton registry
_default_registry: Optional[OperationRegistry] = None


def get_default_registry() -> OperationRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in operations.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = OperationRegistry()
        register_default_operations(_default_registry)

    return _default_registry


def _require(params: Dict[str, Any], key: str, operation: str) -> Any:
    if key not in params:
        raise InvalidParameterError(f"{operation} requires parameter '{key}'")
    return params[key]


def _execute_set_hue(image: Any, params: Dict[str, Any]) -> PixelGrid:
    return set_image_hue(image, _require(params, "hue", "Set Hue"))


def _execute_set_saturation(image: Any, params: Dict[str, Any]) -> PixelGrid:
    return set_image_saturation(image, _require(params, "saturation", "Set Saturation"))


def _execute_set_lightness(image: Any, params: Dict[str, Any]) -> PixelGrid:
    return set_image_lightness(image, _require(params, "lightness", "Set Lightness"))


def _execute_warm_tone(image: Any, params: Dict[str, Any]) -> PixelGrid:
    return apply_warm_tone(
        image,
        red_factor=params.get("red_factor", WARM_RED_FACTOR),
        blue_divisor=params.get("blue_divisor", WARM_BLUE_DIVISOR),
    )


def _execute_decorative_filter(image: Any, params: Dict[str, Any]) -> PixelGrid:
    """
    Run the decorative filter.

    Reference images come from params, in order of preference:
    'assets' (a ReferenceAssets), 'halo_path' + 'grain_path', or the environment.
    """
    assets = params.get("assets")
    if assets is None and ("halo_path" in params or "grain_path" in params):
        assets = ReferenceAssets.from_paths(
            _require(params, "halo_path", "Decorative Filter"),
            _require(params, "grain_path", "Decorative Filter"),
        )
    return apply_decorative_filter(image, assets=assets)


def register_default_operations(registry: OperationRegistry) -> None:
    """
    Register all built-in operations.

    Args:
        registry: The registry to register operations with
    """
    registry.register(
        name="Grayscale",
        operation=lambda image, params: convert_to_grayscale(image),
        description="Average the channels of every pixel",
        tags=["color", "filter"],
    )

    registry.register(
        name="Invert",
        operation=lambda image, params: invert_image(image),
        description="Invert every channel (255 - c)",
        tags=["color", "filter"],
    )

    registry.register(
        name="Sepia",
        operation=lambda image, params: convert_to_sepia(image),
        description="Apply the sepia tone matrix",
        tags=["color", "filter"],
    )

    registry.register(
        name="Stylize BW",
        operation=lambda image, params: convert_to_bw(image),
        description="Threshold every pixel to black or white at the median luminance",
        tags=["color", "filter", "threshold"],
    )

    registry.register(
        name="Rotate",
        operation=lambda image, params: rotate_image(image),
        description="Rotate 90 degrees clockwise",
        tags=["geometry"],
    )

    registry.register(
        name="Set Hue",
        operation=_execute_set_hue,
        description="Set the hue of every pixel (degrees, wrapped into 0-360)",
        parameters=["hue"],
        tags=["color", "hsl"],
    )

    registry.register(
        name="Set Saturation",
        operation=_execute_set_saturation,
        description="Set the saturation of every pixel (0-1, clamped)",
        parameters=["saturation"],
        tags=["color", "hsl"],
    )

    registry.register(
        name="Set Lightness",
        operation=_execute_set_lightness,
        description="Set the lightness of every pixel (0-1, clamped)",
        parameters=["lightness"],
        tags=["color", "hsl"],
    )

    registry.register(
        name="Warm Tone",
        operation=_execute_warm_tone,
        description="Boost red and reduce blue",
        parameters=["red_factor", "blue_divisor"],
        tags=["color", "filter"],
    )

    registry.register(
        name="Decorative Filter",
        operation=_execute_decorative_filter,
        description="Warm tone, halo vignette and decorative grain",
        parameters=["assets", "halo_path", "grain_path"],
        tags=["filter", "composite"],
    )

    logger.info("Registered default operations")
