"""
Step pipelines for Pixel Manipulator.

A pipeline is an ordered list of step dictionaries, each naming a registered
operation and its parameters:

    [
        {"operation": "Grayscale", "params": {}},
        {"operation": "Set Lightness", "params": {"lightness": 0.4}},
        {"operation": "Rotate", "params": {}},
    ]

Steps run in order; each step receives the previous step's output.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from PM_Libs.constants import FIELD_OPERATION, FIELD_PARAMS
from PM_Libs.errors import PipelineStepError
from PM_Libs.ImageEditingLib.pixel_grid import PixelGrid, ensure_grid
from PM_Libs.ProcessingLib.operation_registry import (
    OperationRegistry,
    get_default_registry,
)

logger = logging.getLogger(__name__)

Step = Dict[str, Any]


def create_step(operation: str, **params: Any) -> Step:
    """
    Helper to create a step dictionary.

    Example:
        >>> create_step("Set Hue", hue=120)
        {'operation': 'Set Hue', 'params': {'hue': 120}}
    """
    return {FIELD_OPERATION: operation, FIELD_PARAMS: dict(params)}


def validate_steps(steps: Sequence[Step], registry: Optional[OperationRegistry] = None) -> None:
    """
    Check that every step is well formed and names a registered operation.

    Raises:
        ValueError: If a step is not a dictionary or has no operation name
        KeyError: If a step names an unregistered operation
    """
    registry = registry or get_default_registry()

    for index, step in enumerate(steps):
        if not isinstance(step, dict):
            raise ValueError(f"Step {index} must be a dictionary, got {type(step)}")

        operation = str(step.get(FIELD_OPERATION, "")).strip()
        if not operation:
            raise ValueError(f"Step {index} is missing '{FIELD_OPERATION}'")

        params = step.get(FIELD_PARAMS, {})
        if not isinstance(params, dict):
            raise ValueError(f"Step {index} '{FIELD_PARAMS}' must be a dictionary")

        if not registry.has_operation(operation):
            raise KeyError(f"Step {index} uses unregistered operation: {operation}")


def run_pipeline(
    image: Any,
    steps: Sequence[Step],
    registry: Optional[OperationRegistry] = None,
) -> PixelGrid:
    """
    Run every step over the image in order.

    Args:
        image: Input PixelGrid (or PIL Image); never modified
        steps: Step dictionaries (see create_step)
        registry: Registry to resolve operations in; the default registry when None

    Returns:
        Output of the last step (a copy of the input when steps is empty)

    Raises:
        ValueError, KeyError: If the steps fail validation
        PipelineStepError: If a step raises; the original error is chained
    """
    registry = registry or get_default_registry()
    validate_steps(steps, registry)

    result = ensure_grid(image).copy()
    for index, step in enumerate(steps):
        operation = str(step[FIELD_OPERATION]).strip()
        params = step.get(FIELD_PARAMS, {})
        logger.debug(f"Step {index}: {operation} {params}")
        try:
            result = registry.execute(operation, result, params)
        except Exception as e:
            raise PipelineStepError(index, operation, str(e)) from e

    logger.info(f"Pipeline finished: {len(steps)} steps, output {result.width}x{result.height}")
    return result


def get_pipeline_summary(steps: Sequence[Step]) -> str:
    """
    Generate a human-readable summary of a pipeline.

    Example:
        >>> print(get_pipeline_summary([create_step("Invert"), create_step("Set Hue", hue=90)]))
        Pipeline: 2 steps
          1. Invert
          2. Set Hue (hue=90)
    """
    lines: List[str] = [f"Pipeline: {len(steps)} steps"]
    for index, step in enumerate(steps, start=1):
        operation = step.get(FIELD_OPERATION, "?")
        params = step.get(FIELD_PARAMS) or {}
        if params:
            rendered = ", ".join(f"{key}={value}" for key, value in params.items())
            lines.append(f"  {index}. {operation} ({rendered})")
        else:
            lines.append(f"  {index}. {operation}")
    return "\n".join(lines)
