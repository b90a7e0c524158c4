"""
ProcessingLib - Named operations and step pipelines

This module lets transformations be looked up by name and chained as
ordered lists of steps.
"""

from PM_Libs.ProcessingLib.operation_registry import (
    OperationRegistry,
    get_default_registry,
    register_default_operations,
)
from PM_Libs.ProcessingLib.pipeline import (
    create_step,
    get_pipeline_summary,
    run_pipeline,
    validate_steps,
)

__all__ = [
    "OperationRegistry",
    "get_default_registry",
    "register_default_operations",
    "create_step",
    "get_pipeline_summary",
    "run_pipeline",
    "validate_steps",
]
