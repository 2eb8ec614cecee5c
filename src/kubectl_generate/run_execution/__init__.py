"""Run execution domain exports."""

from .generation_run_use_case import (
    GenerationRunError,
    ValidationError,
    execute_generation_run,
    validate_resource_names,
)
from .run_contracts import GenerateOutcome, GenerateRequest

__all__ = [
    "GenerateRequest",
    "GenerateOutcome",
    "GenerationRunError",
    "ValidationError",
    "execute_generation_run",
    "validate_resource_names",
]
