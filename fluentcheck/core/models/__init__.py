"""
Result models for the validation engine.

All models use Pydantic so results can be serialized with model_dump().
"""

from .validation_failure import ValidationFailure
from .validation_result import ValidationResult

__all__ = [
    "ValidationFailure",
    "ValidationResult",
]
