"""
ValidationResult model representing the outcome of one validate() call.
"""

from pydantic import BaseModel, ConfigDict, Field

from .validation_failure import ValidationFailure


class ValidationResult(BaseModel):
    """
    Outcome of validating an instance.

    Built once from the completed failure list and never mutated.

    Attributes:
        errors: Failures in rule declaration order
    """

    model_config = ConfigDict(frozen=True)

    errors: tuple[ValidationFailure, ...] = Field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def errors_for(self, property_name: str) -> list[ValidationFailure]:
        """Return the failures reported for one full property path."""
        return [e for e in self.errors if e.property_name == property_name]

    def to_dict(self) -> dict[str, list[str]]:
        """Group error messages by property path, preserving order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.property_name, []).append(error.error_message)
        return grouped
