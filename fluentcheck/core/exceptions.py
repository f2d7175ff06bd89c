"""
Exceptions raised by the validation engine.

Validation failures are data and are returned inside a ValidationResult.
Only engine misuse (ConfigurationError) is raised during validate(), and
ValidationException is raised solely by the opt-in validate_and_raise().
"""

from typing import Any


class FluentCheckError(Exception):
    """Base class for all fluentcheck exceptions."""


class ConfigurationError(FluentCheckError):
    """Raised when a validator or rule is declared or invoked incorrectly."""


class ValidationException(FluentCheckError):
    """Raised by validate_and_raise() when an instance fails validation."""

    def __init__(self, errors: Any):
        self.errors = tuple(errors)
        lines = [f" -- {e.property_name}: {e.error_message}" for e in self.errors]
        super().__init__("Validation failed:\n" + "\n".join(lines))
