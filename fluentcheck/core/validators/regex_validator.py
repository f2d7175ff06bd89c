"""
RegexValidator - validates values against a regular expression pattern.
"""

import re
from re import Pattern
from typing import Any

from ..exceptions import ConfigurationError
from ..internal.context import PropertyValidatorContext
from .base_validator import PropertyValidator


class RegexValidator(PropertyValidator):
    """
    Validates that a value matches a regular expression.

    Parameters:
    - pattern: Regular expression pattern (string, compiled Pattern, or a
      callable taking the instance and returning either)
    - flags: Optional regex flags (e.g., re.IGNORECASE)

    The pattern is applied with search(), so anchor it to match the whole value.
    """

    rule_type = "matches"
    default_message_key = "regex_error"

    def __init__(self, pattern: Any, flags: int = 0, error_message: str | None = None):
        super().__init__(error_message)

        if not pattern:
            raise ConfigurationError("RegexValidator requires a pattern")

        self.flags = flags
        self._pattern_func = pattern if callable(pattern) and not isinstance(pattern, Pattern) else None
        self.pattern: Pattern | None = None
        if self._pattern_func is None:
            self.pattern = self._compile(pattern)

    def _compile(self, pattern: Any) -> Pattern:
        if isinstance(pattern, Pattern):
            return pattern
        if not isinstance(pattern, str):
            raise ConfigurationError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")
        try:
            return re.compile(pattern, self.flags)
        except re.error as e:
            raise ConfigurationError(f"Invalid regex pattern: {e}")

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        value = context.property_value
        if value is None:
            return True

        pattern = self.pattern if self.pattern is not None else self._compile(self._pattern_func(context.instance))

        if not pattern.search(str(value)):
            context.message_formatter.append_argument("regular_expression", pattern.pattern)
            return False
        return True

    def __repr__(self) -> str:
        shown = self.pattern.pattern if self.pattern is not None else self._pattern_func
        return f"{self.__class__.__name__}({shown!r})"


class EmailValidator(RegexValidator):
    """Validates that a value looks like an email address."""

    rule_type = "email"
    default_message_key = "email_error"

    EMAIL_PATTERN = r"^[A-Za-z0-9._%+\-']+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}$"

    def __init__(self, error_message: str | None = None):
        super().__init__(self.EMAIL_PATTERN, re.IGNORECASE, error_message)
