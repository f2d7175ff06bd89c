"""
Presence validators: not_null, not_empty and their inverses.
"""

from collections.abc import Sized
from typing import Any

from ..internal.context import PropertyValidatorContext
from .base_validator import PropertyValidator


def is_empty(value: Any) -> bool:
    """
    True for None, blank strings and empty collections.

    Numbers and booleans are never empty (0 and False are real values).
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class NotNullValidator(PropertyValidator):
    """Fails if the value is None."""

    rule_type = "not_null"
    default_message_key = "notnull_error"

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        return context.property_value is not None


class NotEmptyValidator(PropertyValidator):
    """
    Fails if the value is None, a whitespace-only string or an empty collection.
    """

    rule_type = "not_empty"
    default_message_key = "notempty_error"

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        return not is_empty(context.property_value)


class NullValidator(PropertyValidator):
    """Fails unless the value is None."""

    rule_type = "null"
    default_message_key = "null_error"

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        return context.property_value is None


class EmptyValidator(PropertyValidator):
    """Fails unless the value is empty (see is_empty)."""

    rule_type = "empty"
    default_message_key = "empty_error"

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        return is_empty(context.property_value)
