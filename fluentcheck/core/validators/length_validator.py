"""
LengthValidator - validates the length of strings and collections.
"""

from ..exceptions import ConfigurationError
from ..internal.context import PropertyValidatorContext
from .base_validator import PropertyValidator


class LengthValidator(PropertyValidator):
    """
    Validates that len(value) is within [min_length, max_length].

    Parameters:
    - min_length: Minimum length (inclusive)
    - max_length: Maximum length (inclusive), None for unbounded
    """

    rule_type = "length"
    default_message_key = "length_error"

    def __init__(self, min_length: int = 0, max_length: int | None = None, error_message: str | None = None):
        if min_length < 0:
            raise ConfigurationError(f"min_length must be non-negative, got {min_length}")
        if max_length is not None and max_length < min_length:
            raise ConfigurationError(f"max_length {max_length} is less than min_length {min_length}")

        super().__init__(error_message)
        self.min_length = min_length
        self.max_length = max_length

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        value = context.property_value
        if value is None:
            return True

        try:
            length = len(value)
        except TypeError:
            length = len(str(value))

        if length < self.min_length or (self.max_length is not None and length > self.max_length):
            context.message_formatter.append_argument("min_length", self.min_length)
            context.message_formatter.append_argument("max_length", self.max_length)
            context.message_formatter.append_argument("total_length", length)
            return False

        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(min={self.min_length}, max={self.max_length})"


class ExactLengthValidator(LengthValidator):
    rule_type = "exact_length"
    default_message_key = "exact_length_error"

    def __init__(self, length: int, error_message: str | None = None):
        super().__init__(length, length, error_message)


class MaximumLengthValidator(LengthValidator):
    rule_type = "max_length"
    default_message_key = "max_length_error"

    def __init__(self, max_length: int, error_message: str | None = None):
        super().__init__(0, max_length, error_message)


class MinimumLengthValidator(LengthValidator):
    rule_type = "min_length"
    default_message_key = "min_length_error"

    def __init__(self, min_length: int, error_message: str | None = None):
        super().__init__(min_length, None, error_message)
