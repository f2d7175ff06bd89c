"""
Comparison validators - equality, ordering and range checks.

Comparison values are either constants or callables taking the instance
under validation, evaluated when the validator runs.
"""

import operator
from collections.abc import Callable
from typing import Any

from ..exceptions import ConfigurationError
from ..internal.context import PropertyValidatorContext
from .base_validator import PropertyValidator


def _resolve(value_or_func: Any, instance: Any) -> Any:
    return value_or_func(instance) if callable(value_or_func) else value_or_func


class ComparisonValidator(PropertyValidator):
    """
    Compares the property value against a constant or a value derived from
    the instance.

    None property values pass; pair with not_null() to require a value.
    Values that can't be compared with the comparison value fail.
    """

    comparison: Callable[[Any, Any], bool] = operator.eq

    def __init__(self, value_to_compare: Any, error_message: str | None = None):
        if value_to_compare is None:
            raise ConfigurationError(f"{self.__class__.__name__} requires a comparison value")
        super().__init__(error_message)
        self.value_to_compare = value_to_compare

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        value = context.property_value
        if value is None:
            return True

        comparison_value = _resolve(self.value_to_compare, context.instance)
        try:
            passed = type(self).comparison(value, comparison_value)
        except TypeError:
            passed = False

        if not passed:
            context.message_formatter.append_argument("comparison_value", comparison_value)
        return passed

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value_to_compare!r})"


class EqualValidator(ComparisonValidator):
    rule_type = "equal"
    default_message_key = "equal_error"
    comparison = operator.eq


class NotEqualValidator(ComparisonValidator):
    rule_type = "not_equal"
    default_message_key = "notequal_error"
    comparison = operator.ne


class LessThanValidator(ComparisonValidator):
    rule_type = "less_than"
    default_message_key = "lessthan_error"
    comparison = operator.lt


class LessThanOrEqualValidator(ComparisonValidator):
    rule_type = "less_than_or_equal_to"
    default_message_key = "lessthanorequal_error"
    comparison = operator.le


class GreaterThanValidator(ComparisonValidator):
    rule_type = "greater_than"
    default_message_key = "greaterthan_error"
    comparison = operator.gt


class GreaterThanOrEqualValidator(ComparisonValidator):
    rule_type = "greater_than_or_equal_to"
    default_message_key = "greaterthanorequal_error"
    comparison = operator.ge


class BetweenValidator(PropertyValidator):
    """
    Validates that a value lies between two bounds.

    Parameters:
    - from_value: Lower bound (constant or callable of the instance)
    - to_value: Upper bound (constant or callable of the instance)
    - exclusive: Whether the bounds themselves are rejected
    """

    def __init__(self, from_value: Any, to_value: Any, exclusive: bool = False, error_message: str | None = None):
        if from_value is None or to_value is None:
            raise ConfigurationError("BetweenValidator requires both bounds")
        if not callable(from_value) and not callable(to_value) and to_value < from_value:
            raise ConfigurationError(f"Upper bound {to_value} is less than lower bound {from_value}")

        self.from_value = from_value
        self.to_value = to_value
        self.exclusive = exclusive
        self.rule_type = "exclusive_between" if exclusive else "inclusive_between"
        super().__init__(error_message, "exclusivebetween_error" if exclusive else "inclusivebetween_error")

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        value = context.property_value
        if value is None:
            return True

        from_value = _resolve(self.from_value, context.instance)
        to_value = _resolve(self.to_value, context.instance)
        try:
            if self.exclusive:
                passed = from_value < value < to_value
            else:
                passed = from_value <= value <= to_value
        except TypeError:
            passed = False

        if not passed:
            context.message_formatter.append_argument("from", from_value)
            context.message_formatter.append_argument("to", to_value)
            context.message_formatter.append_argument("value", value)
        return passed

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.from_value!r}, {self.to_value!r}, exclusive={self.exclusive})"
