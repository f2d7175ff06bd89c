"""
DelegateRule - a whole-object rule backed by a plain function.
"""

from collections.abc import Callable
from typing import Any

from ..exceptions import ConfigurationError
from ..internal.context import ValidationContext
from ..models import ValidationFailure


class DelegateRule:
    """
    Wraps a function returning a ValidationFailure or None.

    The function receives the instance, or the instance and the
    ValidationContext when pass_context is True. Whole-object rules are not
    filtered by the selector.
    """

    property_name = None
    validators: tuple = ()

    def __init__(self, func: Callable[..., ValidationFailure | None], pass_context: bool = False):
        if func is None or not callable(func):
            raise ConfigurationError("Cannot pass None to custom()")
        self.func = func
        self.pass_context = pass_context

    def freeze(self) -> None:
        pass

    def validate(self, context: ValidationContext) -> list[ValidationFailure]:
        instance = context.instance_to_validate
        if self.pass_context:
            failure = self.func(instance, context)
        else:
            failure = self.func(instance)

        if failure is None:
            return []
        if not isinstance(failure, ValidationFailure):
            raise ConfigurationError(
                f"Custom rule {self.func!r} must return a ValidationFailure or None, "
                f"got {type(failure).__name__}"
            )
        return [failure]

    def __repr__(self) -> str:
        return f"DelegateRule({getattr(self.func, '__name__', self.func)!r})"
