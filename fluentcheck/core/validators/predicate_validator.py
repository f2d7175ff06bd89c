"""
PredicateValidator - validates using a custom Python function.
"""

from collections.abc import Callable
from typing import Any

from ..exceptions import ConfigurationError
from ..internal.context import PropertyValidatorContext
from .base_validator import PropertyValidator


class PredicateValidator(PropertyValidator):
    """
    Validates using a custom predicate.

    The predicate signature is either:
        def predicate(value) -> bool
    or, with pass_instance=True:
        def predicate(instance, value) -> bool

    Exceptions raised by the predicate propagate to the caller.
    """

    rule_type = "must"
    default_message_key = "predicate_error"

    def __init__(
        self,
        predicate: Callable[..., bool],
        pass_instance: bool = False,
        error_message: str | None = None,
    ):
        if not callable(predicate):
            raise ConfigurationError("predicate must be callable")

        super().__init__(error_message)
        self.predicate = predicate
        self.pass_instance = pass_instance

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        if self.pass_instance:
            return bool(self.predicate(context.instance, context.property_value))
        return bool(self.predicate(context.property_value))


class DelegatingValidator(PropertyValidator):
    """
    Runs an inner validator only when a condition on the instance holds.

    Used by when()/unless() to make the most recently declared validator
    conditional. Message and state customisations are forwarded to the
    inner validator.
    """

    def __init__(self, condition: Callable[[Any], bool], inner_validator: PropertyValidator):
        if not callable(condition):
            raise ConfigurationError("condition must be callable")

        self.condition = condition
        self.inner_validator = inner_validator

    @property
    def rule_type(self) -> str:  # type: ignore[override]
        return self.inner_validator.rule_type

    @property
    def error_source(self):  # type: ignore[override]
        return self.inner_validator.error_source

    @error_source.setter
    def error_source(self, source) -> None:
        self.inner_validator.error_source = source

    @property
    def custom_format_args(self) -> list[Callable[[Any], Any]]:  # type: ignore[override]
        return self.inner_validator.custom_format_args

    @property
    def custom_state_provider(self):  # type: ignore[override]
        return self.inner_validator.custom_state_provider

    @custom_state_provider.setter
    def custom_state_provider(self, provider) -> None:
        self.inner_validator.custom_state_provider = provider

    def validate(self, context: PropertyValidatorContext) -> list:
        if not self.condition(context.instance):
            return []
        return self.inner_validator.validate(context)

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        return self.inner_validator.is_valid(context)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.inner_validator!r})"
