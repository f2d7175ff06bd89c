"""
Fluent rule declaration.

    validator.rule_for("email").not_empty().email().with_message("Bad address")

Validator methods append to the rule; option methods (with_message,
with_state, when, unless) customise the most recently appended validator.
"""

from collections.abc import Callable, Mapping
from re import Pattern
from typing import Any

from ..exceptions import ConfigurationError
from ..options import CascadeMode
from ..validators import (
    BetweenValidator,
    ChildValidatorAdaptor,
    DelegatingValidator,
    EmailValidator,
    EmptyValidator,
    EqualValidator,
    ExactLengthValidator,
    GreaterThanOrEqualValidator,
    GreaterThanValidator,
    LengthValidator,
    LessThanOrEqualValidator,
    LessThanValidator,
    MaximumLengthValidator,
    MinimumLengthValidator,
    NotEmptyValidator,
    NotEqualValidator,
    NotNullValidator,
    NullValidator,
    PredicateValidator,
    PropertyValidator,
    RegexValidator,
)
from .property_rule import PropertyRule


class RuleBuilder:
    """Builds up a single PropertyRule."""

    def __init__(self, rule: PropertyRule):
        self.rule = rule

    def set_validator(self, validator: Any) -> "RuleBuilder":
        """
        Attach a PropertyValidator, or a Validator for nested validation of
        the property's value.
        """
        if validator is None:
            raise ConfigurationError("Cannot pass None to set_validator()")
        if not isinstance(validator, PropertyValidator):
            if not callable(getattr(validator, "validate", None)):
                raise ConfigurationError(f"{type(validator).__name__} is not a validator")
            validator = ChildValidatorAdaptor(validator)
        self.rule.add_validator(validator)
        return self

    # Validators

    def not_null(self) -> "RuleBuilder":
        return self.set_validator(NotNullValidator())

    def not_empty(self) -> "RuleBuilder":
        return self.set_validator(NotEmptyValidator())

    def null(self) -> "RuleBuilder":
        return self.set_validator(NullValidator())

    def empty(self) -> "RuleBuilder":
        return self.set_validator(EmptyValidator())

    def equal(self, value_to_compare: Any) -> "RuleBuilder":
        return self.set_validator(EqualValidator(value_to_compare))

    def not_equal(self, value_to_compare: Any) -> "RuleBuilder":
        return self.set_validator(NotEqualValidator(value_to_compare))

    def less_than(self, value_to_compare: Any) -> "RuleBuilder":
        return self.set_validator(LessThanValidator(value_to_compare))

    def less_than_or_equal_to(self, value_to_compare: Any) -> "RuleBuilder":
        return self.set_validator(LessThanOrEqualValidator(value_to_compare))

    def greater_than(self, value_to_compare: Any) -> "RuleBuilder":
        return self.set_validator(GreaterThanValidator(value_to_compare))

    def greater_than_or_equal_to(self, value_to_compare: Any) -> "RuleBuilder":
        return self.set_validator(GreaterThanOrEqualValidator(value_to_compare))

    def inclusive_between(self, from_value: Any, to_value: Any) -> "RuleBuilder":
        return self.set_validator(BetweenValidator(from_value, to_value))

    def exclusive_between(self, from_value: Any, to_value: Any) -> "RuleBuilder":
        return self.set_validator(BetweenValidator(from_value, to_value, exclusive=True))

    def length(self, min_length: int, max_length: int | None = None) -> "RuleBuilder":
        return self.set_validator(LengthValidator(min_length, max_length))

    def exact_length(self, length: int) -> "RuleBuilder":
        return self.set_validator(ExactLengthValidator(length))

    def max_length(self, max_length: int) -> "RuleBuilder":
        return self.set_validator(MaximumLengthValidator(max_length))

    def min_length(self, min_length: int) -> "RuleBuilder":
        return self.set_validator(MinimumLengthValidator(min_length))

    def matches(self, pattern: str | Pattern | Callable[[Any], str], flags: int = 0) -> "RuleBuilder":
        return self.set_validator(RegexValidator(pattern, flags))

    def email(self) -> "RuleBuilder":
        return self.set_validator(EmailValidator())

    def must(self, predicate: Callable[..., bool], pass_instance: bool = False) -> "RuleBuilder":
        return self.set_validator(PredicateValidator(predicate, pass_instance))

    # Options for the current validator

    def _current(self) -> PropertyValidator:
        if self.rule.current_validator is None:
            raise ConfigurationError(
                f"No validator has been declared for '{self.rule.property_name}' yet"
            )
        return self.rule.current_validator

    def with_message(self, template: str, *format_args: Callable[[Any], Any]) -> "RuleBuilder":
        """
        Override the current validator's message.

        format_args are functions of the instance, evaluated when the failure
        is built and referenced in the template as {0}, {1}, ...
        """
        validator = self._current()
        for arg in format_args:
            if not callable(arg):
                raise ConfigurationError("Message format arguments must be callables of the instance")
        validator.set_error_message(template)
        validator.custom_format_args.extend(format_args)
        return self

    def with_message_key(self, resource_key: str, provider: Mapping[str, str] | None = None) -> "RuleBuilder":
        self._current().set_error_message_resource(resource_key, provider)
        return self

    def with_state(self, provider: Callable[[Any], Any]) -> "RuleBuilder":
        if not callable(provider):
            raise ConfigurationError("State provider must be callable")
        self._current().custom_state_provider = provider
        return self

    def when(self, predicate: Callable[[Any], bool]) -> "RuleBuilder":
        """Only run the current validator when predicate(instance) is true."""
        self.rule.replace_current_validator(DelegatingValidator(predicate, self._current()))
        return self

    def unless(self, predicate: Callable[[Any], bool]) -> "RuleBuilder":
        """Skip the current validator when predicate(instance) is true."""
        if not callable(predicate):
            raise ConfigurationError("condition must be callable")
        return self.when(lambda instance: not predicate(instance))

    # Options for the rule

    def with_name(self, name: str) -> "RuleBuilder":
        if not name:
            raise ConfigurationError("A property name override must be a non-empty string")
        self.rule.custom_property_name = name
        return self

    def on_any_failure(self, callback: Callable[[Any], None]) -> "RuleBuilder":
        if not callable(callback):
            raise ConfigurationError("on_any_failure callback must be callable")
        self.rule.on_failure = callback
        return self

    def cascade(self, mode: CascadeMode | str) -> "RuleBuilder":
        self.rule.cascade_mode = mode
        return self

    def __repr__(self) -> str:
        return f"RuleBuilder({self.rule!r})"
