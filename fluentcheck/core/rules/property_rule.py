"""
PropertyRule - binds a property accessor to an ordered list of validators.
"""

from collections.abc import Callable
from typing import Any

from ..exceptions import ConfigurationError
from ..internal.accessor import PropertyAccessor
from ..internal.context import PropertyValidatorContext, ValidationContext
from ..models import ValidationFailure
from ..options import CascadeMode, validator_options
from ..validators.base_validator import PropertyValidator


def _noop(instance: Any) -> None:
    pass


class PropertyRule:
    """
    A rule for one property of the validated instance.

    Validators run in declaration order. Under CascadeMode.STOP_ON_FIRST_FAILURE
    the rule stops after the first validator that reports a failure. The
    on_failure hook runs once per evaluation, after the validators, and only
    if something failed.

    The rule is mutable while it is being declared. Its owning validator
    freezes it on first use, after which validators can no longer be added
    or replaced.
    """

    def __init__(self, member: PropertyAccessor, cascade_mode: CascadeMode | str | None = None):
        self.member = member
        self.property_name: str | None = member.name
        self.custom_property_name: str | None = None
        self.on_failure: Callable[[Any], None] = _noop
        self.current_validator: PropertyValidator | None = None
        self._validators: list[PropertyValidator] = []
        self._cascade_mode: CascadeMode | None = None
        self._frozen = False
        if cascade_mode is not None:
            self.cascade_mode = cascade_mode

    @classmethod
    def create(cls, target: Any, name: str | None = None) -> "PropertyRule":
        """Create a rule from a property path, a callable or a PropertyAccessor."""
        return cls(PropertyAccessor.create(target, name))

    @property
    def cascade_mode(self) -> CascadeMode:
        # Unset rules follow the global default at validation time.
        if self._cascade_mode is None:
            return validator_options.cascade_mode
        return self._cascade_mode

    @cascade_mode.setter
    def cascade_mode(self, mode: CascadeMode | str) -> None:
        try:
            self._cascade_mode = CascadeMode.parse(mode)
        except ValueError as e:
            raise ConfigurationError(str(e))

    @property
    def validators(self) -> tuple[PropertyValidator, ...]:
        return tuple(self._validators)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise ConfigurationError(
                f"Rule for '{self.property_name or self.custom_property_name}' can no longer be modified "
                "after its validator has been used"
            )

    def add_validator(self, validator: PropertyValidator) -> None:
        if validator is None:
            raise ConfigurationError("Cannot add None as a property validator")
        self._ensure_mutable()
        self.current_validator = validator
        self._validators.append(validator)

    def replace_current_validator(self, new_validator: PropertyValidator) -> None:
        """Swap the most recently added validator, keeping its position."""
        self._ensure_mutable()
        if self.current_validator is None:
            raise ConfigurationError("There is no current validator to replace")

        index = next(i for i, v in enumerate(self._validators) if v is self.current_validator)
        self._validators[index] = new_validator
        self.current_validator = new_validator

    @property
    def property_description(self) -> str | None:
        """The display name used in messages."""
        if self.custom_property_name is not None:
            return self.custom_property_name
        return validator_options.display_name_resolver(self.property_name)

    def build_property_name(self, context: ValidationContext) -> str:
        return context.property_chain.build_property_name(self.property_name or self.custom_property_name)

    def validate(self, context: ValidationContext) -> list[ValidationFailure]:
        """
        Evaluate the rule against the context's instance.

        Raises:
            ConfigurationError: If no property name can be determined
        """
        if self.property_name is None and self.custom_property_name is None:
            raise ConfigurationError(
                f"Property name could not be automatically determined for {self.member!r}. "
                "Please specify a custom property name by calling with_name()."
            )

        property_name = self.build_property_name(context)
        if not context.selector.can_execute(self, property_name):
            return []

        instance = context.instance_to_validate
        cascade = self.cascade_mode
        description = self.property_description
        resolved: list[Any] = []

        def property_value(obj: Any) -> Any:
            if not resolved:
                resolved.append(self.member.resolve(obj))
            return resolved[0]

        failures: list[ValidationFailure] = []
        for validator in self._validators:
            validator_context = PropertyValidatorContext(
                description,
                instance,
                property_value,
                property_name,
                member_name=self.property_name or self.custom_property_name,
                parent_context=context,
            )
            results = validator.validate(validator_context)
            failures.extend(results)

            if results and cascade == CascadeMode.STOP_ON_FIRST_FAILURE:
                break

        if failures:
            self.on_failure(instance)

        return failures

    def __repr__(self) -> str:
        return f"PropertyRule({self.property_name!r}, validators={self._validators!r})"
