"""
Validator - the aggregate root owning an ordered collection of rules.

Declare rules in a subclass constructor:

    class CustomerValidator(Validator):
        def __init__(self):
            super().__init__()
            self.rule_for("name").not_empty()
            self.rule_for("age").greater_than_or_equal_to(0)

or build one inline with Validator().rule_for(...).
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Protocol

from fluentcheck.observability.logger import get_logger
from fluentcheck.observability.metrics import record_validation, track_duration, validation_duration_seconds

from .descriptor import ValidatorDescriptor
from .exceptions import ConfigurationError, ValidationException
from .internal.context import ValidationContext
from .internal.property_chain import PropertyChain
from .internal.selectors import DefaultValidatorSelector, MemberNameValidatorSelector
from .models import ValidationFailure, ValidationResult
from .rules.delegate_rule import DelegateRule
from .rules.property_rule import PropertyRule
from .rules.rule_builder import RuleBuilder

logger = get_logger(__name__)


class ValidationRule(Protocol):
    """Anything a Validator can own: PropertyRule, DelegateRule, ..."""

    def validate(self, context: ValidationContext) -> list[ValidationFailure]: ...

    def freeze(self) -> None: ...


class Validator:
    """
    Runs its rules in declaration order and merges their failures.

    A fully declared validator is safe to share between threads: each
    validate() call builds its own context and message formatters.
    """

    def __init__(self, rules: Iterable[ValidationRule] | None = None):
        self._rules: list[ValidationRule] = []
        for rule in rules or ():
            self.add_rule(rule)

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def validate(self, instance_or_context: Any) -> ValidationResult:
        """
        Validate an instance, or an explicit ValidationContext.

        Raises:
            ConfigurationError: If given None, or if a rule is misconfigured
        """
        if instance_or_context is None:
            raise ConfigurationError("Cannot pass None to validate()")

        if isinstance(instance_or_context, ValidationContext):
            context = instance_or_context
            if context.instance_to_validate is None:
                raise ConfigurationError("Cannot validate a context whose instance is None")
        else:
            context = ValidationContext(instance_or_context, PropertyChain(), DefaultValidatorSelector())

        try:
            with track_duration(validation_duration_seconds, validator=self.name):
                failures = self.collect_failures(context)
        except ConfigurationError as e:
            logger.error(f"{self.name} is misconfigured: {e}")
            record_validation(self.name, error=True)
            raise

        result = ValidationResult(errors=failures)
        record_validation(self.name, result)
        logger.debug(
            f"{self.name} validated instance",
            extra={
                "validator": self.name,
                "rule_count": len(self._rules),
                "failure_count": len(failures),
                "property_chain": str(context.property_chain),
            },
        )
        return result

    def collect_failures(self, context: ValidationContext) -> list[ValidationFailure]:
        """
        Run every rule against the context and return the merged failures.

        Nested validation uses this directly, so only the outermost
        validate() call is logged and recorded in metrics.
        """
        failures: list[ValidationFailure] = []
        for rule in self._rules:
            rule.freeze()
            failures.extend(rule.validate(context))
        return failures

    def validate_members(self, instance: Any, *member_names: str) -> ValidationResult:
        """Validate only the rules for the given property paths."""
        if instance is None:
            raise ConfigurationError("Cannot pass None to validate_members()")
        selector = MemberNameValidatorSelector(member_names)
        return self.validate(ValidationContext(instance, PropertyChain(), selector))

    def validate_and_raise(self, instance: Any) -> ValidationResult:
        """
        Validate and raise ValidationException if any rule failed.

        Returns:
            The (valid) ValidationResult
        """
        result = self.validate(instance)
        if not result.is_valid:
            raise ValidationException(result.errors)
        return result

    # Declaration

    def add_rule(self, rule: ValidationRule) -> None:
        if rule is None:
            raise ConfigurationError("Cannot pass None to add_rule()")
        self._rules.append(rule)

    def rule_for(self, accessor: Any, name: str | None = None) -> RuleBuilder:
        """
        Declare a rule for a property.

        Args:
            accessor: Attribute/key path ("address.postcode"), a callable taking
                      the instance, or a PropertyAccessor
            name: Member name to use when the accessor doesn't provide one

        Returns:
            A RuleBuilder for chaining validators
        """
        if accessor is None:
            raise ConfigurationError("Cannot pass None to rule_for()")
        rule = PropertyRule.create(accessor, name)
        self.add_rule(rule)
        return RuleBuilder(rule)

    def custom(
        self,
        func: Callable[..., ValidationFailure | None],
        pass_context: bool = False,
    ) -> DelegateRule:
        """
        Declare a whole-object rule.

        func receives the instance (plus the ValidationContext when
        pass_context is True) and returns a ValidationFailure or None.
        """
        rule = DelegateRule(func, pass_context)
        self.add_rule(rule)
        return rule

    # Introspection

    @property
    def rules(self) -> tuple[ValidationRule, ...]:
        return tuple(self._rules)

    def __iter__(self) -> Iterator[ValidationRule]:
        return iter(list(self._rules))

    def create_descriptor(self) -> ValidatorDescriptor:
        return ValidatorDescriptor(self._rules)

    def __repr__(self) -> str:
        return f"{self.name}(rules={len(self._rules)})"
