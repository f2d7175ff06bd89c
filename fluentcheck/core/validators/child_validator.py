"""
ChildValidatorAdaptor - runs a whole validator against a nested property value.
"""

from typing import Any

from ..internal.context import PropertyValidatorContext, ValidationContext
from ..models import ValidationFailure
from .base_validator import PropertyValidator


class ChildValidatorAdaptor(PropertyValidator):
    """
    Adapts a Validator so it can be attached to a property rule.

    The nested object is validated with a derived context whose chain is the
    parent chain plus the member name, so nested failures are reported as
    "customer.address.line1". The parent's selector is passed down.
    A nested Validator is run without its own logging and metrics.
    A None property value produces no failures.
    """

    rule_type = "child_validator"

    def __init__(self, validator: Any):
        super().__init__()
        self.validator = validator

    def validate(self, context: PropertyValidatorContext) -> list[ValidationFailure]:
        instance = context.property_value
        if instance is None:
            return []

        parent = context.parent_context
        segment = context.member_name or context.property_description
        if parent is not None:
            child_context = parent.clone_for_child(instance, segment)
        else:
            child_context = ValidationContext(instance, context.property_chain.child(segment))

        collect = getattr(self.validator, "collect_failures", None)
        if collect is not None:
            return list(collect(child_context))
        return list(self.validator.validate(child_context).errors)

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        return not self.validate(context)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.validator.__class__.__name__})"
