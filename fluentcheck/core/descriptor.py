"""
ValidatorDescriptor - describes a validator's rules without running them.

Used by tooling such as UI metadata generators that need to know which
validators apply to which property.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from .validators.base_validator import PropertyValidator


class ValidatorDescription(BaseModel):
    """Serializable summary of one property validator."""

    rule_type: str
    validator: str
    message_template: str | None = None


class PropertyDescription(BaseModel):
    """Serializable summary of the validators declared for one property."""

    property_name: str
    display_name: str | None = None
    validators: list[ValidatorDescription] = Field(default_factory=list)


class ValidatorDescriptor:
    """
    Groups property validators by member name, in declaration order.

    Rules without a member name (whole-object rules) are not described.
    """

    def __init__(self, rules: Iterable[Any]):
        self.rules = list(rules)

    def _property_rules(self) -> list[Any]:
        return [r for r in self.rules if getattr(r, "property_name", None) or getattr(r, "custom_property_name", None)]

    @staticmethod
    def _member_name(rule: Any) -> str:
        return rule.property_name or rule.custom_property_name

    def get_members_with_validators(self) -> dict[str, list[PropertyValidator]]:
        members: dict[str, list[PropertyValidator]] = {}
        for rule in self._property_rules():
            members.setdefault(self._member_name(rule), []).extend(rule.validators)
        return members

    def get_validators_for_member(self, name: str) -> list[PropertyValidator]:
        return self.get_members_with_validators().get(name, [])

    def get_name(self, property_name: str) -> str | None:
        """Return the display name used in messages for a member."""
        for rule in self._property_rules():
            if self._member_name(rule) == property_name:
                return rule.property_description
        return None

    def describe(self) -> list[PropertyDescription]:
        descriptions: dict[str, PropertyDescription] = {}
        for rule in self._property_rules():
            name = self._member_name(rule)
            entry = descriptions.setdefault(
                name, PropertyDescription(property_name=name, display_name=rule.property_description)
            )
            for validator in rule.validators:
                entry.validators.append(
                    ValidatorDescription(
                        rule_type=validator.rule_type,
                        validator=validator.__class__.__name__,
                        message_template=_safe_template(validator),
                    )
                )
        return list(descriptions.values())


def _safe_template(validator: PropertyValidator) -> str | None:
    # Nested validators have no message of their own.
    if not getattr(validator.error_source, "resource_key", True):
        return None
    return validator.error_message_template
