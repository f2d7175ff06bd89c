"""
Validation contexts passed through rules and property validators.
"""

from collections.abc import Callable
from typing import Any

from .message_formatter import MessageFormatter
from .property_chain import PropertyChain
from .selectors import DefaultValidatorSelector, ValidatorSelector


class ValidationContext:
    """
    State for one top-level validate() call.

    Attributes:
        instance_to_validate: The object under validation
        property_chain: Path of the enclosing properties (empty at the root)
        selector: Decides which rules execute
    """

    def __init__(
        self,
        instance_to_validate: Any,
        property_chain: PropertyChain | None = None,
        selector: ValidatorSelector | None = None,
    ):
        self.instance_to_validate = instance_to_validate
        self.property_chain = property_chain if property_chain is not None else PropertyChain()
        self.selector = selector if selector is not None else DefaultValidatorSelector()

    @property
    def is_child_context(self) -> bool:
        return len(self.property_chain) > 0

    def clone_for_child(self, instance: Any, segment: str | None) -> "ValidationContext":
        """Derive a context for a nested object, extending the chain by one segment."""
        return ValidationContext(instance, self.property_chain.child(segment), self.selector)

    def __repr__(self) -> str:
        return (
            f"ValidationContext(instance={self.instance_to_validate!r}, "
            f"chain='{self.property_chain}')"
        )


_UNRESOLVED = object()


class PropertyValidatorContext:
    """
    Context handed to a single PropertyValidator invocation.

    The property value is resolved lazily and cached, so a validator that
    never looks at the value never triggers the accessor.
    """

    def __init__(
        self,
        property_description: str | None,
        instance: Any,
        property_value_func: Callable[[Any], Any],
        property_name: str,
        member_name: str | None = None,
        parent_context: ValidationContext | None = None,
    ):
        self.property_description = property_description
        self.instance = instance
        self.property_name = property_name
        self.member_name = member_name
        self.parent_context = parent_context
        self.property_chain = parent_context.property_chain if parent_context else PropertyChain()
        self.message_formatter = MessageFormatter()
        self._property_value_func = property_value_func
        self._property_value: Any = _UNRESOLVED

    @property
    def property_value(self) -> Any:
        if self._property_value is _UNRESOLVED:
            self._property_value = self._property_value_func(self.instance)
        return self._property_value
