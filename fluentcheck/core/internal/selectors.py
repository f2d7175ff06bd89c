"""
Validator selectors decide, per rule, whether it runs in the current validation.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any


class ValidatorSelector(ABC):
    """Capability consulted by every property rule before it runs."""

    @abstractmethod
    def can_execute(self, rule: Any, property_path: str) -> bool:
        """Return True if the rule for the given full property path should run."""
        pass


class DefaultValidatorSelector(ValidatorSelector):
    """Validates everything."""

    def can_execute(self, rule: Any, property_path: str) -> bool:
        return True


class MemberNameValidatorSelector(ValidatorSelector):
    """
    Runs only the rules for the named members.

    Names are full dotted paths. A rule also runs when its path is a prefix
    of a requested member, so that nested validators can be descended into:
    selecting "customer.address.line1" executes the "customer" and
    "customer.address" rules, whose nested rules are then filtered in turn.
    Selecting "customer" runs every rule nested beneath it.
    """

    def __init__(self, member_names: Iterable[str]):
        self.member_names = frozenset(member_names)

    def can_execute(self, rule: Any, property_path: str) -> bool:
        if property_path in self.member_names:
            return True
        prefix = property_path + "."
        return any(
            name.startswith(prefix) or property_path.startswith(name + ".")
            for name in self.member_names
        )

    def __repr__(self) -> str:
        return f"MemberNameValidatorSelector({sorted(self.member_names)!r})"
