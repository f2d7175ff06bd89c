"""
Engine internals: contexts, property chains, message formatting and selectors.
"""

from .accessor import PropertyAccessor
from .context import PropertyValidatorContext, ValidationContext
from .message_formatter import MessageFormatter
from .naming import split_into_words
from .property_chain import PropertyChain
from .selectors import DefaultValidatorSelector, MemberNameValidatorSelector, ValidatorSelector

__all__ = [
    "PropertyAccessor",
    "ValidationContext",
    "PropertyValidatorContext",
    "MessageFormatter",
    "PropertyChain",
    "ValidatorSelector",
    "DefaultValidatorSelector",
    "MemberNameValidatorSelector",
    "split_into_words",
]
