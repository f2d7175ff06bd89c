"""
Rule composition and execution engine.
"""

from .descriptor import ValidatorDescriptor
from .exceptions import ConfigurationError, FluentCheckError, ValidationException
from .internal import (
    DefaultValidatorSelector,
    MemberNameValidatorSelector,
    MessageFormatter,
    PropertyAccessor,
    PropertyChain,
    PropertyValidatorContext,
    ValidationContext,
    ValidatorSelector,
)
from .models import ValidationFailure, ValidationResult
from .options import CascadeMode, ValidatorOptions, validator_options
from .rules import DelegateRule, PropertyRule, RuleBuilder, RuleConfigLoader, build_validator
from .validator import Validator

__all__ = [
    "Validator",
    "ValidatorDescriptor",
    "ValidationFailure",
    "ValidationResult",
    "ValidationContext",
    "PropertyValidatorContext",
    "PropertyAccessor",
    "PropertyChain",
    "MessageFormatter",
    "ValidatorSelector",
    "DefaultValidatorSelector",
    "MemberNameValidatorSelector",
    "PropertyRule",
    "DelegateRule",
    "RuleBuilder",
    "RuleConfigLoader",
    "build_validator",
    "CascadeMode",
    "ValidatorOptions",
    "validator_options",
    "FluentCheckError",
    "ConfigurationError",
    "ValidationException",
]
