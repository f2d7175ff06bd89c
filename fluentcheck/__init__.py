"""
fluentcheck - declarative object validation with fluent rule declarations.
"""

from .core import (
    CascadeMode,
    ConfigurationError,
    DefaultValidatorSelector,
    FluentCheckError,
    MemberNameValidatorSelector,
    PropertyAccessor,
    PropertyChain,
    RuleConfigLoader,
    ValidationContext,
    ValidationException,
    ValidationFailure,
    ValidationResult,
    Validator,
    ValidatorSelector,
    validator_options,
)

__version__ = "0.1.0"

__all__ = [
    "Validator",
    "ValidationFailure",
    "ValidationResult",
    "ValidationContext",
    "PropertyAccessor",
    "PropertyChain",
    "ValidatorSelector",
    "DefaultValidatorSelector",
    "MemberNameValidatorSelector",
    "RuleConfigLoader",
    "CascadeMode",
    "validator_options",
    "FluentCheckError",
    "ConfigurationError",
    "ValidationException",
]
