"""
Property validator implementations.

Provides presence, comparison, length, regex, predicate and nested-object
validators, plus the message sources they build their errors from.
"""

from .base_validator import PropertyValidator
from .child_validator import ChildValidatorAdaptor
from .comparison_validator import (
    BetweenValidator,
    ComparisonValidator,
    EqualValidator,
    GreaterThanOrEqualValidator,
    GreaterThanValidator,
    LessThanOrEqualValidator,
    LessThanValidator,
    NotEqualValidator,
)
from .length_validator import (
    ExactLengthValidator,
    LengthValidator,
    MaximumLengthValidator,
    MinimumLengthValidator,
)
from .message_source import ErrorMessageSource, ResourceErrorMessageSource, StringErrorMessageSource
from .predicate_validator import DelegatingValidator, PredicateValidator
from .regex_validator import EmailValidator, RegexValidator
from .required_validator import EmptyValidator, NotEmptyValidator, NotNullValidator, NullValidator

__all__ = [
    "PropertyValidator",
    "ErrorMessageSource",
    "StringErrorMessageSource",
    "ResourceErrorMessageSource",
    "NotNullValidator",
    "NotEmptyValidator",
    "NullValidator",
    "EmptyValidator",
    "ComparisonValidator",
    "EqualValidator",
    "NotEqualValidator",
    "LessThanValidator",
    "LessThanOrEqualValidator",
    "GreaterThanValidator",
    "GreaterThanOrEqualValidator",
    "BetweenValidator",
    "LengthValidator",
    "ExactLengthValidator",
    "MaximumLengthValidator",
    "MinimumLengthValidator",
    "RegexValidator",
    "EmailValidator",
    "PredicateValidator",
    "DelegatingValidator",
    "ChildValidatorAdaptor",
]
