"""
Validation rules, the fluent rule builder and YAML rule configuration.
"""

from .delegate_rule import DelegateRule
from .property_rule import PropertyRule
from .rule_builder import RuleBuilder
from .rule_config import RuleConfigLoader, build_validator

__all__ = [
    "PropertyRule",
    "DelegateRule",
    "RuleBuilder",
    "RuleConfigLoader",
    "build_validator",
]
