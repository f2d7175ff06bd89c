"""
Base class for all property validators.

A property validator is a single assertion about one property value. It
reports at most one ValidationFailure per invocation.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from ..internal.context import PropertyValidatorContext
from ..models import ValidationFailure
from .message_source import ErrorMessageSource, ResourceErrorMessageSource, StringErrorMessageSource


class PropertyValidator(ABC):
    """
    Abstract base class for property validators.

    Subclasses implement is_valid() and may append their own placeholder
    values to context.message_formatter before returning False.
    """

    # Short identifier used by descriptors, metrics and YAML configuration.
    rule_type: str = "property"
    default_message_key: str = ""

    def __init__(self, error_message: str | None = None, resource_key: str | None = None):
        """
        Initialize validator.

        Args:
            error_message: Literal message template (takes precedence)
            resource_key: Key into the resource provider, defaults to default_message_key
        """
        self.custom_format_args: list[Callable[[Any], Any]] = []
        self.custom_state_provider: Callable[[Any], Any] | None = None
        self.error_source: ErrorMessageSource
        if error_message is not None:
            self.error_source = StringErrorMessageSource(error_message)
        else:
            self.error_source = ResourceErrorMessageSource(resource_key or self.default_message_key)

    def set_error_message(self, template: str) -> None:
        self.error_source = StringErrorMessageSource(template)

    def set_error_message_resource(self, resource_key: str, provider: Mapping[str, str] | None = None) -> None:
        self.error_source = ResourceErrorMessageSource(resource_key, provider)

    @property
    def error_message_template(self) -> str:
        return self.error_source.build_template()

    def validate(self, context: PropertyValidatorContext) -> list[ValidationFailure]:
        """
        Run the assertion.

        Returns:
            An empty list on success, otherwise a single ValidationFailure
        """
        context.message_formatter.append_property_name(context.property_description)

        if not self.is_valid(context):
            return [self.create_validation_error(context)]

        return []

    @abstractmethod
    def is_valid(self, context: PropertyValidatorContext) -> bool:
        pass

    def create_validation_error(self, context: PropertyValidatorContext) -> ValidationFailure:
        # Format args and state are evaluated now, against the live instance.
        context.message_formatter.append_additional_arguments(
            *(func(context.instance) for func in self.custom_format_args)
        )

        error = context.message_formatter.build_message(self.error_message_template)

        custom_state = None
        if self.custom_state_provider is not None:
            custom_state = self.custom_state_provider(context.instance)

        return ValidationFailure(
            property_name=context.property_name,
            error_message=error,
            attempted_value=context.property_value,
            custom_state=custom_state,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
