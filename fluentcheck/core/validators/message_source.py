"""
Error message sources: where a validator's message template comes from.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from ..exceptions import ConfigurationError
from ..options import validator_options


class ErrorMessageSource(ABC):
    """Supplies the raw template for a validator's error message."""

    @abstractmethod
    def build_template(self) -> str:
        pass


class StringErrorMessageSource(ErrorMessageSource):
    """A literal template given at declaration time."""

    def __init__(self, template: str):
        if template is None:
            raise ConfigurationError("An error message template cannot be None")
        self.template = template

    def build_template(self) -> str:
        return self.template

    def __repr__(self) -> str:
        return f"StringErrorMessageSource({self.template!r})"


class ResourceErrorMessageSource(ErrorMessageSource):
    """
    A template looked up by key when the message is built.

    Without an explicit provider the global options' resource provider is
    used, so replacing validator_options.resource_provider changes the
    messages of every validator declared with a resource key.
    """

    def __init__(self, resource_key: str, provider: Mapping[str, str] | None = None):
        self.resource_key = resource_key
        self.provider = provider

    def build_template(self) -> str:
        provider = self.provider if self.provider is not None else validator_options.resource_provider
        try:
            return provider[self.resource_key]
        except KeyError:
            raise ConfigurationError(f"No error message registered for resource key '{self.resource_key}'")

    def __repr__(self) -> str:
        return f"ResourceErrorMessageSource({self.resource_key!r})"
