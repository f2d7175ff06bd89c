"""
MessageFormatter - placeholder substitution for error message templates.
"""

import re
from typing import Any

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


class MessageFormatter:
    """
    Accumulates placeholder values and substitutes them into a template.

    Named values are referenced as {name}; positional values added with
    append_additional_arguments() are referenced as {0}, {1}, ...
    Placeholders with no recorded value are left untouched.

    One formatter is created per validator invocation and is not shared
    between sibling validators.
    """

    PROPERTY_NAME = "property_name"

    def __init__(self):
        self._placeholder_values: dict[str, Any] = {}
        self._additional_arguments: list[Any] = []

    def append_argument(self, name: str, value: Any) -> "MessageFormatter":
        self._placeholder_values[name] = value
        return self

    def append_property_name(self, name: str | None) -> "MessageFormatter":
        return self.append_argument(self.PROPERTY_NAME, name)

    def append_additional_arguments(self, *values: Any) -> "MessageFormatter":
        self._additional_arguments.extend(values)
        return self

    @property
    def placeholder_values(self) -> dict[str, Any]:
        return dict(self._placeholder_values)

    @property
    def additional_arguments(self) -> tuple[Any, ...]:
        return tuple(self._additional_arguments)

    def build_message(self, template: str) -> str:
        """Substitute every known placeholder in the template."""

        def replace(match: re.Match) -> str:
            key = match.group(1)
            if key in self._placeholder_values:
                return str(self._placeholder_values[key])
            if key.isdigit() and int(key) < len(self._additional_arguments):
                return str(self._additional_arguments[int(key)])
            return match.group(0)

        return _PLACEHOLDER.sub(replace, template)
