"""
Process-wide validator options.

Defaults are read from the environment once at import time and can be
changed programmatically before validators are declared:

    FLUENTCHECK_CASCADE_MODE   continue | stop   (default: continue)
"""

import os
from collections.abc import Callable, Mapping
from enum import Enum

from .internal.naming import split_into_words
from .resources import DEFAULT_MESSAGES


class CascadeMode(str, Enum):
    """Whether a rule keeps running validators after one of them fails."""

    CONTINUE = "continue"
    STOP_ON_FIRST_FAILURE = "stop"

    @classmethod
    def parse(cls, value: "str | CascadeMode") -> "CascadeMode":
        """Accept enum members, their values, or their names in any case."""
        if isinstance(value, CascadeMode):
            return value

        normalized = str(value).strip().lower()
        aliases = {
            "continue": cls.CONTINUE,
            "continue_on_failure": cls.CONTINUE,
            "stop": cls.STOP_ON_FIRST_FAILURE,
            "stop_on_first_failure": cls.STOP_ON_FIRST_FAILURE,
        }
        if normalized not in aliases:
            raise ValueError(
                f"Invalid cascade mode '{value}'. Must be one of: {', '.join(sorted(aliases))}"
            )
        return aliases[normalized]


class ValidatorOptions:
    """
    Global defaults consulted by rules at validation time.

    Attributes:
        cascade_mode: Cascade policy for rules that don't set their own
        display_name_resolver: Maps a member name to its display name
        resource_provider: Message templates looked up by resource key
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Restore defaults (re-reading the environment)."""
        self.cascade_mode: CascadeMode = CascadeMode.parse(
            os.getenv("FLUENTCHECK_CASCADE_MODE", CascadeMode.CONTINUE.value)
        )
        self.display_name_resolver: Callable[[str | None], str | None] = split_into_words
        self.resource_provider: Mapping[str, str] = dict(DEFAULT_MESSAGES)


validator_options = ValidatorOptions()
