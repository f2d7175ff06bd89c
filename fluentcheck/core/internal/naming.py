"""
Display-name derivation for property rules.
"""

import re

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def split_into_words(name: str | None) -> str | None:
    """
    Turn a member identifier into a human-readable display name.

    Handles camelCase, PascalCase, snake_case and dotted paths:

        >>> split_into_words("firstName")
        'First Name'
        >>> split_into_words("date_of_birth")
        'Date Of Birth'
        >>> split_into_words("HTTPServer")
        'HTTP Server'
    """
    if not name:
        return None

    words = []
    for chunk in re.split(r"[\s_.\-]+", name):
        if not chunk:
            continue
        words.extend(w for w in _WORD_BOUNDARY.split(chunk) if w)

    if not words:
        return None

    return " ".join(w[0].upper() + w[1:] for w in words)
