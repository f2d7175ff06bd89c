"""
PropertyChain - the dotted path leading to the value being validated.
"""

from collections.abc import Iterable, Iterator


class PropertyChain:
    """
    Ordered sequence of property-name segments.

    Nested validation derives a child chain with child(); the parent chain is
    never modified by the derivation.
    """

    SEPARATOR = "."

    def __init__(self, segments: Iterable[str] | None = None):
        self._segments: list[str] = []
        for segment in segments or ():
            self.add(segment)

    def add(self, segment: str | None) -> None:
        """Append a segment in place. Empty segments are ignored."""
        if segment:
            self._segments.append(segment)

    def child(self, segment: str | None) -> "PropertyChain":
        """Return a copy of this chain extended by one segment."""
        chain = PropertyChain(self._segments)
        chain.add(segment)
        return chain

    def build_property_name(self, property_name: str | None) -> str:
        """
        Return the full dotted path for a leaf property name.

        An empty chain yields just the leaf; an empty leaf yields the chain's
        own path with no trailing separator.
        """
        return self.SEPARATOR.join([*self._segments, property_name] if property_name else self._segments)

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __str__(self) -> str:
        return self.SEPARATOR.join(self._segments)

    def __repr__(self) -> str:
        return f"PropertyChain({self._segments!r})"
