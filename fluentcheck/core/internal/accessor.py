"""
PropertyAccessor - a named, pure function resolving a property on an instance.
"""

from collections.abc import Callable, Mapping
from typing import Any

from ..exceptions import ConfigurationError


class PropertyAccessor:
    """
    Pairs a stable member identifier with an accessor function.

    The name is used for default display names, failure paths and selector
    matching. It may be None (e.g. for a lambda), in which case the rule must
    be given an explicit name with with_name().
    """

    def __init__(self, name: str | None, getter: Callable[[Any], Any]):
        if not callable(getter):
            raise ConfigurationError("PropertyAccessor getter must be callable")
        self.name = name
        self.getter = getter

    def resolve(self, instance: Any) -> Any:
        return self.getter(instance)

    @classmethod
    def from_name(cls, path: str) -> "PropertyAccessor":
        """
        Build an accessor for an attribute or mapping key.

        Dotted paths walk nested members ("address.postcode"). A missing
        member or an intermediate None resolves to None.
        """
        if not path or not isinstance(path, str):
            raise ConfigurationError("Property path must be a non-empty string")

        parts = path.split(".")

        def getter(instance: Any) -> Any:
            current = instance
            for part in parts:
                if current is None:
                    return None
                if isinstance(current, Mapping):
                    current = current.get(part)
                else:
                    current = getattr(current, part, None)
            return current

        return cls(path, getter)

    @classmethod
    def from_callable(cls, func: Callable[[Any], Any], name: str | None = None) -> "PropertyAccessor":
        """Wrap a function; its __name__ is used unless it is a lambda."""
        if name is None:
            func_name = getattr(func, "__name__", None)
            if func_name and func_name != "<lambda>":
                name = func_name
        return cls(name, func)

    @classmethod
    def create(cls, target: Any, name: str | None = None) -> "PropertyAccessor":
        """Coerce a path string, callable or existing accessor into a PropertyAccessor."""
        if target is None:
            raise ConfigurationError("Cannot create a property rule for None")
        if isinstance(target, PropertyAccessor):
            return target if name is None else cls(name, target.getter)
        if isinstance(target, str):
            accessor = cls.from_name(target)
            return accessor if name is None else cls(name, accessor.getter)
        if callable(target):
            return cls.from_callable(target, name)
        raise ConfigurationError(f"Cannot build a property accessor from {type(target).__name__}")

    def __repr__(self) -> str:
        return f"PropertyAccessor({self.name!r})"
