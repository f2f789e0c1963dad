"""
Type registry.

The registry maps a type tag (``"string"``, ``"number"``, ...) to the
``FieldType`` capability that validates it. Python objects can be
registered as aliases of a tag so schemas may write ``str`` instead of
``"string"``; the compiler always rewrites an alias to its tag.

Registration is a startup-time activity: register every custom type before
compiling the schemas that use it. Registering a tag again replaces the
previous capability (last registration wins). No locking is performed.

Example:
    >>> from fieldcheck.registry import TypeRegistry
    >>> registry = TypeRegistry()
    >>> registry.resolve_tag(str)
    'string'
    >>> registry.lookup("number")
    <NumberType 'number'>
"""

import logging
from collections.abc import Iterable
from typing import Any

from .types import FieldType, builtin_types

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Registry for managing type capabilities.

    Args:
        seed_defaults: Register the built-in types on construction (default: True)
    """

    def __init__(self, seed_defaults: bool = True):
        self._types: dict[str, FieldType] = {}
        self._aliases: dict[Any, str] = {}

        if seed_defaults:
            for field_type in builtin_types():
                self.register(field_type.name, field_type, aliases=field_type.python_types)

    def register(self, tag: str, field_type: FieldType, aliases: Iterable[Any] = ()) -> None:
        """Register a type capability under ``tag``.

        Args:
            tag: The type tag used in schemas
            field_type: The capability validating values of this type
            aliases: Hashable objects (usually Python types) accepted as shorthand for ``tag``

        Raises:
            TypeError: If ``tag`` is not a string or ``field_type`` is not a FieldType
        """
        if not isinstance(tag, str) or not tag:
            raise TypeError(f"Type tag must be a non-empty string, got {tag!r}")
        if not isinstance(field_type, FieldType):
            raise TypeError(f"Type {tag!r} must be a FieldType instance, got {type(field_type).__name__}")

        if tag in self._types:
            logger.debug(f"Overriding type {tag!r}: {self._types[tag]!r} -> {field_type!r}")
        self._types[tag] = field_type

        for alias in aliases:
            self._aliases[alias] = tag

        logger.debug(f"Registered type: {tag}")

    def lookup(self, tag: Any) -> FieldType | None:
        """Get the capability for a tag or alias, or None if unknown."""
        resolved = self.resolve_tag(tag)
        if resolved is None:
            return None
        return self._types[resolved]

    def resolve_tag(self, tag: Any) -> str | None:
        """Return the canonical tag for a tag or alias, or None if unknown."""
        if isinstance(tag, str):
            return tag if tag in self._types else None
        try:
            return self._aliases.get(tag)
        except TypeError:
            # Unhashable values (lists, dicts) are never aliases
            return None

    def list_types(self) -> list[str]:
        """List all registered type tags."""
        return list(self._types.keys())

    def __contains__(self, tag: Any) -> bool:
        return self.resolve_tag(tag) is not None


# Process-wide registry used when no explicit registry is given
_default_registry = TypeRegistry()


def get_default_registry() -> TypeRegistry:
    """Get the process-wide type registry."""
    return _default_registry


def register_type(tag: str, field_type: FieldType, aliases: Iterable[Any] = ()) -> None:
    """Register a type with the process-wide registry."""
    _default_registry.register(tag, field_type, aliases=aliases)
