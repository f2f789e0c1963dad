"""
Base class for type capabilities.

A ``FieldType`` tells the compiler which properties a field of that type may
declare and tells the validator whether a value belongs to the type. The
compiler and validator only ever talk to this interface, never to the
internals of a concrete type.

## Implementation Requirements

- `name`: the tag the type is registered under by default
- `allowed_props`: properties a field may declare besides `type`
- `validate_type`: check a single value against the field options

## Optional Methods

- `validate_schema`: raise `SchemaDefinitionError` for type-specific
  structural problems of a field (default: no-op)
- `is_empty`: decide whether a value counts as "not provided" for a
  required field (default: missing, or not of the type)

## Implementation Example

```python
import re
from fieldcheck import FieldType, register_type

class EmailType(FieldType):
    EMAIL = re.compile(r"[^@]+@[^@]+\\.[^@]+")

    @property
    def name(self) -> str:
        return "email"

    @property
    def allowed_props(self) -> frozenset[str]:
        return frozenset({"required", "enum"})

    def validate_type(self, value, field=None) -> bool:
        return isinstance(value, str) and bool(self.EMAIL.fullmatch(value))

register_type("email", EmailType())
```
"""

from abc import ABC, abstractmethod
from typing import Any

from .._types import MISSING, FieldSchema


class FieldType(ABC):
    """Capability contract every registered type implements."""

    # Python objects accepted as shorthand for this type's tag
    python_types: tuple[Any, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the default tag of this type."""
        pass

    @property
    @abstractmethod
    def allowed_props(self) -> frozenset[str]:
        """Return the properties a field of this type may declare."""
        pass

    @abstractmethod
    def validate_type(self, value: Any, field: FieldSchema | None = None) -> bool:
        """Check whether ``value`` belongs to this type under ``field`` options."""
        pass

    def validate_schema(self, field: FieldSchema, path: str | None) -> None:
        """Check type-specific field options. Override if needed."""
        pass

    def is_empty(self, value: Any, field: FieldSchema | None = None) -> bool:
        """Return True if ``value`` does not satisfy a ``required`` field."""
        return value is MISSING or not self.validate_type(value, field)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
