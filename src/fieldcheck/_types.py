"""Type definitions shared by the fieldcheck compiler and validators.

Canonical schema nodes are plain dictionaries. After compilation a
``FieldSchema`` always has a registered string ``type`` tag, an ``object``
field always has a ``child`` mapping and an ``array`` field always has a
``child`` list of alternative field schemas.
"""

from typing import Any, Final

# A canonical field node: {"type": "string", "required": True, ...}
FieldSchema = dict[str, Any]

# Field name -> canonical field node
ObjectSchema = dict[str, FieldSchema]

# Field path -> human readable message
ErrorSet = dict[str, str]

STRING: Final = "string"
NUMBER: Final = "number"
BOOLEAN: Final = "boolean"
DATE: Final = "date"
OBJECT: Final = "object"
ARRAY: Final = "array"


class _Missing:
    """Marker for a value that is absent from its parent object."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def join_path(parent: str | None, name: str) -> str:
    """Build a dotted/bracketed field path.

    Args:
        parent: Path of the enclosing field, if any
        name: Field name, or an index segment such as ``"[2]"``

    Returns:
        ``name`` alone at the root, ``parent[2]`` for index segments and
        ``parent.name`` otherwise.
    """
    if not parent:
        return name
    if name.startswith("["):
        return f"{parent}{name}"
    return f"{parent}.{name}"


__all__ = [
    "FieldSchema",
    "ObjectSchema",
    "ErrorSet",
    "STRING",
    "NUMBER",
    "BOOLEAN",
    "DATE",
    "OBJECT",
    "ARRAY",
    "MISSING",
    "join_path",
]
