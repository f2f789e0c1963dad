"""Built-in type capabilities.

| Tag | Python shorthand | Extra options |
| --- | --- | --- |
| ``string`` | ``str`` | ``enum``, ``test`` (regular expression) |
| ``number`` | ``int``, ``float`` | ``enum``, ``coerce`` |
| ``boolean`` | ``bool`` | ``enum`` |
| ``date`` | ``datetime``, ``date`` | |
| ``object`` | ``dict`` | ``child`` (mapping of fields) |
| ``array`` | ``list`` | ``child`` (list of alternative fields) |

Every type also accepts ``required``.
"""

from .array import SEQUENCE_TYPES, ArrayType
from .base import FieldType
from .boolean import BooleanType
from .date import DateType
from .number import NumberType
from .object import ObjectType
from .string import StringType


def builtin_types() -> list[FieldType]:
    """Return fresh instances of every built-in type."""
    return [StringType(), NumberType(), BooleanType(), DateType(), ObjectType(), ArrayType()]


__all__ = [
    "FieldType",
    "StringType",
    "NumberType",
    "BooleanType",
    "DateType",
    "ObjectType",
    "ArrayType",
    "SEQUENCE_TYPES",
    "builtin_types",
]
