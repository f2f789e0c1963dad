"""Number type capability."""

import math
from typing import Any

import numpy as np

from .._types import NUMBER, FieldSchema, join_path
from ..errors import SchemaDefinitionError
from .base import FieldType


class NumberType(FieldType):
    """Integers and floats (including numpy scalars), never booleans or NaN.

    With ``coerce: true`` numeric strings such as ``"42"`` are accepted too.
    """

    python_types = (int, float)

    @property
    def name(self) -> str:
        return NUMBER

    @property
    def allowed_props(self) -> frozenset[str]:
        return frozenset({"required", "enum", "coerce"})

    def validate_type(self, value: Any, field: FieldSchema | None = None) -> bool:
        if (field or {}).get("coerce") is True and isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return False

        # bool is a subclass of int
        if isinstance(value, (bool, np.bool_)):
            return False
        if isinstance(value, (int, np.integer)):
            return True
        if not isinstance(value, (float, np.floating)):
            return False
        return not math.isnan(value)

    def validate_schema(self, field: FieldSchema, path: str | None) -> None:
        if "coerce" in field and not isinstance(field["coerce"], bool):
            raise SchemaDefinitionError(
                f'The prop "{join_path(path, "coerce")}" should be a boolean', path
            )
