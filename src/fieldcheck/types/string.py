"""String type capability."""

import re
from typing import Any

from .._types import MISSING, STRING, FieldSchema
from ..errors import SchemaDefinitionError
from .base import FieldType


class StringType(FieldType):
    """Text values, optionally constrained by a regular expression ``test``."""

    python_types = (str,)

    @property
    def name(self) -> str:
        return STRING

    @property
    def allowed_props(self) -> frozenset[str]:
        return frozenset({"required", "enum", "test"})

    def validate_type(self, value: Any, field: FieldSchema | None = None) -> bool:
        if not isinstance(value, str):
            return False
        pattern = (field or {}).get("test")
        if pattern is None:
            return True
        if isinstance(pattern, (str, re.Pattern)):
            return re.search(pattern, value) is not None
        return False

    def is_empty(self, value: Any, field: FieldSchema | None = None) -> bool:
        return value is MISSING or value is None or (isinstance(value, str) and value == "")

    def validate_schema(self, field: FieldSchema, path: str | None) -> None:
        """Make sure ``test`` is a regular expression.

        A string is accepted and compiled in place so schemas loaded from
        YAML or JSON can declare patterns.
        """
        if "test" not in field:
            return

        pattern = field["test"]
        if isinstance(pattern, re.Pattern):
            return
        if isinstance(pattern, str):
            try:
                field["test"] = re.compile(pattern)
            except re.error as e:
                raise SchemaDefinitionError(
                    f'The "test" option in the field "{path or ""}" is not a valid regular expression: {e}',
                    path,
                ) from e
            return

        raise SchemaDefinitionError(
            f'The "test" option in the field "{path or ""}" should be a regular expression', path
        )
