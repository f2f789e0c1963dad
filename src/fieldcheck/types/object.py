"""Object type capability."""

from collections.abc import Mapping
from typing import Any

from .._types import OBJECT, FieldSchema
from .base import FieldType


class ObjectType(FieldType):
    """Mappings. Nested fields are declared in ``child``."""

    python_types = (dict,)

    @property
    def name(self) -> str:
        return OBJECT

    @property
    def allowed_props(self) -> frozenset[str]:
        return frozenset({"required", "child"})

    def validate_type(self, value: Any, field: FieldSchema | None = None) -> bool:
        return isinstance(value, Mapping)
