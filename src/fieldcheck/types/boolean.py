"""Boolean type capability."""

from typing import Any

import numpy as np

from .._types import BOOLEAN, FieldSchema
from .base import FieldType


class BooleanType(FieldType):
    python_types = (bool,)

    @property
    def name(self) -> str:
        return BOOLEAN

    @property
    def allowed_props(self) -> frozenset[str]:
        return frozenset({"required", "enum"})

    def validate_type(self, value: Any, field: FieldSchema | None = None) -> bool:
        return isinstance(value, (bool, np.bool_))
