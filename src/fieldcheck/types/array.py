"""Array type capability."""

from typing import Any

import numpy as np

from .._types import ARRAY, FieldSchema
from .base import FieldType

# Values the array validator iterates over; str is not one of them
SEQUENCE_TYPES = (list, tuple, np.ndarray)


class ArrayType(FieldType):
    """Lists, tuples and numpy arrays. Element alternatives live in ``child``."""

    python_types = (list,)

    @property
    def name(self) -> str:
        return ARRAY

    @property
    def allowed_props(self) -> frozenset[str]:
        return frozenset({"required", "child"})

    def validate_type(self, value: Any, field: FieldSchema | None = None) -> bool:
        return isinstance(value, SEQUENCE_TYPES)
