"""Date type capability."""

from datetime import date, datetime
from typing import Any

import numpy as np
import pandas as pd

from .._types import DATE, FieldSchema
from .base import FieldType


class DateType(FieldType):
    """Anything that denotes a point in time.

    Accepted values:
    - ``datetime``/``date`` objects and ``pandas.Timestamp``
    - numbers, read as Unix timestamps in seconds
    - strings the pandas date parser understands (``"2023-01-01"``,
      ``"04 Dec 1995 00:12:00 GMT"``, ...)
    """

    python_types = (datetime, date)

    @property
    def name(self) -> str:
        return DATE

    @property
    def allowed_props(self) -> frozenset[str]:
        return frozenset({"required"})

    def validate_type(self, value: Any, field: FieldSchema | None = None) -> bool:
        if value is None or value is pd.NaT or isinstance(value, (bool, np.bool_)):
            return False

        if isinstance(value, (datetime, date)):
            return True

        if isinstance(value, (int, float, np.integer, np.floating)):
            try:
                datetime.fromtimestamp(float(value))
            except (OverflowError, OSError, ValueError):
                return False
            return True

        if isinstance(value, str):
            if not value.strip():
                return False
            try:
                parsed = pd.to_datetime(value)
            except (ValueError, TypeError, OverflowError):
                return False
            return parsed is not pd.NaT

        return False
