"""Union matching for array elements.

Each element of an array must match at least one of the alternative field
schemas declared in the array's ``child`` list. Alternatives are tried in
declared order and the first one producing no errors wins. Trials are pure:
the errors of a losing alternative are discarded, and an element matching
no alternative gets exactly one error at ``path[index]``.
"""

from collections.abc import Callable
from typing import Any

from ._types import ErrorSet, FieldSchema, join_path
from .types import SEQUENCE_TYPES

NO_MATCH = "not of the correct type"

PropValidator = Callable[[Any, FieldSchema, str, "str | None"], ErrorSet]


class ArrayMatcher:
    """Validate sequences against a set of alternative element schemas.

    Args:
        validate_prop: Field validator used for each trial, with the signature
            ``(value, field, name, parent_path) -> ErrorSet``
    """

    def __init__(self, validate_prop: PropValidator):
        self._validate_prop = validate_prop

    def validate_array(self, sequence: Any, array_schema: FieldSchema | None, path: str) -> ErrorSet:
        """Validate a sequence.

        Args:
            sequence: List, tuple or numpy array to validate
            array_schema: Canonical array field schema
            path: Path of the array field

        Returns:
            One error per unmatched element, or a single array-level error if
            the array is required but empty

        Raises:
            TypeError: If ``sequence`` is not a sequence or ``array_schema`` is missing
        """
        if not isinstance(sequence, SEQUENCE_TYPES):
            raise TypeError(
                f'Array validator needs the first argument to be an array, instead received "{sequence}"'
            )
        if array_schema is None:
            raise TypeError(
                'Array validator needs the second argument to be the array schema, instead received "None"'
            )

        if array_schema.get("required") is True and len(sequence) == 0:
            return {path: f'array "{path}" is required, but left empty'}

        alternatives = array_schema.get("child") or []
        if not alternatives:
            return {}

        errors: ErrorSet = {}
        for index, element in enumerate(sequence):
            if not any(self._matches(element, alternative, index, path) for alternative in alternatives):
                errors[join_path(path, f"[{index}]")] = NO_MATCH
        return errors

    def _matches(self, element: Any, alternative: FieldSchema, index: int, path: str) -> bool:
        """Try one alternative for one element."""
        return not self._validate_prop(element, alternative, f"[{index}]", path)
