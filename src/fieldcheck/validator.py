"""Value validation against canonical schemas.

Validation never stops at the first problem: every declared field of an
object is checked and every failure is recorded in an ``ErrorSet`` keyed by
the full dotted/bracketed path of the field (``address.city``,
``tags[2]``). An empty ``ErrorSet`` means the value is valid.

Only canonical schemas (the output of ``SchemaCompiler``) are accepted here;
shorthand forms are never interpreted at validation time.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ._types import ARRAY, MISSING, OBJECT, ErrorSet, FieldSchema, ObjectSchema, join_path
from .arrays import ArrayMatcher
from .errors import SchemaDefinitionError
from .registry import TypeRegistry, get_default_registry

logger = logging.getLogger(__name__)

REQUIRED = "field is required"
WRONG_TYPE = "field is not of the correct type"
UNKNOWN_PROPERTY = "unknown property"


class ValueValidator:
    """Recursive validator for objects and fields.

    Arrays are delegated to an ``ArrayMatcher`` that shares this validator's
    ``validate_prop`` to try each element against the declared alternatives.
    """

    def __init__(self, registry: TypeRegistry | None = None):
        self.registry = registry if registry is not None else get_default_registry()
        self.arrays = ArrayMatcher(self.validate_prop)

    def validate_object(
        self, value: Any, schema: ObjectSchema, parent_path: str | None = None
    ) -> ErrorSet:
        """Validate a mapping against an object schema.

        Args:
            value: The mapping to validate
            schema: Canonical object schema
            parent_path: Path of the enclosing field, prefixed to every error key

        Returns:
            Every error found, keyed by field path

        Raises:
            TypeError: If ``value`` is not a mapping
        """
        if not isinstance(value, Mapping):
            raise TypeError(
                f"Object validator needs the first argument to be a mapping, "
                f"instead received {type(value).__name__}"
            )

        errors: ErrorSet = {}
        for name, field in schema.items():
            errors.update(self.validate_prop(value.get(name, MISSING), field, name, parent_path))

        for key in value:
            if key not in schema:
                errors[join_path(parent_path, str(key))] = UNKNOWN_PROPERTY

        return errors

    def validate_prop(
        self, value: Any, field: FieldSchema, name: str, parent_path: str | None = None
    ) -> ErrorSet:
        """Validate a single value against a canonical field schema.

        At most one error is recorded for the field itself; errors of nested
        object fields and array elements are merged in with qualified paths.

        Args:
            value: The value, or ``MISSING`` if absent from its parent
            field: Canonical field schema
            name: Field name, or an index segment such as ``"[0]"``
            parent_path: Path of the enclosing field

        Returns:
            Every error found, keyed by field path
        """
        path = join_path(parent_path, name)
        required = field.get("required") is True

        if value is MISSING and not required:
            return {}

        field_type = self.registry.lookup(field.get("type"))
        if field_type is None:
            raise SchemaDefinitionError(f'Invalid type for the field "{path}"', path)

        if required and field_type.is_empty(value, field):
            return {path: REQUIRED}
        if not field_type.validate_type(value, field):
            return {path: WRONG_TYPE}

        enum = field.get("enum")
        if enum is not None and value not in enum:
            return {path: f"field can only be one of: {', '.join(str(option) for option in enum)}"}

        if field["type"] == OBJECT:
            if required and len(value) == 0:
                return {path: f'object "{path}" is required, but left empty'}
            return self.validate_object(value, field.get("child", {}), path)

        if field["type"] == ARRAY:
            return self.validate_array(value, field, path)

        return {}

    def validate_array(self, sequence: Any, array_schema: FieldSchema | None, path: str) -> ErrorSet:
        """Validate every element of a sequence against the array's alternatives."""
        return self.arrays.validate_array(sequence, array_schema, path)
