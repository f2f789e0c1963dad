"""The ``Schema`` class, the main entry point of fieldcheck."""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ._types import ErrorSet, FieldSchema, ObjectSchema
from .compiler import SchemaCompiler
from .config import FieldcheckSettings, load_settings
from .errors import SchemaDefinitionError, ValidationError
from .loaders import load_schema_from_file
from .registry import TypeRegistry, get_default_registry
from .types import FieldType
from .validator import ValueValidator

logger = logging.getLogger(__name__)


class Schema:
    """A compiled schema that validates values.

    The raw schema is compiled once, at construction time, and is treated
    as immutable afterwards.

    Example:
        >>> schema = Schema({
        ...     "username": {"type": "string", "required": True},
        ...     "age": int,
        ...     "tags": [str],
        ... })
        >>> schema.validate({"username": "sam", "age": 24, "tags": ["admin"]})
        >>> schema.errors({"age": "old", "extra": 1})
        {'username': 'field is required', 'age': 'field is not of the correct type', 'extra': 'unknown property'}
    """

    def __init__(
        self,
        schema: Mapping[str, Any],
        registry: TypeRegistry | None = None,
        settings: FieldcheckSettings | None = None,
    ):
        """Compile a raw schema.

        Args:
            schema: Mapping of field name to raw field schema
            registry: Type registry to use (default: process-wide registry)
            settings: Library settings (default: loaded with ``load_settings``)

        Raises:
            SchemaDefinitionError: If the schema is malformed
        """
        if not isinstance(schema, Mapping):
            raise SchemaDefinitionError("Schema must be a mapping")

        self.registry = registry if registry is not None else get_default_registry()
        self.settings = settings if settings is not None else load_settings()
        self.compiler = SchemaCompiler(self.registry, max_depth=self.settings.max_depth)
        self.validator = ValueValidator(self.registry)
        self.schema: ObjectSchema = self.compiler.compile_schema(schema)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        registry: TypeRegistry | None = None,
        settings: FieldcheckSettings | None = None,
    ) -> "Schema":
        """Create a Schema from a YAML or JSON file."""
        return cls(load_schema_from_file(path), registry=registry, settings=settings)

    def validate(
        self, value: Any, schema: ObjectSchema | None = None, parent_path: str | None = None
    ) -> None:
        """Validate a value, reporting every problem at once.

        Args:
            value: The mapping to validate
            schema: Canonical object schema (default: this schema)
            parent_path: Path prefixed to every error key

        Raises:
            ValidationError: With every path -> message pair if the value is invalid
            TypeError: If ``value`` is not a mapping
        """
        errors = self.errors(value, schema, parent_path)
        if errors:
            raise ValidationError(errors)

    def errors(
        self, value: Any, schema: ObjectSchema | None = None, parent_path: str | None = None
    ) -> ErrorSet:
        """Return the errors of a value without raising. Empty means valid."""
        errors = self.validator.validate_object(
            value, self.schema if schema is None else schema, parent_path
        )
        logger.debug(f"Validation found {len(errors)} error(s)")
        return errors

    def is_valid(self, value: Any) -> bool:
        return not self.errors(value)

    def validate_prop(
        self, value: Any, field: FieldSchema, name: str, parent_path: str | None = None
    ) -> ErrorSet:
        """Validate a single value against a canonical field schema."""
        return self.validator.validate_prop(value, field, name, parent_path)

    def validate_array(self, sequence: Any, array_schema: FieldSchema | None = None, path: str = "") -> ErrorSet:
        """Validate the elements of a sequence against a canonical array field schema."""
        return self.validator.validate_array(sequence, array_schema, path)

    def compile_field(self, raw_field: Any, path: str | None = None) -> FieldSchema:
        """Compile one raw field with this schema's registry and settings."""
        return self.compiler.compile_field(raw_field, path)

    def compile_schema(self, raw_schema: Any, parent_path: str | None = None) -> ObjectSchema:
        """Compile a raw object schema with this schema's registry and settings."""
        return self.compiler.compile_schema(raw_schema, parent_path)

    def register_type(self, tag: str, field_type: FieldType, aliases: Iterable[Any] = ()) -> None:
        """Register a type with this schema's registry.

        Already compiled schemas are not recompiled; the new type is seen by
        later compile and validate calls.
        """
        self.registry.register(tag, field_type, aliases=aliases)

    def __repr__(self) -> str:
        return f"Schema(fields={list(self.schema)!r})"
