"""Schema compiler for fieldcheck.

The compiler turns a user-authored schema, possibly written with shorthand
forms, into the canonical tree the validator works on:

- a bare type (``"string"`` or ``str``) becomes ``{"type": "string"}``
- a bare list (``[str, int]``) becomes ``{"type": "array", "child": [...]}``
- a bare mapping without a ``type`` key becomes ``{"type": "object", "child": {...}}``

While doing so it checks the schema's own structure and raises a
``SchemaDefinitionError`` on the first defect found. Compiling an already
canonical schema returns an equal tree.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ._types import ARRAY, OBJECT, FieldSchema, ObjectSchema, join_path
from .errors import SchemaDefinitionError
from .registry import TypeRegistry, get_default_registry

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


class SchemaCompiler:
    """Compile raw schemas into canonical ``FieldSchema``/``ObjectSchema`` trees.

    Schemas are assumed to be finite trees; there is no cycle detection.
    Nesting deeper than ``max_depth`` is rejected instead of exhausting the
    interpreter stack. The validator recurses once per schema level, so the
    same bound applies to validation.
    """

    def __init__(self, registry: TypeRegistry | None = None, max_depth: int = DEFAULT_MAX_DEPTH):
        """Initialize the compiler.

        Args:
            registry: Type registry to resolve tags against (default: process-wide registry)
            max_depth: Maximum accepted schema nesting depth
        """
        self.registry = registry if registry is not None else get_default_registry()
        self.max_depth = max_depth

    def compile_schema(
        self, raw_schema: Any, parent_path: str | None = None, _depth: int = 0
    ) -> ObjectSchema:
        """Compile every field of an object schema.

        Args:
            raw_schema: Mapping of field name to raw field schema
            parent_path: Path of the enclosing field, used in error messages

        Returns:
            The canonical object schema

        Raises:
            SchemaDefinitionError: On the first structural defect
        """
        if not isinstance(raw_schema, Mapping):
            raise SchemaDefinitionError("Schema must be a mapping", parent_path)

        compiled = {
            name: self.compile_field(raw_field, join_path(parent_path, str(name)), _depth)
            for name, raw_field in raw_schema.items()
        }

        if _depth == 0:
            logger.debug(f"Compiled schema with {len(compiled)} top-level fields")
        return compiled

    def compile_field(self, raw_field: Any, path: str | None = None, _depth: int = 0) -> FieldSchema:
        """Compile a single field into its canonical form.

        Args:
            raw_field: Bare type, bare list, bare mapping or verbose field schema
            path: Path of the field, used in error messages

        Returns:
            The canonical field schema. The input is never modified.

        Raises:
            SchemaDefinitionError: On the first structural defect
        """
        if _depth >= self.max_depth:
            raise SchemaDefinitionError(
                f'Schema nesting exceeds the maximum depth of {self.max_depth} at "{path or ""}"',
                path,
            )

        field = self._expand_shortcut(raw_field, path)

        tag = self.registry.resolve_tag(field.get("type"))
        if tag is None:
            raise SchemaDefinitionError(f'Invalid type for the field "{path or ""}"', path)
        field["type"] = tag
        field_type = self.registry.lookup(tag)

        if tag == OBJECT:
            child = field.get("child", {})
            if not isinstance(child, Mapping):
                raise SchemaDefinitionError(
                    f'The prop "{join_path(path, "child")}" should be a mapping', path
                )
            field["child"] = self.compile_schema(child, path, _depth + 1)
        elif tag == ARRAY:
            child = field.get("child", [])
            if not isinstance(child, (list, tuple)):
                raise SchemaDefinitionError(
                    f'The prop "{join_path(path, "child")}" should be a list', path
                )
            field["child"] = [
                self.compile_field(alternative, join_path(path, f"[{index}]"), _depth + 1)
                for index, alternative in enumerate(child)
            ]

        for prop in field:
            if prop != "type" and prop not in field_type.allowed_props:
                raise SchemaDefinitionError(f'Unknown property "{join_path(path, prop)}"', path)

        if "required" in field and not isinstance(field["required"], bool):
            raise SchemaDefinitionError(
                f'The prop "{join_path(path, "required")}" should be a boolean', path
            )

        field_type.validate_schema(field, path)

        if "enum" in field:
            self._check_enum(field, path)
        return field

    def _expand_shortcut(self, raw_field: Any, path: str | None) -> FieldSchema:
        """Turn any accepted field syntax into a fresh verbose dictionary."""
        if self.registry.resolve_tag(raw_field) is not None:
            return {"type": raw_field}
        if isinstance(raw_field, (list, tuple)):
            return {"type": ARRAY, "child": list(raw_field)}
        if isinstance(raw_field, Mapping):
            if "type" not in raw_field:
                return {"type": OBJECT, "child": dict(raw_field)}
            return dict(raw_field)
        raise SchemaDefinitionError(f'Invalid type for the field "{path or ""}"', path)

    def _check_enum(self, field: FieldSchema, path: str | None) -> None:
        enum = field["enum"]
        if not isinstance(enum, (list, tuple)):
            raise SchemaDefinitionError(f'The prop "{join_path(path, "enum")}" should be a list', path)

        field_type = self.registry.lookup(field["type"])
        for index, option in enumerate(enum):
            if not field_type.validate_type(option, field):
                raise SchemaDefinitionError(
                    f"The enum at \"{join_path(path, 'enum')}[{index}]\" doesn't match the schema type",
                    path,
                )
        field["enum"] = list(enum)
