"""Tests for fieldcheck.compiler module."""

import re
from datetime import datetime

import pytest

from fieldcheck import SchemaCompiler, SchemaDefinitionError


class TestShortcutExpansion:
    """Shorthand syntax is rewritten to verbose field schemas."""

    @pytest.mark.parametrize(
        "raw, tag",
        [
            (str, "string"),
            (int, "number"),
            (float, "number"),
            (bool, "boolean"),
            (datetime, "date"),
            (dict, "object"),
            (list, "array"),
            ("string", "string"),
            ("date", "date"),
        ],
    )
    def test_bare_types(self, compiler, raw, tag):
        """A bare type or tag becomes {"type": tag}."""
        expected = {"type": tag}
        if tag == "object":
            expected["child"] = {}
        elif tag == "array":
            expected["child"] = []

        assert compiler.compile_field(raw, "propName") == expected

    def test_bare_list_is_array(self, compiler):
        assert compiler.compile_field([str], "propName") == {
            "type": "array",
            "child": [{"type": "string"}],
        }

    def test_bare_mapping_is_object(self, compiler):
        assert compiler.compile_field({"name": str}, "propName") == {
            "type": "object",
            "child": {"name": {"type": "string"}},
        }

    def test_compile_schema_returns_verbose_tree(self, compiler):
        """A whole shorthand schema is expanded recursively."""
        short_schema = {
            "name": str,
            "favoriteStuff": [str],
            "contactInfo": {"address": str, "phone": int},
        }

        assert compiler.compile_schema(short_schema) == {
            "name": {"type": "string"},
            "favoriteStuff": {"type": "array", "child": [{"type": "string"}]},
            "contactInfo": {
                "type": "object",
                "child": {
                    "address": {"type": "string"},
                    "phone": {"type": "number"},
                },
            },
        }

    def test_shorthand_and_verbose_are_equivalent(self, compiler):
        assert compiler.compile_schema({"name": str}) == compiler.compile_schema(
            {"name": {"type": "string"}}
        )
        assert compiler.compile_schema({"name": "string"}) == compiler.compile_schema(
            {"name": {"type": str}}
        )

    def test_compilation_is_idempotent(self, compiler):
        """Compiling a canonical schema yields an equal tree."""
        raw = {
            "user": {
                "name": {"type": str, "required": True, "test": r"^[A-Z]"},
                "tags": [str, {"type": "number", "enum": [1, 2]}],
                "address": {"type": "object"},
            }
        }
        canonical = compiler.compile_schema(raw)

        assert compiler.compile_schema(canonical) == canonical

    def test_input_is_not_modified(self, compiler):
        raw = {"tags": {"type": "array"}, "name": {"type": "string", "test": "^a"}}
        compiler.compile_schema(raw)

        assert raw == {"tags": {"type": "array"}, "name": {"type": "string", "test": "^a"}}

    def test_default_children(self, compiler):
        assert compiler.compile_field({"type": "object"}) == {"type": "object", "child": {}}
        assert compiler.compile_field({"type": "array"}) == {"type": "array", "child": []}


class TestStructuralErrors:
    """The compiler fails fast on the first structural defect."""

    def test_invalid_type(self, compiler):
        with pytest.raises(SchemaDefinitionError, match='Invalid type for the field "name"'):
            compiler.compile_field({"name": {"type": "whatever"}})

        with pytest.raises(SchemaDefinitionError, match='Invalid type for the field "name"'):
            compiler.compile_field({"name": "whatever"})

    def test_mapping_of_values_is_not_a_schema(self, compiler):
        """A mapping holding plain values is an object whose fields have invalid types."""
        with pytest.raises(SchemaDefinitionError, match='Invalid type for the field "propName.name"'):
            compiler.compile_field({"name": "Slim Shady"}, "propName")

    def test_unknown_property(self, compiler):
        with pytest.raises(SchemaDefinitionError, match='Unknown property "test.imNotWanted"') as exc:
            compiler.compile_field({"type": str, "imNotWanted": "but why?"}, "test")

        assert exc.value.path == "test"

    def test_property_allowed_for_other_type(self, compiler):
        """``test`` belongs to strings only."""
        with pytest.raises(SchemaDefinitionError, match='Unknown property "age.test"'):
            compiler.compile_schema({"age": {"type": int, "test": r"\d+"}})

    def test_required_must_be_boolean(self, compiler):
        with pytest.raises(SchemaDefinitionError, match='The prop "test.required" should be a boolean'):
            compiler.compile_field({"type": str, "required": "yes please!"}, "test")

    def test_enum_must_be_a_list(self, compiler):
        with pytest.raises(SchemaDefinitionError, match='The prop "test.enum" should be a list'):
            compiler.compile_field({"type": str, "enum": "this or that"}, "test")

    def test_enum_entries_must_match_type(self, compiler):
        with pytest.raises(
            SchemaDefinitionError, match=re.escape("The enum at \"test.enum[0]\" doesn't match the schema type")
        ):
            compiler.compile_field({"type": str, "enum": [42]}, "test")

        with pytest.raises(
            SchemaDefinitionError, match=re.escape("The enum at \"test.enum[1]\" doesn't match the schema type")
        ):
            compiler.compile_field({"type": int, "enum": [42, "Forty two"]}, "test")

    def test_nested_errors_carry_full_path(self, compiler):
        with pytest.raises(SchemaDefinitionError, match='Unknown property "user.address.city.nope"'):
            compiler.compile_schema({"user": {"address": {"city": {"type": str, "nope": 1}}}})

        with pytest.raises(SchemaDefinitionError, match=re.escape('Invalid type for the field "tags[1]"')):
            compiler.compile_schema({"tags": [str, "whatever"]})

    def test_child_must_match_container(self, compiler):
        with pytest.raises(SchemaDefinitionError, match='The prop "address.child" should be a mapping'):
            compiler.compile_field({"type": "object", "child": [str]}, "address")

        with pytest.raises(SchemaDefinitionError, match='The prop "tags.child" should be a list'):
            compiler.compile_field({"type": "array", "child": "string"}, "tags")

    def test_non_mapping_schema(self, compiler):
        with pytest.raises(SchemaDefinitionError, match="Schema must be a mapping"):
            compiler.compile_schema([str])

    def test_type_specific_hook(self, compiler):
        with pytest.raises(SchemaDefinitionError, match='"test" option in the field "code"'):
            compiler.compile_field({"type": "string", "test": 42}, "code")

    def test_pattern_is_checked_before_enum(self, compiler):
        with pytest.raises(SchemaDefinitionError, match="is not a valid regular expression"):
            compiler.compile_field({"type": "string", "test": "(", "enum": ["a"]}, "code")

        with pytest.raises(SchemaDefinitionError, match="should be a regular expression"):
            compiler.compile_field({"type": "string", "test": 5, "enum": ["a"]}, "code")

    def test_enum_is_checked_against_the_compiled_pattern(self, compiler):
        with pytest.raises(SchemaDefinitionError, match=r'The enum at "code\.enum\[1\]"'):
            compiler.compile_field({"type": "string", "test": "^[a-z]+$", "enum": ["ab", "AB"]}, "code")

    def test_max_depth(self, registry):
        compiler = SchemaCompiler(registry, max_depth=3)
        compiler.compile_schema({"a": {"b": {"c": str}}})

        with pytest.raises(SchemaDefinitionError, match="maximum depth of 3") as exc:
            compiler.compile_schema({"a": {"b": {"c": {"d": str}}}})

        assert exc.value.path == "a.b.c.d"
