"""
Global pytest configuration and fixtures.
"""

import pytest

from fieldcheck import FieldcheckSettings, Schema, SchemaCompiler, TypeRegistry, ValueValidator


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch, tmp_path):
    """Keep settings lookups away from the developer's environment.

    Tests run from an empty working directory with no FIELDCHECK_* variables
    so ``load_settings`` falls back to defaults unless a test says otherwise.
    """
    monkeypatch.delenv("FIELDCHECK_CONFIG", raising=False)
    monkeypatch.delenv("FIELDCHECK_MAX_DEPTH", raising=False)
    monkeypatch.delenv("FIELDCHECK_DEBUG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def registry() -> TypeRegistry:
    """A private registry seeded with the built-in types."""
    return TypeRegistry()


@pytest.fixture
def compiler(registry) -> SchemaCompiler:
    return SchemaCompiler(registry)


@pytest.fixture
def validator(registry) -> ValueValidator:
    return ValueValidator(registry)


@pytest.fixture
def empty_schema(registry) -> Schema:
    """A Schema with no fields, used to call the primitives directly."""
    return Schema({}, registry=registry, settings=FieldcheckSettings())
