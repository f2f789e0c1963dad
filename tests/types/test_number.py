import numpy as np
import pytest

from fieldcheck import FieldcheckSettings, Schema, SchemaDefinitionError
from fieldcheck.types import NumberType

number_type = NumberType()

NOT_NUMBERS = [lambda: None, None, True, False, "str", "", {}, [], float("nan")]


def test_only_numbers_pass_validate_type():
    assert number_type.validate_type(42) is True
    assert number_type.validate_type(4.2) is True
    assert number_type.validate_type(np.int64(42)) is True
    assert number_type.validate_type(np.float32(4.2)) is True

    for value in NOT_NUMBERS:
        assert number_type.validate_type(value) is False


def test_coerce_accepts_numeric_strings():
    field = {"coerce": True}

    assert number_type.validate_type("42", field) is True
    assert number_type.validate_type("4.2", field) is True

    for value in NOT_NUMBERS + ["nan"]:
        assert number_type.validate_type(value, field) is False


def test_numeric_strings_without_coerce():
    assert number_type.validate_type("42") is False


def test_coerce_must_be_boolean():
    with pytest.raises(SchemaDefinitionError, match='The prop "age.coerce" should be a boolean'):
        number_type.validate_schema({"type": "number", "coerce": "yes"}, "age")


def test_integers_beyond_float_range():
    assert number_type.validate_type(10**400) is True
    assert number_type.validate_type(-(10**400)) is True


def test_schema_accepts_huge_integers(registry):
    schema = Schema({"n": int}, registry=registry, settings=FieldcheckSettings())

    assert schema.errors({"n": 10**400}) == {}
