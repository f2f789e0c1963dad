import numpy as np

from fieldcheck.types import ArrayType

array_type = ArrayType()


def test_only_sequences_pass_validate_type():
    assert array_type.validate_type([]) is True
    assert array_type.validate_type([1, "a"]) is True
    assert array_type.validate_type((1, 2)) is True
    assert array_type.validate_type(np.array([1, 2])) is True

    for value in [lambda: None, None, 42, True, "str", "", {}]:
        assert array_type.validate_type(value) is False
