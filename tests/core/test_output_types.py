import numpy as np
import pandas as pd
import pytest

from colwise.core.enums import OutputType, describe


@pytest.mark.parametrize(
    "output_type, value, expected",
    [
        (OutputType.LOGICAL, np.bool_(True), True),
        (OutputType.INTEGER, True, 1),
        (OutputType.INTEGER, np.int32(7), 7),
        (OutputType.INTEGER, 3.0, 3),
        (OutputType.DOUBLE, 2, 2.0),
        (OutputType.DOUBLE, np.float32(0.5), 0.5),
        (OutputType.CHARACTER, "abc", "abc"),
    ],
)
def test_coerce_accepts_compatible_values(output_type, value, expected):
    result = output_type.coerce(value)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "output_type, value",
    [
        (OutputType.LOGICAL, 1),
        (OutputType.INTEGER, 2.5),
        (OutputType.INTEGER, "3"),
        (OutputType.INTEGER, 1e300),
        (OutputType.INTEGER, 2**70),
        (OutputType.DOUBLE, "3.0"),
        (OutputType.CHARACTER, 3),
    ],
)
def test_coerce_rejects_incompatible_values(output_type, value):
    with pytest.raises(TypeError, match=output_type.type_name):
        output_type.coerce(value, position="col")


def test_coerce_unwraps_length_one_containers():
    assert OutputType.DOUBLE.coerce(pd.Series([4.0])) == 4.0
    assert OutputType.INTEGER.coerce(np.array([5])) == 5
    with pytest.raises(TypeError, match="length 2"):
        OutputType.DOUBLE.coerce([1.0, 2.0])


def test_missing_values_only_fit_double():
    assert np.isnan(OutputType.DOUBLE.coerce(None))
    assert np.isnan(OutputType.DOUBLE.coerce(pd.NA))
    for output_type in (OutputType.LOGICAL, OutputType.INTEGER, OutputType.CHARACTER):
        with pytest.raises(TypeError, match="missing"):
            output_type.coerce(np.nan)


def test_list_output_passes_anything_through():
    value = {"nested": [1, 2]}
    assert OutputType.LIST.coerce(value) is value


def test_empty_preallocates_typed_vectors():
    assert OutputType.DOUBLE.empty(3).dtype == np.float64
    assert np.isnan(OutputType.DOUBLE.empty(3)).all()
    assert OutputType.INTEGER.empty(2).dtype == np.int64
    assert OutputType.LOGICAL.empty(2).dtype == bool
    assert OutputType.LIST.empty(2).tolist() == [None, None]


def test_describe_names_types():
    assert describe(True) == "logical"
    assert describe(1) == "integer"
    assert describe(1.0) == "double"
    assert describe("x") == "character"
    assert describe([1]) == "list"
