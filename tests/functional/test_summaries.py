import numpy as np
import pandas as pd
import pytest

from colwise.core.enums import OutputType
from colwise.core.models import UniqueCount
from colwise.data.datasets import example_frame, missing_frame, mixed_counts, weather
from colwise.functional.summaries import (
    column_type,
    column_types,
    count_missing,
    count_unique,
    missing_counts,
    n_unique,
    numeric_means,
    rescale01,
    unique_counts,
)


def test_count_unique_of_mixed_counts():
    tally = count_unique(mixed_counts())

    assert isinstance(tally, UniqueCount)
    assert tally.total == 9
    assert tally.distinct == 4
    assert tally.distinct_nonzero == 3
    assert n_unique([1, 1, 1, 1, 5, 2, 2, 2, 0]) == 4


def test_n_unique_counts_missing_once():
    assert n_unique([1.0, np.nan, np.nan, 1.0]) == 2


def test_n_unique_merges_none_and_nan_in_text_columns():
    column = pd.Series(["a", None, np.nan], dtype=object)
    assert n_unique(column) == 2
    assert count_unique(column).distinct == 2


def test_missing_counts_of_missing_frame():
    counts = missing_counts(missing_frame())
    assert counts.to_dict() == {"x": 1, "y": 3, "z": 0}
    assert counts.dtype == np.int64


def test_count_missing_with_custom_markers():
    column = pd.Series(["a", "-", None, "NA"], dtype=object)
    assert count_missing(column, na_values=["-"]) == 2
    assert count_missing(column, na_values=[]) == 1
    assert count_missing(column) == 2


def test_markers_ignored_for_numeric_columns():
    assert count_missing(pd.Series([0.0, np.nan])) == 1


def test_column_type_names():
    assert column_type(pd.Series([True, False])) == "logical"
    assert column_type(pd.Series([1, 2])) == "integer"
    assert column_type(pd.Series([1.5])) == "double"
    assert column_type(pd.Series(["a", None], dtype=object)) == "character"
    assert column_type(pd.Series(pd.to_datetime(["2013-01-01"]))) == "datetime"
    samples = {
        OutputType.LOGICAL: [True],
        OutputType.INTEGER: [1],
        OutputType.DOUBLE: [1.5],
        OutputType.CHARACTER: ["a"],
    }
    for output_type, values in samples.items():
        assert column_type(pd.Series(values)) == output_type.type_name
    assert column_types(example_frame()).eq(OutputType.DOUBLE.type_name).all()


def test_column_type_rejects_mixed_objects():
    with pytest.raises(TypeError):
        column_type(pd.Series([1, "a", 2.5], dtype=object))


def test_weather_practice_summaries():
    df = weather(seed=7)
    types = column_types(df)

    assert types["origin"] == "character"
    assert types["year"] == "integer"
    assert types["temp"] == "double"
    assert types["time_hour"] == "datetime"

    uniques = unique_counts(df)
    assert uniques["origin"] == 3
    assert uniques["year"] == 1

    missing = missing_counts(df)
    assert missing["origin"] == 0
    assert missing["wind_gust"] > missing["wind_dir"]


def test_numeric_means_skip_text_columns():
    means = numeric_means(missing_frame())
    assert list(means.index) == ["x", "z"]
    assert means["x"] == pytest.approx(3.0)

    frame = example_frame()
    pd.testing.assert_series_equal(
        numeric_means(frame), frame.mean(), check_names=False
    )


def test_rescale01():
    scaled = rescale01(pd.Series([2.0, 4.0, np.nan, 6.0]))
    assert scaled.iloc[0] == 0.0
    assert scaled.iloc[1] == 0.5
    assert np.isnan(scaled.iloc[2])
    assert scaled.iloc[3] == 1.0
    assert rescale01([3, 3, 3]).tolist() == [0.0, 0.0, 0.0]
