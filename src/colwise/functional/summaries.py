"""Per-column summaries built on the typed mapping helpers.

These are the exercises from the iteration lesson: column means, counting
unique values, naming each column's type and counting missing values. Each
single-column function works on its own and is lifted to a whole table with
one ``map_*`` call.
"""

import typing as tp

import numpy as np
import pandas as pd
from pandas.api import types as ptypes

from ..core.config import settings
from ..core.enums import OutputType
from ..core.models import UniqueCount
from ..core.types import validate_frame
from .mapping import map_chr, map_dbl, map_int

__all__ = [
    "n_unique",
    "count_unique",
    "count_missing",
    "column_type",
    "column_types",
    "numeric_means",
    "missing_counts",
    "unique_counts",
    "rescale01",
]


def _as_series(values: tp.Any) -> pd.Series:
    return values if isinstance(values, pd.Series) else pd.Series(values)


def n_unique(values: tp.Any) -> int:
    """Number of distinct values; all missing values together count as one."""
    series = _as_series(values)
    return int(series.nunique(dropna=True)) + int(series.isna().any())


def count_unique(values: tp.Any) -> UniqueCount:
    """Tally elements and distinct values of a vector.

    Args:
        values: Series, array or sequence.

    Returns:
        UniqueCount with the number of elements, of distinct values and of
        distinct values other than zero.
    """
    series = _as_series(values)
    distinct = n_unique(series)
    has_zero = bool((series == 0).any())
    return UniqueCount(
        total=len(series),
        distinct=distinct,
        distinct_nonzero=distinct - int(has_zero),
    )


def count_missing(
    values: tp.Any, na_values: tp.Optional[tp.Iterable[str]] = None
) -> int:
    """Count missing entries of a column.

    A value is missing when it is null (``None``, ``NaN``, ``NaT``) or, for
    text columns, when it equals one of the missing markers.

    Args:
        values: Column to inspect.
        na_values: Strings to treat as missing. Defaults to ``NA_VALUES``.

    Returns:
        Number of missing entries.
    """
    series = _as_series(values)
    markers = list(settings.NA_VALUES if na_values is None else na_values)

    missing = series.isna()
    is_text = ptypes.is_object_dtype(series) or ptypes.is_string_dtype(series)
    if markers and is_text:
        missing = missing | series.isin(markers)
    return int(missing.sum())


def column_type(values: tp.Any) -> str:
    """Type name of a column: logical, integer, double, character or datetime.

    Raises:
        TypeError: If the column holds anything else (e.g. mixed objects).
    """
    series = _as_series(values)
    if ptypes.is_bool_dtype(series):
        return OutputType.LOGICAL.type_name
    if ptypes.is_integer_dtype(series):
        return OutputType.INTEGER.type_name
    if ptypes.is_float_dtype(series):
        return OutputType.DOUBLE.type_name
    if ptypes.is_datetime64_any_dtype(series):
        return "datetime"
    if ptypes.is_object_dtype(series):
        # Text columns stored as objects may hold nulls between the strings
        if ptypes.infer_dtype(series, skipna=True) in ("string", "empty"):
            return OutputType.CHARACTER.type_name
    elif ptypes.is_string_dtype(series):
        return OutputType.CHARACTER.type_name
    raise TypeError(f"Unsupported column dtype {series.dtype}.")


def column_types(df: pd.DataFrame) -> pd.Series:
    """Type name of every column."""
    return map_chr(validate_frame(df), column_type)


def numeric_means(df: pd.DataFrame) -> pd.Series:
    """Mean of every numeric column; other columns are left out."""
    df = validate_frame(df)
    numeric = df.select_dtypes(include=[np.number, "bool"])
    return map_dbl(numeric, lambda column: column.mean())


def missing_counts(
    df: pd.DataFrame, na_values: tp.Optional[tp.Iterable[str]] = None
) -> pd.Series:
    """Number of missing entries in every column."""
    return map_int(validate_frame(df), count_missing, na_values=na_values)


def unique_counts(df: pd.DataFrame) -> pd.Series:
    """Number of distinct values in every column."""
    return map_int(validate_frame(df), n_unique)


def rescale01(values: tp.Any) -> pd.Series:
    """Rescale a numeric column to the range [0, 1].

    Missing values stay missing. A constant column maps to all zeros.
    """
    series = _as_series(values).astype(np.float64)
    low, high = series.min(), series.max()
    span = high - low
    if not span or np.isnan(span):
        return series - low
    return (series - low) / span
