"""Reusable type definitions for colwise.

Type Aliases:
    Count: A non-negative integer count.
    Seconds: A non-negative duration in seconds.
"""

from typing import Annotated, Any

import annotated_types as at
import pandas as pd

__all__ = ["Count", "Seconds", "validate_frame"]


def validate_frame(value: Any) -> pd.DataFrame:
    """Validator to ensure a value is a DataFrame with unique column names.

    Args:
        value: Object passed where a table is expected.

    Returns:
        The DataFrame itself.

    Raises:
        TypeError: If the value is not a DataFrame.
        ValueError: If column names are duplicated.
    """
    if not isinstance(value, pd.DataFrame):
        raise TypeError(f"Expected a DataFrame, got {type(value).__name__}.")
    if not value.columns.is_unique:
        dupes = value.columns[value.columns.duplicated()].tolist()
        raise ValueError(f"Column names must be unique. Duplicated: {dupes}.")
    return value


Count = Annotated[int, at.Ge(0)]

Seconds = Annotated[float, at.Ge(0)]
