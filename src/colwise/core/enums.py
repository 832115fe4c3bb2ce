"""Enumerations for the element types a typed iteration can produce."""

from enum import Enum
import numbers
import typing as tp

import numpy as np
import pandas as pd


_INT64 = np.iinfo(np.int64)


class OutputType(Enum):
    """Element type of a homogeneously-typed iteration result.

    The value is the short name used in the notes (``lgl``, ``chr``, ``dbl``,
    ``int``); ``LIST`` leaves results untouched.
    """

    LOGICAL = "lgl"
    CHARACTER = "chr"
    DOUBLE = "dbl"
    INTEGER = "int"
    LIST = "list"

    @property
    def type_name(self) -> str:
        """Long name of the type, as reported by ``column_types``."""
        mapping = {
            OutputType.LOGICAL: "logical",
            OutputType.CHARACTER: "character",
            OutputType.DOUBLE: "double",
            OutputType.INTEGER: "integer",
            OutputType.LIST: "list",
        }
        return mapping[self]

    def to_numpy_dtype(self) -> np.dtype:
        """NumPy dtype used to pre-allocate an output of this type.

        Returns:
            The dtype; ``object`` for character and list outputs.
        """
        mapping = {
            OutputType.LOGICAL: np.dtype(bool),
            OutputType.CHARACTER: np.dtype(object),
            OutputType.DOUBLE: np.dtype(np.float64),
            OutputType.INTEGER: np.dtype(np.int64),
            OutputType.LIST: np.dtype(object),
        }
        return mapping[self]

    def empty(self, n: int) -> np.ndarray:
        """Pre-allocate an output vector with room for ``n`` results."""
        if self is OutputType.DOUBLE:
            return np.full(n, np.nan, dtype=np.float64)
        if self is OutputType.LIST:
            return np.array([None] * n, dtype=object)
        return np.empty(n, dtype=self.to_numpy_dtype())

    def coerce(self, value: tp.Any, position: tp.Any = None) -> tp.Any:
        """Coerce one result to this type without loss of information.

        Args:
            value: The result produced for one element.
            position: Name or index of the element, used in error messages.

        Returns:
            The value converted to the Python scalar type of this output.

        Raises:
            TypeError: If the value is not a single value of a compatible type.
        """
        if self is OutputType.LIST:
            return value

        value = _unwrap_scalar(value, position)
        where = f" at {position!r}" if position is not None else ""

        if _is_missing(value):
            if self is OutputType.DOUBLE:
                return np.nan
            raise TypeError(
                f"Can't coerce missing result{where} to {self.type_name}."
            )

        if self is OutputType.LOGICAL:
            if isinstance(value, (bool, np.bool_)):
                return bool(value)
        elif self is OutputType.CHARACTER:
            if isinstance(value, str):
                return value
        elif self is OutputType.INTEGER:
            whole = isinstance(value, (bool, np.bool_, numbers.Integral)) or (
                isinstance(value, numbers.Real) and float(value).is_integer()
            )
            if whole:
                if _INT64.min <= int(value) <= _INT64.max:
                    return int(value)
                raise TypeError(
                    f"Can't coerce result{where} from {describe(value)} to "
                    f"{self.type_name}: {value} is outside the int64 range."
                )
        elif self is OutputType.DOUBLE:
            if isinstance(value, (bool, np.bool_, numbers.Real)):
                return float(value)

        raise TypeError(
            f"Can't coerce result{where} from {describe(value)} to {self.type_name}."
        )


def describe(value: tp.Any) -> str:
    """Name the type of a single value the way the notes do."""
    if isinstance(value, (bool, np.bool_)):
        return "logical"
    if isinstance(value, numbers.Integral):
        return "integer"
    if isinstance(value, numbers.Real):
        return "double"
    if isinstance(value, str):
        return "character"
    return type(value).__name__


def _is_missing(value: tp.Any) -> bool:
    if value is None or value is pd.NA or value is pd.NaT:
        return True
    return isinstance(value, float) and np.isnan(value)


def _unwrap_scalar(value: tp.Any, position: tp.Any) -> tp.Any:
    # Length-1 containers are accepted as their only element
    if isinstance(value, (pd.Series, np.ndarray, list, tuple)):
        if len(value) != 1:
            where = f" at {position!r}" if position is not None else ""
            raise TypeError(
                f"Result{where} must be a single value, not length {len(value)}."
            )
        value = value[0] if not isinstance(value, pd.Series) else value.iloc[0]
    if isinstance(value, np.generic):
        value = value.item()
    return value
