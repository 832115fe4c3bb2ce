"""Typed functional mapping over columns and elements.

``map_*`` helpers replace a hand-written loop with a single call: the function
is applied to each column of a DataFrame (or each element of a Series,
mapping or sequence) and the results are collected into a Series keyed by
column name. The suffix fixes the element type of the output, so a function
that returns the wrong kind of value fails loudly instead of silently
producing a mixed result.

====================  ============  ===============
Helper                Output type   Series dtype
====================  ============  ===============
``map_``              list          ``object``
``map_lgl``           logical       ``bool``
``map_chr``           character     ``object`` (str)
``map_dbl``           double        ``float64``
``map_int``           integer       ``int64``
====================  ============  ===============

:func:`modify` and :func:`map_if` apply a function that returns a same-length
replacement for each column and hand back a table of the original shape.
"""

import typing as tp
from collections.abc import Mapping

import numpy as np
import pandas as pd

from ..core.enums import OutputType
from ..core.types import validate_frame
from ..logger.logger import get_logger

__all__ = [
    "map_",
    "map_lgl",
    "map_chr",
    "map_dbl",
    "map_int",
    "modify",
    "map_if",
]

log = get_logger(__name__)


def _elements(x: tp.Any) -> tp.List[tp.Tuple[tp.Any, tp.Any]]:
    """(name, element) pairs: columns of a DataFrame, items of anything keyed."""
    if isinstance(x, pd.DataFrame):
        return list(x.items())
    if isinstance(x, (pd.Series, Mapping)):
        return list(x.items())
    if isinstance(x, (str, bytes)):
        raise TypeError("Cannot map over a string; wrap it in a list first.")
    return list(enumerate(x))


def _map_typed(
    x: tp.Any,
    fn: tp.Callable[..., tp.Any],
    output_type: OutputType,
    args: tp.Tuple[tp.Any, ...],
    kwargs: tp.Dict[str, tp.Any],
) -> pd.Series:
    elements = _elements(x)

    output = output_type.empty(len(elements))
    for i, (name, element) in enumerate(elements):
        output[i] = output_type.coerce(fn(element, *args, **kwargs), name)

    log.debug(
        "map_%s over %d element(s) with %s",
        output_type.value,
        len(elements),
        getattr(fn, "__name__", repr(fn)),
    )
    index = pd.Index([name for name, _ in elements])
    return pd.Series(output, index=index, dtype=output.dtype)


def map_(
    x: tp.Any, fn: tp.Callable[..., tp.Any], *args: tp.Any, **kwargs: tp.Any
) -> pd.Series:
    """Apply ``fn`` to each element and keep the results as they are.

    Args:
        x: DataFrame (iterated by column), Series, mapping or sequence.
        fn: Function called as ``fn(element, *args, **kwargs)``.

    Returns:
        Object Series of results keyed by column name, key or position.
    """
    return _map_typed(x, fn, OutputType.LIST, args, kwargs)


def map_lgl(
    x: tp.Any, fn: tp.Callable[..., tp.Any], *args: tp.Any, **kwargs: tp.Any
) -> pd.Series:
    """Like :func:`map_` but every result must be a single boolean.

    Raises:
        TypeError: If a result is not a single boolean.
    """
    return _map_typed(x, fn, OutputType.LOGICAL, args, kwargs)


def map_chr(
    x: tp.Any, fn: tp.Callable[..., tp.Any], *args: tp.Any, **kwargs: tp.Any
) -> pd.Series:
    """Like :func:`map_` but every result must be a single string.

    Raises:
        TypeError: If a result is not a single string.
    """
    return _map_typed(x, fn, OutputType.CHARACTER, args, kwargs)


def map_dbl(
    x: tp.Any, fn: tp.Callable[..., tp.Any], *args: tp.Any, **kwargs: tp.Any
) -> pd.Series:
    """Like :func:`map_` but every result must be a single real number.

    Integers and booleans widen to float; a missing result becomes ``NaN``.

    Raises:
        TypeError: If a result is not a single real number.
    """
    return _map_typed(x, fn, OutputType.DOUBLE, args, kwargs)


def map_int(
    x: tp.Any, fn: tp.Callable[..., tp.Any], *args: tp.Any, **kwargs: tp.Any
) -> pd.Series:
    """Like :func:`map_` but every result must be a single whole number.

    Floats are accepted only when they have no fractional part.

    Raises:
        TypeError: If a result is not a single whole number.
    """
    return _map_typed(x, fn, OutputType.INTEGER, args, kwargs)


def _replacement(name: tp.Any, column: pd.Series, result: tp.Any) -> np.ndarray:
    if np.ndim(result) == 0:
        raise ValueError(
            f"Replacement for column {name!r} must be a vector, got a single value."
        )
    if isinstance(result, pd.Series):
        values = result.to_numpy()
    else:
        values = np.asarray(result)
    if len(values) != len(column):
        raise ValueError(
            f"Replacement for column {name!r} has length {len(values)}, "
            f"expected {len(column)}."
        )
    return values


def modify(
    df: pd.DataFrame, fn: tp.Callable[..., tp.Any], *args: tp.Any, **kwargs: tp.Any
) -> pd.DataFrame:
    """Replace every column with ``fn(column)``, keeping the table's shape.

    Args:
        df: Table to transform. It is not changed in place.
        fn: Function returning a replacement the same length as its column.

    Returns:
        New DataFrame with the same index, columns and column order.

    Raises:
        ValueError: If a replacement is a scalar or has a different length.
    """
    return map_if(df, lambda column: True, fn, *args, **kwargs)


def map_if(
    df: pd.DataFrame,
    predicate: tp.Callable[[pd.Series], tp.Any],
    fn: tp.Callable[..., tp.Any],
    *args: tp.Any,
    **kwargs: tp.Any,
) -> pd.DataFrame:
    """Replace the columns for which ``predicate`` holds with ``fn(column)``.

    Columns failing the predicate are carried over unchanged.

    Raises:
        TypeError: If the predicate does not return a single boolean.
        ValueError: If a replacement is a scalar or has a different length.
    """
    df = validate_frame(df)
    selected = map_lgl(df, predicate)

    output = df.copy()
    for name, column in df.items():
        if selected[name]:
            output[name] = _replacement(name, column, fn(column, *args, **kwargs))

    return output
