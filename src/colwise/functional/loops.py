"""Explicit iteration over the columns of a table.

Every loop here has the same three parts:

    1. **Output**: a container sized to the number of results, allocated
       before the loop starts.
    2. **Sequence**: the index sequence to loop over, from :func:`seq_along`.
    3. **Body**: compute one result per index and store it at that position.

The module also keeps the anti-pattern the pre-allocation rule guards against:
:func:`grow_each_column` and :func:`grow_sequence` extend their result by
concatenation on every pass, so each pass copies everything stored so far and
the whole loop costs quadratic time. :func:`compare_strategies` measures the
difference.

Examples:
    >>> import pandas as pd
    >>> from colwise.functional.loops import column_means, for_each_column
    >>> from colwise.core.enums import OutputType
    >>>
    >>> df = pd.DataFrame({"a": [1.0, 2.0], "b": [3.0, 5.0]})
    >>> column_means(df).tolist()
    [1.5, 4.0]
    >>> is_large = lambda col: col.max() > 2
    >>> for_each_column(df, is_large, output_type=OutputType.LOGICAL).tolist()
    [False, True]
"""

import time
import typing as tp

import numpy as np
import pandas as pd

from ..core.config import settings
from ..core.enums import OutputType
from ..core.models import TimingReport
from ..core.types import validate_frame
from ..logger.logger import get_logger

__all__ = [
    "seq_along",
    "column_means",
    "for_each_column",
    "grow_each_column",
    "fill_sequence",
    "grow_sequence",
    "compare_strategies",
]

log = get_logger(__name__)


def seq_along(x: tp.Any) -> range:
    """Index sequence of a collection.

    A DataFrame is treated as a collection of columns, so its sequence runs
    over column positions, not rows. An empty collection gives an empty range
    and a loop over it runs zero times.

    Args:
        x: DataFrame, Series, array or any sized collection.

    Returns:
        ``range(len(x))``, with columns counted for a DataFrame.
    """
    if isinstance(x, pd.DataFrame):
        return range(x.shape[1])
    return range(len(x))


def column_means(df: pd.DataFrame) -> pd.Series:
    """Mean of every column, computed with a pre-allocated loop.

    Args:
        df: Table of numeric columns.

    Returns:
        Series of means indexed by column name.
    """
    df = validate_frame(df)

    output = np.empty(df.shape[1], dtype=np.float64)
    for i in seq_along(df):
        output[i] = df.iloc[:, i].mean()

    return pd.Series(output, index=df.columns, dtype=np.float64)


def for_each_column(
    df: pd.DataFrame,
    fn: tp.Callable[..., tp.Any],
    *args: tp.Any,
    output_type: OutputType = OutputType.DOUBLE,
    **kwargs: tp.Any,
) -> pd.Series:
    """Apply ``fn`` to every column with a pre-allocated, typed output.

    Args:
        df: Table to iterate over.
        fn: Function called as ``fn(column, *args, **kwargs)``.
        *args: Extra positional arguments for ``fn``.
        output_type: Element type every result is coerced to (keyword only).
        **kwargs: Extra keyword arguments for ``fn``.

    Returns:
        Series of results indexed by column name.

    Raises:
        TypeError: If a result cannot be coerced to ``output_type``.
    """
    df = validate_frame(df)

    output = output_type.empty(df.shape[1])
    for i in seq_along(df):
        name = df.columns[i]
        output[i] = output_type.coerce(fn(df.iloc[:, i], *args, **kwargs), name)

    return pd.Series(output, index=df.columns, dtype=output.dtype)


def grow_each_column(
    df: pd.DataFrame, fn: tp.Callable[[pd.Series], tp.Any]
) -> pd.Series:
    """Apply ``fn`` to every column, growing the result on each pass.

    Gives the same values as :func:`for_each_column` with a list output, but
    rebuilds the result list on every iteration.
    """
    df = validate_frame(df)

    output: tp.List[tp.Any] = []
    for i in seq_along(df):
        output = output + [fn(df.iloc[:, i])]

    return pd.Series(output, index=df.columns, dtype=object)


def _as_float(i: int) -> float:
    return float(i)


def _check_length(n: int) -> None:
    if n < 0:
        raise ValueError(f"Number of results must be non-negative, got {n}.")


def fill_sequence(
    n: int, fn: tp.Callable[[int], float] = _as_float
) -> np.ndarray:
    """Compute ``fn(i)`` for ``i`` in ``0..n-1`` into a pre-allocated array."""
    _check_length(n)

    output = np.empty(n, dtype=np.float64)
    for i in range(n):
        output[i] = fn(i)
    return output


def grow_sequence(
    n: int, fn: tp.Callable[[int], float] = _as_float
) -> np.ndarray:
    """Compute ``fn(i)`` for ``i`` in ``0..n-1``, growing the output each pass.

    Each ``np.append`` allocates a new array and copies the old one into it.
    """
    _check_length(n)

    output = np.empty(0, dtype=np.float64)
    for i in range(n):
        output = np.append(output, fn(i))
    return output


def _best_time(fn: tp.Callable[[], tp.Any], repeats: int) -> float:
    timings = []
    for _ in range(repeats):
        start = time.perf_counter()
        fn()
        timings.append(time.perf_counter() - start)
    return min(timings)


def compare_strategies(
    n: tp.Optional[int] = None, repeats: tp.Optional[int] = None
) -> TimingReport:
    """Time a pre-allocated loop against one that grows its output.

    Args:
        n: Number of results each loop computes. Defaults to ``TIMING_N``.
        repeats: Runs per strategy; the fastest is reported. Defaults to
            ``TIMING_REPEATS``.

    Returns:
        TimingReport with the best time of each strategy.

    Raises:
        ValueError: If ``n`` is negative or ``repeats`` is below one.
    """
    n = settings.TIMING_N if n is None else n
    repeats = settings.TIMING_REPEATS if repeats is None else repeats
    _check_length(n)
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}.")

    preallocated = _best_time(lambda: fill_sequence(n), repeats)
    growing = _best_time(lambda: grow_sequence(n), repeats)

    report = TimingReport(
        n=n,
        repeats=repeats,
        preallocated_seconds=preallocated,
        growing_seconds=growing,
    )
    log.debug("Loop timing: %s", report)
    return report
