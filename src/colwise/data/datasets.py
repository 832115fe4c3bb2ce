"""Example datasets for the iteration lesson.

Every function builds a fresh object on each call, so a snippet can change
what it gets without affecting the next one.

Datasets:
    - :func:`example_frame`: four numeric columns of literal values.
    - :func:`mixed_counts`: a named vector of counts with repeats and a zero.
    - :func:`weather`: hourly weather observations at three airports.
    - :func:`missing_frame`: numeric, text and random columns with gaps.
"""

import math
from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd

from ..core.config import settings
from ..logger.logger import get_logger

__all__ = [
    "example_frame",
    "mixed_counts",
    "weather",
    "simulate_weather",
    "load_weather",
    "missing_frame",
    "WEATHER_COLUMNS",
    "ORIGINS",
]

log = get_logger(__name__)

ORIGINS = ("EWR", "JFK", "LGA")

WEATHER_COLUMNS = [
    "origin",
    "year",
    "month",
    "day",
    "hour",
    "temp",
    "dewp",
    "humid",
    "wind_dir",
    "wind_speed",
    "wind_gust",
    "precip",
    "pressure",
    "visib",
    "time_hour",
]


def example_frame() -> pd.DataFrame:
    """Four numeric columns ``a``-``d`` with ten literal values each."""
    return pd.DataFrame(
        {
            "a": [-0.24, 1.13, -0.57, 0.82, 0.05, -1.46, 0.39, 2.01, -0.72, 0.18],
            "b": [0.66, -0.31, 1.48, -0.09, 0.27, 0.94, -1.12, 0.53, -0.44, 0.08],
            "c": [1.21, 0.37, -0.85, -0.16, 0.71, -0.28, 1.64, -1.03, 0.12, 0.45],
            "d": [-0.93, 0.58, 0.26, -1.37, 1.09, 0.14, -0.61, 0.33, 0.87, -0.02],
        }
    )


def mixed_counts() -> pd.Series:
    """Named vector of counts: ``1, 1, 1, 1, 5, 2, 2, 2, 0``."""
    values = [1, 1, 1, 1, 5, 2, 2, 2, 0]
    names = [chr(ord("a") + i) for i in range(len(values))]
    return pd.Series(values, index=names, dtype=np.int64, name="count")


def missing_frame(seed: Optional[int] = None) -> pd.DataFrame:
    """Table with one gap in ``x``, three in ``y`` and none in ``z``.

    ``y`` is a text column whose gaps are spelled three ways: a null, the
    string ``"NA"`` and an empty string.

    Args:
        seed: Seed for the random column. Defaults to ``SEED``.
    """
    rng = np.random.default_rng(settings.SEED if seed is None else seed)
    return pd.DataFrame(
        {
            "x": [1.0, 2.0, np.nan, 4.0, 5.0],
            "y": pd.Series(["a", None, "NA", "", "e"], dtype=object),
            "z": rng.normal(size=5),
        }
    )


def simulate_weather(n: int, seed: Optional[int] = None) -> pd.DataFrame:
    """Simulate ``n`` hourly weather observations.

    Observations cycle through the three origins for each hour starting at
    2013-01-01 00:00. Temperature follows a seasonal and daily cycle with
    noise; wind gusts are mostly unrecorded and a few wind directions and
    pressures are missing, as in real station logs.

    Args:
        n: Number of rows.
        seed: Random seed. Defaults to ``SEED``.

    Returns:
        DataFrame with :data:`WEATHER_COLUMNS`.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Number of observations must be non-negative, got {n}.")

    rng = np.random.default_rng(settings.SEED if seed is None else seed)

    periods = math.ceil(n / len(ORIGINS))
    hours = pd.date_range("2013-01-01", periods=periods, freq="h")
    time_hour = pd.DatetimeIndex(np.repeat(hours.values, len(ORIGINS))[:n])
    origin = np.tile(ORIGINS, len(hours))[:n]

    day_of_year = time_hour.dayofyear.to_numpy()
    hour = time_hour.hour.to_numpy()
    seasonal = -22.0 * np.cos(2 * np.pi * (day_of_year - 15) / 365.0)
    daily = -6.0 * np.cos(2 * np.pi * (hour - 3) / 24.0)
    temp = np.round(55.0 + seasonal + daily + rng.normal(0.0, 4.0, n), 2)
    dewp = np.round(temp - np.abs(rng.normal(10.0, 6.0, n)), 2)
    humid = np.round(np.clip(100.0 * np.exp(0.0383 * (dewp - temp)), 5.0, 100.0), 2)

    wind_dir = (rng.integers(0, 37, n) * 10).astype(np.float64)
    wind_dir[rng.random(n) < 0.02] = np.nan
    wind_speed = np.round(rng.gamma(2.5, 4.0, n), 4)
    gusting = rng.random(n) < 0.2
    wind_gust = np.where(gusting, np.round(wind_speed * 1.3, 4), np.nan)
    raining = rng.random(n) < 0.08
    precip = np.where(raining, np.round(rng.exponential(0.05, n), 2), 0.0)
    pressure = np.round(rng.normal(1017.0, 7.5, n), 1)
    pressure[rng.random(n) < 0.1] = np.nan
    clear = rng.random(n) < 0.85
    visib = np.where(clear, 10.0, np.round(rng.uniform(0.0, 10.0, n), 2))

    return pd.DataFrame(
        {
            "origin": pd.Series(origin, dtype=object),
            "year": time_hour.year.to_numpy().astype(np.int64),
            "month": time_hour.month.to_numpy().astype(np.int64),
            "day": time_hour.day.to_numpy().astype(np.int64),
            "hour": hour.astype(np.int64),
            "temp": temp,
            "dewp": dewp,
            "humid": humid,
            "wind_dir": wind_dir,
            "wind_speed": wind_speed,
            "wind_gust": wind_gust,
            "precip": precip,
            "pressure": pressure,
            "visib": visib,
            "time_hour": time_hour,
        },
        columns=WEATHER_COLUMNS,
    )


def load_weather(path: Union[str, Path]) -> pd.DataFrame:
    """Read weather observations from a CSV file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If expected weather columns are missing.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Weather data file not found at {path}")

    df = pd.read_csv(path)
    missing = [column for column in WEATHER_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Weather data at {path} lacks columns: {missing}")

    df["time_hour"] = pd.to_datetime(df["time_hour"])
    log.debug("Loaded %d weather rows from %s", len(df), path)
    return df


def weather(
    path: Optional[Union[str, Path]] = None, seed: Optional[int] = None
) -> pd.DataFrame:
    """Weather observations for practising iteration.

    Reads ``path`` (or the configured ``WEATHER_CSV``) when given, otherwise
    simulates ``WEATHER_ROWS`` observations.
    """
    path = path if path is not None else settings.WEATHER_CSV
    if path is not None:
        return load_weather(path)
    return simulate_weather(settings.WEATHER_ROWS, seed=seed)
