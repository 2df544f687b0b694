"""Private helper utilities."""

from numbers import Real

import numpy as np
import pandas as pd


def to_timestamp(value) -> pd.Timestamp:
    """Parse an ISO-8601 string (or timestamp-like) into a UTC timestamp.

    Naive values are assumed to be in UTC. Values which cannot be parsed are
    returned as ``pd.NaT`` rather than raising.

    """
    if isinstance(value, bool):
        return pd.NaT
    try:
        timestamp = pd.to_datetime(value, utc=True, errors="coerce")
    except (TypeError, ValueError):
        return pd.NaT

    if not isinstance(timestamp, pd.Timestamp):
        return pd.NaT
    return timestamp


def is_finite_number(x) -> bool:
    """Is `x` a real, finite number? Booleans do not count."""
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, Real) and bool(np.isfinite(x))


def ensure_df(x) -> pd.DataFrame:
    """Helps convince the type checker that a variable is a DataFrame."""
    assert isinstance(x, pd.DataFrame)
    return x
