import math

import numpy as np
import pandas as pd

from gradeeval._util import to_timestamp, is_finite_number


def test_to_timestamp_parses_iso_8601_as_utc():
    assert to_timestamp("2023-10-01T23:59:59Z") == pd.Timestamp("2023-10-01 23:59:59", tz="UTC")


def test_to_timestamp_assumes_naive_strings_are_utc():
    assert to_timestamp("2023-10-01T23:59:59") == pd.Timestamp("2023-10-01 23:59:59", tz="UTC")


def test_to_timestamp_returns_nat_when_unparseable():
    assert to_timestamp("not a date") is pd.NaT
    assert to_timestamp(None) is pd.NaT
    assert to_timestamp(True) is pd.NaT


def test_is_finite_number():
    assert is_finite_number(1)
    assert is_finite_number(2.5)
    assert is_finite_number(np.float64(3))
    assert not is_finite_number(math.nan)
    assert not is_finite_number(math.inf)
    assert not is_finite_number(True)
    assert not is_finite_number("1")
    assert not is_finite_number(None)
