from __future__ import annotations

import numpy as np

from ndstats.core.extrema import max_skipnan, max_value, min_skipnan, min_value


def test_min_max() -> None:
    data = np.array([[3, -2], [7, 0]])
    assert min_value(data) == -2
    assert max_value(data) == 7


def test_min_max_empty_or_nan() -> None:
    assert min_value(np.array([])) is None
    assert max_value([]) is None
    assert min_value(np.array([1.0, np.nan, 0.0])) is None
    assert max_value(np.array([1.0, np.nan, 0.0])) is None


def test_skipnan_variants() -> None:
    data = np.array([[np.nan, 2.0], [-1.0, np.nan]])
    assert min_skipnan(data) == -1.0
    assert max_skipnan(data) == 2.0
    assert np.isnan(min_skipnan(np.array([np.nan, np.nan])))
    assert np.isnan(max_skipnan(np.array([])))


def test_integer_arrays_never_hold_nan() -> None:
    assert min_skipnan(np.array([4, 2, 9])) == 2
    assert max_value(np.array([4, 2, 9], dtype=np.uint16)) == 9


def test_skipnan_all_nat_gives_nat() -> None:
    stamps = np.array(["NaT", "NaT"], dtype="M8[s]")
    assert np.isnat(min_skipnan(stamps))
    assert np.isnat(max_skipnan(stamps))
    assert max_skipnan(np.array([np.timedelta64("NaT", "s"), np.timedelta64(5, "s")])) == np.timedelta64(5, "s")
