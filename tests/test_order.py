from __future__ import annotations

import numpy as np
import pytest

from ndstats.core.order import ensure_orderable, is_nan_mask, not_nan, remove_nan
from ndstats.core.quantile import median


@pytest.mark.parametrize(
    "dtype",
    [np.bool_, np.int8, np.uint64, np.float32, np.float64, object, "datetime64[s]", "timedelta64[ms]"],
)
def test_orderable_dtypes_pass_through(dtype: object) -> None:
    lane = np.zeros(3, dtype=dtype)
    assert ensure_orderable(lane) is lane


@pytest.mark.parametrize("dtype", [np.complex128, "U3", "S3"])
def test_unordered_dtypes_rejected(dtype: object) -> None:
    with pytest.raises(TypeError, match="no total order"):
        ensure_orderable(np.zeros(2, dtype=dtype))


def test_nan_mask() -> None:
    np.testing.assert_array_equal(is_nan_mask(np.array([1.0, np.nan])), [False, True])
    np.testing.assert_array_equal(is_nan_mask(np.array([float("nan"), 2], dtype=object)), [True, False])
    np.testing.assert_array_equal(is_nan_mask(np.array([1, 2])), [False, False])
    np.testing.assert_array_equal(
        is_nan_mask(np.array(["NaT", "2024-01-01"], dtype="datetime64[D]")), [True, False]
    )


def test_not_nan_prewrap() -> None:
    arr = not_nan([3, 1, 2])
    assert arr.dtype == np.float64
    assert median(arr) == 2.0
    with pytest.raises(ValueError):
        not_nan([1.0, float("nan")])


def test_remove_nan_compacts_in_place() -> None:
    lane = np.array([np.nan, 4.0, np.nan, 1.0, 2.0])
    kept = remove_nan(lane)
    assert kept.tolist() == [4.0, 1.0, 2.0]
    assert np.shares_memory(kept, lane)
    assert np.isnan(lane[3:]).all()


def test_remove_nan_without_nan_returns_lane() -> None:
    lane = np.array([3, 1])
    assert remove_nan(lane) is lane
