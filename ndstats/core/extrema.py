from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .order import is_nan_mask, missing_value


def min_value(array: Any) -> Optional[Any]:
    """Smallest element of ``array``.

    Returns ``None`` for an empty array and whenever the ordering is
    undefined, i.e. any element is NaN.
    """
    arr = np.asarray(array)
    if arr.size == 0 or is_nan_mask(arr).any():
        return None
    return arr.min()


def max_value(array: Any) -> Optional[Any]:
    """Largest element of ``array``; ``None`` if empty or any element is NaN."""
    arr = np.asarray(array)
    if arr.size == 0 or is_nan_mask(arr).any():
        return None
    return arr.max()


def min_skipnan(array: Any) -> Any:
    """Smallest non-NaN element of ``array``.

    **Warning** gives NaN (NaT for datetime and timedelta arrays) when
    there is no non-NaN element at all.
    """
    arr = np.asarray(array)
    kept = arr[~is_nan_mask(arr)]
    if kept.size == 0:
        return missing_value(arr.dtype)
    return kept.min()


def max_skipnan(array: Any) -> Any:
    arr = np.asarray(array)
    kept = arr[~is_nan_mask(arr)]
    if kept.size == 0:
        return missing_value(arr.dtype)
    return kept.max()
