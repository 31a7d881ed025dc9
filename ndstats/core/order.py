from __future__ import annotations

from typing import Any, Protocol

import numpy as np


# bool, signed/unsigned int, float, datetime, timedelta, object
ORDERABLE_KINDS = frozenset("biufmMO")


class Orderable(Protocol):
    """Element capability required by the selector: a strict total order.

    Floats only satisfy this when no NaN is present. Callers that cannot
    guarantee that must go through :func:`not_nan` or :func:`remove_nan`
    before selecting.
    """

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


def ensure_orderable(lane: np.ndarray) -> np.ndarray:
    """Reject element types without a usable total order; returns ``lane`` as is."""
    if lane.dtype.kind not in ORDERABLE_KINDS:
        raise TypeError(f"elements of dtype {lane.dtype} have no total order")
    return lane


def is_nan_mask(lane: np.ndarray) -> np.ndarray:
    """Elementwise NaN test that works for float and object lanes.

    NaN is the only value not equal to itself, which keeps this independent
    of the element type. Integer-like lanes always give an all-False mask.
    """
    if lane.dtype.kind in "fcO":
        return lane != lane
    if lane.dtype.kind in "mM":
        return np.isnat(lane)
    return np.zeros(lane.shape, dtype=bool)


def not_nan(values: Any) -> np.ndarray:
    """Convert ``values`` to a float array guaranteed to be NaN-free.

    Raises ``ValueError`` if any NaN is present.
    """
    arr = np.asarray(values, dtype=np.float64)
    if np.isnan(arr).any():
        raise ValueError("NaN values have no place in a total order")
    return arr


def remove_nan(lane: np.ndarray) -> np.ndarray:
    """Move every non-NaN element of a 1-D ``lane`` to its front, in place.

    Returns the view over the non-NaN prefix. The relative order of the kept
    elements is preserved; the NaN tail is left behind the returned view.
    """
    mask = is_nan_mask(lane)
    if not mask.any():
        return lane
    kept = lane[~mask]
    dropped = lane[mask]
    count = kept.shape[0]
    lane[:count] = kept
    lane[count:] = dropped
    return lane[:count]


def missing_value(dtype: np.dtype) -> Any:
    """Placeholder for a result that has no non-NaN element to come from.

    Datetime and timedelta lanes get ``NaT`` of their own unit, everything
    else gets float NaN.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in "mM":
        return np.array("NaT", dtype=dtype)[()]
    return np.nan
