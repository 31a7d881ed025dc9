"""Summary statistics over all elements of an array.

Each function returns ``None`` for an empty array.
"""

from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np


def mean(array: Any) -> Optional[Any]:
    arr = np.asarray(array)
    if arr.size == 0:
        return None
    return arr.sum() / arr.size


def harmonic_mean(array: Any) -> Optional[float]:
    """``n / sum(1 / x)``."""
    arr = np.asarray(array, dtype=np.float64)
    if arr.size == 0:
        return None
    return arr.size / np.sum(1.0 / arr)


def geometric_mean(array: Any) -> Optional[float]:
    """``prod(x) ** (1 / n)``, computed in log space."""
    arr = np.asarray(array, dtype=np.float64)
    if arr.size == 0:
        return None
    return float(np.exp(np.log(arr).mean()))


def central_moment(array: Any, order: int) -> Optional[float]:
    """The ``order``-th central moment ``mean((x - mean(x)) ** order)``.

    Corrected two-pass algorithm (Pebay et al., 2016, section 3.5): the
    deviations from the first-pass mean still carry a small rounding
    residue, which the binomial expansion removes.
    """
    if order < 0:
        raise ValueError(f"order must be non-negative, got {order}")
    arr = np.asarray(array, dtype=np.float64)
    if arr.size == 0:
        return None
    if order == 0:
        return 1.0
    if order == 1:
        return 0.0
    deviations = arr - arr.mean()
    shift = deviations.mean()
    raw = [np.mean(deviations ** k) for k in range(order + 1)]
    return float(
        sum(math.comb(order, k) * raw[k] * (-shift) ** (order - k) for k in range(order + 1))
    )
