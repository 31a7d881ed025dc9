"""Axis-wise quantiles over n-dimensional arrays.

Every one-dimensional lane along the chosen axis is resolved independently,
so lanes can be spread over a thread pool; each worker owns a contiguous run
of lanes and writes only the result slots belonging to them.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Sequence, Tuple, Union

import numpy as np

from ..errors import EmptyInput
from .interpolate import Interpolation, InterpolationLike, PolicySpec, get_policy
from .order import ensure_orderable
from .quantile import check_levels, check_quantile, quantiles, quantiles_skipnan


logger = logging.getLogger(__name__)

Levels = Union[float, Sequence[float]]
LaneIndex = Tuple[int, ...]
Resolver = Callable[[np.ndarray, Sequence[float], InterpolationLike], List[Any]]


def normalize_levels(levels: Levels) -> Tuple[List[float], bool]:
    """Validate ``levels``; returns the checked list and whether a level axis is added."""
    if np.ndim(levels) == 0:
        return [check_quantile(levels)], False
    checked = check_levels(np.asarray(levels, dtype=object).ravel())
    if not checked:
        raise ValueError("at least one quantile level is required")
    return checked, len(checked) > 1


def normalize_axis(axis: int, ndim: int) -> int:
    if not -ndim <= axis < ndim:
        raise np.exceptions.AxisError(axis, ndim)
    return axis % ndim


def result_dtype(dtype: np.dtype, policy: PolicySpec) -> np.dtype:
    """Lower/Higher/Nearest return elements; Linear/Midpoint may leave integers."""
    if not policy.arithmetic or dtype.kind in "fOmM":
        return dtype
    return np.dtype(np.float64)


def _chunks(indices: List[LaneIndex], parts: int) -> List[List[LaneIndex]]:
    size, extra = divmod(len(indices), parts)
    out = []
    start = 0
    for i in range(parts):
        stop = start + size + (1 if i < extra else 0)
        if stop > start:
            out.append(indices[start:stop])
        start = stop
    return out


def _resolve_lanes(
    work: np.ndarray,
    out: np.ndarray,
    indices: List[LaneIndex],
    levels: List[float],
    interpolation: InterpolationLike,
    resolver: Resolver,
) -> None:
    for idx in indices:
        values = resolver(work[idx], levels, interpolation)
        for j, value in enumerate(values):
            out[(j,) + idx] = value


def _quantile_lanes(
    work: np.ndarray,
    levels: List[float],
    interpolation: InterpolationLike,
    policy: PolicySpec,
    workers: int,
    min_lanes: int,
    resolver: Resolver,
) -> np.ndarray:
    """Resolve every lane along the last axis of ``work``, shuffling them in place."""
    outer = work.shape[:-1]
    out = np.empty((len(levels),) + outer, dtype=result_dtype(work.dtype, policy))
    indices = list(np.ndindex(*outer))

    pool_size = min(workers, len(indices))
    if pool_size <= 1 or len(indices) < min_lanes:
        _resolve_lanes(work, out, indices, levels, interpolation, resolver)
        return out

    logger.debug("splitting lanes across thread pool", extra={"lanes": len(indices), "workers": pool_size})
    with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="ndstats-lanes") as executor:
        futures = [
            executor.submit(_resolve_lanes, work, out, chunk, levels, interpolation, resolver)
            for chunk in _chunks(indices, pool_size)
        ]
        for future in futures:
            future.result()
    return out


def _quantile_axis(
    array: Any,
    axis: int,
    levels: Levels,
    interpolation: InterpolationLike,
    workers: int,
    min_lanes: int,
    in_place: bool,
    resolver: Resolver,
) -> np.ndarray:
    # Levels and policy are validated before the array is touched at all.
    checked, add_level_axis = normalize_levels(levels)
    policy = get_policy(interpolation)
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    if in_place:
        if not isinstance(array, np.ndarray):
            raise TypeError("in-place quantiles need a numpy array")
        arr = array
    else:
        arr = np.asarray(array)
    ensure_orderable(arr)
    axis = normalize_axis(axis, arr.ndim)
    if arr.shape[axis] == 0:
        raise EmptyInput(f"axis {axis} of array with shape {arr.shape} is empty")

    moved = np.moveaxis(arr, axis, -1)
    # C-order copy: every lane is private and contiguous.
    work = moved if in_place else moved.copy()

    logger.debug(
        "computing axis quantiles",
        extra={
            "shape": list(arr.shape),
            "axis": axis,
            "levels": checked,
            "interpolation": policy.key.value,
        },
    )
    out = _quantile_lanes(work, checked, interpolation, policy, workers, min_lanes, resolver)
    return out if add_level_axis else out[0]


def quantile_axis(
    array: Any,
    axis: int,
    levels: Levels,
    interpolation: InterpolationLike = Interpolation.LINEAR,
    *,
    workers: int = 1,
    min_lanes: int = 0,
) -> np.ndarray:
    """Quantiles of ``array`` along ``axis``, leaving ``array`` untouched.

    A scalar level (or a one-element sequence) removes ``axis`` from the
    result shape. Several levels replace it with a new leading axis, ordered
    like ``levels``.

    Raises ``InvalidQuantile`` for any level outside ``[0, 1]`` and
    ``EmptyInput`` when ``axis`` has length zero; both are checked before
    any lane is processed. With ``workers > 1`` and at least ``min_lanes``
    lanes, lanes are resolved on a thread pool.
    """
    return _quantile_axis(array, axis, levels, interpolation, workers, min_lanes, False, quantiles)


def quantile_axis_mut(
    array: np.ndarray,
    axis: int,
    levels: Levels,
    interpolation: InterpolationLike = Interpolation.LINEAR,
    *,
    workers: int = 1,
    min_lanes: int = 0,
) -> np.ndarray:
    """Same as :func:`quantile_axis` but shuffles each lane of ``array`` in place.

    No copy of the data is made. No assumption should be made on the order
    of the elements of ``array`` afterwards.
    """
    return _quantile_axis(array, axis, levels, interpolation, workers, min_lanes, True, quantiles)


def quantile_axis_skipnan(
    array: Any,
    axis: int,
    levels: Levels,
    interpolation: InterpolationLike = Interpolation.LINEAR,
    *,
    workers: int = 1,
    min_lanes: int = 0,
) -> np.ndarray:
    """Like :func:`quantile_axis`, ignoring NaN values lane by lane.

    Lanes holding nothing but NaN produce NaN, or NaT for datetime and
    timedelta arrays.
    """
    return _quantile_axis(
        array, axis, levels, interpolation, workers, min_lanes, False, quantiles_skipnan
    )


def median_axis(array: Any, axis: int, *, workers: int = 1) -> np.ndarray:
    return quantile_axis(array, axis, 0.5, Interpolation.LINEAR, workers=workers)
