from __future__ import annotations

import operator
from bisect import bisect_left
from typing import Any, Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..errors import EmptyInput, IndexOutOfBounds
from .order import Orderable, ensure_orderable


def check_lane(lane: np.ndarray) -> int:
    """Validate a selection lane and return its length."""
    if not isinstance(lane, np.ndarray):
        raise TypeError(f"lane must be a numpy array, got {type(lane).__name__}")
    if lane.ndim != 1:
        raise ValueError(f"lane must be one-dimensional, got {lane.ndim} dimensions")
    ensure_orderable(lane)
    return lane.shape[0]


def _check_rank(rank: Any, length: int) -> int:
    index = operator.index(rank)
    if not 0 <= index < length:
        raise IndexOutOfBounds(index, length)
    return index


def _median_of_three(lane: np.ndarray, lo: int, hi: int, rng: np.random.Generator) -> int:
    """Index of the median of three positions of ``lane[lo:hi]`` drawn at random.

    Random sampling keeps the expected cost linear whatever the input order
    (sorted, reversed, organ-pipe, ...).
    """
    first, mid, last = (int(i) for i in rng.integers(lo, hi, size=3))
    a, b, c = lane[first], lane[mid], lane[last]
    if a < b:
        if b < c:
            return mid
        return last if a < c else first
    if a < c:
        return first
    return last if b < c else mid


def partition(
    lane: np.ndarray, pivot_index: int, lo: int = 0, hi: Optional[int] = None
) -> Tuple[int, int]:
    """Three-way partition ``lane[lo:hi]`` in place around ``lane[pivot_index]``.

    Returns ``(start, stop)`` such that afterwards ``lane[lo:start]`` holds the
    elements smaller than the pivot, ``lane[start:stop]`` the elements equal to
    it and ``lane[stop:hi]`` the larger ones. The relative order inside each
    block is not meaningful.
    """
    if hi is None:
        hi = lane.shape[0]
    window = lane[lo:hi]
    pivot = lane[pivot_index]
    less = window < pivot
    greater = window > pivot
    # Anything neither smaller nor larger, NaN included, lands in the middle.
    equal = ~(less | greater)

    smaller = window[less]
    same = window[equal]
    larger = window[greater]

    start = lo + smaller.shape[0]
    stop = start + same.shape[0]
    lane[lo:start] = smaller
    lane[start:stop] = same
    lane[stop:hi] = larger
    return start, stop


def partition_mut(lane: np.ndarray, pivot_index: int) -> int:
    """Partition ``lane`` around the value at ``pivot_index``.

    Returns the pivot's final index: every element before it is strictly
    smaller, every element after it is greater or equal.
    """
    length = check_lane(lane)
    if length == 0:
        raise EmptyInput()
    start, _ = partition(lane, _check_rank(pivot_index, length))
    return start


def _select_window(
    lane: np.ndarray, rank: int, lo: int, hi: int, rng: np.random.Generator
) -> Tuple[int, int]:
    """Quickselect on ``lane[lo:hi]`` until ``rank`` falls inside a block of equal values.

    Returns that block's bounds; every position inside it holds its
    correctly ranked value.
    """
    while hi - lo > 1:
        start, stop = partition(lane, _median_of_three(lane, lo, hi, rng), lo, hi)
        if rank < start:
            hi = start
        elif rank >= stop:
            lo = stop
        else:
            return start, stop
    return lo, hi


def _solve(
    lane: np.ndarray, lo: int, hi: int, ranks: List[int], rng: np.random.Generator
) -> None:
    if not ranks:
        return
    target = ranks[len(ranks) // 2]
    start, stop = _select_window(lane, target, lo, hi, rng)
    # Ranks inside [start, stop) are settled by the same pass.
    _solve(lane, lo, start, ranks[: bisect_left(ranks, start)], rng)
    _solve(lane, stop, hi, ranks[bisect_left(ranks, stop):], rng)


def select(lane: np.ndarray, rank: int) -> Orderable:
    """Return the value a full ascending sort of ``lane`` would put at ``rank``.

    ``lane`` is rearranged in place.
    """
    length = check_lane(lane)
    if length == 0:
        raise EmptyInput()
    index = _check_rank(rank, length)
    _select_window(lane, index, 0, length, np.random.default_rng())
    return lane[index]


def select_many(lane: np.ndarray, ranks: Iterable[int]) -> Dict[int, Orderable]:
    """Select several order statistics of ``lane`` at once.

    ``lane`` is rearranged in place so that every requested rank position
    holds the value a full sort would put there; the returned mapping goes
    from rank to that value. Partition work is shared: the middle requested
    rank is placed first and the ranks on either side are then solved
    within their own half only.
    """
    requested = list(ranks)
    if not requested:
        return {}
    length = check_lane(lane)
    if length == 0:
        raise EmptyInput()
    ordered = sorted({_check_rank(r, length) for r in requested})
    _solve(lane, 0, length, ordered, np.random.default_rng())
    return {r: lane[r] for r in ordered}
