from __future__ import annotations

from typing import Any, Iterable, List, Sequence, Set

import numpy as np

from ..errors import EmptyInput, InvalidQuantile
from .interpolate import Interpolation, InterpolationLike, get_policy, interpolate, needed_ranks
from .order import missing_value, remove_nan
from .select import check_lane, select_many


def check_quantile(q: Any) -> float:
    """Return ``q`` as a float, raising ``InvalidQuantile`` outside ``[0, 1]``."""
    try:
        level = float(q)
    except (TypeError, ValueError):
        raise InvalidQuantile(q) from None
    # NaN fails both comparisons and is rejected here as well.
    if not 0.0 <= level <= 1.0:
        raise InvalidQuantile(q)
    return level


def check_levels(levels: Iterable[Any]) -> List[float]:
    return [check_quantile(q) for q in levels]


def quantiles(
    lane: np.ndarray,
    levels: Sequence[float],
    interpolation: InterpolationLike = Interpolation.LINEAR,
) -> List[Any]:
    """Resolve several quantile levels on one lane with a single selection pass.

    The ranks needed by every level are gathered into one rank set and
    handed to :func:`select_many` once; each level is then combined from the
    shared result. Results follow the order of ``levels``.

    ``lane`` is rearranged in place; pass a copy to keep the original.
    """
    checked = check_levels(levels)
    get_policy(interpolation)
    n = check_lane(lane)
    if n == 0:
        raise EmptyInput()
    ranks: Set[int] = set()
    for q in checked:
        ranks.update(needed_ranks(interpolation, q, n))
    values = select_many(lane, ranks)
    return [interpolate(interpolation, q, n, values) for q in checked]


def quantile(
    lane: np.ndarray,
    q: float,
    interpolation: InterpolationLike = Interpolation.LINEAR,
) -> Any:
    """Return the ``q``-th quantile of a 1-D ``lane``, shuffling it in place.

    ``q=0`` gives the minimum, ``q=0.5`` the median and ``q=1`` the maximum.
    Between two ranks the result follows ``interpolation``.
    """
    return quantiles(lane, [q], interpolation)[0]


def median(lane: np.ndarray) -> Any:
    return quantile(lane, 0.5, Interpolation.LINEAR)


def quantile_skipnan(
    lane: np.ndarray,
    q: float,
    interpolation: InterpolationLike = Interpolation.LINEAR,
) -> Any:
    """Like :func:`quantile`, ignoring NaN values.

    NaN (NaT for datetime and timedelta lanes) if nothing else is left.
    """
    return quantiles_skipnan(lane, [q], interpolation)[0]


def quantiles_skipnan(
    lane: np.ndarray,
    levels: Sequence[float],
    interpolation: InterpolationLike = Interpolation.LINEAR,
) -> List[Any]:
    checked = check_levels(levels)
    if check_lane(lane) == 0:
        raise EmptyInput()
    kept = remove_nan(lane)
    if kept.shape[0] == 0:
        return [missing_value(lane.dtype) for _ in checked]
    return quantiles(kept, checked, interpolation)
