"""Interpolation policies: how a fractional rank maps to one or two ranks.

For a lane of length ``n`` the level ``q`` sits at the virtual position
``q * (n - 1)`` of the sorted lane. When that position is not an integer
the quantile lies between two neighbouring ranks, and the policy decides
which of them to read and how to combine them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Tuple, Union

import numpy as np


class Interpolation(str, Enum):
    LINEAR = "linear"
    LOWER = "lower"
    HIGHER = "higher"
    NEAREST = "nearest"
    MIDPOINT = "midpoint"


InterpolationLike = Union[Interpolation, str]
CombineFunc = Callable[[Any, Any, float], Any]


def float_index(q: float, n: int) -> float:
    return q * (n - 1)


def lower_index(q: float, n: int) -> int:
    return math.floor(float_index(q, n))


def higher_index(q: float, n: int) -> int:
    return math.ceil(float_index(q, n))


def fraction(q: float, n: int) -> float:
    position = float_index(q, n)
    return position - math.floor(position)


def _lift(value: Any) -> Any:
    # Fixed-width integers overflow on sums and differences; Python ints do not.
    if isinstance(value, (np.integer, np.bool_)):
        return int(value)
    return value


def _lower(lower: Any, higher: Any, frac: float) -> Any:
    return lower


def _higher(lower: Any, higher: Any, frac: float) -> Any:
    return higher


def _nearest(lower: Any, higher: Any, frac: float) -> Any:
    # An exact half resolves upwards.
    return lower if frac < 0.5 else higher


def _midpoint(lower: Any, higher: Any, frac: float) -> Any:
    # Half the gap added to the lower value keeps datetimes valid: only their
    # difference can be divided.
    lo, hi = _lift(lower), _lift(higher)
    return lo + (hi - lo) / 2


def _linear(lower: Any, higher: Any, frac: float) -> Any:
    if frac == 0:
        if isinstance(lower, (np.integer, np.bool_)):
            return float(lower)
        return lower
    lo, hi = _lift(lower), _lift(higher)
    return lo + frac * (hi - lo)


@dataclass(frozen=True)
class PolicySpec:
    key: Interpolation
    label: str
    needs_lower: Callable[[float], bool]
    needs_higher: Callable[[float], bool]
    combine: CombineFunc
    # True when the result may leave the element type (e.g. int -> float).
    arithmetic: bool = False


def _always(frac: float) -> bool:
    return True


def _never(frac: float) -> bool:
    return False


REGISTRY: Dict[Interpolation, PolicySpec] = {
    Interpolation.LINEAR: PolicySpec(
        Interpolation.LINEAR, "Linear", _always, _always, _linear, arithmetic=True
    ),
    Interpolation.LOWER: PolicySpec(Interpolation.LOWER, "Lower", _always, _never, _lower),
    Interpolation.HIGHER: PolicySpec(Interpolation.HIGHER, "Higher", _never, _always, _higher),
    Interpolation.NEAREST: PolicySpec(
        Interpolation.NEAREST,
        "Nearest",
        lambda frac: frac < 0.5,
        lambda frac: frac >= 0.5,
        _nearest,
    ),
    Interpolation.MIDPOINT: PolicySpec(
        Interpolation.MIDPOINT, "Midpoint", _always, _always, _midpoint, arithmetic=True
    ),
}


def get_policy(interpolation: InterpolationLike) -> PolicySpec:
    """Look up a policy by enum member or by its lowercase name."""
    try:
        return REGISTRY[Interpolation(interpolation)]
    except ValueError:
        valid = ", ".join(p.value for p in Interpolation)
        raise ValueError(f"unknown interpolation {interpolation!r}; expected one of {valid}") from None


def needed_ranks(interpolation: InterpolationLike, q: float, n: int) -> Tuple[int, ...]:
    """Ranks that must be selected to resolve level ``q`` on a lane of length ``n``."""
    policy = get_policy(interpolation)
    frac = fraction(q, n)
    ranks = []
    if policy.needs_lower(frac):
        ranks.append(lower_index(q, n))
    if policy.needs_higher(frac):
        ranks.append(higher_index(q, n))
    return tuple(ranks)


def interpolate(interpolation: InterpolationLike, q: float, n: int, values: Mapping[int, Any]) -> Any:
    """Combine the selected rank values into the quantile estimate for ``q``.

    ``values`` maps rank to value and must contain every rank reported by
    :func:`needed_ranks` for the same arguments.
    """
    policy = get_policy(interpolation)
    frac = fraction(q, n)
    lower = values[lower_index(q, n)] if policy.needs_lower(frac) else None
    higher = values[higher_index(q, n)] if policy.needs_higher(frac) else None
    return policy.combine(lower, higher, frac)
