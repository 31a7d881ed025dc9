"""Order statistics for n-dimensional numpy arrays.

Quantiles, medians and ranked values are computed along any axis by an
in-place multi-rank quickselect instead of a full sort. Five interpolation
policies (linear, lower, higher, nearest, midpoint) decide how a level that
falls between two ranks is resolved.
"""

from .core import (
    Interpolation,
    median,
    median_axis,
    partition_mut,
    quantile,
    quantile_axis,
    quantile_axis_mut,
    quantile_axis_skipnan,
    quantile_skipnan,
    quantiles,
    quantiles_skipnan,
    select,
    select_many,
)
from .core.extrema import max_skipnan, max_value, min_skipnan, min_value
from .core.summary import central_moment, geometric_mean, harmonic_mean, mean
from .engine import QuantileEngine
from .errors import EmptyInput, IndexOutOfBounds, InvalidQuantile, QuantileError

__all__ = [
    "EmptyInput",
    "IndexOutOfBounds",
    "Interpolation",
    "InvalidQuantile",
    "QuantileEngine",
    "QuantileError",
    "central_moment",
    "geometric_mean",
    "harmonic_mean",
    "max_skipnan",
    "max_value",
    "mean",
    "median",
    "median_axis",
    "min_skipnan",
    "min_value",
    "partition_mut",
    "quantile",
    "quantile_axis",
    "quantile_axis_mut",
    "quantile_axis_skipnan",
    "quantile_skipnan",
    "quantiles",
    "quantiles_skipnan",
    "select",
    "select_many",
]
