"""Selection engine: total order, multi-rank selection, interpolation, axis lanes.

A quantile is read off a lane by partially ordering it in place with
quickselect; several ranks share partition work so no full sort is needed.
"""

from .axis import median_axis, quantile_axis, quantile_axis_mut, quantile_axis_skipnan
from .interpolate import Interpolation
from .quantile import median, quantile, quantile_skipnan, quantiles, quantiles_skipnan
from .select import partition_mut, select, select_many

__all__ = [
    "Interpolation",
    "median",
    "median_axis",
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
