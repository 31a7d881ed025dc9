from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from .config import AppConfig, load_config
from .core import axis as _axis
from .core.axis import Levels
from .core.interpolate import InterpolationLike
from .utils.logging import setup_logging


logger = logging.getLogger(__name__)


class QuantileEngine:
    """Axis-wise quantiles bound to a configuration.

    The configured interpolation is used whenever a call does not pass one,
    and lanes go to a thread pool according to the ``parallel`` section.
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config if config is not None else AppConfig()
        parallel = self.config.runtime.parallel
        logger.debug(
            "quantile engine ready",
            extra={
                "interpolation": self.config.runtime.quantile.interpolation.value,
                "workers": parallel.workers,
                "min_lanes": parallel.min_lanes,
            },
        )

    @classmethod
    def from_env(cls, configure_logging: bool = True) -> "QuantileEngine":
        """Build an engine from ``ndstats.yaml`` and the environment.

        Unless ``configure_logging`` is False, root logging is set up at
        ``NDSTATS_LOG_LEVEL`` first.
        """
        config = load_config()
        if configure_logging:
            setup_logging(config.env.NDSTATS_LOG_LEVEL)
        return cls(config)

    def _interpolation(self, interpolation: Optional[InterpolationLike]) -> InterpolationLike:
        if interpolation is None:
            return self.config.runtime.quantile.interpolation
        return interpolation

    def quantile_axis(
        self,
        array: Any,
        axis: int,
        levels: Levels,
        interpolation: Optional[InterpolationLike] = None,
    ) -> np.ndarray:
        parallel = self.config.runtime.parallel
        return _axis.quantile_axis(
            array,
            axis,
            levels,
            self._interpolation(interpolation),
            workers=parallel.workers,
            min_lanes=parallel.min_lanes,
        )

    def quantile_axis_skipnan(
        self,
        array: Any,
        axis: int,
        levels: Levels,
        interpolation: Optional[InterpolationLike] = None,
    ) -> np.ndarray:
        parallel = self.config.runtime.parallel
        return _axis.quantile_axis_skipnan(
            array,
            axis,
            levels,
            self._interpolation(interpolation),
            workers=parallel.workers,
            min_lanes=parallel.min_lanes,
        )

    def median_axis(self, array: Any, axis: int) -> np.ndarray:
        return self.quantile_axis(array, axis, 0.5)
