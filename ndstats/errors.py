from __future__ import annotations

from typing import Any


class QuantileError(Exception):
    """Base class for order-statistic failures. Never raised directly."""


class EmptyInput(QuantileError, ValueError):
    """A lane or array has no elements along the axis being reduced."""

    def __init__(self, message: str = "cannot select from an empty lane") -> None:
        super().__init__(message)


class IndexOutOfBounds(QuantileError, IndexError):
    """A requested rank lies outside ``[0, length)``."""

    def __init__(self, index: Any, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"rank {index!r} is out of bounds for lane of length {length}")


class InvalidQuantile(QuantileError, ValueError):
    """A quantile level lies outside ``[0.0, 1.0]``."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"quantile level must be in [0, 1], got {level!r}")
