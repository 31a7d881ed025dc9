from __future__ import annotations

import numpy as np
import pytest

import ndstats
from ndstats.core.summary import central_moment, geometric_mean, harmonic_mean, mean


def test_empty_inputs_give_none() -> None:
    empty = np.array([])
    assert mean(empty) is None
    assert harmonic_mean(empty) is None
    assert geometric_mean(empty) is None
    assert central_moment(empty, 2) is None


def test_means() -> None:
    data = np.array([1.0, 2.0, 4.0])
    assert mean(data) == pytest.approx(7.0 / 3.0)
    assert harmonic_mean(data) == pytest.approx(3.0 / (1.0 + 0.5 + 0.25))
    assert geometric_mean(data) == pytest.approx(2.0)


@pytest.mark.parametrize("order", [2, 3, 4, 5])
def test_central_moment_matches_direct_formula(order: int) -> None:
    rng = np.random.default_rng(order)
    data = rng.normal(loc=1e3, scale=2.0, size=500)
    expected = np.mean((data - data.mean()) ** order)
    assert central_moment(data, order) == pytest.approx(expected, rel=1e-6, abs=1e-9)


def test_low_order_moments() -> None:
    data = np.array([1.0, 5.0, 9.0])
    assert central_moment(data, 0) == 1.0
    assert central_moment(data, 1) == 0.0
    assert central_moment(data, 2) == pytest.approx(32.0 / 3.0)
    with pytest.raises(ValueError):
        central_moment(data, -1)


def test_exported_from_package() -> None:
    assert ndstats.mean is mean
    assert ndstats.harmonic_mean is harmonic_mean
    assert ndstats.geometric_mean is geometric_mean
    assert ndstats.central_moment is central_moment
    assert "central_moment" in ndstats.__all__
