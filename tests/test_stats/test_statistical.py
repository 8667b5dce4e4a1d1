"""Tests for sample moments and Welch building blocks."""

from __future__ import annotations

import math

import pytest

from abdash.stats.methods.common.statistical import (
    format_fixed,
    round_half_up,
    sample_mean,
    sample_variance,
    welch_degrees_of_freedom,
    welch_standard_error,
)


def test_sample_mean_and_unbiased_variance() -> None:
    values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    mean = sample_mean(values)
    assert mean == 5.0
    assert sample_variance(values, mean) == pytest.approx(32 / 7)


def test_sample_mean_rejects_empty_sample() -> None:
    with pytest.raises(ValueError, match="at least one value"):
        sample_mean([])


def test_sample_variance_requires_two_values() -> None:
    with pytest.raises(ValueError, match="at least 2 values, got 1"):
        sample_variance([3.0], 3.0)


def test_welch_standard_error() -> None:
    assert welch_standard_error(2.5, 5, 2.5, 5) == pytest.approx(1.0)


def test_welch_degrees_of_freedom_equal_variances_and_sizes() -> None:
    # equal variances and sizes give 2(n - 1)
    assert welch_degrees_of_freedom(1.0, 10, 1.0, 10) == pytest.approx(18.0)


def test_welch_degrees_of_freedom_one_constant_sample() -> None:
    assert welch_degrees_of_freedom(0.0, 4, 3.0, 7) == pytest.approx(6.0)


@pytest.mark.parametrize(("var1", "var2"), [(1e-320, 1e-320), (math.inf, 0.5), (1e300, 1e300)])
def test_welch_degrees_of_freedom_outside_float_range_is_nan(var1: float, var2: float) -> None:
    assert math.isnan(welch_degrees_of_freedom(var1, 2, var2, 2))


def test_sample_variance_overflows_to_inf() -> None:
    assert sample_variance([1e200, -1e200], 0.0) == math.inf


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3.49, 3), (3.5, 4), (4.5, 5), (7.9999, 8), (-1.5, -1), (-0.5, 0), (2.5, 3)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


def test_format_fixed() -> None:
    assert format_fixed(0.8414806, 4) == "0.8415"
    assert format_fixed(-1.0, 3) == "-1.000"
