"""Tests for Welch's two-sample t-test."""

from __future__ import annotations

import logging
import math

import pytest
from scipy import stats

from abdash.stats.common.distributions import t_cdf
from abdash.stats.schemes.two_samples import t_test


@pytest.mark.parametrize(("a", "b"), [([], [1, 2, 3]), ([1, 2, 3], []), ([], [])])
def test_empty_sample_is_neutral(a: list, b: list) -> None:
    result = t_test(a, b)
    assert result.statistic == 0.0
    assert result.p_value == 1.0
    assert result.significant_95 is False
    assert result.significant_99 is False
    assert result.status == "empty_sample"


def test_identical_constant_samples_report_zero_variance() -> None:
    result = t_test([4, 4, 4, 4], [4, 4, 4, 4])
    assert result.mean_difference == 0.0
    assert result.statistic == 0.0
    assert result.p_value == 1.0
    assert result.status == "zero_variance"


def test_different_constant_samples_keep_mean_difference() -> None:
    result = t_test([5, 5, 5], [3, 3])
    assert result.status == "zero_variance"
    assert result.mean_difference == 2.0
    assert result.significant_95 is False


@pytest.mark.parametrize(
    ("a", "b", "mean_difference"),
    [
        # squared variance terms underflow to zero
        ([0.0, 1e-160], [0.0, 1e-160], 0.0),
        # squared deviations overflow
        ([1e200, -1e200], [1.0, 2.0], -1.5),
        # sample sum overflows
        ([1e308, 1e308], [1.0, 2.0], 0.0),
    ],
)
def test_moments_outside_float_range_are_neutral(a: list, b: list, mean_difference: float) -> None:
    result = t_test(a, b)
    assert result.status == "out_of_range"
    assert result.statistic == 0.0
    assert result.p_value == 1.0
    assert result.degrees_of_freedom == 0
    assert result.mean_difference == mean_difference
    assert result.significant_95 is False
    assert result.significant_99 is False


def test_single_score_is_insufficient_sample(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="abdash.stats.schemes.two_samples.statistics"):
        result = t_test([5], [1, 2, 3])
    assert result.status == "insufficient_sample"
    assert result.statistic == 0.0
    assert result.p_value == 1.0
    assert result.mean_difference == 3.0
    assert all(
        math.isfinite(v)
        for v in (result.statistic, result.p_value, result.degrees_of_freedom_exact)
    )
    assert "insufficient_sample" in caplog.text


def test_large_df_uses_normal_tail() -> None:
    a = [3.0, 4.0] * 20
    b = [3.2, 4.2] * 20
    result = t_test(a, b)
    reference = stats.ttest_ind(a, b, equal_var=False)

    assert result.statistic == pytest.approx(reference.statistic, rel=1e-9)
    assert result.mean_difference == pytest.approx(-0.2)
    assert result.degrees_of_freedom == 78
    assert result.p_value == pytest.approx(2 * stats.norm.sf(abs(result.statistic)), abs=2e-7)
    assert result.significant_95 is False


def test_strong_separation_in_small_samples_is_significant() -> None:
    result = t_test([9, 10, 11], [1, 2, 3])
    assert result.statistic == pytest.approx(8 / math.sqrt(2 / 3))
    assert result.degrees_of_freedom == 4
    assert result.degrees_of_freedom_exact == pytest.approx(4.0)
    assert result.p_value < 0.01
    assert result.significant_95 is True
    assert result.significant_99 is True


def test_overlapping_small_samples_are_not_significant() -> None:
    result = t_test([1, 2, 3, 4, 5], [2, 3, 4, 5, 6])
    assert result.statistic == pytest.approx(-1.0)
    assert result.mean_difference == pytest.approx(-1.0)
    assert result.degrees_of_freedom == 8
    assert result.p_value > 0.10
    assert result.significant_95 is False


def test_p_value_uses_unrounded_degrees_of_freedom() -> None:
    a = [1.0, 2.0, 2.5, 4.0, 6.0]
    b = [3.0, 3.5, 9.0]
    result = t_test(a, b)
    expected = 2 * (1 - t_cdf(abs(result.statistic), result.degrees_of_freedom_exact))
    assert result.p_value == expected
    assert result.degrees_of_freedom == math.floor(result.degrees_of_freedom_exact + 0.5)


def test_flags_follow_p_value_and_p_value_is_a_probability() -> None:
    samples = [
        ([1, 2, 3], [1, 2, 4]),
        ([2, 3, 3, 4, 5], [1, 1, 2, 2]),
        ([5, 5, 4, 5, 4, 5], [1, 2, 1, 2, 1, 1]),
    ]
    for a, b in samples:
        result = t_test(a, b)
        assert 0.0 <= result.p_value <= 1.0
        assert result.significant_95 is (result.p_value < 0.05)
        assert result.significant_99 is (result.p_value < 0.01)


def test_to_display_rounds_for_presentation_only() -> None:
    result = t_test([1, 2, 3, 4, 5], [2, 3, 4, 5, 6])
    shown = result.to_display()
    assert shown["t_statistic"] == "-1.000"
    assert shown["mean_difference"] == "-1.000"
    assert shown["degrees_of_freedom"] == 8
    assert shown["p_value"] == f"{result.p_value:.4f}"


def test_non_finite_scores_are_rejected() -> None:
    with pytest.raises(ValueError, match="scores_b must contain only finite values"):
        t_test([1, 2, 3], [1, float("nan")])
