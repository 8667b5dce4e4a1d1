"""Tests for the significance facade."""

from __future__ import annotations

import pytest

import abdash
from abdash.api.significance import RECOMMENDATION_TEXT, analyze_comparison
from abdash.core.config import SignificanceConfig
from abdash.core.errors import ConfigError


def test_package_exports_engine_operations() -> None:
    assert abdash.chi_square_test(80, 20).significant_99 is True
    assert abdash.t_test([], [1]).status == "empty_sample"
    assert abdash.effect_size(0.5, 0.5).magnitude == "small"
    assert abdash.proportion_confidence_interval(0, 0).upper == 0.0
    assert abdash.interpret_p_value(0.2).startswith("Not significant")
    assert abdash.classify_p_value(0.02).value == "significant"
    assert abdash.__version__ == "0.1.0"


def test_analyze_comparison_runs_every_test() -> None:
    result = analyze_comparison(
        votes_a=80, votes_b=20, scores_a=[4, 5, 5, 4], scores_b=[2, 3, 2, 2]
    )
    assert result.vote_test.statistic == pytest.approx(36.0)
    assert result.click_test.status == "ok"
    assert result.click_test.mean_difference == pytest.approx(2.25)
    assert result.effect.magnitude == "large"
    assert result.interval_a.estimate == pytest.approx(0.8)
    assert result.interval_b.estimate == pytest.approx(0.2)
    assert result.vote_interpretation.startswith("Highly significant")


def test_shares_default_to_vote_split() -> None:
    derived = analyze_comparison(30, 10, [], [])
    explicit = analyze_comparison(30, 10, [], [], share_a=0.75, share_b=0.25)
    assert derived.effect.cohens_h == pytest.approx(explicit.effect.cohens_h)


def test_shares_override_vote_split() -> None:
    result = analyze_comparison(30, 10, [], [], share_a=0.5, share_b=0.5)
    assert result.effect.cohens_h == 0.0


def test_no_votes_gives_neutral_results() -> None:
    result = analyze_comparison(0, 0, [], [])
    assert result.vote_test.status == "no_observations"
    assert result.click_test.status == "empty_sample"
    assert result.effect.cohens_h == 0.0
    assert (result.interval_a.lower, result.interval_a.upper) == (0.0, 0.0)
    assert result.click_interpretation.startswith("Not significant")


def test_total_votes_sets_interval_denominator() -> None:
    result = analyze_comparison(40, 40, [], [], total_votes=100)
    assert result.interval_a.estimate == pytest.approx(0.4)
    assert result.effect.cohens_h == 0.0


def test_config_controls_interval_level_and_precision() -> None:
    cfg = SignificanceConfig(confidence_level=0.99, statistic_digits=1, p_value_digits=2)
    result = analyze_comparison(80, 20, [1, 2], [1, 3], config=cfg)
    assert result.interval_a.confidence_level == 0.99
    assert result.interval_a.width > analyze_comparison(80, 20, [], []).interval_a.width

    shown = result.to_display()
    assert shown["chi_square"] == "36.0"
    assert shown["vote_p_value"] == "0.00"
    assert shown["vote_significant_99"] is True
    assert shown["effect_magnitude"] == "Large effect"


def test_invalid_config_is_rejected() -> None:
    with pytest.raises(ConfigError):
        analyze_comparison(1, 1, [], [], config=SignificanceConfig(confidence_level=2.0))


SEPARATED_A = [4.0, 5.0] * 20
SEPARATED_B = [2.0, 3.0] * 20
OVERLAPPING = [3.0, 4.0] * 20


@pytest.mark.parametrize(
    ("votes", "scores", "expected"),
    [
        ((80, 20), (SEPARATED_A, SEPARATED_B), "implement_winner"),
        ((80, 20), (OVERLAPPING, OVERLAPPING), "test_further"),
        ((25, 25), (OVERLAPPING, OVERLAPPING), "not_significant"),
        # significant clicks alone are not enough
        ((25, 25), (SEPARATED_A, SEPARATED_B), "not_significant"),
    ],
)
def test_recommendation_follows_95_flags(votes: tuple, scores: tuple, expected: str) -> None:
    result = analyze_comparison(*votes, *scores)
    assert result.recommendation == expected
    assert result.recommendation_text == RECOMMENDATION_TEXT[expected]
    assert result.to_display()["recommendation"] == expected


def test_recommendation_text() -> None:
    assert RECOMMENDATION_TEXT["implement_winner"].startswith("Strong evidence to implement")
    assert "testing further" in RECOMMENDATION_TEXT["test_further"]
    assert RECOMMENDATION_TEXT["not_significant"].endswith("larger sample size.")
