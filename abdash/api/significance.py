"""
abdash.api.significance
=======================

Significance facade for A/B comparisons.

Re-exports the five engine operations and adds `analyze_comparison`, which
runs all of them for one comparison the way the dashboard's significance view
does: a chi-square test on the votes, Welch's t-test on the click-likelihood
scores, Cohen's h on the vote shares and a confidence interval per variant.
`ComparisonSignificance.recommendation` turns the 95% flags into the view's
marketing call.

Examples
--------
>>> from abdash.api.significance import analyze_comparison
>>> result = analyze_comparison(votes_a=75, votes_b=25,
...                             scores_a=[4, 5, 5], scores_b=[3, 3, 4])
>>> result.effect.magnitude
'large'
>>> round(result.interval_a.estimate, 2), round(result.interval_b.estimate, 2)
(0.75, 0.25)
>>> result.to_display()["chi_square"]
'25.000'
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from abdash.core.config import SignificanceConfig
from abdash.core.names import Recommendation
from abdash.stats.common.interpretation import classify_p_value, interpret_p_value
from abdash.stats.schemes.two_proportions.core import (
    ChiSquareResult,
    ConfidenceInterval,
    EffectSizeResult,
)
from abdash.stats.schemes.two_proportions.statistics import (
    chi_square_test,
    effect_size,
    proportion_confidence_interval,
)
from abdash.stats.schemes.two_samples.statistics import TTestResult, t_test

logger = logging.getLogger(__name__)

__all__ = [
    "RECOMMENDATION_TEXT",
    "ComparisonSignificance",
    "analyze_comparison",
    "chi_square_test",
    "classify_p_value",
    "effect_size",
    "interpret_p_value",
    "proportion_confidence_interval",
    "t_test",
]

RECOMMENDATION_TEXT: Dict[str, str] = {
    "implement_winner": (
        "Strong evidence to implement the winning variant. Both preference and "
        "engagement are significantly different."
    ),
    "test_further": (
        "Preference is significant, but engagement metrics are inconclusive. "
        "Consider testing further or monitoring post-launch."
    ),
    "not_significant": (
        "Results are not statistically significant. Either variant would likely "
        "perform similarly. Consider testing with larger sample size."
    ),
}


@dataclass(frozen=True)
class ComparisonSignificance:
    """
    Every significance result for one A/B comparison.

    Attributes
    ----------
    vote_test : ChiSquareResult
        Chi-square test on the vote split
    click_test : TTestResult
        Welch's t-test on the click-likelihood scores
    effect : EffectSizeResult
        Cohen's h between the two vote shares
    interval_a, interval_b : ConfidenceInterval
        Interval for each variant's share of the total votes
    config : SignificanceConfig
        Settings used for the intervals and for ``to_display``
    """

    vote_test: ChiSquareResult
    click_test: TTestResult
    effect: EffectSizeResult
    interval_a: ConfidenceInterval
    interval_b: ConfidenceInterval
    config: SignificanceConfig

    @property
    def vote_interpretation(self) -> str:
        return interpret_p_value(self.vote_test.p_value)

    @property
    def click_interpretation(self) -> str:
        return interpret_p_value(self.click_test.p_value)

    @property
    def recommendation(self) -> Recommendation:
        """
        Marketing call from the 95% flags.

        ``"implement_winner"`` when votes and clicks are both significant,
        ``"test_further"`` when only the votes are, ``"not_significant"``
        otherwise. A significant click test alone does not count.
        """
        if self.vote_test.significant_95 and self.click_test.significant_95:
            return "implement_winner"
        if self.vote_test.significant_95:
            return "test_further"
        return "not_significant"

    @property
    def recommendation_text(self) -> str:
        return RECOMMENDATION_TEXT[self.recommendation]

    def to_display(self) -> Dict[str, Any]:
        """Flatten the results into display strings using ``config`` precision."""
        cfg = self.config
        vote = self.vote_test.to_display(cfg.statistic_digits, cfg.p_value_digits)
        click = self.click_test.to_display(cfg.statistic_digits, cfg.p_value_digits)
        effect = self.effect.to_display(cfg.effect_digits)
        return {
            "chi_square": vote["chi_square"],
            "vote_p_value": vote["p_value"],
            "vote_significant_95": vote["significant_95"],
            "vote_significant_99": vote["significant_99"],
            "t_statistic": click["t_statistic"],
            "click_p_value": click["p_value"],
            "click_degrees_of_freedom": click["degrees_of_freedom"],
            "click_significant_95": click["significant_95"],
            "click_significant_99": click["significant_99"],
            "mean_difference": click["mean_difference"],
            "cohens_h": effect["cohens_h"],
            "effect_magnitude": effect["magnitude"],
            "recommendation": self.recommendation,
        }


def analyze_comparison(
    votes_a: int,
    votes_b: int,
    scores_a: Sequence[float],
    scores_b: Sequence[float],
    share_a: Optional[float] = None,
    share_b: Optional[float] = None,
    total_votes: Optional[int] = None,
    config: Optional[SignificanceConfig] = None,
) -> ComparisonSignificance:
    """
    Run every significance test for one A/B comparison.

    Parameters
    ----------
    votes_a, votes_b : int
        Votes for each variant
    scores_a, scores_b : sequence of float
        Click-likelihood scores for each variant, missing values already removed
    share_a, share_b : float, optional
        Vote shares in [0, 1] used for Cohen's h. Derived from the votes when
        omitted (0 when there are no votes).
    total_votes : int, optional
        Denominator for shares and intervals. Defaults to ``votes_a + votes_b``.
    config : SignificanceConfig, optional
        Interval level and display precision

    Returns
    -------
    ComparisonSignificance
    """
    if config is None:
        config = SignificanceConfig()
    config.validate()

    total = votes_a + votes_b if total_votes is None else total_votes
    vote_test = chi_square_test(votes_a, votes_b)
    click_test = t_test(scores_a, scores_b)

    if share_a is None:
        share_a = votes_a / total if total else 0.0
    if share_b is None:
        share_b = votes_b / total if total else 0.0
    effect = effect_size(share_a, share_b)

    interval_a = proportion_confidence_interval(votes_a, total, config.confidence_level)
    interval_b = proportion_confidence_interval(votes_b, total, config.confidence_level)

    logger.debug(
        "comparison analyzed: chi2=%.3f p_vote=%.4f t=%.3f p_click=%.4f h=%.3f",
        vote_test.statistic,
        vote_test.p_value,
        click_test.statistic,
        click_test.p_value,
        effect.cohens_h,
    )

    return ComparisonSignificance(
        vote_test=vote_test,
        click_test=click_test,
        effect=effect,
        interval_a=interval_a,
        interval_b=interval_b,
        config=config,
    )
