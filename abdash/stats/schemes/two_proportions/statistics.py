"""
abdash.stats.schemes.two_proportions.statistics
===============================================

Statistical computations for A/B vote counts.

- `chi_square_test`: is the vote split different from an even 50/50 split?
- `proportion_confidence_interval`: interval for one variant's vote share
- `effect_size`: Cohen's h between two vote shares

Examples
--------
>>> from abdash.stats.schemes.two_proportions.statistics import (
...     chi_square_test, proportion_confidence_interval, effect_size)
>>> chi_square_test(0, 0).status
'no_observations'
>>> ci = proportion_confidence_interval(50, 100)
>>> round(ci.lower, 3), round(ci.upper, 3), ci.estimate
(0.402, 0.598, 0.5)
>>> round(effect_size(1.0, 0.0).cohens_h, 4)
3.1416
"""

from __future__ import annotations
import logging
import math

from abdash.core.names import Magnitude
from abdash.stats.common.distributions import chi_square_cdf
from abdash.stats.schemes.two_proportions.core import (
    ChiSquareResult,
    ConfidenceInterval,
    EffectSizeResult,
)

logger = logging.getLogger(__name__)

ALPHA_95 = 0.05
ALPHA_99 = 0.01

Z_95 = 1.96
Z_99 = 2.576

SMALL_EFFECT = 0.2
MEDIUM_EFFECT = 0.5


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def chi_square_test(votes_a: int, votes_b: int) -> ChiSquareResult:
    """
    Chi-square test of a two-way vote split against equal preference.

    Under the null hypothesis each variant expects half of the votes. The
    statistic sums (observed - expected)^2 / expected over both variants,
    which simplifies to (a - b)^2 / (a + b), and is referred to a chi-square
    distribution with one degree of freedom.

    Args:
        votes_a: Votes for variant A
        votes_b: Votes for variant B

    Returns:
        ChiSquareResult with full-precision statistic and p-value

    Examples:
        >>> r = chi_square_test(51, 49)
        >>> round(r.statistic, 3), round(r.p_value, 3), r.significant_95
        (0.04, 0.841, False)
    """
    _check_count("votes_a", votes_a)
    _check_count("votes_b", votes_b)

    total = votes_a + votes_b
    if total == 0:
        logger.debug("chi_square_test called with no votes; returning neutral result")
        return ChiSquareResult(
            statistic=0.0,
            p_value=1.0,
            significant_95=False,
            significant_99=False,
            status="no_observations",
        )

    expected = total / 2
    statistic = (votes_a - expected) ** 2 / expected + (votes_b - expected) ** 2 / expected
    p_value = 1 - chi_square_cdf(statistic, 1)

    return ChiSquareResult(
        statistic=statistic,
        p_value=p_value,
        significant_95=p_value < ALPHA_95,
        significant_99=p_value < ALPHA_99,
    )


def proportion_confidence_interval(
    successes: int, total: int, confidence_level: float = 0.95
) -> ConfidenceInterval:
    """
    Wald confidence interval for a proportion.

    Only two levels are distinguished: exactly 0.99 uses z = 2.576, anything
    else uses the 95% z-score of 1.96.

    Args:
        successes: Number of successes (e.g., votes for A)
        total: Total sample size
        confidence_level: Confidence level (0.95 or 0.99)

    Returns:
        ConfidenceInterval clamped to [0, 1]; [0, 0] when ``total`` is 0
    """
    _check_count("successes", successes)
    _check_count("total", total)
    if successes > total:
        raise ValueError(f"successes must not exceed total, got {successes} > {total}")

    if total == 0:
        return ConfidenceInterval(
            lower=0.0, upper=0.0, estimate=0.0, confidence_level=confidence_level
        )

    p = successes / total
    z = Z_99 if confidence_level == 0.99 else Z_95
    se = math.sqrt(p * (1 - p) / total)

    return ConfidenceInterval(
        lower=max(0.0, p - z * se),
        upper=min(1.0, p + z * se),
        estimate=p,
        confidence_level=confidence_level,
    )


def _classify_effect(abs_h: float) -> Magnitude:
    if abs_h < SMALL_EFFECT:
        return "small"
    if abs_h < MEDIUM_EFFECT:
        return "medium"
    return "large"


def effect_size(p1: float, p2: float) -> EffectSizeResult:
    """
    Cohen's h for the difference between two proportions.

    h = 2 * (asin(sqrt(p1)) - asin(sqrt(p2)))

    Args:
        p1: Proportion 1 in [0, 1]
        p2: Proportion 2 in [0, 1]

    Returns:
        EffectSizeResult with signed h and its magnitude class
    """
    for name, value in (("p1", p1), ("p2", p2)):
        if math.isnan(value) or not 0 <= value <= 1:
            raise ValueError(f"{name} must be a proportion in [0, 1], got {value}")

    h = 2 * (math.asin(math.sqrt(p1)) - math.asin(math.sqrt(p2)))
    return EffectSizeResult(cohens_h=h, magnitude=_classify_effect(abs(h)))
