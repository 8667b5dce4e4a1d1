"""
abdash.stats.schemes.two_samples.statistics
===========================================

Welch's two-sample t-test for rating scores (e.g. 1-5 click likelihood).

Degenerate samples never produce NaN or infinite output. They come back as a
neutral result (t = 0, p = 1, not significant) whose ``status`` names the
reason:

- ``"empty_sample"``: either sample has no scores
- ``"insufficient_sample"``: either sample has a single score, so its
  unbiased variance is undefined
- ``"zero_variance"``: both samples are constant, so the standard error is 0
- ``"out_of_range"``: the moments overflow or underflow floating point
  (e.g. scores near 1e200, or spreads near 1e-160), so no finite statistic
  or degrees of freedom exist

Examples
--------
>>> from abdash.stats.schemes.two_samples.statistics import t_test
>>> r = t_test([9, 10, 11], [1, 2, 3])
>>> r.degrees_of_freedom, r.mean_difference, r.significant_99
(4, 8.0, True)
>>> t_test([4, 4, 4, 4], [4, 4, 4, 4]).status
'zero_variance'
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Sequence

from abdash.core.names import TTestStatus
from abdash.stats.common.distributions import t_cdf
from abdash.stats.methods.common.statistical import (
    format_fixed,
    round_half_up,
    sample_mean,
    sample_variance,
    welch_degrees_of_freedom,
    welch_standard_error,
)

logger = logging.getLogger(__name__)

ALPHA_95 = 0.05
ALPHA_99 = 0.01


@dataclass(frozen=True)
class TTestResult:
    """
    Outcome of Welch's t-test.

    Attributes
    ----------
    statistic : float
        (mean1 - mean2) / SE
    p_value : float
        Two-tailed p-value
    degrees_of_freedom : int
        Welch-Satterthwaite df rounded half up, for reporting
    degrees_of_freedom_exact : float
        Unrounded df, as passed to the t CDF
    mean_difference : float
        mean1 - mean2
    significant_95 : bool
        ``p_value < 0.05``
    significant_99 : bool
        ``p_value < 0.01``
    status : {"ok", "empty_sample", "insufficient_sample", "zero_variance", "out_of_range"}
    """

    statistic: float
    p_value: float
    degrees_of_freedom: int
    degrees_of_freedom_exact: float
    mean_difference: float
    significant_95: bool
    significant_99: bool
    status: TTestStatus = "ok"

    def to_display(
        self, statistic_digits: int = 3, p_value_digits: int = 4
    ) -> Dict[str, Any]:
        return {
            "t_statistic": format_fixed(self.statistic, statistic_digits),
            "p_value": format_fixed(self.p_value, p_value_digits),
            "degrees_of_freedom": self.degrees_of_freedom,
            "significant_95": self.significant_95,
            "significant_99": self.significant_99,
            "mean_difference": format_fixed(self.mean_difference, statistic_digits),
        }


def _neutral(status: TTestStatus, mean_difference: float = 0.0) -> TTestResult:
    return TTestResult(
        statistic=0.0,
        p_value=1.0,
        degrees_of_freedom=0,
        degrees_of_freedom_exact=0.0,
        mean_difference=mean_difference,
        significant_95=False,
        significant_99=False,
        status=status,
    )


def _as_scores(name: str, values: Sequence[float]) -> list[float]:
    scores = [float(v) for v in values]
    for v in scores:
        if not math.isfinite(v):
            raise ValueError(f"{name} must contain only finite values, got {v}")
    return scores


def t_test(scores_a: Sequence[float], scores_b: Sequence[float]) -> TTestResult:
    """
    Welch's two-sample t-test with a two-tailed p-value.

    Args:
        scores_a: Scores observed for variant A
        scores_b: Scores observed for variant B

    Returns:
        TTestResult; see the module docstring for degenerate cases

    Examples:
        >>> r = t_test([1, 2, 3, 4, 5], [2, 3, 4, 5, 6])
        >>> r.statistic, r.degrees_of_freedom, r.significant_95
        (-1.0, 8, False)
        >>> t_test([5], [1, 2, 3]).status
        'insufficient_sample'
    """
    a = _as_scores("scores_a", scores_a)
    b = _as_scores("scores_b", scores_b)
    n1, n2 = len(a), len(b)

    if n1 == 0 or n2 == 0:
        logger.debug("t_test called with an empty sample (n1=%d, n2=%d)", n1, n2)
        return _neutral("empty_sample")

    mean1 = sample_mean(a)
    mean2 = sample_mean(b)
    diff = mean1 - mean2
    if not math.isfinite(diff):
        logger.debug("t_test sample means overflow floating point")
        return _neutral("out_of_range")

    if n1 < 2 or n2 < 2:
        logger.warning(
            "t_test needs at least 2 scores per sample, got n1=%d, n2=%d; "
            "reporting as insufficient_sample",
            n1,
            n2,
        )
        return _neutral("insufficient_sample", diff)

    var1 = sample_variance(a, mean1)
    var2 = sample_variance(b, mean2)

    se = welch_standard_error(var1, n1, var2, n2)
    if se == 0:
        logger.debug("t_test samples are constant; standard error is zero")
        return _neutral("zero_variance", diff)

    statistic = diff / se
    df = welch_degrees_of_freedom(var1, n1, var2, n2)
    if not (math.isfinite(se) and math.isfinite(statistic) and math.isfinite(df)):
        logger.debug(
            "t_test moments out of floating-point range (se=%r, df=%r)", se, df
        )
        return _neutral("out_of_range", diff)

    p_value = 2 * (1 - t_cdf(abs(statistic), df))

    return TTestResult(
        statistic=statistic,
        p_value=p_value,
        degrees_of_freedom=round_half_up(df),
        degrees_of_freedom_exact=df,
        mean_difference=diff,
        significant_95=p_value < ALPHA_95,
        significant_99=p_value < ALPHA_99,
    )
