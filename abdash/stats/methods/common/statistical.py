"""
abdash.stats.methods.common.statistical
=======================================

Core statistical operations and utilities.

Provides the arithmetic building blocks for the two-sample test (sample
moments, Welch standard error and Welch-Satterthwaite degrees of freedom)
together with the rounding helpers used when results are rendered.
"""

from __future__ import annotations
import math
from typing import Sequence


def sample_mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sample."""
    if len(values) == 0:
        raise ValueError("sample_mean requires at least one value")
    return sum(values) / len(values)


def sample_variance(values: Sequence[float], mean: float) -> float:
    """Unbiased sample variance (divisor n - 1).

    Args:
        values: Sample with at least two values
        mean: Precomputed sample mean

    Returns:
        Sample variance; ``inf`` when the squared deviations overflow
    """
    n = len(values)
    if n < 2:
        raise ValueError(f"sample_variance requires at least 2 values, got {n}")
    return sum((v - mean) * (v - mean) for v in values) / (n - 1)


def welch_standard_error(var1: float, n1: int, var2: float, n2: int) -> float:
    """Standard error of a difference in means without assuming equal variances.

    SE = sqrt(var1/n1 + var2/n2)
    """
    return math.sqrt(var1 / n1 + var2 / n2)


def welch_degrees_of_freedom(var1: float, n1: int, var2: float, n2: int) -> float:
    """Welch-Satterthwaite approximation of the degrees of freedom.

    df = (v1/n1 + v2/n2)^2 / ((v1/n1)^2/(n1-1) + (v2/n2)^2/(n2-1))

    Args:
        var1, n1: Variance and size of sample 1 (n1 >= 2)
        var2, n2: Variance and size of sample 2 (n2 >= 2)

    Returns:
        Fractional degrees of freedom, or ``nan`` when the squared variance
        terms underflow to zero or overflow

    Examples:
        >>> round(welch_degrees_of_freedom(1.0, 10, 1.0, 10), 6)
        18.0
        >>> math.isnan(welch_degrees_of_freedom(1e-320, 2, 1e-320, 2))
        True
    """
    s1 = var1 / n1
    s2 = var2 / n2
    denominator = s1 * s1 / (n1 - 1) + s2 * s2 / (n2 - 1)
    if denominator == 0 or not math.isfinite(denominator):
        return math.nan
    return (s1 + s2) * (s1 + s2) / denominator


def round_half_up(value: float) -> int:
    """Round to the nearest integer.

    Ties go toward positive infinity (like JavaScript ``Math.round``).

    >>> round_half_up(7.5), round_half_up(8.5), round_half_up(-0.5)
    (8, 9, 0)
    """
    return int(math.floor(value + 0.5))


def format_fixed(value: float, digits: int) -> str:
    """Render ``value`` with a fixed number of decimal places.

    >>> format_fixed(36.0, 3), format_fixed(0.00001, 4)
    ('36.000', '0.0000')
    """
    return f"{value:.{digits}f}"
