"""
Two-proportion comparisons for A/B vote counts.

**Module Organization:**

- `core`: Result records (`ChiSquareResult`, `ConfidenceInterval`,
  `EffectSizeResult`)
- `statistics`: The computations (`chi_square_test`,
  `proportion_confidence_interval`, `effect_size`)

Example Usage
-------------
>>> from abdash.stats.schemes.two_proportions import chi_square_test, effect_size
>>> result = chi_square_test(80, 20)
>>> round(result.statistic, 3), result.significant_95
(36.0, True)
>>> effect_size(0.8, 0.2).magnitude
'large'
"""

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

__all__ = [
    "ChiSquareResult",
    "ConfidenceInterval",
    "EffectSizeResult",
    "chi_square_test",
    "effect_size",
    "proportion_confidence_interval",
]
