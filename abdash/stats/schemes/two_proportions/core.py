"""
abdash.stats.schemes.two_proportions.core
=========================================

Result records for two-proportion comparisons.

All numeric fields keep full precision; rounding happens only in
``to_display()`` so that significance flags never depend on a rounded string.

Examples
--------
>>> from abdash.stats.schemes.two_proportions.core import ChiSquareResult
>>> ChiSquareResult(statistic=36.0, p_value=2e-9, significant_95=True,
...                 significant_99=True).to_display()
{'chi_square': '36.000', 'p_value': '0.0000', 'significant_95': True, 'significant_99': True}
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from abdash.core.names import ChiSquareStatus, Magnitude
from abdash.stats.methods.common.statistical import format_fixed


@dataclass(frozen=True)
class ChiSquareResult:
    """
    Outcome of the chi-square test on a vote split.

    Attributes
    ----------
    statistic : float
        Pearson chi-square statistic (1 degree of freedom)
    p_value : float
        Upper-tail probability of ``statistic``
    significant_95 : bool
        ``p_value < 0.05``
    significant_99 : bool
        ``p_value < 0.01``
    status : {"ok", "no_observations"}
        "no_observations" when both counts are zero
    """

    statistic: float
    p_value: float
    significant_95: bool
    significant_99: bool
    status: ChiSquareStatus = "ok"

    def to_display(
        self, statistic_digits: int = 3, p_value_digits: int = 4
    ) -> Dict[str, Any]:
        return {
            "chi_square": format_fixed(self.statistic, statistic_digits),
            "p_value": format_fixed(self.p_value, p_value_digits),
            "significant_95": self.significant_95,
            "significant_99": self.significant_99,
        }


@dataclass(frozen=True)
class ConfidenceInterval:
    """Normal-approximation interval for a single proportion, clamped to [0, 1]."""

    lower: float
    upper: float
    estimate: float
    confidence_level: float = 0.95

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper


_MAGNITUDE_DESCRIPTIONS: Dict[str, str] = {
    "small": "Small effect",
    "medium": "Medium effect",
    "large": "Large effect",
}


@dataclass(frozen=True)
class EffectSizeResult:
    """Cohen's h and its magnitude class (small < 0.2 <= medium < 0.5 <= large)."""

    cohens_h: float
    magnitude: Magnitude

    @property
    def description(self) -> str:
        return _MAGNITUDE_DESCRIPTIONS[self.magnitude]

    def to_display(self, effect_digits: int = 3) -> Dict[str, Any]:
        return {
            "cohens_h": format_fixed(self.cohens_h, effect_digits),
            "magnitude": self.description,
        }
