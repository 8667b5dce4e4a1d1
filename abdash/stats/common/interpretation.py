"""
abdash.stats.common.interpretation
==================================

Plain-language reading of p-values for workshop participants.

The unit interval is split into four ordered bands with strict ``<``
comparisons, so a boundary value such as 0.05 falls into the weaker band.

Examples
--------
>>> from abdash.stats.common.interpretation import classify_p_value, interpret_p_value
>>> classify_p_value(0.003).value
'highly_significant'
>>> classify_p_value(0.05).value
'marginal'
>>> interpret_p_value(0.2).startswith("Not significant")
True
"""

from __future__ import annotations
import math
from typing import Dict, List, Tuple

from abdash.core.names import SignificanceBand

# Upper bounds (exclusive) in ascending order; first match wins.
BAND_THRESHOLDS: List[Tuple[float, SignificanceBand]] = [
    (0.01, SignificanceBand.HIGHLY_SIGNIFICANT),
    (0.05, SignificanceBand.SIGNIFICANT),
    (0.10, SignificanceBand.MARGINAL),
]

BAND_DESCRIPTIONS: Dict[SignificanceBand, str] = {
    SignificanceBand.HIGHLY_SIGNIFICANT: (
        "Highly significant (p < 0.01): Very strong evidence that the difference "
        "is real, not due to chance. 99% confident."
    ),
    SignificanceBand.SIGNIFICANT: (
        "Significant (p < 0.05): Strong evidence that the difference is real. "
        "95% confident."
    ),
    SignificanceBand.MARGINAL: (
        "Marginally significant (p < 0.10): Some evidence of a difference, "
        "but not conclusive."
    ),
    SignificanceBand.NOT_SIGNIFICANT: (
        "Not significant (p ≥ 0.10): Insufficient evidence to conclude a real "
        "difference exists. Results may be due to chance."
    ),
}


def classify_p_value(p_value: float) -> SignificanceBand:
    """
    Map a p-value to its significance band.

    Args:
        p_value: P-value in [0, 1]

    Returns:
        The first band whose upper bound exceeds ``p_value``
    """
    if math.isnan(p_value) or not 0 <= p_value <= 1:
        raise ValueError(f"p_value must be in [0, 1], got {p_value}")

    for upper, band in BAND_THRESHOLDS:
        if p_value < upper:
            return band
    return SignificanceBand.NOT_SIGNIFICANT


def interpret_p_value(p_value: float) -> str:
    """Return the human-readable interpretation of ``p_value``."""
    return BAND_DESCRIPTIONS[classify_p_value(p_value)]
