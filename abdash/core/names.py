"""
abdash.core.names
=================

Typed names shared across the package.

- `SignificanceBand`: an Enum of the ordered p-value bands.
- `Magnitude`, `ChiSquareStatus`, `TTestStatus`, `Recommendation`: `Literal` tags
  for result fields.
- `TestName`: NewType wrapper for the name of an A/B comparison.

Examples
--------
>>> from abdash.core.names import SignificanceBand, TestName
>>> SignificanceBand.SIGNIFICANT.value
'significant'
>>> name = TestName("Subject line #1"); isinstance(name, str)
True
"""

from __future__ import annotations
from enum import Enum
from typing import Literal, NewType


class SignificanceBand(str, Enum):
    """Ordered p-value bands, strongest evidence first.

    - HIGHLY_SIGNIFICANT: p < 0.01
    - SIGNIFICANT: p < 0.05
    - MARGINAL: p < 0.10
    - NOT_SIGNIFICANT: p >= 0.10
    """

    HIGHLY_SIGNIFICANT = "highly_significant"
    SIGNIFICANT = "significant"
    MARGINAL = "marginal"
    NOT_SIGNIFICANT = "not_significant"


TestName = NewType("TestName", str)

# Result tags.
Magnitude = Literal["small", "medium", "large"]
ChiSquareStatus = Literal["ok", "no_observations"]
TTestStatus = Literal[
    "ok", "empty_sample", "insufficient_sample", "zero_variance", "out_of_range"
]
Recommendation = Literal["implement_winner", "test_further", "not_significant"]
