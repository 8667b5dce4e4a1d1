"""
abdash: the statistics behind an A/B testing workshop dashboard.

The dashboard itself only draws charts and tables. Everything it says about
whether a difference between two variants is *real* comes from this package:
a small, self-contained significance engine built on closed-form
approximations of the normal, chi-square and Student's-t distributions.

Every engine operation is a pure function of its arguments. Degenerate inputs
(no votes, empty or single-response samples) come back as neutral,
non-significant results carrying an explicit status instead of raising or
leaking non-finite numbers.

Example
-------
>>> import abdash
>>> assert hasattr(abdash, "stats")
>>> assert hasattr(abdash, "api")
>>> abdash.chi_square_test(80, 20).significant_99
True
"""

from abdash.__version__ import __version__
from abdash import api, core, stats
from abdash.api.significance import (
    analyze_comparison,
    chi_square_test,
    classify_p_value,
    effect_size,
    interpret_p_value,
    proportion_confidence_interval,
    t_test,
)

__all__ = [
    "__version__",
    "api",
    "core",
    "stats",
    "analyze_comparison",
    "chi_square_test",
    "classify_p_value",
    "effect_size",
    "interpret_p_value",
    "proportion_confidence_interval",
    "t_test",
]
