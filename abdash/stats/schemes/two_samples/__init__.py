"""
Two-sample comparisons for per-respondent scores.

- `statistics`: `TTestResult` and `t_test` (Welch's unequal-variance test)

Example Usage
-------------
>>> from abdash.stats.schemes.two_samples import t_test
>>> t_test([], [1, 2, 3]).status
'empty_sample'
"""

from abdash.stats.schemes.two_samples.statistics import TTestResult, t_test

__all__ = ["TTestResult", "t_test"]
