"""
Statistical methods behind the dashboard's significance view.

The layout separates generic numerics from the comparisons built on them:

1. **Common** (abdash.stats.common):
   Distribution approximations (normal, chi-square, Student's t, incomplete
   beta) and p-value interpretation. Independent of any particular test.

2. **Methods** (abdash.stats.methods):
   Reusable building blocks for test statistics, such as sample moments and
   the Welch standard error.

3. **Schemes** (abdash.stats.schemes):
   The concrete comparisons: two proportions (votes) and two samples (scores).

Example:
--------
>>> # Generic primitive
>>> from abdash.stats.common.distributions import normal_cdf
>>> round(normal_cdf(0.0), 6)
0.5

>>> # Scheme-specific test
>>> from abdash.stats.schemes.two_proportions.statistics import chi_square_test
>>> chi_square_test(50, 50).p_value
1.0
"""
