"""
Reusable building blocks for test statistics.

Available methods:
- `common`: sample moments, Welch standard error and degrees of freedom,
  display rounding
"""
