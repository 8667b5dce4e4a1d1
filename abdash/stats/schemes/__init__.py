"""
Concrete comparisons between two variants.

Available schemes:
- `two_proportions`: vote counts (chi-square test, proportion intervals,
  Cohen's h)
- `two_samples`: per-respondent scores (Welch's t-test)
"""
