"""
abdash.api - Facade
===================

One import for everything the dashboard needs from the engine, named after
what the workshop asks: "is the vote split real?", "do the click-likelihood
scores differ?", "how big is the difference?".

Examples
--------
>>> from abdash.api.significance import analyze_comparison
>>> result = analyze_comparison(votes_a=30, votes_b=10,
...                             scores_a=[4, 5, 4, 5], scores_b=[2, 3, 2, 3])
>>> result.vote_test.significant_95
True

Architecture
------------
This facade delegates to:
- abdash.stats.schemes.two_proportions: chi-square test, intervals, Cohen's h
- abdash.stats.schemes.two_samples: Welch's t-test
- abdash.stats.common.interpretation: p-value bands
"""
