"""
abdash.stats.common
===================

Generic numerical primitives shared by every test scheme.

Modules:
- `distributions`: closed-form CDF approximations
- `interpretation`: p-value bands and their wording
"""
