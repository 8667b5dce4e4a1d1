"""
abdash.reporting
================

Tabular views over significance results, built on polars DataFrames.
"""
