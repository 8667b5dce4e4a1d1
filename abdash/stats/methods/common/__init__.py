"""
abdash.stats.methods.common
===========================

Common statistical utilities shared by the test schemes.

This module provides foundational operations used by more than one test but
not specific to any of them.
"""
