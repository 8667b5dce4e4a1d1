"""
abdash.core
===========

Building blocks shared by every layer: typed names, configuration and errors.
"""
