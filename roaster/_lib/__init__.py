"""
Implementation of the coders, see the `roaster` package for the public API.
"""
