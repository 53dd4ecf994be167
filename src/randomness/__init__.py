"""Constrained random value generation.

The package generates integers, decimals, strings, dictionary words and UUIDs
within user supplied constraints and renders them as exact text, optionally
joined into an array.  See :mod:`randomness.generators` for the entry points.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
