"""Bounded exact rational ratios, generic ratio arithmetic, representation types and durations."""

__version__ = "0.1.0"
__all__ = ["overflow", "ratio", "mpl", "traits", "duration"]