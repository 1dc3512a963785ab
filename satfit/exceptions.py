"""
Exception types raised by satfit.
"""


class SatfitError(Exception):
    """Base exception class for all satfit errors."""
    pass


class InvalidInput(SatfitError, ValueError):
    """
    Raised when fit inputs are inconsistent.

    Covers parameter counts that do not match the model arity, data arrays
    of unequal length, fewer data points than parameters, non-finite data,
    and models that cannot be evaluated at the initial guess.
    """
    pass
