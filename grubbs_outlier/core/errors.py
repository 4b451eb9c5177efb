"""
Error types raised by the Grubbs outlier test.

All errors derive from ValueError so callers that already guard numeric
input with ``except ValueError`` keep working.
"""


class GrubbsError(ValueError):
    """Base class for Grubbs test errors."""


class InvalidParameterError(GrubbsError):
    """A parameter is outside its domain (test type, tails, alpha, n, df)."""


class InvalidSampleError(GrubbsError):
    """The sample is too small, not one-dimensional, or has non-finite values."""


class DegenerateSampleError(GrubbsError):
    """The sample has zero spread, so the G statistic is undefined."""
