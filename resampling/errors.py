"""
Exception types raised by the resampling package.
"""


class InvalidInput(ValueError):
    """A sample, iteration count or option that cannot be used."""


class StatisticError(RuntimeError):
    """
    A statistic could not produce a defined value for some resample.

    Raised when a statistic returns NaN or a non-scalar, or when its
    missing-value policy leaves nothing to compute over.
    """
