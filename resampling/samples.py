"""
Synthetic samples for the workshop exercises.

Every generator draws from an explicitly passed random source instead of
numpy's global state, so two exercises never disturb each other's draws.
"""

import numpy as np

from .errors import InvalidInput
from .utils import as_sample, check_iterations, make_rng


def _check_positive(value, name):
    if not value > 0:
        raise InvalidInput(f"{name} must be positive, got {value}")


def normal_sample(n, loc=0.0, scale=1.0, rng=None):
    """
    Draw n values from N(loc, scale^2).

    Parameters
    ----------
    n : int
        Sample size, n >= 1.
    loc : float
        Population mean.
    scale : float
        Population standard deviation, > 0.
    rng : None, int, SeedSequence or Generator
        Random source.

    Returns
    -------
    ndarray, shape (n,)
    """
    n = check_iterations(n, "n")
    _check_positive(scale, "scale")
    return make_rng(rng).normal(loc, scale, n)


def uniform_sample(n, low=0.0, high=1.0, rng=None):
    """Draw n values from U(low, high)."""
    n = check_iterations(n, "n")
    if not high > low:
        raise InvalidInput(f"high must exceed low, got low={low}, high={high}")
    return make_rng(rng).uniform(low, high, n)


def exponential_sample(n, scale=1.0, rng=None):
    """
    Draw n values from an exponential distribution with mean `scale`.

    A skewed population: the bootstrap distribution of the mean is visibly
    asymmetric for small n, unlike the normal case.
    """
    n = check_iterations(n, "n")
    _check_positive(scale, "scale")
    return make_rng(rng).exponential(scale, n)


def inject_missing(sample, fraction, rng=None):
    """
    Copy of `sample` with a share of positions set to NaN.

    Parameters
    ----------
    sample : array_like, shape (n,)
        Complete sample.
    fraction : float
        Share of values to blank out, 0 <= fraction < 1. The number of
        missing values is round(fraction * n); positions are chosen
        without replacement.
    rng : None, int, SeedSequence or Generator
        Random source.

    Returns
    -------
    ndarray, shape (n,)
    """
    if not 0 <= fraction < 1:
        raise InvalidInput(f"fraction must be in [0, 1), got {fraction}")
    out = np.array(as_sample(sample))
    k = int(round(fraction * out.size))
    if k:
        idx = make_rng(rng).choice(out.size, size=k, replace=False)
        out[idx] = np.nan
    return out
