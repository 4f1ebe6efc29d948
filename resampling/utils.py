"""
Shared utility functions used across the resampling modules.
"""

import numbers

import numpy as np

from .errors import InvalidInput


def as_sample(values):
    """
    Validate and freeze a numeric sample.

    Parameters
    ----------
    values : array_like
        Ordered, finite sequence of real numbers. NaN entries are allowed;
        what happens to them is decided by the statistic's nan_policy.

    Returns
    -------
    sample : ndarray, shape (n,)
        Read-only float copy of `values`. The caller's object is not touched.

    Raises
    ------
    InvalidInput
        If `values` is empty, not one-dimensional or not numeric.
    """
    try:
        sample = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"sample must be numeric: {exc}") from exc
    if sample.ndim != 1:
        raise InvalidInput(
            f"sample must be one-dimensional, got shape {sample.shape}"
        )
    if sample.size == 0:
        raise InvalidInput("sample must contain at least one value")
    sample.flags.writeable = False
    return sample


def check_iterations(iterations, name="iterations"):
    """
    Validate a positive count (replications, workers, sample size) and
    return it as a plain int.

    Raises
    ------
    InvalidInput
        If `iterations` is not an integer or is not positive.
    """
    if isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral):
        raise InvalidInput(
            f"{name} must be an integer, got {type(iterations).__name__}"
        )
    if iterations <= 0:
        raise InvalidInput(f"{name} must be positive, got {iterations}")
    return int(iterations)


def make_rng(rng=None):
    """
    Build the random source used for drawing resamples.

    Parameters
    ----------
    rng : None, int, numpy.random.SeedSequence or numpy.random.Generator
        None gives a fresh OS-seeded generator. An int or SeedSequence seeds
        a new PCG64 generator. A Generator is used as-is, so its state
        advances with every draw.

    Returns
    -------
    numpy.random.Generator
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or isinstance(rng, np.random.SeedSequence):
        return np.random.default_rng(rng)
    if isinstance(rng, bool) or not isinstance(rng, numbers.Integral):
        raise InvalidInput(
            f"rng must be None, an int seed, a SeedSequence or a Generator, "
            f"got {type(rng).__name__}"
        )
    if rng < 0:
        raise InvalidInput(f"seed must be non-negative, got {rng}")
    return np.random.default_rng(int(rng))
