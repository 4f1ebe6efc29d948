"""
Statistics with an explicit missing-value policy.

Every statistic here takes a `nan_policy` argument using scipy's vocabulary:

    "propagate" -- any NaN in the input makes the result NaN (default)
    "omit"      -- NaN values are dropped and the statistic is computed
                   over the remainder
    "raise"     -- NaN in the input raises StatisticError

Dropping missing values changes the effective sample size of a resample,
which can bias bootstrap estimates, so "omit" is never the default and the
number of dropped values is logged.
"""

import functools
import logging

import numpy as np

from .errors import InvalidInput, StatisticError

logger = logging.getLogger(__name__)

NAN_POLICIES = ("propagate", "omit", "raise")


def check_nan_policy(nan_policy):
    if nan_policy not in NAN_POLICIES:
        raise InvalidInput(
            f"nan_policy must be one of {NAN_POLICIES}, got {nan_policy!r}"
        )
    return nan_policy


def _apply_policy(values, nan_policy, name):
    check_nan_policy(nan_policy)
    x = np.asarray(values, dtype=float)
    if x.size == 0:
        raise StatisticError(f"{name}: no values to compute over")
    missing = np.isnan(x)
    n_missing = int(missing.sum())
    if n_missing == 0 or nan_policy == "propagate":
        return x
    if nan_policy == "raise":
        raise StatisticError(f"{name}: input contains {n_missing} NaN value(s)")
    kept = x[~missing]
    if kept.size == 0:
        raise StatisticError(
            f"{name}: all {x.size} values are NaN, nothing left after omitting"
        )
    logger.debug("%s: omitted %d of %d values", name, n_missing, x.size)
    return kept


def mean(values, nan_policy="propagate"):
    """
    Arithmetic mean.

    Parameters
    ----------
    values : array_like
        Numbers to average.
    nan_policy : {"propagate", "omit", "raise"}
        What to do with NaN entries.

    Returns
    -------
    float
    """
    x = _apply_policy(values, nan_policy, "mean")
    return float(np.mean(x))


def median(values, nan_policy="propagate"):
    """Sample median under the given nan_policy."""
    x = _apply_policy(values, nan_policy, "median")
    return float(np.median(x))


def std(values, ddof=1, nan_policy="propagate"):
    """
    Standard deviation with `ddof` degrees of freedom removed.

    Returns NaN when there are not more than `ddof` values, e.g. the
    sample standard deviation of a single observation.
    """
    x = _apply_policy(values, nan_policy, "std")
    if x.size <= ddof:
        return float("nan")
    return float(np.std(x, ddof=ddof))


def with_nan_policy(func, nan_policy):
    """
    Bind a nan_policy into a one-argument statistic.

    Parameters
    ----------
    func : callable
        One of the statistics in this module, or any function accepting
        a `nan_policy` keyword.
    nan_policy : {"propagate", "omit", "raise"}

    Returns
    -------
    callable
        values -> float, named e.g. ``mean[omit]`` so the policy shows up
        in logs and plot labels.
    """
    check_nan_policy(nan_policy)

    @functools.wraps(func)
    def statistic(values):
        return func(values, nan_policy=nan_policy)

    statistic.__name__ = f"{func.__name__}[{nan_policy}]"
    statistic.nan_policy = nan_policy
    return statistic
