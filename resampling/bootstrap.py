"""
Bootstrap Resampler

Implements the nonparametric bootstrap for an arbitrary statistic of a
one-dimensional sample: draw n values with replacement, compute the
statistic, repeat B times. The collection of B values approximates the
sampling distribution of the statistic.
"""

import logging
import numbers
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np

from .errors import InvalidInput, StatisticError
from .utils import as_sample, check_iterations, make_rng

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 10_000


def _statistic_name(statistic):
    return getattr(statistic, "__name__", type(statistic).__name__)


def _evaluate(statistic, values, draw):
    value = statistic(values)
    if np.ndim(value) != 0:
        raise StatisticError(
            f"{_statistic_name(statistic)} returned a non-scalar of shape "
            f"{np.shape(value)} on resample {draw}"
        )
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise StatisticError(
            f"{_statistic_name(statistic)} returned {value!r} on resample {draw}"
        ) from exc
    if np.isnan(value):
        raise StatisticError(
            f"{_statistic_name(statistic)} returned NaN on resample {draw}; "
            f"use nan_policy='omit' if missing values should be ignored"
        )
    return value


def resample_indices(n, rng=None):
    """
    Positions of one resample of a size-n sample.

    Each of the n draws is independent and uniform over range(n).
    """
    return make_rng(rng).integers(0, n, size=n)


def resample(sample, rng=None):
    """
    Draw one resample with replacement.

    Parameters
    ----------
    sample : array_like, shape (n,)
        Original sample.
    rng : None, int, SeedSequence or Generator
        Random source (see utils.make_rng).

    Returns
    -------
    ndarray, shape (n,)
        Values picked from `sample`; may repeat some and omit others.
    """
    sample = as_sample(sample)
    return sample[resample_indices(sample.size, rng)]


def _draws(sample, statistic, iterations, gen):
    n = sample.size
    for b in range(iterations):
        yield _evaluate(statistic, sample[resample_indices(n, gen)], b)


def iter_bootstrap(sample, statistic, iterations=DEFAULT_ITERATIONS, rng=None):
    """
    Lazily produce bootstrap replicates of `statistic`.

    Yields the same values, in the same order, as `bootstrap` called with
    the same arguments and an identically seeded random source. Inputs are
    validated immediately, not on first iteration.
    """
    sample = as_sample(sample)
    iterations = check_iterations(iterations)
    return _draws(sample, statistic, iterations, make_rng(rng))


def bootstrap(sample, statistic, iterations=DEFAULT_ITERATIONS, rng=None):
    """
    Nonparametric bootstrap distribution of a statistic.

    Parameters
    ----------
    sample : array_like, shape (n,)
        Observed sample, n >= 1. It is copied, never modified.
    statistic : callable
        Function (resample) -> scalar. Must be defined for any resample of
        length n, including one made of a single repeated value.
    iterations : int
        Number of bootstrap replications B.
    rng : None, int, SeedSequence or Generator
        Random source. Pass a seed or a Generator for reproducible runs.

    Returns
    -------
    boot_estimates : ndarray, shape (iterations,)
        Read-only array of replicates in draw order.

    Raises
    ------
    InvalidInput
        Empty sample or non-positive iteration count.
    StatisticError
        The statistic returned NaN or a non-scalar on some resample.
        Any exception raised by the statistic itself propagates unchanged.
    """
    sample = as_sample(sample)
    iterations = check_iterations(iterations)
    gen = make_rng(rng)
    logger.debug(
        "bootstrapping %s over n=%d, B=%d",
        _statistic_name(statistic), sample.size, iterations,
    )
    boots = np.fromiter(
        _draws(sample, statistic, iterations, gen), dtype=float, count=iterations
    )
    boots.flags.writeable = False
    return boots


def _chunk_sizes(iterations, workers):
    base, extra = divmod(iterations, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def _worker_generators(seed, workers):
    if isinstance(seed, np.random.Generator):
        return seed.spawn(workers)
    if isinstance(seed, np.random.SeedSequence):
        root = seed
    elif seed is None or (isinstance(seed, numbers.Integral)
                          and not isinstance(seed, bool) and seed >= 0):
        root = np.random.SeedSequence(None if seed is None else int(seed))
    else:
        raise InvalidInput(
            f"seed must be None, a non-negative int, a SeedSequence or a "
            f"Generator, got {seed!r}"
        )
    return [np.random.default_rng(child) for child in root.spawn(workers)]


def _chunk(sample, statistic, size, gen, stop):
    n = sample.size
    out = np.empty(size)
    for b in range(size):
        if stop.is_set():
            return None
        out[b] = _evaluate(statistic, sample[resample_indices(n, gen)], b)
    return out


def bootstrap_parallel(sample, statistic, iterations=DEFAULT_ITERATIONS,
                       seed=None, workers=4):
    """
    Bootstrap with the replications split across worker threads.

    Every worker gets its own Generator spawned from one seed, so no
    generator state is shared. Partial results are concatenated in chunk
    order. The output is reproducible for a fixed (seed, workers) pair but
    differs from the single-threaded `bootstrap` output.

    The first error raised in any worker is re-raised as soon as it
    arrives; the other workers stop before their next draw.

    Parameters
    ----------
    sample, statistic, iterations
        As in `bootstrap`.
    seed : None, int, SeedSequence or Generator
        Root of the per-worker random sources. A Generator is spawned
        from, which advances its spawn counter.
    workers : int
        Number of threads; capped at `iterations`.

    Returns
    -------
    ndarray, shape (iterations,)
    """
    sample = as_sample(sample)
    iterations = check_iterations(iterations)
    workers = check_iterations(workers, "workers")
    workers = min(workers, iterations)

    sizes = _chunk_sizes(iterations, workers)
    gens = _worker_generators(seed, workers)
    logger.debug("parallel bootstrap: %d workers, chunks %s", workers, sizes)

    stop = threading.Event()
    parts = [None] * workers
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {
            pool.submit(_chunk, sample, statistic, size, gen, stop): i
            for i, (size, gen) in enumerate(zip(sizes, gens))
        }
        try:
            for future in as_completed(futures):
                parts[futures[future]] = future.result()
        except BaseException:
            stop.set()
            raise

    boots = np.concatenate(parts)
    boots.flags.writeable = False
    return boots


def summarize(boot_estimates, alpha=0.05):
    """
    Summary of a bootstrap distribution.

    Parameters
    ----------
    boot_estimates : array_like
        Bootstrap replicates.
    alpha : float
        Two-sided level of the percentile interval.

    Returns
    -------
    dict with keys:
        mean         : mean of bootstrap distribution
        se           : bootstrap standard error
        ci_lo, ci_hi : alpha/2 and 1-alpha/2 percentile CI
        iterations   : number of replicates
    """
    boots = as_sample(boot_estimates)
    if not 0 < alpha < 1:
        raise InvalidInput(f"alpha must be in (0, 1), got {alpha}")
    ci = np.percentile(boots, [100 * alpha / 2, 100 * (1 - alpha / 2)])
    return dict(
        mean=float(np.mean(boots)),
        se=float(np.std(boots)),
        ci_lo=float(ci[0]),
        ci_hi=float(ci[1]),
        iterations=int(boots.size),
    )


def unique_obs_fraction(n):
    """
    Theoretical fraction of unique observations in a bootstrap sample.

    P(observation included) = 1 - (1 - 1/n)^n  ->  1 - 1/e ~ 0.632

    Parameters
    ----------
    n : int
        Sample size.

    Returns
    -------
    float
        Expected fraction of unique observations.
    """
    n = check_iterations(n, "n")
    return 1 - (1 - 1 / n) ** n
