"""
resampling -- bootstrap resampling for a statistics workshop.

The core is a generic Bootstrap Resampler (bootstrap.py) that takes a
numeric sample and a statistic and returns the bootstrap distribution of
that statistic. The other modules are the workshop tooling around it:
sample generators, statistics with an explicit missing-value policy,
density plots and a runnable walkthrough.
"""

from .errors import InvalidInput, StatisticError
from .utils import as_sample, make_rng
from .bootstrap import (
    bootstrap,
    bootstrap_parallel,
    iter_bootstrap,
    resample,
    summarize,
    unique_obs_fraction,
)
from . import statistics
from . import samples
