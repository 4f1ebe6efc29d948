"""
Bootstrap Resampling -- Workshop Walkthrough

A linear sequence of worked examples, meant to be read top to bottom and
re-run with different seeds, sample sizes and replication counts:

  1. Generate a random sample
  2. Draw one resample with replacement
  3. Bootstrap the mean (and the median)
  4. Missing values: an explicit nan_policy
  5. Plot the bootstrap distributions

Run it with ``bootstrap-walkthrough`` or ``python -m resampling.walkthrough``.
"""

import argparse
import logging
import sys

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from scipy import stats

from . import statistics as st
from .bootstrap import bootstrap, resample_indices, summarize, unique_obs_fraction
from .errors import InvalidInput, StatisticError
from .logging_conf import configure_logging
from .plotting import CB, CG, CR, STYLE, plot_densities, savefig
from .samples import inject_missing, normal_sample
from .settings import Settings
from .utils import make_rng

logger = logging.getLogger(__name__)

POP_MEAN, POP_SD = 50.0, 10.0

section1_text = """\
Section 1: A random sample

We draw n observations from a normal population with mean 50 and standard
deviation 10. In practice the population is unknown and this sample is all
we have; the bootstrap treats the sample itself as a stand-in for the
population.
"""

section2_text = """\
Section 2: One resample

A resample has the same size n as the sample and is drawn *with
replacement*: some observations appear several times, others not at all.
On average a resample contains 1 - (1 - 1/n)^n ~ 1 - 1/e ~ 63.2% of the
distinct observations.
"""

section3_text = """\
Section 3: The bootstrap distribution of the mean

  For b = 1, ..., B:
    1. Draw a resample of size n with replacement.
    2. Compute the statistic on the resample.
  The B values approximate the sampling distribution of the statistic.

  SE_boot = std of the B values
  Percentile CI: [quantile(2.5%), quantile(97.5%)]

For the mean we can compare with the analytic SE, s / sqrt(n).
"""

section4_text = """\
Section 4: Missing values

If the sample contains NaN, the mean of any resample containing a NaN is
NaN and the bootstrap stops with an error. Dropping missing values is a
choice, not a default: it changes the effective size of each resample.
Here we make that choice explicitly with nan_policy="omit".
"""


def _unique_share(indices):
    return np.unique(indices).size / indices.size


def plot_walkthrough(distributions, mean_boot, sample_mean, analytic_se, path=None):
    """
    Two-panel figure: (A) overlaid densities, (B) histogram of bootstrap
    means against the analytic normal approximation.
    """
    with plt.rc_context(STYLE):
        fig, axes = plt.subplots(1, 2, figsize=(13, 5))
        plot_densities(distributions, ax=axes[0], title="A) Bootstrap Distributions")

        ax = axes[1]
        ax.hist(mean_boot, bins=50, density=True, alpha=.6, color=CB, edgecolor="white")
        xn = np.linspace(mean_boot.min(), mean_boot.max(), 200)
        ax.plot(xn, stats.norm.pdf(xn, sample_mean, analytic_se), c=CR, lw=2,
                label="Normal (analytic)")
        ax.axvline(sample_mean, color=CG, ls="--", lw=2, label="Sample mean")
        ax.set_xlabel("mean*"); ax.set_ylabel("Density")
        ax.set_title(f"B) Bootstrap Means ({mean_boot.size} reps)"); ax.legend(fontsize=8)
        fig.suptitle("Bootstrap Resampling", fontsize=14, y=1.03)
        fig.tight_layout()
        if path is not None:
            savefig(fig, path)
            logger.info("saved figure to %s", path)
        else:
            plt.close(fig)


def run_walkthrough(settings=None, out=print):
    """
    Run every section of the walkthrough.

    Parameters
    ----------
    settings : Settings or None
        Run configuration; defaults plus RESAMPLING_* variables when None.
    out : callable
        Where narrative text goes (print by default).

    Returns
    -------
    dict with keys:
        sample        : the generated sample
        distributions : {label: bootstrap distribution}
        summary       : DataFrame, one row per distribution
        figure        : path of the saved figure, or None
    """
    settings = settings or Settings.from_env()
    rng = make_rng(settings.seed)
    n, B = settings.sample_size, settings.iterations
    logger.info("walkthrough: n=%d, B=%d, seed=%d", n, B, settings.seed)

    # -- 1. sample --
    out(section1_text)
    sample = normal_sample(n, POP_MEAN, POP_SD, rng=rng)
    sample_mean = st.mean(sample)
    out(f"  n = {n}, sample mean = {sample_mean:.4f}, sample sd = {st.std(sample):.4f}\n")

    # -- 2. one resample --
    out(section2_text)
    idx = resample_indices(n, rng)
    out(f"  first resample mean      : {st.mean(sample[idx]):.4f}")
    out(f"  distinct observations    : {_unique_share(idx):.1%}")
    out(f"  expected (1-(1-1/n)^n)   : {unique_obs_fraction(n):.1%}\n")

    # -- 3. bootstrap mean / median --
    out(section3_text)
    mean_stat = st.with_nan_policy(st.mean, "propagate")
    median_stat = st.with_nan_policy(st.median, "propagate")
    mean_boot = bootstrap(sample, mean_stat, B, rng)
    median_boot = bootstrap(sample, median_stat, B, rng)
    analytic_se = st.std(sample) / np.sqrt(n) if n > 1 else float("nan")
    mean_sum = summarize(mean_boot)
    out(f"  Analytic SE(mean)  : {analytic_se:.4f}")
    out(f"  Bootstrap SE(mean) : {mean_sum['se']:.4f}  ({B} replications)")
    out(f"  Bootstrap 95% CI   : [{mean_sum['ci_lo']:.4f}, {mean_sum['ci_hi']:.4f}]\n")

    distributions = {"mean": mean_boot, "median": median_boot}

    # -- 4. missing values --
    out(section4_text)
    with_missing = inject_missing(sample, settings.missing_fraction, rng=rng)
    n_missing = int(np.isnan(with_missing).sum())
    out(f"  {n_missing} of {n} values set to NaN")
    if 0 < n_missing < n:
        try:
            bootstrap(with_missing, mean_stat, B, rng)
        except StatisticError as exc:
            out(f"  nan_policy='propagate' -> {exc}")
        else:
            out("  nan_policy='propagate' -> finished: no resample happened to draw a NaN")
        omit_stat = st.with_nan_policy(st.mean, "omit")
        try:
            distributions["mean, NaN omitted"] = bootstrap(with_missing, omit_stat, B, rng)
        except StatisticError as exc:
            # a resample made only of NaN leaves nothing to average
            out(f"  nan_policy='omit' -> {exc}")
        else:
            out(f"  nan_policy='omit'      -> SE = "
                f"{summarize(distributions['mean, NaN omitted'])['se']:.4f}")
    out("")

    # -- 5. summary table and figure --
    summary = pd.DataFrame(
        [summarize(d) for d in distributions.values()], index=list(distributions)
    )
    out(summary.to_string(float_format=lambda v: f"{v:.4f}"))

    figure = None
    if settings.save_figures:
        settings.output_dir.mkdir(parents=True, exist_ok=True)
        figure = settings.output_dir / "bootstrap_densities.png"
        plot_walkthrough(distributions, mean_boot, sample_mean, analytic_se, path=figure)
        out(f"\nFigure saved to {figure}")

    return dict(sample=sample, distributions=distributions, summary=summary, figure=figure)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bootstrap-walkthrough",
        description="Bootstrap resampling workshop walkthrough.",
    )
    parser.add_argument("--iterations", "-B", type=int, default=None,
                        help="Bootstrap replications (default 10000)")
    parser.add_argument("--sample-size", "-n", dest="sample_size", type=int, default=None,
                        help="Size of the generated sample (default 50)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random source (default 42)")
    parser.add_argument("--missing-fraction", dest="missing_fraction", type=float,
                        default=None, help="Share of values set to NaN in section 4")
    parser.add_argument("--output-dir", dest="output_dir", default=None,
                        help="Directory for the figure (default ./figures)")
    parser.add_argument("--no-figures", dest="save_figures", action="store_false",
                        default=None, help="Skip writing the figure")
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env(overrides=vars(args))
    except InvalidInput as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(level=settings.log_level)
    try:
        run_walkthrough(settings)
    except InvalidInput as exc:
        logger.error("invalid input: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
