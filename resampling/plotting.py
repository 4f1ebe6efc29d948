"""
Density plots of bootstrap distributions.

The resampler only hands over a mapping {label: values}; axes, colors and
style are decided here.
"""

import logging

import numpy as np
import matplotlib.pyplot as plt
from scipy import stats

from .errors import InvalidInput
from .utils import as_sample

logger = logging.getLogger(__name__)

CB, CO, CG, CR, CP, CY = "#2171B5", "#E6550D", "#31A354", "#DE2D26", "#756BB1", "#888"
PALETTE = (CB, CO, CG, CR, CP, CY)

STYLE = {
    "figure.facecolor": "#FAFAFA", "axes.facecolor": "#FAFAFA",
    "axes.edgecolor": "#333", "axes.labelcolor": "#222",
    "xtick.color": "#555", "ytick.color": "#555", "text.color": "#222",
    "font.size": 10, "axes.titlesize": 12, "axes.titleweight": "bold",
    "axes.grid": True, "grid.alpha": 0.25, "grid.color": "#AAA",
}


def savefig(fig, path):
    fig.savefig(path, bbox_inches="tight", dpi=150)
    plt.close(fig)


def plot_densities(distributions, ax=None, title=None, path=None,
                   xlabel="Statistic value", grid_size=400):
    """
    Overlaid kernel-density curves, one per labelled distribution.

    Parameters
    ----------
    distributions : mapping
        label -> 1-d numeric sequence (e.g. a bootstrap distribution).
    ax : matplotlib Axes or None
        Axes to draw on; a new figure is created when None.
    title : str or None
        Axes title.
    path : str, Path or None
        When given, the figure is saved there and closed.
    xlabel : str
        Horizontal axis label.
    grid_size : int
        Number of points each density curve is evaluated at.

    Returns
    -------
    ax : matplotlib Axes
    """
    if not distributions:
        raise InvalidInput("distributions must contain at least one series")

    with plt.rc_context(STYLE):
        if ax is None:
            fig, ax = plt.subplots(figsize=(8, 5))
        else:
            fig = ax.figure

        for i, (label, values) in enumerate(distributions.items()):
            color = PALETTE[i % len(PALETTE)]
            x = as_sample(values)
            finite = np.isfinite(x)
            if not finite.all():
                logger.debug("%s: dropped %d of %d non-finite values",
                             label, int((~finite).sum()), x.size)
            x = x[finite]
            if x.size == 0:
                raise InvalidInput(f"series {label!r} has no finite values")
            if x.size < 2 or np.ptp(x) == 0:
                # KDE is undefined for a single point mass
                ax.axvline(x[0], color=color, lw=2, label=f"{label} (constant)")
                continue
            kde = stats.gaussian_kde(x)
            pad = 0.1 * np.ptp(x)
            grid = np.linspace(x.min() - pad, x.max() + pad, grid_size)
            dens = kde(grid)
            ax.plot(grid, dens, color=color, lw=2, label=label)
            ax.fill_between(grid, dens, color=color, alpha=.15)

        ax.set_xlabel(xlabel)
        ax.set_ylabel("Density")
        if title:
            ax.set_title(title)
        ax.legend(fontsize=9)

        if path is not None:
            savefig(fig, path)
            logger.info("saved density plot to %s", path)
    return ax
