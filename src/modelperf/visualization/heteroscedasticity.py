"""Scale-location plot for the heteroscedasticity check.

Plots the square root of absolute standardized residuals against fitted
values. Under constant error variance the points scatter evenly around a
flat LOWESS line; a trend in the line indicates heteroscedasticity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from statsmodels.nonparametric.smoothers_lowess import lowess

from modelperf.visualization.style import MODELPERF_COLORS, use_style

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from modelperf.diagnostics.heteroscedasticity import HeteroscedasticityResult


def plot_heteroscedasticity(
    result: HeteroscedasticityResult,
    ax: Axes | None = None,
    title: str | None = None,
    xlabel: str = "Fitted values",
    ylabel: str = r"$\sqrt{|\mathrm{Std.\ residuals}|}$",
    point_color: str | None = None,
    line_color: str | None = None,
    point_alpha: float = 0.6,
    frac: float = 2 / 3,
    show_smoother: bool = True,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot the scale-location diagnostic of a heteroscedasticity result.

    Parameters
    ----------
    result : HeteroscedasticityResult
        Result of ``check_heteroscedasticity``.
    ax : Axes | None
        Matplotlib axes to plot on. If None, creates new figure and axes.
    title : str | None
        Plot title. If None, shows the test p-value.
    xlabel : str
        X-axis label.
    ylabel : str
        Y-axis label.
    point_color : str | None
        Color of the scatter points.
    line_color : str | None
        Color of the LOWESS line. Defaults to red for heteroscedastic
        results and blue otherwise.
    point_alpha : float
        Alpha (transparency) of the scatter points.
    frac : float
        LOWESS span.
    show_smoother : bool
        Whether to draw the LOWESS line.
    figsize : tuple[float, float]
        Figure size (width, height) in inches.

    Returns
    -------
    tuple[Figure, Axes]
        Matplotlib figure and axes objects.

    Raises
    ------
    ValueError
        If the result does not carry the plotting data.
    """
    import matplotlib.pyplot as plt

    if result.fitted is None or result.std_resid is None:
        raise ValueError(
            "Result has no plotting data; use check_heteroscedasticity() "
            "or heteroscedasticity_test() to create it."
        )

    if point_color is None:
        point_color = MODELPERF_COLORS["grey"]
    if line_color is None:
        line_color = (
            MODELPERF_COLORS["red"]
            if result.is_heteroscedastic
            else MODELPERF_COLORS["blue"]
        )

    x = np.asarray(result.fitted)
    y = np.sqrt(np.abs(np.asarray(result.std_resid)))

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[union-attr]

        ax.scatter(x, y, color=point_color, alpha=point_alpha, s=14, linewidths=0)

        if show_smoother:
            smoothed = lowess(y, x, frac=frac, return_sorted=True)
            ax.plot(smoothed[:, 0], smoothed[:, 1], color=line_color, linewidth=2.0)

        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)
        if title is None:
            title = f"Homogeneity of Variance (p = {result.pvalue:.3f})"
        ax.set_title(title)

    return fig, ax
