"""Plot style and color palette for modelperf figures."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

MODELPERF_COLORS: dict[str, str] = {
    "blue": "#1F4E79",
    "red": "#B22222",
    "teal": "#2A9D8F",
    "green": "#3A7D44",
    "gold": "#C9A227",
    "grey": "#7F7F7F",
    "mauve": "#8E6C8A",
    "light_grey": "#D9D9D9",
    "near_black": "#262626",
}

MODELPERF_COLOR_CYCLE: list[str] = [
    MODELPERF_COLORS["blue"],
    MODELPERF_COLORS["red"],
    MODELPERF_COLORS["teal"],
    MODELPERF_COLORS["green"],
    MODELPERF_COLORS["gold"],
    MODELPERF_COLORS["grey"],
    MODELPERF_COLORS["mauve"],
]


def get_style() -> dict[str, Any]:
    """Return the modelperf matplotlib rcParams.

    Returns
    -------
    dict[str, Any]
        rcParams dictionary suitable for ``matplotlib.rc_context``.
    """
    from matplotlib import cycler

    return {
        "figure.figsize": (10, 5),
        "figure.dpi": 150,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.spines.left": True,
        "axes.spines.bottom": True,
        "axes.grid": True,
        "axes.grid.axis": "y",
        "axes.edgecolor": MODELPERF_COLORS["near_black"],
        "axes.prop_cycle": cycler(color=MODELPERF_COLOR_CYCLE),
        "grid.color": MODELPERF_COLORS["light_grey"],
        "grid.linewidth": 0.6,
        "font.family": "sans-serif",
        "font.size": 10,
        "xtick.major.size": 0,
        "ytick.major.size": 0,
        "legend.frameon": False,
        "savefig.dpi": 300,
        "savefig.bbox": "tight",
    }


def set_style() -> None:
    """Apply the modelperf style globally."""
    import matplotlib as mpl

    mpl.rcParams.update(get_style())


@contextmanager
def use_style() -> Iterator[None]:
    """Apply the modelperf style within a context.

    rcParams are restored on exit, including when an exception is raised.
    """
    import matplotlib as mpl

    with mpl.rc_context(get_style()):
        yield
