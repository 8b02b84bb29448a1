"""Visualization utilities for model diagnostics."""

from modelperf.visualization.heteroscedasticity import plot_heteroscedasticity
from modelperf.visualization.style import (
    MODELPERF_COLOR_CYCLE,
    MODELPERF_COLORS,
    get_style,
    set_style,
    use_style,
)

__all__ = [
    "MODELPERF_COLORS",
    "MODELPERF_COLOR_CYCLE",
    "get_style",
    "plot_heteroscedasticity",
    "set_style",
    "use_style",
]
