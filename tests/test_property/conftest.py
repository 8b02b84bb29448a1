"""Hypothesis strategies for property-based testing of modelperf.

This module provides reusable data generators for property tests using
the Hypothesis library.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from hypothesis import strategies as st
from numpy.typing import NDArray


@st.composite
def residual_data(
    draw: st.DrawFn,
    min_n: int = 2,
    max_n: int = 200,
    allow_zero_weights: bool = True,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Generate residuals and positive observation weights.

    Parameters
    ----------
    draw : st.DrawFn
        Hypothesis draw function.
    min_n : int
        Minimum number of observations.
    max_n : int
        Maximum number of observations.
    allow_zero_weights : bool
        Whether some weights (never all of them) may be exactly zero.

    Returns
    -------
    tuple[NDArray, NDArray]
        Residuals (n,) and weights (n,).
    """
    n = draw(st.integers(min_value=min_n, max_value=max_n))
    seed = draw(st.integers(min_value=0, max_value=2**31 - 1))
    rng = np.random.default_rng(seed)

    scale = draw(st.floats(min_value=0.01, max_value=100.0))
    resid = rng.standard_normal(n) * scale
    weights = rng.uniform(0.1, 5.0, n)

    if allow_zero_weights and draw(st.booleans()):
        n_zero = draw(st.integers(min_value=1, max_value=n - 1))
        weights[rng.choice(n, size=n_zero, replace=False)] = 0.0

    return resid, weights


@st.composite
def regression_data(
    draw: st.DrawFn,
    min_n: int = 30,
    max_n: int = 100,
    min_k: int = 1,
    max_k: int = 4,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Generate regression data (y, X) with a constant column.

    Parameters
    ----------
    draw : st.DrawFn
        Hypothesis draw function.
    min_n : int
        Minimum number of observations.
    max_n : int
        Maximum number of observations.
    min_k : int
        Minimum number of regressors (excluding constant).
    max_k : int
        Maximum number of regressors (excluding constant).

    Returns
    -------
    tuple[NDArray, NDArray]
        y (n,) and X (n, k + 1) arrays.
    """
    k = draw(st.integers(min_value=min_k, max_value=max_k))
    n = draw(st.integers(min_value=max(min_n, k + 5), max_value=max_n))

    seed = draw(st.integers(min_value=0, max_value=2**31 - 1))
    rng = np.random.default_rng(seed)

    X = np.column_stack([np.ones(n), rng.standard_normal((n, k)) * 2])

    # Keep at least one slope away from zero so fitted values vary
    beta = rng.uniform(-3, 3, size=k + 1)
    beta[1] = rng.uniform(0.5, 2.0) * rng.choice([-1, 1])

    noise_scale = draw(st.floats(min_value=0.5, max_value=2.0))
    y = X @ beta + rng.standard_normal(n) * noise_scale

    return y, X
