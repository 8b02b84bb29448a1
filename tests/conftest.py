"""Pytest configuration and fixtures for modelperf tests."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest
import statsmodels.api as sm
from numpy.typing import NDArray


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_residuals() -> NDArray[np.floating[Any]]:
    """Six residuals with a known log-likelihood."""
    return np.array([1.0, -1.0, 2.0, -2.0, 0.5, -0.5])


@pytest.fixture
def regression_data(
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Simple regression data with constant error variance: y = 1 + 2*x + e.

    Returns
    -------
    tuple[NDArray[np.floating], NDArray[np.floating]]
        y and X arrays (X includes a constant).
    """
    n = 200
    x = rng.uniform(1, 10, n)
    e = rng.standard_normal(n)
    y = 1 + 2 * x + e
    X = sm.add_constant(x)
    return y, X


@pytest.fixture
def heteroscedastic_data(
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Regression data whose error spread grows with the regressor.

    y = 1 + 2*x + x*e, so the residual variance increases with the
    fitted value.

    Returns
    -------
    tuple[NDArray[np.floating], NDArray[np.floating]]
        y and X arrays (X includes a constant).
    """
    n = 200
    x = rng.uniform(1, 10, n)
    e = rng.standard_normal(n)
    y = 1 + 2 * x + x * e
    X = sm.add_constant(x)
    return y, X


@pytest.fixture
def ols_results(
    regression_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
) -> Any:
    """statsmodels OLS fit of the homoscedastic regression data."""
    y, X = regression_data
    return sm.OLS(y, X).fit()


@pytest.fixture
def heteroscedastic_ols_results(
    heteroscedastic_data: tuple[
        NDArray[np.floating[Any]], NDArray[np.floating[Any]]
    ],
) -> Any:
    """statsmodels OLS fit of the heteroscedastic regression data."""
    y, X = heteroscedastic_data
    return sm.OLS(y, X).fit()
