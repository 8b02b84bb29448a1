"""Breusch-Pagan test for non-constant error variance.

Squared Pearson residuals, scaled by their maximum-likelihood variance,
are regressed on the fitted values of the model. Under homoscedastic
normal errors half the regression sum of squares of this auxiliary
regression is asymptotically chi-square with one degree of freedom.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd
import statsmodels.formula.api as smf
from scipy import stats
from statsmodels.stats.anova import anova_lm

from modelperf.diagnostics.base import DEFAULT_ALPHA, DiagnosticTestResult
from modelperf.diagnostics.report import format_advisory, print_advisory
from modelperf.exceptions import InvalidInputError
from modelperf.insight import (
    df_residual,
    get_deviance,
    get_fitted,
    get_parameters,
    get_residuals,
    n_obs,
)

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure
    from numpy.typing import ArrayLike, NDArray
    from rich.console import Console

log = logging.getLogger(__name__)

_ERROR_PREFIX = "cannot check heteroscedasticity: "


@dataclass(frozen=True, kw_only=True)
class HeteroscedasticityResult(DiagnosticTestResult):
    """Result of the heteroscedasticity check.

    Attributes
    ----------
    object_name : str
        Name of the inspected model.
    alpha : float
        Significance level used to classify the result.
    fitted : NDArray[np.floating] | None
        Fitted values of the retained observations.
    std_resid : NDArray[np.floating] | None
        Pearson residuals divided by the square root of the scale, for
        the retained observations.
    """

    test_name: str = "Hetero test (BP)"
    null_hypothesis: str = "Homoscedasticity (constant error variance)"
    df: int = 1
    object_name: str = ""
    alpha: float = DEFAULT_ALPHA
    fitted: NDArray[np.floating[Any]] | None = field(
        default=None, repr=False, compare=False
    )
    std_resid: NDArray[np.floating[Any]] | None = field(
        default=None, repr=False, compare=False
    )

    @property
    def is_heteroscedastic(self) -> bool:
        """True if the p-value is below the significance level."""
        return self.pvalue < self.alpha

    def __str__(self) -> str:
        """Return the advisory text."""
        return format_advisory(self)

    def plot(self, **kwargs: Any) -> tuple[Figure, Axes]:
        """Plot the scale-location diagnostic.

        Parameters
        ----------
        **kwargs
            Passed to ``plot_heteroscedasticity``.

        Returns
        -------
        tuple[Figure, Axes]
            Matplotlib figure and axes.
        """
        from modelperf.visualization.heteroscedasticity import (
            plot_heteroscedasticity,
        )

        return plot_heteroscedasticity(self, **kwargs)


def _regression_ss(u: NDArray[np.floating[Any]], f: NDArray[np.floating[Any]]) -> float:
    """Regression sum of squares of the auxiliary fit ``u ~ 1 + f``."""
    data = pd.DataFrame({"u": u, "fitted": f})
    aux = smf.ols("u ~ fitted", data=data).fit()
    ss = anova_lm(aux)["sum_sq"].to_numpy()
    return float(ss.sum() - ss[-1])


def heteroscedasticity_test(
    resid: ArrayLike,
    fitted: ArrayLike,
    scale: float,
    alpha: float = DEFAULT_ALPHA,
    object_name: str = "",
) -> HeteroscedasticityResult:
    """Breusch-Pagan test of Pearson residuals against fitted values.

    Parameters
    ----------
    resid : ArrayLike
        Pearson residuals. Missing (NaN) entries are excluded.
    fitted : ArrayLike
        Fitted values, indexed like ``resid``.
    scale : float
        Variance estimate used to scale the squared residuals.
    alpha : float, default 0.05
        Significance level used to classify the result.
    object_name : str
        Name of the inspected model, for display.

    Returns
    -------
    HeteroscedasticityResult
        Test result with chi-square statistic and p-value.

    Raises
    ------
    InvalidInputError
        If fewer than two observations remain, ``scale`` is not positive,
        or the fitted values are constant.
    """
    r = np.asarray(resid, dtype=np.float64)
    f = np.asarray(fitted, dtype=np.float64)

    if r.ndim != 1 or f.ndim != 1:
        raise InvalidInputError(
            f"{_ERROR_PREFIX}residuals and fitted values must be 1-dimensional"
        )
    if len(r) != len(f):
        raise InvalidInputError(
            f"{_ERROR_PREFIX}residuals and fitted values must have same length, "
            f"got {len(r)} and {len(f)}"
        )

    keep = np.isfinite(r) & np.isfinite(f)
    n = int(keep.sum())
    if n < 2:
        raise InvalidInputError(
            f"{_ERROR_PREFIX}at least 2 non-missing observations are "
            f"required, got {n}"
        )
    if not np.isfinite(scale) or scale <= 0:
        raise InvalidInputError(
            f"{_ERROR_PREFIX}residual scale must be positive, got {scale}"
        )

    r = r[keep]
    f = f[keep]
    if np.ptp(f) == 0:
        raise InvalidInputError(
            f"{_ERROR_PREFIX}fitted values are constant, the auxiliary "
            f"regression is not identified"
        )

    u = r**2 / scale
    statistic = _regression_ss(u, f) / 2
    pvalue = float(stats.chi2.sf(statistic, df=1))
    log.debug("Breusch-Pagan statistic %.6g on %d observations", statistic, n)

    return HeteroscedasticityResult(
        statistic=float(statistic),
        pvalue=pvalue,
        object_name=object_name,
        alpha=alpha,
        fitted=f,
        std_resid=r / np.sqrt(scale),
    )


def _sigma_squared(model: Any) -> float:
    """Residual variance: deviance over (nobs - number of estimates)."""
    estimates = get_parameters(model)["Estimate"].to_numpy(dtype=np.float64)
    denom = n_obs(model) - int(np.count_nonzero(~np.isnan(estimates)))
    if denom <= 0:
        raise InvalidInputError(
            f"{_ERROR_PREFIX}no residual degrees of freedom "
            f"({n_obs(model)} observations, {len(estimates)} parameters)"
        )
    return get_deviance(model) / denom


def check_heteroscedasticity(
    model: Any,
    alpha: float = DEFAULT_ALPHA,
    name: str | None = None,
    verbose: bool = False,
    console: Console | None = None,
) -> HeteroscedasticityResult:
    """Check a fitted model for non-constant error variance.

    Parameters
    ----------
    model : Any
        Fitted regression model that can supply Pearson residuals, fitted
        values, residual degrees of freedom, deviance and parameter
        estimates through ``modelperf.insight``.
    alpha : float, default 0.05
        Significance level. A p-value below ``alpha`` indicates
        heteroscedasticity.
    name : str | None
        Name of the model for display. If None, the model's
        ``model_name`` attribute or its type name is used.
    verbose : bool, default False
        If True, print the advisory message to the console.
    console : Console | None
        Rich console used when ``verbose`` is True.

    Returns
    -------
    HeteroscedasticityResult
        Test result; ``float(result)`` is the p-value.

    Raises
    ------
    InvalidInputError
        If the scale is degenerate (e.g. zero residual degrees of
        freedom), fewer than two observations remain, or the fitted
        values are constant.
    MissingCapabilityError
        If the model cannot supply a required quantity.

    Examples
    --------
    >>> import numpy as np
    >>> import statsmodels.api as sm
    >>> import modelperf as mp
    >>> rng = np.random.default_rng(0)
    >>> x = rng.uniform(1, 10, 200)
    >>> y = 1 + 2 * x + rng.standard_normal(200) * x
    >>> res = sm.OLS(y, sm.add_constant(x)).fit()
    >>> mp.check_heteroscedasticity(res).is_heteroscedastic
    True
    """
    r = get_residuals(model, type="pearson")
    f = get_fitted(model)

    n_valid = int(np.count_nonzero(~np.isnan(r)))
    if n_valid == 0:
        raise InvalidInputError(f"{_ERROR_PREFIX}all residuals are missing")

    sigma2 = _sigma_squared(model)
    scale = df_residual(model) * sigma2 / n_valid

    if name is None:
        name = getattr(model, "model_name", None) or type(model).__name__

    result = heteroscedasticity_test(r, f, scale, alpha=alpha, object_name=name)
    if verbose:
        print_advisory(result, console=console)
    return result
