"""Weighted Gaussian log-likelihood for fitted regression models.

The log-likelihood is the profile likelihood of a normal model with known
observation weights, evaluated at the maximum-likelihood variance
``sum(w * r^2) / N``:

    0.5 * (sum(log w) - N * (log(2 pi) + 1 - log N + log(sum(w * r^2))))

Observations with weight exactly zero do not contribute and are dropped
before evaluation. The reported degrees of freedom are the number of
estimated coefficients plus one for the residual variance.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from modelperf.exceptions import InvalidInputError, MissingCapabilityError
from modelperf.insight import (
    find_parameters,
    get_rank,
    get_residuals,
    get_weights,
    model_kind,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

log = logging.getLogger(__name__)

_ERROR_PREFIX = "cannot compute log-likelihood: "


@dataclass(frozen=True)
class LogLikResult:
    """Log-likelihood value of a fitted model.

    Attributes
    ----------
    value : float
        Log-likelihood.
    nall : int
        Number of observations before zero-weight exclusion.
    nobs : int
        Number of observations that entered the likelihood.
    df : int
        Number of estimated parameters, including the residual variance.
    model_name : str
        Name of the model the value was computed for.
    """

    value: float
    nall: int
    nobs: int
    df: int
    model_name: str = ""

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        """Return string representation."""
        return f"'log Lik.' {self.value:.7g} (df={self.df})"

    @property
    def aic(self) -> float:
        """Akaike Information Criterion."""
        return -2 * self.value + 2 * self.df

    @property
    def bic(self) -> float:
        """Bayesian Information Criterion."""
        return -2 * self.value + np.log(self.nobs) * self.df


def gaussian_loglik(
    resid: ArrayLike,
    weights: ArrayLike | None = None,
    n_params: int = 0,
    model_name: str = "",
) -> LogLikResult:
    """Compute the weighted Gaussian log-likelihood from residuals.

    Parameters
    ----------
    resid : ArrayLike
        Residuals, one per observation.
    weights : ArrayLike | None
        Observation weights, same length as ``resid``. If None, every
        observation has weight one. Observations with weight exactly zero
        are excluded.
    n_params : int, default 0
        Number of estimated coefficients, not counting the residual
        variance.
    model_name : str
        Name recorded on the result.

    Returns
    -------
    LogLikResult
        Log-likelihood value with observation counts and degrees of
        freedom ``n_params + 1``.

    Raises
    ------
    InvalidInputError
        If no observations remain after exclusion, any weight is negative,
        residuals or weights are not finite, lengths disagree, or
        ``n_params`` is negative.

    Notes
    -----
    A perfect fit (zero weighted residual sum of squares) has an infinite
    log-likelihood; a ``RuntimeWarning`` is issued and ``inf`` returned.
    """
    res = np.asarray(resid, dtype=np.float64)
    if res.ndim != 1:
        raise InvalidInputError(
            f"{_ERROR_PREFIX}residuals must be 1-dimensional, got {res.ndim}"
        )
    if n_params < 0:
        raise InvalidInputError(
            f"{_ERROR_PREFIX}parameter count must be non-negative, got {n_params}"
        )

    nall = len(res)

    if weights is None:
        w = np.ones(nall)
    else:
        w = np.asarray(weights, dtype=np.float64)
        if w.shape != res.shape:
            raise InvalidInputError(
                f"{_ERROR_PREFIX}weights and residuals must have same length, "
                f"got {w.size} and {nall}"
            )
        if not np.all(np.isfinite(w)):
            raise InvalidInputError(f"{_ERROR_PREFIX}weights must be finite")

        excl = w == 0
        if excl.any():
            log.debug("Excluding %d zero-weight observations", int(excl.sum()))
            res = res[~excl]
            w = w[~excl]

        if np.any(w < 0):
            raise InvalidInputError(f"{_ERROR_PREFIX}weights must be non-negative")

    n = len(res)
    if n == 0:
        raise InvalidInputError(
            f"{_ERROR_PREFIX}zero observations remain after excluding "
            f"zero-weight rows"
        )
    if not np.all(np.isfinite(res)):
        raise InvalidInputError(
            f"{_ERROR_PREFIX}residuals contain missing or non-finite values"
        )

    wss = float(np.sum(w * res**2))
    if wss == 0:
        warnings.warn(
            "Weighted residual sum of squares is zero; the log-likelihood "
            "is infinite.",
            RuntimeWarning,
            stacklevel=2,
        )
        value = np.inf
    else:
        value = 0.5 * (
            np.sum(np.log(w))
            - n * (np.log(2 * np.pi) + 1 - np.log(n) + np.log(wss))
        )

    return LogLikResult(
        value=float(value),
        nall=nall,
        nobs=n,
        df=int(n_params) + 1,
        model_name=model_name,
    )


def _rank_param_count(model: Any) -> int:
    """Coefficient count of IV fits: the reported rank."""
    return get_rank(model)


def _fixed_param_count(model: Any) -> int:
    """Coefficient count of panel and compound-Poisson fits."""
    return len(find_parameters(model, effects="fixed"))


PARAM_COUNT_STRATEGIES: dict[str, Callable[[Any], int]] = {
    "ivreg": _rank_param_count,
    "iv_robust": _rank_param_count,
    "plm": _fixed_param_count,
    "cpglm": _fixed_param_count,
}


def loglik(model: Any, kind: str | None = None) -> LogLikResult:
    """Compute the log-likelihood of a fitted model.

    Parameters
    ----------
    model : Any
        Fitted model. Its residuals and weights are extracted through
        ``modelperf.insight``.
    kind : str | None
        Variant tag selecting how the parameter count is derived. If
        None, ``model_kind(model)`` is used. Supported tags are "ivreg",
        "iv_robust" (coefficient rank), "plm" and "cpglm" (number of
        fixed-effect parameters).

    Returns
    -------
    LogLikResult
        Log-likelihood value and bookkeeping attributes.

    Raises
    ------
    MissingCapabilityError
        If no parameter-count rule exists for the variant tag, or the
        model cannot supply residuals or its parameter count.
    InvalidInputError
        If the extracted data is degenerate.

    Examples
    --------
    >>> import numpy as np
    >>> import modelperf as mp
    >>> fit = mp.IVRegResults(
    ...     resid=[1.0, -1.0, 2.0, -2.0, 0.5, -0.5],
    ...     fittedvalues=np.zeros(6),
    ...     params=[0.3, 1.2],
    ... )
    >>> ll = mp.loglik(fit)
    >>> ll.nobs, ll.df
    (6, 3)
    """
    if kind is None:
        kind = model_kind(model)

    strategy = PARAM_COUNT_STRATEGIES.get(kind)
    if strategy is None:
        raise MissingCapabilityError(
            f"{_ERROR_PREFIX}no parameter count rule for model kind {kind!r}; "
            f"expected one of {sorted(PARAM_COUNT_STRATEGIES)}"
        )

    n_params = strategy(model)
    log.debug("Log-likelihood for kind=%s with %d parameters", kind, n_params)

    model_name = getattr(model, "model_name", None) or type(model).__name__
    return gaussian_loglik(
        get_residuals(model),
        get_weights(model),
        n_params=n_params,
        model_name=model_name,
    )
