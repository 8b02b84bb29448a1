"""Extract residuals, weights and parameter information from fitted models.

The diagnostics never reach into a fitted model directly; they ask this
module for what they need. Three families of objects are understood:

1. statsmodels linear regression results (OLS, WLS, GLS)
2. statsmodels GLM results
3. anything else exposing the usual attribute names, which includes the
   containers in ``modelperf.models`` and linearmodels results
   (``resids``, ``fitted_values``, ``params``, ``nobs``, ``df_resid``)

Each function raises ``MissingCapabilityError`` when the model cannot
supply the requested quantity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

import numpy as np
import pandas as pd
from statsmodels.genmod.generalized_linear_model import GLMResults
from statsmodels.regression.linear_model import RegressionResults

from modelperf.exceptions import InvalidInputError, MissingCapabilityError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


ResidualType = Literal["response", "pearson"]
EffectsType = Literal["fixed", "random", "all"]

_RESID_ATTRS = ("resid", "resids", "residuals")
_FITTED_ATTRS = ("fittedvalues", "fitted_values")


def _unwrap(model: Any) -> Any:
    """Return the underlying results instance of a statsmodels wrapper."""
    return getattr(model, "_results", model)


def _model_label(model: Any) -> str:
    return type(model).__name__


def _first_attr(model: Any, names: Sequence[str], what: str) -> Any:
    for name in names:
        value = getattr(model, name, None)
        if value is not None and not callable(value):
            return value
    raise MissingCapabilityError(
        f"{_model_label(model)} does not provide {what} "
        f"(looked for: {', '.join(names)})"
    )


def _as_vector(value: Any, what: str) -> NDArray[np.floating[Any]]:
    """Convert an extracted quantity to a 1D float array."""
    if isinstance(value, (pd.Series, pd.DataFrame)):
        arr = value.to_numpy(dtype=np.float64)
    else:
        arr = np.asarray(value, dtype=np.float64)

    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    if arr.ndim != 1:
        raise InvalidInputError(f"{what} must be 1-dimensional, got {arr.ndim}")
    return arr


def model_kind(model: Any) -> str:
    """Return the variant tag of a fitted model.

    Parameters
    ----------
    model : Any
        Fitted model object.

    Returns
    -------
    str
        The model's ``kind`` attribute if it has one, "lm" for statsmodels
        linear regression results, "glm" for statsmodels GLM results and
        "unknown" otherwise.
    """
    res = _unwrap(model)
    kind = getattr(res, "kind", None)
    if isinstance(kind, str):
        return kind
    if isinstance(res, RegressionResults):
        return "lm"
    if isinstance(res, GLMResults):
        return "glm"
    return "unknown"


def get_residuals(
    model: Any, type: ResidualType = "response"
) -> NDArray[np.floating[Any]]:
    """Extract residuals from a fitted model.

    Parameters
    ----------
    model : Any
        Fitted model object.
    type : {"response", "pearson"}, default "response"
        Residual type. Pearson residuals of a weighted linear model are
        ``resid * sqrt(weights)``; they are not divided by the residual
        standard error.

    Returns
    -------
    NDArray[np.floating]
        Residual vector. May contain NaN for missing observations.

    Raises
    ------
    ValueError
        If ``type`` is not a known residual type.
    MissingCapabilityError
        If the model does not provide residuals.
    """
    if type not in ("response", "pearson"):
        raise ValueError(f"type must be 'response' or 'pearson', got {type!r}")

    res = _unwrap(model)

    if type == "pearson":
        if isinstance(res, GLMResults):
            return _as_vector(res.resid_pearson, "residuals")
        if isinstance(res, RegressionResults):
            return _as_vector(res.wresid, "residuals")
        pearson = getattr(res, "resid_pearson", None)
        if pearson is not None:
            return _as_vector(pearson, "residuals")
        resid = get_residuals(model, type="response")
        weights = get_weights(model)
        return resid if weights is None else resid * np.sqrt(weights)

    if isinstance(res, GLMResults):
        return _as_vector(res.resid_response, "residuals")
    return _as_vector(_first_attr(res, _RESID_ATTRS, "residuals"), "residuals")


def get_fitted(model: Any) -> NDArray[np.floating[Any]]:
    """Extract fitted values from a fitted model."""
    res = _unwrap(model)
    return _as_vector(
        _first_attr(res, _FITTED_ATTRS, "fitted values"), "fitted values"
    )


def get_weights(model: Any) -> NDArray[np.floating[Any]] | None:
    """Extract prior observation weights.

    Returns
    -------
    NDArray[np.floating] | None
        Weight vector, or None when the model is unweighted.
    """
    res = _unwrap(model)

    if isinstance(res, (RegressionResults, GLMResults)):
        if isinstance(res, GLMResults):
            weights = res.model.var_weights
        else:
            weights = getattr(res.model, "weights", None)
        # statsmodels stores unit weights for unweighted fits
        if weights is None or np.all(np.asarray(weights) == 1.0):
            return None
    else:
        weights = getattr(res, "weights", None)
        if weights is None:
            return None

    arr = np.asarray(weights, dtype=np.float64)
    if arr.ndim == 0:
        return np.full(len(get_residuals(model)), float(arr))
    return _as_vector(arr, "weights")


def get_rank(model: Any) -> int:
    """Return the number of linearly independent estimated coefficients."""
    res = _unwrap(model)

    if isinstance(res, RegressionResults):
        return int(round(res.df_model + res.model.k_constant))
    if isinstance(res, GLMResults):
        # GLM df_model always subtracts one for the intercept
        return int(round(res.df_model + 1))

    rank = getattr(res, "rank", None)
    if rank is None:
        raise MissingCapabilityError(
            f"{_model_label(model)} does not report a coefficient rank"
        )
    return int(rank)


def n_obs(model: Any) -> int:
    """Return the number of observations used in estimation."""
    res = _unwrap(model)
    nobs = getattr(res, "nobs", None)
    if nobs is not None:
        return int(nobs)
    return len(get_residuals(model))


def df_residual(model: Any) -> float:
    """Return the residual degrees of freedom."""
    res = _unwrap(model)
    df = getattr(res, "df_resid", None)
    if df is None:
        raise MissingCapabilityError(
            f"{_model_label(model)} does not report residual degrees of freedom"
        )
    return float(df)


def get_deviance(model: Any) -> float:
    """Return the model deviance.

    For linear models this is the weighted residual sum of squares.
    Objects that report neither ``deviance`` nor ``ssr`` fall back to
    ``sum(w * r^2)`` over the non-missing response residuals.
    """
    res = _unwrap(model)

    if isinstance(res, RegressionResults):
        return float(res.ssr)
    if isinstance(res, GLMResults):
        return float(res.deviance)

    for name in ("deviance", "ssr"):
        value = getattr(res, name, None)
        if value is not None and not callable(value):
            return float(value)

    resid = get_residuals(model)
    weights = get_weights(model)
    if weights is None:
        return float(np.nansum(resid**2))
    return float(np.nansum(weights * resid**2))


def _param_names(res: Any, k: int) -> list[str]:
    names = getattr(res, "param_names", None)
    if names is None and isinstance(res, (RegressionResults, GLMResults)):
        names = res.model.exog_names
    if names is None or len(names) != k:
        return [f"x{i}" for i in range(k)]
    return [str(n) for n in names]


def get_parameters(model: Any) -> pd.DataFrame:
    """Return parameter estimates as a DataFrame.

    Returns
    -------
    pd.DataFrame
        One row per parameter with columns "Parameter", "Estimate" and
        "Effects" ("fixed" or "random"). Missing estimates are NaN.
    """
    res = _unwrap(model)
    params = getattr(res, "params", None)
    if params is None:
        raise MissingCapabilityError(
            f"{_model_label(model)} does not provide parameter estimates"
        )

    if isinstance(params, pd.Series):
        names = [str(n) for n in params.index]
        estimates = params.to_numpy(dtype=np.float64)
    else:
        estimates = np.atleast_1d(np.asarray(params, dtype=np.float64)).ravel()
        names = _param_names(res, len(estimates))

    effects = getattr(res, "param_effects", None)
    if effects is None:
        effects = ["fixed"] * len(estimates)

    return pd.DataFrame(
        {
            "Parameter": names,
            "Estimate": estimates,
            "Effects": list(effects),
        }
    )


def find_parameters(model: Any, effects: EffectsType = "fixed") -> list[str]:
    """Return parameter names, optionally restricted by effect type.

    Parameters
    ----------
    model : Any
        Fitted model object.
    effects : {"fixed", "random", "all"}, default "fixed"
        Which parameters to return. Models without effect information
        report all of their parameters as fixed.

    Returns
    -------
    list[str]
        Parameter names in estimation order.
    """
    if effects not in ("fixed", "random", "all"):
        raise ValueError(
            f"effects must be 'fixed', 'random' or 'all', got {effects!r}"
        )

    params = get_parameters(model)
    if effects != "all":
        params = params[params["Effects"] == effects]
    return params["Parameter"].tolist()
