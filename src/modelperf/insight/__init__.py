"""Model introspection: uniform access to what a fitted model reports."""

from modelperf.insight.extract import (
    df_residual,
    find_parameters,
    get_deviance,
    get_fitted,
    get_parameters,
    get_rank,
    get_residuals,
    get_weights,
    model_kind,
    n_obs,
)

__all__ = [
    "df_residual",
    "find_parameters",
    "get_deviance",
    "get_fitted",
    "get_parameters",
    "get_rank",
    "get_residuals",
    "get_weights",
    "model_kind",
    "n_obs",
]
