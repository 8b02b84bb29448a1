"""Log-likelihood of fitted regression models."""

from modelperf.likelihood.gaussian import (
    PARAM_COUNT_STRATEGIES,
    LogLikResult,
    gaussian_loglik,
    loglik,
)

__all__ = [
    "PARAM_COUNT_STRATEGIES",
    "LogLikResult",
    "gaussian_loglik",
    "loglik",
]
