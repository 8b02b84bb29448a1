"""Public API for modelperf package.

This module provides a clean namespace for the most commonly used
classes and functions in the modelperf package.
"""

# Diagnostics
from modelperf.diagnostics import (
    DiagnosticTestResult,
    HeteroscedasticityResult,
    check_heteroscedasticity,
    format_advisory,
    heteroscedasticity_test,
    print_advisory,
)

# Errors
from modelperf.exceptions import (
    InvalidInputError,
    MissingCapabilityError,
    ModelPerfError,
)

# Log-likelihood
from modelperf.likelihood import LogLikResult, gaussian_loglik, loglik

# Fitted-model containers
from modelperf.models import (
    CompoundPoissonResults,
    FittedModelBase,
    IVRegResults,
    IVRobustResults,
    LinearModelResults,
    PanelResults,
)

# Visualization
from modelperf.visualization import plot_heteroscedasticity

__all__ = [
    "CompoundPoissonResults",
    # Diagnostics
    "DiagnosticTestResult",
    # Models
    "FittedModelBase",
    "HeteroscedasticityResult",
    "IVRegResults",
    "IVRobustResults",
    # Errors
    "InvalidInputError",
    "LinearModelResults",
    # Log-likelihood
    "LogLikResult",
    "MissingCapabilityError",
    "ModelPerfError",
    "PanelResults",
    "check_heteroscedasticity",
    "format_advisory",
    "gaussian_loglik",
    "heteroscedasticity_test",
    "loglik",
    # Visualization
    "plot_heteroscedasticity",
    "print_advisory",
]
