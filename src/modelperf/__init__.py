"""modelperf: Diagnostic statistics for fitted regression models.

Computes log-likelihood values for instrumental-variable, robust
instrumental-variable, panel and compound-Poisson fits, and checks any
fitted regression model for non-constant error variance.

Example
-------
>>> import numpy as np
>>> import statsmodels.api as sm
>>> import modelperf as mp
>>>
>>> rng = np.random.default_rng(42)
>>> x = rng.uniform(1, 10, 200)
>>> y = 1 + 2 * x + rng.standard_normal(200) * x
>>>
>>> # Breusch-Pagan check on a statsmodels fit
>>> results = sm.OLS(y, sm.add_constant(x)).fit()
>>> check = mp.check_heteroscedasticity(results, verbose=True)
>>> fig, ax = check.plot()
>>>
>>> # Log-likelihood of an IV fit
>>> iv = mp.IVRegResults(
...     resid=results.resid, fittedvalues=results.fittedvalues,
...     params=results.params, weights=np.ones(200),
... )
>>> print(mp.loglik(iv))
"""

import logging

from modelperf._version import __version__
from modelperf.api import (
    CompoundPoissonResults,
    DiagnosticTestResult,
    FittedModelBase,
    HeteroscedasticityResult,
    InvalidInputError,
    IVRegResults,
    IVRobustResults,
    LinearModelResults,
    LogLikResult,
    MissingCapabilityError,
    ModelPerfError,
    PanelResults,
    check_heteroscedasticity,
    format_advisory,
    gaussian_loglik,
    heteroscedasticity_test,
    loglik,
    plot_heteroscedasticity,
    print_advisory,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CompoundPoissonResults",
    "DiagnosticTestResult",
    "FittedModelBase",
    "HeteroscedasticityResult",
    "IVRegResults",
    "IVRobustResults",
    "InvalidInputError",
    "LinearModelResults",
    "LogLikResult",
    "MissingCapabilityError",
    "ModelPerfError",
    "PanelResults",
    "__version__",
    "check_heteroscedasticity",
    "format_advisory",
    "gaussian_loglik",
    "heteroscedasticity_test",
    "loglik",
    "plot_heteroscedasticity",
    "print_advisory",
]
