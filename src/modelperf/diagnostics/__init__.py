"""Diagnostic tests for fitted regression models.

This module provides:
- Heteroscedasticity check (Breusch-Pagan on fitted values)
- Console advisories for diagnostic results
"""

from modelperf.diagnostics.base import DEFAULT_ALPHA, DiagnosticTestResult
from modelperf.diagnostics.heteroscedasticity import (
    HeteroscedasticityResult,
    check_heteroscedasticity,
    heteroscedasticity_test,
)
from modelperf.diagnostics.report import format_advisory, print_advisory

__all__ = [
    "DEFAULT_ALPHA",
    "DiagnosticTestResult",
    "HeteroscedasticityResult",
    "check_heteroscedasticity",
    "format_advisory",
    "heteroscedasticity_test",
    "print_advisory",
]
