"""Human-readable advisories for diagnostic results.

The numeric tests return structured results; this module turns them into
the short console messages shown to users.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from modelperf.diagnostics.heteroscedasticity import HeteroscedasticityResult


HETEROSCEDASTIC_MESSAGE = (
    "Warning: Heteroscedasticity (non-constant error variance) detected (p = %.3f)."
)
HOMOSCEDASTIC_MESSAGE = "OK: Error variance appears to be homoscedastic (p = %.3f)."

WARNING_STYLE = "red"
OK_STYLE = "green"


def format_advisory(result: HeteroscedasticityResult) -> str:
    """Return the advisory text for a heteroscedasticity result.

    Parameters
    ----------
    result : HeteroscedasticityResult
        Result of ``check_heteroscedasticity``.

    Returns
    -------
    str
        Warning text if the p-value is below the result's significance
        level, OK text otherwise. The p-value is shown to three decimals.
    """
    if result.is_heteroscedastic:
        return HETEROSCEDASTIC_MESSAGE % result.pvalue
    return HOMOSCEDASTIC_MESSAGE % result.pvalue


def print_advisory(
    result: HeteroscedasticityResult, console: Console | None = None
) -> None:
    """Print the advisory for a heteroscedasticity result.

    Warnings are printed in red, OK messages in green.

    Parameters
    ----------
    result : HeteroscedasticityResult
        Result of ``check_heteroscedasticity``.
    console : Console | None
        Rich console to print to. If None, a console writing to stdout is
        created.
    """
    if console is None:
        console = Console()

    style = WARNING_STYLE if result.is_heteroscedastic else OK_STYLE
    console.print(
        format_advisory(result),
        style=style,
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
