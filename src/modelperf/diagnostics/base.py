"""Result containers for diagnostic tests."""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_ALPHA = 0.05


@dataclass(frozen=True, kw_only=True)
class DiagnosticTestResult:
    """Result from a single diagnostic test.

    Attributes
    ----------
    test_name : str
        Name of the test (e.g., "Hetero test (BP)").
    null_hypothesis : str
        Description of the null hypothesis.
    statistic : float
        Test statistic value.
    pvalue : float
        P-value of the test.
    df : int | tuple[int, int] | None
        Degrees of freedom (int for chi-square, tuple for F).
    """

    test_name: str
    null_hypothesis: str
    statistic: float
    pvalue: float
    df: int | tuple[int, int] | None = None

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"{self.test_name}: statistic={self.statistic:.4f}, "
            f"p-value={self.pvalue:.4f}"
        )

    def __float__(self) -> float:
        return float(self.pvalue)
