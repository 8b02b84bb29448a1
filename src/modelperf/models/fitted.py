"""Fitted-model containers for the supported estimation procedures.

Each container is a tagged variant of ``FittedModelBase``. The variants
differ in how they count estimated coefficients: instrumental-variable
fits report a coefficient rank, panel and compound-Poisson fits report
which of their parameters are fixed effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from modelperf.exceptions import InvalidInputError
from modelperf.models.base import FittedModelBase, ModelKind

if TYPE_CHECKING:
    from collections.abc import Sequence


EFFECT_TYPES = ("fixed", "random")


@dataclass(kw_only=True, repr=False)
class IVRegResults(FittedModelBase):
    """Results from an instrumental-variable (2SLS) regression.

    Parameters
    ----------
    rank : int | None
        Numerical rank of the second-stage design. If None, the number
        of finite parameter estimates is used.
    """

    kind: ClassVar[ModelKind] = "ivreg"

    rank: int | None = None
    model_name: str = "IV-2SLS"

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.rank is None:
            self.rank = int(np.count_nonzero(np.isfinite(self.params)))
        elif self.rank < 0:
            raise InvalidInputError(f"rank must be non-negative, got {self.rank}")

    @property
    def df_model(self) -> int:
        """Number of estimated coefficients (the rank)."""
        return int(self.rank)  # type: ignore[arg-type]


@dataclass(kw_only=True, repr=False)
class IVRobustResults(IVRegResults):
    """Results from an IV regression with heteroskedasticity-robust errors.

    The point estimates, residuals and rank are those of the 2SLS fit;
    ``se_type`` records which robust covariance was used for inference.
    """

    kind: ClassVar[ModelKind] = "iv_robust"

    se_type: str = "HC2"
    model_name: str = "IV-Robust"


@dataclass(kw_only=True, repr=False)
class PanelResults(FittedModelBase):
    """Results from a linear panel model.

    Parameters
    ----------
    param_effects : Sequence[str] | None
        Effect type of each parameter, "fixed" or "random". If None, all
        parameters are fixed effects.
    """

    kind: ClassVar[ModelKind] = "plm"

    param_effects: Sequence[str] | None = None
    model_name: str = "Panel"

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.param_effects is None:
            self.param_effects = ["fixed"] * len(self.params)
        else:
            self.param_effects = [str(e) for e in self.param_effects]
            if len(self.param_effects) != len(self.params):
                raise InvalidInputError(
                    f"param_effects must have one entry per parameter, "
                    f"got {len(self.param_effects)} for {len(self.params)}"
                )
            unknown = sorted(set(self.param_effects) - set(EFFECT_TYPES))
            if unknown:
                raise InvalidInputError(
                    f"Unknown effect type(s) {unknown}; expected one of {EFFECT_TYPES}"
                )

    @property
    def df_model(self) -> int:
        """Number of fixed-effect parameters."""
        return sum(1 for e in self.param_effects if e == "fixed")  # type: ignore[union-attr]


@dataclass(kw_only=True, repr=False)
class CompoundPoissonResults(PanelResults):
    """Results from a compound Poisson (Tweedie) GLM.

    Shares the parameter structure of ``PanelResults``.
    """

    kind: ClassVar[ModelKind] = "cpglm"

    model_name: str = "CompoundPoisson"


@dataclass(kw_only=True, repr=False)
class LinearModelResults(FittedModelBase):
    """Results from an ordinary or weighted least-squares fit."""

    kind: ClassVar[ModelKind] = "lm"

    model_name: str = "OLS"

    @property
    def df_model(self) -> int:
        """Number of finite parameter estimates."""
        return int(np.count_nonzero(np.isfinite(self.params)))
