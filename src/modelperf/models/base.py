"""Base classes for fitted-model containers.

This module provides the foundational container class that all fitted
model variants inherit from. A container holds what an estimation
procedure produced (residuals, fitted values, estimates and weights)
and exposes it through the attribute names the diagnostics read.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Literal

import numpy as np
import pandas as pd

from modelperf.exceptions import InvalidInputError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import ArrayLike, NDArray


ModelKind = Literal["ivreg", "iv_robust", "plm", "cpglm", "lm"]


def _ensure_array(
    data: ArrayLike | pd.Series[Any] | pd.DataFrame | None,
    name: str = "data",
    ndim: int | None = None,
) -> NDArray[np.floating[Any]] | None:
    """Convert input data to a numpy array.

    Parameters
    ----------
    data : ArrayLike | pd.Series | pd.DataFrame | None
        Input data to convert.
    name : str
        Name of the variable for error messages.
    ndim : int | None
        Expected number of dimensions. If None, no check is performed.

    Returns
    -------
    NDArray[np.floating] | None
        Converted array, or None if input is None.

    Raises
    ------
    InvalidInputError
        If data has unexpected dimensions.
    """
    if data is None:
        return None

    if isinstance(data, (pd.Series, pd.DataFrame)):
        arr = data.to_numpy(dtype=np.float64)
    else:
        arr = np.asarray(data, dtype=np.float64)

    if ndim is not None and arr.ndim != ndim:
        raise InvalidInputError(f"{name} must be {ndim}-dimensional, got {arr.ndim}")

    return arr


@dataclass(kw_only=True)
class FittedModelBase(ABC):
    """Base class for all fitted-model containers.

    Parameters
    ----------
    resid : ArrayLike
        Raw (response) residuals, one per observation.
    fittedvalues : ArrayLike
        Fitted values, indexed like ``resid``.
    params : ArrayLike
        Parameter estimates. Missing estimates (aliased coefficients)
        are encoded as NaN.
    weights : ArrayLike | None
        Prior observation weights. None means all weights are one.
    param_names : Sequence[str] | None
        Names of the parameters for display purposes.
    model_name : str
        Name of the model.

    Attributes
    ----------
    kind : ModelKind
        Variant tag used to select per-variant behaviour.
    nobs : int
        Number of observations with non-zero weight.
    df_resid : int
        Residual degrees of freedom (nobs - df_model).
    deviance : float
        Weighted residual sum of squares.
    """

    kind: ClassVar[ModelKind]

    resid: NDArray[np.floating[Any]]
    fittedvalues: NDArray[np.floating[Any]]
    params: NDArray[np.floating[Any]]
    weights: NDArray[np.floating[Any]] | None = None
    param_names: Sequence[str] | None = None
    model_name: str = "FittedModel"

    def __post_init__(self) -> None:
        """Convert inputs to arrays and validate their lengths."""
        self.resid = _ensure_array(self.resid, "resid", ndim=1)  # type: ignore[assignment]
        self.fittedvalues = _ensure_array(self.fittedvalues, "fittedvalues", ndim=1)  # type: ignore[assignment]
        self.params = np.atleast_1d(_ensure_array(self.params, "params"))
        self.weights = _ensure_array(self.weights, "weights", ndim=1)

        n = len(self.resid)
        if len(self.fittedvalues) != n:
            raise InvalidInputError(
                f"resid and fittedvalues must have same length, "
                f"got {n} and {len(self.fittedvalues)}"
            )
        if self.weights is not None and len(self.weights) != n:
            raise InvalidInputError(
                f"resid and weights must have same length, "
                f"got {n} and {len(self.weights)}"
            )
        if self.param_names is not None:
            self.param_names = [str(p) for p in self.param_names]
            if len(self.param_names) != len(self.params):
                raise InvalidInputError(
                    f"param_names must have one entry per parameter, "
                    f"got {len(self.param_names)} for {len(self.params)}"
                )

    @property
    def names(self) -> list[str]:
        """Parameter names, generated as x0, x1, ... when not given."""
        if self.param_names is not None:
            return list(self.param_names)
        return [f"x{i}" for i in range(len(self.params))]

    @property
    def nobs(self) -> int:
        """Number of observations with non-zero weight."""
        if self.weights is None:
            return len(self.resid)
        return int(np.count_nonzero(self.weights))

    @property
    @abstractmethod
    def df_model(self) -> int:
        """Number of estimated coefficients."""
        ...

    @property
    def df_resid(self) -> int:
        """Residual degrees of freedom (nobs - df_model)."""
        return self.nobs - self.df_model

    @property
    def deviance(self) -> float:
        """Weighted residual sum of squares."""
        if self.weights is None:
            return float(np.nansum(self.resid**2))
        return float(np.nansum(self.weights * self.resid**2))

    @property
    def resid_pearson(self) -> NDArray[np.floating[Any]]:
        """Pearson residuals, resid * sqrt(weights)."""
        if self.weights is None:
            return self.resid.copy()
        return self.resid * np.sqrt(self.weights)

    def __repr__(self) -> str:
        """Return string representation of the container."""
        class_name = self.__class__.__name__
        return (
            f"{class_name}(kind={self.kind!r}, nobs={self.nobs}, "
            f"df_model={self.df_model})"
        )
