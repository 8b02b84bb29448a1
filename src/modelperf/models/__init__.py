"""Fitted-model containers consumed by the diagnostics."""

from modelperf.models.base import FittedModelBase, ModelKind
from modelperf.models.fitted import (
    CompoundPoissonResults,
    IVRegResults,
    IVRobustResults,
    LinearModelResults,
    PanelResults,
)

__all__ = [
    "CompoundPoissonResults",
    "FittedModelBase",
    "IVRegResults",
    "IVRobustResults",
    "LinearModelResults",
    "ModelKind",
    "PanelResults",
]
