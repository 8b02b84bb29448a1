"""Exceptions raised by modelperf diagnostics."""

from __future__ import annotations


class ModelPerfError(Exception):
    """Base class for all modelperf errors."""


class InvalidInputError(ModelPerfError, ValueError):
    """Data is empty or degenerate after filtering.

    Raised for zero retained observations, negative weights, a
    non-positive scale factor, constant fitted values and similar
    conditions under which a diagnostic has no meaningful value.
    """


class MissingCapabilityError(ModelPerfError, TypeError):
    """A fitted model cannot supply a quantity a diagnostic needs."""
