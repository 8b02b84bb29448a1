"""Tests for the public namespace."""

from __future__ import annotations

import logging

import modelperf as mp
from modelperf import api


class TestPublicAPI:
    """Tests for top-level exports."""

    def test_all_names_resolve(self) -> None:
        for name in mp.__all__:
            assert hasattr(mp, name), f"modelperf.{name} is not defined"

    def test_api_matches_package(self) -> None:
        for name in api.__all__:
            assert getattr(mp, name) is getattr(api, name)

    def test_version(self) -> None:
        assert isinstance(mp.__version__, str)
        assert mp.__version__.count(".") >= 1

    def test_error_hierarchy(self) -> None:
        assert issubclass(mp.InvalidInputError, mp.ModelPerfError)
        assert issubclass(mp.InvalidInputError, ValueError)
        assert issubclass(mp.MissingCapabilityError, mp.ModelPerfError)
        assert issubclass(mp.MissingCapabilityError, TypeError)

    def test_library_logger_is_silent(self) -> None:
        handlers = logging.getLogger("modelperf").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
