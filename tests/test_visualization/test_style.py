"""Tests for the visualization style module."""

from __future__ import annotations

import re

import matplotlib as mpl
import pytest

from modelperf.visualization.style import (
    MODELPERF_COLOR_CYCLE,
    MODELPERF_COLORS,
    get_style,
    set_style,
    use_style,
)


class TestColorPalette:
    """Tests for MODELPERF_COLORS and MODELPERF_COLOR_CYCLE."""

    def test_colors_are_valid_hex(self) -> None:
        hex_pattern = re.compile(r"^#[0-9A-Fa-f]{6}$")
        for name, color in MODELPERF_COLORS.items():
            assert hex_pattern.match(color), f"Invalid hex color for {name}: {color}"

    def test_color_cycle_uses_palette(self) -> None:
        assert len(MODELPERF_COLOR_CYCLE) == 7
        assert set(MODELPERF_COLOR_CYCLE) <= set(MODELPERF_COLORS.values())


class TestGetStyle:
    """Tests for get_style() function."""

    def test_settings(self) -> None:
        style = get_style()
        assert style["figure.figsize"] == (10, 5)
        assert style["axes.spines.top"] is False
        assert style["axes.spines.right"] is False
        assert style["axes.grid.axis"] == "y"
        assert style["legend.frameon"] is False
        assert style["savefig.bbox"] == "tight"

    def test_keys_are_valid_rcparams(self) -> None:
        for key in get_style():
            assert key in mpl.rcParams, f"Unknown rcParam: {key}"


class TestSetStyle:
    """Tests for set_style() function."""

    def test_modifies_global_rcparams(self) -> None:
        original = mpl.rcParams.copy()
        try:
            set_style()
            assert tuple(mpl.rcParams["figure.figsize"]) == (10, 5)
            assert mpl.rcParams["axes.spines.top"] is False
        finally:
            mpl.rcParams.update(original)


class TestUseStyle:
    """Tests for use_style() context manager."""

    def test_applies_and_restores(self) -> None:
        original = mpl.rcParams["figure.dpi"]

        with use_style():
            assert mpl.rcParams["figure.dpi"] == 150

        assert mpl.rcParams["figure.dpi"] == original

    def test_restores_on_exception(self) -> None:
        original = mpl.rcParams["axes.spines.top"]

        with pytest.raises(ValueError), use_style():
            assert mpl.rcParams["axes.spines.top"] is False
            raise ValueError("test exception")

        assert mpl.rcParams["axes.spines.top"] == original
