"""Tests for the scale-location plot."""

from __future__ import annotations

from typing import Any

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pytest

import modelperf as mp
from modelperf.visualization import MODELPERF_COLORS, plot_heteroscedasticity

# Use non-interactive backend for testing
matplotlib.use("Agg")


class TestPlotHeteroscedasticity:
    """Tests for plot_heteroscedasticity function."""

    def test_returns_figure_and_axes(self, ols_results: Any) -> None:
        result = mp.check_heteroscedasticity(ols_results)
        fig, ax = plot_heteroscedasticity(result)

        assert fig is not None
        assert ax is not None
        plt.close(fig)

    def test_draws_points_and_smoother(self, ols_results: Any) -> None:
        result = mp.check_heteroscedasticity(ols_results)
        fig, ax = plot_heteroscedasticity(result)

        assert len(ax.collections) == 1
        offsets = ax.collections[0].get_offsets()
        assert offsets.shape == (200, 2)
        np.testing.assert_allclose(
            offsets[:, 1], np.sqrt(np.abs(result.std_resid))  # type: ignore[arg-type]
        )
        assert len(ax.lines) == 1
        plt.close(fig)

    def test_without_smoother(self, ols_results: Any) -> None:
        result = mp.check_heteroscedasticity(ols_results)
        fig, ax = plot_heteroscedasticity(result, show_smoother=False)

        assert len(ax.lines) == 0
        plt.close(fig)

    def test_default_title_shows_pvalue(self, ols_results: Any) -> None:
        result = mp.check_heteroscedasticity(ols_results)
        fig, ax = plot_heteroscedasticity(result)

        assert ax.get_title() == f"Homogeneity of Variance (p = {result.pvalue:.3f})"
        plt.close(fig)

    def test_custom_title(self, ols_results: Any) -> None:
        result = mp.check_heteroscedasticity(ols_results)
        fig, ax = plot_heteroscedasticity(result, title="Custom Title")

        assert ax.get_title() == "Custom Title"
        plt.close(fig)

    def test_with_existing_axes(self, ols_results: Any) -> None:
        result = mp.check_heteroscedasticity(ols_results)
        fig, ax = plt.subplots()
        returned_fig, returned_ax = plot_heteroscedasticity(result, ax=ax)

        assert returned_fig is fig
        assert returned_ax is ax
        plt.close(fig)

    def test_smoother_color_flags_heteroscedasticity(
        self, heteroscedastic_ols_results: Any
    ) -> None:
        result = mp.check_heteroscedasticity(heteroscedastic_ols_results)
        assert result.is_heteroscedastic
        fig, ax = plot_heteroscedasticity(result)

        assert ax.lines[0].get_color() == MODELPERF_COLORS["red"]
        plt.close(fig)

    def test_result_plot_method(self, ols_results: Any) -> None:
        result = mp.check_heteroscedasticity(ols_results)
        fig, ax = result.plot(figsize=(6, 4))

        np.testing.assert_allclose(fig.get_size_inches(), (6, 4))
        plt.close(fig)

    def test_missing_plot_data(self) -> None:
        result = mp.HeteroscedasticityResult(statistic=1.0, pvalue=0.3)

        with pytest.raises(ValueError, match="plotting data"):
            plot_heteroscedasticity(result)
