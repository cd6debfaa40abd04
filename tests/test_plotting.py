#!/usr/bin/env python3
"""
Tests for matplotlib rendering of dot-plots and score matrices.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from DotAlign.dotplot import compute_dotplot
from DotAlign.dotplot.dotplot_plot import plot_dotplot
from DotAlign.seq_alignment import compute_alignment
from DotAlign.seq_alignment.matrix_plot import plot_score_matrix


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotDotplot:
    """Dot-plot figure."""

    def test_returns_figure(self):
        """One scatter point per matching cell."""
        grid = compute_dotplot("GATTACA", "GCATGCU")
        fig = plot_dotplot(grid, "GATTACA", "GCATGCU", title="demo")
        assert isinstance(fig, plt.Figure)
        ax = fig.axes[0]
        assert len(ax.collections[0].get_offsets()) == int(grid.sum())
        assert ax.get_title() == "demo"

    def test_empty_grid(self):
        """Empty input still draws."""
        fig = plot_dotplot(compute_dotplot("", "AC"), "", "AC")
        assert isinstance(fig, plt.Figure)

    def test_without_labels(self, tmp_path):
        """Long sequences can skip tick labels; figure saves."""
        s1 = "ACGT" * 50
        fig = plot_dotplot(compute_dotplot(s1, s1), s1, s1, show_labels=False)
        out = tmp_path / "dot.png"
        fig.savefig(out)
        assert out.stat().st_size > 0


class TestPlotScoreMatrix:
    """Heatmap with traceback path."""

    def test_annotated_with_path(self):
        """One text per cell and a path line."""
        result = compute_alignment("GATTACA", "GCATGCU")
        fig = plot_score_matrix(result)
        ax = fig.axes[0]
        assert len(ax.texts) == 8 * 8
        xs, ys = ax.lines[0].get_data()
        assert list(zip(ys, xs)) == list(result.path)
        assert "score = 0" in ax.get_title()

    def test_no_annotation_no_path(self):
        """Plain heatmap."""
        result = compute_alignment("AC", "CA")
        fig = plot_score_matrix(result, annotate=False, show_path=False, title="plain")
        ax = fig.axes[0]
        assert len(ax.texts) == 0
        assert len(ax.lines) == 0
        assert ax.get_title() == "plain"
