"""Tests for the matplotlib plot suite."""

import os

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from bell_sim.core.experiment import run_hidden, run_spooky
from bell_sim.core.random_source import NumpyRandomSource
from bell_sim.visualization.plots import PlotSuite, result_label


@pytest.fixture
def tmp_save_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def plot_suite(tmp_save_dir):
    return PlotSuite(save_dir=tmp_save_dir)


@pytest.fixture
def sample_results():
    rng = NumpyRandomSource(seed=5)
    return [run_spooky(500, rng=rng), run_hidden(500, 0.5, rng=rng), run_hidden(0, 1.0)]


class TestPercentageComparison:
    def test_returns_figure(self, plot_suite, sample_results):
        fig = plot_suite.percentage_comparison(sample_results, save=False)
        assert isinstance(fig, plt.Figure)

    def test_empty_results(self, plot_suite):
        fig = plot_suite.percentage_comparison([], save=False)
        assert isinstance(fig, plt.Figure)

    def test_saves_file(self, plot_suite, sample_results, tmp_save_dir):
        plot_suite.percentage_comparison(sample_results, save=True)
        assert os.path.exists(os.path.join(tmp_save_dir, "bell_percentages.png"))


class TestOrientationHistogram:
    def test_returns_figure(self, plot_suite):
        fig = plot_suite.orientation_histogram(NumpyRandomSource(seed=1), draws=300, save=False)
        assert isinstance(fig, plt.Figure)

    def test_saves_file(self, plot_suite, tmp_save_dir):
        plot_suite.orientation_histogram(NumpyRandomSource(seed=1), draws=300, save=True)
        assert os.path.exists(os.path.join(tmp_save_dir, "bell_orientations.png"))


class TestResultLabel:
    def test_labels(self, sample_results):
        assert result_label(sample_results[0]) == "spooky"
        assert result_label(sample_results[1]) == "hidden\np=0.5"
