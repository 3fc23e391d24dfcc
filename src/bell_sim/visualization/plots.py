"""Matplotlib-based plots of experiment results."""

from __future__ import annotations

import os
from collections import Counter
from typing import TYPE_CHECKING

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend by default

import matplotlib.pyplot as plt
import numpy as np

from bell_sim.core.detector import select_orientation
from bell_sim.utils.constants import BELL_BOUND
from bell_sim.utils.types import DetectorOrientation, Protocol

if TYPE_CHECKING:
    from bell_sim.core.random_source import RandomSource
    from bell_sim.utils.types import ExperimentResult


def result_label(result: ExperimentResult) -> str:
    if result.protocol is Protocol.SPOOKY:
        return "spooky"
    return f"hidden\np={result.plan_probability:g}"


class PlotSuite:
    """Matplotlib-based 2D plots for Bell experiment runs."""

    def __init__(self, save_dir: str = ".") -> None:
        self.save_dir = os.path.expanduser(save_dir)

    def _save_or_show(
        self, fig: plt.Figure, name: str, show: bool, save: bool
    ) -> plt.Figure:
        if save:
            os.makedirs(self.save_dir, exist_ok=True)
            path = os.path.join(self.save_dir, f"bell_{name}.png")
            fig.savefig(path, dpi=150, bbox_inches="tight")
        if show:
            plt.show()
        else:
            plt.close(fig)
        return fig

    def percentage_comparison(
        self,
        results: list[ExperimentResult],
        show: bool = False,
        save: bool = True,
    ) -> plt.Figure:
        """Observed vs expected percent-different, one bar pair per run.

        Runs without data are drawn with an empty observed bar.
        """
        fig, ax = plt.subplots(figsize=(10, 6))
        if not results:
            ax.text(0.5, 0.5, "No data", ha="center", va="center")
            return self._save_or_show(fig, "percentages", show, save)

        x = np.arange(len(results))
        width = 0.38
        observed = [r.percentage if r.has_data else 0.0 for r in results]
        expected = [r.expected_percentage for r in results]

        ax.bar(x - width / 2, observed, width, label="Observed", color="#3498db")
        ax.bar(x + width / 2, expected, width, label="Expected", color="#95a5a6")
        ax.axhline(y=100.0 * BELL_BOUND, color="red", linestyle="--", alpha=0.6,
                   label=f"Bell bound 5/9 ({100.0 * BELL_BOUND:.1f}%)")
        ax.set_xticks(x)
        ax.set_xticklabels([result_label(r) for r in results])
        ax.set_ylabel("Percent different")
        ax.set_ylim(0, 105)
        ax.set_title("Spooky Action vs Hidden Information")
        ax.legend()
        ax.grid(True, axis="y", alpha=0.3)

        fig.tight_layout()
        return self._save_or_show(fig, "percentages", show, save)

    def orientation_histogram(
        self,
        rng: RandomSource,
        draws: int = 10_000,
        show: bool = False,
        save: bool = True,
    ) -> plt.Figure:
        """Frequency of each detector orientation over ``draws`` selections."""
        counts = Counter(select_orientation(rng) for _ in range(draws))
        orientations = list(DetectorOrientation)
        freqs = [counts[o] / draws if draws > 0 else 0.0 for o in orientations]

        fig, ax = plt.subplots(figsize=(8, 5))
        ax.bar([str(o) for o in orientations], freqs, color="#2ecc71")
        ax.axhline(y=1.0 / 3.0, color="red", linestyle="--", alpha=0.6, label="1/3")
        ax.set_ylabel("Frequency")
        ax.set_title(f"Detector Orientation Selection ({draws} draws)")
        ax.legend()

        return self._save_or_show(fig, "orientations", show, save)
