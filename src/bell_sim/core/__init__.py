"""Simulation core: particles, protocols and the experiment runner."""

from bell_sim.core.detector import select_orientation
from bell_sim.core.experiment import (
    expected_percentage,
    format_report,
    run_default_sequence,
    run_experiment,
    run_hidden,
    run_spooky,
)
from bell_sim.core.particle import Pair, Particle, measure, new_pair, spins_differ
from bell_sim.core.protocols import choose_plan, hidden_information, spooky
from bell_sim.core.random_source import (
    NumpyRandomSource,
    RandomSource,
    SequenceRandomSource,
)

__all__ = [
    "NumpyRandomSource",
    "Pair",
    "Particle",
    "RandomSource",
    "SequenceRandomSource",
    "choose_plan",
    "expected_percentage",
    "format_report",
    "hidden_information",
    "measure",
    "new_pair",
    "run_default_sequence",
    "run_experiment",
    "run_hidden",
    "run_spooky",
    "select_orientation",
    "spins_differ",
    "spooky",
]
