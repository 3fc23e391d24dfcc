"""Enum and dataclass definitions for the Bell experiment simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bell_sim.utils.constants import DEFAULT_PLAN_PROBABILITIES, DEFAULT_TRIALS


class InvariantViolation(AssertionError):
    """A state the simulation can never reach when the code is correct."""


class Spin(Enum):
    """Spin of a particle. UNDETERMINED only before measurement."""

    UP = "up"
    DOWN = "down"
    UNDETERMINED = "undetermined"

    def opposite(self) -> Spin:
        if self is Spin.UP:
            return Spin.DOWN
        if self is Spin.DOWN:
            return Spin.UP
        raise InvariantViolation("Undetermined spin has no opposite")

    def __str__(self) -> str:
        return f"Spin{self.name.title()}"


class DetectorOrientation(Enum):
    """Fixed detector angles, named by clock position."""

    TWELVE = 12
    THREE = 3
    NINE = 9

    def __str__(self) -> str:
        return f"{self.value} o'clock"


class Plan(Enum):
    """Strategy agreed in advance by a hidden-variable pair."""

    TRIVIAL = "trivial"  # up-up-up -> down-down-down
    ODDBALL = "oddball"  # up-down-up -> down-up-down


class Protocol(Enum):
    """Measurement protocol driven by the experiment runner."""

    SPOOKY = "spooky"
    HIDDEN = "hidden"


@dataclass
class ExperimentConfig:
    """Configuration for the default run sequence."""

    trials: int = DEFAULT_TRIALS
    seed: int | None = None
    plan_probabilities: tuple[float, ...] = DEFAULT_PLAN_PROBABILITIES


@dataclass
class ExperimentResult:
    """Aggregate outcome of one experiment run."""

    protocol: Protocol
    trial_count: int
    difference_count: int
    expected_percentage: float
    plan_probability: float | None = None

    @property
    def has_data(self) -> bool:
        return self.trial_count > 0

    @property
    def fraction(self) -> float | None:
        """Fraction of trials with differing spins, None when no trials ran."""
        if not self.has_data:
            return None
        return self.difference_count / self.trial_count

    @property
    def percentage(self) -> float | None:
        if not self.has_data:
            return None
        return 100.0 * self.difference_count / self.trial_count

    @property
    def expected_fraction(self) -> float:
        return self.expected_percentage / 100.0
