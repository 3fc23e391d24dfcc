"""Particles, entangled pairs, and single-particle measurement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bell_sim.core.random_source import check_unit_interval
from bell_sim.utils.constants import DOWN_PROBABILITY
from bell_sim.utils.types import DetectorOrientation, InvariantViolation, Spin

if TYPE_CHECKING:
    from bell_sim.core.random_source import RandomSource


@dataclass
class Particle:
    """A particle holding a single spin value."""

    spin: Spin = Spin.UNDETERMINED

    @property
    def is_measured(self) -> bool:
        return self.spin is not Spin.UNDETERMINED


@dataclass
class Pair:
    """Two particles created together, not yet measured."""

    lhs: Particle = field(default_factory=Particle)
    rhs: Particle = field(default_factory=Particle)

    @property
    def spins(self) -> tuple[Spin, Spin]:
        return self.lhs.spin, self.rhs.spin


def new_pair() -> Pair:
    """Create an entangled pair with both spins undetermined."""
    return Pair(lhs=Particle(Spin.UNDETERMINED), rhs=Particle(Spin.UNDETERMINED))


def measure(
    particle: Particle,
    orientation: DetectorOrientation,
    rng: RandomSource,
    down_probability: float = DOWN_PROBABILITY,
) -> Spin:
    """Collapse a particle's spin along the given detector.

    12 o'clock is the reference detector and always reads UP without
    touching the random source. 3 and 9 o'clock read DOWN for a draw below
    ``down_probability`` and UP otherwise.
    """
    if orientation is DetectorOrientation.TWELVE:
        particle.spin = Spin.UP
    else:
        u = check_unit_interval(rng.uniform())
        particle.spin = Spin.DOWN if u < down_probability else Spin.UP
    return particle.spin


def spins_differ(lhs: Spin, rhs: Spin) -> bool:
    """True when two measured spins differ.

    Comparing an undetermined spin is an invariant violation.
    """
    if lhs is Spin.UNDETERMINED or rhs is Spin.UNDETERMINED:
        raise InvariantViolation(f"Compared unmeasured spins ({lhs}, {rhs})")
    return lhs is not rhs
