"""Measurement protocols for an entangled pair.

Two ways a pair can end up with correlated spins:

- spooky: the left particle is measured at 12 o'clock; if the right
  detector happens to point the same way, the right spin is forced to the
  opposite of the left, otherwise it is measured on its own.
- hidden information: both particles carry a plan agreed when they were
  created and answer from it without any communication at measurement time.

Only when both sides measure along the same direction must the spins be
opposite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bell_sim.core.detector import select_orientation
from bell_sim.core.particle import measure
from bell_sim.core.random_source import check_unit_interval
from bell_sim.utils.types import DetectorOrientation, Plan, Spin

if TYPE_CHECKING:
    from bell_sim.core.particle import Pair
    from bell_sim.core.random_source import RandomSource


def spooky(pair: Pair, rng: RandomSource) -> tuple[Spin, Spin]:
    """Measure a pair with instantaneous correlation between the two sides.

    Returns (lhs, rhs) spins; both particles are mutated.
    """
    lhs_orientation = DetectorOrientation.TWELVE
    rhs_orientation = select_orientation(rng)

    measure(pair.lhs, lhs_orientation, rng)

    if lhs_orientation is rhs_orientation:  # 1/3
        pair.rhs.spin = pair.lhs.spin.opposite()
    else:  # 2/3
        measure(pair.rhs, rhs_orientation, rng)

    return pair.lhs.spin, pair.rhs.spin


def _hidden_spin(plan: Plan, orientation: DetectorOrientation, odd: Spin, usual: Spin) -> Spin:
    if plan is Plan.TRIVIAL:
        return usual
    return odd if orientation is DetectorOrientation.THREE else usual


def hidden_information(pair: Pair, plan: Plan, rng: RandomSource) -> tuple[Spin, Spin]:
    """Measure a pair whose outcomes were fixed in advance by ``plan``.

    TRIVIAL: right reads UP and left reads DOWN on every detector.
    ODDBALL: the 3 o'clock detector flips each side's answer (right DOWN,
    left UP); every other detector gives right UP and left DOWN.

    Each side draws its own detector orientation, right first. Both draws
    are consumed even under TRIVIAL.
    """
    rhs_orientation = select_orientation(rng)
    pair.rhs.spin = _hidden_spin(plan, rhs_orientation, odd=Spin.DOWN, usual=Spin.UP)

    lhs_orientation = select_orientation(rng)
    pair.lhs.spin = _hidden_spin(plan, lhs_orientation, odd=Spin.UP, usual=Spin.DOWN)

    return pair.lhs.spin, pair.rhs.spin


def choose_plan(rng: RandomSource, plan_probability: float) -> Plan:
    """ODDBALL with probability ``plan_probability``, TRIVIAL otherwise."""
    u = check_unit_interval(rng.uniform())
    return Plan.ODDBALL if u < plan_probability else Plan.TRIVIAL
