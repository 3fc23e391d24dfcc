"""Detector orientation selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bell_sim.core.random_source import check_unit_interval
from bell_sim.utils.constants import ORIENTATION_EDGES
from bell_sim.utils.types import DetectorOrientation, InvariantViolation

if TYPE_CHECKING:
    from bell_sim.core.random_source import RandomSource

_ORIENTATION_ORDER = (
    DetectorOrientation.TWELVE,
    DetectorOrientation.THREE,
    DetectorOrientation.NINE,
)


def orientation_for(u: float) -> DetectorOrientation:
    """Map a uniform draw in [0, 1) to an orientation.

    [0, 1/3) -> 12 o'clock, [1/3, 2/3) -> 3 o'clock, [2/3, 1) -> 9 o'clock.
    """
    check_unit_interval(u)
    for edge, orientation in zip(ORIENTATION_EDGES, _ORIENTATION_ORDER):
        if u < edge:
            return orientation
    raise InvariantViolation(f"Draw {u!r} fell outside every orientation range")


def select_orientation(rng: RandomSource) -> DetectorOrientation:
    """Pick one of the three detector orientations uniformly at random."""
    return orientation_for(rng.uniform())
