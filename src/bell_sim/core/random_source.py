"""Uniform random sources for the simulation.

Every random decision in the simulation goes through a single primitive,
``uniform()``, returning a float in [0, 1). Production runs use a numpy
``Generator``; tests replay fixed sequences to hit exact branch boundaries.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

import numpy as np
from numpy.typing import NDArray

from bell_sim.utils.types import InvariantViolation


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def uniform(self) -> float: ...


def check_unit_interval(u: float) -> float:
    """Return u, or raise InvariantViolation if it lies outside [0, 1)."""
    if not 0.0 <= u < 1.0:
        raise InvariantViolation(f"Random draw {u!r} outside [0, 1)")
    return u


class NumpyRandomSource:
    """Uniform draws from ``numpy.random.default_rng``.

    Draws are pulled from the generator in blocks so per-trial calls stay
    cheap; the sequence is identical to calling ``Generator.random()`` in a
    loop for a given seed and block size.
    """

    def __init__(
        self,
        seed: int | None = None,
        block_size: int = 65_536,
        generator: np.random.Generator | None = None,
    ) -> None:
        if block_size < 1:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self.rng = generator if generator is not None else np.random.default_rng(seed)
        self.block_size = block_size
        self._block: NDArray[np.float64] = np.empty(0)
        self._pos = 0
        self.draws = 0

    def uniform(self) -> float:
        if self._pos >= len(self._block):
            self._block = self.rng.random(self.block_size)
            self._pos = 0
        u = float(self._block[self._pos])
        self._pos += 1
        self.draws += 1
        return u


class SequenceRandomSource:
    """Replay a fixed list of draws, in order.

    Raises InvariantViolation once exhausted so a test that consumes more
    randomness than expected fails loudly.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self.values = list(values)
        self.draws = 0

    @property
    def remaining(self) -> int:
        return len(self.values) - self.draws

    def uniform(self) -> float:
        if self.draws >= len(self.values):
            raise InvariantViolation(
                f"Sequence source exhausted after {self.draws} draws"
            )
        u = self.values[self.draws]
        self.draws += 1
        return u


def make_source(seed: int | None = None) -> NumpyRandomSource:
    """Default source for a run, seeded when reproducibility is wanted."""
    return NumpyRandomSource(seed=seed)
