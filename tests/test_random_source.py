"""Tests for the uniform random sources."""

import numpy as np
import pytest

from bell_sim.core.random_source import (
    NumpyRandomSource,
    SequenceRandomSource,
    check_unit_interval,
    make_source,
)
from bell_sim.utils.types import InvariantViolation


class TestCheckUnitInterval:
    def test_accepts_zero(self):
        assert check_unit_interval(0.0) == 0.0

    def test_accepts_just_below_one(self):
        assert check_unit_interval(0.9999999) == 0.9999999

    def test_rejects_one(self):
        with pytest.raises(InvariantViolation):
            check_unit_interval(1.0)

    def test_rejects_negative(self):
        with pytest.raises(InvariantViolation):
            check_unit_interval(-0.01)


class TestNumpyRandomSource:
    def test_values_in_unit_interval(self):
        src = NumpyRandomSource(seed=1, block_size=100)
        values = [src.uniform() for _ in range(1000)]
        assert min(values) >= 0.0
        assert max(values) < 1.0
        assert src.draws == 1000

    def test_same_seed_same_sequence(self):
        a = NumpyRandomSource(seed=7)
        b = NumpyRandomSource(seed=7)
        assert [a.uniform() for _ in range(50)] == [b.uniform() for _ in range(50)]

    def test_matches_generator(self):
        src = NumpyRandomSource(seed=3, block_size=16)
        expected = np.random.default_rng(3).random(16)
        np.testing.assert_allclose([src.uniform() for _ in range(16)], expected)

    def test_accepts_generator(self):
        gen = np.random.default_rng(11)
        src = NumpyRandomSource(generator=gen)
        assert src.rng is gen

    def test_rejects_bad_block_size(self):
        with pytest.raises(ValueError):
            NumpyRandomSource(block_size=0)

    def test_make_source(self):
        assert isinstance(make_source(5), NumpyRandomSource)


class TestSequenceRandomSource:
    def test_replays_in_order(self):
        src = SequenceRandomSource([0.1, 0.2, 0.3])
        assert [src.uniform() for _ in range(3)] == [0.1, 0.2, 0.3]
        assert src.remaining == 0

    def test_exhaustion_raises(self):
        src = SequenceRandomSource([0.5])
        src.uniform()
        with pytest.raises(InvariantViolation):
            src.uniform()
