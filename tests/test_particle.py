"""Tests for particles, pairs, orientation selection and measurement."""

from collections import Counter

import pytest

from bell_sim.core.detector import orientation_for, select_orientation
from bell_sim.core.particle import Pair, Particle, measure, new_pair, spins_differ
from bell_sim.core.random_source import SequenceRandomSource
from bell_sim.utils.types import DetectorOrientation, InvariantViolation, Spin


class TestNewPair:
    def test_both_undetermined(self):
        pair = new_pair()
        assert pair.spins == (Spin.UNDETERMINED, Spin.UNDETERMINED)
        assert not pair.lhs.is_measured
        assert not pair.rhs.is_measured

    def test_particles_are_distinct(self):
        pair = new_pair()
        pair.lhs.spin = Spin.UP
        assert pair.rhs.spin is Spin.UNDETERMINED

    def test_default_pair(self):
        assert Pair().spins == (Spin.UNDETERMINED, Spin.UNDETERMINED)


class TestOrientationFor:
    @pytest.mark.parametrize(
        "u, expected",
        [
            (0.0, DetectorOrientation.TWELVE),
            (0.3333, DetectorOrientation.TWELVE),
            (1 / 3, DetectorOrientation.THREE),
            (0.5, DetectorOrientation.THREE),
            (2 / 3, DetectorOrientation.NINE),
            (0.9999999, DetectorOrientation.NINE),
        ],
    )
    def test_boundaries(self, u, expected):
        assert orientation_for(u) is expected

    def test_one_is_invariant_violation(self):
        with pytest.raises(InvariantViolation):
            orientation_for(1.0)

    def test_consumes_one_draw(self):
        src = SequenceRandomSource([0.5, 0.9])
        assert select_orientation(src) is DetectorOrientation.THREE
        assert src.draws == 1


class TestOrientationCoverage:
    def test_uniform_thirds(self, rng):
        n = 150_000
        counts = Counter(select_orientation(rng) for _ in range(n))
        for orientation in DetectorOrientation:
            assert counts[orientation] / n == pytest.approx(1 / 3, abs=0.01)


class TestMeasure:
    def test_twelve_always_up(self, rng):
        for _ in range(10_000):
            p = Particle()
            assert measure(p, DetectorOrientation.TWELVE, rng) is Spin.UP

    def test_twelve_consumes_no_randomness(self):
        src = SequenceRandomSource([])
        p = Particle()
        assert measure(p, DetectorOrientation.TWELVE, src) is Spin.UP
        assert src.draws == 0

    @pytest.mark.parametrize("orientation", [DetectorOrientation.THREE, DetectorOrientation.NINE])
    def test_split_boundary(self, orientation):
        src = SequenceRandomSource([0.0, 0.2499, 0.25, 0.9999])
        spins = [measure(Particle(), orientation, src) for _ in range(4)]
        assert spins == [Spin.DOWN, Spin.DOWN, Spin.UP, Spin.UP]

    def test_mutates_particle(self):
        p = Particle()
        result = measure(p, DetectorOrientation.NINE, SequenceRandomSource([0.1]))
        assert p.spin is result is Spin.DOWN
        assert p.is_measured

    def test_custom_down_probability(self):
        src = SequenceRandomSource([0.4])
        assert measure(Particle(), DetectorOrientation.THREE, src, down_probability=0.5) is Spin.DOWN

    def test_draw_of_one_is_invariant_violation(self):
        with pytest.raises(InvariantViolation):
            measure(Particle(), DetectorOrientation.THREE, SequenceRandomSource([1.0]))

    @pytest.mark.parametrize("orientation", [DetectorOrientation.THREE, DetectorOrientation.NINE])
    def test_down_fraction(self, rng, orientation):
        n = 200_000
        downs = sum(measure(Particle(), orientation, rng) is Spin.DOWN for _ in range(n))
        assert downs / n == pytest.approx(0.25, abs=0.01)


class TestSpinsDiffer:
    def test_differ(self):
        assert spins_differ(Spin.UP, Spin.DOWN)

    def test_same(self):
        assert not spins_differ(Spin.DOWN, Spin.DOWN)

    def test_undetermined_raises(self):
        with pytest.raises(InvariantViolation):
            spins_differ(Spin.UP, Spin.UNDETERMINED)
