"""Shared fixtures for the simulation tests."""

import pytest

from bell_sim.core.random_source import NumpyRandomSource


@pytest.fixture
def rng():
    """Seeded source so statistical tests are reproducible."""
    return NumpyRandomSource(seed=20150101)
