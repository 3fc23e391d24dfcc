"""Probabilities and defaults for the Bell experiment simulation."""

# -- Runs --
DEFAULT_TRIALS: int = 1_000_000
DEFAULT_PLAN_PROBABILITIES: tuple[float, ...] = (0.5, 1.0, 0.0)

# -- Detector selection --
# Upper edges of the [0, 1) sub-ranges for 12, 3 and 9 o'clock.
ORIENTATION_EDGES: tuple[float, float, float] = (1.0 / 3.0, 2.0 / 3.0, 1.0)

# -- Measurement --
# Chance that a 3 or 9 o'clock detector reads spin down.
DOWN_PROBABILITY: float = 0.25

# -- Expectations (fraction of trials with differing spins) --
SPOOKY_EXPECTED_FRACTION: float = 0.5
ODDBALL_EXPECTED_FRACTION: float = 5.0 / 9.0
TRIVIAL_EXPECTED_FRACTION: float = 1.0
BELL_BOUND: float = ODDBALL_EXPECTED_FRACTION  # floor for any hidden plan
