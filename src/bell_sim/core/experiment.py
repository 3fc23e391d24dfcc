"""Trial aggregation: run many pairs through a protocol and count disagreements."""

from __future__ import annotations

import logging

from bell_sim.core.particle import new_pair, spins_differ
from bell_sim.core.protocols import choose_plan, hidden_information, spooky
from bell_sim.core.random_source import RandomSource, make_source
from bell_sim.utils.constants import (
    BELL_BOUND,
    ODDBALL_EXPECTED_FRACTION,
    SPOOKY_EXPECTED_FRACTION,
    TRIVIAL_EXPECTED_FRACTION,
)
from bell_sim.utils.types import ExperimentConfig, ExperimentResult, Protocol

logger = logging.getLogger(__name__)


def expected_percentage(protocol: Protocol, plan_probability: float | None = None) -> float:
    """Theoretical percentage of trials whose spins differ.

    spooky: 1/3 of trials are forced opposite and the remaining 2/3 differ
    only when the right detector reads DOWN (1/4), giving 50%.

    hidden: TRIVIAL always differs, ODDBALL differs 5/9 of the time, so a
    mix choosing ODDBALL with probability p gives p * 5/9 + (1 - p).
    """
    if protocol is Protocol.SPOOKY:
        return 100.0 * SPOOKY_EXPECTED_FRACTION
    if protocol is Protocol.HIDDEN:
        p = _check_probability(plan_probability)
        return 100.0 * (p * ODDBALL_EXPECTED_FRACTION + (1.0 - p) * TRIVIAL_EXPECTED_FRACTION)
    raise ValueError(f"Unknown protocol: {protocol!r}")


def _check_probability(plan_probability: float | None) -> float:
    if plan_probability is None:
        raise ValueError("Hidden-variable runs need a plan_probability")
    if not 0.0 <= plan_probability <= 1.0:
        raise ValueError(f"plan_probability must be in [0, 1], got {plan_probability}")
    return float(plan_probability)


def count_differences(
    trial_count: int,
    protocol: Protocol,
    plan_probability: float | None,
    rng: RandomSource,
) -> int:
    """Run ``trial_count`` fresh pairs and count those with differing spins."""
    num_different = 0
    for _ in range(trial_count):
        pair = new_pair()
        if protocol is Protocol.SPOOKY:
            lhs, rhs = spooky(pair, rng)
        else:
            plan = choose_plan(rng, plan_probability)
            lhs, rhs = hidden_information(pair, plan, rng)
        if spins_differ(lhs, rhs):
            num_different += 1
    return num_different


def run_experiment(
    trial_count: int,
    protocol: Protocol,
    plan_probability: float | None = None,
    rng: RandomSource | None = None,
) -> ExperimentResult:
    """Run one experiment and return its aggregate result.

    Zero or negative ``trial_count`` yields a result with no data instead of
    a percentage.
    """
    protocol = Protocol(protocol)
    if protocol is Protocol.SPOOKY:
        plan_probability = None
    expected = expected_percentage(protocol, plan_probability)
    rng = rng if rng is not None else make_source()

    if trial_count <= 0:
        logger.warning("%s run requested with %d trials; no data", protocol.value, trial_count)
        return ExperimentResult(
            protocol=protocol,
            trial_count=0,
            difference_count=0,
            expected_percentage=expected,
            plan_probability=plan_probability,
        )

    logger.debug("Running %s for %d trials (plan_probability=%s)",
                 protocol.value, trial_count, plan_probability)
    num_different = count_differences(trial_count, protocol, plan_probability, rng)

    result = ExperimentResult(
        protocol=protocol,
        trial_count=trial_count,
        difference_count=num_different,
        expected_percentage=expected,
        plan_probability=plan_probability,
    )
    logger.info("%s: %d/%d different (%.4f%%, expected %.4f%%)",
                protocol.value, num_different, trial_count,
                result.percentage, expected)
    return result


def run_spooky(trials: int, rng: RandomSource | None = None) -> ExperimentResult:
    return run_experiment(trials, Protocol.SPOOKY, rng=rng)


def run_hidden(
    trials: int,
    plan_probability: float,
    rng: RandomSource | None = None,
) -> ExperimentResult:
    """Hidden-variable run choosing ODDBALL with ``plan_probability``."""
    return run_experiment(trials, Protocol.HIDDEN, plan_probability, rng=rng)


def format_report(result: ExperimentResult) -> list[str]:
    """Human-readable lines describing one result."""
    if result.protocol is Protocol.SPOOKY:
        name = "spooky"
    else:
        name = "hidden info"

    if not result.has_data:
        lines = [f"Percent different for {name}: no data (0 trials)"]
    else:
        lines = [f"Percent different for {name} {result.percentage:.4f}%"]

    if result.protocol is Protocol.SPOOKY:
        lines.append(f"      Should be about 1/2 or {result.expected_percentage:.1f}%")
    else:
        p = result.plan_probability
        lines.append(f"  Should be about {result.expected_percentage:.4f}%, "
                     f"never below 5/9th or {100.0 * BELL_BOUND:.4f}%")
        lines.append(f"With OddBall chosen {100.0 * p:.1f}% of the time "
                     f"and Trivial {100.0 * (1.0 - p):.1f}% of the time")
    return lines


def run_default_sequence(
    config: ExperimentConfig | None = None,
    rng: RandomSource | None = None,
) -> list[ExperimentResult]:
    """One spooky run, then one hidden run per configured plan probability."""
    config = config or ExperimentConfig()
    rng = rng if rng is not None else make_source(config.seed)

    results = [run_spooky(config.trials, rng=rng)]
    for p in config.plan_probabilities:
        results.append(run_hidden(config.trials, p, rng=rng))
    return results
