"""Statistical checks of experiment results against their expectations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scipy.stats import binom, binomtest

from bell_sim.utils.constants import BELL_BOUND

if TYPE_CHECKING:
    from bell_sim.utils.types import ExperimentResult


def confidence_interval(result: ExperimentResult, alpha: float = 0.95) -> tuple[float, float]:
    """Binomial confidence interval on the fraction of differing trials.

    Returns (lower, upper) as fractions in [0, 1], or (0.0, 0.0) with no data.
    """
    if not result.has_data:
        return (0.0, 0.0)
    n = result.trial_count
    lo, hi = binom.interval(alpha, n, result.fraction)
    return (float(lo) / n, float(hi) / n)


def expectation_test(result: ExperimentResult) -> float | None:
    """Two-sided exact binomial test p-value against the expected fraction."""
    if not result.has_data:
        return None
    test = binomtest(result.difference_count, result.trial_count, result.expected_fraction)
    return float(test.pvalue)


class ResultValidator:
    """Compare one experiment result with its theoretical expectation."""

    def __init__(self, result: ExperimentResult, alpha: float = 0.95) -> None:
        self.result = result
        self.alpha = alpha

    def confidence_interval(self) -> tuple[float, float]:
        return confidence_interval(self.result, self.alpha)

    def p_value(self) -> float | None:
        return expectation_test(self.result)

    def is_consistent(self) -> bool:
        """True when the expected fraction is not rejected at level 1 - alpha."""
        p = self.p_value()
        return p is not None and p >= 1.0 - self.alpha

    def exceeds_bell_bound(self) -> bool:
        """True when the observed fraction is at or above 5/9 within the interval."""
        if not self.result.has_data:
            return False
        _, hi = self.confidence_interval()
        return hi >= BELL_BOUND

    def summary(self) -> dict:
        return {
            "fraction": self.result.fraction,
            "expected_fraction": self.result.expected_fraction,
            "confidence_interval": self.confidence_interval(),
            "p_value": self.p_value(),
            "consistent": self.is_consistent(),
            "exceeds_bell_bound": self.exceeds_bell_bound(),
        }


def bell_violation(
    spooky: ExperimentResult,
    hidden: ExperimentResult,
    alpha: float = 0.95,
) -> bool:
    """True when spooky disagrees measurably less often than hidden.

    Requires the upper confidence bound of the spooky fraction to sit below
    the lower bound of the hidden-variable fraction.
    """
    if not (spooky.has_data and hidden.has_data):
        return False
    _, spooky_hi = confidence_interval(spooky, alpha)
    hidden_lo, _ = confidence_interval(hidden, alpha)
    return spooky_hi < hidden_lo
