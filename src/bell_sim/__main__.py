"""Main entry point: python -m bell_sim"""

from __future__ import annotations

import argparse
import logging

from bell_sim import __version__
from bell_sim.analysis.validation import ResultValidator, bell_violation
from bell_sim.core.experiment import format_report, run_default_sequence
from bell_sim.core.random_source import make_source
from bell_sim.logging_config import setup_logging
from bell_sim.utils.constants import DEFAULT_TRIALS
from bell_sim.utils.types import ExperimentConfig, ExperimentResult, Protocol


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bell-sim",
        description="Simulate Bell's entanglement experiments: spooky action vs hidden information",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS,
                        help=f"Trials per experiment (default {DEFAULT_TRIALS:,})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source")
    parser.add_argument("--plot", action="store_true", help="Save a percentage comparison plot")
    parser.add_argument("--save-dir", type=str, default=".", help="Directory for plots")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def print_results(results: list[ExperimentResult]) -> None:
    for result in results:
        for line in format_report(result):
            print(line)
        print()

    spooky = next((r for r in results if r.protocol is Protocol.SPOOKY), None)
    hidden = [r for r in results if r.protocol is Protocol.HIDDEN]
    if spooky is None or not spooky.has_data:
        return

    print("=" * 50)
    print(" VALIDATION")
    print("=" * 50)
    for result in [spooky] + hidden:
        if not result.has_data:
            continue
        summary = ResultValidator(result).summary()
        lo, hi = summary["confidence_interval"]
        print(f"  {result.protocol.value:<7} p={result.plan_probability!s:<5} "
              f"CI=({lo:.4f}, {hi:.4f})  consistent={summary['consistent']}")
    violated = all(bell_violation(spooky, h) for h in hidden if h.has_data)
    print(f"  Spooky below every hidden plan: {violated}")
    print("=" * 50)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = ExperimentConfig(trials=args.trials, seed=args.seed)
    results = run_default_sequence(config, rng=make_source(config.seed))
    print_results(results)

    if args.plot:
        from bell_sim.visualization.plots import PlotSuite

        plots = PlotSuite(save_dir=args.save_dir)
        plots.percentage_comparison(results)
        print(f"Plot saved to {plots.save_dir}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
