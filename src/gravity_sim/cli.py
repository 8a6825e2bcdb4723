# MIT License (see LICENSE)
"""
Command-line entry point.

Runs the reference three-body configuration and prints report lines to
stdout. Diagnostics go to stderr through logging; the level comes from
--log-level, else the LOG_LEVEL environment variable, else WARNING.
"""
from __future__ import annotations
import argparse
import logging
import os
import sys

from .config import SimulationConfig
from .constants import DEFAULT_TOTAL_STEPS, DEFAULT_REPORT_DIGITS
from .report.adapter import StreamReporter
from .simulation import Simulation, reference_entities

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gravity-sim",
        description="Simulate three point masses under mutual gravity and report their motion.",
    )
    parser.add_argument("--steps", type=_positive_int, default=DEFAULT_TOTAL_STEPS,
                        help="number of integration steps (default: %(default)s)")
    parser.add_argument("--digits", type=_positive_int, default=DEFAULT_REPORT_DIGITS,
                        help="significant digits per reported number (default: %(default)s)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=os.environ.get("LOG_LEVEL", "WARNING").upper(),
                        help="diagnostic log level (default: $LOG_LEVEL or WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level: {args.log_level!r}")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
    )

    config = SimulationConfig(total_steps=args.steps, report_digits=args.digits)
    simulation = Simulation(config=config, entities=reference_entities())
    simulation.run(StreamReporter(sys.stdout))
    return 0
