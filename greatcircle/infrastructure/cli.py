"""Command-line interface for the haversine distance calculator.

Usage:
    haversine 40.7128 -74.0060 51.5074 -0.1278
    haversine -v 0 0 0 90     # log intermediate terms to stderr
    python -m greatcircle 0 0 0 180
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from greatcircle.application.use_cases.calculate_distance import (
    CalculateDistanceUseCase,
    parse_coordinates,
)
from greatcircle.config import settings
from greatcircle.domain.entities.distance import DistanceResult
from greatcircle.domain.errors import InvalidNumericArgumentError, UsageError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID_ARGUMENT = 2

VERBOSE_FLAGS = ("-v", "--verbose")


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate the verbose flags from the coordinate values.

    Only the literal verbose flags are options; every other token, including
    signed values such as ``-1e-3`` or stray ``-h``, is a coordinate and is
    left for the coordinate parser to judge.
    """
    flags = [token for token in argv if token in VERBOSE_FLAGS]
    coordinates = [token for token in argv if token not in VERBOSE_FLAGS]
    return flags, coordinates


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="haversine",
        description="Great-circle distance between two points on Earth (haversine formula).",
        add_help=False,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log intermediate terms to stderr"
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s | %(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(level)


def format_coordinates(result: DistanceResult) -> str:
    o, d = result.origin, result.destination
    return (
        f"Calculating distance between ({o.latitude:.9g},{o.longitude:.9g})"
        f" and ({d.latitude:.9g},{d.longitude:.9g})"
    )


def format_distance(result: DistanceResult) -> list[str]:
    return [
        "Distance:",
        f"  {result.miles:.4g} miles",
        f"  {result.kilometers:.4g} kilometers",
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    flags, coordinates = split_argv(argv)
    args = build_parser().parse_args(flags)

    configure_logging(args.verbose)

    try:
        origin, destination = parse_coordinates(coordinates)
    except UsageError as e:
        print(e)
        return EXIT_USAGE
    except InvalidNumericArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT

    result = CalculateDistanceUseCase().execute(origin, destination)

    print(format_coordinates(result))
    for line in format_distance(result):
        print(line)
    return EXIT_OK
