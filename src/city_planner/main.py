"""Command-line entry point: build a city, project it and print a report."""

import argparse
import json
import logging
import sys
from typing import Any

from city_planner.config import settings
from city_planner.grid.model import City
from city_planner.metrics.indicators import CityMetrics
from city_planner.presets import LAYOUT_PRESETS, SAMPLE_CITIES, build_sample_city
from city_planner.simulation.simulator import TemporalSimulator

logger = logging.getLogger(__name__)

EXIT_USAGE = 2


def setup_logging() -> None:
    """Configure logging for the planner."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="city-planner",
        description="Generate a zoned city, optionally project it forward, and print a JSON report.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--sample", default=None, choices=sorted(SAMPLE_CITIES),
        help="sample city template to generate (default: copenhagen)",
    )
    source.add_argument(
        "--preset", default=None, choices=sorted(LAYOUT_PRESETS),
        help="layout preset to generate on a city of --size",
    )
    parser.add_argument("--size", default=settings.default_size, help="size class for --preset")
    parser.add_argument("--scenario", default=None, help="scenario id to apply")
    parser.add_argument("--year", type=int, default=None, help="target year to project to")
    parser.add_argument("--seed", type=int, default=settings.layout_seed, help="layout seed")
    return parser


def build_city(args: argparse.Namespace) -> City:
    if args.preset is not None:
        city = City(args.size, name=f"{args.preset.title()} City", seed=args.seed)
        city.generate_layout(LAYOUT_PRESETS[args.preset])
        return city
    sample_id = args.sample or "copenhagen"
    city = build_sample_city(sample_id, seed=args.seed)
    if city is None:
        raise ValueError(f"Unknown sample city: {sample_id!r}")
    return city


def run_report(args: argparse.Namespace) -> dict[str, Any] | None:
    """Build the city and apply the requested projection; None on rejection."""
    city = build_city(args)
    simulator = TemporalSimulator(city, seed=args.seed)
    simulator.save_baseline()

    if args.scenario is not None and not simulator.apply_scenario(args.scenario):
        return None
    if args.year is not None and not simulator.set_target_year(args.year):
        return None

    report = CityMetrics(city).report()
    report["simulation"] = {
        "year": simulator.current_year,
        "scenario": simulator.active_scenario.id if simulator.active_scenario else None,
    }
    return report


def main(argv: list[str] | None = None) -> int:
    """Run the planner CLI and return a process exit code."""
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        report = run_report(args)
    except ValueError as e:
        logger.error("%s", e)
        return EXIT_USAGE
    if report is None:
        return EXIT_USAGE

    json.dump(report, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def run() -> None:
    """Entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
