"""
Village Economy - Main Entry Point
Runs the village simulation for a number of days and reports the outcome.
"""

import sys
import json
import argparse
import logging
from dataclasses import replace
from typing import Optional

from config import CONFIG
from simulation.village import Village
from simulation.worker import Occupation
from simulation.projects import ProjectType, BLUEPRINTS
from utils.logger import get_logger


class VillageSimulation:
    """Drives a village one day at a time."""

    def __init__(self, village: Village, recent_events: int = 5):
        self.village = village
        self.recent_events = recent_events
        self.logger = get_logger()

    def run(self, days: int) -> int:
        """Run up to `days` days, stopping at game over. Returns days run."""
        ran = 0
        for _ in range(days):
            if not self.village.day():
                break
            ran += 1
            if self.village.game_over:
                break
        self.logger.info(f"Ran {ran} day(s), village at day {self.village.days_gone}")
        return ran

    def summary(self) -> str:
        """Human-readable report of the village state."""
        v = self.village
        if v.victory:
            status = "victory"
        elif v.game_over:
            status = "game over"
        else:
            status = "running"

        lines = [
            f"Day {v.days_gone} ({status})",
            f"  Food {v.food} (+{v.food_per_day}/day)  "
            f"Wood {v.wood} (+{v.wood_per_day}/day)  "
            f"Metal {v.metal} (+{v.metal_per_day}/day)",
            f"  Workers {len(v.workers)}/{v.max_workers}",
        ]
        for worker in v.workers:
            lines.append(f"    {worker.name} ({worker.occupation.value}) {worker.get_status()}")
        lines.append(f"  Projects {len(v.projects)}")
        for project in v.projects:
            lines.append(f"    {project.name}: {project.days_left} day(s) left")
        lines.append(f"  Buildings {len(v.buildings)}")
        for building in v.buildings:
            lines.append(f"    {building.name}")
        recent = v.events.recent(self.recent_events)
        if recent:
            lines.append("  Recent events")
            for event in recent:
                lines.append(f"    {event}")
        return "\n".join(lines)


def parse_worker(value: str) -> tuple[str, str]:
    """Parse NAME:OCCUPATION."""
    name, sep, occupation = value.partition(':')
    if not sep or not name or Occupation.parse(occupation) is None:
        choices = ", ".join(o.value for o in Occupation)
        raise argparse.ArgumentTypeError(
            f"expected NAME:OCCUPATION with occupation one of {choices}, got {value!r}"
        )
    return name, occupation


def parse_project(value: str) -> str:
    if ProjectType.parse(value) is None:
        choices = ", ".join(p.value for p in ProjectType)
        raise argparse.ArgumentTypeError(f"unknown project {value!r}, expected one of {choices}")
    return value


def format_catalog() -> str:
    lines = []
    for blueprint in BLUEPRINTS.values():
        lines.append(
            f"{blueprint.project_type.value:<10} wood={blueprint.wood_cost:<3} "
            f"metal={blueprint.metal_cost:<3} days={blueprint.build_days:<3} {blueprint.description}"
        )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Village Economy - A turn-based simulation")
    parser.add_argument('--days', type=int, default=10, help='Days to simulate')
    parser.add_argument('--food', type=int, help='Starting food')
    parser.add_argument('--wood', type=int, help='Starting wood')
    parser.add_argument('--metal', type=int, help='Starting metal')
    parser.add_argument('--worker', type=parse_worker, action='append', default=[],
                        metavar='NAME:OCCUPATION', help='Hire a worker (repeatable)')
    parser.add_argument('--project', type=parse_project, action='append', default=[],
                        metavar='NAME', help='Start a project (repeatable)')
    parser.add_argument('--per-worker-food', action='store_true',
                        help='Every worker eats one food per day')
    parser.add_argument('--builder-gated', action='store_true',
                        help='Projects only progress while builders are present')
    parser.add_argument('--list-projects', action='store_true',
                        help='Show the buildable projects and exit')
    parser.add_argument('--events', type=int, default=5, metavar='N',
                        help='Recent events to show in the summary')
    parser.add_argument('--log-dir', help='Write a log file to this directory')
    parser.add_argument('--json', action='store_true', help='Print the final state as JSON')
    parser.add_argument('--verbose', action='store_true', help='Log events to stderr')
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.list_projects:
        print(format_catalog())
        return 0
    if args.days < 0:
        parser.error("--days must be non-negative")

    config = replace(
        CONFIG,
        food_consumption='per_worker' if args.per_worker_food else CONFIG.food_consumption,
        builder_gated_progress=args.builder_gated or CONFIG.builder_gated_progress,
        log_directory=args.log_dir or CONFIG.log_directory,
    )
    try:
        village = Village(config)
    except ValueError as e:
        parser.error(str(e))

    if args.verbose:
        get_logger().attach_console(logging.DEBUG)

    # Stocks are seeded before projects so they can be paid for
    if args.food is not None:
        village.food = args.food
    if args.wood is not None:
        village.wood = args.wood
    if args.metal is not None:
        village.metal = args.metal

    for name, occupation in args.worker:
        village.add_worker(name, occupation)
    for project in args.project:
        village.add_project(project)

    sim = VillageSimulation(village, recent_events=args.events)
    sim.run(args.days)

    if args.json:
        print(json.dumps(village.to_dict(), indent=2))
    else:
        print(sim.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
