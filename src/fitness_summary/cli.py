#!/usr/bin/env python3
"""
Summarize a workout CSV and a health-metrics JSON export.

Usage:
    fitness-summary
    fitness-summary --workouts data/workouts.csv --health data/health-metrics.json
    fitness-summary --weekly-goal 200 --strict-durations --debug

Paths and goal default to config.yaml / environment (USER_NAME, WEEKLY_GOAL).
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from fitness_summary.common.config import Config, ReportSettings
from fitness_summary.ingest.health_json import health_metrics_counter
from fitness_summary.ingest.workouts_csv import workout_calculator
from fitness_summary.report import format_minutes, print_report

log = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fitness-summary",
        description="Count workouts, workout minutes and health metric entries.",
    )
    parser.add_argument("--workouts", type=Path, default=None, help="Workout CSV (default: from config)")
    parser.add_argument("--health", type=Path, default=None, help="Health metrics JSON (default: from config)")
    parser.add_argument("--config", type=Path, default=None, help="Config file (default: config.yaml)")
    parser.add_argument("--user", default=None, help="Name used in the summary")
    parser.add_argument("--weekly-goal", type=int, default=None, help="Weekly goal in minutes")
    parser.add_argument(
        "--strict-durations",
        action="store_true",
        help="Reject durations with trailing text (e.g. '30min') instead of reading the leading number",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    config = Config(config_path=args.config)
    _setup_logging("DEBUG" if args.debug else config.get_log_level())

    for problem in config.validate():
        log.warning(f"Config: {problem}")

    settings = config.report_settings()
    if args.user or args.weekly_goal is not None:
        settings = ReportSettings(
            user_name=args.user or settings.user_name,
            weekly_goal_minutes=(
                args.weekly_goal if args.weekly_goal is not None else settings.weekly_goal_minutes
            ),
        )

    workouts_path = args.workouts or config.get_workouts_path()
    health_path = args.health or config.get_health_metrics_path()
    strict = args.strict_durations or config.get_strict_durations()

    print(f"Processing data for: {settings.user_name}")

    print("📁 Reading workout data...")
    workouts = workout_calculator(
        workouts_path,
        duration_column=config.get_duration_column(),
        strict=strict,
    )
    if workouts is not None:
        print(f"Total workouts: {workouts.total_workouts}")
        print(f"Total minutes: {format_minutes(workouts.total_minutes)}")

    print("📁 Reading health data...")
    metric_count = health_metrics_counter(health_path, key=config.get_metrics_key())
    if metric_count is not None:
        print(f"Total health entries: {metric_count}")

    print_report(workouts, metric_count, settings)

    if workouts is None or metric_count is None:
        print("\n❌ Some inputs could not be processed (see log above).")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
