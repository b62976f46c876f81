"""
Console summary for a fitness-summary run.

Merges the two pipeline results and compares total workout minutes
against the user's weekly goal.
"""
from __future__ import annotations

from typing import Optional

from fitness_summary.common.config import ReportSettings
from fitness_summary.ingest.workouts_csv import WorkoutSummary

UNAVAILABLE = "unavailable"


def format_minutes(value: float) -> str:
    """Render whole minutes without a decimal part, others to one decimal."""
    if abs(value - round(value)) < 1e-6:
        return str(int(round(value)))
    return f"{value:.1f}"


def goal_message(total_minutes: float, settings: ReportSettings) -> str:
    if total_minutes >= settings.weekly_goal_minutes:
        return f"🎉 Congratulations {settings.user_name}! You have exceeded your weekly goal!"
    return f"Keep going {settings.user_name}! You are on your way to reaching your weekly goal!"


def build_report(
    workouts: Optional[WorkoutSummary],
    metric_count: Optional[int],
    settings: ReportSettings,
) -> list[str]:
    """Build the summary block. Missing pipeline results show as 'unavailable'."""
    lines = ["", "=== SUMMARY ==="]

    if workouts is not None:
        lines.append(f"Workouts found: {workouts.total_workouts}")
        lines.append(f"Total workout minutes: {format_minutes(workouts.total_minutes)}")
        if workouts.issues:
            lines.append(f"Rows with unusable durations: {len(workouts.issues)}")
    else:
        lines.append(f"Workouts found: {UNAVAILABLE}")
        lines.append(f"Total workout minutes: {UNAVAILABLE}")

    lines.append(f"Health entries found: {metric_count if metric_count is not None else UNAVAILABLE}")
    lines.append(f"Weekly goal: {settings.weekly_goal_minutes} minutes")

    if workouts is not None:
        lines.append(goal_message(workouts.total_minutes, settings))
    else:
        lines.append("Weekly goal check skipped: no workout data")

    return lines


def print_report(
    workouts: Optional[WorkoutSummary],
    metric_count: Optional[int],
    settings: ReportSettings,
) -> None:
    for line in build_report(workouts, metric_count, settings):
        print(line)
