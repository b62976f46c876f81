"""fitness-summary: workout minutes and health metric counts from personal exports."""

from fitness_summary.ingest.health_json import count_metrics, health_metrics_counter, load_metric_count
from fitness_summary.ingest.workouts_csv import (
    DurationIssue,
    WorkoutSummary,
    load_workout_summary,
    summarize_durations,
    workout_calculator,
)

__all__ = [
    "DurationIssue",
    "WorkoutSummary",
    "count_metrics",
    "health_metrics_counter",
    "load_metric_count",
    "load_workout_summary",
    "summarize_durations",
    "workout_calculator",
]

__version__ = "0.1.0"
