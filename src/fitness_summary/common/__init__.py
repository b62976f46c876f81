"""Common utilities for fitness-summary."""

from fitness_summary.common.config import Config, ReportSettings, get_config
from fitness_summary.common.errors import (
    DurationIssueKind,
    MetricErrorKind,
    MetricsError,
    PipelineError,
    WorkoutError,
    WorkoutErrorKind,
)
from fitness_summary.common.numeric import NumericPrefix, parse_numeric_prefix, parse_strict_number

__all__ = [
    "Config",
    "ReportSettings",
    "get_config",
    "DurationIssueKind",
    "MetricErrorKind",
    "MetricsError",
    "PipelineError",
    "WorkoutError",
    "WorkoutErrorKind",
    "NumericPrefix",
    "parse_numeric_prefix",
    "parse_strict_number",
]
