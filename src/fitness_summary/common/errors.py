"""
Error taxonomy for the workout and health-metric pipelines.

Each pipeline has a closed set of failure kinds. Callers dispatch on
``error.kind`` rather than inspecting exception attributes:

- Workouts: NOT_FOUND | DECODE | SCHEMA
- Metrics:  NOT_FOUND | SYNTAX | NOT_A_COLLECTION

Row-level duration problems are not errors; they are recorded as
DurationIssueKind values on the summary and never escalate.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class WorkoutErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    DECODE = "decode"
    SCHEMA = "schema"


class MetricErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    SYNTAX = "syntax"
    NOT_A_COLLECTION = "not_a_collection"


class DurationIssueKind(str, Enum):
    MISSING = "missing"
    INVALID = "invalid"
    NEGATIVE = "negative"


class PipelineError(Exception):
    """Base class for pipeline-level failures (no result is produced)."""

    def __init__(self, kind: Enum, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class WorkoutError(PipelineError):
    """Workout CSV could not be summarized."""

    kind: WorkoutErrorKind


class MetricsError(PipelineError):
    """Health metrics document could not be counted."""

    kind: MetricErrorKind
