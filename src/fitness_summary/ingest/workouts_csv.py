# src/fitness_summary/ingest/workouts_csv.py
"""
Workout CSV summarization.

Reads a workout export (date, duration, type, ...) and computes:
- total number of workouts (every data row counts)
- total workout minutes (sum of usable, non-negative durations)

Duration cells are classified row by row and never abort the run:
- MISSING:  field absent or blank           -> contributes 0
- INVALID:  no numeric prefix ("abc")      -> contributes 0
- NEGATIVE: parses below zero ("-15")      -> contributes 0 (excluded, not subtracted)

By default the parse is tolerant: the leading numeric prefix is used, so
"30min" counts as 30 and "1,200" counts as 1. Strict mode requires the
number to cover the whole cell.

File-level failures (missing file, undecodable content, no duration column)
raise WorkoutError and produce no summary.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence

import pandas as pd

from fitness_summary.common.errors import DurationIssueKind, WorkoutError, WorkoutErrorKind
from fitness_summary.common.numeric import parse_numeric_prefix, parse_strict_number

log = logging.getLogger(__name__)

DEFAULT_DURATION_COLUMN = "duration"


@dataclass(frozen=True)
class DurationIssue:
    """A row whose duration did not contribute to the total."""
    row_index: int
    kind: DurationIssueKind
    raw_value: Optional[str] = None
    parsed_value: Optional[float] = None

    @property
    def message(self) -> str:
        if self.kind is DurationIssueKind.MISSING:
            return f"missing duration at row {self.row_index}"
        if self.kind is DurationIssueKind.INVALID:
            return f"invalid duration at row {self.row_index}: {self.raw_value!r}"
        return f"negative duration at row {self.row_index}: {self.parsed_value:g}"


@dataclass(frozen=True)
class WorkoutSummary:
    """Totals for one workout file."""
    total_workouts: int
    total_minutes: float
    issues: tuple[DurationIssue, ...] = ()


# ---------------------------------------------------------------------
# Core aggregation
# ---------------------------------------------------------------------
def _classify_duration(
    row_index: int, raw: Optional[str], strict: bool
) -> tuple[float, Optional[DurationIssue]]:
    """Return (minutes to add, issue or None) for one duration cell."""
    if raw is None or not str(raw).strip():
        return 0.0, DurationIssue(row_index, DurationIssueKind.MISSING, raw)

    raw = str(raw)
    parsed = parse_strict_number(raw) if strict else parse_numeric_prefix(raw)
    if not parsed.ok:
        return 0.0, DurationIssue(row_index, DurationIssueKind.INVALID, raw)

    if parsed.value < 0:
        return 0.0, DurationIssue(row_index, DurationIssueKind.NEGATIVE, raw, parsed.value)

    return parsed.value, None


def summarize_durations(
    rows: Iterable[Mapping[str, str]],
    columns: Optional[Sequence[str]] = None,
    duration_column: str = DEFAULT_DURATION_COLUMN,
    strict: bool = False,
) -> WorkoutSummary:
    """
    Count rows and sum their durations.

    Args:
        rows: Decoded row records, in file order.
        columns: Column names declared by the header. When omitted, the
            first record's keys are used.
        duration_column: Name of the column holding minutes.
        strict: Require the whole cell to be numeric.

    Raises:
        WorkoutError(SCHEMA): the duration column is not declared.
    """
    rows = list(rows)
    if columns is None:
        columns = list(rows[0].keys()) if rows else []

    if duration_column not in columns:
        raise WorkoutError(WorkoutErrorKind.SCHEMA, f"missing {duration_column} column")

    total_minutes = 0.0
    issues: list[DurationIssue] = []

    for idx, row in enumerate(rows):
        minutes, issue = _classify_duration(idx, row.get(duration_column), strict)
        total_minutes += minutes
        if issue is not None:
            log.warning(issue.message)
            issues.append(issue)

    return WorkoutSummary(
        total_workouts=len(rows),
        total_minutes=total_minutes,
        issues=tuple(issues),
    )


# ---------------------------------------------------------------------
# CSV decode glue
# ---------------------------------------------------------------------
def _trim_to_header(csv_path: Path, width: int):
    """on_bad_lines handler: keep rows with extra fields, cut to the header width."""
    def _trim(fields: list[str]) -> list[str]:
        log.warning(
            "%s: row has %d fields, expected %d; dropped extra fields %s",
            csv_path.name, len(fields), width, fields[width:],
        )
        return fields[:width]
    return _trim


def read_workout_rows(csv_path: Path) -> tuple[list[str], list[dict[str, str]]]:
    """
    Load a workout CSV as (declared columns, row records).

    Every cell is kept as text; blank cells become "". A completely empty
    file has no header, so it yields no columns and no rows. Rows with more
    fields than the header (including a trailing delimiter) are kept and
    cut to the header width, so every data row still counts.
    """
    csv_path = Path(csv_path)
    try:
        width = len(pd.read_csv(csv_path, nrows=0, dtype=str).columns)
        df = pd.read_csv(
            csv_path,
            dtype=str,
            keep_default_na=False,
            index_col=False,
            engine="python",
            on_bad_lines=_trim_to_header(csv_path, width),
        )
    except (FileNotFoundError, PermissionError, IsADirectoryError) as e:
        raise WorkoutError(WorkoutErrorKind.NOT_FOUND, str(e), csv_path) from e
    except pd.errors.EmptyDataError:
        log.debug("%s: empty file, no header", csv_path.name)
        return [], []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise WorkoutError(WorkoutErrorKind.DECODE, str(e), csv_path) from e

    df.columns = df.columns.str.strip()
    df = df.fillna("")

    log.debug("%s: %d rows, columns=%s", csv_path.name, len(df), list(df.columns))
    return list(df.columns), df.to_dict(orient="records")


def load_workout_summary(
    csv_path: Path,
    duration_column: str = DEFAULT_DURATION_COLUMN,
    strict: bool = False,
) -> WorkoutSummary:
    """Read and summarize a workout CSV. Raises WorkoutError on file-level failures."""
    csv_path = Path(csv_path)
    columns, rows = read_workout_rows(csv_path)
    try:
        summary = summarize_durations(rows, columns, duration_column=duration_column, strict=strict)
    except WorkoutError as e:
        e.path = csv_path
        raise

    log.info(
        "%s: workouts=%d, minutes=%g, skipped_durations=%d",
        csv_path.name, summary.total_workouts, summary.total_minutes, len(summary.issues),
    )
    return summary


def describe_workout_error(error: WorkoutError, duration_column: str = DEFAULT_DURATION_COLUMN) -> str:
    """User-facing text for a workout pipeline failure."""
    if error.kind is WorkoutErrorKind.NOT_FOUND:
        return f"File not found - check the file path: {error.path}"
    if error.kind is WorkoutErrorKind.DECODE:
        return f"Could not decode workout CSV {error.path}: {error.message}"
    return f"Workout CSV {error.path} is missing the '{duration_column}' column"


def workout_calculator(
    csv_path: Path,
    duration_column: str = DEFAULT_DURATION_COLUMN,
    strict: bool = False,
) -> WorkoutSummary | None:
    """
    Summarize a workout CSV, returning None instead of raising.

    The failure is logged with a message for its kind; callers only need
    to check for None.
    """
    try:
        return load_workout_summary(csv_path, duration_column=duration_column, strict=strict)
    except WorkoutError as e:
        log.error(describe_workout_error(e, duration_column))
        return None
