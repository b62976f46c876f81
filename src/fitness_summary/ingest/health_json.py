# src/fitness_summary/ingest/health_json.py
"""
Health metrics JSON counting.

Reads a health-metrics export and reports how many entries its
``metrics`` collection holds. Only the length matters; entries are not
inspected.

Missing metrics are normal: an absent, null, empty, zero or false ``metrics``
value counts as 0. A ``metrics`` value that is present but has no length (a
plain object, a non-zero number, true) is a hard failure.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from fitness_summary.common.errors import MetricErrorKind, MetricsError

log = logging.getLogger(__name__)

DEFAULT_METRICS_KEY = "metrics"

NO_METRICS_MESSAGE = "No metrics found in the file"
NOT_A_COLLECTION_MESSAGE = "Metrics is not an array or does not have a length property"


def _explicit_length(value: dict) -> int | None:
    """Length of an array-like object such as {"length": 3}."""
    length = value.get("length")
    if isinstance(length, int) and not isinstance(length, bool) and length >= 0:
        return length
    return None


def _is_empty(value: Any) -> bool:
    """None, [], "", 0 and false all mean 'no metrics'. {} does not."""
    if value is None:
        return True
    return isinstance(value, (list, str, bool, int, float)) and not value


def count_metrics(document: Any, key: str = DEFAULT_METRICS_KEY) -> int:
    """
    Count the entries of ``document[key]``.

    Raises:
        MetricsError(NOT_A_COLLECTION): the value is present but has no length.
    """
    metrics = document.get(key) if isinstance(document, dict) else None

    if _is_empty(metrics):
        log.warning(NO_METRICS_MESSAGE)
        return 0

    if isinstance(metrics, (list, str)):
        return len(metrics)

    if isinstance(metrics, dict):
        length = _explicit_length(metrics)
        if length is not None:
            return length

    raise MetricsError(
        MetricErrorKind.NOT_A_COLLECTION,
        f"'{key}' is a {type(metrics).__name__}, expected an array",
    )


def load_health_document(json_path: Path) -> Any:
    """Read and parse a health-metrics JSON file."""
    json_path = Path(json_path)
    try:
        with open(json_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (FileNotFoundError, PermissionError, IsADirectoryError) as e:
        raise MetricsError(MetricErrorKind.NOT_FOUND, str(e), json_path) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MetricsError(MetricErrorKind.SYNTAX, str(e), json_path) from e


def load_metric_count(json_path: Path, key: str = DEFAULT_METRICS_KEY) -> int:
    """Read a health-metrics file and count its entries. Raises MetricsError."""
    json_path = Path(json_path)
    document = load_health_document(json_path)
    try:
        count = count_metrics(document, key=key)
    except MetricsError as e:
        e.path = json_path
        raise

    log.info("%s: %s=%d", json_path.name, key, count)
    return count


def describe_metrics_error(error: MetricsError) -> str:
    """User-facing text for a metrics pipeline failure."""
    if error.kind is MetricErrorKind.NOT_FOUND:
        return f"File not found - check the file path: {error.path}"
    if error.kind is MetricErrorKind.SYNTAX:
        return f"Invalid JSON - check the file format: {error.path}"
    return NOT_A_COLLECTION_MESSAGE


def health_metrics_counter(json_path: Path, key: str = DEFAULT_METRICS_KEY) -> int | None:
    """Count health metric entries, returning None on failure (logged)."""
    try:
        return load_metric_count(json_path, key=key)
    except MetricsError as e:
        log.error(describe_metrics_error(e))
        return None
