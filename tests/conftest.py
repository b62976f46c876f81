"""Shared fixtures: small export files written into tmp_path."""
import json

import pytest


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV lines to a file and return its path."""
    def _write(lines, name="workouts.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_json(tmp_path):
    """Dump an object as JSON and return the path."""
    def _write(obj, name="health-metrics.json"):
        path = tmp_path / name
        path.write_text(json.dumps(obj), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def missing_path(tmp_path):
    return tmp_path / "does-not-exist"
