"""Tests for configuration loading."""
from pathlib import Path

import pytest

from fitness_summary.common.config import Config, ReportSettings


@pytest.fixture
def no_yaml(tmp_path):
    return tmp_path / "config.yaml"


class TestConfigPrecedence:
    """Defaults < config.yaml < environment."""

    def test_defaults(self, no_yaml):
        config = Config(config_path=no_yaml, environ={})
        assert config.get("workouts.duration_column") == "duration"
        assert config.get_workouts_path() == Path("data/workouts.csv")
        assert config.get_health_metrics_path() == Path("data/health-metrics.json")
        assert config.get_strict_durations() is False
        assert config.report_settings() == ReportSettings(user_name="athlete", weekly_goal_minutes=150)
        assert config.validate() == []

    def test_yaml_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "user:\n  name: Sam\n  weekly_goal_minutes: 90\n"
            "workouts:\n  strict_durations: true\n"
        )
        config = Config(config_path=path, environ={})
        assert config.report_settings() == ReportSettings(user_name="Sam", weekly_goal_minutes=90)
        assert config.get_strict_durations() is True
        # untouched nested keys keep their defaults
        assert config.get("data.workouts_csv") == "data/workouts.csv"

    def test_env_overrides_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("user:\n  name: Sam\n  weekly_goal_minutes: 90\n")
        config = Config(config_path=path, environ={
            "USER_NAME": "Alex",
            "WEEKLY_GOAL": "200",
            "FITSUM_WORKOUTS_CSV": "exports/w.csv",
            "FITSUM_STRICT_DURATIONS": "yes",
            "FITSUM_LOG_LEVEL": "debug",
        })
        assert config.report_settings() == ReportSettings(user_name="Alex", weekly_goal_minutes=200)
        assert config.get_workouts_path() == Path("exports/w.csv")
        assert config.get_strict_durations() is True
        assert config.get_log_level() == "DEBUG"

    def test_defaults_are_not_shared_between_instances(self, no_yaml):
        Config(config_path=no_yaml, environ={"USER_NAME": "Alex"})
        assert Config(config_path=no_yaml, environ={}).get("user.name") == "athlete"

    def test_get_unknown_key_returns_default(self, no_yaml):
        config = Config(config_path=no_yaml, environ={})
        assert config.get("nope.nothing", "fallback") == "fallback"


class TestConfigValidation:
    def test_non_integer_weekly_goal(self, no_yaml):
        config = Config(config_path=no_yaml, environ={"WEEKLY_GOAL": "lots"})
        assert config.report_settings().weekly_goal_minutes == 150
        assert any("WEEKLY_GOAL" in e for e in config.validate())

    def test_negative_goal_and_bad_level(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("user:\n  weekly_goal_minutes: -5\nlogging:\n  level: loud\n")
        errors = Config(config_path=path, environ={}).validate()
        assert len(errors) == 2

    def test_malformed_yaml_falls_back_to_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.yaml"
        path.write_text("user: [unclosed\n")
        config = Config(config_path=path, environ={})
        assert config.get("user.name") == "athlete"
        assert any("Failed to load" in m for m in caplog.messages)
