"""
Configuration management for fitness-summary.

Loads configuration from config.yaml (or environment variables as override).
Only the reporting layer and the CLI read configuration; the aggregation
functions take plain arguments.
"""
from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

log = logging.getLogger(__name__)

# Load .env file if it exists (for local development)
load_dotenv()

# Default configuration
DEFAULT_CONFIG = {
    'user': {
        'name': 'athlete',
        'weekly_goal_minutes': 150,
    },
    'data': {
        'workouts_csv': 'data/workouts.csv',
        'health_metrics_json': 'data/health-metrics.json',
    },
    'workouts': {
        'duration_column': 'duration',
        'strict_durations': False,
    },
    'metrics': {
        'collection_key': 'metrics',
    },
    'logging': {
        'level': 'INFO',
    },
}

_TRUTHY = {'1', 'true', 'yes', 'on'}
_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


@dataclass(frozen=True)
class ReportSettings:
    """Values the console report needs for the weekly goal check."""
    user_name: str
    weekly_goal_minutes: int


class Config:
    """
    Configuration for a single run.

    Loads configuration from:
    1. Defaults
    2. config.yaml (if it exists)
    3. Environment variables (as override)

    Example:
        >>> config = Config()
        >>> config.get('workouts.duration_column')
        'duration'
        >>> config.report_settings().weekly_goal_minutes
        150
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.config_path = Path(config_path) if config_path else Path('config.yaml')
        self._environ = os.environ if environ is None else environ
        self._problems: list[str] = []
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from config.yaml and environment."""
        # Start with defaults
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    yaml_config = yaml.safe_load(f)
                if isinstance(yaml_config, dict):
                    self._merge_config(yaml_config)
                    log.info(f"Loaded configuration from {self.config_path}")
                elif yaml_config is not None:
                    log.warning(f"Ignoring {self.config_path}: top level must be a mapping")
            except (OSError, yaml.YAMLError) as e:
                log.warning(f"Failed to load {self.config_path}: {e}. Using defaults.")
        else:
            log.debug(f"No {self.config_path} found. Using defaults and environment variables.")

        self._load_env_overrides()

    def _merge_config(self, new_config: Dict[str, Any]) -> None:
        """Recursively merge new config into existing config."""
        def merge(base: Dict, update: Dict) -> Dict:
            for key, value in update.items():
                if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                    merge(base[key], value)
                else:
                    base[key] = value
            return base

        merge(self._config, new_config)

    def _load_env_overrides(self) -> None:
        """Load overrides from environment variables."""
        env = self._environ

        if user_name := env.get('USER_NAME'):
            self._config['user']['name'] = user_name

        if weekly_goal := env.get('WEEKLY_GOAL'):
            try:
                self._config['user']['weekly_goal_minutes'] = int(weekly_goal)
            except ValueError:
                self._problems.append(f"WEEKLY_GOAL must be an integer, got {weekly_goal!r}")

        if workouts_csv := env.get('FITSUM_WORKOUTS_CSV'):
            self._config['data']['workouts_csv'] = workouts_csv

        if health_json := env.get('FITSUM_HEALTH_JSON'):
            self._config['data']['health_metrics_json'] = health_json

        if strict := env.get('FITSUM_STRICT_DURATIONS'):
            self._config['workouts']['strict_durations'] = strict.strip().lower() in _TRUTHY

        if level := env.get('FITSUM_LOG_LEVEL'):
            self._config['logging']['level'] = level.upper()

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        Example:
            >>> config.get('data.workouts_csv')
            'data/workouts.csv'
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_workouts_path(self) -> Path:
        return Path(self.get('data.workouts_csv', 'data/workouts.csv'))

    def get_health_metrics_path(self) -> Path:
        return Path(self.get('data.health_metrics_json', 'data/health-metrics.json'))

    def get_duration_column(self) -> str:
        return str(self.get('workouts.duration_column', 'duration'))

    def get_strict_durations(self) -> bool:
        return bool(self.get('workouts.strict_durations', False))

    def get_metrics_key(self) -> str:
        return str(self.get('metrics.collection_key', 'metrics'))

    def get_log_level(self) -> str:
        return str(self.get('logging.level', 'INFO')).upper()

    def report_settings(self) -> ReportSettings:
        """Build the explicit settings object handed to the reporter."""
        goal = self.get('user.weekly_goal_minutes', 150)
        try:
            goal = int(goal)
        except (TypeError, ValueError):
            goal = DEFAULT_CONFIG['user']['weekly_goal_minutes']
        return ReportSettings(
            user_name=str(self.get('user.name', 'athlete')),
            weekly_goal_minutes=goal,
        )

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = list(self._problems)

        goal = self.get('user.weekly_goal_minutes')
        if isinstance(goal, bool) or not isinstance(goal, int):
            errors.append(f"user.weekly_goal_minutes must be an integer, got {goal!r}")
        elif goal < 0:
            errors.append(f"user.weekly_goal_minutes must be non-negative, got {goal}")

        if self.get_log_level() not in _LOG_LEVELS:
            errors.append(f"Unknown log level: {self.get('logging.level')}")

        if not self.get_duration_column().strip():
            errors.append("workouts.duration_column must not be empty")

        return errors

    def __repr__(self) -> str:
        return f"Config({self._config})"


def get_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from the default locations."""
    return Config(config_path=config_path)
