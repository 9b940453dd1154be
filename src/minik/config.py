"""Configuration loading for Minik."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE_NAME = "minik.yaml"

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_USER_AGENT = "Minik-Kanban-App"
DEFAULT_STATUS_FIELD = "Status"

# Environment variable -> Settings attribute
ENV_OVERRIDES = {
    "MINIK_API_URL": "api_url",
    "MINIK_GRAPHQL_URL": "graphql_url",
    "MINIK_USER_AGENT": "user_agent",
    "MINIK_TIMEOUT": "timeout",
    "MINIK_STATUS_FIELD": "status_field_name",
    "MINIK_MAX_WORKERS": "max_workers",
    "MINIK_DB_PATH": "db_path",
    "MINIK_LOG_DIR": "log_dir",
    "MINIK_LOG_LEVEL": "log_level",
}


class ConfigError(Exception):
    """Raised when configuration is invalid."""


def default_db_path() -> str:
    """Preferences database under the user's config directory."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return str(root / "minik" / "state.db")


@dataclass(frozen=True)
class Settings:
    """Minik runtime settings.

    Attributes:
        api_url: GitHub REST API base URL.
        graphql_url: GitHub GraphQL endpoint.
        user_agent: Fixed client identifier sent with every request.
        timeout: Per-request deadline in seconds.
        status_field_name: Name of the single-select field used as columns.
        page_size: Projects/items requested per query (single page only).
        max_workers: Threads used when listing boards of every organization.
        db_path: SQLite file holding local preferences.
        log_dir: Log directory (None means the platform default).
        log_level: Logging level name.
    """

    api_url: str = DEFAULT_API_URL
    graphql_url: str = DEFAULT_GRAPHQL_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0
    status_field_name: str = DEFAULT_STATUS_FIELD
    page_size: int = 100
    max_workers: int = 4
    db_path: str = ""
    log_dir: str | None = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")
        if not self.status_field_name:
            raise ConfigError("status_field_name cannot be empty")
        if not 1 <= self.page_size <= 100:
            raise ConfigError(f"page_size must be between 1 and 100, got {self.page_size}")
        if self.max_workers < 1:
            raise ConfigError(f"max_workers must be at least 1, got {self.max_workers}")
        if not self.db_path:
            object.__setattr__(self, "db_path", default_db_path())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settings:
        """Create settings from a mapping.

        Args:
            data: Settings mapping, typically parsed from YAML.

        Returns:
            Parsed settings.

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type.
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for key, raw in data.items():
            values[key] = _coerce(key, raw)
        return cls(**values)

    def with_env(self, env: Mapping[str, str] | None = None) -> Settings:
        """Return a copy with MINIK_* environment overrides applied."""
        env = os.environ if env is None else env
        overrides = {
            attr: _coerce(attr, env[var]) for var, attr in ENV_OVERRIDES.items() if env.get(var)
        }
        if not overrides:
            return self
        return replace(self, **overrides)


def _coerce(key: str, raw: Any) -> Any:
    try:
        if key == "timeout":
            return float(raw)
        if key in ("page_size", "max_workers"):
            if isinstance(raw, bool):
                raise ValueError("boolean")
            return int(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for {key}: {raw!r}") from e
    if raw is not None and not isinstance(raw, str):
        raise ConfigError(f"Invalid value for {key}: expected a string, got {type(raw).__name__}")
    return raw


def find_config(start_path: Path | str | None = None) -> Path | None:
    """Find minik.yaml by walking up the directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to the config file, or None if there is none.
    """
    current = Path.cwd() if start_path is None else Path(start_path)
    current = current.resolve()

    for directory in (current, *current.parents):
        config_path = directory / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
    return None


def load_settings(
    config_path: Path | str | None = None, env: Mapping[str, str] | None = None
) -> Settings:
    """Load settings from YAML (if any) and the environment.

    Args:
        config_path: Explicit minik.yaml path. When omitted the file is
            searched for from the current directory upwards; a missing file
            then simply means defaults.
        env: Environment mapping for overrides. Defaults to os.environ.

    Returns:
        Effective settings.

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid.
    """
    if config_path is None:
        config_path = find_config()
        if config_path is None:
            return Settings().with_env(env)
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return Settings.from_dict(data).with_env(env)
