"""
Configuration loader — resolves runtime settings.

Sources, lowest precedence first:
    built-in defaults  <  WHYINSTALLED_DB_PATH env var  <  YAML file  <  CLI options

The YAML file is optional and may be flat or wrapped under a
``whyinstalled:`` key::

    db_path: /var/lib/pacman/local
    max_chains: 6
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("/var/lib/pacman/local")
DEFAULT_MAX_CHAINS = 6

ENV_DB_PATH = "WHYINSTALLED_DB_PATH"


class ConfigError(Exception):
    """Raised when a settings file is invalid or unreadable."""


class Settings(BaseModel):
    """Runtime settings for one invocation."""

    db_path: Path = DEFAULT_DB_PATH
    max_chains: int = Field(default=DEFAULT_MAX_CHAINS, ge=0)  # 0 = no cap


def load_settings_file(path: Path) -> dict[str, Any]:
    """Read a YAML settings file into a raw mapping.

    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    section = data.get("whyinstalled", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'whyinstalled' to be a mapping in {path}")
    return section


def resolve_settings(
    config_path: Path | None = None,
    db_path: Path | None = None,
    max_chains: int | None = None,
) -> Settings:
    """Merge defaults, environment, settings file and explicit overrides.

    Raises:
        ConfigError: If the settings file or the merged values are invalid.
    """
    merged: dict[str, Any] = {}

    env_db = os.environ.get(ENV_DB_PATH)
    if env_db:
        merged["db_path"] = env_db

    if config_path is not None:
        merged.update(load_settings_file(config_path))

    if db_path is not None:
        merged["db_path"] = db_path
    if max_chains is not None:
        merged["max_chains"] = max_chains

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e

    logger.debug("Settings: db_path=%s max_chains=%d", settings.db_path, settings.max_chains)
    return settings
