"""Settings for the listings analyzer, read from an optional YAML file."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .stats import TOP_HOSTS

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "LOG_LEVEL"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    data_path: Optional[Path] = None
    top_hosts: int = Field(default=TOP_HOSTS, ge=0)
    log_level: str = "WARNING"
    prompt_prefix: str = "~> "

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings(path: str | os.PathLike[str] | None = None) -> Settings:
    """Load settings from the YAML file at *path*; defaults when *path* is None."""

    if path is None:
        return Settings()
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigError(f"Config not found: {file_path}")
    try:
        with open(file_path, "r", encoding="utf-8") as handle:
            raw = handle.read()
        data = yaml.safe_load(raw) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config {file_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {file_path} must contain a mapping")
    try:
        settings = Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {file_path}: {exc}") from exc
    logger.debug("Loaded settings from %s: %s", file_path, settings)
    return settings


def resolve_log_level(settings: Settings, *, debug: bool = False) -> str:
    if debug:
        return "DEBUG"
    env_level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if env_level and isinstance(logging.getLevelName(env_level), int):
        return env_level
    return settings.log_level


__all__ = ["Settings", "load_settings", "resolve_log_level", "LOG_LEVEL_ENV"]
