"""Configuration for filekit."""

from __future__ import annotations

import codecs
import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filekit.validation import parse_mode

logger = logging.getLogger(__name__)

# Default config location
CONFIG_DIR = Path.home() / ".filekit"
CONFIG_FILE = "config.json"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(Exception):
    """Error loading or validating configuration."""

    pass


class Settings(BaseModel):
    """Settings shared by the file and directory collections."""

    model_config = ConfigDict(populate_by_name=True)

    directory_mode: int = Field(default=0o777, alias="directoryMode")
    encoding: str = "utf-8"
    lock_writes: bool = Field(default=True, alias="lockWrites")
    log_level: str = Field(default="WARNING", alias="logLevel")

    @field_validator("directory_mode", mode="before")
    @classmethod
    def _validate_mode(cls, value: Any) -> int:
        return parse_mode(value)

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_file(cls, path: Path) -> Settings:
        """Load settings from a JSON or YAML file.

        Args:
            path: Path to a .json, .yaml or .yml file.

        Returns:
            Parsed Settings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ConfigError: If the file cannot be parsed or validated.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        text = path.read_text()
        try:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(text) or {}
            else:
                data = json.loads(text) if text.strip() else {}
        except (ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot parse {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config in {path} must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config in {path}: {e}") from e


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a file, or the default location if present.

    Args:
        path: Explicit config path. Must exist when given.

    Returns:
        Settings from the file, or defaults when no file is configured.
    """
    if path is not None:
        return Settings.from_file(path)

    default_path = CONFIG_DIR / CONFIG_FILE
    if default_path.exists():
        logger.debug("Loading settings from %s", default_path)
        return Settings.from_file(default_path)
    return Settings()
