# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for flagpick.

Settings are optional. Without a config file every value falls back to the
defaults on `FlagpickConfig`. A file may be TOML or YAML and only needs the keys
it wants to change:

    # flagpick.toml
    help_timeout = 1.5
    language = "en"
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from flagpick.exceptions import ConfigError
from flagpick.language import Language
from flagpick.logger import logger


class FlagpickConfig(BaseModel):
    """Tunable settings for help acquisition."""

    model_config = ConfigDict(extra="forbid")

    help_timeout: float = 1.0
    man_timeout: float = 2.0
    poll_interval: float = 0.05
    terminal_columns: int = 500
    help_flag: str = "--help"
    man_command: str = "man"
    language: Language = Language.SYSTEM

    @field_validator("help_timeout", "man_timeout", "poll_interval")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be greater than 0")
        return value

    @field_validator("terminal_columns")
    @classmethod
    def validate_columns(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "flagpick.yaml",
        Path.cwd() / "flagpick.toml",
        Path.cwd() / ".flagpick.yaml",
        Path.cwd() / ".flagpick.toml",
        Path(os.environ.get("FLAGPICK_CONFIG", "flagpick.yaml")),
        Path.home() / ".config" / "flagpick" / "flagpick.yaml",
        Path.home() / ".config" / "flagpick" / "flagpick.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def _read_raw(path: Path) -> Any:
    text = path.read_text(encoding="UTF-8")
    if path.suffix == ".toml":
        return toml.loads(text)
    if path.suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    raise ConfigError(f"Unsupported config format: {path.suffix}")


def load_config(path: Path | str | None = None) -> FlagpickConfig:
    """
    Load and validate a flagpick configuration file.

    When `path` is omitted, `find_config()` locates one; if none exists the
    defaults are returned.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = Path(path) if path else find_config()
    if config_path is None:
        logger.debug("No config file found, using defaults.")
        return FlagpickConfig()
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        raw = _read_raw(config_path)
    except (OSError, toml.TomlDecodeError, yaml.YAMLError) as error:
        raise ConfigError(f"Could not read {config_path}: {error}") from error

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping.")

    try:
        config = FlagpickConfig.model_validate(raw)
    except ValidationError as error:
        raise ConfigError(f"Invalid config in {config_path}:\n{error}") from error

    logger.debug("Loaded config from %s", config_path)
    return config
