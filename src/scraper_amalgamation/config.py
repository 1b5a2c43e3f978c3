"""Application configuration loader with Pydantic v2 validation.

Loads and validates an ``amalgamation.yaml`` file into a typed
:class:`AmalgamationConfig` object.  Unknown keys are allowed to support
future schema additions without breakage.

Example
-------
>>> loader = ConfigLoader()
>>> config = loader.load_string("settings_dir: /home/me/.moviescraper")
>>> config.settings_path
PosixPath('/home/me/.moviescraper/AmalgamationSettings.json')
"""
from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from scraper_amalgamation.persistence.adapter import SETTINGS_FILE_NAME
from scraper_amalgamation.plugins.registry import SOURCE_ENTRY_POINT_GROUP

_VALID_LOG_LEVELS: frozenset[str] = frozenset(
    ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
)


class AmalgamationConfig(BaseModel):
    """Top-level configuration schema.

    All keys are optional and fall back to sensible defaults.
    """

    model_config = {"extra": "allow"}

    settings_dir: Path = Field(default=Path("."))
    settings_file_name: str = Field(default=SETTINGS_FILE_NAME, min_length=1)
    entry_point_group: str = Field(default=SOURCE_ENTRY_POINT_GROUP, min_length=1)
    load_entrypoints: bool = Field(default=True)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'. Valid: {sorted(_VALID_LOG_LEVELS)}")
        return level

    @property
    def settings_path(self) -> Path:
        return self.settings_dir / self.settings_file_name

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


class ConfigLoader:
    """Loads and validates amalgamation YAML configuration."""

    def load(self, config_path: Path) -> AmalgamationConfig:
        """Load and validate a YAML configuration file.

        Raises
        ------
        FileNotFoundError:
            When the config file does not exist.
        ValueError:
            When the YAML content fails Pydantic validation.
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Amalgamation config not found: {config_path}")

        with config_path.open("r", encoding="utf-8") as fh:
            raw: dict[str, object] = yaml.safe_load(fh) or {}

        return AmalgamationConfig.model_validate(raw)

    def load_string(self, yaml_content: str) -> AmalgamationConfig:
        raw: dict[str, object] = yaml.safe_load(yaml_content) or {}
        return AmalgamationConfig.model_validate(raw)

    def defaults(self) -> AmalgamationConfig:
        """Return a default configuration with all defaults applied."""
        return AmalgamationConfig()
