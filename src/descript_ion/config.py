"""Configuration dataclasses and loading."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .catalog.codepage import DecodeTable, get_decode_table
from .catalog.loader import CATALOG_FILE_NAMES

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DESCRIPT_ION_CONFIG"
DEFAULT_CONFIG_FILE = "descript_ion.yaml"


@dataclass
class CatalogConfig:
    """Catalog file settings."""
    code_page: str = "cp437"
    file_names: list[str] = field(default_factory=lambda: list(CATALOG_FILE_NAMES))

    def decode_table(self) -> DecodeTable:
        return get_decode_table(self.code_page)


@dataclass
class LoggingConfig:
    """Logging settings for the command-line tool."""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Config:
    """Main configuration."""
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        """Create config from dictionary."""
        if not isinstance(data, dict):
            raise ValueError("Config root must be a mapping")

        catalog_data = data.get("catalog") or {}
        logging_data = data.get("logging") or {}

        try:
            catalog = CatalogConfig(**catalog_data)
            log_config = LoggingConfig(**logging_data)
        except TypeError as e:
            raise ValueError(f"Invalid config: {e}") from e

        level = log_config.level
        if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Unknown logging level: {level!r}")

        if not catalog.file_names:
            raise ValueError("catalog.file_names must not be empty")
        # Fail early on an unknown code page
        catalog.decode_table()

        return cls(catalog=catalog, logging=log_config)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load config from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid config file {path}: {e}") from e
        return cls.from_dict(data or {})


def load_config(config_path: str | Path | None = None) -> tuple[Config, str]:
    """Load config from file or fall back to defaults.

    Returns ``(config, resolved_config_path)``.
    """
    config_path = str(config_path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE))
    if Path(config_path).exists():
        config = Config.from_yaml(config_path)
        logger.info("Loaded config from %s", config_path)
    else:
        config = Config()
        logger.debug("Using default config (no file at %s)", config_path)
    return config, config_path
