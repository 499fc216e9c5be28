"""Configuration loading for syslogparser.

Loads settings from TOML config file with CLI override support.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import tomli

from syslogparser.parser import ParserConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_default_config_path() -> Path:
    """Get the default config file path."""
    return Path.home() / ".config" / "syslogparser" / "syslogparser.toml"


def get_config_search_paths() -> list[Path]:
    """Get list of paths to search for config file."""
    return [
        Path("syslogparser.toml"),  # Current directory
        get_default_config_path(),
        Path("/etc/syslogparser/syslogparser.toml"),
    ]


def find_config_file() -> Optional[Path]:
    """Find the first existing config file."""
    for path in get_config_search_paths():
        if path.exists():
            return path
    return None


@dataclass
class Config:
    """Loaded configuration with all sections."""

    # Parser
    allow_missing_structured_data: bool = False

    # Logging
    log_level: str = "WARNING"

    def parser_config(self) -> ParserConfig:
        """Build the ParserConfig for these settings."""
        return ParserConfig(
            allow_missing_structured_data=self.allow_missing_structured_data,
        )


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from TOML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Config object with loaded values
    """
    config = Config()

    # Find config file
    if config_path is None:
        config_path = find_config_file()

    if config_path is None or not config_path.exists():
        logger.debug("No config file found, using defaults")
        return config

    logger.info(f"Loading config from {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        logger.warning(f"Failed to load config file: {e}")
        return config

    # Parser section
    if "parser" in data:
        parser = data["parser"]
        if "allow_missing_structured_data" in parser:
            config.allow_missing_structured_data = bool(parser["allow_missing_structured_data"])

    # Logging section
    if "logging" in data:
        logging_section = data["logging"]
        if "level" in logging_section:
            level = str(logging_section["level"]).upper()
            if level in LOG_LEVELS:
                config.log_level = level
            else:
                logger.warning(f"Unknown log level {level!r}, keeping {config.log_level}")

    return config


def merge_cli_options(config: Config, **cli_options: Any) -> Config:
    """Merge CLI options into config (CLI takes precedence).

    Args:
        config: Base config from file
        **cli_options: CLI option overrides (None values are ignored)

    Returns:
        Config with CLI overrides applied
    """
    # Map CLI option names to config attributes
    mappings = {
        "allow_missing_sd": "allow_missing_structured_data",
        "log_level": "log_level",
    }

    for cli_name, config_name in mappings.items():
        if cli_name in cli_options:
            value = cli_options[cli_name]
            # Only override if CLI value is meaningful
            if value is not None and value != "":
                setattr(config, config_name, value)

    return config
