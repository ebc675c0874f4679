"""
genlock configuration management.

This module loads settings from multiple sources with a clear priority order:

    1. Environment variables (highest priority) - for CI and wrapper scripts
    2. Config file (genlock.ini, or the file named by GENLOCK_CONFIG)
    3. Built-in defaults (lowest priority)

Configuration is loaded once at module import time and cached. The
GenlockConfig dataclass provides typed access to all settings.

The ledger itself never reads this module: callers resolve the output
directory here and pass it to ``Ledger(files, output_dir=...)``.

Usage:
    from genlock.config import config

    print(config.output.dir)
    print(config.logging.level)

Environment Variable Mapping:
    GENLOCK_CONFIG      -> path of the INI file to load
    GENLOCK_OUTPUT_DIR  -> output.dir
    GENLOCK_LOG_LEVEL   -> logging.level
"""

import configparser
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Default config file, looked up relative to the working directory
DEFAULT_CONFIG_FILE = Path("genlock.ini")

_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class OutputSettings:
    """Generation output configuration."""

    dir: str = ""  # empty = current working directory

    @property
    def output_dir(self) -> str | None:
        """Output directory to hand to the ledger, or None for the cwd."""
        return self.dir or None


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class GenlockConfig:
    """
    Complete genlock configuration.

    Access via the module-level `config` singleton.
    """

    output: OutputSettings = field(default_factory=OutputSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_level(value: str) -> str | None:
    """Normalise a log level name, returning None if it is not recognised."""
    level = value.strip().upper()
    return level if level in _VALID_LOG_LEVELS else None


def _load_from_ini(parser: configparser.ConfigParser, cfg: GenlockConfig) -> None:
    """Load configuration from parsed INI file into GenlockConfig."""
    # Output section
    if parser.has_section("output"):
        if parser.has_option("output", "dir"):
            cfg.output.dir = parser.get("output", "dir").strip()

    # Logging section
    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            if level := _parse_level(parser.get("logging", "level")):
                cfg.logging.level = level


def _apply_env_overrides(cfg: GenlockConfig) -> None:
    """Apply environment variable overrides to configuration."""
    if env_output := os.getenv("GENLOCK_OUTPUT_DIR"):
        cfg.output.dir = env_output

    if env_log := os.getenv("GENLOCK_LOG_LEVEL"):
        if level := _parse_level(env_log):
            cfg.logging.level = level


def config_file_path() -> Path:
    """Return the INI file that load_config() reads (it may not exist)."""
    if env_path := os.getenv("GENLOCK_CONFIG"):
        return Path(env_path)
    return DEFAULT_CONFIG_FILE


def load_config() -> GenlockConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. INI file (GENLOCK_CONFIG or ./genlock.ini)
        3. Built-in defaults

    Returns:
        GenlockConfig: Fully populated configuration object.
    """
    cfg = GenlockConfig()

    config_file = config_file_path()
    if config_file.exists():
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    # Apply environment variable overrides (highest priority)
    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> GenlockConfig:
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton.

    Returns:
        GenlockConfig: The newly loaded configuration.
    """
    global config
    config = load_config()
    return config


def apply_logging_settings(settings: LoggingSettings) -> None:
    """Set the level of the ``genlock`` package logger.

    Handlers are left to the host application.
    """
    logging.getLogger("genlock").setLevel(settings.level)


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

# Load configuration once at module import time
config = load_config()
