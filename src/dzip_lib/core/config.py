# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for dzip.

This module defines dataclasses representing all configurable aspects of dzip,
including environment variables, archiving defaults, the look of the progress
bar, naming rules for the rename mode and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by dzip."""

    # Enables dzip debug mode.
    debug_mode: str = "DZIP_DEBUG"
    # Explicit path to the dzip config file.
    config: str = "DZIP_CONFIG"


@dataclass
class ArchiverSettings:
    """Settings for Archiver operations."""

    # Name of the archive created by `dzip zip` if none is given.
    default_filename: str = "output.zip"
    # Deflate compression level (0-9).
    compression_level: int = 6
    # Progress is reported every this many processed files.
    progress_interval: int = 50
    # Unix permissions stamped on entries written without them.
    unix_permissions: int = 0o755
    # Size (in bytes) of the chunks streamed into an archive entry.
    chunk_size: int = 1024 * 8


@dataclass
class ProgressBarSettings:
    """Settings for the progress bar shown while compressing."""

    # Text displayed next to the bar.
    description: str = "Compressing"
    # Width of the bar in characters.
    bar_width: int = 50
    # Style of the completed part of the bar.
    complete_style: str = "green"
    # Style of the bar once the task is finished.
    finished_style: str = "bright_green"
    # Style of the description.
    text_style: str = "bold"
    # Remove the bar from the terminal once compression is done.
    transient: bool = False


@dataclass
class RenamerSettings:
    """Settings for the rename-zip mode."""

    # Characters that may not appear in the new directory name.
    forbidden_characters: str = "\\/:"
    # Suffix appended to the new directory name to get the archive name.
    archive_suffix: str = ".zip"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by dzip.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of dzip commands.
    default: int = 255
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for dzip."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    archiver: ArchiverSettings = field(default_factory=ArchiverSettings)
    progress_bar: ProgressBarSettings = field(default_factory=ProgressBarSettings)
    renamer: RenamerSettings = field(default_factory=RenamerSettings)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read dzip config '{config_path}': {e}.")

        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # explicit environment variable has the highest priority
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config))
            else None,
            # per-directory override
            Path.cwd() / "dzip_config.toml",
            # XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "dzip"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Keys without a matching field are dropped.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        if field_info.name not in data:
            continue

        value = data[field_info.name]
        if is_dataclass(field_info.type) and isinstance(value, dict):
            field_values[field_info.name] = _dict_to_dataclass(field_info.type, value)
        else:
            field_values[field_info.name] = value

    return cls(**field_values)


# Global configuration for dzip.
CFG = Config.load()
