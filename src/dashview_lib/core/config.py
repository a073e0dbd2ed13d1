# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for dashview.

This module defines dataclasses representing all configurable aspects of dashview,
including environment variables, cluster adapters, dashboard app links,
quota-snapshot handling and presentation settings.

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
    """Environment variable names used by dashview."""

    # Enables dashview debug mode.
    debug_mode: str = "DV_DEBUG"
    # Explicit path to the dashview config file.
    config: str = "DV_CONFIG"
    # Colon-separated list of quota snapshot files.
    quota_path: str = "DV_QUOTA_PATH"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by dashview.
    standard: str = "%Y-%m-%d %H:%M:%S"
    # Date format used by PBS / Torque in `qstat -f` dumps.
    pbs: str = "%a %b %d %H:%M:%S %Y"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of dashview commands.
    default: int = 91
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class SizeOptions:
    """Options associated with the Size dataclass."""

    # Maximal error acceptable when rounding Size values for display.
    max_rounding_error: float = 0.1


@dataclass
class ClusterSettings:
    """Clusters known to the dashboard."""

    # Mapping of cluster identifiers to the name of their scheduler adapter.
    # The first cluster is used when no cluster is specified.
    adapters: dict[str, str] = field(default_factory=lambda: {"default": "torque"})

    @property
    def default_cluster(self) -> str | None:
        """Identifier of the first configured cluster."""
        return next(iter(self.adapters), None)


@dataclass
class LinkSettings:
    """Base URLs of the dashboard apps that extended job views link to."""

    # Base URL of the shell (terminal) app. The directory path is appended.
    shell_url: str = "/pun/sys/shell/ssh/default"
    # Base URL of the file-browser app. The directory path is appended.
    files_url: str = "/pun/sys/files/fs"


@dataclass
class QuotaMessages:
    """Templates used to describe quota utilization."""

    # Message for file-count quotas.
    file: str = "Using {used} files of quota {available} files"
    # Clause appended to file-count messages of shared quotas.
    file_shared: str = "({used_exclusive} files are yours)"
    # Message for block-usage quotas.
    block: str = "Using {used} of quota {available}"
    # Clause appended to block-usage messages of shared quotas.
    block_shared: str = "({used_exclusive} are yours)"


@dataclass
class QuotaSettings:
    """Settings for reading quota snapshots."""

    # The only supported version of the quota snapshot format.
    supported_version: int = 1
    # Size of a single quota block in bytes.
    block_size: int = 1024
    # Fraction of the limit above which a quota is considered insufficient.
    threshold: float = 0.95
    # Quota snapshot files read when no file is specified.
    paths: list[str] = field(default_factory=list)
    # Message templates.
    messages: QuotaMessages = field(default_factory=QuotaMessages)


@dataclass
class PresenterSettings:
    """Settings for the job and quota presenters."""

    # Minimal width of the job panel.
    min_width: int | None = 60
    # Maximal width of the job panel.
    max_width: int | None = None
    # Style of the border lines.
    border_style: str = "white"
    # Style of the title.
    title_style: str = "white bold"
    # Style used for the keys in the job panel.
    key_style: str = "default bold"
    # Style used for values in the job panel.
    value_style: str = "white"
    # Style used for table headers.
    headers_style: str = "default bold"
    # Style used for sufficient quotas.
    sufficient_style: str = "bright_green"
    # Style used for insufficient quotas.
    insufficient_style: str = "bright_red"
    # Style used for notes.
    notes_style: str = "grey50"


@dataclass
class Config:
    """Main configuration for dashview."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)
    size: SizeOptions = field(default_factory=SizeOptions)
    clusters: ClusterSettings = field(default_factory=ClusterSettings)
    links: LinkSettings = field(default_factory=LinkSettings)
    quota: QuotaSettings = field(default_factory=QuotaSettings)
    presenter: PresenterSettings = field(default_factory=PresenterSettings)

    # Name of the dashview binary.
    binary_name: str = "dashview"

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
            raise ValueError(f"Could not read dashview config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("DV_CONFIG")) else None,
            # 2. Current working directory (for development/override)
            Path.cwd() / "dashview_config.toml",
            # 3. XDG config home (standard user config location)
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "dashview"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for dashview.
CFG = Config.load()
