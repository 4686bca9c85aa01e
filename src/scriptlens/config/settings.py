"""ScriptLens configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptlens.exceptions import (
    ConfigurationError,
    ScriptLensFileNotFoundError,
    check_config_keys,
)

# Looked up in the working directory when no --config is given
PROJECT_CONFIG_NAMES = (
    "scriptlens.yaml",
    "scriptlens.yml",
    "scriptlens.toml",
    "scriptlens.json",
)


def _read_yaml(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _read_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


_READERS: dict[str, Callable[[Path], Any]] = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".toml": _read_toml,
    ".json": _read_json,
}


def read_config_file(path: Path | str) -> dict[str, Any]:
    """Read a YAML, TOML or JSON settings file into a mapping.

    Args:
        path: Path to the configuration file

    Returns:
        The raw settings mapping, checked for common key mistakes

    Raises:
        ScriptLensFileNotFoundError: If the file does not exist
        ConfigurationError: If the format is unknown or the top level is not
            a mapping
    """
    path = Path(path)
    if not path.is_file():
        raise ScriptLensFileNotFoundError(path, kind="Configuration file")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {path.suffix}",
            hint="Use a .yaml, .yml, .toml or .json file",
            details={"file": str(path), "supported_formats": sorted(_READERS)},
        )

    data = reader(path)
    if not isinstance(data, dict):
        raise ConfigurationError(
            message=f"Configuration file {path} does not contain a mapping",
            hint="Write settings as top-level key/value pairs",
            details={"file": str(path), "found": type(data).__name__},
        )
    check_config_keys(data)
    return data


def find_project_config(directory: Path | None = None) -> Path | None:
    """Return the first ``scriptlens.*`` settings file in a directory."""
    directory = directory or Path.cwd()
    for name in PROJECT_CONFIG_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


class ScriptLensSettings(BaseSettings):
    """Settings for logging and report output.

    Values are resolved from, highest precedence first: command line flags,
    a configuration file, ``SCRIPTLENS_`` environment variables, a ``.env``
    file, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="scriptlens", description="Application name")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(console|json|structured)$",
    )
    log_file: Path | None = Field(default=None, description="Optional log file")

    # Reports
    report_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "analysis_outputs",
        description="Directory that receives the text report dumps",
    )
    write_reports: bool = Field(
        default=False,
        description="Write the text reports after every analysis",
    )

    @field_validator("report_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        """Expand ``~`` and environment variables in path settings."""
        if isinstance(v, str):
            v = Path(os.path.expandvars(v)).expanduser()
        if isinstance(v, Path):
            return v.resolve()
        return v

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> str:
        """Accept logging options in any case."""
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name} must be a string")
        return v.upper() if info.field_name == "log_level" else v.lower()

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScriptLensSettings:
        """Load settings from one configuration file over env and defaults."""
        return cls(**read_config_file(config_path))

    @classmethod
    def load(
        cls,
        config_file: Path | str | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> ScriptLensSettings:
        """Build settings from a file plus command line overrides.

        Args:
            config_file: Optional configuration file
            overrides: Command line values; None entries are ignored

        Returns:
            Settings with overrides applied on top of the file
        """
        data = read_config_file(config_file) if config_file else {}
        data.update({k: v for k, v in (overrides or {}).items() if v is not None})
        return cls(**data)


_settings: ScriptLensSettings | None = None


def get_settings() -> ScriptLensSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = ScriptLensSettings.load(find_project_config())
    return _settings


def set_settings(settings: ScriptLensSettings) -> None:
    """Replace the process-wide settings."""
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Forget the process-wide settings so the next call reloads them."""
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScriptLensSettings:
    """Resolve settings for one CLI invocation.

    An explicit ``--config`` file replaces the project file lookup. Without
    one, the process-wide settings are the base.

    Args:
        config_file: File passed with ``--config``
        cli_overrides: Flag values keyed by setting name; None means unset

    Returns:
        The settings to run the command with

    Raises:
        ScriptLensFileNotFoundError: If ``config_file`` does not exist
    """
    if config_file is not None:
        return ScriptLensSettings.load(config_file, cli_overrides)

    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    settings = get_settings()
    if not overrides:
        return settings
    return ScriptLensSettings(**{**settings.model_dump(), **overrides})
