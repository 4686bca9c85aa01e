"""Settings and logging for ScriptLens.

``get_logger`` configures structlog from the process-wide settings the first
time any module asks for a logger.
"""

from __future__ import annotations

from typing import Any

from scriptlens.config.logging import configure_logging
from scriptlens.config.logging import get_logger as _structlog_logger
from scriptlens.config.settings import (
    ScriptLensSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    set_settings,
)

__all__ = [
    "ScriptLensSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "set_settings",
]

_configured = False

def get_logger(name: str) -> Any:
    """Return a structlog logger, configuring logging on the first call."""
    global _configured
    if not _configured:
        configure_logging(get_settings())
        _configured = True
    return _structlog_logger(name)
