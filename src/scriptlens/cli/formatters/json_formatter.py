"""JSON output for CLI commands."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

from rich.console import Console

from scriptlens.cli.formatters.base import OutputFormat, OutputFormatter


def _to_jsonable(value: Any) -> Any:
    """Convert ScriptLens result objects, enums and paths for ``json.dumps``."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


class JsonFormatter(OutputFormatter[Any]):
    """Render analysis results and plain mappings as indented JSON.

    Objects exposing ``to_dict`` (scenes, summaries, whole results) may sit
    anywhere inside the data. Non-ASCII text such as accented character
    names is written as is.
    """

    def __init__(self, console: Console | None = None, indent: int = 2) -> None:
        super().__init__(console)
        self.indent = indent

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.JSON) -> str:
        if format_type is not OutputFormat.JSON:
            raise ValueError(f"JsonFormatter cannot produce {format_type.value}")
        return json.dumps(
            data, default=_to_jsonable, indent=self.indent, ensure_ascii=False
        )
