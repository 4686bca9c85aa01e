"""Output formatters for ScriptLens CLI."""

from __future__ import annotations

from scriptlens.cli.formatters.analysis_formatter import AnalysisFormatter
from scriptlens.cli.formatters.base import OutputFormat, OutputFormatter
from scriptlens.cli.formatters.json_formatter import JsonFormatter

__all__ = [
    "AnalysisFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
]
