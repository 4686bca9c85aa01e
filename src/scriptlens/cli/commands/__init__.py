"""ScriptLens CLI commands."""

from __future__ import annotations

from scriptlens.cli.commands.analyze import analyze_command

__all__ = ["analyze_command"]
