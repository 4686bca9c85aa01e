"""Errors raised by ScriptLens.

Every error carries a one-line ``message``, an optional ``hint`` telling the
user what to try next, and optional ``details`` that the CLI shows in verbose
mode. Parsing itself never raises; these errors come from the document and
configuration boundaries.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ScriptLensError(Exception):
    """Base class for all ScriptLens errors."""

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Render the message, hint and details as plain text."""
        lines = [f"Error: {self.message}"]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        if self.details:
            lines.append("Details:")
            lines.extend(f"  {key}: {value}" for key, value in self.details.items())
        return "\n".join(lines)


class ConfigurationError(ScriptLensError):
    """A settings file or value that ScriptLens cannot use."""


class ScriptLensFileNotFoundError(ScriptLensError):
    """A screenplay or configuration file that does not exist."""

    def __init__(self, path: Path | str, kind: str = "Screenplay file") -> None:
        """Initialize the error.

        Args:
            path: The path that was looked up
            kind: What the file was expected to be, used in the message
        """
        self.path = Path(path)
        super().__init__(
            message=f"{kind} not found: {self.path}",
            hint="Check that the file path is correct",
            details={"path": str(self.path)},
        )


class ExtractionError(ScriptLensError):
    """A document whose text could not be read by the extractor."""

    def __init__(
        self, path: Path | str, reason: str, hint: str | None = None
    ) -> None:
        """Initialize the error.

        Args:
            path: The document being extracted
            reason: What went wrong, usually the underlying error text
            hint: Suggestion for the user
        """
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            message=f"Could not extract text from {self.path}",
            hint=hint,
            details={"path": str(self.path), "reason": reason},
        )


class EmptyDocumentError(ScriptLensError):
    """Raised when a document yields no text to analyze."""

    def __init__(self, script_name: str | None = None) -> None:
        self.script_name = script_name
        super().__init__(
            message="No text could be extracted from the document",
            hint="Check that the source is a text-based screenplay, not a scan",
            details={"script_name": script_name} if script_name else None,
        )


# Keys people reach for from other tools, mapped to the ScriptLens name
CONFIG_KEY_FIXES = {
    "output_dir": "report_dir",
    "reports_dir": "report_dir",
    "level": "log_level",
    "format": "log_format",
}


def check_config_keys(config: dict[str, Any]) -> None:
    """Reject configuration keys that look like a ScriptLens setting but are not.

    Args:
        config: Raw mapping read from a configuration file

    Raises:
        ConfigurationError: Naming the first misspelled key and its fix
    """
    wrong = next((key for key in CONFIG_KEY_FIXES if key in config), None)
    if wrong is None:
        return
    correct = CONFIG_KEY_FIXES[wrong]
    raise ConfigurationError(
        message=f"Invalid configuration key '{wrong}'",
        hint=f"Use '{correct}' instead of '{wrong}'",
        details={
            "found_keys": list(config),
            "invalid_key": wrong,
            "correct_key": correct,
        },
    )
