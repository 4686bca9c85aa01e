"""Base formatter classes for CLI output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console

T = TypeVar("T")


class OutputFormat(str, Enum):
    """Supported output formats."""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"


class OutputFormatter(ABC, Generic[T]):
    """Base class for output formatters."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output. If None, creates new instance.
        """
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> str:
        """Format data for output.

        Args:
            data: Data to format
            format_type: Output format type

        Returns:
            Formatted string
        """
        pass

    def print(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> None:
        """Format and print data to console."""
        output = self.format(data, format_type)
        if format_type == OutputFormat.JSON:
            self.console.print_json(output)
        else:
            self.console.print(output)
