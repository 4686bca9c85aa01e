"""Turn exceptions raised by CLI commands into messages and exit codes."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from scriptlens.config import get_logger
from scriptlens.exceptions import (
    EmptyDocumentError,
    ExtractionError,
    ScriptLensError,
)

logger = get_logger(__name__)
console = Console(stderr=True)


def _print_hint(hint: str | None) -> None:
    if hint:
        console.print(f"[yellow]→ {hint}[/yellow]")


def _report_empty_document(error: EmptyDocumentError) -> None:
    label = error.script_name or "the document"
    console.print(f"[red]✗ No text could be extracted from {escape(label)}[/red]")
    _print_hint(error.hint)
    logger.error("Empty document", script_name=error.script_name)


def _report_extraction_error(error: ExtractionError) -> None:
    console.print(f"[red]✗ {escape(error.message)}[/red]")
    console.print(f"  [dim]reason:[/dim] {escape(error.reason)}")
    _print_hint(error.hint)
    logger.error("Extraction failed", path=str(error.path), reason=error.reason)


def _report_scriptlens_error(error: ScriptLensError, verbose: bool) -> None:
    console.print(f"[red]✗ {escape(error.message)}[/red]")
    _print_hint(error.hint)
    if verbose and error.details:
        console.print("\n[dim]Details:[/dim]")
        for key, value in error.details.items():
            console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")
    logger.error(
        "ScriptLens error",
        error_type=type(error).__name__,
        message=error.message,
        details=error.details,
    )


def _report_unexpected_error(error: Exception, verbose: bool) -> None:
    console.print(f"[red]✗ Unexpected error: {escape(str(error))}[/red]")
    if verbose:
        console.print_exception()
    else:
        console.print("[dim]Run with --verbose for full error details[/dim]")
    logger.error(
        "Unexpected error",
        error=str(error),
        error_type=type(error).__name__,
        exc_info=True,
    )


def handle_cli_error(
    error: Exception, verbose: bool = False, exit_code: int = 1
) -> NoReturn:
    """Print a readable message for ``error`` on stderr and exit.

    Empty documents and extraction failures get their own wording. Other
    ScriptLens errors print their message and hint, plus details when
    ``verbose`` is set. Anything else is reported as unexpected, with a
    traceback in verbose mode. Must be called from inside an ``except``
    block so the traceback is available.

    Args:
        error: The exception raised by the command
        verbose: Show details and tracebacks
        exit_code: Process exit code

    Raises:
        typer.Exit: Always
    """
    if isinstance(error, EmptyDocumentError):
        _report_empty_document(error)
    elif isinstance(error, ExtractionError):
        _report_extraction_error(error)
    elif isinstance(error, ScriptLensError):
        _report_scriptlens_error(error, verbose)
    else:
        _report_unexpected_error(error, verbose)
    raise typer.Exit(exit_code)
