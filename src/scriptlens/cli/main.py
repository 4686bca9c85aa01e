"""Main CLI entry point for ScriptLens."""

from __future__ import annotations

import os
from typing import Annotated

import typer
from rich.console import Console

from scriptlens import __version__
from scriptlens.cli.commands import analyze_command
from scriptlens.cli.formatters.json_formatter import JsonFormatter
from scriptlens.config import get_logger

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptlens",
    help="Structural analysis of screenplay text",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="analyze")(analyze_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show ScriptLens version."""
    version_info = {
        "name": "ScriptLens",
        "version": __version__,
        "description": "Structural analysis of screenplay text",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"ScriptLens v{version_info['version']}")


def _reconfigure_logging(level: str, debug: bool = False) -> None:
    """Apply a log level override from the command line."""
    from scriptlens.config import (
        clear_settings_cache,
        configure_logging,
        get_settings,
    )

    os.environ["SCRIPTLENS_LOG_LEVEL"] = level
    if debug:
        os.environ["SCRIPTLENS_DEBUG"] = "true"
    clear_settings_cache()
    configure_logging(get_settings())


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging", envvar="SCRIPTLENS_DEBUG"),
    ] = False,
) -> None:
    """Configure global options."""
    if debug:
        _reconfigure_logging("DEBUG", debug=True)
        logger.debug("Debug mode enabled")
    elif verbose:
        _reconfigure_logging("INFO")
        logger.info("Verbose mode enabled")


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
