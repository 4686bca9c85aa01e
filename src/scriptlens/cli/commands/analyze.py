"""CLI command for scriptlens analyze."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from scriptlens.cli.formatters import AnalysisFormatter, OutputFormat
from scriptlens.cli.utils.error_handler import handle_cli_error
from scriptlens.config import get_logger, get_settings_for_cli

logger = get_logger(__name__)
console = Console()


def analyze_command(
    path: Annotated[
        Path,
        typer.Argument(help="Extracted screenplay text file to analyze"),
    ],
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Script name label (default: file stem)"),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the full result as JSON")
    ] = False,
    scenes: Annotated[
        bool, typer.Option("--scenes", help="Show a per-scene table")
    ] = False,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Write text reports under this directory",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show error details")
    ] = False,
) -> None:
    """Analyze a screenplay's scenes, characters, dialogue and interactions.

    The input is plain text as produced by a PDF-to-text tool. Form feeds
    are treated as page breaks.
    """
    try:
        from scriptlens.api.analyze import ScriptAnalyzer

        overrides: dict[str, Any] = {"report_dir": output_dir}
        if output_dir is not None:
            overrides["write_reports"] = True
        settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)
        analyzer = ScriptAnalyzer(settings=settings)

        if json_output:
            result = asyncio.run(analyzer.analyze_document(path, name))
        else:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                progress.add_task(f"Analyzing {path.name}...", total=None)
                result = asyncio.run(analyzer.analyze_document(path, name))

        formatter = AnalysisFormatter(console)
        if json_output:
            # Plain print keeps ANSI codes out of the JSON
            print(formatter.format(result, OutputFormat.JSON))
        else:
            formatter.print(result, OutputFormat.TEXT)
            if scenes:
                console.print(formatter.format(result, OutputFormat.TABLE))

        if settings.write_reports and not json_output:
            report_dir = analyzer.report_writer.output_dir_for(result.script_name)
            console.print(f"\n[green]Reports written to {report_dir}[/green]")

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, verbose=verbose)
