"""Rich formatter for screenplay analysis results."""

from __future__ import annotations

import io

from rich.console import Console
from rich.table import Table

from scriptlens.cli.formatters.base import OutputFormat, OutputFormatter
from scriptlens.cli.formatters.json_formatter import JsonFormatter
from scriptlens.parser.models import AnalysisResult


class AnalysisFormatter(OutputFormatter[AnalysisResult]):
    """Formatter for AnalysisResult objects."""

    def format(
        self, data: AnalysisResult, format_type: OutputFormat = OutputFormat.TEXT
    ) -> str:
        """Format an analysis result.

        Args:
            data: Analysis result to format
            format_type: Output format type

        Returns:
            Formatted string
        """
        if format_type == OutputFormat.JSON:
            return JsonFormatter(self.console).format(data)
        if format_type == OutputFormat.TABLE:
            return self._render(self._scene_table(data))
        return self._format_text(data)

    def _format_text(self, data: AnalysisResult) -> str:
        summary = data.summary
        lines = [
            f"[bold cyan]{data.script_name}[/bold cyan]",
            f"  Scenes: {summary.total_scenes}",
            f"  Characters: {summary.total_characters}",
            f"  Dialogues: {summary.total_dialogues}",
            f"  Interactions: {summary.total_interactions}",
            f"  Avg dialogues per scene: {summary.average_dialogues_per_scene}",
            f"  Characters per scene: {summary.characters_per_scene}",
            f"  Avg scene length: {summary.average_scene_length}",
        ]
        if data.page_count is not None:
            lines.append(f"  Pages: {data.page_count}")
        if data.no_scenes_found:
            lines.append(
                "[yellow]Warning: no scene headings (INT./EXT.) were found[/yellow]"
            )
        return "\n".join(lines)

    def _scene_table(self, data: AnalysisResult) -> Table:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right")
        table.add_column("Location")
        table.add_column("Time")
        table.add_column("Characters")
        table.add_column("Dialogue", justify="right")
        for scene in data.scenes:
            table.add_row(
                str(scene.number),
                scene.location,
                scene.time_of_day.value,
                ", ".join(scene.characters),
                str(len(scene.dialogue_lines)),
            )
        return table

    def _render(self, table: Table) -> str:
        string_io = io.StringIO()
        Console(file=string_io, force_terminal=False, width=120).print(table)
        return string_io.getvalue()
