"""Persist text reports to disk."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path

from scriptlens.config import get_logger
from scriptlens.exceptions import ScriptLensError
from scriptlens.parser.models import AnalysisResult
from scriptlens.reports.text_report import render_all

logger = get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class ReportWriter:
    """Write the four text reports for an analysis into one directory."""

    def __init__(self, output_root: Path) -> None:
        """Initialize the writer.

        Args:
            output_root: Directory under which per-script folders are created
        """
        self.output_root = Path(output_root)

    def output_dir_for(self, script_name: str) -> Path:
        """Directory that receives the reports of one script."""
        safe_name = _UNSAFE_CHARS.sub("_", script_name) or "script"
        return self.output_root / f"{safe_name}_outputs"

    def write(
        self, result: AnalysisResult, generated_at: datetime | None = None
    ) -> list[Path]:
        """Render and write every report.

        Returns:
            Paths of the written files

        Raises:
            ScriptLensError: If the output directory cannot be written
        """
        output_dir = self.output_dir_for(result.script_name)
        written: list[Path] = []
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            for file_name, content in render_all(result, generated_at).items():
                path = output_dir / file_name
                path.write_text(content, encoding="utf-8")
                written.append(path)
        except OSError as e:
            raise ScriptLensError(
                message=f"Failed to write reports to {output_dir}",
                hint="Check that the output directory is writable",
                details={"output_dir": str(output_dir), "error": str(e)},
            ) from e

        logger.info(
            "Wrote analysis reports",
            script_name=result.script_name,
            output_dir=str(output_dir),
            files=len(written),
        )
        return written
