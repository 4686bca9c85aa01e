"""Screenplay analysis API for ScriptLens."""

from __future__ import annotations

import asyncio
import time
from dataclasses import replace
from pathlib import Path

from scriptlens.analyzers.interactions import build_interactions
from scriptlens.analyzers.summary import summarize
from scriptlens.api.extraction import ExtractedText, PlainTextExtractor, TextExtractor
from scriptlens.config import ScriptLensSettings, get_logger, get_settings
from scriptlens.exceptions import EmptyDocumentError
from scriptlens.parser.accumulator import parse_screenplay
from scriptlens.parser.models import AnalysisResult, AnalysisWarning
from scriptlens.reports.writer import ReportWriter

logger = get_logger(__name__)


def analyze(text: str | None, script_name: str) -> AnalysisResult:
    """Analyze the structure of one screenplay.

    Parsing itself never raises: unexpected lines degrade into action text.
    A document without any scene heading still produces a result, flagged
    with ``AnalysisWarning.NO_SCENES_FOUND``.

    Args:
        text: Extracted screenplay text
        script_name: Label for the document; has no effect on parsing

    Returns:
        Scenes, characters, dialogue index, interactions and summary

    Raises:
        EmptyDocumentError: If the text is None or empty
    """
    if not text:
        raise EmptyDocumentError(script_name)

    started = time.perf_counter()
    parsed = parse_screenplay(text)
    interactions = build_interactions(parsed.dialogues)
    summary = summarize(
        script_name,
        parsed.scenes,
        parsed.characters,
        parsed.dialogues,
        interactions,
    )

    warnings: list[AnalysisWarning] = []
    if not parsed.scenes:
        warnings.append(AnalysisWarning.NO_SCENES_FOUND)
        logger.warning(
            "No scene headings found",
            script_name=script_name,
            lines=parsed.line_count,
            characters=len(parsed.characters),
        )

    logger.info(
        "Parsed screenplay",
        script_name=script_name,
        lines=parsed.line_count,
        scenes=summary.total_scenes,
        characters=summary.total_characters,
        dialogues=summary.total_dialogues,
        interactions=summary.total_interactions,
        elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
    )

    return AnalysisResult(
        script_name=script_name,
        scenes=parsed.scenes,
        characters=parsed.characters,
        dialogues=parsed.dialogues,
        interactions=interactions,
        summary=summary,
        warnings=tuple(warnings),
    )


class ScriptAnalyzer:
    """Runs extraction and structural analysis for screenplay documents.

    Each call builds its own parser state, so one instance can serve any
    number of concurrent analyses. When the settings have ``write_reports``
    set, every document analysis also writes the text reports under
    ``settings.report_dir``.

    Example:
        >>> analyzer = ScriptAnalyzer()
        >>> result = await analyzer.analyze_document(Path("heat.txt"))
        >>> print(result.summary.total_scenes)
    """

    def __init__(
        self,
        settings: ScriptLensSettings | None = None,
        extractor: TextExtractor | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            settings: Report and logging settings; defaults to the global ones
            extractor: Text extraction collaborator; defaults to plain text
        """
        self.settings = settings if settings is not None else get_settings()
        self.extractor: TextExtractor = extractor or PlainTextExtractor()
        self.report_writer = ReportWriter(self.settings.report_dir)

    def analyze(self, text: str | None, script_name: str) -> AnalysisResult:
        """Analyze already-extracted text."""
        return analyze(text, script_name)

    def analyze_extracted(
        self, extracted: ExtractedText, script_name: str
    ) -> AnalysisResult:
        """Analyze extractor output, keeping its page and character counts."""
        return replace(
            analyze(extracted.text, script_name),
            page_count=extracted.page_count,
            character_count=extracted.character_count,
        )

    async def analyze_document(
        self, source: Path, script_name: str | None = None
    ) -> AnalysisResult:
        """Extract a document's text and analyze it.

        Args:
            source: Path to the document
            script_name: Output label; defaults to the file stem

        Returns:
            The analysis result with source statistics attached

        Raises:
            EmptyDocumentError: If the extractor returns no text
            ScriptLensError: If reports are enabled and cannot be written
        """
        source = Path(source)
        name = script_name or source.stem
        logger.info("Starting analysis", script_name=name, source=str(source))
        extracted = await self.extractor.extract(source)
        result = self.analyze_extracted(extracted, name)
        if self.settings.write_reports:
            await asyncio.to_thread(self.write_reports, result)
        return result

    def write_reports(self, result: AnalysisResult) -> list[Path]:
        """Write the four text reports for a result.

        Returns:
            Paths of the written files, all under ``settings.report_dir``
        """
        return self.report_writer.write(result)


async def analyze_document(
    extractor: TextExtractor, source: Path, script_name: str | None = None
) -> AnalysisResult:
    """Extract with the given collaborator, then analyze."""
    return await ScriptAnalyzer(extractor=extractor).analyze_document(
        source, script_name
    )
