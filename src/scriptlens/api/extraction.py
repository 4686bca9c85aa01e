"""Text extraction boundary for screenplay documents."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from scriptlens.config import get_logger
from scriptlens.exceptions import ExtractionError, ScriptLensFileNotFoundError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExtractedText:
    """Text handed to the parser by an extraction collaborator.

    Attributes:
        text: The full extracted text, lines separated by newlines
        page_count: Number of pages in the source document
        character_count: Number of characters extracted
    """

    text: str
    page_count: int = 1
    character_count: int = 0


class TextExtractor(Protocol):
    """Protocol for collaborators that turn a document into plain text.

    Example:
        >>> class MyExtractor:
        ...     async def extract(self, source: Path) -> ExtractedText:
        ...         return ExtractedText(text=source.read_text())
    """

    async def extract(self, source: Path) -> ExtractedText:
        """Extract the text of a document.

        Args:
            source: Path to the document

        Returns:
            The extracted text with page and character counts
        """
        ...


class PlainTextExtractor:
    """Read an already-extracted screenplay from a UTF-8 text file.

    Pages are counted from form feed characters, which most PDF-to-text
    tools emit between pages.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the extractor.

        Args:
            encoding: Encoding used to decode the file
        """
        self.encoding = encoding

    async def extract(self, source: Path) -> ExtractedText:
        """Read the file without blocking the event loop."""
        source = Path(source)
        if not source.exists():
            raise ScriptLensFileNotFoundError(source)
        try:
            text = await asyncio.to_thread(source.read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ExtractionError(
                source,
                reason=str(e),
                hint=f"Make sure the file is readable {self.encoding} text",
            ) from e

        page_count = text.count("\f") + 1 if text else 0
        text = text.replace("\f", "\n")
        logger.info(
            "Extracted screenplay text",
            path=str(source),
            pages=page_count,
            characters=len(text),
        )
        return ExtractedText(
            text=text, page_count=page_count, character_count=len(text)
        )
