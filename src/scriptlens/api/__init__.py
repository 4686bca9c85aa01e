"""ScriptLens API module."""

from scriptlens.api.analyze import ScriptAnalyzer, analyze, analyze_document
from scriptlens.api.extraction import ExtractedText, PlainTextExtractor, TextExtractor

__all__ = [
    "ExtractedText",
    "PlainTextExtractor",
    "ScriptAnalyzer",
    "TextExtractor",
    "analyze",
    "analyze_document",
]
