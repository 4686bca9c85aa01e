"""ScriptLens: structural analysis of screenplay text.

ScriptLens turns the flat text extracted from a screenplay into scenes,
characters, a dialogue index and a character interaction graph using layout
heuristics alone.
"""

__version__ = "0.1.0"

from scriptlens.api import (  # noqa: E402
    ExtractedText,
    PlainTextExtractor,
    ScriptAnalyzer,
    TextExtractor,
    analyze,
    analyze_document,
)
from scriptlens.config import ScriptLensSettings, get_logger, get_settings  # noqa: E402
from scriptlens.exceptions import EmptyDocumentError, ScriptLensError  # noqa: E402
from scriptlens.parser import (  # noqa: E402
    AnalysisResult,
    AnalysisWarning,
    DialogueEntry,
    Interaction,
    Scene,
    Summary,
    TimeOfDay,
)

__all__ = [
    "AnalysisResult",
    "AnalysisWarning",
    "DialogueEntry",
    "EmptyDocumentError",
    "ExtractedText",
    "Interaction",
    "PlainTextExtractor",
    "Scene",
    "ScriptAnalyzer",
    "ScriptLensError",
    "ScriptLensSettings",
    "Summary",
    "TextExtractor",
    "TimeOfDay",
    "__version__",
    "analyze",
    "analyze_document",
    "get_logger",
    "get_settings",
]
