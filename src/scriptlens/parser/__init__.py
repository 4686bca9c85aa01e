"""Screenplay structural parser for ScriptLens."""

from __future__ import annotations

from .accumulator import AccumulatorState, SceneAccumulator, parse_screenplay
from .classifier import LineClassifier, classify_line
from .models import (
    AnalysisResult,
    AnalysisWarning,
    CharacterStats,
    DialogueEntry,
    Interaction,
    LineClassification,
    LineKind,
    ParsedScreenplay,
    Scene,
    Summary,
    TimeOfDay,
)
from .registry import CharacterRegistry

__all__ = [
    "AccumulatorState",
    "AnalysisResult",
    "AnalysisWarning",
    "CharacterRegistry",
    "CharacterStats",
    "DialogueEntry",
    "Interaction",
    "LineClassification",
    "LineClassifier",
    "LineKind",
    "ParsedScreenplay",
    "Scene",
    "SceneAccumulator",
    "Summary",
    "TimeOfDay",
    "classify_line",
    "parse_screenplay",
]
