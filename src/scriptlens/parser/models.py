"""Data models for screenplay structure analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TimeOfDay(str, Enum):
    """Time of day vocabulary recognized in scene headings."""

    DAY = "DAY"
    NIGHT = "NIGHT"
    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    EVENING = "EVENING"
    DAWN = "DAWN"
    DUSK = "DUSK"
    CONTINUOUS = "CONTINUOUS"
    LATER = "LATER"
    SAME_TIME = "SAME TIME"
    UNSPECIFIED = "UNSPECIFIED"


class LineKind(str, Enum):
    """Classification assigned to a single screenplay line."""

    SCENE_HEADING = "scene_heading"
    CHARACTER_CUE_WITH_DIALOGUE = "character_cue_with_dialogue"
    CHARACTER_CUE = "character_cue"
    ACTION = "action"


class AnalysisWarning(str, Enum):
    """Non-fatal conditions reported alongside an analysis result."""

    NO_SCENES_FOUND = "no_scenes_found"


@dataclass(frozen=True)
class LineClassification:
    """Result of classifying one trimmed, non-empty line."""

    kind: LineKind
    text: str
    location: str | None = None
    time_of_day: TimeOfDay | None = None
    character: str | None = None
    dialogue: str | None = None


@dataclass(frozen=True)
class Scene:
    """Represents a scene in a screenplay."""

    number: int
    heading: str
    location: str = ""
    time_of_day: TimeOfDay = TimeOfDay.UNSPECIFIED
    action_text: str = ""
    characters: tuple[str, ...] = ()
    dialogue_lines: tuple[str, ...] = ()

    @property
    def content(self) -> str:
        """Action text and dialogue joined for full-text search."""
        return f"{self.action_text}\n{' '.join(self.dialogue_lines)}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the scene with stable field names."""
        return {
            "number": self.number,
            "heading": self.heading,
            "location": self.location,
            "time_of_day": self.time_of_day.value,
            "action_text": self.action_text,
            "characters": list(self.characters),
            "dialogue_lines": list(self.dialogue_lines),
            "content": self.content,
        }


@dataclass(frozen=True)
class DialogueEntry:
    """Represents one line of dialogue in the dialogue index."""

    scene_number: int
    character: str
    text: str
    source_line_number: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize the entry with stable field names."""
        return {
            "scene_number": self.scene_number,
            "character": self.character,
            "text": self.text,
            "source_line_number": self.source_line_number,
        }


@dataclass(frozen=True)
class Interaction:
    """Co-occurrence of two speaking characters across scenes."""

    character_a: str
    character_b: str
    scenes: tuple[int, ...] = ()

    @property
    def count(self) -> int:
        """Number of scenes in which both characters spoke."""
        return len(self.scenes)

    @property
    def key(self) -> tuple[str, str]:
        """Stable unordered-pair key."""
        return (self.character_a, self.character_b)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the interaction with stable field names."""
        return {
            "character_a": self.character_a,
            "character_b": self.character_b,
            "scenes": list(self.scenes),
            "count": self.count,
        }


@dataclass(frozen=True)
class CharacterStats:
    """Per-character dialogue statistics."""

    name: str
    dialogue_count: int = 0
    scenes: tuple[int, ...] = ()

    @property
    def scene_count(self) -> int:
        """Number of distinct scenes the character spoke in."""
        return len(self.scenes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the statistics with stable field names."""
        return {
            "name": self.name,
            "dialogue_count": self.dialogue_count,
            "scenes": list(self.scenes),
            "scene_count": self.scene_count,
        }


@dataclass(frozen=True)
class Summary:
    """Scalar statistics derived from a parsed screenplay."""

    script_name: str
    total_scenes: int = 0
    total_characters: int = 0
    total_dialogues: int = 0
    total_interactions: int = 0
    average_dialogues_per_scene: float = 0
    characters_per_scene: float = 0
    average_scene_length: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize the summary with stable field names."""
        return {
            "script_name": self.script_name,
            "total_scenes": self.total_scenes,
            "total_characters": self.total_characters,
            "total_dialogues": self.total_dialogues,
            "total_interactions": self.total_interactions,
            "average_dialogues_per_scene": self.average_dialogues_per_scene,
            "characters_per_scene": self.characters_per_scene,
            "average_scene_length": self.average_scene_length,
        }


@dataclass(frozen=True)
class ParsedScreenplay:
    """Raw output of the scene accumulator."""

    scenes: tuple[Scene, ...] = ()
    characters: tuple[str, ...] = ()
    dialogues: tuple[DialogueEntry, ...] = ()
    line_count: int = 0


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis of one screenplay document."""

    script_name: str
    scenes: tuple[Scene, ...]
    characters: tuple[str, ...]
    dialogues: tuple[DialogueEntry, ...]
    interactions: tuple[Interaction, ...]
    summary: Summary
    warnings: tuple[AnalysisWarning, ...] = field(default_factory=tuple)
    page_count: int | None = None
    character_count: int | None = None

    @property
    def no_scenes_found(self) -> bool:
        """True when the text contained no scene headings."""
        return AnalysisWarning.NO_SCENES_FOUND in self.warnings

    def to_dict(self) -> dict[str, Any]:
        """Serialize the whole result with stable field names."""
        return {
            "script_name": self.script_name,
            "scenes": [scene.to_dict() for scene in self.scenes],
            "characters": list(self.characters),
            "dialogues": [entry.to_dict() for entry in self.dialogues],
            "interactions": [i.to_dict() for i in self.interactions],
            "summary": self.summary.to_dict(),
            "warnings": [w.value for w in self.warnings],
            "page_count": self.page_count,
            "character_count": self.character_count,
        }
