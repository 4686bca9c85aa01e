"""Human-readable text dumps of an analysis result."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from scriptlens.analyzers.character_stats import build_character_stats
from scriptlens.parser.models import AnalysisResult, DialogueEntry, Interaction, Scene

SEPARATOR = "=" * 80


def _timestamp(generated_at: datetime | None) -> str:
    return (generated_at or datetime.now(UTC)).isoformat()


def _header(
    script_name: str, title: str, count_line: str, generated_at: datetime | None
) -> str:
    return (
        f"{script_name.upper()} - {title}\n"
        f"{count_line}\n"
        f"Analysis timestamp: {_timestamp(generated_at)}\n"
        f"{SEPARATOR}\n\n"
    )


def render_scenes(
    script_name: str, scenes: Sequence[Scene], generated_at: datetime | None = None
) -> str:
    """Render every scene with its heading, action, cast and dialogue."""
    parts = [
        _header(
            script_name,
            "ALL SCENES COMPLETE",
            f"Complete extraction of all {len(scenes)} scenes",
            generated_at,
        )
    ]
    for scene in scenes:
        characters = ", ".join(scene.characters) if scene.characters else "None"
        dialogue = " | ".join(scene.dialogue_lines) if scene.dialogue_lines else "None"
        parts.append(
            f"SCENE {scene.number}:\n"
            f"{'-' * 40}\n"
            f"Scene Name: {scene.heading}\n"
            f"Location: {scene.location}\n"
            f"Time of Day: {scene.time_of_day.value}\n"
            f"Scene Action: {scene.action_text}\n"
            f"Characters: {characters}\n"
            f"Dialogues: {dialogue}\n"
            f"Complete Content: {scene.content}\n"
            f"{SEPARATOR}\n\n"
        )
    return "".join(parts)


def render_dialogues(
    script_name: str,
    dialogues: Sequence[DialogueEntry],
    generated_at: datetime | None = None,
) -> str:
    """Render the dialogue index in document order."""
    parts = [
        _header(
            script_name,
            "ALL DIALOGUES COMPLETE",
            f"Complete extraction of all {len(dialogues)} dialogue entries",
            generated_at,
        )
    ]
    for index, entry in enumerate(dialogues, start=1):
        parts.append(
            f"DIALOGUE {index}:\n"
            f"{'-' * 30}\n"
            f"Scene: {entry.scene_number}\n"
            f"Character: {entry.character}\n"
            f"Line: {entry.text}\n"
            f"Source Line: {entry.source_line_number}\n"
            f"{SEPARATOR}\n\n"
        )
    return "".join(parts)


def render_characters(
    script_name: str,
    characters: Sequence[str],
    dialogues: Sequence[DialogueEntry],
    generated_at: datetime | None = None,
) -> str:
    """Render every registered character with dialogue and scene counts."""
    parts = [
        _header(
            script_name,
            "ALL CHARACTERS COMPLETE",
            f"Complete list of all {len(characters)} characters",
            generated_at,
        )
    ]
    stats_list = build_character_stats(characters, dialogues)
    for index, stats in enumerate(stats_list, start=1):
        parts.append(
            f"CHARACTER {index}: {stats.name}\n"
            f"{'-' * 30}\n"
            f"Total Dialogues: {stats.dialogue_count}\n"
            f"Appears in Scenes: {', '.join(str(n) for n in stats.scenes)}\n"
            f"Scene Count: {stats.scene_count}\n"
            f"{SEPARATOR}\n\n"
        )
    return "".join(parts)


def render_interactions(
    script_name: str,
    interactions: Sequence[Interaction],
    generated_at: datetime | None = None,
) -> str:
    """Render the character interaction pairs."""
    parts = [
        _header(
            script_name,
            "CHARACTER INTERACTIONS",
            f"Analysis of {len(interactions)} character interactions",
            generated_at,
        )
    ]
    for index, interaction in enumerate(interactions, start=1):
        parts.append(
            f"INTERACTION {index}:\n"
            f"{'-' * 30}\n"
            f"Characters: {interaction.character_a} & {interaction.character_b}\n"
            f"Scenes Together: {', '.join(str(n) for n in interaction.scenes)}\n"
            f"Interaction Count: {interaction.count}\n"
            f"{SEPARATOR}\n\n"
        )
    return "".join(parts)


def render_all(
    result: AnalysisResult, generated_at: datetime | None = None
) -> dict[str, str]:
    """Render all four reports keyed by their file name."""
    generated_at = generated_at or datetime.now(UTC)
    name = result.script_name
    return {
        "ALL_SCENES_COMPLETE.txt": render_scenes(name, result.scenes, generated_at),
        "ALL_DIALOGUES_COMPLETE.txt": render_dialogues(
            name, result.dialogues, generated_at
        ),
        "ALL_CHARACTERS_COMPLETE.txt": render_characters(
            name, result.characters, result.dialogues, generated_at
        ),
        "CHARACTER_INTERACTIONS.txt": render_interactions(
            name, result.interactions, generated_at
        ),
    }
