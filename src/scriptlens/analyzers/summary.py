"""Scalar statistics over a parsed screenplay."""

from __future__ import annotations

import math
from collections.abc import Sequence

from scriptlens.parser.models import DialogueEntry, Interaction, Scene, Summary


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, unlike Python's banker's rounding."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def summarize(
    script_name: str,
    scenes: Sequence[Scene],
    characters: Sequence[str],
    dialogues: Sequence[DialogueEntry],
    interactions: Sequence[Interaction],
) -> Summary:
    """Compute the summary statistics for one analysis.

    Averages are per scene and fall back to 0 when there are no scenes.
    """
    total_scenes = len(scenes)
    average_dialogues = 0.0
    characters_per_scene = 0.0
    average_length = 0
    if total_scenes:
        average_dialogues = round_half_up(len(dialogues) / total_scenes, 2)
        characters_per_scene = round_half_up(
            sum(len(scene.characters) for scene in scenes) / total_scenes, 2
        )
        average_length = int(
            round_half_up(sum(len(scene.content) for scene in scenes) / total_scenes)
        )

    return Summary(
        script_name=script_name,
        total_scenes=total_scenes,
        total_characters=len(characters),
        total_dialogues=len(dialogues),
        total_interactions=len(interactions),
        average_dialogues_per_scene=average_dialogues,
        characters_per_scene=characters_per_scene,
        average_scene_length=average_length,
    )
