"""Character co-occurrence graph derived from the dialogue index.

Two characters interact in a scene when both of them speak in it. Mentions
in action lines and silent cues do not count.
"""

from __future__ import annotations

from collections.abc import Iterable

from scriptlens.config import get_logger
from scriptlens.parser.models import DialogueEntry, Interaction

logger = get_logger(__name__)


def _pair_key(first: str, second: str) -> tuple[str, str]:
    """Return the unordered pair as a lexicographically sorted tuple."""
    return (first, second) if first < second else (second, first)


class InteractionGraphBuilder:
    """Accumulate pairwise co-occurrence, one scene at a time.

    Pairs keep the order in which they were first seen.
    """

    def __init__(self) -> None:
        """Create an empty graph."""
        self._scenes_by_pair: dict[tuple[str, str], list[int]] = {}

    def add_scene(self, scene_number: int, speakers: Iterable[str]) -> None:
        """Record every pair of distinct speakers in one scene.

        Args:
            scene_number: Number of the scene being processed
            speakers: Speaking characters in order of first utterance
        """
        distinct = list(dict.fromkeys(speakers))
        for i in range(len(distinct)):
            for j in range(i + 1, len(distinct)):
                key = _pair_key(distinct[i], distinct[j])
                self._scenes_by_pair.setdefault(key, []).append(scene_number)

    def build(self) -> tuple[Interaction, ...]:
        """Return the interactions recorded so far."""
        return tuple(
            Interaction(character_a=a, character_b=b, scenes=tuple(scenes))
            for (a, b), scenes in self._scenes_by_pair.items()
        )


def group_speakers_by_scene(
    dialogues: Iterable[DialogueEntry],
) -> dict[int, list[str]]:
    """Distinct speakers per scene, both in first-seen order."""
    grouped: dict[int, list[str]] = {}
    for entry in dialogues:
        speakers = grouped.setdefault(entry.scene_number, [])
        if entry.character not in speakers:
            speakers.append(entry.character)
    return grouped


def build_interactions(
    dialogues: Iterable[DialogueEntry],
) -> tuple[Interaction, ...]:
    """Derive character interactions from the dialogue index.

    Args:
        dialogues: Dialogue entries in document order

    Returns:
        One Interaction per unordered pair of characters who spoke in at least
        one common scene
    """
    builder = InteractionGraphBuilder()
    for scene_number, speakers in group_speakers_by_scene(dialogues).items():
        builder.add_scene(scene_number, speakers)
    interactions = builder.build()
    logger.debug("Built interaction graph", interactions=len(interactions))
    return interactions
