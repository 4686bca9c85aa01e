"""Per-character dialogue statistics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from scriptlens.parser.models import CharacterStats, DialogueEntry


def build_character_stats(
    characters: Sequence[str], dialogues: Iterable[DialogueEntry]
) -> tuple[CharacterStats, ...]:
    """Count dialogue lines and speaking scenes for every registered character.

    Characters that never speak are included with zero counts. Output follows
    the order of ``characters``.
    """
    counts: dict[str, int] = dict.fromkeys(characters, 0)
    scenes: dict[str, list[int]] = {name: [] for name in characters}
    for entry in dialogues:
        if entry.character not in counts:
            continue
        counts[entry.character] += 1
        if entry.scene_number not in scenes[entry.character]:
            scenes[entry.character].append(entry.scene_number)

    return tuple(
        CharacterStats(
            name=name, dialogue_count=counts[name], scenes=tuple(scenes[name])
        )
        for name in characters
    )
