"""Scene accumulation over a stream of classified screenplay lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from scriptlens.config import get_logger
from scriptlens.parser.classifier import LineClassifier
from scriptlens.parser.models import (
    DialogueEntry,
    LineClassification,
    LineKind,
    ParsedScreenplay,
    Scene,
    TimeOfDay,
)
from scriptlens.parser.registry import CharacterRegistry
from scriptlens.utils.screenplay import ScreenplayUtils

logger = get_logger(__name__)


class AccumulatorState(str, Enum):
    """Whether a scene is currently collecting lines."""

    NO_OPEN_SCENE = "no_open_scene"
    SCENE_OPEN = "scene_open"


@dataclass
class _SceneBuffer:
    """Mutable working copy of the scene being read."""

    heading: str = ""
    location: str = ""
    time_of_day: TimeOfDay = TimeOfDay.UNSPECIFIED
    action_parts: list[str] = field(default_factory=list)
    characters: list[str] = field(default_factory=list)
    dialogue_lines: list[str] = field(default_factory=list)

    def add_character(self, name: str) -> None:
        if name not in self.characters:
            self.characters.append(name)

    def close(self, number: int) -> Scene:
        return Scene(
            number=number,
            heading=self.heading,
            location=self.location,
            time_of_day=self.time_of_day,
            action_text=" ".join(self.action_parts).strip(),
            characters=tuple(self.characters),
            dialogue_lines=tuple(self.dialogue_lines),
        )


class SceneAccumulator:
    """Build scenes, the dialogue index and the character registry.

    Scenes receive their number when they close, not when they open. A
    dialogue entry is stamped with ``closed scene count + 1`` at the moment it
    is read, which is exactly the number its scene will get on closing.

    Lines read before the first scene heading go to a pre-scene buffer that is
    discarded; title pages and cast lists usually sit there. Cue lines in that
    region still register characters, but their dialogue is dropped because
    there is no scene to attach it to.
    """

    def __init__(
        self,
        classifier: LineClassifier | None = None,
        registry: CharacterRegistry | None = None,
    ) -> None:
        """Create an accumulator with fresh private collections."""
        self.classifier = classifier or LineClassifier()
        self.registry = registry if registry is not None else CharacterRegistry()
        self.state = AccumulatorState.NO_OPEN_SCENE
        self._scenes: list[Scene] = []
        self._dialogues: list[DialogueEntry] = []
        self._current = _SceneBuffer()
        self._pre_scene = _SceneBuffer()
        self._line_count = 0
        self._dropped_dialogues = 0

    @property
    def closed_scene_count(self) -> int:
        """Number of scenes finalized so far."""
        return len(self._scenes)

    def feed(self, line_number: int, raw_line: str) -> LineClassification | None:
        """Classify and accumulate one line.

        Args:
            line_number: 1-based position of the line in the source stream
            raw_line: Untrimmed line text; blank lines are ignored

        Returns:
            The classification applied, or None for blank lines
        """
        line = raw_line.strip()
        if not line:
            return None
        self._line_count = max(self._line_count, line_number)

        classification = self.classifier.classify(line)
        if classification.kind is LineKind.SCENE_HEADING:
            self._open_scene(classification)
        elif classification.character is not None:
            self._add_cue(line_number, classification)
        else:
            self._buffer.action_parts.append(line)
        return classification

    def finish(self) -> ParsedScreenplay:
        """Close any open scene and return the accumulated collections."""
        self._close_scene()
        if self._dropped_dialogues:
            logger.debug(
                "Dropped dialogue read before the first scene heading",
                dropped=self._dropped_dialogues,
            )
        return ParsedScreenplay(
            scenes=tuple(self._scenes),
            characters=self.registry.names(),
            dialogues=tuple(self._dialogues),
            line_count=self._line_count,
        )

    @property
    def _buffer(self) -> _SceneBuffer:
        if self.state is AccumulatorState.SCENE_OPEN:
            return self._current
        return self._pre_scene

    def _open_scene(self, classification: LineClassification) -> None:
        self._close_scene()
        self._current = _SceneBuffer(
            heading=classification.text,
            location=classification.location or "",
            time_of_day=classification.time_of_day or TimeOfDay.UNSPECIFIED,
        )
        self.state = AccumulatorState.SCENE_OPEN

    def _close_scene(self) -> None:
        if self.state is not AccumulatorState.SCENE_OPEN:
            return
        self._scenes.append(self._current.close(self.closed_scene_count + 1))
        self._current = _SceneBuffer()
        self.state = AccumulatorState.NO_OPEN_SCENE

    def _add_cue(self, line_number: int, classification: LineClassification) -> None:
        # The classifier already normalized and accepted the name
        name = classification.character or ""
        self.registry.add(name)
        self._buffer.add_character(name)

        if not classification.dialogue:
            return
        if self.state is not AccumulatorState.SCENE_OPEN:
            self._dropped_dialogues += 1
            return
        self._current.dialogue_lines.append(classification.dialogue)
        self._dialogues.append(
            DialogueEntry(
                scene_number=self.closed_scene_count + 1,
                character=name,
                text=classification.dialogue,
                source_line_number=line_number,
            )
        )


def parse_screenplay(text: str) -> ParsedScreenplay:
    """Run the classifier and accumulator over a whole document.

    Args:
        text: Extracted screenplay text; lines are separated by newlines

    Returns:
        Scenes, sorted character names and the dialogue index
    """
    accumulator = SceneAccumulator()
    for line_number, line in ScreenplayUtils.iter_lines(text):
        accumulator.feed(line_number, line)
    return accumulator.finish()
