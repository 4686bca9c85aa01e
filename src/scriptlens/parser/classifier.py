"""Layout-based classification of individual screenplay lines.

Plain extracted screenplay text has no structural markup, so each line is
categorized purely from capitalization and punctuation conventions. Rules are
tried from the most specific to the most permissive and the first match wins;
later rules are looser supersets of earlier ones, so the order matters.

1. Scene heading (``INT.``/``EXT.`` slug line)
2. Character cue with inline dialogue (``NAME: text``)
3. Character cue alone (bare upper-case name)
4. Extended character cue (upper-case name with parentheticals or periods)
5. Action, the catch-all for everything else
"""

from __future__ import annotations

from scriptlens.parser.constants import (
    CUE_ALONE_MAX_LENGTH,
    CUE_ALONE_MIN_LENGTH,
    CUE_ALONE_PATTERN,
    CUE_ALONE_STOPLIST,
    CUE_EXTENDED_MAX_LENGTH,
    CUE_EXTENDED_PATTERN,
    DIALOGUE_CUE_MAX_LINE_LENGTH,
    DIALOGUE_CUE_PATTERN,
    DIALOGUE_CUE_STOPLIST,
)
from scriptlens.parser.models import LineClassification, LineKind
from scriptlens.parser.registry import CharacterRegistry
from scriptlens.utils.screenplay import ScreenplayUtils


class LineClassifier:
    """Stateless classifier for trimmed, non-empty screenplay lines.

    Classification has no side effects: cue rules return the normalized
    character name and leave registration to the caller.
    """

    def classify(self, line: str) -> LineClassification:
        """Classify one line.

        Args:
            line: A trimmed, non-empty line of screenplay text

        Returns:
            Exactly one classification with its extracted fields
        """
        line = line.strip()
        return (
            self._match_scene_heading(line)
            or self._match_dialogue_cue(line)
            or self._match_cue_alone(line)
            or self._match_cue_extended(line)
            or LineClassification(kind=LineKind.ACTION, text=line)
        )

    def _match_scene_heading(self, line: str) -> LineClassification | None:
        if not ScreenplayUtils.is_scene_heading(line):
            return None
        location, time_of_day = ScreenplayUtils.parse_scene_heading(line)
        return LineClassification(
            kind=LineKind.SCENE_HEADING,
            text=line,
            location=location,
            time_of_day=time_of_day,
        )

    def _match_dialogue_cue(self, line: str) -> LineClassification | None:
        if ":" not in line or len(line) >= DIALOGUE_CUE_MAX_LINE_LENGTH:
            return None
        match = DIALOGUE_CUE_PATTERN.match(line)
        if not match:
            return None
        name = CharacterRegistry.accept(match.group(1), DIALOGUE_CUE_STOPLIST)
        if name is None:
            return None
        return LineClassification(
            kind=LineKind.CHARACTER_CUE_WITH_DIALOGUE,
            text=line,
            character=name,
            dialogue=match.group(2).strip() or None,
        )

    def _match_cue_alone(self, line: str) -> LineClassification | None:
        if not CUE_ALONE_PATTERN.match(line):
            return None
        if not CUE_ALONE_MIN_LENGTH <= len(line) <= CUE_ALONE_MAX_LENGTH:
            return None
        name = CharacterRegistry.accept(line, CUE_ALONE_STOPLIST)
        if name is None:
            # Rejected stopwords are action, not candidates for rule 4
            return LineClassification(kind=LineKind.ACTION, text=line)
        return LineClassification(
            kind=LineKind.CHARACTER_CUE, text=line, character=name
        )

    def _match_cue_extended(self, line: str) -> LineClassification | None:
        if len(line) > CUE_EXTENDED_MAX_LENGTH or not CUE_EXTENDED_PATTERN.match(line):
            return None
        name = CharacterRegistry.accept(line)
        if name is None:
            return None
        return LineClassification(
            kind=LineKind.CHARACTER_CUE, text=line, character=name
        )


_default_classifier = LineClassifier()


def classify_line(line: str) -> LineClassification:
    """Classify a single line with the shared stateless classifier."""
    return _default_classifier.classify(line)
