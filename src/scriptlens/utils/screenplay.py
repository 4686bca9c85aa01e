"""Screenplay-specific utility functions."""

from __future__ import annotations

from collections.abc import Iterator

from scriptlens.parser.constants import (
    LOCATION_PATTERN,
    SCENE_HEADING_PATTERN,
    TIME_OF_DAY_PATTERN,
)
from scriptlens.parser.models import TimeOfDay


class ScreenplayUtils:
    """Utility functions for screenplay processing."""

    @staticmethod
    def is_scene_heading(line: str) -> bool:
        """Return True when the line is an INT./EXT. slug line."""
        return bool(line) and SCENE_HEADING_PATTERN.match(line) is not None

    @staticmethod
    def extract_location(heading: str) -> str:
        """Extract location from scene heading.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Text between the slug and the first dash separator, or an empty
            string when the heading carries no location
        """
        if not heading:
            return ""
        match = LOCATION_PATTERN.match(heading.strip())
        return match.group(1).strip() if match else ""

    @staticmethod
    def extract_time_of_day(heading: str) -> TimeOfDay:
        """Extract time of day from scene heading.

        The first vocabulary keyword found anywhere in the heading wins.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Matching TimeOfDay, or TimeOfDay.UNSPECIFIED
        """
        if not heading:
            return TimeOfDay.UNSPECIFIED
        match = TIME_OF_DAY_PATTERN.search(heading)
        if not match:
            return TimeOfDay.UNSPECIFIED
        keyword = " ".join(match.group(1).upper().split())
        return TimeOfDay(keyword)

    @staticmethod
    def parse_scene_heading(heading: str) -> tuple[str, TimeOfDay]:
        """Parse a scene heading into its components.

        Returns:
            Tuple of (location, time_of_day)
        """
        return (
            ScreenplayUtils.extract_location(heading),
            ScreenplayUtils.extract_time_of_day(heading),
        )

    @staticmethod
    def iter_lines(text: str) -> Iterator[tuple[int, str]]:
        """Yield (line_number, trimmed_line) for every non-empty line.

        Line numbers are 1-based positions in the original stream, so blank
        lines still advance the counter.
        """
        for index, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip()
            if line:
                yield index, line
