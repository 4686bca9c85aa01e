"""Heuristic tables used by the screenplay line classifier.

Everything the classifier keys on lives here so the heuristics can be tuned
without touching control flow.
"""

from __future__ import annotations

import re

# Scene headings: optional leading scene number, then the slug
SCENE_HEADING_PATTERN = re.compile(
    r"^(?:\d+\s+)?(INT\.|EXT\.|INTERIOR|EXTERIOR)\s+(.+)", re.IGNORECASE
)

# Location runs from after the slug to the first dash separator
LOCATION_PATTERN = re.compile(
    r"^(?:\d+\s+)?(?:INT\.|EXT\.|INTERIOR|EXTERIOR)\s+(.+?)(?:\s+-\s+|\s+–\s+|$)",
    re.IGNORECASE,
)

# Ordered vocabulary; UNSPECIFIED is the fallback and never matched
TIME_OF_DAY_KEYWORDS: tuple[str, ...] = (
    "DAY",
    "NIGHT",
    "MORNING",
    "AFTERNOON",
    "EVENING",
    "DAWN",
    "DUSK",
    "CONTINUOUS",
    "LATER",
    "SAME TIME",
)

TIME_OF_DAY_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(k) for k in TIME_OF_DAY_KEYWORDS) + r")\b",
    re.IGNORECASE,
)

# "NAME: dialogue" on one line
DIALOGUE_CUE_PATTERN = re.compile(r"^([A-Z][A-Z\s'().-]{1,49}):\s*(.*)")
DIALOGUE_CUE_MAX_LINE_LENGTH = 200

# Bare uppercase cue without punctuation
CUE_ALONE_PATTERN = re.compile(r"^[A-Z'\s]+$")
CUE_ALONE_MIN_LENGTH = 3
CUE_ALONE_MAX_LENGTH = 29

# Uppercase cue that may carry parentheticals or periods
CUE_EXTENDED_PATTERN = re.compile(r"^[A-Z][A-Z\s'().]+$")
CUE_EXTENDED_MAX_LENGTH = 49

# One parenthetical aside such as (O.S.) or (CONT'D)
PARENTHETICAL_PATTERN = re.compile(r"\s*\(.*?\)")
WHITESPACE_RUN_PATTERN = re.compile(r"\s+")

CHARACTER_NAME_MIN_LENGTH = 2
CHARACTER_NAME_MAX_LENGTH = 49

DIALOGUE_CUE_STOPLIST: frozenset[str] = frozenset(
    {
        "INT",
        "EXT",
        "FADE",
        "CUT",
        "INTERIOR",
        "EXTERIOR",
        "SCENE",
        "THE",
        "AND",
        "OR",
        "TO",
        "IN",
        "ON",
        "AT",
        "TIME",
        "PLACE",
        "LOCATION",
        "CONT",
        "CONTINUED",
        "MORE",
    }
)

CUE_ALONE_STOPLIST: frozenset[str] = frozenset(
    {"THE", "AND", "OR", "TO", "IN", "ON", "AT", "FADE", "CUT", "INT", "EXT"}
)
