"""Post-pass analyzers over a parsed screenplay."""

from scriptlens.analyzers.character_stats import build_character_stats
from scriptlens.analyzers.interactions import (
    InteractionGraphBuilder,
    build_interactions,
    group_speakers_by_scene,
)
from scriptlens.analyzers.summary import round_half_up, summarize

__all__ = [
    "InteractionGraphBuilder",
    "build_character_stats",
    "build_interactions",
    "group_speakers_by_scene",
    "round_half_up",
    "summarize",
]
