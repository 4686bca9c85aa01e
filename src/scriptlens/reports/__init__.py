"""Text report rendering for analysis results."""

from scriptlens.reports.text_report import (
    render_all,
    render_characters,
    render_dialogues,
    render_interactions,
    render_scenes,
)
from scriptlens.reports.writer import ReportWriter

__all__ = [
    "ReportWriter",
    "render_all",
    "render_characters",
    "render_dialogues",
    "render_interactions",
    "render_scenes",
]
