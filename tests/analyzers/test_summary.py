"""Tests for summary statistics."""

import pytest

from scriptlens.analyzers.summary import round_half_up, summarize
from scriptlens.parser.models import DialogueEntry, Scene


class TestRoundHalfUp:
    """Tests for half-up rounding."""

    @pytest.mark.parametrize(
        ("value", "digits", "expected"),
        [
            (2.5, 0, 3.0),
            (0.5, 0, 1.0),
            (1.4, 0, 1.0),
            (1.125, 2, 1.13),
            (0.0, 2, 0.0),
        ],
    )
    def test_rounding(self, value, digits, expected):
        """Test that halves round up instead of to even."""
        assert round_half_up(value, digits) == pytest.approx(expected)


class TestSummarize:
    """Tests for summarize."""

    def test_no_scenes_gives_zero_averages(self):
        """Test the zero-scene fallback."""
        summary = summarize("Untitled", [], ["JOHN"], [], [])
        assert summary.total_scenes == 0
        assert summary.total_characters == 1
        assert summary.average_dialogues_per_scene == 0
        assert summary.characters_per_scene == 0
        assert summary.average_scene_length == 0

    def test_average_scene_length_rounds_half_up(self):
        """Test that 2.5 rounds to 3."""
        scenes = [
            Scene(number=1, heading="INT. A", action_text="abc"),
            Scene(number=2, heading="INT. B"),
        ]
        # content lengths are 4 ("abc\n") and 1 ("\n")
        summary = summarize("Test", scenes, [], [], [])
        assert summary.average_scene_length == 3

    def test_two_decimal_averages(self):
        """Test dialogue and character averages."""
        scenes = [
            Scene(number=1, heading="INT. A", characters=("A", "B")),
            Scene(number=2, heading="INT. B", characters=("A",)),
            Scene(number=3, heading="INT. C"),
        ]
        dialogues = [
            DialogueEntry(
                scene_number=1, character="A", text="x", source_line_number=2
            ),
            DialogueEntry(
                scene_number=1, character="B", text="y", source_line_number=3
            ),
        ]
        summary = summarize("Test", scenes, ["A", "B"], dialogues, [])
        assert summary.average_dialogues_per_scene == pytest.approx(0.67)
        assert summary.characters_per_scene == 1.0
        assert summary.total_dialogues == 2

    def test_script_name_is_carried(self):
        """Test that the label is stored verbatim."""
        assert summarize("My Script", [], [], [], []).script_name == "My Script"

    def test_to_dict_has_no_timestamp(self):
        """Test that the summary is deterministic."""
        data = summarize("X", [], [], [], []).to_dict()
        assert "timestamp" not in data
        assert data["total_interactions"] == 0
