"""Tests for scene accumulation and the dialogue index."""

import pytest

from scriptlens.parser.accumulator import (
    AccumulatorState,
    SceneAccumulator,
    parse_screenplay,
)
from scriptlens.parser.models import DialogueEntry, LineKind, TimeOfDay
from scriptlens.parser.registry import CharacterRegistry


class TestSceneAccumulator:
    """Line-by-line behavior of the accumulator."""

    def test_starts_without_open_scene(self):
        """Test the initial state."""
        accumulator = SceneAccumulator()
        assert accumulator.state is AccumulatorState.NO_OPEN_SCENE
        assert accumulator.closed_scene_count == 0

    def test_blank_lines_are_ignored(self):
        """Test that feed returns None for whitespace-only lines."""
        accumulator = SceneAccumulator()
        assert accumulator.feed(1, "   ") is None
        assert accumulator.finish().scenes == ()

    def test_heading_opens_scene(self):
        """Test the state transition on a scene heading."""
        accumulator = SceneAccumulator()
        result = accumulator.feed(1, "INT. HOUSE - DAY")
        assert result.kind is LineKind.SCENE_HEADING
        assert accumulator.state is AccumulatorState.SCENE_OPEN
        assert accumulator.closed_scene_count == 0

    def test_second_heading_closes_first(self):
        """Test that scenes are numbered when they close."""
        accumulator = SceneAccumulator()
        accumulator.feed(1, "INT. HOUSE - DAY")
        accumulator.feed(2, "EXT. YARD - NIGHT")
        assert accumulator.closed_scene_count == 1

        parsed = accumulator.finish()
        assert [s.number for s in parsed.scenes] == [1, 2]
        assert parsed.scenes[1].time_of_day is TimeOfDay.NIGHT

    def test_dialogue_stamped_with_open_scene_number(self):
        """Test that dialogue gets the number its scene will close with."""
        accumulator = SceneAccumulator()
        accumulator.feed(1, "INT. A - DAY")
        accumulator.feed(2, "EXT. B - DAY")
        accumulator.feed(3, "JOHN: Hi.")
        parsed = accumulator.finish()

        assert parsed.dialogues == (
            DialogueEntry(
                scene_number=2, character="JOHN", text="Hi.", source_line_number=3
            ),
        )
        assert parsed.scenes[1].dialogue_lines == ("Hi.",)
        assert parsed.scenes[0].dialogue_lines == ()

    def test_pre_scene_dialogue_is_dropped(self):
        """Test that dialogue before the first heading is not indexed."""
        accumulator = SceneAccumulator()
        accumulator.feed(1, "NARRATOR: Once upon a time.")
        accumulator.feed(2, "INT. CASTLE - NIGHT")
        accumulator.feed(3, "KING: Who goes there?")
        parsed = accumulator.finish()

        assert parsed.characters == ("KING", "NARRATOR")
        assert [d.character for d in parsed.dialogues] == ["KING"]
        assert parsed.scenes[0].characters == ("KING",)

    def test_bare_cue_registers_without_dialogue(self):
        """Test that a cue alone adds a character but no dialogue entry."""
        parsed = parse_screenplay("INT. ROOM - DAY\nJOHN\nHello there.")
        assert parsed.characters == ("JOHN",)
        assert parsed.dialogues == ()
        assert parsed.scenes[0].characters == ("JOHN",)
        assert parsed.scenes[0].action_text == "Hello there."

    def test_empty_dialogue_cue_registers_without_entry(self):
        """Test that NAME: with nothing after it adds no dialogue."""
        parsed = parse_screenplay("INT. ROOM - DAY\nJOHN:")
        assert parsed.characters == ("JOHN",)
        assert parsed.dialogues == ()
        assert parsed.scenes[0].dialogue_lines == ()

    def test_scene_characters_keep_first_seen_order(self):
        """Test per-scene character order and deduplication."""
        parsed = parse_screenplay(
            "INT. ROOM - DAY\nZED: One.\nANNA: Two.\nZED: Three."
        )
        assert parsed.scenes[0].characters == ("ZED", "ANNA")
        assert parsed.characters == ("ANNA", "ZED")

    def test_action_lines_joined_with_spaces(self):
        """Test action text concatenation."""
        parsed = parse_screenplay("INT. ROOM - DAY\nRain falls.\n\nA door opens.")
        assert parsed.scenes[0].action_text == "Rain falls. A door opens."

    def test_heading_without_body(self):
        """Test a scene with nothing but its heading."""
        parsed = parse_screenplay("INT. ROOM - DAY")
        scene = parsed.scenes[0]
        assert scene.action_text == ""
        assert scene.characters == ()
        assert scene.content == "\n"

    def test_no_headings_gives_no_scenes(self):
        """Test a document without any scene heading."""
        parsed = parse_screenplay("JOHN: Hi.\nMARY: Hello.")
        assert parsed.scenes == ()
        assert parsed.dialogues == ()
        assert parsed.characters == ("JOHN", "MARY")

    def test_source_line_numbers_count_blank_lines(self):
        """Test that line numbers refer to the original stream."""
        parsed = parse_screenplay("INT. ROOM - DAY\n\n\nJOHN: Hi.")
        assert parsed.dialogues[0].source_line_number == 4
        assert parsed.line_count == 4

    def test_windows_line_endings(self):
        """Test that carriage returns are trimmed with the line."""
        parsed = parse_screenplay("INT. ROOM - DAY\r\nJOHN: Hi.\r\n")
        assert parsed.dialogues[0].text == "Hi."

    def test_cue_name_normalized_once(self):
        """Test that only the first parenthetical is stripped from a cue."""
        parsed = parse_screenplay("INT. HOUSE - DAY\nBOB (V.O.) (CONT'D): Hello")
        assert parsed.characters == ("BOB (CONT'D)",)
        assert parsed.scenes[0].characters == ("BOB (CONT'D)",)
        assert parsed.dialogues == (
            DialogueEntry(
                scene_number=1,
                character="BOB (CONT'D)",
                text="Hello",
                source_line_number=2,
            ),
        )

    def test_short_name_with_two_parentheticals_keeps_dialogue(self):
        """Test that a valid cue is never demoted to action."""
        parsed = parse_screenplay("INT. HOUSE - DAY\nX (A) (B): Hello")
        assert parsed.characters == ("X (B)",)
        assert [d.text for d in parsed.dialogues] == ["Hello"]
        assert parsed.scenes[0].action_text == ""

    def test_registered_name_matches_classification(self):
        """Test that the registry stores the name the classifier reported."""
        accumulator = SceneAccumulator()
        accumulator.feed(1, "INT. HOUSE - DAY")
        classification = accumulator.feed(2, "ANNA (O.S.) (CONT'D): Wait!")
        assert classification.character in accumulator.registry

    def test_transitions_register_as_characters(self):
        """Test that upper-case transitions are cues under the layout rules."""
        parsed = parse_screenplay("INT. HOUSE - DAY\nCUT TO:\nFADE OUT.")
        assert parsed.characters == ("CUT TO", "FADE OUT.")
        assert parsed.scenes[0].characters == ("CUT TO", "FADE OUT.")
        assert parsed.dialogues == ()

    def test_supplied_empty_registry_is_used(self):
        """Test that an injected registry receives the names."""
        registry = CharacterRegistry()
        accumulator = SceneAccumulator(registry=registry)
        accumulator.feed(1, "INT. HOUSE - DAY")
        accumulator.feed(2, "JOHN: Hi.")
        assert accumulator.registry is registry
        assert "JOHN" in registry


class TestSampleScreenplay:
    """End-to-end parsing of the sample fixture."""

    @pytest.fixture
    def parsed(self, sample_script_text):
        """Parse the sample screenplay once per test."""
        return parse_screenplay(sample_script_text)

    def test_scene_count_and_numbers(self, parsed):
        """Test that all four scenes are found in order."""
        assert [s.number for s in parsed.scenes] == [1, 2, 3, 4]

    def test_scene_headings(self, parsed):
        """Test locations and times of day."""
        fields = [(s.location, s.time_of_day) for s in parsed.scenes]
        assert fields == [
            ("DINER", TimeOfDay.NIGHT),
            ("PARKING LOT", TimeOfDay.CONTINUOUS),
            ("DINER", TimeOfDay.LATER),
            ("HIGHWAY", TimeOfDay.DAWN),
        ]
        assert parsed.scenes[0].heading == "1 INT. DINER - NIGHT"

    def test_title_page_is_discarded(self, parsed):
        """Test that nothing before the first heading leaks into scenes."""
        assert "Written by" not in parsed.scenes[0].action_text

    def test_first_scene(self, parsed):
        """Test the contents of the first scene."""
        scene = parsed.scenes[0]
        assert scene.characters == ("MARGO", "EDDIE")
        assert scene.dialogue_lines == (
            "Coffee's on the house tonight.",
            "You say that every night.",
        )
        assert scene.action_text == (
            "Rain streaks the windows. The neon sign buzzes. "
            "Eddie slides into a booth. (sighing) Only for you."
        )

    def test_closing_scenes(self, parsed):
        """Test the action text and cast of the last two scenes."""
        assert parsed.scenes[2].action_text == ""
        assert parsed.scenes[2].characters == ("MARGO", "EDDIE", "SAL")
        assert parsed.scenes[3].action_text == "The truck disappears into the fog."
        assert parsed.scenes[3].characters == ()

    def test_characters(self, parsed):
        """Test the sorted character registry."""
        assert parsed.characters == ("EDDIE", "MARGO", "SAL")

    def test_dialogue_index(self, parsed):
        """Test scene numbers and source lines of every dialogue entry."""
        index = [
            (d.scene_number, d.character, d.source_line_number)
            for d in parsed.dialogues
        ]
        assert index == [
            (1, "MARGO", 9),
            (1, "EDDIE", 10),
            (2, "EDDIE", 18),
            (3, "MARGO", 21),
            (3, "EDDIE", 22),
            (3, "SAL", 23),
        ]

    def test_dialogue_scene_numbers_are_valid(self, parsed):
        """Test that every entry points at an existing scene."""
        numbers = {s.number for s in parsed.scenes}
        assert all(d.scene_number in numbers for d in parsed.dialogues)
