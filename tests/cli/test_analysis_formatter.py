"""Tests for CLI output formatters."""

import json

import pytest
from rich.console import Console

from scriptlens.api.analyze import analyze
from scriptlens.cli.formatters import AnalysisFormatter, JsonFormatter, OutputFormat
from scriptlens.parser.models import TimeOfDay


@pytest.fixture
def formatter():
    """Formatter writing to a non-terminal console."""
    return AnalysisFormatter(Console(force_terminal=False))


class TestAnalysisFormatter:
    """Tests for AnalysisFormatter."""

    def test_text(self, formatter, sample_script_text):
        """Test the summary text."""
        text = formatter.format(analyze(sample_script_text, "Last Shift"))
        assert "Scenes: 4" in text
        assert "Avg dialogues per scene: 1.5" in text
        assert "Warning" not in text

    def test_text_warns_without_scenes(self, formatter):
        """Test the missing-heading warning."""
        text = formatter.format(analyze("JOHN: Hi.", "Notes"))
        assert "no scene headings" in text

    def test_table(self, formatter, sample_script_text):
        """Test the scene table rendering."""
        table = formatter.format(
            analyze(sample_script_text, "Last Shift"), OutputFormat.TABLE
        )
        assert "HIGHWAY" in table
        assert "MARGO, EDDIE, SAL" in table

    def test_json(self, formatter, sample_script_text):
        """Test that JSON output is the serialized result."""
        result = analyze(sample_script_text, "Last Shift")
        data = json.loads(formatter.format(result, OutputFormat.JSON))
        assert data == result.to_dict()


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_dict(self):
        """Test plain dictionaries."""
        assert json.loads(JsonFormatter().format({"a": 1})) == {"a": 1}

    def test_nested_result_objects(self, sample_script_text, tmp_path):
        """Test that scenes, enums and paths inside a mapping are converted."""
        result = analyze(sample_script_text, "Last Shift")
        data = json.loads(
            JsonFormatter().format(
                {
                    "scene": result.scenes[0],
                    "time": TimeOfDay.NIGHT,
                    "report_dir": tmp_path,
                }
            )
        )
        assert data["scene"] == result.scenes[0].to_dict()
        assert data["time"] == "NIGHT"
        assert data["report_dir"] == str(tmp_path)

    def test_non_ascii_names_kept(self):
        """Test that accented names are not escaped."""
        assert '"JOSÉ"' in JsonFormatter().format(["JOSÉ"])

    def test_rejects_other_formats(self):
        """Test that only JSON output is supported."""
        with pytest.raises(ValueError):
            JsonFormatter().format({}, OutputFormat.TABLE)

    def test_unknown_objects_fail(self):
        """Test that arbitrary objects are not silently stringified."""
        with pytest.raises(TypeError):
            JsonFormatter().format({"value": object()})
