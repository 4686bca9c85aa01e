"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from scriptlens.config import ScriptLensSettings, clear_settings_cache, set_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "screenplays"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test with isolated settings and a temporary report directory."""
    for var in ("SCRIPTLENS_LOG_LEVEL", "SCRIPTLENS_DEBUG", "SCRIPTLENS_REPORT_DIR"):
        monkeypatch.delenv(var, raising=False)

    settings = ScriptLensSettings(report_dir=tmp_path / "reports")
    set_settings(settings)

    yield settings

    clear_settings_cache()


@pytest.fixture
def sample_script_path() -> Path:
    """Path to a small extracted screenplay with a title page."""
    return FIXTURES_DIR / "last_shift.txt"


@pytest.fixture
def sample_script_text(sample_script_path: Path) -> str:
    """Text of the sample screenplay."""
    return sample_script_path.read_text(encoding="utf-8")
