"""ScriptLens utilities module."""

from scriptlens.utils.screenplay import ScreenplayUtils

__all__ = ["ScreenplayUtils"]
