"""Deduplicated registry of character names seen in a screenplay."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from scriptlens.parser.constants import (
    CHARACTER_NAME_MAX_LENGTH,
    CHARACTER_NAME_MIN_LENGTH,
    PARENTHETICAL_PATTERN,
    WHITESPACE_RUN_PATTERN,
)


class CharacterRegistry:
    """Set of canonical character names.

    Names are normalized before storage: one parenthetical aside such as
    ``(O.S.)`` is stripped, whitespace runs collapse to a single space and the
    result is trimmed. Membership is case-sensitive on the normalized form;
    screenplay convention keeps cues upper-case.
    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._names: set[str] = set()

    @staticmethod
    def normalize(raw_name: str) -> str:
        """Return the canonical form of a raw cue name."""
        name = PARENTHETICAL_PATTERN.sub("", raw_name.strip(), count=1)
        return WHITESPACE_RUN_PATTERN.sub(" ", name).strip()

    @classmethod
    def accept(
        cls, raw_name: str, stoplist: Iterable[str] = frozenset()
    ) -> str | None:
        """Normalize a candidate and check it against length and stoplists.

        Args:
            raw_name: Cue text as it appeared in the line
            stoplist: Tokens rejected at this call site (compared upper-case)

        Returns:
            The normalized name, or None when the candidate is rejected
        """
        name = cls.normalize(raw_name)
        if not CHARACTER_NAME_MIN_LENGTH <= len(name) <= CHARACTER_NAME_MAX_LENGTH:
            return None
        if name.upper() in stoplist:
            return None
        return name

    def register(
        self, raw_name: str, stoplist: Iterable[str] = frozenset()
    ) -> str | None:
        """Add a candidate name to the registry.

        Returns:
            The stored normalized name, or None if the candidate was rejected
        """
        name = self.accept(raw_name, stoplist)
        if name is not None:
            self._names.add(name)
        return name

    def add(self, name: str) -> None:
        """Store a name that was already normalized and accepted."""
        self._names.add(name)

    def names(self) -> tuple[str, ...]:
        """All registered names sorted ascending."""
        return tuple(sorted(self._names))

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
