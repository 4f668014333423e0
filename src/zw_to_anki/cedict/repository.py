"""Repository utilities for querying CC-CEDICT data structures."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Iterable

from zw_to_anki.cedict.matcher import group_readings
from zw_to_anki.cedict.parser import parse_cedict_lines
from zw_to_anki.models import DictionaryEntry, Reading


@dataclass(frozen=True)
class CedictRepository:
    """Read-only dictionary index over CC-CEDICT content.

    The repository parses a CEDICT-compatible ``.u8`` file once and builds a
    word-keyed index and a hash set of all words. Prefix queries check
    successively shorter prefixes against the set; segmenter chunks are short
    so no trie is needed.

    Instances are either path-scoped or built from in-memory lines via
    :meth:`from_lines`.
    """

    path: Path | None = None
    lines: tuple[str, ...] | None = None

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> CedictRepository:
        """Build a repository from raw dictionary lines instead of a file."""

        return cls(path=None, lines=tuple(lines))

    @cached_property
    def entries(self) -> tuple[DictionaryEntry, ...]:
        """Load and cache parsed entries.

        Returns:
            Immutable tuple of parsed entries in file order.

        Raises:
            FileNotFoundError: If the configured CEDICT file path does not exist.
        """

        if self.lines is not None:
            return tuple(parse_cedict_lines(self.lines))
        if self.path is None or not self.path.exists():
            raise FileNotFoundError(f"CC-CEDICT file not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as handle:
            return tuple(parse_cedict_lines(handle))

    @cached_property
    def entries_by_word(self) -> dict[str, tuple[DictionaryEntry, ...]]:
        """Build and cache a word-indexed entry map.

        Returns:
            Dictionary mapping simplified words to immutable entry tuples.
        """

        mapping: dict[str, list[DictionaryEntry]] = {}
        for entry in self.entries:
            mapping.setdefault(entry.word, []).append(entry)
        return {word: tuple(items) for word, items in mapping.items()}

    @cached_property
    def words(self) -> frozenset[str]:
        """All dictionary words, for membership and prefix checks."""

        return frozenset(self.entries_by_word)

    def lookup(self, word: str) -> tuple[DictionaryEntry, ...] | None:
        """Return every entry for an exact word match, or ``None`` when absent."""

        return self.entries_by_word.get(word)

    def contains(self, word: str) -> bool:
        return word in self.words

    def readings(self, word: str) -> tuple[Reading, ...]:
        """Return the grouped readings of ``word``; empty when absent."""

        return group_readings(self.entries_by_word.get(word, ()))

    def longest_prefix(self, text: str, start: int = 0, max_length: int | None = None) -> str | None:
        """Find the longest dictionary word starting at ``text[start]``.

        Args:
            text: Chunk being decomposed.
            start: Cursor position within ``text``.
            max_length: Optional cap on the prefix length.

        Returns:
            The longest prefix of ``text[start:]`` that is a dictionary word,
            or ``None`` when not even the single character is present.
        """

        remaining = len(text) - start
        if max_length is not None:
            remaining = min(remaining, max_length)
        for length in range(remaining, 0, -1):
            candidate = text[start : start + length]
            if candidate in self.words:
                return candidate
        return None
