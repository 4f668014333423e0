"""Data models used across the text-to-deck pipeline stages.

Every stage hands the next one immutable records so each stage has a narrow,
testable interface: the segmenter emits ``RawChunk``s, the resolver turns them
into ``ResolvedWord``s and the card builder produces ``CardRecord``s.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Side(Enum):
    """Which card templates to generate for each note."""

    CE_TO_EN = "ce-to-en"
    EN_TO_CE = "en-to-ce"
    BOTH = "both"

    @classmethod
    def parse(cls, value: str | None) -> Side:
        """Parse a CLI side value; ``None`` selects both directions.

        Raises:
            ValueError: If ``value`` is not a known side.
        """

        if value is None:
            return cls.BOTH
        normalized = value.strip().lower()
        for side in cls:
            if side.value == normalized:
                return side
        choices = ", ".join(side.value for side in cls)
        raise ValueError(f"Unrecognized side '{value}', expected one of: {choices}")


@dataclass(frozen=True)
class RawChunk:
    """One substring emitted by the segmenter, in source order."""

    position: int
    text: str


@dataclass(frozen=True)
class PinyinSyllable:
    """A numbered pinyin syllable such as ``lü4``.

    ``tone`` is 1-5 (5 is neutral) or ``None`` for tokens that are not
    syllables, e.g. the ``·`` separator in transliterated names.
    """

    text: str
    tone: int | None

    @property
    def numbered(self) -> str:
        """Return the syllable with its tone number appended."""

        return self.text if self.tone is None else f"{self.text}{self.tone}"


@dataclass(frozen=True)
class DictionaryEntry:
    """One CC-CEDICT line keyed by its simplified form."""

    word: str
    pinyin: tuple[PinyinSyllable, ...]
    definitions: tuple[str, ...]

    @property
    def pinyin_numbered(self) -> str:
        """Return the space-separated numbered pinyin string."""

        return " ".join(syllable.numbered for syllable in self.pinyin)


@dataclass(frozen=True)
class Reading:
    """All definitions a word carries for one pronunciation."""

    pinyin: tuple[PinyinSyllable, ...]
    definitions: tuple[str, ...]

    @property
    def tones(self) -> tuple[int | None, ...]:
        return tuple(syllable.tone for syllable in self.pinyin)


@dataclass(frozen=True)
class ResolvedWord:
    """A chunk or sub-chunk matched against the dictionary.

    ``source`` is ``direct`` when the whole chunk was a dictionary word,
    ``fallback`` when it was carved out of a longer chunk by prefix search and
    ``unknown`` for a single character with no dictionary entry at all. Unknown
    words carry no entries.
    """

    word: str
    entries: tuple[DictionaryEntry, ...]
    source: str
    chunk_position: int = 0

    @property
    def is_synthesized(self) -> bool:
        return self.source == "unknown"


@dataclass(frozen=True)
class CardRecord:
    """One flashcard note ready for serialization.

    ``pinyin`` and ``definition`` describe the primary reading. The remaining
    HTML fields feed the Anki note type and cover every reading of the word.
    """

    word: str
    pinyin: str
    definition: str
    direction: Side
    all_definitions: str = ""
    all_definitions_with_pinyin: str = ""
    colour_hanzi: str = ""


@dataclass(frozen=True)
class ResolutionReport:
    """Per-run diagnostics captured while resolving chunks and building cards.

    Word tuples keep first-seen order so report builders can render them
    deterministically without re-sorting.
    """

    chunk_count: int = 0
    direct: tuple[str, ...] = field(default_factory=tuple)
    fallback: tuple[tuple[str, tuple[str, ...]], ...] = field(default_factory=tuple)
    unknown: tuple[str, ...] = field(default_factory=tuple)
    hsk_filtered: tuple[str, ...] = field(default_factory=tuple)
    duplicates_skipped: int = 0
