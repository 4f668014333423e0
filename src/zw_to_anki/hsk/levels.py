"""HSK vocabulary-level lookup used to filter already-known words."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Iterable, Mapping

CJK_RE = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U0003134f]")
LEVEL_RE = re.compile(r"^(\d+)")


def _lookup_word(word: str) -> str:
    """Normalize a list word into Hanzi-only form.

    Syllabus rows may include sense suffixes like ``1``/``2`` (for example,
    ``点1`` and ``点2``). Segmented text never carries these suffixes.

    Args:
        word: Word as listed.

    Returns:
        Hanzi-only key, or the original word if no Hanzi is present.
    """

    hanzi_only = "".join(ch for ch in word if CJK_RE.fullmatch(ch))
    return hanzi_only or word.strip()


def parse_level(label: str) -> int | None:
    """Parse a level label such as ``3`` or ``7-9`` into its lower bound."""

    match = LEVEL_RE.match(label.strip())
    return int(match.group(1)) if match else None


def parse_level_lines(lines: Iterable[str]) -> dict[str, int]:
    """Parse HSK list TSV lines into a word -> lowest level mapping.

    Accepts either a header row containing ``word`` and ``level`` columns
    (the syllabus extraction TSV qualifies) or plain ``word<TAB>level`` rows.
    Comment lines, blank lines and rows with an unparseable level are skipped.

    Args:
        lines: Raw TSV lines.

    Returns:
        Mapping of word to the lowest level it is listed at.
    """

    rows = [line.rstrip("\n") for line in lines]
    rows = [line for line in rows if line.strip() and not line.lstrip().startswith("#")]
    if not rows:
        return {}

    header_cells = [cell.strip() for cell in rows[0].split("\t")]
    if {"word", "level"}.issubset(header_cells):
        idx_word = header_cells.index("word")
        idx_level = header_cells.index("level")
        data_rows = rows[1:]
    else:
        idx_word = 0
        idx_level = 1
        data_rows = rows

    mapping: dict[str, int] = {}
    for row in data_rows:
        cells = [cell.strip() for cell in row.split("\t")]
        if len(cells) <= max(idx_word, idx_level):
            continue
        word = _lookup_word(cells[idx_word])
        level = parse_level(cells[idx_level])
        if not word or level is None:
            continue
        if word not in mapping or level < mapping[word]:
            mapping[word] = level
    return mapping


@dataclass(frozen=True)
class HskLevels:
    """Word-level HSK lookup.

    Lookup is by exact word string only. A multi-character word is never
    decomposed, so a character without its own listing is not filtered even
    when it appears inside a listed word, and a listed character does not
    cause a longer unlisted word containing it to be filtered.
    """

    levels: Mapping[str, int]

    @classmethod
    def from_path(cls, path: Path) -> HskLevels:
        """Load an HSK list TSV.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """

        if not path.exists():
            raise FileNotFoundError(f"HSK list not found: {path}")
        with path.open("r", encoding="utf-8") as handle:
            return cls(parse_level_lines(handle))

    @classmethod
    def empty(cls) -> HskLevels:
        return cls({})

    def level_of(self, word: str) -> int | None:
        """Return the lowest HSK level ``word`` is listed at, if any."""

        return self.levels.get(word)

    def is_filtered(self, word: str, threshold: int | None) -> bool:
        """Return whether ``word`` is at or below ``threshold``.

        Args:
            word: Candidate card word.
            threshold: Inclusive HSK level, or ``None`` to disable filtering.

        Returns:
            ``True`` only when a threshold is set and the word is listed at a
            level not above it.
        """

        if threshold is None:
            return False
        level = self.level_of(word)
        return level is not None and level <= threshold
