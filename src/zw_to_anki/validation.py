"""Validation helpers for resolved words and final card output."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from zw_to_anki.models import CardRecord, RawChunk, ResolvedWord, Side

VALID_SOURCES = {"direct", "fallback", "unknown"}


def _raise_errors(stage: str, errors: list[str]) -> None:
    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"{stage} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_resolved_words(chunks: Sequence[RawChunk], words: Sequence[ResolvedWord]) -> None:
    """Check that resolved words cover every chunk character exactly once.

    Args:
        chunks: Segmenter chunks.
        words: Resolved words for ``chunks``.

    Raises:
        ValueError: If a chunk's words do not concatenate back to the chunk or
            a word carries an unknown source tag.
    """

    errors: list[str] = []
    by_chunk: dict[int, list[str]] = {}
    for word in words:
        if word.source not in VALID_SOURCES:
            errors.append(f"Word '{word.word}': invalid source '{word.source}'")
        if not word.word:
            errors.append(f"Chunk {word.chunk_position}: empty resolved word")
        by_chunk.setdefault(word.chunk_position, []).append(word.word)

    for chunk in chunks:
        joined = "".join(by_chunk.get(chunk.position, []))
        if joined != chunk.text:
            errors.append(f"Chunk {chunk.position}: '{chunk.text}' resolved to '{joined}'")

    _raise_errors("Resolution", errors)


def validate_cards(cards: Sequence[CardRecord]) -> None:
    """Validate final cards before export.

    Args:
        cards: Card records to validate.

    Raises:
        ValueError: If a word is empty or repeated, or a direction is invalid.
    """

    errors: list[str] = []
    counts = Counter(card.word for card in cards)
    for idx, card in enumerate(cards, start=1):
        if not card.word.strip():
            errors.append(f"Card {idx}: empty word")
        if not isinstance(card.direction, Side):
            errors.append(f"Card {idx}: invalid direction '{card.direction}'")
    for word, count in counts.items():
        if count > 1:
            errors.append(f"Word '{word}' appears on {count} cards")

    _raise_errors("Card", errors)


def collect_source_counts(words: Sequence[ResolvedWord]) -> dict[str, int]:
    """Count resolved words by resolution source."""

    counter: Counter[str] = Counter()
    for word in words:
        counter[word.source] += 1
    return dict(counter)
