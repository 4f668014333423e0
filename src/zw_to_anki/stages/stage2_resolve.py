"""Stage 2: Resolve segmenter chunks into dictionary-backed words."""

from __future__ import annotations

from typing import Iterable

from zw_to_anki.cedict.repository import CedictRepository
from zw_to_anki.models import RawChunk, ResolvedWord


def resolve_chunk(chunk: RawChunk, dictionary: CedictRepository) -> list[ResolvedWord]:
    """Resolve one chunk, decomposing it when it is not a dictionary word.

    Resolution order:
    1) the whole chunk as an exact dictionary word (``direct``),
    2) greedy longest dictionary prefix of the unconsumed suffix, repeated
       until the chunk is consumed (``fallback``),
    3) a lone character with no entry at all becomes an ``unknown`` word with
       no entries, and the cursor moves on by one.

    The dictionary is trusted over the segmenter: ``共同话题`` with ``共同``
    and ``话题`` in the dictionary yields those two words, never ``共同话`` +
    ``题`` unless ``共同话`` itself is an entry.

    Args:
        chunk: Segmenter chunk.
        dictionary: Dictionary index.

    Returns:
        Resolved words in left-to-right order; their texts concatenate back
        to ``chunk.text``.
    """

    entries = dictionary.lookup(chunk.text)
    if entries is not None:
        return [ResolvedWord(chunk.text, entries, "direct", chunk.position)]

    text = chunk.text
    resolved: list[ResolvedWord] = []
    cursor = 0
    while cursor < len(text):
        prefix = dictionary.longest_prefix(text, cursor)
        if prefix is None:
            resolved.append(ResolvedWord(text[cursor], (), "unknown", chunk.position))
            cursor += 1
            continue
        resolved.append(
            ResolvedWord(prefix, dictionary.lookup(prefix) or (), "fallback", chunk.position)
        )
        cursor += len(prefix)
    return resolved


def resolve_chunks(chunks: Iterable[RawChunk], dictionary: CedictRepository) -> list[ResolvedWord]:
    """Resolve chunks in order and concatenate their resolved words."""

    resolved: list[ResolvedWord] = []
    for chunk in chunks:
        resolved.extend(resolve_chunk(chunk, dictionary))
    return resolved


def decompositions(words: Iterable[ResolvedWord]) -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Collect chunks split into several words, for reporting.

    Args:
        words: Resolved words in order.

    Returns:
        ``(chunk_text, parts)`` pairs in chunk order for every chunk that
        resolved to more than one word.
    """

    grouped: dict[int, list[str]] = {}
    for word in words:
        if word.source == "direct":
            continue
        grouped.setdefault(word.chunk_position, []).append(word.word)
    return tuple(
        ("".join(parts), tuple(parts))
        for _, parts in sorted(grouped.items())
        if len(parts) > 1
    )
