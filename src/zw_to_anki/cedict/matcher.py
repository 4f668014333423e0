"""Helpers for grouping CC-CEDICT entries into per-pronunciation readings."""

from __future__ import annotations

from typing import Sequence

from zw_to_anki.models import DictionaryEntry, PinyinSyllable, Reading


def group_readings(entries: Sequence[DictionaryEntry]) -> tuple[Reading, ...]:
    """Group entries by pinyin and merge their definitions.

    CC-CEDICT lists the same simplified word on several lines (different
    traditional forms, different readings). Entries sharing a pinyin sequence
    collapse into one reading. Readings keep the order in which their pinyin
    first appears and definitions keep first-seen order with duplicates
    removed.

    Args:
        entries: Raw entries for one word, in dictionary file order.

    Returns:
        One reading per distinct pinyin sequence.
    """

    grouped: dict[tuple[PinyinSyllable, ...], list[str]] = {}
    for entry in entries:
        definitions = grouped.setdefault(entry.pinyin, [])
        for definition in entry.definitions:
            if definition not in definitions:
                definitions.append(definition)

    return tuple(
        Reading(pinyin=pinyin, definitions=tuple(definitions))
        for pinyin, definitions in grouped.items()
    )


def tone_consensus(readings: Sequence[Reading]) -> tuple[int | None, ...] | None:
    """Return the shared tone pattern across readings.

    Args:
        readings: Readings of one word.

    Returns:
        The tone tuple when every reading has the same tones, otherwise
        ``None``.
    """

    patterns = {reading.tones for reading in readings}
    if len(patterns) != 1:
        return None
    return patterns.pop()
