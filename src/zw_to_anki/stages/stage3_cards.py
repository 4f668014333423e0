"""Stage 3: Build flashcard records from resolved words."""

from __future__ import annotations

from typing import Iterable

from zw_to_anki.cedict.matcher import group_readings
from zw_to_anki.hsk.levels import HskLevels
from zw_to_anki.models import CardRecord, ResolutionReport, ResolvedWord, Side
from zw_to_anki.pinyin import (
    ToneColours,
    colour_hanzi,
    definitions_html,
    definitions_with_pinyin_html,
    render_pinyin,
)


def build_card(word: ResolvedWord, tone_colours: ToneColours, side: Side) -> CardRecord:
    """Build one card from a resolved word.

    The primary reading is the first pronunciation listed in the dictionary
    and the primary definition is its first gloss. A word with no entries
    (an unknown character) gets blank pronunciation and definition.

    Args:
        word: Resolved word.
        tone_colours: Tone colour setting; disabled colours render plain pinyin.
        side: Card direction.

    Returns:
        Card record for ``word``.
    """

    readings = group_readings(word.entries)
    coloured = tone_colours.enabled
    if not readings:
        # TODO: look up unknown characters in a character-level source such as Unihan
        return CardRecord(
            word=word.word,
            pinyin="",
            definition="",
            direction=side,
            colour_hanzi=word.word,
        )

    primary = readings[0]
    return CardRecord(
        word=word.word,
        pinyin=render_pinyin(primary.pinyin, coloured),
        definition=primary.definitions[0] if primary.definitions else "",
        direction=side,
        all_definitions=definitions_html(readings),
        all_definitions_with_pinyin=definitions_with_pinyin_html(readings, coloured),
        colour_hanzi=colour_hanzi(word.word, readings, coloured),
    )


def build_cards(
    words: Iterable[ResolvedWord],
    levels: HskLevels,
    hsk_filter: int | None = None,
    tone_colours: ToneColours | None = None,
    side: Side = Side.BOTH,
) -> tuple[list[CardRecord], ResolutionReport]:
    """Turn resolved words into deduplicated, filtered cards.

    Per word, in order:
    1) skip a word that already produced a card in this run,
    2) skip a word listed at or below ``hsk_filter``,
    3) otherwise build a card.

    The first occurrence of a word wins, so cards keep source order.

    Args:
        words: Resolved words in source order.
        levels: HSK list used for filtering.
        hsk_filter: Inclusive HSK level threshold, or ``None`` for no filtering.
        tone_colours: Tone colour setting (default colours when omitted).
        side: Card direction.

    Returns:
        Cards and a report with direct/unknown words, HSK-filtered words and
        the number of repeats of words that already produced a card.
    """

    tone_colours = tone_colours or ToneColours()

    cards: list[CardRecord] = []
    seen: set[str] = set()
    filtered_seen: set[str] = set()
    direct: list[str] = []
    unknown: list[str] = []
    filtered: list[str] = []
    duplicates = 0

    for word in words:
        if word.word in seen:
            duplicates += 1
            continue
        if word.word in filtered_seen:
            continue

        if levels.is_filtered(word.word, hsk_filter):
            filtered.append(word.word)
            filtered_seen.add(word.word)
            continue
        seen.add(word.word)

        if word.source == "direct":
            direct.append(word.word)
        elif word.is_synthesized:
            unknown.append(word.word)
        cards.append(build_card(word, tone_colours, side))

    report = ResolutionReport(
        direct=tuple(direct),
        unknown=tuple(unknown),
        hsk_filtered=tuple(filtered),
        duplicates_skipped=duplicates,
    )
    return cards, report
