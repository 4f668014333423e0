"""Parsing utilities for CC-CEDICT dictionary files."""

from __future__ import annotations

import re
from typing import Iterable

from zw_to_anki.models import DictionaryEntry, PinyinSyllable

CEDICT_ENTRY_RE = re.compile(r"^(\S+)\s+(\S+)\s+\[([^]]*)]\s*/(.*)/\s*$")
TONE_SUFFIX_RE = re.compile(r"^(.*?)([1-5])$")


def parse_syllable(token: str) -> PinyinSyllable:
    """Parse one bracketed pinyin token such as ``yang3`` or ``lu:4``.

    CC-CEDICT writes ``ü`` as ``u:``; that is normalized here. Tokens without
    a trailing tone digit (``·``, ``,``, Latin letters in mixed entries) are
    kept verbatim with no tone.

    Args:
        token: Raw token from the pinyin bracket payload.

    Returns:
        Parsed syllable, case preserved.
    """

    token = token.replace("u:", "ü").replace("U:", "Ü")
    match = TONE_SUFFIX_RE.match(token)
    if match is None or not match.group(1):
        return PinyinSyllable(text=token, tone=None)
    return PinyinSyllable(text=match.group(1), tone=int(match.group(2)))


def parse_cedict_line(line: str) -> DictionaryEntry | None:
    """Parse a line of the form ``一氧化氮 一氧化氮 [yi1 yang3 hua4 dan4] /nitric oxide/``.

    Args:
        line: Raw dictionary line.

    Returns:
        Entry keyed by the simplified form, or ``None`` for comments, blank
        and malformed lines.
    """

    line = line.strip()
    if not line or line.startswith("#"):
        return None
    match = CEDICT_ENTRY_RE.match(line)
    if not match:
        return None

    _traditional, simplified, pinyin_field, definition_payload = match.groups()
    definitions = tuple(part.strip() for part in definition_payload.split("/") if part.strip())
    return DictionaryEntry(
        word=simplified,
        pinyin=tuple(parse_syllable(token) for token in pinyin_field.split()),
        definitions=definitions,
    )


def parse_cedict_lines(lines: Iterable[str]) -> list[DictionaryEntry]:
    """Parse CC-CEDICT lines into entries, skipping comments and malformed lines.

    Args:
        lines: Iterable of raw dictionary lines.

    Returns:
        Entries in file order.
    """

    entries: list[DictionaryEntry] = []
    for line in lines:
        entry = parse_cedict_line(line)
        if entry is not None:
            entries.append(entry)
    return entries
