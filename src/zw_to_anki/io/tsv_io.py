"""TSV write helpers for plain-text card export."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from zw_to_anki.models import CardRecord

TSV_HEADER = ["word", "pinyin", "definition", "direction"]

HTML_TAG_RE = re.compile(r"<[^>]+>")


def _plain(value: str) -> str:
    """Strip tone-colour markup and tab/newline characters from a field."""

    return HTML_TAG_RE.sub("", value).replace("\t", " ").replace("\n", " ")


def write_tsv(cards: Sequence[CardRecord], output_path: Path, include_header: bool = True) -> None:
    """Write cards to a TSV file using the canonical column order.

    Args:
        cards: Card records to serialize.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for card in cards:
            handle.write(
                "\t".join(
                    [
                        card.word,
                        _plain(card.pinyin),
                        _plain(card.definition),
                        card.direction.value,
                    ]
                )
            )
            handle.write("\n")
