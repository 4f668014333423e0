"""Anki ``.apkg`` package export via genanki."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Sequence

import genanki

from zw_to_anki.models import CardRecord, Side
from zw_to_anki.pinyin import ToneColours

FIELDS = ["AllDefinitions", "AllDefinitionsWithPinyin", "Hanzi", "ColourHanzi", "Example"]

ANSWER_TEMPLATE = """
<div class=chinese>
    <a href="plecoapi://x-callback-url/s?q={{Hanzi}}" style="text-decoration:none">
        {{ColourHanzi}}
    </a>
</div>
<div>{{AllDefinitionsWithPinyin}}</div>
<div class=chinese>{{Example}}</div>
"""

EN_TO_CE_TEMPLATE = {
    "name": "Card 1",
    "qfmt": "<div>{{AllDefinitions}}</div>",
    "afmt": ANSWER_TEMPLATE,
}

CE_TO_EN_TEMPLATE = {
    "name": "Card 2",
    "qfmt": "<div class=chinese>{{Hanzi}}</div>",
    "afmt": ANSWER_TEMPLATE,
}

BASE_CSS = """.card {
    font-family: arial;
    font-size: 20px;
    text-align: center;
    color: black;
    background-color: white;
}
.card { word-wrap: break-word; }
.win .chinese { font-family: "MS Mincho", "ＭＳ 明朝"; }
.linux .chinese { font-family: "Kochi Mincho", "東風明朝"; }
.mobile .chinese { font-family: "PingFang SC"; }
.chinese { font-size: 48px;}
.reading { font-size: 16px;}
"""


def _stable_int_id(s: str) -> int:
    # genanki ids must be int; keep stable across runs.
    digest = hashlib.sha1(s.encode("utf-8")).digest()
    n = int.from_bytes(digest[:8], "big", signed=False)
    return n % (2**31 - 1)


def templates_for_side(side: Side) -> list[dict[str, str]]:
    """Return the card templates generated for ``side``."""

    if side is Side.CE_TO_EN:
        return [CE_TO_EN_TEMPLATE]
    if side is Side.EN_TO_CE:
        return [EN_TO_CE_TEMPLATE]
    return [CE_TO_EN_TEMPLATE, EN_TO_CE_TEMPLATE]


def build_model(tone_colours: ToneColours, side: Side) -> genanki.Model:
    """Build the note type: five fields, templates per side, tone CSS."""

    return genanki.Model(
        _stable_int_id(f"zw_to_anki:model:{side.value}"),
        "zw-to-anki Chinese",
        fields=[{"name": name} for name in FIELDS],
        templates=templates_for_side(side),
        css=BASE_CSS + tone_colours.css(),
    )


def card_fields(card: CardRecord) -> list[str]:
    """Return note field values in :data:`FIELDS` order."""

    definitions = card.all_definitions or f"<div>{card.definition}</div>"
    with_pinyin = card.all_definitions_with_pinyin or definitions
    return [
        definitions,
        with_pinyin,
        card.word,
        card.colour_hanzi or card.word,
        "",
    ]


def export_apkg(
    cards: Sequence[CardRecord],
    out_path: str | Path,
    deck_name: str | None = None,
    tone_colours: ToneColours | None = None,
    side: Side = Side.BOTH,
) -> int:
    """Write cards to an Anki package.

    Args:
        cards: Card records in deck order.
        out_path: Destination ``.apkg`` path.
        deck_name: Deck name; defaults to the output file stem.
        tone_colours: Tone colour CSS setting.
        side: Which templates the note type carries.

    Returns:
        Number of notes written.
    """

    out_path = Path(out_path)
    deck_name = deck_name or out_path.stem
    tone_colours = tone_colours or ToneColours()

    model = build_model(tone_colours, side)
    deck = genanki.Deck(_stable_int_id(f"zw_to_anki:deck:{deck_name}"), deck_name)

    for card in cards:
        deck.add_note(
            genanki.Note(
                model=model,
                fields=card_fields(card),
                guid=genanki.guid_for(card.word),
            )
        )

    out_path.parent.mkdir(parents=True, exist_ok=True)
    genanki.Package(deck).write_to_file(str(out_path))
    return len(cards)
