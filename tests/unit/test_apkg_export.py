"""Unit tests for Anki package export."""

from __future__ import annotations

from pathlib import Path
import zipfile

from zw_to_anki.exporters.apkg import (
    CE_TO_EN_TEMPLATE,
    EN_TO_CE_TEMPLATE,
    build_model,
    card_fields,
    export_apkg,
    templates_for_side,
)
from zw_to_anki.models import CardRecord, Side
from zw_to_anki.pinyin import ToneColours


def _card(word: str = "你好") -> CardRecord:
    return CardRecord(
        word=word,
        pinyin="nǐ hǎo",
        definition="hello",
        direction=Side.BOTH,
        all_definitions="<div>hello · hi</div>",
        all_definitions_with_pinyin="<div class=reading>nǐ hǎo</div><div>hello · hi</div>",
        colour_hanzi=word,
    )


def test_templates_follow_side_setting() -> None:
    assert templates_for_side(Side.CE_TO_EN) == [CE_TO_EN_TEMPLATE]
    assert templates_for_side(Side.EN_TO_CE) == [EN_TO_CE_TEMPLATE]
    assert templates_for_side(Side.BOTH) == [CE_TO_EN_TEMPLATE, EN_TO_CE_TEMPLATE]


def test_model_css_includes_tone_colours() -> None:
    model = build_model(ToneColours(), Side.BOTH)

    assert ".tone4 {color: #1767fe;}" in model.css
    assert [field["name"] for field in model.fields] == [
        "AllDefinitions",
        "AllDefinitionsWithPinyin",
        "Hanzi",
        "ColourHanzi",
        "Example",
    ]


def test_card_fields_for_unknown_character_are_blank() -> None:
    card = CardRecord(word="龘", pinyin="", definition="", direction=Side.BOTH)

    assert card_fields(card) == ["<div></div>", "<div></div>", "龘", "龘", ""]


def test_export_apkg_writes_package(tmp_path: Path) -> None:
    out = tmp_path / "deck" / "reading.apkg"

    count = export_apkg([_card("你好"), _card("学生")], out, side=Side.CE_TO_EN)

    assert count == 2
    assert out.exists()
    assert zipfile.is_zipfile(out)
