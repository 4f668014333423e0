"""Unit tests for Stage 1 segmentation."""

from __future__ import annotations

from zw_to_anki.cedict.repository import CedictRepository
from zw_to_anki.models import RawChunk
from zw_to_anki.stages.stage1_segment import build_segmenter, is_hanzi_chunk, segment_text


def test_segment_text_keeps_only_hanzi_chunks_in_order() -> None:
    pieces = ["你好", "，", "我", " ", "是", "ABC", "学生", "123", "。"]

    chunks = segment_text("ignored", cut=lambda _text: iter(pieces))

    assert chunks == [
        RawChunk(0, "你好"),
        RawChunk(1, "我"),
        RawChunk(2, "是"),
        RawChunk(3, "学生"),
    ]


def test_is_hanzi_chunk() -> None:
    assert is_hanzi_chunk("共同话题")
    assert not is_hanzi_chunk("共同,")
    assert not is_hanzi_chunk("")


def test_jieba_segmenter_covers_every_hanzi(dictionary: CedictRepository) -> None:
    text = "你好，我是学生。共同话题！"
    cut = build_segmenter(dictionary.words)

    chunks = segment_text(text, cut)

    assert "".join(chunk.text for chunk in chunks) == "你好我是学生共同话题"
    assert [chunk.position for chunk in chunks] == list(range(len(chunks)))


def test_is_hanzi_chunk_accepts_rare_ideograph_blocks() -> None:
    assert is_hanzi_chunk("㐀")
    assert is_hanzi_chunk("𠮷")
    assert is_hanzi_chunk("豈")
    assert is_hanzi_chunk("我㐀𠮷是")


def test_jieba_segmenter_keeps_rare_characters(dictionary: CedictRepository) -> None:
    cut = build_segmenter(dictionary.words)

    for text, rare in [("我㐀是", "㐀"), ("我𠮷是", "𠮷")]:
        chunks = segment_text(text, cut)

        assert "".join(chunk.text for chunk in chunks) == text
        assert rare in [chunk.text for chunk in chunks]
