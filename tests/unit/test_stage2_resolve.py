"""Unit tests for Stage 2 chunk resolution."""

from __future__ import annotations

import pytest

from zw_to_anki.cedict.repository import CedictRepository
from zw_to_anki.models import RawChunk
from zw_to_anki.stages.stage2_resolve import decompositions, resolve_chunk, resolve_chunks


def test_dictionary_chunk_resolves_directly(dictionary: CedictRepository) -> None:
    words = resolve_chunk(RawChunk(0, "你好"), dictionary)

    assert len(words) == 1
    assert words[0].word == "你好"
    assert words[0].source == "direct"
    assert words[0].entries == dictionary.lookup("你好")


def test_missing_chunk_splits_on_longest_prefix(dictionary: CedictRepository) -> None:
    """共同话题 splits into 共同 + 话题, not 共同话 + 题."""

    words = resolve_chunk(RawChunk(3, "共同话题"), dictionary)

    assert [(word.word, word.source) for word in words] == [
        ("共同", "fallback"),
        ("话题", "fallback"),
    ]
    assert {word.chunk_position for word in words} == {3}


def test_unknown_character_is_synthesized(dictionary: CedictRepository) -> None:
    words = resolve_chunk(RawChunk(0, "龘帮助"), dictionary)

    assert [(word.word, word.source) for word in words] == [
        ("龘", "unknown"),
        ("帮助", "fallback"),
    ]
    assert words[0].entries == ()
    assert words[0].is_synthesized


def test_dictionary_is_trusted_over_segmenter_boundary() -> None:
    repo = CedictRepository.from_lines(
        [
            "共同 共同 [gong4 tong2] /common/",
            "共同話 共同话 [gong4 tong2 hua4] /test entry/",
            "題 题 [ti2] /topic/",
            "話題 话题 [hua4 ti2] /topic/",
        ]
    )

    words = resolve_chunk(RawChunk(0, "共同话题"), repo)

    assert [word.word for word in words] == ["共同话", "题"]


@pytest.mark.parametrize("text", ["龘", "龘龘龘", "我龘是", "学生共同龘话题你好"])
def test_resolution_preserves_characters_and_terminates(
    dictionary: CedictRepository, text: str
) -> None:
    words = resolve_chunk(RawChunk(0, text), dictionary)

    assert "".join(word.word for word in words) == text
    assert 1 <= len(words) <= len(text)
    assert all(word.word for word in words)


def test_resolve_chunks_keeps_chunk_order(dictionary: CedictRepository) -> None:
    chunks = [RawChunk(0, "我是"), RawChunk(1, "你好"), RawChunk(2, "共同话题")]

    words = resolve_chunks(chunks, dictionary)

    assert [word.word for word in words] == ["我", "是", "你好", "共同", "话题"]
    assert [word.chunk_position for word in words] == [0, 0, 1, 2, 2]
    assert decompositions(words) == (("我是", ("我", "是")), ("共同话题", ("共同", "话题")))


def test_decompositions_skip_chunks_left_whole(dictionary: CedictRepository) -> None:
    chunks = [RawChunk(0, "龘"), RawChunk(1, "你好"), RawChunk(2, "龘我")]

    words = resolve_chunks(chunks, dictionary)

    assert decompositions(words) == (("龘我", ("龘", "我")),)
