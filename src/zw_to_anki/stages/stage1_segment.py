"""Stage 1: Segment raw text into word chunks with jieba."""

from __future__ import annotations

import re
from typing import Callable, Iterable

import jieba

from zw_to_anki.models import RawChunk

CutFunction = Callable[[str], Iterable[str]]

# Unified ideographs, Extension A, compatibility ideographs and Extensions B-G.
HANZI_CHUNK_RE = re.compile(
    r"^[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U0003134f]+$"
)


def build_segmenter(words: Iterable[str]) -> CutFunction:
    """Create a jieba cut function that knows every dictionary word.

    There is no frequency data for CC-CEDICT words, but a larger vocabulary
    still makes jieba's boundaries line up with dictionary entries more often.

    Args:
        words: Dictionary words to register with the tokenizer.

    Returns:
        Callable that cuts text without the HMM new-word model.
    """

    tokenizer = jieba.Tokenizer()
    for word in words:
        tokenizer.add_word(word)

    def cut(text: str) -> Iterable[str]:
        return tokenizer.cut(text, HMM=False)

    return cut


def is_hanzi_chunk(text: str) -> bool:
    """Return whether a chunk consists only of CJK unified ideographs."""

    return bool(HANZI_CHUNK_RE.fullmatch(text))


def segment_text(text: str, cut: CutFunction) -> list[RawChunk]:
    """Cut ``text`` into ordered chunks, keeping Chinese-only chunks.

    Punctuation, whitespace, digits and Latin text are dropped here so later
    stages only ever see Hanzi.

    Args:
        text: Full input text.
        cut: Segmenter returning substrings that cover ``text`` in order.

    Returns:
        Kept chunks numbered by their position among kept chunks.
    """

    chunks: list[RawChunk] = []
    for piece in cut(text):
        if not is_hanzi_chunk(piece):
            continue
        chunks.append(RawChunk(position=len(chunks), text=piece))
    return chunks
