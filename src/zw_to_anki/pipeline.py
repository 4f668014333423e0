"""Top-level orchestration for the staged text-to-deck pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from zw_to_anki.cedict.repository import CedictRepository
from zw_to_anki.hsk.levels import HskLevels
from zw_to_anki.models import CardRecord, ResolutionReport, ResolvedWord, Side
from zw_to_anki.pinyin import ToneColours
from zw_to_anki.stages.stage1_segment import CutFunction, build_segmenter, segment_text
from zw_to_anki.stages.stage2_resolve import decompositions, resolve_chunks
from zw_to_anki.stages.stage3_cards import build_cards
from zw_to_anki.validation import validate_cards, validate_resolved_words


@dataclass(frozen=True)
class PipelineConfig:
    """Card options consumed by the pipeline.

    Attributes:
        hsk_filter: Inclusive HSK level; words at or below it are skipped.
        tone_colours: Tone colouring setting.
        side: Card direction.
    """

    hsk_filter: int | None = None
    tone_colours: ToneColours = field(default_factory=ToneColours)
    side: Side = Side.BOTH


@dataclass(frozen=True)
class PipelineResult:
    """Result bundle returned by :func:`run_pipeline`.

    Attributes:
        cards: Final card records in first-occurrence order.
        words: Every resolved word, duplicates included.
        report: Resolution and filtering diagnostics.
    """

    cards: tuple[CardRecord, ...]
    words: tuple[ResolvedWord, ...]
    report: ResolutionReport


def run_pipeline(
    text: str,
    dictionary: CedictRepository,
    levels: HskLevels,
    config: PipelineConfig,
    cut: CutFunction | None = None,
) -> PipelineResult:
    """Execute all stages from raw text to card records.

    Args:
        text: Source Chinese text.
        dictionary: Dictionary index, shared read-only.
        levels: HSK list for filtering.
        config: Card options.
        cut: Segmenter; a jieba tokenizer seeded with the dictionary words is
            built when omitted.

    Returns:
        ``PipelineResult`` with cards, resolved words and the report.
    """

    if cut is None:
        cut = build_segmenter(dictionary.words)

    chunks = segment_text(text, cut)
    words = resolve_chunks(chunks, dictionary)
    validate_resolved_words(chunks, words)

    cards, report = build_cards(
        words,
        levels=levels,
        hsk_filter=config.hsk_filter,
        tone_colours=config.tone_colours,
        side=config.side,
    )
    validate_cards(cards)

    report = replace(report, chunk_count=len(chunks), fallback=decompositions(words))
    return PipelineResult(cards=tuple(cards), words=tuple(words), report=report)
