"""CLI entrypoint: chunk up Chinese text and make an Anki deck."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from zw_to_anki.cedict.repository import CedictRepository
from zw_to_anki.exporters.apkg import export_apkg
from zw_to_anki.hsk.levels import HskLevels
from zw_to_anki.io.tsv_io import write_tsv
from zw_to_anki.models import Side
from zw_to_anki.pipeline import PipelineConfig, run_pipeline
from zw_to_anki.pinyin import ToneColours
from zw_to_anki.reporting.report_md import build_report_md
from zw_to_anki.validation import collect_source_counts

SOURCE_ORDER = ("direct", "fallback", "unknown")


def _resolve_default_cedict_path() -> Path:
    """Resolve default CC-CEDICT path from project layout.

    Returns:
        Preferred dictionary path, favoring ``data/cedict_ts.u8`` when present
        and falling back to project-root ``cedict_ts.u8``.
    """

    cwd_data = Path("data") / "cedict_ts.u8"
    if cwd_data.exists():
        return cwd_data
    return Path("cedict_ts.u8")


def _tone_colours_arg(value: str) -> ToneColours:
    try:
        return ToneColours.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _side_arg(value: str) -> Side:
    try:
        return Side.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the deck command.
    """

    parser = argparse.ArgumentParser(description="Chunk up Chinese text and make an Anki deck.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--file", type=Path, help="File to be converted to flashcards.")
    source.add_argument("-t", "--text", help="Text to be converted to flashcards.")
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        type=Path,
        help="Output '.apkg' Anki deck path ('.tsv' writes a plain card list instead).",
    )
    parser.add_argument(
        "--hsk-filter",
        type=int,
        default=None,
        help="HSK level; words listed at or below this level are not added to the deck.",
    )
    parser.add_argument(
        "--tone-colours",
        type=_tone_colours_arg,
        default=ToneColours(),
        help=(
            "Either 'off' to turn tone colours off, or five semicolon-separated RGB colour "
            "codes for the five tones (default: '00e304;b35815;f00f0f;1767fe;777777')."
        ),
    )
    parser.add_argument(
        "-s",
        "--side",
        type=_side_arg,
        default=Side.BOTH,
        help="'ce-to-en' for Chinese-to-English cards only, 'en-to-ce' for the opposite, "
        "or 'both' (default).",
    )
    parser.add_argument(
        "--cedict",
        type=Path,
        default=_resolve_default_cedict_path(),
        help="Path to CC-CEDICT .u8 file.",
    )
    parser.add_argument(
        "--hsk-list",
        type=Path,
        default=Path("data") / "hsk.tsv",
        help="Path to HSK word list TSV (used with --hsk-filter).",
    )
    parser.add_argument("--deck-name", default=None, help="Deck name (default: output file stem).")
    parser.add_argument("--report", type=Path, default=None, help="Markdown report output path.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through deck generation.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.file is not None:
        if not args.file.exists():
            raise SystemExit(f"Input file not found: {args.file}")
        text = args.file.read_text(encoding="utf-8")
    else:
        text = args.text

    if not args.cedict.exists():
        raise SystemExit(f"CC-CEDICT file not found: {args.cedict}")

    levels = HskLevels.empty()
    if args.hsk_filter is not None:
        if not args.hsk_list.exists():
            raise SystemExit(f"HSK list not found: {args.hsk_list}")
        levels = HskLevels.from_path(args.hsk_list)

    config = PipelineConfig(
        hsk_filter=args.hsk_filter,
        tone_colours=args.tone_colours,
        side=args.side,
    )
    result = run_pipeline(text, CedictRepository(args.cedict), levels, config)

    if args.output.suffix.lower() == ".tsv":
        write_tsv(result.cards, output_path=args.output)
        print(f"Wrote {len(result.cards)} cards to {args.output}")
    else:
        count = export_apkg(
            result.cards,
            args.output,
            deck_name=args.deck_name,
            tone_colours=config.tone_colours,
            side=config.side,
        )
        print(f"Successfully created a deck with {count} notes")

    if args.report is not None:
        args.report.write_text(build_report_md(result.cards, result.report), encoding="utf-8")
        print(f"Wrote report to {args.report}")

    report = result.report
    print(
        "Resolution summary: "
        f"chunks={report.chunk_count}, "
        f"fallback={len(report.fallback)}, "
        f"unknown={len(report.unknown)}, "
        f"hsk_filtered={len(report.hsk_filtered)}, "
        f"duplicates={report.duplicates_skipped}"
    )
    source_counts = collect_source_counts(result.words)
    print(
        "Resolved words by source: "
        + ", ".join(f"{source}={source_counts.get(source, 0)}" for source in SOURCE_ORDER)
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
