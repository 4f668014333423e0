"""Markdown report generation for deck build summaries."""

from __future__ import annotations

from typing import Iterable, Sequence

from zw_to_anki.models import CardRecord, ResolutionReport


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_report_md(cards: Sequence[CardRecord], report: ResolutionReport) -> str:
    """Build the markdown report for one deck build.

    Args:
        cards: Final card records.
        report: Resolution and filtering details.

    Returns:
        Full markdown content with summary tables.
    """

    summary_rows = [
        ("chunks", str(report.chunk_count)),
        ("cards", str(len(cards))),
        ("direct", str(len(report.direct))),
        ("fallback_chunks", str(len(report.fallback))),
        ("unknown", str(len(report.unknown))),
        ("hsk_filtered", str(len(report.hsk_filtered))),
        ("duplicates_skipped", str(report.duplicates_skipped)),
    ]
    fallback_rows = [(chunk, " + ".join(parts)) for chunk, parts in report.fallback]
    unknown_rows = [(word,) for word in report.unknown]
    filtered_rows = [(word,) for word in report.hsk_filtered]

    sections = [
        "# Deck Report",
        "",
        "## Summary",
        _markdown_table(["metric", "count"], summary_rows),
        "",
        "## Chunks split by dictionary fallback",
        _markdown_table(["chunk", "parts"], fallback_rows),
        "",
        "## Characters with no dictionary entry",
        _markdown_table(["word"], unknown_rows),
        "",
        "## Filtered by HSK level",
        _markdown_table(["word"], filtered_rows),
    ]

    return "\n".join(sections) + "\n"
