"""Configuration errors are reported before the pipeline runs."""

from __future__ import annotations

from pathlib import Path

import pytest

from zw_to_anki.cli import build_arg_parser, main
from zw_to_anki.models import Side


@pytest.mark.parametrize(
    "extra",
    [
        ["--tone-colours", "red;green"],
        ["--side", "sideways"],
    ],
)
def test_invalid_options_exit_with_usage_error(tmp_path: Path, extra: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_arg_parser().parse_args(
            ["--text", "你好", "--output", str(tmp_path / "a.apkg"), *extra]
        )

    assert excinfo.value.code == 2


def test_file_and_text_are_mutually_exclusive(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args(
            ["--text", "你好", "--file", "in.txt", "--output", str(tmp_path / "a.apkg")]
        )


def test_missing_dictionary_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="CC-CEDICT file not found"):
        main(
            [
                "--text",
                "你好",
                "--output",
                str(tmp_path / "a.apkg"),
                "--cedict",
                str(tmp_path / "missing.u8"),
            ]
        )


@pytest.mark.parametrize(
    ("value", "expected"),
    [("both", Side.BOTH), ("ce-to-en", Side.CE_TO_EN), ("EN-TO-CE", Side.EN_TO_CE)],
)
def test_side_accepts_every_direction(tmp_path: Path, value: str, expected: Side) -> None:
    args = build_arg_parser().parse_args(
        ["--text", "你好", "--output", str(tmp_path / "a.apkg"), "--side", value]
    )

    assert args.side is expected


def test_side_defaults_to_both(tmp_path: Path) -> None:
    args = build_arg_parser().parse_args(["--text", "你好", "--output", str(tmp_path / "a.apkg")])

    assert args.side is Side.BOTH
