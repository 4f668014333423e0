"""Shared fixtures for dictionary and HSK list test data."""

from __future__ import annotations

from pathlib import Path

import pytest

from zw_to_anki.cedict.repository import CedictRepository
from zw_to_anki.hsk.levels import HskLevels

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def cedict_path() -> Path:
    return FIXTURES / "mini_cedict.u8"


@pytest.fixture
def dictionary(cedict_path: Path) -> CedictRepository:
    return CedictRepository(cedict_path)


@pytest.fixture
def hsk_levels() -> HskLevels:
    return HskLevels.from_path(FIXTURES / "mini_hsk.tsv")
