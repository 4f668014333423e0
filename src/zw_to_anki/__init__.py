"""Chinese text to Anki flashcard deck pipeline package."""

from .models import CardRecord, DictionaryEntry, RawChunk, ResolutionReport, ResolvedWord, Side

__all__ = ["RawChunk", "DictionaryEntry", "ResolvedWord", "CardRecord", "ResolutionReport", "Side"]
