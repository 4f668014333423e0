"""Pinyin rendering: tone diacritics, tone-colour spans and colour settings."""

from __future__ import annotations

from dataclasses import dataclass
import html
import re
from typing import Sequence

from pypinyin.contrib.tone_convert import to_tone

from zw_to_anki.cedict.matcher import tone_consensus
from zw_to_anki.models import PinyinSyllable, Reading

DEFAULT_TONE_COLOURS = ("00e304", "b35815", "f00f0f", "1767fe", "777777")
COLOUR_CODE_RE = re.compile(r"^[0-9A-Za-z]{6}$")
NEUTRAL_TONE = 5


@dataclass(frozen=True)
class ToneColours:
    """Tone colour setting: five RGB codes for tones 1-5, or off."""

    colours: tuple[str, ...] | None = DEFAULT_TONE_COLOURS

    @property
    def enabled(self) -> bool:
        return self.colours is not None

    @classmethod
    def off(cls) -> ToneColours:
        return cls(colours=None)

    @classmethod
    def parse(cls, value: str) -> ToneColours:
        """Parse ``off``/``none`` or five semicolon-separated RGB codes.

        Args:
            value: Setting such as ``00e304;b35815;f00f0f;1767fe;777777``.

        Returns:
            Parsed tone colours.

        Raises:
            ValueError: If a code is not 6 alphanumeric characters or the
                number of codes is not five.
        """

        lowered = value.strip().lower()
        if lowered in {"off", "none"}:
            return cls.off()

        codes = [code.strip() for code in lowered.split(";")]
        for code in codes:
            if not COLOUR_CODE_RE.fullmatch(code):
                raise ValueError(f"Expected 6-char alphanumeric code, got '{code}'")
        if len(codes) != 5:
            raise ValueError(f"Should specify five RGB codes, specified '{value}' instead")
        return cls(colours=tuple(codes))

    def css(self) -> str:
        """Return one ``.toneN`` rule per tone.

        Disabled colours still emit black rules so the Pleco link styling on
        the card does not turn the spans blue.
        """

        colours = self.colours or ("black",) * 5
        rules = []
        for tone, colour in enumerate(colours, start=1):
            value = colour if colour == "black" else f"#{colour}"
            rules.append(f".tone{tone} {{color: {value};}}")
        return "\n".join(rules)


def add_diacritic(syllable: PinyinSyllable) -> str:
    """Render a numbered syllable with its tone mark, e.g. ``lü4`` -> ``lǜ``.

    Neutral-tone and toneless tokens are returned unchanged. A leading
    capital (proper nouns) is preserved.
    """

    if syllable.tone is None or syllable.tone == NEUTRAL_TONE:
        return syllable.text
    marked = to_tone(f"{syllable.text.lower()}{syllable.tone}")
    if syllable.text[:1].isupper():
        marked = marked[:1].upper() + marked[1:]
    return marked


def colourise(token: str, tone: int | None) -> str:
    """Wrap ``token`` in a ``toneN`` span; toneless tokens pass through."""

    if tone is None:
        return token
    return f'<span class="tone{tone}">{token}</span>'


def render_pinyin(syllables: Sequence[PinyinSyllable], coloured: bool) -> str:
    """Render a syllable sequence as tone-marked pinyin.

    Args:
        syllables: Parsed syllables of one reading.
        coloured: Whether to wrap each syllable in a tone span.

    Returns:
        Concatenated syllables when coloured (spans separate them), otherwise
        space-separated plain pinyin.
    """

    if coloured:
        return "".join(colourise(add_diacritic(syllable), syllable.tone) for syllable in syllables)
    return " ".join(add_diacritic(syllable) for syllable in syllables)


def colour_hanzi(word: str, readings: Sequence[Reading], coloured: bool) -> str:
    """Colour each character of ``word`` by tone.

    When every reading agrees on the tone pattern the characters take those
    tones. Otherwise the tones are ambiguous and every character is shown as
    neutral. Words without readings are returned as-is. When the tone count
    and character count differ, the overlapping prefix is coloured and any
    remaining characters are kept uncoloured.
    """

    if not coloured or not readings:
        return word

    tones = tone_consensus(readings)
    if tones is None:
        return "".join(colourise(char, NEUTRAL_TONE) for char in word)
    coloured_prefix = "".join(colourise(char, tone) for char, tone in zip(word, tones))
    return coloured_prefix + word[len(tones) :]


def definitions_html(readings: Sequence[Reading]) -> str:
    """Render every reading's definitions, one ``<div>`` per reading."""

    return "".join(
        f"<div>{html.escape(' · '.join(reading.definitions))}</div>" for reading in readings
    )


def definitions_with_pinyin_html(readings: Sequence[Reading], coloured: bool) -> str:
    """Render every reading as a pinyin line followed by its definitions."""

    return "".join(
        f"<div class=reading>{render_pinyin(reading.pinyin, coloured)}</div>"
        f"<div>{html.escape(' · '.join(reading.definitions))}</div>"
        for reading in readings
    )
