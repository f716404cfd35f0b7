"""Split text into individually positioned character units.

A unit is one displayable grapheme-like cluster: a base code point plus
any combining marks, variation selectors, skin-tone modifiers and
zero-width-joiner continuations that follow it. Regional indicator
symbols pair up into one flag unit.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

ZERO_WIDTH_JOINER = "\u200d"


@dataclass(frozen=True)
class CharacterUnit:
    """One indexed grapheme of the source text."""

    index: int
    character: str

    @property
    def id(self) -> str:
        """Stable identity used to correlate measurements and redraws."""
        return f"{self.index} {self.character}"


def _is_variation_selector(ch: str) -> bool:
    cp = ord(ch)
    return 0xFE00 <= cp <= 0xFE0F or 0xE0100 <= cp <= 0xE01EF


def _is_skin_tone_modifier(ch: str) -> bool:
    return 0x1F3FB <= ord(ch) <= 0x1F3FF


def _is_regional_indicator(ch: str) -> bool:
    return 0x1F1E6 <= ord(ch) <= 0x1F1FF


def _extends_cluster(ch: str) -> bool:
    """Whether ch attaches to the preceding unit instead of starting one."""
    if unicodedata.combining(ch):
        return True
    if unicodedata.category(ch) in ("Mn", "Me"):
        return True
    return (
        ch == ZERO_WIDTH_JOINER
        or _is_variation_selector(ch)
        or _is_skin_tone_modifier(ch)
    )


def split_units(text: str) -> list[CharacterUnit]:
    """Split text into character units, indexed in reading order."""
    clusters: list[str] = []
    join_next = False
    for ch in text:
        # Second half of a flag joins the lone indicator before it
        completes_flag = (
            _is_regional_indicator(ch)
            and bool(clusters)
            and len(clusters[-1]) == 1
            and _is_regional_indicator(clusters[-1])
        )
        if clusters and (join_next or completes_flag or _extends_cluster(ch)):
            clusters[-1] += ch
        else:
            clusters.append(ch)
        join_next = ch == ZERO_WIDTH_JOINER

    return [CharacterUnit(index=i, character=c) for i, c in enumerate(clusters)]
