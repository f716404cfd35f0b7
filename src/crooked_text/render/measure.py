"""Measurement collaborators: report the rendered size of a styled unit.

Two measurers are provided. ``EstimatingMeasurer`` needs no font files
and approximates widths from character classes, which is enough for
SVG output where the viewer's font is unknown anyway.
``FontMeasurer`` measures real glyph advances with Pillow.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from PIL import ImageFont

from crooked_text.layout.measurements import Size
from crooked_text.render.constants import (
    BOLD_WIDTH_FACTOR,
    CHAR_WIDTH_RATIO,
    LINE_HEIGHT_RATIO,
    NARROW_CHAR_WIDTH_RATIO,
    NARROW_CHARS,
    SPACE_WIDTH_RATIO,
    WIDE_CHAR_WIDTH_RATIO,
    WIDE_CHARS,
)
from crooked_text.text.style import TextStyle
from crooked_text.text.units import CharacterUnit

logger = logging.getLogger(__name__)


class Measurer(Protocol):
    def measure(self, unit: CharacterUnit, style: TextStyle) -> Size: ...


class EstimatingMeasurer:
    """Approximate unit sizes from character classes and font size."""

    def __init__(
        self,
        font_size: float,
        line_height_ratio: float = LINE_HEIGHT_RATIO,
    ) -> None:
        if font_size <= 0:
            raise ValueError(f"Font size must be > 0, got {font_size!r}")
        self.font_size = font_size
        self.line_height_ratio = line_height_ratio

    def _char_ratio(self, ch: str) -> float:
        if ch.isspace():
            return SPACE_WIDTH_RATIO
        if ch in NARROW_CHARS:
            return NARROW_CHAR_WIDTH_RATIO
        if ch in WIDE_CHARS:
            return WIDE_CHAR_WIDTH_RATIO
        if unicodedata.east_asian_width(ch) in ("W", "F"):
            return 1.0
        return CHAR_WIDTH_RATIO

    def measure(self, unit: CharacterUnit, style: TextStyle) -> Size:
        # Combining marks and joiners ride on the base character
        width = self.font_size * self._char_ratio(unit.character[0])
        if style.is_bold:
            width *= BOLD_WIDTH_FACTOR
        height = self.font_size * self.line_height_ratio + abs(style.baseline_offset)
        return Size(width, height)


class FontMeasurer:
    """Measure glyph advances and line height with a Pillow font.

    Without a font path, Pillow's bundled default font is used at the
    requested size. A separate bold font file can be given; otherwise
    bold units are measured with the regular face.
    """

    def __init__(
        self,
        font_size: float,
        font_path: str | Path | None = None,
        bold_font_path: str | Path | None = None,
    ) -> None:
        if font_size <= 0:
            raise ValueError(f"Font size must be > 0, got {font_size!r}")
        self.font_size = font_size
        self.font_path = font_path
        self.bold_font_path = bold_font_path
        self._fonts: dict[tuple[str | None, float], ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    def font(self, bold: bool = False) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        path = self.bold_font_path if bold and self.bold_font_path else self.font_path
        key_path = str(path) if path is not None else None
        key_size = float(self.font_size)
        cache_key = (key_path, key_size)
        if cache_key not in self._fonts:
            if key_path is None:
                font = ImageFont.load_default(size=key_size)
            else:
                font = ImageFont.truetype(key_path, key_size)
            logger.debug("Loaded font %s at size %g", key_path or "<default>", key_size)
            self._fonts[cache_key] = font
        return self._fonts[cache_key]

    @property
    def family_name(self) -> str | None:
        """Family name of the regular face, for drawing with the same font."""
        font = self.font()
        if isinstance(font, ImageFont.FreeTypeFont):
            family, _ = font.getname()
            return family
        return None

    def line_height(self, bold: bool = False) -> float:
        font = self.font(bold)
        if isinstance(font, ImageFont.FreeTypeFont):
            ascent, descent = font.getmetrics()
            return float(ascent + descent)
        _, top, _, bottom = font.getbbox("Hg")
        return float(bottom - top)

    def measure(self, unit: CharacterUnit, style: TextStyle) -> Size:
        font = self.font(style.is_bold)
        width = float(font.getlength(unit.character))
        height = self.line_height(style.is_bold) + abs(style.baseline_offset)
        return Size(width, height)


def measure_all(
    units: Iterable[CharacterUnit],
    style: TextStyle,
    measurer: Measurer,
) -> dict[int, Size]:
    """Measure every unit with the same style, keyed by unit index."""
    return {unit.index: measurer.measure(unit, style) for unit in units}
