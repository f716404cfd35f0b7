"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Heuristic measurement
# ---------------------------------------------------------------------------
CHAR_WIDTH_RATIO: float = 0.6
"""Default character width as a fraction of font size."""

NARROW_CHAR_WIDTH_RATIO: float = 0.3
"""Width ratio for narrow glyphs such as i, l, punctuation."""

WIDE_CHAR_WIDTH_RATIO: float = 0.9
"""Width ratio for wide glyphs such as m, w, M, W."""

SPACE_WIDTH_RATIO: float = 0.33
"""Width ratio for whitespace."""

LINE_HEIGHT_RATIO: float = 1.2
"""Unit height as a fraction of font size."""

BOLD_WIDTH_FACTOR: float = 1.1
"""Extra width for bold weights."""

NARROW_CHARS: str = "iljtf.,;:!|'`"
WIDE_CHARS: str = "mwMW@#%"

# ---------------------------------------------------------------------------
# SVG drawing
# ---------------------------------------------------------------------------
DEFAULT_FONT_SIZE: float = 18.0
"""Font size used when neither theme nor caller sets one."""

ANGLE_PRECISION: int = 4
"""Decimal places kept for rotation angles in SVG transforms."""
