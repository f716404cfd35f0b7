"""crooked-text: lay out and render text along a circular arc."""

from crooked_text.layout import (
    Alignment,
    ArcLayout,
    ArcText,
    DrawDirective,
    MeasurementSet,
    Placement,
    Size,
    compute_placements,
    settle,
)
from crooked_text.text import CharacterUnit, TextStyle, split_units

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "ArcLayout",
    "ArcText",
    "CharacterUnit",
    "DrawDirective",
    "MeasurementSet",
    "Placement",
    "Size",
    "TextStyle",
    "compute_placements",
    "settle",
    "split_units",
    "__version__",
]
