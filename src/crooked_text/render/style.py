"""Theme and style constants for arc text rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for an arc text drawing."""

    name: str
    background_color: str
    text_color: str
    font_family: str
    font_size: float
    guide_stroke: str
    guide_stroke_width: float = 1.0
    guide_dasharray: str = "4 4"
    margin: float = 40.0  # canvas space beyond the radius
