"""Measurement and SVG rendering for arc text."""

from crooked_text.render.measure import EstimatingMeasurer, FontMeasurer, measure_all
from crooked_text.render.style import Theme
from crooked_text.render.svg import render_svg

__all__ = ["EstimatingMeasurer", "FontMeasurer", "Theme", "measure_all", "render_svg"]
