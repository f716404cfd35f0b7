"""SVG generation for arc text using drawsvg."""

from __future__ import annotations

import logging
import math

import drawsvg as draw

from crooked_text.layout.engine import ArcLayout, DrawDirective
from crooked_text.render.constants import ANGLE_PRECISION
from crooked_text.render.style import Theme
from crooked_text.text.style import TextStyle

logger = logging.getLogger(__name__)


def style_attributes(style: TextStyle) -> dict[str, str]:
    """SVG presentation attributes for a text style."""
    attrs: dict[str, str] = {}
    if style.italic:
        attrs["font_style"] = "italic"
    if style.font_weight is not None:
        attrs["font_weight"] = str(style.font_weight)
    if style.baseline_offset:
        attrs["baseline_shift"] = f"{style.baseline_offset:g}"

    decorations = []
    colors = []
    if style.underline:
        decorations.append("underline")
        if style.underline_color:
            colors.append(style.underline_color)
    if style.strikethrough:
        decorations.append("line-through")
        if style.strikethrough_color:
            colors.append(style.strikethrough_color)
    if decorations:
        attrs["text_decoration"] = " ".join(decorations)
    if colors:
        # SVG has a single decoration color per element
        if len(set(colors)) > 1:
            logger.warning(
                "Underline color %s and strikethrough color %s differ; "
                "SVG draws both decorations in %s",
                colors[0], colors[1], colors[0],
            )
        attrs["style"] = f"text-decoration-color: {colors[0]}"
    return attrs


def canvas_size(layout: ArcLayout, theme: Theme) -> float:
    """Side length of the square canvas holding the whole circle."""
    tallest = max(
        (d.frame_height for d in layout.directives if d.measured),
        default=0.0,
    )
    return 2 * (layout.arc_text.radius + tallest + theme.margin)


def render_svg(
    layout: ArcLayout,
    theme: Theme,
    font_size: float | None = None,
    show_guide: bool = False,
    font_family: str | None = None,
) -> str:
    """Render the current pass of an arc layout to an SVG string.

    Units that have not been measured yet are not drawn. ``font_family``
    overrides the theme font, e.g. with the face the units were
    measured with.
    """
    size = canvas_size(layout, theme)
    cx = cy = size / 2
    radius = layout.arc_text.radius

    d = draw.Drawing(size, size)
    d.append(draw.Rectangle(0, 0, size, size, fill=theme.background_color))

    if show_guide:
        d.append(draw.Circle(
            cx, cy, radius,
            fill="none",
            stroke=theme.guide_stroke,
            stroke_width=theme.guide_stroke_width,
            stroke_dasharray=theme.guide_dasharray,
        ))

    group = draw.Group(role="img", aria_label=layout.arc_text.text)
    _render_characters(
        group,
        layout.directives,
        layout.arc_text.style,
        theme,
        font_size or theme.font_size,
        font_family or theme.font_family,
        cx, cy,
    )
    d.append(group)

    return d.as_svg()


def _render_characters(
    group: draw.Group,
    directives: list[DrawDirective],
    style: TextStyle,
    theme: Theme,
    font_size: float,
    font_family: str,
    cx: float,
    cy: float,
) -> None:
    """Draw each unit offset up from the center, then rotated into place."""
    attrs = style_attributes(style)
    for directive in directives:
        if not directive.measured:
            continue
        degrees = round(math.degrees(directive.angle), ANGLE_PRECISION)
        group.append(draw.Text(
            directive.character,
            font_size,
            cx, cy - directive.radial_offset,
            fill=theme.text_color,
            font_family=font_family,
            text_anchor="middle",
            dominant_baseline="central",
            transform=f"rotate({degrees:g} {cx:g} {cy:g})",
            **attrs,
        ))
