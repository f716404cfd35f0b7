"""Light theme."""

from crooked_text.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    text_color="#333333",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    font_size=18.0,
    guide_stroke="rgba(0, 0, 0, 0.15)",
    guide_stroke_width=1.5,
)
