"""Dark grey theme with light lettering."""

from crooked_text.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    text_color="#e0e0e0",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    font_size=18.0,
    guide_stroke="rgba(255, 255, 255, 0.2)",
)
