"""Theme definitions for arc text drawings."""

from crooked_text.themes.dark import DARK_THEME
from crooked_text.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
