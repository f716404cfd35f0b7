"""Character units and text styling."""

from crooked_text.text.style import TextStyle
from crooked_text.text.units import CharacterUnit, split_units

__all__ = ["CharacterUnit", "TextStyle", "split_units"]
