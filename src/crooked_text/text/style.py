"""Uniform text styling applied to every character unit."""

from __future__ import annotations

from dataclasses import dataclass, replace

BOLD_WEIGHTS = ("bold", "bolder", "600", "700", "800", "900")


@dataclass(frozen=True)
class TextStyle:
    """Styling shared by every unit, for both measurement and drawing.

    Each builder method returns a new style with one field changed, so a
    style can be derived step by step without touching the original::

        TextStyle().with_italic().bold().with_underline(color="#ff0000")
    """

    italic: bool = False
    font_weight: str | int | None = None
    baseline_offset: float = 0.0
    underline: bool = False
    underline_color: str | None = None
    strikethrough: bool = False
    strikethrough_color: str | None = None

    @property
    def is_bold(self) -> bool:
        if self.font_weight is None:
            return False
        return str(self.font_weight).lower() in BOLD_WEIGHTS

    def with_italic(self, active: bool = True) -> TextStyle:
        return replace(self, italic=active)

    def bold(self) -> TextStyle:
        return self.with_font_weight("bold")

    def with_font_weight(self, weight: str | int | None) -> TextStyle:
        return replace(self, font_weight=weight)

    def with_baseline_offset(self, offset: float) -> TextStyle:
        return replace(self, baseline_offset=offset)

    def with_underline(self, active: bool = True, color: str | None = None) -> TextStyle:
        return replace(self, underline=active, underline_color=color)

    def with_strikethrough(
        self, active: bool = True, color: str | None = None
    ) -> TextStyle:
        return replace(self, strikethrough=active, strikethrough_color=color)
