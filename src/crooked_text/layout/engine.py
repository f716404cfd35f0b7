"""Arc text configuration and the full-recompute layout loop.

Sizes arrive from the measurement collaborator one unit or one batch at
a time, in any order. The angle of every unit depends on the total
measured width, so each new batch triggers a full recompute of every
placement rather than a local update.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from crooked_text.layout.arc import (
    Alignment,
    Placement,
    compute_placements,
    validate_parameters,
)
from crooked_text.layout.constants import DEFAULT_SPACING
from crooked_text.layout.measurements import MeasurementSet, Size
from crooked_text.text.style import TextStyle
from crooked_text.text.units import CharacterUnit, split_units

if TYPE_CHECKING:
    from crooked_text.render.measure import Measurer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArcText:
    """Immutable description of text to lay out along an arc.

    Builder methods return a copy with one field changed.
    """

    text: str
    radius: float
    alignment: Alignment = Alignment.CENTER
    spacing: float = DEFAULT_SPACING
    style: TextStyle = field(default_factory=TextStyle)

    def __post_init__(self) -> None:
        validate_parameters(self.radius, self.spacing)

    def units(self) -> list[CharacterUnit]:
        return split_units(self.text)

    def kerning(self, spacing: float) -> ArcText:
        return replace(self, spacing=spacing)

    def with_radius(self, radius: float) -> ArcText:
        return replace(self, radius=radius)

    def aligned(self, alignment: Alignment) -> ArcText:
        return replace(self, alignment=alignment)

    def styled(self, style: TextStyle) -> ArcText:
        return replace(self, style=style)

    def italic(self) -> ArcText:
        return self.styled(self.style.with_italic())

    def bold(self) -> ArcText:
        return self.styled(self.style.bold())

    def font_weight(self, weight: str | int | None) -> ArcText:
        return self.styled(self.style.with_font_weight(weight))

    def baseline_offset(self, offset: float) -> ArcText:
        return self.styled(self.style.with_baseline_offset(offset))

    def underline(self, active: bool = True, color: str | None = None) -> ArcText:
        return self.styled(self.style.with_underline(active, color))

    def strikethrough(self, active: bool = True, color: str | None = None) -> ArcText:
        return self.styled(self.style.with_strikethrough(active, color))


@dataclass(frozen=True)
class DrawDirective:
    """Everything the renderer needs to draw one unit."""

    index: int
    character: str
    angle: float
    radial_offset: float
    frame_width: float
    frame_height: float
    measured: bool


class ArcLayout:
    """Caller-visible layout state for one ArcText.

    Owns the unit sequence and the accumulated measurements. Every
    report triggers one full layout pass over all units.
    """

    def __init__(self, arc_text: ArcText) -> None:
        self.arc_text = arc_text
        self.units = arc_text.units()
        self.measurements = MeasurementSet()
        self.passes = 0
        self._placements: list[Placement] = []
        self._directives: list[DrawDirective] = []
        self.recompute()

    @property
    def directives(self) -> list[DrawDirective]:
        """Directives from the most recent pass."""
        return list(self._directives)

    def placements(self) -> list[Placement]:
        return list(self._placements)

    @property
    def is_settled(self) -> bool:
        return not any(self.measurements.needs_measurement(u.index) for u in self.units)

    def report(self, index: int, size: Size | tuple[float, float]) -> list[DrawDirective]:
        """Record one measured size and recompute."""
        self.measurements.record(index, size)
        return self.recompute()

    def report_many(
        self, sizes: Mapping[int, Size | tuple[float, float]]
    ) -> list[DrawDirective]:
        """Record a batch of measured sizes and recompute once."""
        self.measurements.update(sizes)
        return self.recompute()

    def reconfigure(self, arc_text: ArcText) -> list[DrawDirective]:
        """Switch to a new configuration.

        A text change rebuilds the units and drops all measurements.
        A style change keeps the old sizes in use but marks them stale,
        so the next settle re-measures every unit with the new style.
        Other changes keep the measurements as they are.
        """
        if arc_text.text != self.arc_text.text:
            self.units = arc_text.units()
            self.measurements.clear()
        elif arc_text.style != self.arc_text.style:
            self.measurements.mark_stale()
        self.arc_text = arc_text
        return self.recompute()

    def recompute(self) -> list[DrawDirective]:
        """Run a full layout pass over every unit."""
        cfg = self.arc_text
        m = self.measurements
        widths = [m.width_at(u.index) for u in self.units]
        heights = [m.height_at(u.index) for u in self.units]

        self._placements = compute_placements(
            widths, heights, cfg.radius, cfg.spacing, cfg.alignment
        )
        directives = []
        for unit, placement in zip(self.units, self._placements):
            frame = m.size_at(unit.index)
            directives.append(DrawDirective(
                index=unit.index,
                character=unit.character,
                angle=placement.angle,
                radial_offset=placement.radial_offset,
                frame_width=frame.width,
                frame_height=frame.height,
                measured=m.is_measured(unit.index),
            ))
        self._directives = directives
        self.passes += 1

        logger.debug(
            "Layout pass %d: %d units, %d measured, radius=%s, spacing=%s, %s",
            self.passes, len(self.units), len(m), cfg.radius, cfg.spacing,
            cfg.alignment.value,
        )
        return self.directives


def _batches(items: list[CharacterUnit], size: int) -> Iterator[list[CharacterUnit]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


def iter_passes(
    layout: ArcLayout,
    measurer: Measurer,
    batch_size: int | None = None,
    order: Iterable[int] | None = None,
) -> Iterator[list[DrawDirective]]:
    """Drive a layout to its settled state, yielding each pass.

    The first pass is the current state (typically nothing measured).
    Units without a measurement, or whose size is stale after a style
    change, are then measured in ``order`` (unit indices, default reading
    order), ``batch_size`` at a time, and each batch is reported back
    to the layout, which recomputes everything.
    """
    if batch_size is not None and batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")

    yield layout.directives

    by_index = {u.index: u for u in layout.units}
    if order is None:
        pending = list(layout.units)
    else:
        pending = [by_index[i] for i in order if i in by_index]
    pending = [u for u in pending if layout.measurements.needs_measurement(u.index)]
    if not pending:
        return

    from crooked_text.render.measure import measure_all

    style = layout.arc_text.style
    for batch in _batches(pending, batch_size or len(pending)):
        yield layout.report_many(measure_all(batch, style, measurer))


def settle(
    arc_text: ArcText,
    measurer: Measurer,
    batch_size: int | None = None,
) -> ArcLayout:
    """Lay out arc_text, measure every unit and return the settled layout."""
    layout = ArcLayout(arc_text)
    for _ in iter_passes(layout, measurer, batch_size=batch_size):
        pass
    return layout
