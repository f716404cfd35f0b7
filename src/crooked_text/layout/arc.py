"""Arc layout: angle and radial offset for each character unit.

Widths are converted to angles with the arc-length approximation
``angle = width / radius``. Characters are small relative to the radius,
so accumulating linear widths gives the angular position of each unit
without fitting chords. The whole run is shifted so it straddles angle 0,
which points straight up; angles grow clockwise with the unit index.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class Alignment(Enum):
    """Which edge of the text sits on the radius."""

    INSIDE = "inside"
    CENTER = "center"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class Placement:
    """Computed position of one unit around the circle center."""

    index: int
    angle: float  # radians, 0 = straight up, clockwise
    radial_offset: float


def validate_parameters(radius: float, spacing: float = 0.0) -> None:
    """Reject parameters that would make the layout non-finite."""
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError(f"Radius must be a finite number > 0, got {radius!r}")
    if not math.isfinite(spacing):
        raise ValueError(f"Spacing must be a finite number, got {spacing!r}")


def text_radius(radius: float, height: float, alignment: Alignment) -> float:
    """Distance from the circle center to a unit of the given height."""
    if alignment is Alignment.INSIDE:
        return radius - height / 2
    if alignment is Alignment.OUTSIDE:
        return radius + height / 2
    return radius


def arc_angles(
    widths: Sequence[float],
    radius: float,
    spacing: float = 0.0,
) -> list[float]:
    """Angle of every unit's center, in radians.

    ``widths`` covers all units; unmeasured units must be passed as 0.
    """
    validate_parameters(radius, spacing)
    n = len(widths)
    if n == 0:
        return []

    arc_spacing = spacing / radius
    total_arc_width = sum(widths) / radius
    centering = -total_arc_width / 2
    spacing_base = -arc_spacing * (n - 1) / 2

    angles: list[float] = []
    prev_width = 0.0
    for i, width in enumerate(widths):
        prev_arc_width = prev_width / radius
        char_arc_offset = width / 2 / radius
        angles.append(
            prev_arc_width
            + char_arc_offset
            + centering
            + spacing_base
            + arc_spacing * i
        )
        prev_width += width
    return angles


def compute_placements(
    widths: Sequence[float],
    heights: Sequence[float],
    radius: float,
    spacing: float = 0.0,
    alignment: Alignment = Alignment.CENTER,
) -> list[Placement]:
    """Place every unit on the arc.

    Args:
        widths: Measured width per unit, 0 where not yet measured.
        heights: Measured height per unit, 0 where not yet measured.
        radius: Circle radius, finite and > 0.
        spacing: Arc-length gap between adjacent units. Negative values
            tighten the run and may overlap characters.
        alignment: Selects the radial offset formula only.

    Returns:
        One placement per unit, in unit order.
    """
    if len(widths) != len(heights):
        raise ValueError(
            f"Got {len(widths)} widths but {len(heights)} heights"
        )
    angles = arc_angles(widths, radius, spacing)
    return [
        Placement(
            index=i,
            angle=angle,
            radial_offset=text_radius(radius, heights[i], alignment),
        )
        for i, angle in enumerate(angles)
    ]
