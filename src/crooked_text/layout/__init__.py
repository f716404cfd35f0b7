"""Arc layout engine for crooked-text."""

from crooked_text.layout.arc import (
    Alignment,
    Placement,
    arc_angles,
    compute_placements,
    text_radius,
)
from crooked_text.layout.engine import (
    ArcLayout,
    ArcText,
    DrawDirective,
    iter_passes,
    settle,
)
from crooked_text.layout.measurements import MeasurementSet, Size

__all__ = [
    "Alignment",
    "ArcLayout",
    "ArcText",
    "DrawDirective",
    "MeasurementSet",
    "Placement",
    "Size",
    "arc_angles",
    "compute_placements",
    "iter_passes",
    "settle",
    "text_radius",
]
