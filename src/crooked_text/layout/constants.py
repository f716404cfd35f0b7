"""Layout constants used across layout modules."""

# ---------------------------------------------------------------------------
# Measurement fallbacks
# ---------------------------------------------------------------------------
PLACEHOLDER_WIDTH: float = 1_000_000.0
"""Frame width reserved for a unit that has not been measured yet.

Wide enough to push the unit out of view until a real size arrives.
Never used in the angular math, where unmeasured units count as 0.
"""

PLACEHOLDER_HEIGHT: float = 0.0
"""Frame height reserved for an unmeasured unit."""

# ---------------------------------------------------------------------------
# Layout parameter defaults
# ---------------------------------------------------------------------------
DEFAULT_RADIUS: float = 100.0
"""Radius used by the CLI when none is given."""

DEFAULT_SPACING: float = 0.0
"""Additive arc-length gap between adjacent units."""
