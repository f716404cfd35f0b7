"""Index-keyed measured sizes with explicit fallbacks."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import NamedTuple

from crooked_text.layout.constants import PLACEHOLDER_HEIGHT, PLACEHOLDER_WIDTH


class Size(NamedTuple):
    width: float
    height: float


PLACEHOLDER_SIZE = Size(PLACEHOLDER_WIDTH, PLACEHOLDER_HEIGHT)


class MeasurementSet:
    """Sizes reported by the measurement collaborator, keyed by unit index.

    Entries are only ever added or replaced between layout passes. Every
    lookup has a defined fallback, so a layout pass never fails on a
    unit that has not been measured yet.

    A size can be marked stale when the style it was measured with has
    changed. Stale sizes keep serving lookups until a fresh one replaces
    them.
    """

    def __init__(self, sizes: Mapping[int, Size] | None = None) -> None:
        self._sizes: dict[int, Size] = {}
        self._stale: set[int] = set()
        if sizes:
            self.update(sizes)

    def record(self, index: int, size: Size | tuple[float, float]) -> None:
        if index < 0:
            raise ValueError(f"Measurement index must be >= 0, got {index}")
        self._sizes[index] = Size(float(size[0]), float(size[1]))
        self._stale.discard(index)

    def update(self, sizes: Mapping[int, Size | tuple[float, float]]) -> None:
        for index, size in sizes.items():
            self.record(index, size)

    def lookup(self, index: int) -> Size | None:
        """Measured size for index, or None if it has not arrived."""
        return self._sizes.get(index)

    def is_measured(self, index: int) -> bool:
        return index in self._sizes

    def mark_stale(self) -> None:
        """Flag every current size for re-measurement."""
        self._stale.update(self._sizes)

    def is_stale(self, index: int) -> bool:
        return index in self._stale

    def needs_measurement(self, index: int) -> bool:
        return index not in self._sizes or index in self._stale

    def size_at(self, index: int) -> Size:
        """Frame size for drawing: the placeholder when unmeasured."""
        size = self.lookup(index)
        return size if size is not None else PLACEHOLDER_SIZE

    def width_at(self, index: int) -> float:
        """Width for the angular math: 0 when unmeasured."""
        size = self.lookup(index)
        return size.width if size is not None else 0.0

    def height_at(self, index: int) -> float:
        size = self.lookup(index)
        return size.height if size is not None else 0.0

    def clear(self) -> None:
        self._sizes.clear()
        self._stale.clear()

    def copy(self) -> MeasurementSet:
        other = MeasurementSet(self._sizes)
        other._stale = set(self._stale)
        return other

    def __len__(self) -> int:
        return len(self._sizes)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._sizes))

    def __contains__(self, index: object) -> bool:
        return index in self._sizes

    def __repr__(self) -> str:
        return f"MeasurementSet({len(self._sizes)} sizes)"
