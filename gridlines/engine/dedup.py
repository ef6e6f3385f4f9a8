"""Line deduplicator — the set of grid lines already emitted in a run."""

from __future__ import annotations

from collections.abc import Iterator

from gridlines.utils.geometry import DEFAULT_TOLERANCE, Segment


def admit(
    segment: Segment,
    emitted: list[Segment],
    tolerance: float = DEFAULT_TOLERANCE,
) -> bool:
    """Append ``segment`` unless an equivalent line is already in ``emitted``."""
    for existing in emitted:
        if segment.is_equivalent(existing, tolerance):
            return False
    emitted.append(segment)
    return True


class LineSet:
    """Insertion-ordered, grow-only collection of mutually distinct lines.

    Membership uses undirected per-axis tolerance matching, checked by a
    linear scan over every admitted line.
    """

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE) -> None:
        self.tolerance = tolerance
        self._lines: list[Segment] = []

    def admit(self, segment: Segment) -> bool:
        return admit(segment, self._lines, self.tolerance)

    def __contains__(self, segment: object) -> bool:
        if not isinstance(segment, Segment):
            return False
        return any(segment.is_equivalent(s, self.tolerance) for s in self._lines)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> list[Segment]:
        return list(self._lines)
