"""GridContext — the mutable state of one gridline run.

The emitted line set is owned by the run; nothing carries over between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gridlines.engine.dedup import LineSet
from gridlines.errors import SkipReason
from gridlines.utils.geometry import Rectangle, Segment


@dataclass
class GridContext:
    """Shared state for a single run over one selection."""

    artboard: Rectangle
    # Layer handle passed unchanged to every emission
    layer: Any = None
    lines: LineSet = field(default_factory=LineSet)
    edges_processed: int = 0
    skipped: dict[str, int] = field(
        default_factory=lambda: {reason.value: 0 for reason in SkipReason}
    )
    elapsed_ms: float = 0.0

    def skip(self, reason: SkipReason) -> None:
        self.skipped[reason.value] += 1

    @property
    def segments(self) -> list[Segment]:
        return self.lines.lines

    @property
    def num_lines(self) -> int:
        return len(self.lines)
