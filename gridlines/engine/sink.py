"""Emission sink port: where admitted grid lines are persisted."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from gridlines.utils.geometry import Segment


class EmissionSink(Protocol):
    def emit(self, segment: Segment, layer: Any) -> None:
        """Persist ``segment`` as a visible straight path on ``layer``."""
        ...


@dataclass
class RecordingSink:
    """In-memory sink: remembers each (segment, layer) it is handed."""

    emitted: list[tuple[Segment, Any]] = field(default_factory=list)

    def emit(self, segment: Segment, layer: Any) -> None:
        self.emitted.append((segment, layer))

    @property
    def segments(self) -> list[Segment]:
        return [segment for segment, _ in self.emitted]
