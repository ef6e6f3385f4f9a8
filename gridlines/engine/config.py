"""Tolerances and output styling for a gridline run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridlines.config import Settings


@dataclass
class GridConfig:
    """Controls clipping slack, deduplication and the emitted line style."""

    # Per-axis distance under which two grid points are the same point
    tolerance: float = 0.001

    # Slack on the closed-interval test at the artboard edges, absorbs
    # rounding when a line runs exactly through a side or corner
    boundary_eps: float = 1e-9

    # Target layer, suffixed (" 2", " 3", ...) when the name is taken
    layer_name: str = "Gridlines"

    # Emitted lines: solid, unfilled, registration colour
    stroke_width: float = 1.0
    stroke_color: str = "#000000"

    def __post_init__(self) -> None:
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")

    @classmethod
    def from_settings(cls, settings: Settings) -> GridConfig:
        return cls(
            tolerance=settings.gridlines_tolerance,
            layer_name=settings.gridlines_layer_name,
            stroke_color=settings.gridlines_stroke_color,
        )
