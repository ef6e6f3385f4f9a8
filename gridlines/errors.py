"""Error taxonomy for gridline generation.

Only precondition violations and unusable input are raised. Per-edge
outcomes (degenerate edge, no boundary crossing, duplicate line) are
``SkipReason`` values counted on the run context instead.
"""

from __future__ import annotations

import enum


class GridlinesError(Exception):
    """Base class for errors that abort a gridline run."""


class EmptySelectionError(GridlinesError):
    def __init__(self, message: str = "Please select artwork.") -> None:
        super().__init__(message)


class InvalidArtboardError(GridlinesError, ValueError):
    """Artboard bounds are not a normalized rectangle."""


class SvgParseError(GridlinesError):
    """The SVG document could not be read."""


class SkipReason(str, enum.Enum):
    DEGENERATE_EDGE = "degenerate_edge"
    NO_BOUNDARY_CROSSING = "no_boundary_crossing"
    DUPLICATE_LINE = "duplicate_line"
