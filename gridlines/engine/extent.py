"""Extend an edge to the full width of the artboard."""

from __future__ import annotations

import logging

import numpy as np

from gridlines.engine.clipper import intersect
from gridlines.errors import SkipReason
from gridlines.utils.geometry import (
    DEFAULT_TOLERANCE,
    Point,
    Rectangle,
    Segment,
    direction,
    points_equal,
)

logger = logging.getLogger(__name__)


def classify_edge(
    start: Point,
    end: Point,
    rect: Rectangle,
    tolerance: float = DEFAULT_TOLERANCE,
    boundary_eps: float = 0.0,
) -> Segment | SkipReason:
    """Clip the line through ``start`` and ``end`` to ``rect``.

    Returns the extent segment, or the reason the edge yields none.
    """
    d = direction(start, end)
    if d.is_zero:
        return SkipReason.DEGENERATE_EDGE

    candidates = intersect(start, d, rect, boundary_eps)
    if len(candidates) < 2:
        return SkipReason.NO_BOUNDARY_CROSSING

    # Stable sort keeps duplicate corner hits adjacent; the extremes are
    # the nearest and farthest crossings from the edge start.
    pts = np.asarray(candidates, dtype=np.float64)
    dists = np.hypot(pts[:, 0] - start[0], pts[:, 1] - start[1])
    order = np.argsort(dists, kind="stable")
    first = candidates[int(order[0])]
    last = candidates[int(order[-1])]

    # Line only grazes a corner
    if points_equal(first, last, tolerance):
        return SkipReason.NO_BOUNDARY_CROSSING

    return Segment(first, last)


def extend(
    start: Point,
    end: Point,
    rect: Rectangle,
    tolerance: float = DEFAULT_TOLERANCE,
    boundary_eps: float = 0.0,
) -> Segment | None:
    """Maximal segment of the edge's line inside ``rect``, or None."""
    result = classify_edge(start, end, rect, tolerance, boundary_eps)
    if isinstance(result, SkipReason):
        logger.debug("Edge %s -> %s skipped: %s", start, end, result.value)
        return None
    return result
