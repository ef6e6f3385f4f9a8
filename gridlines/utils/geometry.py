"""Leaf-node geometry value types. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import box

from gridlines.errors import InvalidArtboardError

# Two points closer than this on both axes are the same grid point.
DEFAULT_TOLERANCE = 0.001


class Point(NamedTuple):
    x: float
    y: float


class Direction(NamedTuple):
    dx: float
    dy: float

    @property
    def is_zero(self) -> bool:
        return self.dx == 0 and self.dy == 0


def direction(start: Point, end: Point) -> Direction:
    """Direction vector end - start."""
    return Direction(end[0] - start[0], end[1] - start[1])


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def points_equal(p1: Point, p2: Point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Per-axis comparison: both |dx| and |dy| strictly below tolerance."""
    return abs(p1[0] - p2[0]) < tolerance and abs(p1[1] - p2[1]) < tolerance


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned drawing surface bounds.

    ``bottom <= top``: the rectangle's y axis grows upward, so for SVG
    documents ``top`` holds the larger y value even though it renders lower.
    """

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_viewbox(cls, x: float, y: float, width: float, height: float) -> Rectangle:
        return cls(left=x, top=y + height, right=x + width, bottom=y)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def validate(self) -> Rectangle:
        """Raise InvalidArtboardError unless the bounds are finite and normalized."""
        values = (self.left, self.top, self.right, self.bottom)
        if not all(math.isfinite(v) for v in values):
            raise InvalidArtboardError(f"Artboard bounds must be finite: {values}")
        if self.left > self.right:
            raise InvalidArtboardError(f"Artboard left {self.left} is right of right {self.right}")
        if self.bottom > self.top:
            raise InvalidArtboardError(f"Artboard bottom {self.bottom} is above top {self.top}")
        return self

    def on_boundary(self, point: Point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True if point lies on one of the four sides (corners included)."""
        outline = box(self.left, self.bottom, self.right, self.top).exterior
        return outline.distance(ShapelyPoint(point[0], point[1])) < tolerance


@dataclass(frozen=True, eq=False)
class Segment:
    """One finished grid line. Equality ignores endpoint order."""

    start: Point
    end: Point

    @property
    def length(self) -> float:
        return distance(self.start, self.end)

    def reversed(self) -> Segment:
        return Segment(self.end, self.start)

    def is_equivalent(self, other: Segment, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Undirected tolerance match: {A, B} matches {A', B'} or {B', A'}."""
        return (
            points_equal(self.start, other.start, tolerance)
            and points_equal(self.end, other.end, tolerance)
        ) or (
            points_equal(self.start, other.end, tolerance)
            and points_equal(self.end, other.start, tolerance)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return {self.start, self.end} == {other.start, other.end}

    def __hash__(self) -> int:
        return hash(frozenset((self.start, self.end)))
