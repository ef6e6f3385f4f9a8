"""Shape model — the selectable artwork variants that carry edges.

Each variant is a plain dataclass; traversal dispatches on the type.
``source_id`` points back to the element the item was built from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from gridlines.utils.geometry import Point


@dataclass
class SimpleOutline:
    """One outline: anchors in stored order, implicitly closed."""

    anchors: list[Point] = field(default_factory=list)
    source_id: str = ""


@dataclass
class CompoundOutline:
    outlines: list[SimpleOutline] = field(default_factory=list)
    source_id: str = ""


@dataclass
class Group:
    children: list["ShapeItem"] = field(default_factory=list)
    source_id: str = ""


@dataclass
class OtherItem:
    """Selected artwork with no anchors (text, images, curves-only shapes)."""

    tag: str = ""
    source_id: str = ""


ShapeItem = Union[Group, CompoundOutline, SimpleOutline, OtherItem]


@dataclass(frozen=True)
class Edge:
    start: Point
    end: Point
