"""Enumerate the straight edges of a selection item."""

from __future__ import annotations

from collections.abc import Iterator

from gridlines.engine.shapes import CompoundOutline, Edge, Group, ShapeItem, SimpleOutline


def outline_edges(outline: SimpleOutline) -> Iterator[Edge]:
    """One edge per consecutive anchor pair, the last anchor closing to the first."""
    anchors = outline.anchors
    n = len(anchors)
    for j in range(n):
        yield Edge(anchors[j], anchors[(j + 1) % n])


def traverse(item: ShapeItem) -> Iterator[Edge]:
    """Lazily yield every edge under ``item``, depth-first in stored order.

    An edge shared by two sub-shapes is yielded once per occurrence.
    """
    if isinstance(item, Group):
        for child in item.children:
            yield from traverse(child)
    elif isinstance(item, CompoundOutline):
        for outline in item.outlines:
            yield from outline_edges(outline)
    elif isinstance(item, SimpleOutline):
        yield from outline_edges(item)

