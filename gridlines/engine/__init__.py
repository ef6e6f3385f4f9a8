"""Gridline construction engine."""

from gridlines.engine.clipper import intersect
from gridlines.engine.config import GridConfig
from gridlines.engine.context import GridContext
from gridlines.engine.dedup import LineSet, admit
from gridlines.engine.extent import extend
from gridlines.engine.pipeline import GridlinePipeline, create_pipeline
from gridlines.engine.traversal import traverse

__all__ = [
    "intersect",
    "extend",
    "admit",
    "traverse",
    "LineSet",
    "GridConfig",
    "GridContext",
    "GridlinePipeline",
    "create_pipeline",
]
