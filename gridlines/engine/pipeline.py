"""Pipeline orchestrator — traversal, extent, dedup, emission in source order."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from gridlines.engine.config import GridConfig
from gridlines.engine.context import GridContext
from gridlines.engine.dedup import LineSet
from gridlines.engine.extent import classify_edge
from gridlines.engine.shapes import ShapeItem
from gridlines.engine.sink import EmissionSink
from gridlines.engine.traversal import traverse
from gridlines.errors import EmptySelectionError, SkipReason
from gridlines.utils.geometry import Rectangle

logger = logging.getLogger(__name__)


class GridlinePipeline:
    """Turns a selection into deduplicated full-artboard grid lines.

    The artboard and the sink are fixed at construction; each ``run`` starts
    from an empty line set.
    """

    def __init__(
        self,
        artboard: Rectangle,
        sink: EmissionSink,
        config: GridConfig | None = None,
    ) -> None:
        self.artboard = artboard
        self.sink = sink
        self.config = config or GridConfig()

    def run(self, selection: Sequence[ShapeItem], layer: Any = None) -> GridContext:
        """Process every selected item and emit each new line to ``layer``."""
        self.artboard.validate()
        if not selection:
            raise EmptySelectionError()

        start = time.perf_counter()
        ctx = GridContext(
            artboard=self.artboard,
            layer=layer,
            lines=LineSet(self.config.tolerance),
        )

        for item in selection:
            for edge in traverse(item):
                ctx.edges_processed += 1
                result = classify_edge(
                    edge.start,
                    edge.end,
                    self.artboard,
                    self.config.tolerance,
                    self.config.boundary_eps,
                )
                if isinstance(result, SkipReason):
                    ctx.skip(result)
                    logger.debug("  edge %s -> %s: %s", edge.start, edge.end, result.value)
                    continue
                if not ctx.lines.admit(result):
                    ctx.skip(SkipReason.DUPLICATE_LINE)
                    continue
                self.sink.emit(result, layer)

        ctx.elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Gridlines: %d lines from %d edges (%d degenerate, %d outside, %d duplicate) in %.1fms",
            ctx.num_lines,
            ctx.edges_processed,
            ctx.skipped[SkipReason.DEGENERATE_EDGE.value],
            ctx.skipped[SkipReason.NO_BOUNDARY_CROSSING.value],
            ctx.skipped[SkipReason.DUPLICATE_LINE.value],
            ctx.elapsed_ms,
        )
        return ctx


def create_pipeline(
    artboard: Rectangle,
    sink: EmissionSink,
    config: GridConfig | None = None,
) -> GridlinePipeline:
    """Factory function for creating a pipeline instance."""
    return GridlinePipeline(artboard, sink, config=config)
