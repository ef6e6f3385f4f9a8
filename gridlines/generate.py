"""Document-level entry point: SVG text in, SVG text with a gridline layer out."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from gridlines.engine.config import GridConfig
from gridlines.engine.context import GridContext
from gridlines.engine.pipeline import create_pipeline
from gridlines.errors import EmptySelectionError
from gridlines.svg.parser import parse_document, select_items
from gridlines.svg.serializer import SvgLayerSink, create_layer, serialize_document

logger = logging.getLogger(__name__)


@dataclass
class GridlineResult:
    svg: str
    layer_id: str
    context: GridContext


def generate_gridlines(
    svg_text: str,
    selection: Sequence[str] | None = None,
    config: GridConfig | None = None,
) -> GridlineResult:
    """Add a layer of construction lines derived from the selected artwork.

    Raises EmptySelectionError when nothing is selected; the document is
    left untouched in that case.
    """
    config = config or GridConfig()
    document = parse_document(svg_text)
    document.artboard.validate()

    items = select_items(document, selection)
    if not items:
        raise EmptySelectionError()
    logger.info("Selected %d items", len(items))

    layer = create_layer(document, config.layer_name)
    pipeline = create_pipeline(document.artboard, SvgLayerSink(document, config), config)
    ctx = pipeline.run(items, layer)

    return GridlineResult(
        svg=serialize_document(document),
        layer_id=layer.get("id", ""),
        context=ctx,
    )
