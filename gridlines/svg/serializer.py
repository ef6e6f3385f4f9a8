"""Layer creation, line emission and SVG output."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from gridlines.engine.config import GridConfig
from gridlines.svg.parser import INKSCAPE_NS, SvgDocument, local_name
from gridlines.utils.geometry import Segment

logger = logging.getLogger(__name__)

_LABEL_ATTR = f"{{{INKSCAPE_NS}}}label"
_GROUPMODE_ATTR = f"{{{INKSCAPE_NS}}}groupmode"


def create_layer(document: SvgDocument, name: str = "Gridlines") -> ET.Element:
    """Append a new top-level layer named distinctly from existing layers.

    ``name`` is used as-is when free, otherwise ``"<name> 2"``, ``"<name> 3"``...
    """
    root = document.root
    taken_ids = {el.get("id") for el in root.iter() if el.get("id")}
    taken_labels = {
        child.get(_LABEL_ATTR) or child.get("id")
        for child in root
        if local_name(child) == "g"
    }

    label = name
    n = 1
    while label in taken_labels or _layer_id(label) in taken_ids:
        n += 1
        label = f"{name} {n}"

    layer = ET.SubElement(root, document.qname("g"))
    layer.set("id", _layer_id(label))
    layer.set(_LABEL_ATTR, label)
    layer.set(_GROUPMODE_ATTR, "layer")
    logger.debug("Created layer %r", label)
    return layer


class SvgLayerSink:
    """Emission sink writing each grid line as a ``<line>`` on the layer element."""

    def __init__(self, document: SvgDocument, config: GridConfig | None = None) -> None:
        self.document = document
        self.config = config or GridConfig()

    def emit(self, segment: Segment, layer: ET.Element) -> None:
        line = ET.SubElement(layer, self.document.qname("line"))
        line.set("x1", format_coord(segment.start.x))
        line.set("y1", format_coord(segment.start.y))
        line.set("x2", format_coord(segment.end.x))
        line.set("y2", format_coord(segment.end.y))
        line.set("fill", "none")
        line.set("stroke", self.config.stroke_color)
        line.set("stroke-width", format_coord(self.config.stroke_width))


def serialize_document(document: SvgDocument) -> str:
    body = ET.tostring(document.root, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body


def format_coord(value: float) -> str:
    """Fixed 4-decimal precision with trailing zeros stripped."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _layer_id(label: str) -> str:
    return label.replace(" ", "-")
