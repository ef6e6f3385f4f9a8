"""SVG document adapter — facade over ElementTree + svgpathtools.

Reads the artboard from the root ``viewBox`` and builds the shape model for
a selection. Anchor points are mapped through every ``transform`` between
the element and the root, so they share the artboard's coordinate space.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from svgpathtools import parse_path
from svgpathtools.parser import parse_transform

from gridlines.engine.shapes import CompoundOutline, Group, OtherItem, ShapeItem, SimpleOutline
from gridlines.errors import SvgParseError
from gridlines.utils.geometry import Point, Rectangle

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
INKSCAPE_NS = "http://www.inkscape.org/namespaces/inkscape"

ET.register_namespace("", SVG_NS)
ET.register_namespace("inkscape", INKSCAPE_NS)
ET.register_namespace("xlink", "http://www.w3.org/1999/xlink")
ET.register_namespace("sodipodi", "http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd")

CONTAINER_TAGS = {"g", "a", "switch", "svg"}
OUTLINE_TAGS = {"path", "rect", "polygon", "polyline", "line"}
NON_RENDERED_TAGS = {
    "defs", "title", "desc", "metadata", "style", "script",
    "symbol", "clipPath", "mask", "marker", "pattern",
    "linearGradient", "radialGradient", "filter", "namedview",
}

_MOVETO_RE = re.compile(r"[Mm]")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

# An open sub-path ending within this distance of its start is closed.
_CONTINUITY_TOL = 1e-6

# W3C CSS 2.1 default replaced-element size
_DEFAULT_CANVAS = (300.0, 150.0)


@dataclass
class SvgDocument:
    """A parsed SVG file and the artboard its coordinates live on."""

    root: ET.Element
    artboard: Rectangle

    @property
    def namespace(self) -> str:
        if self.root.tag.startswith("{"):
            return self.root.tag[1:].split("}")[0]
        return ""

    def qname(self, tag: str) -> str:
        """Tag name in the document's SVG namespace."""
        ns = self.namespace
        return f"{{{ns}}}{tag}" if ns else tag


def local_name(element: ET.Element) -> str:
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return tag.split("}")[-1] if "}" in tag else tag


def parse_document(svg_text: str) -> SvgDocument:
    """Parse raw SVG text. Raises SvgParseError on malformed input."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG: {e}") from e
    if local_name(root) != "svg":
        raise SvgParseError(f"Root element is <{local_name(root)}>, expected <svg>")

    artboard = extract_artboard(root)
    logger.info(
        "Parsed SVG: artboard (%g, %g, %g, %g)",
        artboard.left, artboard.top, artboard.right, artboard.bottom,
    )
    return SvgDocument(root=root, artboard=artboard)


def extract_artboard(root: ET.Element) -> Rectangle:
    """Artboard from viewBox, else width/height, else the 300x150 default."""
    viewbox = root.get("viewBox")
    if viewbox:
        parts = [float(v) for v in _NUMBER_RE.findall(viewbox)]
        if len(parts) >= 4:
            return Rectangle.from_viewbox(*parts[:4])
        logger.warning("Ignoring malformed viewBox %r", viewbox)

    width = _parse_length(root.get("width"))
    height = _parse_length(root.get("height"))
    if width is not None and height is not None:
        return Rectangle.from_viewbox(0.0, 0.0, width, height)
    return Rectangle.from_viewbox(0.0, 0.0, *_DEFAULT_CANVAS)


def select_items(document: SvgDocument, ids: Sequence[str] | None = None) -> list[ShapeItem]:
    """Shape items for the selection, in selection order.

    With no ids, every top-level rendered child of ``<svg>`` is selected.
    Unknown ids are logged and dropped.
    """
    root = document.root
    if not ids:
        identity = np.identity(3)
        return [
            build_item(child, identity)
            for child in root
            if _is_rendered(child)
        ]

    parents = {child: parent for parent in root.iter() for child in parent}
    by_id = {el.get("id"): el for el in root.iter() if el.get("id")}

    items: list[ShapeItem] = []
    for element_id in ids:
        element = by_id.get(element_id)
        if element is None:
            logger.warning("Selection id %r not found, ignoring", element_id)
            continue
        items.append(build_item(element, _ancestor_matrix(element, parents)))
    return items


def build_item(element: ET.Element, matrix: NDArray[np.float64]) -> ShapeItem:
    """Shape-model item for ``element``; ``matrix`` maps its parent's space to the artboard."""
    tag = local_name(element)
    source_id = element.get("id", "")
    matrix = matrix @ _element_transform(element)

    if tag in CONTAINER_TAGS:
        return Group(
            children=[build_item(child, matrix) for child in element if _is_rendered(child)],
            source_id=source_id,
        )

    if tag == "path":
        outlines = _path_outlines(element.get("d", ""), matrix, source_id)
        if outlines is None:
            return OtherItem(tag=tag, source_id=source_id)
        if len(outlines) > 1:
            return CompoundOutline(outlines=outlines, source_id=source_id)
        if outlines:
            return outlines[0]
        return SimpleOutline(source_id=source_id)

    if tag in OUTLINE_TAGS:
        return SimpleOutline(
            anchors=_apply_matrix(_shape_anchors(element, tag), matrix),
            source_id=source_id,
        )

    return OtherItem(tag=tag, source_id=source_id)


def _path_outlines(
    d: str, matrix: NDArray[np.float64], source_id: str
) -> list[SimpleOutline] | None:
    try:
        subpaths = split_subpaths(d)
    except Exception as e:
        logger.warning("Failed to parse path %r: %s", source_id, e)
        return None

    outlines = []
    for segments in subpaths:
        outlines.append(
            SimpleOutline(
                anchors=_apply_matrix(subpath_anchors(segments), matrix),
                source_id=source_id,
            )
        )
    return outlines


def split_subpaths(d: str) -> list[list]:
    """Split path data into sub-paths at every moveto command.

    Each prefix up to the next moveto is parsed in turn, so a relative ``m``
    resolves against the current point of the data before it.
    """
    starts = [m.start() for m in _MOVETO_RE.finditer(d)]
    ends = starts[1:] + [len(d)]

    subpaths: list[list] = []
    seen = 0
    for end in ends:
        segments = list(parse_path(d[:end]))
        if len(segments) > seen:
            subpaths.append(segments[seen:])
        seen = len(segments)
    return subpaths


def subpath_anchors(segments: list) -> list[tuple[float, float]]:
    """Anchor points of one sub-path. Curves contribute only their end anchors."""
    if not segments:
        return []
    anchors = [(seg.start.real, seg.start.imag) for seg in segments]
    last = segments[-1].end
    if abs(last - segments[0].start) > _CONTINUITY_TOL:
        anchors.append((last.real, last.imag))
    return anchors


def _shape_anchors(element: ET.Element, tag: str) -> list[tuple[float, float]]:
    if tag == "rect":
        x = _parse_length(element.get("x")) or 0.0
        y = _parse_length(element.get("y")) or 0.0
        w = _parse_length(element.get("width")) or 0.0
        h = _parse_length(element.get("height")) or 0.0
        return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
    if tag == "line":
        return [
            (_parse_length(element.get("x1")) or 0.0, _parse_length(element.get("y1")) or 0.0),
            (_parse_length(element.get("x2")) or 0.0, _parse_length(element.get("y2")) or 0.0),
        ]
    # polygon / polyline
    values = [float(v) for v in _NUMBER_RE.findall(element.get("points", ""))]
    return list(zip(values[0::2], values[1::2]))


def _apply_matrix(points: list[tuple[float, float]], matrix: NDArray[np.float64]) -> list[Point]:
    if not points:
        return []
    pts = np.asarray(points, dtype=np.float64)
    homogeneous = np.column_stack([pts, np.ones(len(pts))])
    mapped = homogeneous @ matrix.T
    return [Point(float(x), float(y)) for x, y in mapped[:, :2]]


def _element_transform(element: ET.Element) -> NDArray[np.float64]:
    matrix = np.identity(3)
    if local_name(element) == "svg":
        # Nested viewport: x/y offset only, its viewBox scaling is not applied
        matrix[0, 2] = _parse_length(element.get("x")) or 0.0
        matrix[1, 2] = _parse_length(element.get("y")) or 0.0
    value = element.get("transform")
    if value:
        matrix = matrix @ np.asarray(parse_transform(value), dtype=np.float64)
    return matrix


def _ancestor_matrix(
    element: ET.Element, parents: dict[ET.Element, ET.Element]
) -> NDArray[np.float64]:
    """Composed transform of every ancestor below the root ``<svg>``."""
    chain = []
    parent = parents.get(element)
    while parent is not None and parent in parents:
        chain.append(parent)
        parent = parents.get(parent)
    matrix = np.identity(3)
    for ancestor in reversed(chain):
        matrix = matrix @ _element_transform(ancestor)
    return matrix


def _is_rendered(element: ET.Element) -> bool:
    tag = local_name(element)
    return bool(tag) and tag not in NON_RENDERED_TAGS


def _parse_length(value: str | None) -> float | None:
    if not value:
        return None
    match = _NUMBER_RE.match(value.strip())
    if not match:
        return None
    return float(match.group(0))
