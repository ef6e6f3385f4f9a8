"""Tests for layer creation, line emission and the document-level run."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from gridlines.engine.config import GridConfig
from gridlines.errors import EmptySelectionError, InvalidArtboardError
from gridlines.generate import generate_gridlines
from gridlines.svg.parser import INKSCAPE_NS, local_name, parse_document
from gridlines.svg.serializer import (
    SvgLayerSink,
    create_layer,
    format_coord,
    serialize_document,
)
from gridlines.utils.geometry import Point, Segment
from tests.conftest import EXISTING_LAYER_SVG, NESTED_SVG, NO_NAMESPACE_SVG, SQUARE_SVG

LABEL = f"{{{INKSCAPE_NS}}}label"


def _lines(layer: ET.Element) -> list[ET.Element]:
    return [el for el in layer if local_name(el) == "line"]


def _layer(svg: str, layer_id: str) -> ET.Element:
    root = ET.fromstring(svg)
    return next(el for el in root if el.get("id") == layer_id)


class TestCreateLayer:
    def test_new_layer_is_appended_last(self):
        doc = parse_document(SQUARE_SVG)
        layer = create_layer(doc)
        assert list(doc.root)[-1] is layer
        assert layer.tag == doc.qname("g")
        assert layer.get("id") == "Gridlines"
        assert layer.get(LABEL) == "Gridlines"

    def test_name_clash_gets_a_suffix(self):
        doc = parse_document(EXISTING_LAYER_SVG)
        assert create_layer(doc).get(LABEL) == "Gridlines 2"
        third = create_layer(doc)
        assert third.get(LABEL) == "Gridlines 3"
        assert third.get("id") == "Gridlines-3"

    def test_element_id_clash(self):
        doc = parse_document('<svg viewBox="0 0 1 1"><rect id="Guides"/></svg>')
        assert create_layer(doc, "Guides").get("id") == "Guides-2"


class TestSvgLayerSink:
    def test_emitted_line_style(self):
        doc = parse_document(SQUARE_SVG)
        layer = create_layer(doc)
        SvgLayerSink(doc).emit(Segment(Point(0, 20), Point(100, 20.5)), layer)

        (line,) = _lines(layer)
        assert line.tag == doc.qname("line")
        assert (line.get("x1"), line.get("y1"), line.get("x2"), line.get("y2")) == (
            "0", "20", "100", "20.5",
        )
        assert line.get("stroke-width") == "1"
        assert line.get("fill") == "none"
        assert line.get("stroke") == "#000000"
        assert line.get("stroke-dasharray") is None

    def test_stroke_colour_from_config(self):
        doc = parse_document(SQUARE_SVG)
        layer = create_layer(doc)
        SvgLayerSink(doc, GridConfig(stroke_color="#ff00ff")).emit(
            Segment(Point(0, 0), Point(1, 1)), layer
        )
        assert _lines(layer)[0].get("stroke") == "#ff00ff"


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, "0"), (-0.00001, "0"), (12.5, "12.5"), (1 / 3, "0.3333"), (100.0, "100")],
)
def test_format_coord(value, expected):
    assert format_coord(value) == expected


def test_serialized_svg_keeps_default_namespace():
    doc = parse_document(SQUARE_SVG)
    create_layer(doc)
    out = serialize_document(doc)
    assert out.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "ns0:" not in out
    assert 'xmlns="http://www.w3.org/2000/svg"' in out


class TestGenerateGridlines:
    def test_square(self):
        result = generate_gridlines(SQUARE_SVG)
        assert result.layer_id == "Gridlines"
        assert result.context.num_lines == 4
        assert len(_lines(_layer(result.svg, "Gridlines"))) == 4

    def test_selection_by_id(self):
        result = generate_gridlines(NESTED_SVG, ["triangle"])
        assert result.context.edges_processed == 3
        assert result.context.num_lines == 3

    def test_whole_document(self):
        result = generate_gridlines(NESTED_SVG)
        # outer frame bottom shares y=90 with the triangle base
        assert result.context.num_lines == 3 + 3 + 4
        assert result.context.skipped["duplicate_line"] == 1

    def test_lines_lie_on_artboard_boundary(self):
        result = generate_gridlines(NESTED_SVG)
        artboard = parse_document(NESTED_SVG).artboard
        for seg in result.context.segments:
            assert artboard.on_boundary(seg.start)
            assert artboard.on_boundary(seg.end)

    def test_document_without_namespace(self):
        result = generate_gridlines(NO_NAMESPACE_SVG)
        lines = _lines(_layer(result.svg, "Gridlines"))
        assert len(lines) == 1
        assert {(lines[0].get("x1"), lines[0].get("y1")), (lines[0].get("x2"), lines[0].get("y2"))} == {
            ("0", "0"), ("40", "20"),
        }

    def test_layer_name_from_config(self):
        result = generate_gridlines(SQUARE_SVG, config=GridConfig(layer_name="Construction"))
        assert result.layer_id == "Construction"

    def test_empty_selection(self):
        with pytest.raises(EmptySelectionError):
            generate_gridlines(SQUARE_SVG, ["nope"])

    def test_document_with_nothing_selectable(self):
        with pytest.raises(EmptySelectionError):
            generate_gridlines('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10"/>')

    def test_negative_viewbox_size_fails_fast(self):
        with pytest.raises(InvalidArtboardError):
            generate_gridlines('<svg viewBox="0 0 -10 10"><rect width="1" height="1"/></svg>')


def test_touching_open_subpaths_add_no_closing_diagonal():
    result = generate_gridlines(
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">'
        '<path d="M10 20 L50 20 M50 20 L50 60"/></svg>'
    )
    assert result.context.segments == [
        Segment(Point(0, 20), Point(100, 20)),
        Segment(Point(50, 0), Point(50, 100)),
    ]
