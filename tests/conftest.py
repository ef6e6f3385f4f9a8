"""Shared test fixtures."""

from __future__ import annotations

import pytest

from gridlines.engine.sink import RecordingSink
from gridlines.utils.geometry import Rectangle


SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect id="square" x="20" y="20" width="60" height="60" fill="none" stroke="black"/>
</svg>'''

NESTED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <title>Nested logo</title>
  <g id="logo">
    <g id="mark">
      <polygon id="triangle" points="50,10 90,90 10,90"/>
    </g>
    <path id="frame" d="M10 10 H90 V90 H10 Z M30 30 H70 V70 H30 Z"/>
  </g>
  <circle id="dot" cx="50" cy="50" r="5"/>
</svg>'''

TRANSFORMED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 100">
  <g id="shifted" transform="translate(100,0)">
    <line id="bar" x1="10" y1="40" x2="50" y2="40"/>
  </g>
</svg>'''

CURVE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path id="drop" d="M50 10 C80 40 80 90 50 90 C20 90 20 40 50 10 Z"/>
</svg>'''

NO_NAMESPACE_SVG = '''<svg width="40px" height="20px">
  <line id="diag" x1="0" y1="0" x2="40" y2="20"/>
</svg>'''

EXISTING_LAYER_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" viewBox="0 0 100 100">
  <g id="Gridlines" inkscape:label="Gridlines" inkscape:groupmode="layer"/>
  <rect id="box" x="10" y="10" width="20" height="20"/>
</svg>'''


@pytest.fixture
def artboard() -> Rectangle:
    """100x100 artboard with the origin at the bottom-left corner."""
    return Rectangle(left=0, top=100, right=100, bottom=0)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
