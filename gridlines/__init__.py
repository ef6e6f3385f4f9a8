"""Gridlines: full-artboard construction lines from the edges of vector artwork."""

__version__ = "0.1.0"
