"""
Gridlines CLI — adds a layer of construction lines to an SVG file.

Usage:
  gridlines logo.svg                        # prints the new SVG to stdout
  gridlines logo.svg -o logo-grid.svg       # writes to a file
  gridlines logo.svg -s mark -s wordmark    # only the elements with these ids
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from gridlines.config import settings
from gridlines.engine.config import GridConfig
from gridlines.errors import EmptySelectionError, GridlinesError
from gridlines.generate import generate_gridlines

logger = logging.getLogger(__name__)


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridlines",
        description="Extend every straight edge of the selected artwork across the artboard.",
    )
    parser.add_argument("input", type=Path, help="SVG file to read")
    parser.add_argument("-o", "--output", type=Path, help="Write the result here instead of stdout")
    parser.add_argument(
        "-s", "--select",
        action="append",
        default=[],
        metavar="ID",
        help="Id of an element to select (repeatable). Default: all top-level artwork",
    )
    parser.add_argument(
        "--tolerance",
        type=positive_float,
        default=settings.gridlines_tolerance,
        help="Per-axis distance under which two lines are the same line",
    )
    parser.add_argument("--layer-name", default=settings.gridlines_layer_name)
    parser.add_argument("--log-level", default=settings.gridlines_log_level)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = dataclasses.replace(
        GridConfig.from_settings(settings),
        tolerance=args.tolerance,
        layer_name=args.layer_name,
    )

    try:
        svg_text = args.input.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("%s: %s", args.input, e)
        return 2

    try:
        result = generate_gridlines(svg_text, args.select, config)
    except EmptySelectionError as e:
        print(e, file=sys.stderr)
        return 1
    except GridlinesError as e:
        logger.error("%s: %s", args.input, e)
        return 2

    if args.output:
        args.output.write_text(result.svg, encoding="utf-8")
        print(f"{result.context.num_lines} grid lines -> {args.output}")
    else:
        sys.stdout.write(result.svg + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
