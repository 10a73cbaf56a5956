# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for UIForge.

Handles command-line argument definition and the parsing of corner radius
specifications.
"""

from __future__ import annotations

import argparse
from importlib import metadata

from .core import types as uf


def _parse_corners(text: str) -> uf.CornerRadii:
    """Parse a four-corner radius specification.

    The order is top-leading, top-trailing, bottom-leading, bottom-trailing,
    comma separated: ``"8,8,0,0"``.

    Args:
        text: Corner radius string

    Returns:
        CornerRadii with the four values.

    Raises:
        ValueError: If the radii string is malformed.
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 4 or not all(parts):
        raise ValueError(f"Expected four comma-separated radii, got: '{text}'")
    try:
        values = [float(part) for part in parts]
    except ValueError:
        raise ValueError(f"Invalid corner radii: '{text}'")
    return uf.CornerRadii(*values)


def resolve_radii(args: argparse.Namespace) -> uf.CornerRadii:
    """
    Pick the corner radii from whichever construction mode was given.

    Raises:
        ValueError: If more than one mode is used at once.
    """
    modes = []
    if args.radius is not None:
        modes.append(uf.CornerRadii.uniform(args.radius))
    if args.top is not None or args.bottom is not None:
        modes.append(uf.CornerRadii.vertical(args.top or 0.0, args.bottom or 0.0))
    if args.leading is not None or args.trailing is not None:
        modes.append(uf.CornerRadii.horizontal(args.leading or 0.0, args.trailing or 0.0))
    if args.corners is not None:
        modes.append(_parse_corners(args.corners))

    if len(modes) > 1:
        raise ValueError("Use only one of --radius, --top/--bottom, "
                         "--leading/--trailing or --corners")
    if not modes:
        return uf.CornerRadii.uniform(uf.DEFAULT_CORNER_RADIUS)
    return modes[0]


def _get_version() -> str:
    """Read the installed UIForge version."""
    try:
        return metadata.version("uiforge")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the UIForge argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="uiforge",
        description="UIForge - Geometry and Sequence Utilities",
    )
    parser.add_argument(
        "-V", "--version", action="version",
        version=f"UIForge {_get_version()}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    rounded = commands.add_parser(
        "rounded", help="List the outline of a rectangle with rounded corners"
    )
    rounded.add_argument("width", type=float, help="Rectangle width")
    rounded.add_argument("height", type=float, help="Rectangle height")
    rounded.add_argument(
        "-r", "--radius", type=float,
        help=f"Same radius on every corner (default: {uf.DEFAULT_CORNER_RADIUS:g})"
    )
    rounded.add_argument("--top", type=float, help="Radius of both top corners")
    rounded.add_argument("--bottom", type=float, help="Radius of both bottom corners")
    rounded.add_argument("--leading", type=float, help="Radius of both leading corners")
    rounded.add_argument("--trailing", type=float, help="Radius of both trailing corners")
    rounded.add_argument(
        "--corners", metavar="TL,TT,BL,BT",
        help="Radius of each corner: top-leading, top-trailing, bottom-leading, bottom-trailing"
    )
    rounded.add_argument(
        "--flatten", action="store_true", help="Replace arcs with Bézier curves"
    )
    rounded.add_argument(
        "--extents", action="store_true", help="Print the bounding box instead of the elements"
    )

    for name, text in (("next", "after"), ("prev", "before")):
        neighbour = commands.add_parser(
            name, help=f"Print the item {text} the first match"
        )
        neighbour.add_argument("items", nargs="*", help="Items, in order")
        neighbour.add_argument(
            "-m", "--match", required=True, help="Item to look for"
        )
        neighbour.add_argument(
            "-l", "--loop", action="store_true", help="Wrap around at the ends"
        )

    pinyin = commands.add_parser("pinyin", help="Transliterate Chinese text to Pinyin")
    pinyin.add_argument("text", help="Text to transliterate")
    pinyin.add_argument(
        "--head", action="store_true", help="Print only the initial of each word"
    )
    pinyin.add_argument(
        "--blank", action="store_true", help="Keep spaces between syllables"
    )

    return parser
