# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared Cairo path utilities."""

import math

import cairo

from ...core import types as uf


def append_path(cairo_ctx, path: uf.Path) -> None:
    """
    Replay ``path`` onto a Cairo context's current path.

    Arcs map directly onto ``arc`` / ``arc_negative``; Cairo adds the
    connecting line from the current point itself. Nothing is stroked or
    filled here, and the existing current path is extended, not cleared.
    """
    for subpath in path:
        for pc_item in subpath:
            if isinstance(pc_item, uf.MoveTo):
                cairo_ctx.move_to(pc_item.x, pc_item.y)
            elif isinstance(pc_item, uf.LineTo):
                cairo_ctx.line_to(pc_item.x, pc_item.y)
            elif isinstance(pc_item, uf.Arc):
                args = (
                    pc_item.center.x, pc_item.center.y, pc_item.radius,
                    math.radians(pc_item.start_angle), math.radians(pc_item.end_angle),
                )
                if pc_item.clockwise:
                    cairo_ctx.arc_negative(*args)
                else:
                    cairo_ctx.arc(*args)
            elif isinstance(pc_item, uf.CurveTo):
                cairo_ctx.curve_to(
                    pc_item.x1, pc_item.y1,
                    pc_item.x2, pc_item.y2,
                    pc_item.x3, pc_item.y3,
                )
            elif isinstance(pc_item, uf.ClosePath):
                cairo_ctx.close_path()


def path_extents(path: uf.Path) -> tuple:
    """
    Bounding box ``(x1, y1, x2, y2)`` of ``path`` as Cairo computes it.

    Uses an unbounded recording surface, so no pixels are produced.
    """
    surface = cairo.RecordingSurface(cairo.CONTENT_COLOR_ALPHA, None)
    try:
        cairo_ctx = cairo.Context(surface)
        append_path(cairo_ctx, path)
        return cairo_ctx.path_extents()
    finally:
        surface.finish()
