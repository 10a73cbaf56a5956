# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Path inspection and flattening.

Renderers that understand circular arcs can consume a Path directly.
flatten_path() is for those that only know lines and cubic Béziers: every
arc is replaced by at most-90° cubic segments, preceded by a straight line
from the current point when the arc does not start there.
"""

from __future__ import annotations

import math

from ..core import types as uf

# Points closer than this are treated as coincident
_COINCIDENT = 1e-9


def subpath_is_closed(sp: uf.SubPath) -> bool:
    return len(sp) > 0 and isinstance(sp[-1], uf.ClosePath)


def subpath_start(sp: uf.SubPath) -> uf.Point | None:
    """Return the starting point of a subpath."""
    if not sp:
        return None
    first = sp[0]
    if isinstance(first, uf.MoveTo):
        return uf.Point(first.x, first.y)
    if isinstance(first, uf.Arc):
        return first.start_point
    return None


def segment_endpoint(seg: uf.PathElement) -> uf.Point | None:
    if isinstance(seg, (uf.MoveTo, uf.LineTo)):
        return uf.Point(seg.x, seg.y)
    if isinstance(seg, uf.CurveTo):
        return uf.Point(seg.x3, seg.y3)
    if isinstance(seg, uf.Arc):
        return seg.end_point
    return None


def arc_to_cubics(arc: uf.Arc) -> list[uf.CurveTo]:
    """Convert an arc to cubic Bézier approximations (max 90° per segment)."""
    result = []
    sweep = math.radians(arc.sweep)
    if arc.radius == 0 or abs(arc.sweep) < uf.ARC_EPSILON:
        return result

    n_segs = max(1, int(math.ceil(abs(sweep) / (math.pi / 2) - 1e-12)))
    seg_angle = sweep / n_segs
    start = math.radians(arc.start_angle)
    cx, cy, r = arc.center.x, arc.center.y, arc.radius

    for i in range(n_segs):
        a0 = start + i * seg_angle
        a1 = a0 + seg_angle
        # Cubic approximation of arc
        alpha = 4.0 * math.tan(seg_angle / 4.0) / 3.0

        cos0, sin0 = math.cos(a0), math.sin(a0)
        cos1, sin1 = math.cos(a1), math.sin(a1)

        p1x = cx + r * (cos0 - alpha * sin0)
        p1y = cy + r * (sin0 + alpha * cos0)
        p2x = cx + r * (cos1 + alpha * sin1)
        p2y = cy + r * (sin1 - alpha * cos1)
        p3x = cx + r * cos1
        p3y = cy + r * sin1

        result.append(uf.CurveTo(p1x, p1y, p2x, p2y, p3x, p3y))

    return result


def _coincident(a: uf.Point | None, b: uf.Point) -> bool:
    return a is not None and a.distance_to(b) <= _COINCIDENT


def flatten_path(path: uf.Path) -> uf.Path:
    """
    Return a copy of ``path`` with every Arc replaced by lines and cubics.

    A degenerate arc (zero radius or zero sweep) contributes at most a
    LineTo to its end point, and nothing when it ends where the path
    already is.
    """
    result = uf.Path()
    for sp in path:
        flat = uf.SubPath()
        start = None
        current = None
        for elem in sp:
            if isinstance(elem, uf.MoveTo):
                current = start = uf.Point(elem.x, elem.y)
                flat.append(elem)
            elif isinstance(elem, uf.LineTo):
                current = uf.Point(elem.x, elem.y)
                flat.append(elem)
            elif isinstance(elem, uf.CurveTo):
                current = uf.Point(elem.x3, elem.y3)
                flat.append(elem)
            elif isinstance(elem, uf.Arc):
                curves = arc_to_cubics(elem)
                if not curves:
                    end = elem.end_point
                    if current is None:
                        flat.append(uf.MoveTo(end.x, end.y))
                        current = start = end
                    elif not _coincident(current, end):
                        flat.append(uf.LineTo(end.x, end.y))
                        current = end
                    continue
                arc_start = elem.start_point
                if current is None:
                    # no current point: the arc opens the subpath
                    flat.append(uf.MoveTo(arc_start.x, arc_start.y))
                    start = arc_start
                elif not _coincident(current, arc_start):
                    flat.append(uf.LineTo(arc_start.x, arc_start.y))
                flat.extend(curves)
                last = curves[-1]
                current = uf.Point(last.x3, last.y3)
            elif isinstance(elem, uf.ClosePath):
                flat.append(elem)
                current = start
        result.append(flat)
    return result


def _fmt(value: float) -> str:
    # avoid "-0" in listings
    return f"{value + 0.0:g}"


def describe_element(elem: uf.PathElement) -> str:
    """Render one element in PostScript operator notation."""
    if isinstance(elem, uf.MoveTo):
        return f"{_fmt(elem.x)} {_fmt(elem.y)} moveto"
    if isinstance(elem, uf.LineTo):
        return f"{_fmt(elem.x)} {_fmt(elem.y)} lineto"
    if isinstance(elem, uf.CurveTo):
        coords = (elem.x1, elem.y1, elem.x2, elem.y2, elem.x3, elem.y3)
        return " ".join(_fmt(c) for c in coords) + " curveto"
    if isinstance(elem, uf.Arc):
        op = "arcn" if elem.clockwise else "arc"
        operands = (elem.center.x, elem.center.y, elem.radius,
                    elem.start_angle, elem.end_angle)
        return " ".join(_fmt(v) for v in operands) + f" {op}"
    if isinstance(elem, uf.ClosePath):
        return "closepath"
    raise TypeError(f"not a path element: {elem!r}")


def describe_path(path: uf.Path) -> list[str]:
    return [describe_element(elem) for elem in path.elements()]
