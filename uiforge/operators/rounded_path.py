# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Rounded rectangle outlines with independently rounded corners.

The outline is traced clockwise on screen (y grows downward), starting on
the top edge just after the top-leading corner:

    MoveTo  (tl, 0)
    LineTo  (w - tt, 0)       Arc around (w - tt, tt)      top      -> trailing
    LineTo  (w, h - bt)       Arc around (w - bt, h - bt)  trailing -> bottom
    LineTo  (bl, h)           Arc around (bl, h - bl)      bottom   -> leading
    LineTo  (0, tl)           Arc around (tl, tl)          leading  -> top
    ClosePath

Every radius is clamped to half the shorter side before use, each corner on
its own. Nothing is validated: a zero radius leaves a zero-length arc at a
sharp corner, and a zero width or height produces a degenerate outline.
"""

from __future__ import annotations

import logging

from ..core import types as uf

logger = logging.getLogger(__name__)


def build_rounded_path(rect: uf.Rect, radii: uf.CornerRadii) -> uf.Path:
    """
    Build the closed outline of ``rect`` with the given corner radii.

    Args:
        rect: Rectangle in local coordinates
        radii: Declared corner radii, clamped independently

    Returns:
        A Path holding exactly one closed SubPath.
    """
    w = rect.width
    h = rect.height

    # Make sure we do not exceed the size of the rectangle
    max_radius = min(w, h) / 2.0
    clamped = radii.clamped(max_radius)
    if clamped != radii:
        logger.debug("Corner radii %s clamped to %s for %gx%g", radii, clamped, w, h)

    tl = clamped.top_leading
    tt = clamped.top_trailing
    bl = clamped.bottom_leading
    bt = clamped.bottom_trailing

    subpath = uf.SubPath()
    subpath.append(uf.MoveTo(tl, 0.0))

    subpath.append(uf.LineTo(w - tt, 0.0))
    subpath.append(uf.Arc(uf.Point(w - tt, tt), tt,
                          uf.ANGLE_TOP, uf.ANGLE_TRAILING, clockwise=False))

    subpath.append(uf.LineTo(w, h - bt))
    subpath.append(uf.Arc(uf.Point(w - bt, h - bt), bt,
                          uf.ANGLE_TRAILING, uf.ANGLE_BOTTOM, clockwise=False))

    subpath.append(uf.LineTo(bl, h))
    subpath.append(uf.Arc(uf.Point(bl, h - bl), bl,
                          uf.ANGLE_BOTTOM, uf.ANGLE_LEADING, clockwise=False))

    subpath.append(uf.LineTo(0.0, tl))
    subpath.append(uf.Arc(uf.Point(tl, tl), tl,
                          uf.ANGLE_LEADING, uf.ANGLE_TOP, clockwise=False))

    subpath.append(uf.ClosePath())
    return uf.Path([subpath])


def rounded_rect(rect: uf.Rect, radius: float = uf.DEFAULT_CORNER_RADIUS) -> uf.Path:
    """Outline of ``rect`` with the same radius on all four corners."""
    return build_rounded_path(rect, uf.CornerRadii.uniform(radius))


class CustomRounded:
    """
    A rectangle shape whose four corners are rounded independently.

    Three construction modes are offered, all reducing to the four-corner
    form: ``CustomRounded.vertical(top=, bottom=)``,
    ``CustomRounded.horizontal(leading=, trailing=)`` and the plain
    constructor taking one radius per corner.
    """

    def __init__(self, top_leading: float = 0.0, top_trailing: float = 0.0,
                 bottom_leading: float = 0.0, bottom_trailing: float = 0.0) -> None:
        self.radii = uf.CornerRadii(top_leading, top_trailing,
                                    bottom_leading, bottom_trailing)

    @classmethod
    def vertical(cls, top: float = 0.0, bottom: float = 0.0) -> CustomRounded:
        return cls(top, top, bottom, bottom)

    @classmethod
    def horizontal(cls, leading: float = 0.0, trailing: float = 0.0) -> CustomRounded:
        return cls(leading, trailing, leading, trailing)

    @classmethod
    def from_radii(cls, radii: uf.CornerRadii) -> CustomRounded:
        return cls(radii.top_leading, radii.top_trailing,
                   radii.bottom_leading, radii.bottom_trailing)

    def path(self, rect: uf.Rect) -> uf.Path:
        return build_rounded_path(rect, self.radii)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CustomRounded):
            return NotImplemented
        return self.radii == other.radii

    def __hash__(self) -> int:
        return hash(self.radii)

    def __repr__(self) -> str:
        r = self.radii
        return (f"CustomRounded(top_leading={r.top_leading}, top_trailing={r.top_trailing}, "
                f"bottom_leading={r.bottom_leading}, bottom_trailing={r.bottom_trailing})")
