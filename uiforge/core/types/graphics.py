# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
UIForge Types Graphics Module

This module contains the geometric value types and path elements that the
path builders produce and the rendering boundary consumes. The values and
path elements are frozen dataclasses. Path and SubPath are plain list
subclasses and can be changed in place, but the builders return a fresh
Path on every call.

A Path is a list of SubPaths.
SubPaths consist of path construction elements: MoveTo, LineTo, Arc, CurveTo
and ClosePath.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Geometric values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def translate(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def scale(self, sx: float, sy: float) -> Point:
        return Point(self.x * sx, self.y * sy)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """
    A rectangle in its own local coordinate space.

    The origin is the top-leading corner and y grows downward, so the
    anchor properties below are relative to the rectangle itself rather
    than to any enclosing layout.
    """
    width: float
    height: float

    @property
    def mid_x(self) -> float:
        return self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.height / 2.0

    @property
    def max_corner_radius(self) -> float:
        """Largest radius four corners can share without overlapping."""
        return min(self.width, self.height) / 2.0

    @property
    def top_leading(self) -> Point:
        return Point(0.0, 0.0)

    @property
    def top(self) -> Point:
        return Point(self.mid_x, 0.0)

    @property
    def top_trailing(self) -> Point:
        return Point(self.width, 0.0)

    @property
    def leading(self) -> Point:
        return Point(0.0, self.mid_y)

    @property
    def trailing(self) -> Point:
        return Point(self.width, self.mid_y)

    @property
    def bottom_leading(self) -> Point:
        return Point(0.0, self.height)

    @property
    def bottom(self) -> Point:
        return Point(self.mid_x, self.height)

    @property
    def bottom_trailing(self) -> Point:
        return Point(self.width, self.height)


@dataclass(frozen=True)
class CornerRadii:
    """Four independent corner radii, one field per corner."""
    top_leading: float = 0.0
    top_trailing: float = 0.0
    bottom_leading: float = 0.0
    bottom_trailing: float = 0.0

    @classmethod
    def uniform(cls, radius: float) -> CornerRadii:
        return cls(radius, radius, radius, radius)

    @classmethod
    def vertical(cls, top: float = 0.0, bottom: float = 0.0) -> CornerRadii:
        """Same radius for both top corners and for both bottom corners."""
        return cls(top, top, bottom, bottom)

    @classmethod
    def horizontal(cls, leading: float = 0.0, trailing: float = 0.0) -> CornerRadii:
        """Same radius for both leading corners and for both trailing corners."""
        return cls(leading, trailing, leading, trailing)

    def clamped(self, max_radius: float) -> CornerRadii:
        # Each corner is clamped on its own so asymmetric radii survive
        return CornerRadii(
            min(self.top_leading, max_radius),
            min(self.top_trailing, max_radius),
            min(self.bottom_leading, max_radius),
            min(self.bottom_trailing, max_radius),
        )


# ---------------------------------------------------------------------------
# Path elements
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CurveTo:
    x1: float; y1: float
    x2: float; y2: float
    x3: float; y3: float


@dataclass(frozen=True)
class Arc:
    """
    Circular arc around ``center``, angles in degrees.

    With ``clockwise`` False the arc sweeps toward increasing angles: if
    ``end_angle`` is less than ``start_angle`` it is increased by multiples
    of 360 until it is greater than or equal to ``start_angle``. With
    ``clockwise`` True the arc sweeps toward decreasing angles and
    ``end_angle`` is decreased instead. In a y-down coordinate system an
    increasing-angle sweep runs clockwise on screen.
    """
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool = False

    @property
    def sweep(self) -> float:
        """Signed sweep in degrees (negative when ``clockwise``)."""
        start = self.start_angle
        stop = self.end_angle
        if self.clockwise:
            while stop > start:
                stop -= 360.0
        else:
            while stop < start:
                stop += 360.0
        return stop - start

    def point_at(self, angle: float) -> Point:
        radians = math.radians(angle)
        return Point(
            self.center.x + self.radius * math.cos(radians),
            self.center.y + self.radius * math.sin(radians),
        )

    @property
    def start_point(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at(self.start_angle + self.sweep)

    @property
    def is_degenerate(self) -> bool:
        return self.radius == 0 or self.sweep == 0


@dataclass(frozen=True)
class ClosePath:
    pass


PathElement = Union[MoveTo, LineTo, CurveTo, Arc, ClosePath]


class SubPath(list):
    def __init__(self, elements=()) -> None:
        super().__init__(elements)


class Path(list):
    def __init__(self, subpaths=()) -> None:
        super().__init__(subpaths)

    def elements(self):
        """Iterate over every element of every subpath, in order."""
        for subpath in self:
            yield from subpath
