"""Tests for uiforge.operators.rounded_path — rounded rectangle outlines."""

from __future__ import annotations

import pytest

from uiforge.core import types as uf
from uiforge.operators.rounded_path import CustomRounded, build_rounded_path, rounded_rect


def _elements(path: uf.Path) -> list:
    assert len(path) == 1
    return list(path[0])


def _arcs(path: uf.Path) -> list[uf.Arc]:
    return [e for e in path.elements() if isinstance(e, uf.Arc)]


def _close(p: uf.Point, x: float, y: float) -> bool:
    return p.x == pytest.approx(x, abs=1e-9) and p.y == pytest.approx(y, abs=1e-9)


# ── element sequence ────────────────────────────────────────────────


class TestElementSequence:
    """The outline is emitted in a fixed clockwise order."""

    def test_asymmetric_corners(self) -> None:
        radii = uf.CornerRadii(top_leading=10, top_trailing=20,
                               bottom_leading=30, bottom_trailing=40)
        elements = _elements(build_rounded_path(uf.Rect(200, 100), radii))

        assert elements == [
            uf.MoveTo(10, 0),
            uf.LineTo(180, 0),
            uf.Arc(uf.Point(180, 20), 20, -90, 0, clockwise=False),
            uf.LineTo(200, 60),
            uf.Arc(uf.Point(160, 60), 40, 0, 90, clockwise=False),
            uf.LineTo(30, 100),
            uf.Arc(uf.Point(30, 70), 30, 90, 180, clockwise=False),
            uf.LineTo(0, 10),
            uf.Arc(uf.Point(10, 10), 10, 180, -90, clockwise=False),
            uf.ClosePath(),
        ]

    def test_named_angles(self) -> None:
        arcs = _arcs(build_rounded_path(uf.Rect(50, 50), uf.CornerRadii.uniform(5)))
        assert [(a.start_angle, a.end_angle) for a in arcs] == [
            (uf.ANGLE_TOP, uf.ANGLE_TRAILING),
            (uf.ANGLE_TRAILING, uf.ANGLE_BOTTOM),
            (uf.ANGLE_BOTTOM, uf.ANGLE_LEADING),
            (uf.ANGLE_LEADING, uf.ANGLE_TOP),
        ]
        assert all(not a.clockwise for a in arcs)
        assert all(a.sweep == 90 for a in arcs)

    def test_outline_is_continuous(self) -> None:
        radii = uf.CornerRadii(3, 17, 11, 5)
        elements = _elements(build_rounded_path(uf.Rect(120, 80), radii))
        start = elements[0]
        for prev, elem in zip(elements, elements[1:]):
            if isinstance(elem, uf.Arc):
                assert _close(elem.start_point, prev.x, prev.y)
            elif isinstance(elem, uf.LineTo) and isinstance(prev, uf.Arc):
                end = prev.end_point
                assert _close(end, elem.x, elem.y)
        last_arc = elements[-2]
        assert _close(last_arc.end_point, start.x, start.y)

    def test_ends_with_close(self) -> None:
        elements = _elements(rounded_rect(uf.Rect(40, 30)))
        assert isinstance(elements[0], uf.MoveTo)
        assert isinstance(elements[-1], uf.ClosePath)
        assert len(elements) == 10


# ── clamping ────────────────────────────────────────────────────────


class TestClamping:
    """Radii are clamped to half the shorter side, corner by corner."""

    def test_oversized_uniform_radius(self) -> None:
        arcs = _arcs(build_rounded_path(uf.Rect(100, 40), uf.CornerRadii.uniform(50)))
        assert [a.radius for a in arcs] == [20, 20, 20, 20]

    def test_each_corner_clamped_independently(self) -> None:
        radii = uf.CornerRadii(top_leading=100, top_trailing=5)
        elements = _elements(build_rounded_path(uf.Rect(100, 40), radii))
        assert elements[0] == uf.MoveTo(20, 0)
        assert elements[2].radius == 5
        assert elements[4].radius == 0
        assert elements[8].radius == 20

    @pytest.mark.parametrize("w, h", [(100, 40), (40, 100), (30, 30), (7.5, 300)])
    @pytest.mark.parametrize("r", [0, 3, 15, 20, 1000])
    def test_effective_radius(self, w: float, h: float, r: float) -> None:
        arcs = _arcs(build_rounded_path(uf.Rect(w, h), uf.CornerRadii.uniform(r)))
        expected = min(r, min(w, h) / 2)
        assert all(a.radius == expected for a in arcs)

    @pytest.mark.parametrize("radii", [
        uf.CornerRadii(90, 90, 90, 90),
        uf.CornerRadii(50, 0, 25, 80),
        uf.CornerRadii(1, 2, 3, 4),
    ])
    def test_corners_never_overlap(self, radii: uf.CornerRadii) -> None:
        w, h = 120.0, 60.0
        c = radii.clamped(min(w, h) / 2)
        assert c.top_leading + c.top_trailing <= w
        assert c.bottom_leading + c.bottom_trailing <= w
        assert c.top_leading + c.bottom_leading <= h
        assert c.top_trailing + c.bottom_trailing <= h

        # every straight edge runs forward, never backward
        elements = _elements(build_rounded_path(uf.Rect(w, h), radii))
        move, top_end, right_end, bottom_end, left_end = (
            elements[0], elements[1], elements[3], elements[5], elements[7])
        assert top_end.x >= move.x
        assert right_end.y >= elements[2].end_point.y - 1e-9
        assert bottom_end.x <= elements[4].end_point.x + 1e-9
        assert left_end.y <= elements[6].end_point.y + 1e-9


# ── degenerate shapes ───────────────────────────────────────────────


class TestDegenerateShapes:
    """Degenerate input clamps instead of failing."""

    def test_square_with_half_side_radius_is_circle(self) -> None:
        elements = _elements(build_rounded_path(uf.Rect(100, 100), uf.CornerRadii.uniform(50)))
        lines = [e for e in elements if isinstance(e, uf.LineTo)]
        arcs = [e for e in elements if isinstance(e, uf.Arc)]

        assert [a.radius for a in arcs] == [50, 50, 50, 50]
        assert all(a.center == uf.Point(50, 50) for a in arcs)
        # straight segments have zero length
        for arc, line in zip(arcs[:-1], lines[1:]):
            assert _close(arc.end_point, line.x, line.y)
        for line, arc in zip(lines, arcs):
            assert _close(arc.start_point, line.x, line.y)

    def test_zero_radii_is_plain_rectangle(self) -> None:
        elements = _elements(build_rounded_path(uf.Rect(80, 30), uf.CornerRadii()))
        lines = [e for e in elements if isinstance(e, uf.LineTo)]

        assert elements[0] == uf.MoveTo(0, 0)
        assert lines == [uf.LineTo(80, 0), uf.LineTo(80, 30),
                         uf.LineTo(0, 30), uf.LineTo(0, 0)]
        assert all(a.is_degenerate for a in _arcs(uf.Path([elements])))

    @pytest.mark.parametrize("w, h", [(0, 50), (50, 0), (0, 0)])
    def test_zero_dimension(self, w: float, h: float) -> None:
        path = build_rounded_path(uf.Rect(w, h), uf.CornerRadii.uniform(10))
        assert all(a.radius == 0 for a in _arcs(path))
        assert isinstance(path[0][-1], uf.ClosePath)

    def test_negative_radius_is_not_rejected(self) -> None:
        path = build_rounded_path(uf.Rect(10, 10), uf.CornerRadii.uniform(-2))
        assert [a.radius for a in _arcs(path)] == [-2, -2, -2, -2]


# ── construction modes ──────────────────────────────────────────────


class TestCustomRounded:
    """The three named construction modes reduce to four radii."""

    def test_vertical(self) -> None:
        shape = CustomRounded.vertical(top=8, bottom=4)
        assert shape.radii == uf.CornerRadii(8, 8, 4, 4)

    def test_horizontal(self) -> None:
        shape = CustomRounded.horizontal(leading=8, trailing=4)
        assert shape.radii == uf.CornerRadii(8, 4, 8, 4)

    def test_four_corners(self) -> None:
        shape = CustomRounded(top_leading=1, top_trailing=2,
                              bottom_leading=3, bottom_trailing=4)
        assert shape.radii == uf.CornerRadii(1, 2, 3, 4)

    def test_defaults_are_square(self) -> None:
        assert CustomRounded.vertical().radii == uf.CornerRadii()
        assert CustomRounded.horizontal(trailing=6).radii == uf.CornerRadii(0, 6, 0, 6)

    def test_path_matches_builder(self) -> None:
        rect = uf.Rect(90, 45)
        shape = CustomRounded.vertical(top=12)
        assert shape.path(rect) == build_rounded_path(rect, uf.CornerRadii.vertical(12, 0))

    def test_from_radii_round_trip(self) -> None:
        radii = uf.CornerRadii(5, 6, 7, 8)
        assert CustomRounded.from_radii(radii) == CustomRounded(5, 6, 7, 8)

    def test_rounded_rect_default_radius(self) -> None:
        arcs = _arcs(rounded_rect(uf.Rect(100, 100)))
        assert [a.radius for a in arcs] == [uf.DEFAULT_CORNER_RADIUS] * 4


class TestPurity:
    """Identical input produces identical output."""

    def test_idempotent(self) -> None:
        rect = uf.Rect(64, 48)
        radii = uf.CornerRadii(4, 8, 12, 16)
        assert build_rounded_path(rect, radii) == build_rounded_path(rect, radii)

    def test_input_untouched(self) -> None:
        rect = uf.Rect(64, 48)
        radii = uf.CornerRadii.uniform(500)
        build_rounded_path(rect, radii)
        assert radii == uf.CornerRadii(500, 500, 500, 500)
        assert rect == uf.Rect(64, 48)
