# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Affine transformation matrices for placing paths.

Matrices use the six-element form ``(a, b, c, d, tx, ty)``:

    x' = a*x + c*y + tx
    y' = b*x + d*y + ty

Paths are built in a rectangle's local coordinates; these helpers move and
scale them into a renderer's space.
"""

from __future__ import annotations

import math
from decimal import Context, Decimal, localcontext
from typing import Tuple, Union

from ..core import types as uf
from .path import flatten_path

# High precision for decimal arithmetic, scoped to each call
_CONTEXT = Context(prec=50)

_QUANTUM = Decimal(1).scaleb(-uf.MATRIX_PRECISION)

Matrix = Tuple[float, float, float, float, float, float]


def _round(value: Decimal) -> float:
    # Round to eliminate tiny precision errors before converting to float
    return float(value.quantize(_QUANTUM))


def identity_matrix() -> Matrix:
    return (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def translation_matrix(tx: float, ty: float) -> Matrix:
    return (1.0, 0.0, 0.0, 1.0, float(tx), float(ty))


def scaling_matrix(sx: float, sy: float) -> Matrix:
    return (float(sx), 0.0, 0.0, float(sy), 0.0, 0.0)


def rotation_matrix(angle: float) -> Matrix:
    """Rotation by ``angle`` degrees toward increasing angles."""
    radians = math.radians(angle)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return (cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)


def concat(mat1: Matrix, mat2: Matrix) -> Matrix:
    """
    Multiply mat1 by mat2: the result applies mat1 first, then mat2.
    Uses high-precision decimal arithmetic to minimize rounding errors.
    """
    with localcontext(_CONTEXT):
        m1_00, m1_01, m1_10, m1_11, m1_20, m1_21 = (Decimal(str(v)) for v in mat1)
        m2_00, m2_01, m2_10, m2_11, m2_20, m2_21 = (Decimal(str(v)) for v in mat2)

        return (
            _round(m1_00 * m2_00 + m1_01 * m2_10),          # a
            _round(m1_00 * m2_01 + m1_01 * m2_11),          # b
            _round(m1_10 * m2_00 + m1_11 * m2_10),          # c
            _round(m1_10 * m2_01 + m1_11 * m2_11),          # d
            _round(m1_20 * m2_00 + m1_21 * m2_10 + m2_20),  # tx
            _round(m1_20 * m2_01 + m1_21 * m2_11 + m2_21),  # ty
        )


def transform_point(
    matrix: Matrix, x: Union[int, float], y: Union[int, float]
) -> Tuple[float, float]:
    with localcontext(_CONTEXT):
        x_dec = Decimal(str(x))
        y_dec = Decimal(str(y))
        m00, m01, m10, m11, m20, m21 = (Decimal(str(v)) for v in matrix)

        return (
            _round(m00 * x_dec + m10 * y_dec + m20),
            _round(m01 * x_dec + m11 * y_dec + m21),
        )


def transform_delta(
    matrix: Matrix, x: Union[int, float], y: Union[int, float]
) -> Tuple[float, float]:
    with localcontext(_CONTEXT):
        x_dec = Decimal(str(x))
        y_dec = Decimal(str(y))
        m00, m01, m10, m11 = (Decimal(str(v)) for v in matrix[:4])

        return (
            _round(m00 * x_dec + m10 * y_dec),
            _round(m01 * x_dec + m11 * y_dec),
        )


def _keeps_circles(matrix: Matrix) -> bool:
    """True for translation combined with a positive uniform scale."""
    a, b, c, d = matrix[:4]
    return b == 0 and c == 0 and a == d and a > 0


def _transform_element(matrix: Matrix, elem: uf.PathElement) -> uf.PathElement:
    if isinstance(elem, uf.MoveTo):
        return uf.MoveTo(*transform_point(matrix, elem.x, elem.y))
    if isinstance(elem, uf.LineTo):
        return uf.LineTo(*transform_point(matrix, elem.x, elem.y))
    if isinstance(elem, uf.CurveTo):
        return uf.CurveTo(
            *transform_point(matrix, elem.x1, elem.y1),
            *transform_point(matrix, elem.x2, elem.y2),
            *transform_point(matrix, elem.x3, elem.y3),
        )
    if isinstance(elem, uf.Arc):
        center = uf.Point(*transform_point(matrix, elem.center.x, elem.center.y))
        return uf.Arc(center, elem.radius * matrix[0],
                      elem.start_angle, elem.end_angle, elem.clockwise)
    return elem


def transform_path(path: uf.Path, matrix: Matrix) -> uf.Path:
    """
    Return ``path`` mapped through ``matrix``.

    Arcs stay arcs under translation and positive uniform scaling. Any other
    matrix would turn them into ellipses, so the path is flattened to cubics
    first.
    """
    if not _keeps_circles(matrix):
        path = flatten_path(path)
    return uf.Path(
        uf.SubPath(_transform_element(matrix, elem) for elem in sp) for sp in path
    )
