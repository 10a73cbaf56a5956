# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import math
from typing import Optional, Union

from ..core import types as uf

Number = Union[int, float]


def clamp(value: Number, min_value: Optional[Number] = None,
          max_value: Optional[Number] = None) -> Number:
    """Clamp ``value`` into ``[min_value, max_value]``; either bound may be None."""
    result = value
    if min_value is not None:
        result = max(min_value, result)
    if max_value is not None:
        result = min(max_value, result)
    return result


def mod(x: int, n: int) -> int:
    """
    Non-negative remainder of ``x`` modulo ``n``.

    Returns ``x`` unchanged when ``n`` is not positive.
    """
    if n <= 0:
        return x
    result = x % n
    return result if result >= 0 else result + n


def divide(a: Number, b: Number) -> float:
    if b == 0:
        raise ZeroDivisionError("divide by zero")
    return a / b


def floor_divide(a: Number, b: Number) -> int:
    # -1, 2 -> -1 where truncating division would give 0
    return int(math.floor(divide(a, b)))


def as_cn(n: int) -> str:
    """1 to 20 as Chinese numerals; anything else as decimal digits."""
    return uf.CN_NUMBERS.get(n, str(n))


def as_roman(n: int) -> str:
    """1 to 12 as Unicode Roman numerals; anything else as decimal digits."""
    return uf.ROMAN_NUMERALS.get(n, str(n))
