# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
UIForge Types Constants Module

This module contains the constants shared across UIForge: the named angles
used when building rounded outlines, library defaults, and the numeral
lookup tables used by the number helpers.
"""

# Named angles in degrees, for a coordinate system with y increasing downward
ANGLE_TOP = -90.0
ANGLE_TRAILING = 0.0
ANGLE_BOTTOM = 90.0
ANGLE_LEADING = 180.0

# Library defaults
DEFAULT_CORNER_RADIUS = 10.0                # rounded_rect() uniform radius
DEFAULT_BUFFER_TIME = 3.0                   # AutoSave debounce, in seconds
DEFAULT_SUFFIX_SEPARATOR = " "

# Smallest arc sweep (in degrees) that is still emitted when flattening
ARC_EPSILON = 1e-5

# Matrix arithmetic is rounded to this many decimal places
MATRIX_PRECISION = 10

# Code point range treated as Chinese (both ends exclusive)
CJK_LOWER_BOUND = 0x4E00
CJK_UPPER_BOUND = 0x9FFF

# Emoji-property code points below this count only with a following modifier
EMOJI_LOWER_BOUND = 0x238D

CN_NUMBERS = {
    1: "一", 2: "二", 3: "三", 4: "四", 5: "五",
    6: "六", 7: "七", 8: "八", 9: "九", 10: "十",
    11: "十一", 12: "十二", 13: "十三", 14: "十四", 15: "十五",
    16: "十六", 17: "十七", 18: "十八", 19: "十九", 20: "二十",
}

ROMAN_NUMERALS = {
    1: "Ⅰ", 2: "Ⅱ", 3: "Ⅲ", 4: "Ⅳ", 5: "Ⅴ", 6: "Ⅵ",
    7: "Ⅶ", 8: "Ⅷ", 9: "Ⅸ", 10: "Ⅹ", 11: "Ⅺ", 12: "Ⅻ",
}
