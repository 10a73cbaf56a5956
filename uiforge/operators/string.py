# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""String helpers, including Pinyin transliteration of Chinese text."""

from __future__ import annotations

import logging
from typing import Optional

import regex
from pypinyin import Style, lazy_pinyin

from ..core import types as uf

logger = logging.getLogger(__name__)

_EMOJI = regex.compile(r"\p{Emoji}")


def validate(s: str) -> Optional[str]:
    """Return None for an empty string, otherwise the string itself."""
    return s if s else None


def if_empty(s: str, placeholder: str) -> str:
    return s if s else placeholder


def add_suffix(s: str, suffix: str, separator: str = uf.DEFAULT_SUFFIX_SEPARATOR) -> str:
    """Append ``separator + suffix``, only when suffix is not empty."""
    return s + separator + suffix if suffix else s


def include_chinese(s: str) -> bool:
    for ch in s:
        if uf.CJK_LOWER_BOUND < ord(ch) < uf.CJK_UPPER_BOUND:
            return True
    return False


def transform_to_pinyin(s: str, with_blank: bool = False) -> str:
    """
    Transliterate Chinese characters to Pinyin without tone marks.

    Text containing no Chinese is only lowercased. Otherwise syllables are
    separated by single spaces, and all spaces are removed unless
    ``with_blank`` is set. Non-Chinese runs are kept as written.
    """
    if not include_chinese(s):
        return s.lower()
    # non-Chinese runs come back with their own whitespace; collapse it
    pinyin = " ".join(" ".join(lazy_pinyin(s, style=Style.NORMAL)).split())
    logger.debug("Transliterated %r to %r", s, pinyin)
    if not with_blank:
        pinyin = pinyin.replace(" ", "")
    return pinyin


def get_pinyin_head(s: str) -> str:
    """
    Initials of each transliterated word.

    Words start after any non-letter, so ``"hello-world"`` -> ``"HW"``
    and ``"中文"`` -> ``"ZW"``.
    """
    capitalized = transform_to_pinyin(s, with_blank=True).title()
    return "".join(ch for ch in capitalized if ch.isupper())


def is_emoji(ch: str) -> bool:
    """
    Whether the character ``ch`` (one grapheme, possibly several code
    points) displays as an emoji.

    Digits, ``#`` and ``©`` carry the Emoji property but render as text on
    their own; they count only when followed by a variation selector or
    keycap.
    """
    if not ch or not _EMOJI.match(ch[0]):
        return False
    return ord(ch[0]) >= uf.EMOJI_LOWER_BOUND or len(ch) > 1
