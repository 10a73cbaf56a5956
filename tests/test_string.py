"""Tests for uiforge.operators.string — string and Pinyin helpers."""

from __future__ import annotations

import pytest

from uiforge.operators.string import (
    add_suffix,
    get_pinyin_head,
    if_empty,
    include_chinese,
    is_emoji,
    transform_to_pinyin,
    validate,
)


class TestPlainHelpers:
    def test_validate(self) -> None:
        assert validate("") is None
        assert validate("x") == "x"

    def test_if_empty(self) -> None:
        assert if_empty("", "untitled") == "untitled"
        assert if_empty("draft", "untitled") == "draft"

    def test_add_suffix(self) -> None:
        assert add_suffix("Chapter", "2") == "Chapter 2"
        assert add_suffix("Chapter", "") == "Chapter"
        assert add_suffix("a", "b", separator="-") == "a-b"


class TestIncludeChinese:
    @pytest.mark.parametrize("text, expected", [
        ("", False),
        ("hello", False),
        ("中", True),
        ("mixed 文字", True),
        ("かな", False),
        # both ends of the range are excluded
        ("一", False),
        ("鿿", False),
        ("丁", True),
    ])
    def test_range(self, text: str, expected: bool) -> None:
        assert include_chinese(text) is expected


class TestPinyin:
    def test_non_chinese_is_lowercased(self) -> None:
        assert transform_to_pinyin("Hello World") == "hello world"
        assert transform_to_pinyin("Hello World", with_blank=True) == "hello world"

    def test_without_blank(self) -> None:
        assert transform_to_pinyin("中文") == "zhongwen"
        assert transform_to_pinyin("你好") == "nihao"

    def test_with_blank(self) -> None:
        assert transform_to_pinyin("中文", with_blank=True) == "zhong wen"

    def test_no_tone_marks(self) -> None:
        assert transform_to_pinyin("拼音", with_blank=True) == "pin yin"

    def test_mixed_text_keeps_latin_runs(self) -> None:
        assert transform_to_pinyin("拼音abc", with_blank=True) == "pin yin abc"

    def test_head(self) -> None:
        assert get_pinyin_head("中文") == "ZW"
        assert get_pinyin_head("拼音abc") == "PYA"

    def test_head_of_plain_text(self) -> None:
        assert get_pinyin_head("hello world") == "HW"
        assert get_pinyin_head("") == ""

    def test_head_starts_words_after_punctuation(self) -> None:
        assert get_pinyin_head("hello-world") == "HW"
        assert get_pinyin_head("read_me.txt") == "RMT"
        assert get_pinyin_head("拼音-abc") == "PYA"


class TestIsEmoji:
    @pytest.mark.parametrize("ch, expected", [
        ("\U0001F600", True),             # grinning face
        ("\U0001F44D\U0001F3FD", True),   # thumbs up, skin tone
        ("1\ufe0f\u20e3", True),          # keycap one
        ("\u00a9\ufe0f", True),           # copyright, emoji style
        ("\u00a9", False),                # copyright, text style
        ("1", False),
        ("#", False),
        ("a", False),
        ("中", False),
        ("", False),
    ])
    def test_characters(self, ch: str, expected: bool) -> None:
        assert is_emoji(ch) is expected
