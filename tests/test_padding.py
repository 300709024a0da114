"""Unit tests for Unicode-aware padding."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from html_table_md.padding import pad


class TestPadAlignment:

    def test_right_align_by_default(self):
        assert pad("ab", 4) == "  ab"

    def test_left_align(self):
        assert pad("ab", 4, left_align=True) == "ab  "

    def test_custom_fill(self):
        assert pad("-", 5, fill="-", left_align=True) == "-----"

    def test_width_not_larger_than_text(self):
        assert pad("abcd", 3) == "abcd"

    def test_zero_width(self):
        assert pad("abc", 0) == "abc"

    def test_empty_text(self):
        assert pad("", 3, left_align=True) == "   "

    def test_percent_is_literal(self):
        assert pad("50%", 5, left_align=True) == "50%  "

    def test_multi_character_fill_rejected(self):
        with pytest.raises(ValueError):
            pad("a", 3, fill="ab")


class TestPadUnicode:

    def test_accented_letter_counts_as_one(self):
        assert pad("é", 3, left_align=True) == "é  "

    def test_cjk_counts_code_points(self):
        assert pad("日本", 4, left_align=True) == "日本  "

    def test_result_length_in_code_points(self):
        assert len(pad("Ünïcödé", 10)) == 10


class TestPadPrecision:

    def test_truncates_to_precision(self):
        assert pad("abcdef", 0, precision=3) == "abc"

    def test_truncates_then_pads(self):
        assert pad("abcdef", 5, left_align=True, precision=3) == "abc  "

    def test_truncates_unicode_by_code_points(self):
        assert pad("éèêë", 0, precision=2) == "éè"

    def test_zero_precision_disables_truncation(self):
        assert pad("abcdef", 0, precision=0) == "abcdef"

    def test_precision_longer_than_text(self):
        assert pad("ab", 0, precision=5) == "ab"
