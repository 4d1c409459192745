"""Tests for cell and header formatting."""

import math

import pytest

from grapher.rendering.formatter import (
    FormatError,
    format_cell,
    format_header,
    horizontal_rule,
)


class TestFormatCell:
    """Tests for format_cell."""

    def test_left_aligned_key_cell(self):
        assert format_cell(1.0, 12, True, "=") == "1.0========="

    def test_right_aligned_value_cell(self):
        assert format_cell(2.0, 12, False, "=") == "=========2.0"

    def test_cells_are_exactly_length_wide(self):
        for value in (0.0, -1.5, math.pi, 1e300, -7.25e-9):
            for length in (1, 2, 5, 12, 30):
                assert len(format_cell(value, length, True, " ")) == length
                assert len(format_cell(value, length, False, " ")) == length

    def test_truncates_to_length_minus_one(self):
        assert format_cell(math.pi, 6, True, " ") == "3.141 "
        assert format_cell(math.pi, 6, False, " ") == " 3.141"

    def test_long_value_keeps_one_pad_char(self):
        assert format_cell(-123456.789, 5, False, "#") == "#-123"

    def test_length_one_is_all_padding(self):
        assert format_cell(6.0, 1, False, "=") == "="
        assert format_cell(6.0, 1, True, "=") == "="

    def test_scientific_values(self):
        assert format_cell(1e10, 12, True, "=") == "1.0E10======"

    def test_negative_value(self):
        assert format_cell(-0.5, 8, False, ".") == "....-0.5"

    def test_unpadded_keys_drops_left_padding(self):
        assert format_cell(1.0, 12, True, "=", unpadded_keys=True) == "1.0"
        assert format_cell(math.pi, 6, True, "=", unpadded_keys=True) == "3.141"

    def test_unpadded_keys_does_not_affect_values(self):
        assert format_cell(2.0, 12, False, "=", unpadded_keys=True) == "=========2.0"

    @pytest.mark.parametrize("length", [0, -1, -12])
    def test_length_below_one_raises(self, length):
        with pytest.raises(FormatError):
            format_cell(1.0, length, True, "=")

    @pytest.mark.parametrize("pad_char", ["", "==", "ab"])
    def test_pad_char_must_be_single(self, pad_char):
        with pytest.raises(FormatError):
            format_cell(1.0, 12, False, pad_char)

    def test_format_error_is_value_error(self):
        assert issubclass(FormatError, ValueError)


class TestFormatHeader:
    """Tests for format_header."""

    def test_token_replaced(self):
        assert format_header("Table {n}", 3) == "Table 3"

    def test_no_token_unchanged(self):
        assert format_header("Static", 7) == "Static"

    def test_every_token_replaced(self):
        assert format_header("{n}: table {n}", 12) == "12: table 12"

    def test_other_braces_pass_through(self):
        assert format_header("{x} {n} {{n}}", 2) == "{x} 2 {2}"

    def test_empty_template(self):
        assert format_header("", 1) == ""


class TestHorizontalRule:
    def test_rule_width(self):
        assert horizontal_rule(12) == "-" * 25
        assert horizontal_rule(1) == "---"
