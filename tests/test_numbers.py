"""Tests for canonical decimal text of floats."""

import math

import pytest

from grapher.utils.numbers import canonical_text


class TestCanonicalText:
    """Tests for canonical_text."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (6.0, "6.0"),
            (4, "4.0"),
            (-22.0, "-22.0"),
            (0.5, "0.5"),
            (0.1, "0.1"),
            (123.456, "123.456"),
            (0.001, "0.001"),
            (1234567.0, "1234567.0"),
            (0.30000000000000004, "0.30000000000000004"),
        ],
    )
    def test_plain_notation(self, value, expected):
        assert canonical_text(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1e7, "1.0E7"),
            (12345678.9, "1.23456789E7"),
            (-2.5e10, "-2.5E10"),
            (0.0001, "1.0E-4"),
            (1.2345e-4, "1.2345E-4"),
            (1.2246467991473532e-16, "1.2246467991473532E-16"),
            (1e16, "1.0E16"),
        ],
    )
    def test_scientific_notation(self, value, expected):
        assert canonical_text(value) == expected

    def test_zero_keeps_sign(self):
        assert canonical_text(0.0) == "0.0"
        assert canonical_text(-0.0) == "-0.0"

    def test_non_finite(self):
        assert canonical_text(math.nan) == "NaN"
        assert canonical_text(math.inf) == "Infinity"
        assert canonical_text(-math.inf) == "-Infinity"

    def test_round_trips(self):
        for value in (math.pi, -math.e, 1 / 3, 2.0**-20, 6.02214076e23):
            assert float(canonical_text(value)) == value
