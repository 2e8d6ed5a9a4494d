"""Tests for integer conversion and math helpers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from aockit.domain.errors import ConversionError
from aockit.domain.numbers import abs_int, int_to_str, power, str_to_int


class TestStrToInt:
    @pytest.mark.parametrize(
        "text,expected",
        [("0", 0), ("42", 42), ("-7", -7), ("+5", 5), (" 12\n", 12), ("007", 7)],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert str_to_int(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "1_000", "0x10", "--1", "1 2"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ConversionError):
            str_to_int(text)

    def test_conversion_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            str_to_int("nope")

    @given(st.integers())
    def test_round_trip(self, n: int) -> None:
        assert str_to_int(int_to_str(n)) == n


class TestMath:
    @pytest.mark.parametrize("x,expected", [(-3, 3), (0, 0), (5, 5)])
    def test_abs_int(self, x: int, expected: int) -> None:
        assert abs_int(x) == expected

    @pytest.mark.parametrize(
        "n,m,expected",
        [(2, 0, 1), (2, 1, 2), (2, 10, 1024), (-3, 3, -27), (0, 0, 1), (7, 2, 49)],
    )
    def test_power(self, n: int, m: int, expected: int) -> None:
        assert power(n, m) == expected

    def test_power_negative_exponent(self) -> None:
        with pytest.raises(ValueError):
            power(2, -1)
