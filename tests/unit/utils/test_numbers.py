# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Unit tests for numeric attribute helpers."""

import pytest

from ctrf_converter.utils.numbers import parse_int, seconds_to_milliseconds


class TestParseInt:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("42", 42),
            (" 7", 7),
            ("12.9", 12),
            ("15ms", 15),
            ("-3", -3),
            ("+4", 4),
        ],
    )
    def test_leading_integer(self, value: str, expected: int) -> None:
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "ms15", "."])
    def test_unparsable(self, value: str | None) -> None:
        assert parse_int(value) is None


class TestSecondsToMilliseconds:
    def test_rounds_half_away_from_zero(self) -> None:
        assert seconds_to_milliseconds("0.0005") == 1
        assert seconds_to_milliseconds("0.0004") == 0
        assert seconds_to_milliseconds("-0.0005") == -1

    def test_exponent_notation(self) -> None:
        assert seconds_to_milliseconds("1e-3") == 1

    @pytest.mark.parametrize("value", ["", "abc", "NaN", "Infinity", "1,5"])
    def test_invalid_raises_value_error(self, value: str) -> None:
        with pytest.raises(ValueError, match="invalid seconds value"):
            seconds_to_milliseconds(value)
