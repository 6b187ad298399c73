# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Numeric attribute parsing helpers."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_LEADING_INTEGER: re.Pattern[str] = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: str | None) -> int | None:
    """Parse the leading integer of an attribute value.

    Trailing garbage is ignored, so "12.5" gives 12 and "7ms" gives 7.

    Args:
        value: Raw attribute value

    Returns:
        The parsed integer, or None if the value has no leading digits
    """
    if value is None:
        return None
    match = _LEADING_INTEGER.match(value)
    if match is None:
        return None
    return int(match.group(1))


def seconds_to_milliseconds(value: str) -> int:
    """Convert a fractional seconds string to whole milliseconds.

    Rounds to nearest, ties away from zero ("0.0005" -> 1).

    Args:
        value: Seconds as a decimal string, e.g. "1.234"

    Returns:
        Milliseconds, e.g. 1234

    Raises:
        ValueError: If the value is not a finite number.
    """
    try:
        seconds = Decimal(value.strip())
    except InvalidOperation as e:
        raise ValueError(f"invalid seconds value: {value!r}") from e
    if not seconds.is_finite():
        raise ValueError(f"invalid seconds value: {value!r}")
    return int((seconds * 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
