# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Date parsing with graceful fallback.

Report timestamps come in several shapes, e.g. ``2024-01-01T10:00:00Z`` or
``2024-01-01T10:00:00 CET``. Parsing never raises: a value that cannot be
understood maps to epoch 0 and an error diagnostic.
"""

from datetime import datetime, timedelta, timezone

from ctrf_converter.core.diagnostics import DiagnosticSink

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _to_epoch_ms(value: str) -> int | None:
    """Parse an ISO 8601 string to epoch milliseconds, or None if invalid.

    Values without an offset are taken as UTC.
    """
    text = value.strip()
    if not text:
        return None
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (parsed - EPOCH) // timedelta(milliseconds=1)


def parse_date(value: str, sink: DiagnosticSink | None = None) -> int:
    """Parse a date string into epoch milliseconds.

    Tries the full string first, then only the part before the first space
    (drops trailing zone names such as "UTC" or "CET"). Returns 0 if both fail.

    Args:
        value: Date string from the report
        sink: Receives an error diagnostic when the value is unparsable

    Returns:
        Timestamp in milliseconds since the epoch, or 0

    Examples:
        >>> parse_date("1970-01-01T00:00:01Z")
        1000
        >>> parse_date("not-a-date")
        0
    """
    timestamp = _to_epoch_ms(value)
    if timestamp is not None:
        return timestamp

    timestamp = _to_epoch_ms(value.split(" ")[0])
    if timestamp is not None:
        return timestamp

    (sink or DiagnosticSink()).error(f"Failed to parse date: {value}")
    return 0
