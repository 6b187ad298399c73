# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Parsing of KEY=value environment properties supplied by the caller."""

from collections.abc import Iterable

from ctrf_converter.core.diagnostics import DiagnosticSink


def parse_environment_properties(
    properties: Iterable[str] | None, sink: DiagnosticSink | None = None
) -> dict[str, str]:
    """Build the report environment mapping from KEY=value strings.

    Splits on the first "=", so values may contain "=" themselves. Later
    duplicates win. A property without "=" maps to an empty string.

    Args:
        properties: Strings such as "browser=firefox"
        sink: Receives a warning for properties without "="

    Returns:
        Flat string-to-string mapping

    Example:
        >>> parse_environment_properties(["os=linux", "url=http://x/?a=b"])
        {'os': 'linux', 'url': 'http://x/?a=b'}
    """
    environment: dict[str, str] = {}
    for prop in properties or []:
        key, separator, value = prop.partition("=")
        if not separator:
            (sink or DiagnosticSink()).warning(
                f"Environment property '{prop}' has no '=', using empty value"
            )
        environment[key] = value
    return environment
