# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Fatal conversion errors.

Only structural problems abort a conversion. Missing or unparsable attribute
values are recorded as diagnostics instead, see ``core.diagnostics``.
"""


class ConversionError(Exception):
    """Base class for errors that abort a report conversion."""


class ParseError(ConversionError):
    """The input file is not well-formed XML."""


class MalformedReport(ConversionError):
    """Well-formed XML that lacks a structurally required node."""
