# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Non-fatal diagnostics collected while converting a report.

A DiagnosticSink is passed into every pipeline component. It forwards each
message to a regular ``logging.Logger`` and keeps a copy in memory, so callers
and tests can inspect what was defaulted or dropped without capturing output.
"""

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single non-fatal problem found during conversion.

    Attributes:
        level: Logging level (logging.WARNING or logging.ERROR)
        message: Human readable description
        case: Name of the affected test case, if any
    """

    level: int
    message: str
    case: str | None = None


class DiagnosticSink:
    """Accumulator for non-fatal diagnostics.

    Example:
        >>> sink = DiagnosticSink()
        >>> sink.warning("Missing 'duration-ms', defaulting to 0")
        >>> len(sink.warnings)
        1
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.diagnostics: list[Diagnostic] = []

    def debug(self, message: str) -> None:
        """Log a debug message. Debug messages are not recorded."""
        self.logger.debug(message)

    def warning(self, message: str, case: str | None = None) -> None:
        self._record(logging.WARNING, message, case)

    def error(self, message: str, case: str | None = None) -> None:
        self._record(logging.ERROR, message, case)

    def _record(self, level: int, message: str, case: str | None) -> None:
        self.diagnostics.append(Diagnostic(level=level, message=message, case=case))
        self.logger.log(level, message)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.level == logging.WARNING]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.level >= logging.ERROR]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
