# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Terminal formatting for CLI output."""

import os
import re

from colorama import Fore, Style, init

from ctrf_converter.core.models import Summary

# autoreset=True means colors reset after each print
init(autoreset=True)


class TerminalColors:
    """Semantic color mapping for CLI messages.

    Colors are disabled when the NO_COLOR environment variable is set.
    """

    ERROR = Fore.RED
    WARNING = Fore.YELLOW
    SUCCESS = Fore.GREEN
    INFO = Fore.CYAN
    RESET = Style.RESET_ALL

    NO_COLOR = os.environ.get("NO_COLOR") is not None

    # Regex pattern to match ANSI escape sequences
    ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        """Remove all ANSI escape sequences from text."""
        return cls.ANSI_ESCAPE_PATTERN.sub("", text)

    @classmethod
    def _color(cls, color: str, text: str) -> str:
        if cls.NO_COLOR:
            return text
        return f"{color}{text}{cls.RESET}"

    @classmethod
    def error(cls, text: str) -> str:
        """Format error text in red."""
        return cls._color(cls.ERROR, text)

    @classmethod
    def warning(cls, text: str) -> str:
        """Format warning text in yellow."""
        return cls._color(cls.WARNING, text)

    @classmethod
    def success(cls, text: str) -> str:
        """Format success text in green."""
        return cls._color(cls.SUCCESS, text)

    @classmethod
    def info(cls, text: str) -> str:
        """Format info text in cyan."""
        return cls._color(cls.INFO, text)

    @classmethod
    def format_summary(cls, summary: Summary) -> str:
        """Format a one-line summary of a converted report.

        Counts are colored only when greater than zero; labels never are.

        Args:
            summary: Summary block of the converted report

        Returns:
            e.g. "5 tests, 3 passed, 1 failed, 1 skipped, 0 other."
        """

        def count(value: int, color: str) -> str:
            return cls._color(color, str(value)) if value > 0 else str(value)

        return (
            f"{summary.tests} tests, "
            f"{count(summary.passed, cls.SUCCESS)} passed, "
            f"{count(summary.failed, cls.ERROR)} failed, "
            f"{count(summary.skipped, cls.WARNING)} skipped, "
            f"{count(summary.other, cls.INFO)} other."
        )


# Single instance for use across the codebase
terminal = TerminalColors()
