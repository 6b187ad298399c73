# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Logging setup for the ctrf-converter CLI."""

import logging
import sys
from enum import Enum

import errorhandler

_HANDLER_NAME = "ctrf_converter"


class VerbosityLevel(str, Enum):
    """Supported log levels for the -v/--verbosity option."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def configure_logging(
    level: str | VerbosityLevel, error_handler: errorhandler.ErrorHandler
) -> None:
    """Configure the root logger and reset the error handler.

    Args:
        level: Verbosity level name, e.g. "WARNING" or VerbosityLevel.DEBUG
        error_handler: Handler that tracks whether an ERROR record was logged
    """
    name = level.value if isinstance(level, VerbosityLevel) else str(level).upper()
    log_level = logging.getLevelName(name)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # CliRunner invokes the app repeatedly in one process
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(handler)

    error_handler.reset()
