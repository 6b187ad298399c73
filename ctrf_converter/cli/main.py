# -*- coding: utf-8 -*-

# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional

import errorhandler

import typer
from typing_extensions import Annotated

import ctrf_converter
from ctrf_converter.converter import convert_junit_to_ctrf, convert_testng_to_ctrf
from ctrf_converter.core.errors import ConversionError
from ctrf_converter.core.models import Report
from ctrf_converter.utils.logging import VerbosityLevel, configure_logging
from ctrf_converter.utils.terminal import terminal


app = typer.Typer(add_completion=False, no_args_is_help=True)

logger = logging.getLogger(__name__)

error_handler = errorhandler.ErrorHandler()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ctrf-converter, version {ctrf_converter.__version__}")
        raise typer.Exit()


Verbosity = Annotated[
    VerbosityLevel,
    typer.Option(
        "-v",
        "--verbosity",
        help="Verbosity level.",
        envvar="CTRF_CONVERTER_VERBOSITY",
        is_eager=True,
    ),
]


Version = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=version_callback,
        help="Display version number.",
        is_eager=True,
    ),
]


ReportPath = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="Path to the XML report file.",
    ),
]


Output = Annotated[
    Optional[Path],
    typer.Option(
        "-o",
        "--output",
        dir_okay=False,
        file_okay=True,
        help="Output directory and filename for the CTRF report. [default: ctrf/ctrf-report.json]",
        envvar="CTRF_CONVERTER_OUTPUT",
    ),
]


Tool = Annotated[
    Optional[str],
    typer.Option(
        "-t",
        "--tool",
        help="Tool name written to the report.",
        envvar="CTRF_CONVERTER_TOOL",
    ),
]


Env = Annotated[
    list[str],
    typer.Option(
        "-e",
        "--env",
        help="Environment property in KEY=value form. Can be repeated.",
    ),
]


@app.callback()
def main(
    verbosity: Verbosity = VerbosityLevel.WARNING,
    version: Version = False,
) -> None:
    """Convert TestNG and JUnit XML reports to CTRF JSON."""
    configure_logging(verbosity, error_handler)


@app.command()
def testng(
    path: ReportPath,
    output: Output = None,
    tool: Tool = None,
    env: Env = [],
) -> None:
    """Convert a TestNG XML report to CTRF."""
    _run(convert_testng_to_ctrf, path, output, tool, env)


@app.command()
def junit(
    path: ReportPath,
    output: Output = None,
    tool: Tool = None,
    env: Env = [],
) -> None:
    """Convert a JUnit XML report to CTRF."""
    _run(convert_junit_to_ctrf, path, output, tool, env)


def _run(
    convert: Callable[..., tuple[Report, Path]],
    path: Path,
    output: Path | None,
    tool: str | None,
    env: list[str],
) -> None:
    try:
        report, output_path = convert(path, output, tool, env)
    except (ConversionError, OSError) as e:
        logger.error(f"Error: {e}")
        raise typer.Exit(1)

    typer.echo(terminal.success("Conversion completed successfully."))
    typer.echo(terminal.format_summary(report.summary))
    typer.echo(f"CTRF report written to {output_path}")
    exit()


def exit() -> None:
    if error_handler.fired:
        raise typer.Exit(1)
    else:
        raise typer.Exit(0)
