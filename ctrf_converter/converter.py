# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Entry points that convert a report file and write the CTRF JSON document.

Execution is strictly sequential: read, parse, extract, map, write. Nothing
is written when any stage before the write fails.
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from ctrf_converter.core.constants import DEFAULT_OUTPUT_PATH, JSON_INDENT
from ctrf_converter.core.diagnostics import DiagnosticSink
from ctrf_converter.core.models import Report
from ctrf_converter.core.pipeline import ReportPipeline
from ctrf_converter.junit.pipeline import JUnitPipeline
from ctrf_converter.testng.pipeline import TestNGPipeline
from ctrf_converter.utils.environment import parse_environment_properties

logger = logging.getLogger(__name__)


def resolve_output_path(output_path: Path | str | None = None) -> Path:
    """Resolve the output file path, defaulting to ctrf/ctrf-report.json."""
    return Path(output_path or DEFAULT_OUTPUT_PATH).resolve()


def write_report(report: Report, output_path: Path | str | None = None) -> Path:
    """Write a report as pretty-printed JSON.

    Args:
        report: The report to write
        output_path: Target file; relative paths resolve against the cwd

    Returns:
        The absolute path that was written
    """
    final_path = resolve_output_path(output_path)
    final_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Writing CTRF report to: {final_path}")
    with final_path.open("w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, indent=JSON_INDENT, ensure_ascii=False)
        f.write("\n")
    return final_path


def _convert(
    pipeline: ReportPipeline,
    report_path: Path | str,
    output_path: Path | str | None,
    tool_name: str | None,
    env_props: Iterable[str] | None,
) -> tuple[Report, Path]:
    environment = parse_environment_properties(env_props, pipeline.sink)
    report = pipeline.run(report_path, tool_name=tool_name, environment=environment)
    return report, write_report(report, output_path)


def convert_testng_to_ctrf(
    testng_path: Path | str,
    output_path: Path | str | None = None,
    tool_name: str | None = None,
    env_props: Iterable[str] | None = None,
    sink: DiagnosticSink | None = None,
) -> tuple[Report, Path]:
    """Convert a TestNG results file to a CTRF JSON report.

    Args:
        testng_path: Path to testng-results.xml
        output_path: Where to write the JSON (default: ctrf/ctrf-report.json)
        tool_name: Tool name for the report (default: "TestNG")
        env_props: Environment properties as "key=value" strings
        sink: Collects non-fatal diagnostics

    Returns:
        Tuple of (converted report, absolute output path)

    Raises:
        FileNotFoundError: If the input file doesn't exist.
        ParseError: If the input is not well-formed XML.
        MalformedReport: If testng-results or suite is missing.
    """
    return _convert(TestNGPipeline(sink), testng_path, output_path, tool_name, env_props)


def convert_junit_to_ctrf(
    junit_path: Path | str,
    output_path: Path | str | None = None,
    tool_name: str | None = None,
    env_props: Iterable[str] | None = None,
    sink: DiagnosticSink | None = None,
) -> tuple[Report, Path]:
    """Convert a JUnit XML file to a CTRF JSON report.

    Same contract as convert_testng_to_ctrf; the default tool name is
    "junit-to-ctrf" and MalformedReport is raised for a missing testsuites root.
    """
    return _convert(JUnitPipeline(sink), junit_path, output_path, tool_name, env_props)
