# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core constants shared across the converter pipelines."""

from pathlib import Path

# Output
DEFAULT_OUTPUT_PATH = Path("ctrf") / "ctrf-report.json"
JSON_INDENT = 2

# Tool names reported in results.tool.name
DEFAULT_TESTNG_TOOL_NAME = "TestNG"
DEFAULT_JUNIT_TOOL_NAME = "junit-to-ctrf"

# Composite test names: "{scope}: {leaf}"
NAME_SEPARATOR = ": "
UNKNOWN_TEST = "Unknown Test"
UNKNOWN_METHOD = "Unknown Method"
UNKNOWN_SUITE = "Unknown Suite"

# TestNG
TESTNG_ROOT_TAG = "testng-results"
TESTNG_BEFORE_SUITE_METHOD = "beforeSuite"
TESTNG_DEFAULT_STATUS = "other"

# JUnit
JUNIT_ROOT_TAG = "testsuites"
JUNIT_SUITE_TAG = "testsuite"
