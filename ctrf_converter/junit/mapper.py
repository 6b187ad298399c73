# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Map JUnit testcases onto the CTRF schema.

JUnit has no status attribute: the state is derived from child elements,
and the summary is tallied from the mapped tests.
"""

from ctrf_converter.core.diagnostics import DiagnosticSink
from ctrf_converter.core.models import CanonicalTest, Report, Summary, TestStatus
from ctrf_converter.junit.extractor import JUnitTestCase
from ctrf_converter.utils.numbers import seconds_to_milliseconds


def derive_status(case: JUnitTestCase) -> TestStatus:
    # failure/error wins over skipped
    if case.failure is not None or case.error is not None:
        return TestStatus.FAILED
    if case.skipped:
        return TestStatus.SKIPPED
    return TestStatus.PASSED


def derive_duration(case: JUnitTestCase, sink: DiagnosticSink | None = None) -> int:
    """Convert the "time" attribute (seconds) to milliseconds.

    Missing or invalid values give 0.
    """
    if case.time is None:
        return 0
    try:
        duration = seconds_to_milliseconds(case.time)
    except ValueError:
        (sink or DiagnosticSink()).warning(
            f"Invalid 'time' value {case.time!r}, defaulting to 0",
            case=case.full_name,
        )
        return 0
    return max(duration, 0)


def to_canonical_test(
    case: JUnitTestCase, sink: DiagnosticSink | None = None
) -> CanonicalTest:
    status = derive_status(case)
    message = None
    if status == TestStatus.FAILED:
        message = case.failure or case.error or None
    return CanonicalTest(
        name=case.full_name,
        status=status,
        duration=derive_duration(case, sink),
        message=message,
    )


def build_report(
    cases: list[JUnitTestCase],
    tool_name: str,
    environment: dict[str, str] | None = None,
    sink: DiagnosticSink | None = None,
) -> Report:
    tests = [to_canonical_test(case, sink) for case in cases]
    # JUnit carries no suite-level timing here, start/stop stay 0
    return Report(
        tool_name=tool_name,
        summary=Summary.from_tests(tests),
        tests=tests,
        environment=dict(environment or {}),
    )
