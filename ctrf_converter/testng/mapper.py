# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Map TestNG intermediate records onto the CTRF schema."""

from ctrf_converter.core.models import (
    CanonicalTest,
    IntermediateTestCase,
    Report,
    Summary,
    SuiteSummary,
    TestStatus,
)

STATUS_MAP: dict[str, TestStatus] = {
    "pass": TestStatus.PASSED,
    "fail": TestStatus.FAILED,
    "skip": TestStatus.SKIPPED,
}


def map_status(raw_status: str) -> TestStatus:
    """Map a TestNG status token; unknown tokens become OTHER."""
    return STATUS_MAP.get(raw_status, TestStatus.OTHER)


def to_canonical_test(case: IntermediateTestCase) -> CanonicalTest:
    status = map_status(case.status)
    failed = status == TestStatus.FAILED
    return CanonicalTest(
        name=case.name,
        status=status,
        duration=case.duration,
        message=case.message if failed and case.message else None,
        trace=case.trace if failed and case.trace else None,
    )


def build_summary(suite_summary: SuiteSummary) -> Summary:
    """Build the CTRF summary from TestNG's self-reported totals.

    Counts are not recomputed from the extracted tests. TestNG has no pending
    state, and its "ignored" count is reported as "other".
    """
    return Summary(
        tests=suite_summary.total,
        passed=suite_summary.passed,
        failed=suite_summary.failed,
        pending=0,
        skipped=suite_summary.skipped,
        other=suite_summary.ignored,
        start=suite_summary.start_time,
        stop=suite_summary.end_time,
    )


def build_report(
    cases: list[IntermediateTestCase],
    suite_summary: SuiteSummary,
    tool_name: str,
    environment: dict[str, str] | None = None,
) -> Report:
    return Report(
        tool_name=tool_name,
        summary=build_summary(suite_summary),
        tests=[to_canonical_test(case) for case in cases],
        environment=dict(environment or {}),
    )
