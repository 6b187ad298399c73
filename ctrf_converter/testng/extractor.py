# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""TestNG results extractor.

Walks a ``testng-results.xml`` tree::

    <testng-results total=".." passed=".." failed=".." skipped=".." ignored="..">
      <suite name=".." started-at=".." finished-at="..">
        <test name="..">
          <class name="..">
            <test-method name=".." status="PASS" duration-ms=".." is-config="..">
              <exception class="..">
                <message>...</message>
                <full-stacktrace>...</full-stacktrace>
              </exception>
            </test-method>

Configuration methods (``is-config="true"``) are setup/teardown hooks and are
never returned as test cases.
"""

from lxml import etree as ET

from ctrf_converter.core.constants import (
    NAME_SEPARATOR,
    TESTNG_BEFORE_SUITE_METHOD,
    TESTNG_DEFAULT_STATUS,
    TESTNG_ROOT_TAG,
    UNKNOWN_METHOD,
    UNKNOWN_TEST,
)
from ctrf_converter.core.diagnostics import DiagnosticSink
from ctrf_converter.core.errors import MalformedReport
from ctrf_converter.core.models import IntermediateTestCase, SuiteSummary
from ctrf_converter.core.pipeline import ExtractionResult
from ctrf_converter.utils.numbers import parse_int
from ctrf_converter.utils.timestamps import parse_date

# TestNG writes "is-config"; some generators use an underscore instead
CONFIG_ATTRIBUTES = ("is-config", "is_config")

SUMMARY_ATTRIBUTES = ("total", "passed", "failed", "skipped", "ignored")


def _iter_methods(suite: ET._Element) -> list[tuple[ET._Element, ET._Element]]:
    """Return (test, test-method) pairs of a suite in document order."""
    return [
        (test, method)
        for test in suite.findall("test")
        for test_class in test.findall("class")
        for method in test_class.findall("test-method")
    ]


def _child_text(element: ET._Element, tag: str) -> str | None:
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    return child.text.strip() or None


class TestNGExtractor:
    """Extract intermediate test cases and suite totals from a TestNG tree."""

    # Not a pytest test class
    __test__ = False

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.sink = sink or DiagnosticSink()

    def extract(self, root: ET._Element) -> ExtractionResult[IntermediateTestCase]:
        """Extract test cases and self-reported totals.

        Args:
            root: Root element of the parsed report

        Returns:
            ExtractionResult with cases, a SuiteSummary and diagnostics

        Raises:
            MalformedReport: If the testng-results root or its suite is missing.
        """
        if root.tag != TESTNG_ROOT_TAG:
            raise MalformedReport(f"missing {TESTNG_ROOT_TAG}")

        suites = root.findall("suite")
        if not suites:
            raise MalformedReport("missing suite")

        start_count = len(self.sink.diagnostics)
        summary = self._extract_summary(root, suites[0])

        cases: list[IntermediateTestCase] = []
        for suite in suites:
            for test, method in _iter_methods(suite):
                try:
                    case = self._extract_method(test, method)
                except Exception as e:
                    self.sink.warning(
                        f"Skipping test-method '{method.get('name')}' in test "
                        f"'{test.get('name')}': {type(e).__name__}: {e}",
                        case=method.get("name"),
                    )
                    continue
                if case is not None:
                    cases.append(case)

        self.sink.debug(
            f"Extracted {len(cases)} TestNG test cases "
            f"(report total: {summary.total})"
        )
        return ExtractionResult(
            cases=cases,
            summary=summary,
            diagnostics=self.sink.diagnostics[start_count:],
        )

    def _extract_summary(
        self, root: ET._Element, suite: ET._Element
    ) -> SuiteSummary:
        counts: dict[str, int] = {}
        for attribute in SUMMARY_ATTRIBUTES:
            value = parse_int(root.get(attribute))
            if value is None:
                self.sink.warning(
                    f"Invalid or missing '{attribute}' on <{TESTNG_ROOT_TAG}>: "
                    f"{root.get(attribute)!r}, defaulting to 0"
                )
                value = 0
            counts[attribute] = value

        started_at = self._find_before_suite_start(suite) or suite.get("started-at")
        return SuiteSummary(
            total=counts["total"],
            passed=counts["passed"],
            failed=counts["failed"],
            skipped=counts["skipped"],
            ignored=counts["ignored"],
            start_time=self._suite_timestamp(started_at, "started-at"),
            end_time=self._suite_timestamp(suite.get("finished-at"), "finished-at"),
            suite_name=suite.get("name"),
        )

    @staticmethod
    def _find_before_suite_start(suite: ET._Element) -> str | None:
        """Return started-at of the beforeSuite method, if there is one.

        The suite's own started-at can reflect scheduling of suite setup rather
        than the start of execution, so beforeSuite wins when present.
        """
        for _, method in _iter_methods(suite):
            if method.get("name") == TESTNG_BEFORE_SUITE_METHOD:
                return method.get("started-at")
        return None

    def _suite_timestamp(self, value: str | None, attribute: str) -> int:
        if value is None:
            self.sink.warning(f"Missing '{attribute}' on <suite>, defaulting to 0")
            return 0
        return parse_date(value, self.sink)

    def _extract_method(
        self, test: ET._Element, method: ET._Element
    ) -> IntermediateTestCase | None:
        """Convert one test-method element, or None if it must be skipped."""
        if not method.attrib:
            self.sink.warning("Skipping test-method without attributes")
            return None
        if any(method.get(attr) == "true" for attr in CONFIG_ATTRIBUTES):
            return None

        test_name = test.get("name") or UNKNOWN_TEST
        method_name = method.get("name") or UNKNOWN_METHOD
        name = f"{test_name}{NAME_SEPARATOR}{method_name}"

        duration = parse_int(method.get("duration-ms"))
        if duration is None:
            self.sink.warning(
                f"Invalid or missing 'duration-ms': {method.get('duration-ms')!r}, "
                "defaulting to 0",
                case=name,
            )
            duration = 0

        started_at = method.get("started-at")
        finished_at = method.get("finished-at")

        message = trace = None
        exception = method.find("exception")
        if exception is not None:
            message = _child_text(exception, "message")
            trace = _child_text(exception, "full-stacktrace")

        return IntermediateTestCase(
            name=name,
            status=(method.get("status") or TESTNG_DEFAULT_STATUS).lower(),
            duration=max(duration, 0),
            start_time=parse_date(started_at, self.sink) if started_at else None,
            end_time=parse_date(finished_at, self.sink) if finished_at else None,
            message=message,
            trace=trace,
        )
