# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""JUnit XML extractor.

Handles the common JUnit shape where ``<testsuites>`` wraps ``<testsuite>``
elements that may nest further suites to any depth::

    <testsuites>
      <testsuite name="Suite A">
        <testsuite name="Nested">
          <testcase classname=".." name=".." time="0.012">
            <failure message="..">trace</failure>
          </testcase>
        </testsuite>
      </testsuite>
    </testsuites>

Every ``testcase`` leaf is tagged with the name of its top-level suite.
"""

from dataclasses import dataclass

from lxml import etree as ET

from ctrf_converter.core.constants import (
    JUNIT_ROOT_TAG,
    JUNIT_SUITE_TAG,
    NAME_SEPARATOR,
    UNKNOWN_SUITE,
    UNKNOWN_TEST,
)
from ctrf_converter.core.diagnostics import DiagnosticSink
from ctrf_converter.core.errors import MalformedReport
from ctrf_converter.core.pipeline import ExtractionResult


@dataclass(frozen=True)
class JUnitTestCase:
    """A testcase leaf with its status markers still structural.

    Attributes:
        suite_name: Name of the originating top-level suite
        name: The testcase "name" attribute
        classname: The testcase "classname" attribute
        time: Raw "time" attribute in fractional seconds
        failure: Text of a <failure> child, "" if present but empty
        error: Text of an <error> child, "" if present but empty
        skipped: Whether a <skipped> child is present
    """

    suite_name: str
    name: str
    classname: str | None = None
    time: str | None = None
    failure: str | None = None
    error: str | None = None
    skipped: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.suite_name}{NAME_SEPARATOR}{self.name}"


def element_text(element: ET._Element) -> str:
    """Return the text of a failure/error element.

    Inline text is preferred; an element with only a ``message`` attribute
    yields that attribute instead.
    """
    text = (element.text or "").strip()
    if text:
        return text
    return element.get("message") or ""


class JUnitExtractor:
    """Collect every testcase leaf of a JUnit report."""

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.sink = sink or DiagnosticSink()

    def extract(self, root: ET._Element) -> ExtractionResult[JUnitTestCase]:
        """Extract all testcase leaves across all suite nesting levels.

        A bare ``<testsuite>`` root is treated as a single top-level suite.

        Args:
            root: Root element of the parsed report

        Returns:
            ExtractionResult with cases and diagnostics; summary is None

        Raises:
            MalformedReport: If the root is neither testsuites nor testsuite.
        """
        if root.tag == JUNIT_ROOT_TAG:
            top_level_suites = root.findall(JUNIT_SUITE_TAG)
        elif root.tag == JUNIT_SUITE_TAG:
            top_level_suites = [root]
        else:
            raise MalformedReport(f"missing {JUNIT_ROOT_TAG}")

        start_count = len(self.sink.diagnostics)
        cases: list[JUnitTestCase] = []
        for suite in top_level_suites:
            suite_name = suite.get("name") or UNKNOWN_SUITE
            self._collect(suite, suite_name, cases)

        self.sink.debug(
            f"Extracted {len(cases)} JUnit test cases "
            f"from {len(top_level_suites)} suites"
        )
        return ExtractionResult(
            cases=cases, diagnostics=self.sink.diagnostics[start_count:]
        )

    def _collect(
        self, suite: ET._Element, suite_name: str, cases: list[JUnitTestCase]
    ) -> None:
        for child in suite:
            if child.tag == "testcase":
                try:
                    cases.append(self._extract_case(child, suite_name))
                except Exception as e:
                    self.sink.warning(
                        f"Skipping testcase '{child.get('name')}' in suite "
                        f"'{suite_name}': {type(e).__name__}: {e}",
                        case=child.get("name"),
                    )
            elif child.tag == JUNIT_SUITE_TAG:
                self._collect(child, suite_name, cases)

    @staticmethod
    def _extract_case(testcase: ET._Element, suite_name: str) -> JUnitTestCase:
        failure = testcase.find("failure")
        error = testcase.find("error")
        return JUnitTestCase(
            suite_name=suite_name,
            name=testcase.get("name") or UNKNOWN_TEST,
            classname=testcase.get("classname"),
            time=testcase.get("time"),
            failure=element_text(failure) if failure is not None else None,
            error=element_text(error) if error is not None else None,
            skipped=testcase.find("skipped") is not None,
        )
