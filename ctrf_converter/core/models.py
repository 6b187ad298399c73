# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core data models shared across the TestNG and JUnit pipelines.

Intermediate records are produced by the extractors, canonical records by the
mappers. All models are immutable: values are set once at construction.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TestStatus(str, Enum):
    """Canonical CTRF test states."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    PENDING = "pending"
    OTHER = "other"


@dataclass(frozen=True)
class IntermediateTestCase:
    """A single test case as read from the source report.

    Attributes:
        name: Composite name, ``"{scope}: {leaf}"``
        status: Framework-native status token (e.g. "pass", "fail", "skip")
        duration: Elapsed time in milliseconds
        start_time: Start timestamp in epoch milliseconds, if the format has one
        end_time: End timestamp in epoch milliseconds, if the format has one
        message: Failure message, if the source carries one
        trace: Failure stack trace, if the source carries one
    """

    name: str
    status: str
    duration: int
    start_time: int | None = None
    end_time: int | None = None
    message: str | None = None
    trace: str | None = None


@dataclass(frozen=True)
class SuiteSummary:
    """Self-reported TestNG totals and suite timing.

    These counts come straight from the report attributes and are not
    required to match the number of extracted test cases.
    """

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    ignored: int = 0
    start_time: int = 0
    end_time: int = 0
    suite_name: str | None = None


@dataclass(frozen=True)
class CanonicalTest:
    """A test in the CTRF output schema."""

    name: str
    status: TestStatus
    duration: int
    message: str | None = None
    trace: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "status": self.status.value,
            "duration": self.duration,
        }
        if self.message is not None:
            data["message"] = self.message
        if self.trace is not None:
            data["trace"] = self.trace
        return data


@dataclass(frozen=True)
class Summary:
    """CTRF summary block: counts per status plus start/stop in epoch ms."""

    tests: int = 0
    passed: int = 0
    failed: int = 0
    pending: int = 0
    skipped: int = 0
    other: int = 0
    start: int = 0
    stop: int = 0

    @classmethod
    def from_tests(
        cls, tests: Iterable[CanonicalTest], start: int = 0, stop: int = 0
    ) -> "Summary":
        """Tally canonical tests by status.

        Args:
            tests: Mapped tests to count
            start: Start timestamp in epoch milliseconds
            stop: Stop timestamp in epoch milliseconds

        Returns:
            Summary whose ``tests`` equals the number of tests given
        """
        counts = Counter(test.status for test in tests)
        return cls(
            tests=sum(counts.values()),
            passed=counts[TestStatus.PASSED],
            failed=counts[TestStatus.FAILED],
            pending=counts[TestStatus.PENDING],
            skipped=counts[TestStatus.SKIPPED],
            other=counts[TestStatus.OTHER],
            start=start,
            stop=stop,
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "tests": self.tests,
            "passed": self.passed,
            "failed": self.failed,
            "pending": self.pending,
            "skipped": self.skipped,
            "other": self.other,
            "start": self.start,
            "stop": self.stop,
        }


@dataclass(frozen=True)
class Report:
    """Root of the CTRF document."""

    tool_name: str
    summary: Summary
    tests: list[CanonicalTest] = field(default_factory=list)
    environment: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{"results": {...}}`` CTRF shape.

        The ``environment`` key is only present when properties were supplied.
        """
        results: dict[str, Any] = {
            "tool": {"name": self.tool_name},
            "summary": self.summary.to_dict(),
            "tests": [test.to_dict() for test in self.tests],
        }
        if self.environment:
            results["environment"] = dict(self.environment)
        return {"results": results}
