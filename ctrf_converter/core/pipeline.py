# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Abstract report normalization pipeline.

Each source format is a variant of the same three stages:

1. Load: read the XML file into an element tree
2. Extract: walk the tree into intermediate test-case records
3. Map: convert those records into a CTRF Report

Subclasses supply the format-specific extract and build_report steps.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, TypeVar

from lxml import etree as ET

from ctrf_converter.core.diagnostics import Diagnostic, DiagnosticSink
from ctrf_converter.core.models import Report, SuiteSummary
from ctrf_converter.utils.xml_loader import load_xml

logger = logging.getLogger(__name__)

CaseT = TypeVar("CaseT")


@dataclass
class ExtractionResult(Generic[CaseT]):
    """Output of an extractor.

    Attributes:
        cases: Successfully extracted test cases, in document order
        summary: Self-reported suite totals (TestNG only)
        diagnostics: Non-fatal problems found while extracting
    """

    cases: list[CaseT] = field(default_factory=list)
    summary: SuiteSummary | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)


class ReportPipeline(ABC, Generic[CaseT]):
    """Base class for a source-format specific conversion pipeline."""

    default_tool_name: str = "unknown"

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.sink = sink or DiagnosticSink(logger)

    def load(self, file_path: Path | str) -> ET._Element:
        return load_xml(file_path)

    @abstractmethod
    def extract(self, root: ET._Element) -> ExtractionResult[CaseT]:
        """Walk the parsed tree into intermediate records.

        Raises:
            MalformedReport: If a structurally required node is missing.
        """

    @abstractmethod
    def build_report(
        self,
        extraction: ExtractionResult[CaseT],
        tool_name: str,
        environment: dict[str, str],
    ) -> Report:
        """Map intermediate records to a CTRF Report."""

    def run(
        self,
        file_path: Path | str,
        tool_name: str | None = None,
        environment: dict[str, Any] | None = None,
    ) -> Report:
        """Load, extract and map a report file.

        Args:
            file_path: Path to the source XML report
            tool_name: Name written to results.tool.name (format default if None)
            environment: Caller-supplied environment properties

        Returns:
            The converted Report

        Raises:
            FileNotFoundError: If the report file doesn't exist.
            ParseError: If the file is not well-formed XML.
            MalformedReport: If required report structure is missing.
        """
        root = self.load(file_path)
        extraction = self.extract(root)
        report = self.build_report(
            extraction,
            tool_name or self.default_tool_name,
            {str(k): str(v) for k, v in (environment or {}).items()},
        )
        logger.info(
            f"Converted {len(report.tests)} tests from {file_path} "
            f"({len(extraction.diagnostics)} diagnostics)"
        )
        return report
