# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""JUnit conversion pipeline."""

from lxml import etree as ET

from ctrf_converter.core.constants import DEFAULT_JUNIT_TOOL_NAME
from ctrf_converter.core.models import Report
from ctrf_converter.core.pipeline import ExtractionResult, ReportPipeline
from ctrf_converter.junit import mapper
from ctrf_converter.junit.extractor import JUnitExtractor, JUnitTestCase


class JUnitPipeline(ReportPipeline[JUnitTestCase]):
    """Convert JUnit XML files to CTRF."""

    default_tool_name = DEFAULT_JUNIT_TOOL_NAME

    def extract(self, root: ET._Element) -> ExtractionResult[JUnitTestCase]:
        return JUnitExtractor(self.sink).extract(root)

    def build_report(
        self,
        extraction: ExtractionResult[JUnitTestCase],
        tool_name: str,
        environment: dict[str, str],
    ) -> Report:
        return mapper.build_report(extraction.cases, tool_name, environment, self.sink)
