# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""TestNG conversion pipeline."""

from lxml import etree as ET

from ctrf_converter.core.constants import DEFAULT_TESTNG_TOOL_NAME
from ctrf_converter.core.models import IntermediateTestCase, Report, SuiteSummary
from ctrf_converter.core.pipeline import ExtractionResult, ReportPipeline
from ctrf_converter.testng import mapper
from ctrf_converter.testng.extractor import TestNGExtractor


class TestNGPipeline(ReportPipeline[IntermediateTestCase]):
    """Convert testng-results.xml files to CTRF."""

    __test__ = False

    default_tool_name = DEFAULT_TESTNG_TOOL_NAME

    def extract(self, root: ET._Element) -> ExtractionResult[IntermediateTestCase]:
        return TestNGExtractor(self.sink).extract(root)

    def build_report(
        self,
        extraction: ExtractionResult[IntermediateTestCase],
        tool_name: str,
        environment: dict[str, str],
    ) -> Report:
        return mapper.build_report(
            extraction.cases,
            extraction.summary or SuiteSummary(),
            tool_name,
            environment,
        )
