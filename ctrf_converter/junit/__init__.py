# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""JUnit XML report support."""

from ctrf_converter.junit.extractor import JUnitExtractor, JUnitTestCase
from ctrf_converter.junit.pipeline import JUnitPipeline

__all__ = ["JUnitExtractor", "JUnitPipeline", "JUnitTestCase"]
