# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""TestNG report support."""

from ctrf_converter.testng.extractor import TestNGExtractor
from ctrf_converter.testng.pipeline import TestNGPipeline

__all__ = ["TestNGExtractor", "TestNGPipeline"]
