"""Core components shared across the TestNG and JUnit pipelines."""

from ctrf_converter.core.diagnostics import Diagnostic, DiagnosticSink
from ctrf_converter.core.errors import ConversionError, MalformedReport, ParseError
from ctrf_converter.core.models import (
    CanonicalTest,
    IntermediateTestCase,
    Report,
    SuiteSummary,
    Summary,
    TestStatus,
)

__all__ = [
    # Errors
    "ConversionError",
    "ParseError",
    "MalformedReport",
    # Diagnostics
    "Diagnostic",
    "DiagnosticSink",
    # Models
    "TestStatus",
    "IntermediateTestCase",
    "SuiteSummary",
    "CanonicalTest",
    "Summary",
    "Report",
]
