# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Shared fixtures for unit tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from lxml import etree as ET

from ctrf_converter.core.diagnostics import DiagnosticSink

TESTNG_REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<testng-results skipped="1" failed="1" ignored="0" total="5" passed="3">
  <reporter-output/>
  <suite name="Regression" started-at="2024-01-01T10:00:00Z" finished-at="2024-01-01T10:05:00Z" duration-ms="300000">
    <groups/>
    <test name="Login" started-at="2024-01-01T10:00:00Z" finished-at="2024-01-01T10:02:00Z">
      <class name="com.example.LoginTest">
        <test-method status="PASS" signature="setUp()" name="setUp" is-config="true" duration-ms="5" started-at="2024-01-01T10:00:01Z" finished-at="2024-01-01T10:00:01Z"/>
        <test-method status="PASS" signature="validLogin()" name="validLogin" duration-ms="120" started-at="2024-01-01T10:00:02Z" finished-at="2024-01-01T10:00:02Z"/>
        <test-method status="FAIL" signature="invalidLogin()" name="invalidLogin" duration-ms="80" started-at="2024-01-01T10:00:03Z" finished-at="2024-01-01T10:00:03Z">
          <exception class="java.lang.AssertionError">
            <message>
              <![CDATA[expected [true] but found [false]]]>
            </message>
            <full-stacktrace>
              <![CDATA[java.lang.AssertionError: expected [true] but found [false]
	at org.testng.Assert.fail(Assert.java:99)]]>
            </full-stacktrace>
          </exception>
        </test-method>
      </class>
    </test>
    <test name="Search" started-at="2024-01-01T10:02:00Z" finished-at="2024-01-01T10:05:00Z">
      <class name="com.example.SearchTest">
        <test-method status="PASS" signature="search()" name="search" duration-ms="200" started-at="2024-01-01T10:02:01Z" finished-at="2024-01-01T10:02:01Z"/>
        <test-method status="SKIP" signature="advancedSearch()" name="advancedSearch" duration-ms="0" started-at="2024-01-01T10:02:02Z" finished-at="2024-01-01T10:02:02Z"/>
        <test-method status="PASS" signature="pagination()" name="pagination" duration-ms="50" started-at="2024-01-01T10:02:03Z" finished-at="2024-01-01T10:02:03Z"/>
      </class>
    </test>
  </suite>
</testng-results>
"""

JUNIT_REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<testsuites name="all" tests="5">
  <testsuite name="Suite A" tests="2">
    <testsuite name="Nested" tests="2">
      <testcase classname="com.example.A" name="passes" time="1.234"/>
      <testcase classname="com.example.A" name="fails" time="0.5">
        <failure message="boom" type="AssertionError">expected 1 but was 2</failure>
      </testcase>
    </testsuite>
  </testsuite>
  <testsuite name="Suite B" tests="3">
    <testcase classname="com.example.B" name="skipped" time="0">
      <skipped/>
    </testcase>
    <testcase classname="com.example.B" name="errors" time="0.0105">
      <error type="NullPointerException">NPE at line 3</error>
    </testcase>
    <testcase classname="com.example.B" name="plain" time="2"/>
  </testsuite>
</testsuites>
"""


@pytest.fixture
def sink() -> DiagnosticSink:
    """DiagnosticSink bound to a dedicated test logger."""
    return DiagnosticSink(logging.getLogger("tests.diagnostics"))


@pytest.fixture
def xml_file(tmp_path: Path) -> Callable[..., Path]:
    """Write XML content to a file under tmp_path and return its path."""

    def _write(content: str, filename: str = "report.xml") -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def testng_xml(xml_file: Callable[..., Path]) -> Path:
    return xml_file(TESTNG_REPORT, "testng-results.xml")


@pytest.fixture
def junit_xml(xml_file: Callable[..., Path]) -> Path:
    return xml_file(JUNIT_REPORT, "junit.xml")


@pytest.fixture
def parse_xml() -> Callable[[str], ET._Element]:
    """Parse an XML string into a root element."""

    def _parse(content: str) -> ET._Element:
        return ET.fromstring(content.encode("utf-8"))

    return _parse
