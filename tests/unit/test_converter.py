# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""End-to-end tests for the conversion entry points."""

import json
from pathlib import Path

import pytest

from ctrf_converter.converter import (
    convert_junit_to_ctrf,
    convert_testng_to_ctrf,
    resolve_output_path,
    write_report,
)
from ctrf_converter.core.diagnostics import DiagnosticSink
from ctrf_converter.core.errors import MalformedReport, ParseError
from ctrf_converter.core.models import Report, Summary


class TestConvertTestNG:
    def test_scenario_summary_and_tests(self, testng_xml: Path, tmp_path: Path) -> None:
        """total=5 passed=3 failed=1 skipped=1 ignored=0 with 5 real methods."""
        output = tmp_path / "out" / "report.json"

        report, written = convert_testng_to_ctrf(testng_xml, output)

        assert written == output.resolve()
        data = json.loads(output.read_text())["results"]
        assert data["tool"] == {"name": "TestNG"}
        summary = data["summary"]
        assert summary["tests"] == 5
        assert summary["passed"] == 3
        assert summary["failed"] == 1
        assert summary["skipped"] == 1
        assert summary["other"] == 0
        assert summary["pending"] == 0
        assert summary["start"] == 1704103200000
        assert summary["stop"] == 1704103500000
        assert len(data["tests"]) == 5
        assert "environment" not in data
        assert report.summary.tests == 5

    def test_failed_test_has_message_and_trace(self, testng_xml: Path, tmp_path: Path) -> None:
        convert_testng_to_ctrf(testng_xml, tmp_path / "r.json")

        tests = json.loads((tmp_path / "r.json").read_text())["results"]["tests"]
        failed = [t for t in tests if t["status"] == "failed"]
        assert len(failed) == 1
        assert failed[0]["name"] == "Login: invalidLogin"
        assert failed[0]["duration"] == 80
        assert failed[0]["message"] == "expected [true] but found [false]"
        assert "Assert.java:99" in failed[0]["trace"]
        assert all("message" not in t for t in tests if t["status"] != "failed")

    def test_tool_name_and_environment(self, testng_xml: Path, tmp_path: Path) -> None:
        report, written = convert_testng_to_ctrf(
            testng_xml,
            tmp_path / "r.json",
            tool_name="MyTool",
            env_props=["os=linux", "build=42"],
        )

        data = json.loads(written.read_text())["results"]
        assert data["tool"]["name"] == "MyTool"
        assert data["environment"] == {"os": "linux", "build": "42"}

    def test_missing_root_rejects_without_writing(self, xml_file, tmp_path: Path) -> None:
        path = xml_file("<results><suite/></results>")
        output = tmp_path / "never" / "report.json"

        with pytest.raises(MalformedReport, match="testng-results"):
            convert_testng_to_ctrf(path, output)

        assert not output.exists()
        assert not output.parent.exists()

    def test_malformed_xml_rejects(self, xml_file, tmp_path: Path) -> None:
        output = tmp_path / "report.json"

        with pytest.raises(ParseError):
            convert_testng_to_ctrf(xml_file("<testng-results>"), output)

        assert not output.exists()

    def test_missing_input_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            convert_testng_to_ctrf(tmp_path / "missing.xml", tmp_path / "r.json")

    def test_diagnostics_collected_in_sink(self, xml_file, tmp_path: Path) -> None:
        path = xml_file(
            """<testng-results total="1" passed="1" failed="0" skipped="0" ignored="0">
  <suite name="S" started-at="garbage" finished-at="2024-01-01T10:00:00Z">
    <test name="T"><class name="C"><test-method status="PASS" name="m" duration-ms="1"/></class></test>
  </suite>
</testng-results>"""
        )
        sink = DiagnosticSink()

        report, _ = convert_testng_to_ctrf(path, tmp_path / "r.json", sink=sink)

        assert report.summary.start == 0
        assert [d.message for d in sink.errors] == ["Failed to parse date: garbage"]


class TestConvertJUnit:
    def test_nested_suite_scenario(self, xml_file, tmp_path: Path) -> None:
        """Nested suite under "Suite A" with one pass and one failure."""
        path = xml_file(
            """<testsuites>
  <testsuite name="Suite A">
    <testsuite name="Inner">
      <testcase classname="x" name="ok" time="0.25"/>
      <testcase classname="x" name="ko" time="1.234"><failure>boom</failure></testcase>
    </testsuite>
  </testsuite>
</testsuites>"""
        )

        report, written = convert_junit_to_ctrf(path, tmp_path / "r.json")

        data = json.loads(written.read_text())["results"]
        assert data["tool"] == {"name": "junit-to-ctrf"}
        assert [t["name"] for t in data["tests"]] == ["Suite A: ok", "Suite A: ko"]
        assert data["tests"][1] == {
            "name": "Suite A: ko",
            "status": "failed",
            "duration": 1234,
            "message": "boom",
        }
        summary = data["summary"]
        assert summary["tests"] == 2
        assert summary["passed"] == 1
        assert summary["failed"] == 1
        assert summary["start"] == 0
        assert summary["stop"] == 0

    def test_full_report(self, junit_xml: Path, tmp_path: Path) -> None:
        report, _ = convert_junit_to_ctrf(junit_xml, tmp_path / "r.json")

        assert report.summary == Summary(
            tests=5, passed=2, failed=2, pending=0, skipped=1, other=0, start=0, stop=0
        )
        assert [t.duration for t in report.tests] == [1234, 500, 0, 11, 2000]

    def test_missing_testsuites_rejects(self, xml_file, tmp_path: Path) -> None:
        output = tmp_path / "r.json"

        with pytest.raises(MalformedReport, match="missing testsuites"):
            convert_junit_to_ctrf(xml_file("<testng-results/>"), output)

        assert not output.exists()


class TestWriteReport:
    def test_default_output_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        written = write_report(Report(tool_name="x", summary=Summary()))

        assert written == tmp_path.resolve() / "ctrf" / "ctrf-report.json"
        assert written.is_file()

    def test_pretty_printed_two_spaces(self, tmp_path: Path) -> None:
        written = write_report(Report(tool_name="x", summary=Summary()), tmp_path / "r.json")

        text = written.read_text()
        assert text.startswith('{\n  "results": {\n    "tool": {')
        assert text.endswith("}\n")

    def test_resolve_relative_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        assert resolve_output_path("out/r.json") == tmp_path.resolve() / "out" / "r.json"
