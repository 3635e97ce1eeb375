"""
Tests for the NUnit XML report.

Focus Areas:
1. Document structure and attribute values
2. Counting of tests, errors and failures
3. Failure details and sink handling
"""

import io
import xml.etree.ElementTree as ET

import pytest

from chartunit.exceptions import ReportWriteError
from chartunit.report import NUnitReportXML, get_formatter
from chartunit.report.nunit import class_name, sanitize_xml_text
from chartunit.results import AssertionResult, build_job_result, build_suite_result


def failing_assertion():
    return AssertionResult(
        index=0, passed=False, assert_type="equal", fail_info=["Expected: 3", "Actual: 1"]
    )


@pytest.fixture
def two_suites():
    """Two suites of two jobs each, with one failing assertion."""
    return [
        build_suite_result(
            "charts/basic/deployment",
            "tests/deployment_test.yaml",
            jobs=[
                build_job_result(0, "renders", duration=0.1234),
                build_job_result(1, "scales", duration=0.5, assertions=[failing_assertion()]),
            ],
        ),
        build_suite_result(
            "service",
            "tests/service_test.yaml",
            jobs=[build_job_result(0, "port"), build_job_result(1, "type")],
        ),
    ]


@pytest.fixture
def formatter(environment, fixed_clock):
    return NUnitReportXML(environment=environment, clock=fixed_clock)


def write(formatter, results, omit_xml_declaration=False) -> bytes:
    sink = io.BytesIO()
    formatter.write_test_output(results, omit_xml_declaration, sink)
    return sink.getvalue()


def parse(document: bytes) -> ET.Element:
    return ET.fromstring(document)


class TestRootElement:
    """Test the test-results element and its metadata blocks."""

    def test_counts_and_fixed_attributes(self, formatter, two_suites):
        root = parse(write(formatter, two_suites))

        assert root.tag == "test-results"
        assert root.get("name") == "Helm-Unittest"
        assert root.get("total") == "4"
        assert root.get("failures") == "1"
        assert root.get("errors") == "0"
        for attribute in ("inconclusive", "not-run", "ignored", "skipped", "invalid"):
            assert root.get(attribute) == "0"
        assert root.get("date") == "2024-03-05"
        assert root.get("time") == "07:08:09"

    def test_attribute_order(self, formatter, two_suites):
        assert list(parse(write(formatter, two_suites)).attrib) == [
            "name",
            "total",
            "errors",
            "failures",
            "inconclusive",
            "not-run",
            "ignored",
            "skipped",
            "invalid",
            "date",
            "time",
        ]

    def test_environment_and_culture(self, formatter, two_suites):
        root = parse(write(formatter, two_suites))
        environment = root.find("environment")
        culture = root.find("culture-info")

        assert environment.attrib == {
            "nunit-version": "2.5.8.0",
            "clr-version": "unknown",
            "os-version": "unknown",
            "platform": "python3.12.0.linux-x86_64",
            "cwd": "/work",
            "machine-name": "ci-runner",
            "user": "builder",
            "user-domain": "CORP",
        }
        assert culture.attrib == {"current-culture": "en", "current-uiculture": "en-US"}

    def test_declaration_and_indentation(self, formatter, two_suites):
        text = write(formatter, two_suites).decode("utf-8")
        lines = text.split("\n")

        assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
        assert lines[1].startswith("<test-results ")
        assert lines[2].startswith("\t<environment ")
        assert "</environment>" in lines[2]
        assert text.endswith("</test-results>\n")

    def test_declaration_can_be_omitted(self, formatter, two_suites):
        text = write(formatter, two_suites, omit_xml_declaration=True).decode("utf-8")
        assert text.startswith("<test-results ")


class TestSuiteElements:
    """Test test-suite and test-case elements."""

    def test_suite_attributes(self, formatter, two_suites):
        suite = parse(write(formatter, two_suites)).findall("test-suite")[0]

        assert suite.attrib == {
            "type": "TestFixture",
            "name": "charts/basic/deployment",
            "description": "tests/deployment_test.yaml",
            "success": "false",
            "time": "0.623",
            "executed": "true",
            "asserts": "",
            "result": "Failed",
        }

    def test_case_attributes(self, formatter, two_suites):
        cases = parse(write(formatter, two_suites)).findall("test-suite/results/test-case")

        assert len(cases) == 4
        assert cases[0].attrib == {
            "name": "renders",
            "description": "deployment.renders",
            "success": "true",
            "time": "0.123",
            "executed": "true",
            "asserts": "0",
            "result": "Success",
        }
        assert cases[2].get("description") == "service.port"

    def test_only_failing_case_has_failure(self, formatter, two_suites):
        cases = parse(write(formatter, two_suites)).findall("test-suite/results/test-case")
        failures = [case.find("failure") for case in cases]

        assert [f is not None for f in failures] == [False, True, False, False]
        assert failures[1].findtext("message") == "Failed"
        assert failures[1].findtext("stack-trace") == (
            "\t\t - asserts[0] `equal` fail \n"
            "\t\t\t Expected: 3 \n"
            "\t\t\t Actual: 1 \n"
        )

    def test_job_exec_error(self, formatter):
        results = [
            build_suite_result(
                "suite",
                "suite.yaml",
                jobs=[build_job_result(0, "broken", exec_error=RuntimeError("render failed"))],
            )
        ]
        root = parse(write(formatter, results))
        case = root.find("test-suite/results/test-case")

        assert (root.get("errors"), root.get("failures"), root.get("total")) == ("1", "0", "1")
        assert case.get("executed") == "false"
        assert case.findtext("failure/message") == "Error"
        assert "render failed" in case.findtext("failure/stack-trace")

    def test_suite_exec_error(self, formatter, two_suites):
        broken = build_suite_result(
            "broken", "broken.yaml", exec_error=RuntimeError("template file `templates/x.yaml` not found in chart")
        )
        root = parse(write(formatter, [broken] + two_suites))
        suite = root.findall("test-suite")[0]

        assert root.get("total") == "5"
        assert root.get("errors") == "1"
        assert suite.get("executed") == "false"
        assert suite.get("time") == "0.000"
        assert len(suite.findall("failure")) == 1
        assert suite.findtext("failure/message") == "Error"
        assert suite.findtext("failure/stack-trace") == (
            "template file `templates/x.yaml` not found in chart"
        )
        assert suite.find("results") is None

    def test_suite_without_jobs_has_no_results(self, formatter):
        root = parse(write(formatter, [build_suite_result("empty", "empty.yaml")]))
        assert root.find("test-suite/results") is None
        assert root.get("total") == "0"


class TestOutput:
    """Test determinism and sink handling."""

    def test_same_input_same_bytes(self, formatter, two_suites):
        assert write(formatter, two_suites) == write(formatter, two_suites)

    def test_write_error_is_raised(self, formatter, two_suites):
        class BrokenSink(io.BytesIO):
            def write(self, data):
                raise OSError("disk full")

        with pytest.raises(ReportWriteError) as exc_info:
            formatter.write_test_output(two_suites, False, BrokenSink())
        assert "disk full" in str(exc_info.value)

    def test_single_write(self, formatter, two_suites):
        class RecordingSink(io.BytesIO):
            writes = 0
            flushes = 0

            def write(self, data):
                self.writes += 1
                return super().write(data)

            def flush(self):
                self.flushes += 1

        sink = RecordingSink()
        formatter.write_test_output(two_suites, False, sink)
        assert (sink.writes, sink.flushes) == (1, 1)

    def test_class_name(self):
        assert class_name("charts/basic/deployment") == "deployment"
        assert class_name("deployment") == "deployment"


class TestRegistry:
    """Test formatter lookup by name."""

    def test_nunit_registered(self, environment):
        formatter = get_formatter("NUnit", environment=environment)
        assert isinstance(formatter, NUnitReportXML)

    def test_unknown_formatter(self):
        from chartunit.exceptions import UnknownFormatterError

        with pytest.raises(UnknownFormatterError) as exc_info:
            get_formatter("junit")
        assert "nunit" in str(exc_info.value)


class TestInvalidCharacters:
    """Test that text XML cannot represent is replaced."""

    def test_escape_sequences_in_fail_info(self, formatter):
        colored = AssertionResult(
            index=0,
            passed=False,
            assert_type="matchSnapshot",
            fail_info=["\x1b[31m- replicas: 1\x1b[0m"],
        )
        results = [
            build_suite_result(
                "snapshots", "snap.yaml", jobs=[build_job_result(0, "diff", assertions=[colored])]
            )
        ]

        root = parse(write(formatter, results))
        stack_trace = root.findtext("test-suite/results/test-case/failure/stack-trace")

        assert "\x1b" not in stack_trace
        assert "\ufffd[31m- replicas: 1\ufffd[0m" in stack_trace

    def test_control_characters_in_names_and_errors(self, formatter):
        results = [
            build_suite_result("bad\x00name", "s.yaml", exec_error=RuntimeError("oops\x07")),
        ]
        suite = parse(write(formatter, results)).find("test-suite")

        assert suite.get("name") == "bad\ufffdname"
        assert suite.findtext("failure/stack-trace") == "oops\ufffd"

    def test_sanitize_keeps_valid_text(self):
        text = "tab\tnewline\nüñï €"
        assert sanitize_xml_text(text) == text
        assert sanitize_xml_text("\x0b\x1f\ufffe") == "\ufffd" * 3
