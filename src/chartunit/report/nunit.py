"""
NUnit 2.5 XML report.

Follows the result format described at
https://github.com/nunit/docs/wiki/XML-Formats so that CI servers which
understand NUnit reports can display chart test results.
"""

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import BinaryIO

from chartunit.exceptions import ReportWriteError
from chartunit.report.environment import EnvironmentInfo
from chartunit.report.formatter import Formatter
from chartunit.report.formatting import (
    format_bool,
    format_date,
    format_duration,
    format_time,
)
from chartunit.results.aggregation import count_outcomes
from chartunit.results.diagnostics import stringify_job
from chartunit.results.models import TestJobResult, TestSuiteResult

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

REPORT_NAME = "Helm-Unittest"
NUNIT_VERSION = "2.5.8.0"
CLR_VERSION = "unknown"
OS_VERSION = "unknown"
TEST_FIXTURE = "TestFixture"

FAILED_MESSAGE = "Failed"
ERROR_MESSAGE = "Error"

REPLACEMENT_CHARACTER = "\ufffd"

# characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def format_result(passed: bool) -> str:
    return "Success" if passed else "Failed"


def class_name(suite_display_name: str) -> str:
    """Last ``/``-separated segment of a suite name."""
    return suite_display_name.rsplit("/", 1)[-1]


def sanitize_xml_text(text: str) -> str:
    """Replace characters XML 1.0 cannot represent with U+FFFD."""
    return _INVALID_XML_CHARS.sub(REPLACEMENT_CHARACTER, text)


def _element(tag: str, attrib: dict[str, str]) -> ET.Element:
    return ET.Element(tag, {k: sanitize_xml_text(v) for k, v in attrib.items()})


def _sub_element(
    parent: ET.Element, tag: str, attrib: dict[str, str] | None = None
) -> ET.Element:
    element = _element(tag, attrib or {})
    parent.append(element)
    return element


def _failure_element(parent: ET.Element, message: str, stack_trace: str) -> None:
    failure = _sub_element(parent, "failure")
    _sub_element(failure, "message").text = sanitize_xml_text(message)
    _sub_element(failure, "stack-trace").text = sanitize_xml_text(stack_trace)


class NUnitReportXML(Formatter):
    """
    Writes suite results as an NUnit ``test-results`` document.

    Params:
        environment: Host details for the report; detected when omitted
        clock: Source of the report timestamp; local time when omitted
    """

    def __init__(
        self,
        environment: EnvironmentInfo | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._environment = environment
        self._clock = clock or datetime.now

    def build_document(self, suite_results: Sequence[TestSuiteResult]) -> ET.Element:
        """Build the ``test-results`` element tree for a run."""
        now = self._clock()
        environment = self._environment or EnvironmentInfo.detect()
        summary = count_outcomes(suite_results)

        root = _element(
            "test-results",
            {
                "name": REPORT_NAME,
                "total": str(summary.total),
                "errors": str(summary.errors),
                "failures": str(summary.failures),
                "inconclusive": "0",
                "not-run": "0",
                "ignored": "0",
                "skipped": "0",
                "invalid": "0",
                "date": format_date(now),
                "time": format_time(now),
            },
        )
        _sub_element(
            root,
            "environment",
            {
                "nunit-version": NUNIT_VERSION,
                "clr-version": CLR_VERSION,
                "os-version": OS_VERSION,
                "platform": environment.platform,
                "cwd": environment.cwd,
                "machine-name": environment.machine_name,
                "user": environment.user,
                "user-domain": environment.user_domain,
            },
        )
        _sub_element(
            root,
            "culture-info",
            {
                "current-culture": environment.current_culture,
                "current-uiculture": environment.current_ui_culture,
            },
        )
        for suite_result in suite_results:
            root.append(self._suite_element(suite_result))
        return root

    def _suite_element(self, suite_result: TestSuiteResult) -> ET.Element:
        suite = _element(
            "test-suite",
            {
                "type": TEST_FIXTURE,
                "name": suite_result.display_name,
                "description": suite_result.file_path,
                "success": format_bool(suite_result.passed),
                "time": format_duration(suite_result.duration),
                "executed": format_bool(suite_result.exec_error is None),
                "asserts": "",
                "result": format_result(suite_result.passed),
            },
        )

        if suite_result.exec_error is not None:
            _failure_element(suite, ERROR_MESSAGE, str(suite_result.exec_error))
            return suite

        if suite_result.jobs:
            results = _sub_element(suite, "results")
            suite_class_name = class_name(suite_result.display_name)
            for job in suite_result.jobs:
                results.append(self._case_element(job, suite_class_name))
        return suite

    def _case_element(self, job: TestJobResult, suite_class_name: str) -> ET.Element:
        case = _element(
            "test-case",
            {
                "name": job.display_name,
                "description": f"{suite_class_name}.{job.display_name}",
                "success": format_bool(job.passed),
                "time": format_duration(job.duration),
                "executed": format_bool(job.exec_error is None),
                "asserts": "0",
                "result": format_result(job.passed),
            },
        )
        if not job.passed:
            message = ERROR_MESSAGE if job.exec_error is not None else FAILED_MESSAGE
            _failure_element(case, message, stringify_job(job))
        return case

    def render(
        self, suite_results: Sequence[TestSuiteResult], omit_xml_declaration: bool
    ) -> bytes:
        """Serialize the report, indented with tabs and ending in a newline."""
        root = self.build_document(suite_results)
        ET.indent(root, space="\t")
        body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
        header = "" if omit_xml_declaration else XML_DECLARATION
        return f"{header}{body}\n".encode("utf-8")

    def write_test_output(
        self,
        suite_results: Sequence[TestSuiteResult],
        omit_xml_declaration: bool,
        sink: BinaryIO,
    ) -> None:
        document = self.render(suite_results, omit_xml_declaration)
        try:
            sink.write(document)
            sink.flush()
        except OSError as e:
            raise ReportWriteError(str(e)) from e
        logger.debug("Wrote NUnit report for %d suites", len(suite_results))
