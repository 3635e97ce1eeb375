"""
Console output of test results.
"""

import sys
from typing import TextIO

from colorama import Fore, Style, just_fix_windows_console

from chartunit.results.aggregation import RunSummary
from chartunit.results.diagnostics import diagnostic_lines
from chartunit.results.models import AssertionResult, TestJobResult, TestSuiteResult

INDENT = "  "

STYLES = {
    "danger": Fore.RED,
    "success": Fore.GREEN,
    "warning": Fore.YELLOW,
    "faint": Style.DIM,
}


class Printer:
    """
    Writes indented, optionally colored result text to a stream.

    Params:
        writer: Output stream, stdout when omitted
        colored: Whether to emit terminal color codes
    """

    def __init__(self, writer: TextIO | None = None, colored: bool = True):
        if colored:
            just_fix_windows_console()
        self.writer = writer or sys.stdout
        self.colored = colored

    def _paint(self, style: str, text: str) -> str:
        if not self.colored:
            return text
        return f"{STYLES[style]}{text}{Style.RESET_ALL}"

    def danger(self, text: str) -> str:
        return self._paint("danger", text)

    def success(self, text: str) -> str:
        return self._paint("success", text)

    def warning(self, text: str) -> str:
        return self._paint("warning", text)

    def faint(self, text: str) -> str:
        return self._paint("faint", text)

    def println(self, text: str, indent_level: int = 0) -> None:
        for line in text.split("\n"):
            self.writer.write(f"{INDENT * indent_level}{line}\n" if line else "\n")

    def print_assertion(self, result: AssertionResult) -> None:
        if result.passed:
            return
        for depth, text in diagnostic_lines(result):
            self.println(self.danger(text) if depth == 0 else text, depth + 2)
        self.println("")

    def print_job(self, result: TestJobResult) -> None:
        if result.passed:
            return
        self.println(self.danger(f"- {result.display_name}"), 1)
        self.println("")
        if result.exec_error is not None:
            self.println(self.danger("Error: ") + str(result.exec_error), 2)
            self.println("")
        for assertion in result.assertions:
            self.print_assertion(assertion)

    def print_suite(self, result: TestSuiteResult) -> None:
        label = self.success(" PASS ") if result.passed else self.danger(" FAIL ")
        self.println(f"{label} {result.display_name}\t{self.faint(result.file_path)}")
        if result.exec_error is not None:
            self.println(self.danger("- Execution Error: "), 1)
            self.println(str(result.exec_error), 2)
            self.println("")
            return
        for job in result.jobs:
            self.print_job(job)

    def print_summary(self, summary: RunSummary, suite_count: int) -> None:
        outcome = self.success("Passed") if summary.passed else self.danger("Failed")
        self.println("")
        self.println(f"Charts:      {outcome}")
        self.println(f"Test Suites: {suite_count}")
        self.println(
            f"Tests:       {summary.total} total, "
            f"{summary.failures} failed, {summary.errors} errored"
        )
        self.println(
            f"Snapshot:    {summary.snapshot.created} created, "
            f"{summary.snapshot.compared} compared, {summary.snapshot.failed} failed"
        )
