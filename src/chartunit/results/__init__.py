"""
Test result records, aggregation and diagnostic text.
"""

from chartunit.results.aggregation import (
    RunSummary,
    build_job_result,
    build_suite_result,
    count_outcomes,
    job_passed,
    suite_passed,
    sum_durations,
    sum_snapshots,
)
from chartunit.results.diagnostics import (
    assertion_title,
    diagnostic_lines,
    stringify_assertion,
    stringify_job,
)
from chartunit.results.models import AssertionResult, TestJobResult, TestSuiteResult
from chartunit.results.snapshot import SnapshotCache, SnapshotCounting

__all__ = [
    "AssertionResult",
    "TestJobResult",
    "TestSuiteResult",
    "SnapshotCache",
    "SnapshotCounting",
    "RunSummary",
    "job_passed",
    "suite_passed",
    "sum_durations",
    "sum_snapshots",
    "build_job_result",
    "build_suite_result",
    "count_outcomes",
    "assertion_title",
    "diagnostic_lines",
    "stringify_assertion",
    "stringify_job",
]
