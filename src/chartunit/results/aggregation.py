"""
Bottom-up aggregation of test results.

Every function here is pure: it only reads the child results it is given
and returns new values, so calling it twice yields identical output.
"""

from collections.abc import Iterable

from attrs import frozen

from chartunit.results.models import AssertionResult, TestJobResult, TestSuiteResult
from chartunit.results.snapshot import SnapshotCounting


def job_passed(
    exec_error: Exception | None, assertions: Iterable[AssertionResult]
) -> bool:
    """A job passes when it ran and every assertion held."""
    return exec_error is None and all(a.passed for a in assertions)


def suite_passed(exec_error: Exception | None, jobs: Iterable[TestJobResult]) -> bool:
    """A suite passes when it ran and every job passed."""
    return exec_error is None and all(j.passed for j in jobs)


def sum_durations(jobs: Iterable[TestJobResult]) -> float:
    return sum((j.duration for j in jobs), 0.0)


def sum_snapshots(counts: Iterable[SnapshotCounting]) -> SnapshotCounting:
    return sum(counts, SnapshotCounting())


def build_job_result(
    index: int,
    display_name: str,
    *,
    duration: float = 0.0,
    exec_error: Exception | None = None,
    assertions: Iterable[AssertionResult] = (),
    snapshot: SnapshotCounting | None = None,
) -> TestJobResult:
    """
    Build a job result with its pass flag derived from its children.

    Params:
        index: Position of the job within its suite
        display_name: Job name shown in reports
        duration: Elapsed seconds
        exec_error: Error that prevented the job from running its assertions
        assertions: Assertion outcomes in parse order
        snapshot: Snapshot counts attributed to this job

    Returns:
        Immutable job result
    """
    assertions = tuple(assertions)
    return TestJobResult(
        index=index,
        display_name=display_name,
        passed=job_passed(exec_error, assertions),
        duration=duration,
        exec_error=exec_error,
        assertions=assertions,
        snapshot=snapshot or SnapshotCounting(),
    )


def build_suite_result(
    display_name: str,
    file_path: str,
    *,
    exec_error: Exception | None = None,
    jobs: Iterable[TestJobResult] = (),
) -> TestSuiteResult:
    """
    Build a suite result with pass flag, duration and snapshot totals
    derived from its jobs.

    Raises:
        ValueError: If both an execution error and job results are given
    """
    jobs = tuple(jobs)
    return TestSuiteResult(
        display_name=display_name,
        file_path=file_path,
        passed=suite_passed(exec_error, jobs),
        exec_error=exec_error,
        jobs=jobs,
        snapshot=sum_snapshots(j.snapshot for j in jobs),
        duration=sum_durations(jobs),
    )


@frozen
class RunSummary:
    """Totals over every suite of a run."""

    total: int = 0
    errors: int = 0
    failures: int = 0
    passed: bool = True
    snapshot: SnapshotCounting = SnapshotCounting()


def count_outcomes(suites: Iterable[TestSuiteResult]) -> RunSummary:
    """
    Count tests, errors and failures over a run.

    A suite-level execution error counts as one test and one error. Otherwise
    each job counts as one test; a failed job is an error if it could not run
    and a failure if an assertion did not hold.
    """
    total = errors = failures = 0
    passed = True
    snapshots = []
    for suite in suites:
        passed = passed and suite.passed
        snapshots.append(suite.snapshot)
        if suite.exec_error is not None:
            total += 1
            errors += 1
            continue
        for job in suite.jobs:
            total += 1
            if job.passed:
                continue
            if job.exec_error is not None:
                errors += 1
            else:
                failures += 1
    return RunSummary(
        total=total,
        errors=errors,
        failures=failures,
        passed=passed,
        snapshot=sum_snapshots(snapshots),
    )
