"""
Result records produced by a test run.

Results are built bottom-up (assertion, job, suite) during a single run and
are immutable afterwards. Pass flags are computed by
``chartunit.results.aggregation``; the records only store them.
"""

from attrs import field, frozen

from chartunit.results.snapshot import SnapshotCounting


@frozen
class AssertionResult:
    """
    Outcome of one assertion within a job.

    Params:
        index: Position of the assertion in the job, in parse order
        passed: Whether the assertion held
        assert_type: Identifier of the predicate that was evaluated
        not_: Whether the assertion was declared negated
        fail_info: Diagnostic lines, only populated on failure
        custom_info: Title replacing the generated one
    """

    index: int
    passed: bool
    assert_type: str
    not_: bool = False
    fail_info: tuple[str, ...] = field(converter=tuple, factory=tuple)
    custom_info: str | None = None


@frozen
class TestJobResult:
    """
    Outcome of one job.

    ``exec_error`` is set when the job could not evaluate its assertions at
    all, as opposed to an assertion evaluating false.
    """

    __test__ = False

    index: int
    display_name: str
    passed: bool
    duration: float = 0.0
    exec_error: Exception | None = None
    assertions: tuple[AssertionResult, ...] = field(converter=tuple, factory=tuple)
    snapshot: SnapshotCounting = field(factory=SnapshotCounting)


@frozen
class TestSuiteResult:
    """
    Outcome of one suite.

    A suite that failed before any job could run carries ``exec_error`` and
    no job results.
    """

    __test__ = False

    display_name: str
    file_path: str
    passed: bool
    exec_error: Exception | None = None
    jobs: tuple[TestJobResult, ...] = field(converter=tuple, factory=tuple)
    snapshot: SnapshotCounting = field(factory=SnapshotCounting)
    duration: float = 0.0

    @jobs.validator
    def _check_jobs(self, attribute, value):
        if self.exec_error is not None and value:
            raise ValueError("a suite with an execution error cannot hold job results")
