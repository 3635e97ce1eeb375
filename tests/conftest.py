"""
Shared test fixtures and collaborator fakes for the chartunit test suite.
"""

from datetime import datetime

import pytest

from chartunit.chart import V2Chart, V2Template, V3Chart, V3File
from chartunit.report import EnvironmentInfo
from chartunit.results import AssertionResult


class FakeSnapshotCache:
    """Snapshot store that only counts."""

    def __init__(self):
        self.created = 0
        self.compared = 0
        self.failed = 0

    def count_created(self) -> int:
        return self.created

    def count_compared(self) -> int:
        return self.compared

    def count_failed(self) -> int:
        return self.failed


class FakeRenderer:
    """Renders each template of the chart to the values it was given."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls = []

    def render(self, chart, values, engine_version):
        self.calls.append((chart, values, engine_version))
        if self.error is not None:
            raise self.error
        return {chart.template_name(t): values for t in chart.list_templates()}


class FakeEvaluator:
    """Evaluates assertions declared as ``{"pass": bool, "type": str, ...}``.

    ``raise`` makes evaluation fail outright; ``snapshot`` records a snapshot
    comparison on the attached cache.
    """

    def __init__(self, snapshot_cache: FakeSnapshotCache | None = None):
        self.snapshot_cache = snapshot_cache
        self.specs = []

    def evaluate(self, documents, assertion):
        self.specs.append(assertion)
        definition = assertion.definition
        if "raise" in definition:
            raise RuntimeError(definition["raise"])
        if definition.get("snapshot") and self.snapshot_cache is not None:
            self.snapshot_cache.compared += 1
        passed = definition.get("pass", True)
        return AssertionResult(
            index=assertion.index,
            passed=passed,
            assert_type=definition.get("type", "equal"),
            not_=definition.get("not", False),
            fail_info=() if passed else definition.get("info", ["Expected: 1", "Actual: 2"]),
            custom_info=definition.get("title"),
        )


@pytest.fixture
def snapshot_cache():
    return FakeSnapshotCache()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def evaluator(snapshot_cache):
    return FakeEvaluator(snapshot_cache)


@pytest.fixture
def v3_chart():
    """Chart with two renderable templates, a partial and a notes file."""
    return V3Chart(
        metadata={"name": "basic", "version": "0.1.0"},
        templates=[
            V3File("templates/deployment.yaml"),
            V3File("templates/service.yaml"),
            V3File("templates/_helpers.tpl"),
        ],
        values={"replicaCount": 1},
    )


@pytest.fixture
def v2_chart():
    return V2Chart(
        metadata={"name": "basic", "version": "0.1.0"},
        templates=[
            V2Template("templates/deployment.yaml"),
            V2Template("templates/service.yaml"),
            V2Template("templates/_helpers.tpl"),
        ],
        values_raw="replicaCount: 1\n",
    )


@pytest.fixture
def environment():
    return EnvironmentInfo(
        cwd="/work",
        machine_name="ci-runner",
        user="builder",
        user_domain="CORP",
        platform="python3.12.0.linux-x86_64",
        current_culture="en",
        current_ui_culture="en-US",
    )


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 5, 7, 8, 9)


@pytest.fixture
def failing_renderer():
    """Renderer that raises the given error on every render."""
    return lambda error: FakeRenderer(error=error)
