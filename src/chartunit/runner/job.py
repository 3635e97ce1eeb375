"""
Test job definition and execution.
"""

import logging
import time
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from chartunit.chart.models import ChartPackage, EngineVersion
from chartunit.core.routes import scope_values_with_routes, split_chart_routes
from chartunit.core.types import AssertionDefinition, Values
from chartunit.core.values import build_job_values
from chartunit.results.aggregation import build_job_result
from chartunit.results.models import AssertionResult, TestJobResult
from chartunit.results.snapshot import SnapshotCache, SnapshotCounting
from chartunit.runner.collaborators import AssertionEvaluator, AssertionSpec, Renderer

logger = logging.getLogger(__name__)


class TestJob(BaseModel):
    """
    One test case of a suite: values to render with and assertions to check.

    The chart route, definition file and default template are filled in by
    the owning suite before the job runs.
    """

    __test__ = False

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    it: str = ""
    values: list[str] = Field(default_factory=list)
    set_values: dict[str, Any] = Field(default_factory=dict, alias="set")
    asserts: list[AssertionDefinition] = Field(default_factory=list)

    _chart_route: str = PrivateAttr(default="")
    _definition_file: str = PrivateAttr(default="")
    _default_template: str | None = PrivateAttr(default=None)

    @property
    def chart_route(self) -> str:
        return self._chart_route

    @property
    def definition_file(self) -> str:
        return self._definition_file

    @property
    def default_template(self) -> str | None:
        return self._default_template

    def set_path_info(
        self, chart_route: str, definition_file: str, default_template: str | None
    ) -> None:
        self._chart_route = chart_route
        self._definition_file = definition_file
        self._default_template = default_template

    def build_values(self) -> Values:
        """
        Build this job's values, nested under its chart's ancestors.

        Raises:
            ValuesFileError: If a values file cannot be loaded
        """
        base_dir = Path(self._definition_file).parent
        values = build_job_values(self.values, self.set_values, base_dir)
        return scope_values_with_routes(split_chart_routes(self._chart_route), values)

    def assertion_specs(self) -> list[AssertionSpec]:
        return [
            AssertionSpec(
                index=index,
                definition=definition,
                template=definition.get("template", self._default_template),
            )
            for index, definition in enumerate(self.asserts)
        ]

    def run(
        self,
        chart: ChartPackage[Any],
        index: int,
        *,
        engine_version: EngineVersion,
        renderer: Renderer,
        evaluator: AssertionEvaluator,
        snapshot_cache: SnapshotCache | None = None,
    ) -> TestJobResult:
        """
        Render the chart and evaluate every assertion of this job.

        Failures to load values, render or evaluate are recorded as the
        result's execution error rather than raised.

        Params:
            chart: Chart already scoped to the suite's templates
            index: Position of this job within its suite
            engine_version: Engine version the chart is rendered with
            renderer: Rendering collaborator
            evaluator: Assertion collaborator
            snapshot_cache: Snapshot store of the running suite

        Returns:
            Job result with the snapshot counts observed during this job
        """
        started = time.perf_counter()
        before = SnapshotCounting.observe(snapshot_cache)
        assertions: list[AssertionResult] = []
        exec_error = None

        try:
            documents = renderer.render(chart, self.build_values(), engine_version)
            for spec in self.assertion_specs():
                assertions.append(evaluator.evaluate(documents, spec))
        except Exception as e:
            logger.warning("Test '%s' could not run: %s", self.it, e)
            exec_error = e

        return build_job_result(
            index,
            self.it,
            duration=time.perf_counter() - started,
            exec_error=exec_error,
            assertions=assertions,
            snapshot=SnapshotCounting.observe(snapshot_cache) - before,
        )
