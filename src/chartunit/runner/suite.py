"""
Test suite definition, loading and execution.

A suite targets one chart in the dependency tree, optionally pins the
templates under test, and runs its jobs in declaration order.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from chartunit.chart.models import ChartPackage, EngineVersion
from chartunit.chart.scoping import (
    DEFAULT_TEMPLATE_DIR,
    PARTIAL_TEMPLATE_EXTENSION,
    prepare_chart,
)
from chartunit.core.routes import is_valid_route
from chartunit.exceptions import ChartConfigurationError, SuiteDefinitionError
from chartunit.results.aggregation import build_suite_result
from chartunit.results.models import TestSuiteResult
from chartunit.results.snapshot import SnapshotCache
from chartunit.runner.collaborators import AssertionEvaluator, Renderer
from chartunit.runner.job import TestJob

logger = logging.getLogger(__name__)


class TestSuite(BaseModel):
    """
    Scope, templates and jobs of one suite file.

    Params:
        name: Display name (``suite`` key in the file)
        templates: Templates under test, relative to the chart's template directory
        tests: Jobs in declaration order
    """

    __test__ = False

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(default="", alias="suite")
    templates: list[str] = Field(default_factory=list)
    tests: list[TestJob] = Field(default_factory=list)

    # where the suite file is located, relative to the working directory
    _definition_file: str = PrivateAttr(default="")
    # which chart of the dependency tree, e.g. "parent" or "parent/charts/child"
    _chart_route: str = PrivateAttr(default="")
    _path_info_polished: bool = PrivateAttr(default=False)

    @classmethod
    def from_dict(
        cls, content: dict[str, Any], *, definition_file: str, chart_route: str
    ) -> "TestSuite":
        """
        Build a suite from its parsed file content.

        Raises:
            SuiteDefinitionError: If the content is invalid or the route does
                not name a chart
        """
        if not chart_route:
            raise SuiteDefinitionError(definition_file, "chart route must not be empty")
        if not is_valid_route(chart_route):
            raise SuiteDefinitionError(definition_file, f"invalid chart route '{chart_route}'")
        try:
            suite = cls.model_validate(content)
        except ValidationError as e:
            raise SuiteDefinitionError(definition_file, str(e)) from e
        suite._definition_file = definition_file
        suite._chart_route = chart_route
        return suite

    @classmethod
    def from_file(cls, suite_file: str | Path, chart_route: str) -> "TestSuite":
        """
        Load a suite from a YAML file.

        Params:
            suite_file: Path of the suite file
            chart_route: Route of the chart the suite belongs to

        Returns:
            Parsed suite, its definition file relative to the working directory

        Raises:
            SuiteDefinitionError: If the file cannot be read or validated
        """
        path = Path(suite_file)
        try:
            with path.open() as f:
                content = yaml.safe_load(f) or {}
            definition_file = os.path.relpath(path.resolve(), Path.cwd())
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise SuiteDefinitionError(str(path), str(e)) from e

        if not isinstance(content, dict):
            raise SuiteDefinitionError(str(path), "top level must be a mapping")
        return cls.from_dict(
            content, definition_file=definition_file, chart_route=chart_route
        )

    @property
    def definition_file(self) -> str:
        return self._definition_file

    @property
    def chart_route(self) -> str:
        return self._chart_route

    def polish_test_jobs_path_info(self) -> None:
        """Hand route, definition file and default template to every job, once."""
        if self._path_info_polished:
            return
        default_template = self.templates[0] if self.templates else None
        for test in self.tests:
            test.set_path_info(self._chart_route, self._definition_file, default_template)
        self._path_info_polished = True

    def run(
        self,
        chart: ChartPackage[Any],
        *,
        engine_version: EngineVersion,
        renderer: Renderer,
        evaluator: AssertionEvaluator,
        snapshot_cache: SnapshotCache | None = None,
        template_dir: str = DEFAULT_TEMPLATE_DIR,
        partial_extension: str = PARTIAL_TEMPLATE_EXTENSION,
    ) -> TestSuiteResult:
        """
        Run every job of this suite against the chart.

        If the declared templates cannot be found in the chart, no job runs and
        the returned result carries the error instead.

        Params:
            chart: Chart of the suite's route, of the given engine version
            engine_version: Engine version used for rendering
            renderer: Rendering collaborator
            evaluator: Assertion collaborator
            snapshot_cache: Snapshot store for this suite
            template_dir: Template directory prefix of the chart
            partial_extension: Extension of partial templates

        Returns:
            Suite result with one job result per job, in declaration order
        """
        self.polish_test_jobs_path_info()

        try:
            prepared_chart = prepare_chart(
                chart,
                self.templates,
                self._chart_route,
                template_dir=template_dir,
                partial_extension=partial_extension,
            )
        except ChartConfigurationError as e:
            logger.warning("Suite '%s' could not run: %s", self.name, e)
            return build_suite_result(self.name, self._definition_file, exec_error=e)

        job_results = [
            test.run(
                prepared_chart,
                index,
                engine_version=engine_version,
                renderer=renderer,
                evaluator=evaluator,
                snapshot_cache=snapshot_cache,
            )
            for index, test in enumerate(self.tests)
        ]
        return build_suite_result(self.name, self._definition_file, jobs=job_results)
