"""
Run orchestration over many suites.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any, BinaryIO

from attrs import define, field

from chartunit.chart.models import ChartPackage
from chartunit.config import UnittestSettings
from chartunit.exceptions import ReportWriteError
from chartunit.printer import Printer
from chartunit.report.registry import get_formatter
from chartunit.results.aggregation import count_outcomes
from chartunit.results.models import TestSuiteResult
from chartunit.results.snapshot import SnapshotCache
from chartunit.runner.collaborators import AssertionEvaluator, Renderer
from chartunit.runner.suite import TestSuite

logger = logging.getLogger(__name__)


def _no_snapshot_cache(suite: TestSuite) -> SnapshotCache | None:
    return None


@define
class TestRunner:
    """
    Runs suites one after another and collects their results.

    Params:
        renderer: Rendering collaborator
        evaluator: Assertion collaborator
        settings: Run settings
        snapshot_cache_factory: Creates the snapshot store of each suite
        printer: Console printer; results are not printed when omitted
    """

    __test__ = False

    renderer: Renderer
    evaluator: AssertionEvaluator
    settings: UnittestSettings = field(factory=UnittestSettings)
    snapshot_cache_factory: Callable[[TestSuite], SnapshotCache | None] = (
        _no_snapshot_cache
    )
    printer: Printer | None = None

    def run(
        self, suites: Iterable[tuple[TestSuite, ChartPackage[Any]]]
    ) -> list[TestSuiteResult]:
        """
        Run each suite against its chart, in order.

        Params:
            suites: (suite, chart of the suite's route) pairs

        Returns:
            One result per suite, in input order
        """
        engine_version = self.settings.engine
        results = []
        for suite, chart in suites:
            logger.debug("Running suite '%s' (%s)", suite.name, suite.definition_file)
            results.append(
                suite.run(
                    chart,
                    engine_version=engine_version,
                    renderer=self.renderer,
                    evaluator=self.evaluator,
                    snapshot_cache=self.snapshot_cache_factory(suite),
                    template_dir=self.settings.template_dir,
                    partial_extension=self.settings.partial_extension,
                )
            )
            if self.printer is not None:
                self.printer.print_suite(results[-1])

        if self.printer is not None:
            self.printer.print_summary(count_outcomes(results), len(results))
        return results


def write_report(
    suite_results: Sequence[TestSuiteResult],
    settings: UnittestSettings,
    sink: BinaryIO | None = None,
    **formatter_options,
) -> None:
    """
    Write the configured report for a run.

    Writes to ``sink`` when given, otherwise to ``settings.output_file``.

    Raises:
        UnknownFormatterError: If ``settings.output_type`` is not registered
        ReportWriteError: If there is no destination or it cannot be written
    """
    formatter = get_formatter(settings.output_type, **formatter_options)
    if sink is not None:
        formatter.write_test_output(
            suite_results, settings.omit_xml_declaration, sink
        )
        return

    if not settings.output_file:
        raise ReportWriteError("no output file configured")
    try:
        with Path(settings.output_file).open("wb") as f:
            formatter.write_test_output(
                suite_results, settings.omit_xml_declaration, f
            )
    except OSError as e:
        raise ReportWriteError(str(e)) from e
    logger.debug("Wrote %s report to %s", settings.output_type, settings.output_file)
