"""
Interfaces of the collaborators a test run depends on.

Rendering, assertion evaluation and snapshot storage live outside
chartunit. The runner only relies on the call shapes declared here.
"""

from typing import Any, Protocol

from attrs import frozen

from chartunit.chart.models import ChartPackage, EngineVersion
from chartunit.core.types import AssertionDefinition, RenderedDocuments, Values
from chartunit.results.models import AssertionResult
from chartunit.results.snapshot import SnapshotCache


@frozen
class AssertionSpec:
    """
    One assertion as handed to the evaluator.

    Params:
        index: Position of the assertion in its job
        definition: Assertion mapping as declared in the suite file
        template: Template the assertion targets, defaulting to the suite's first template
    """

    index: int
    definition: AssertionDefinition
    template: str | None = None


class Renderer(Protocol):
    def render(
        self, chart: ChartPackage[Any], values: Values, engine_version: EngineVersion
    ) -> RenderedDocuments:
        """Render a scoped chart with the given values."""
        ...


class AssertionEvaluator(Protocol):
    def evaluate(
        self, documents: RenderedDocuments, assertion: AssertionSpec
    ) -> AssertionResult:
        """Evaluate one assertion against rendered documents."""
        ...


__all__ = ["AssertionSpec", "Renderer", "AssertionEvaluator", "SnapshotCache"]
