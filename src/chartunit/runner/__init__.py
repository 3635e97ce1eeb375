"""
Suite and job execution.
"""

from chartunit.runner.collaborators import AssertionEvaluator, AssertionSpec, Renderer
from chartunit.runner.job import TestJob
from chartunit.runner.runner import TestRunner, write_report
from chartunit.runner.suite import TestSuite

__all__ = [
    "AssertionEvaluator",
    "AssertionSpec",
    "Renderer",
    "TestJob",
    "TestSuite",
    "TestRunner",
    "write_report",
]
