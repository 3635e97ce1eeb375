"""
chartunit - unit testing for charts of composable templates

chartunit runs test suites against rendered chart templates, aggregates the
outcomes from assertions up to suites, and writes CI-readable reports.
"""

from importlib.metadata import version

from chartunit.chart import EngineVersion, V2Chart, V3Chart, prepare_chart
from chartunit.config import UnittestSettings
from chartunit.report import NUnitReportXML, get_formatter
from chartunit.results import (
    AssertionResult,
    TestJobResult,
    TestSuiteResult,
    count_outcomes,
)
from chartunit.runner import TestJob, TestRunner, TestSuite, write_report

__version__ = version("chartunit")

__all__ = [
    "__version__",
    "EngineVersion",
    "V2Chart",
    "V3Chart",
    "prepare_chart",
    "UnittestSettings",
    "AssertionResult",
    "TestJobResult",
    "TestSuiteResult",
    "count_outcomes",
    "TestJob",
    "TestSuite",
    "TestRunner",
    "write_report",
    "NUnitReportXML",
    "get_formatter",
]
