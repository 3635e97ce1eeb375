"""
Report formatters for test results.
"""

from chartunit.report.environment import EnvironmentInfo
from chartunit.report.formatter import Formatter
from chartunit.report.formatting import format_date, format_duration, format_time
from chartunit.report.nunit import NUnitReportXML
from chartunit.report.registry import FORMATTERS, get_formatter

__all__ = [
    "EnvironmentInfo",
    "Formatter",
    "NUnitReportXML",
    "FORMATTERS",
    "get_formatter",
    "format_date",
    "format_time",
    "format_duration",
]
