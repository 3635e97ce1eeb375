"""
chartunit exception classes.

This package provides all exception types used throughout chartunit for
consistent error handling and reporting.
"""

from chartunit.exceptions.core import (
    ChartConfigurationError,
    ChartUnitError,
    ReportWriteError,
    SuiteDefinitionError,
    TemplateNotFoundError,
    UnknownFormatterError,
    ValuesFileError,
)

__all__ = [
    "ChartUnitError",
    "ChartConfigurationError",
    "TemplateNotFoundError",
    "SuiteDefinitionError",
    "ValuesFileError",
    "UnknownFormatterError",
    "ReportWriteError",
]
