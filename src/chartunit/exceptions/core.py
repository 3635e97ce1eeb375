"""
Exception classes for chartunit test execution and reporting.

This module defines specific exception types for the error conditions that
can occur while loading suites, scoping charts, and writing reports.
Execution errors raised inside a job or suite are captured into results;
only report writing propagates errors to the caller.
"""


class ChartUnitError(Exception):
    """Base exception for all chartunit errors."""

    pass


class ChartConfigurationError(ChartUnitError):
    """Raised when a suite's declared configuration does not fit its chart."""

    pass


class TemplateNotFoundError(ChartConfigurationError):
    """Raised when a suite names a template the chart does not contain."""

    def __init__(self, template_path: str):
        """
        Initialize the exception.

        Params:
            template_path: Chart-relative path of the missing template
        """
        self.template_path = template_path
        super().__init__(f"template file `{template_path}` not found in chart")


class SuiteDefinitionError(ChartUnitError):
    """Raised when a suite file cannot be read or validated."""

    def __init__(self, suite_file: str, reason: str):
        """
        Initialize the exception.

        Params:
            suite_file: Path of the suite definition file
            reason: The underlying reason for the failure
        """
        self.suite_file = suite_file
        self.reason = reason
        super().__init__(f"Cannot load test suite '{suite_file}': {reason}")


class ValuesFileError(ChartUnitError):
    """Raised when a job's values file cannot be loaded."""

    def __init__(self, values_file: str, reason: str):
        """
        Initialize the exception.

        Params:
            values_file: Path of the values file
            reason: The underlying reason for the failure
        """
        self.values_file = values_file
        self.reason = reason
        super().__init__(f"Cannot load values file '{values_file}': {reason}")


class UnknownFormatterError(ChartUnitError):
    """Raised when a report format name has no registered formatter."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown output type '{name}'. Available types: {', '.join(available)}"
        )


class ReportWriteError(ChartUnitError):
    """Raised when a report cannot be written to its output sink."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Cannot write test report: {reason}")
