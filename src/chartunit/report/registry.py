"""
Lookup of report formatters by output type name.
"""

from collections.abc import Callable

from chartunit.exceptions import UnknownFormatterError
from chartunit.report.formatter import Formatter
from chartunit.report.nunit import NUnitReportXML

FORMATTERS: dict[str, Callable[..., Formatter]] = {
    "nunit": NUnitReportXML,
}


def get_formatter(output_type: str, **kwargs) -> Formatter:
    """
    Create the formatter registered for an output type.

    Params:
        output_type: Registered name, case-insensitive
        **kwargs: Passed to the formatter's constructor

    Raises:
        UnknownFormatterError: If no formatter is registered under the name
    """
    factory = FORMATTERS.get(output_type.lower())
    if factory is None:
        raise UnknownFormatterError(output_type, sorted(FORMATTERS))
    return factory(**kwargs)
