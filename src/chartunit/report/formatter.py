"""
Report formatter interface.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import BinaryIO

from chartunit.results.models import TestSuiteResult


class Formatter(ABC):
    """Renders the results of a run into a report document."""

    @abstractmethod
    def write_test_output(
        self,
        suite_results: Sequence[TestSuiteResult],
        omit_xml_declaration: bool,
        sink: BinaryIO,
    ) -> None:
        """
        Write the report for ``suite_results`` to ``sink``.

        Params:
            suite_results: Suite results in run order
            omit_xml_declaration: Leave out the leading XML declaration line
            sink: Binary destination, written and flushed once

        Raises:
            ReportWriteError: If the sink cannot be written
        """
        pass
