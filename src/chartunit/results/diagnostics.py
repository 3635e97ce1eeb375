"""
Diagnostic text for failed results.

The same structure (a title line followed by indented detail lines) is
rendered for the console printer and embedded as failure text in reports.
"""

from chartunit.results.models import AssertionResult, TestJobResult


def assertion_title(result: AssertionResult) -> str:
    """
    Build the title line of a failed assertion.

    Returns:
        The custom title if set, otherwise e.g. ``- asserts[0] NOT `equal` fail``
    """
    if result.custom_info:
        return result.custom_info
    not_annotation = " NOT" if result.not_ else ""
    return f"- asserts[{result.index}]{not_annotation} `{result.assert_type}` fail"


def diagnostic_lines(result: AssertionResult) -> list[tuple[int, str]]:
    """
    Describe a failed assertion as (depth, text) pairs.

    Depth 0 is the title; detail lines sit at depth 1. Passing assertions
    produce no lines.
    """
    if result.passed:
        return []
    lines = [(0, assertion_title(result))]
    lines.extend((1, info) for info in result.fail_info)
    return lines


def stringify_assertion(result: AssertionResult) -> str:
    """Render a failed assertion in the plain-text form used by reports."""
    content = ""
    for depth, text in diagnostic_lines(result):
        content += "\t" * (depth + 2) + f" {text} \n"
    return content


def stringify_job(result: TestJobResult) -> str:
    """
    Render a job's failure details in the plain-text form used by reports.

    The execution error comes first, followed by every failed assertion.
    """
    content = ""
    if result.exec_error is not None:
        content += f"{result.exec_error}\n"
    for assertion in result.assertions:
        content += stringify_assertion(assertion)
    return content
