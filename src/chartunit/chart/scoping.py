"""
Template scoping for test suites.

A suite may pin the templates it tests. The chart handed to the renderer is
then reduced to those templates plus every partial template, which any of
them may include.
"""

import logging
import posixpath
from typing import TypeVar

from chartunit.chart.models import ChartPackage
from chartunit.core.routes import is_root_route
from chartunit.exceptions import TemplateNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = "templates"
PARTIAL_TEMPLATE_EXTENSION = ".tpl"

ChartT = TypeVar("ChartT", bound=ChartPackage)


def _strip_template_dir(name: str, template_dir: str) -> str:
    prefix = f"{template_dir}/"
    return name[len(prefix) :] if name.startswith(prefix) else name


def prepare_chart(
    chart: ChartT,
    templates: list[str],
    chart_route: str,
    *,
    template_dir: str = DEFAULT_TEMPLATE_DIR,
    partial_extension: str = PARTIAL_TEMPLATE_EXTENSION,
) -> ChartT:
    """
    Restrict a chart to the templates a suite declares.

    The chart itself is never modified. The returned chart shares every field
    with the input except its template collection.

    Params:
        chart: Chart to scope, of either engine version
        templates: Template names relative to ``template_dir``; empty means all
        chart_route: Route of the chart the suite belongs to
        template_dir: Directory prefix stripped from template names before matching
        partial_extension: Extension of partial templates, always kept

    Returns:
        Scoped chart of the same type as ``chart``

    Raises:
        TemplateNotFoundError: If a requested template is not in the chart
    """
    from_root_chart = is_root_route(chart_route)

    if not templates and from_root_chart:
        return chart.with_filtered_templates(chart.list_templates())

    filtered = []
    # explicit templates only address the root chart; subchart suites keep partials only
    if from_root_chart:
        for file_name in templates:
            for template in chart.list_templates():
                template_name = chart.template_name(template)
                if _strip_template_dir(template_name, template_dir) == file_name:
                    filtered.append(template)
                    break
            else:
                raise TemplateNotFoundError(f"{template_dir}/{file_name}")

    for template in chart.list_templates():
        if template in filtered:
            continue
        if posixpath.splitext(chart.template_name(template))[1] == partial_extension:
            filtered.append(template)

    logger.debug(
        "Scoped chart route '%s' to templates %s",
        chart_route,
        [chart.template_name(t) for t in filtered],
    )
    return chart.with_filtered_templates(filtered)
