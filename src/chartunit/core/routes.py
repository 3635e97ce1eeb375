"""
Chart route utilities.

A chart route locates a chart in the dependency tree the same way the chart
sits on disk, e.g. ``parent/charts/child/charts/grandchild``. Only every
second segment names a chart; the others are the fixed ``charts``
directory of the host layout.
"""

import os

from chartunit.core.types import Values

ROUTE_SEPARATOR = os.sep


def split_route_segments(route: str) -> list[str]:
    """Split a chart route into its raw path segments."""
    return route.split(ROUTE_SEPARATOR)


def is_root_route(route: str) -> bool:
    """
    Check whether a route points at the root chart.

    Params:
        route: Chart route string

    Returns:
        True when the route has at most one segment
    """
    return len(split_route_segments(route)) <= 1


def is_valid_route(route: str) -> bool:
    """
    Check whether a route names a chart.

    A valid route alternates chart names with ``charts`` directories, so it
    has an odd number of segments and none of them is empty.

    Params:
        route: Chart route string

    Returns:
        False for empty routes, routes ending on a ``charts`` directory and
        routes with empty segments such as a trailing separator
    """
    segments = split_route_segments(route)
    return len(segments) % 2 == 1 and all(segments)


def split_chart_routes(route: str) -> list[str]:
    """
    Derive the ancestor chain of chart names from a route.

    Params:
        route: Chart route string

    Returns:
        Chart names in root-to-leaf order

    Examples:
        "parent" -> ["parent"]
        "parent/charts/child/charts/grandchild" -> ["parent", "child", "grandchild"]
    """
    segments = split_route_segments(route)
    return [segments[index * 2] for index in range(len(segments) // 2 + 1)]


def scope_values_with_routes(routes: list[str], values: Values) -> Values:
    """
    Nest a flat values map under the ancestor chain of a subchart.

    A subchart rendered from the root sees its values under its parents'
    keys, so the map is wrapped under the leaf name first, then under each
    ancestor up to (but excluding) the root chart, whose values are top-level.

    Params:
        routes: Ancestor chain in root-to-leaf order
        values: Values declared by the test job

    Returns:
        Values nested under ``routes[1:]``; the input map itself for a root route

    Examples:
        (["a"], M) -> M
        (["a", "b", "c"], M) -> {"b": {"c": M}}
    """
    if len(routes) > 1:
        return scope_values_with_routes(routes[:-1], {routes[-1]: values})
    return values
