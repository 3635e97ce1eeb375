"""
Core chartunit components.

This package provides route handling, value map construction and shared
type definitions.
"""

from chartunit.core.routes import (
    ROUTE_SEPARATOR,
    is_root_route,
    is_valid_route,
    scope_values_with_routes,
    split_chart_routes,
)
from chartunit.core.types import AssertionDefinition, RenderedDocuments, Values
from chartunit.core.values import (
    build_job_values,
    expand_dotted_key,
    load_values_file,
    merge_values,
)

__all__ = [
    "ROUTE_SEPARATOR",
    "is_root_route",
    "is_valid_route",
    "split_chart_routes",
    "scope_values_with_routes",
    "Values",
    "RenderedDocuments",
    "AssertionDefinition",
    "merge_values",
    "expand_dotted_key",
    "load_values_file",
    "build_job_values",
]
