"""
Chart models and template scoping.

This package provides the per-engine-version chart records and the scoping
algorithm shared by both.
"""

from chartunit.chart.models import (
    ChartPackage,
    EngineVersion,
    V2Chart,
    V2Template,
    V3Chart,
    V3File,
)
from chartunit.chart.scoping import (
    DEFAULT_TEMPLATE_DIR,
    PARTIAL_TEMPLATE_EXTENSION,
    prepare_chart,
)

__all__ = [
    "ChartPackage",
    "EngineVersion",
    "V2Chart",
    "V2Template",
    "V3Chart",
    "V3File",
    "DEFAULT_TEMPLATE_DIR",
    "PARTIAL_TEMPLATE_EXTENSION",
    "prepare_chart",
]
