"""
Chart representations for the supported rendering engine versions.

Each engine major version models charts with its own record types. The
scoping and execution code only relies on the small ``ChartPackage``
capability protocol, implemented once per version.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any, Protocol, TypeVar

from attrs import evolve, field, frozen

TemplateT = TypeVar("TemplateT")


class EngineVersion(Enum):
    """Supported rendering engine major versions."""

    V2 = "2"
    V3 = "3"


class ChartPackage(Protocol[TemplateT]):
    """Capabilities shared by every chart representation."""

    def list_templates(self) -> Sequence[TemplateT]:
        """Return the chart's templates in declaration order."""
        ...

    def template_name(self, template: TemplateT) -> str:
        """Return the chart-relative file name of a template."""
        ...

    def with_filtered_templates(
        self, templates: Sequence[TemplateT]
    ) -> "ChartPackage[TemplateT]":
        """Return a shallow copy holding only ``templates``."""
        ...


@frozen
class V2Template:
    name: str
    data: bytes = b""


@frozen
class V2Chart:
    """
    Chart as loaded by the version 2 engine.

    Params:
        metadata: Parsed Chart.yaml content
        templates: Template files, named relative to the chart root
        dependencies: Subcharts
        values_raw: Raw values.yaml text; version 2 keeps values unparsed
        files: Non-template files bundled with the chart
    """

    metadata: dict[str, Any]
    templates: tuple[V2Template, ...] = field(converter=tuple, factory=tuple)
    dependencies: tuple["V2Chart", ...] = field(converter=tuple, factory=tuple)
    values_raw: str = ""
    files: tuple[V2Template, ...] = field(converter=tuple, factory=tuple)

    def list_templates(self) -> tuple[V2Template, ...]:
        return self.templates

    def template_name(self, template: V2Template) -> str:
        return template.name

    def with_filtered_templates(self, templates: Sequence[V2Template]) -> "V2Chart":
        return evolve(self, templates=templates)


@frozen
class V3File:
    name: str
    data: bytes = b""


@frozen
class V3Chart:
    """
    Chart as loaded by the version 3 engine.

    Params:
        metadata: Parsed Chart.yaml content
        templates: Template files, named relative to the chart root
        values: Parsed default values
        dependencies: Subcharts
        files: Non-template files bundled with the chart
        schema: Optional values JSON schema
    """

    metadata: dict[str, Any]
    templates: tuple[V3File, ...] = field(converter=tuple, factory=tuple)
    values: dict[str, Any] = field(factory=dict)
    dependencies: tuple["V3Chart", ...] = field(converter=tuple, factory=tuple)
    files: tuple[V3File, ...] = field(converter=tuple, factory=tuple)
    schema: bytes | None = None

    def list_templates(self) -> tuple[V3File, ...]:
        return self.templates

    def template_name(self, template: V3File) -> str:
        return template.name

    def with_filtered_templates(self, templates: Sequence[V3File]) -> "V3Chart":
        return evolve(self, templates=templates)
