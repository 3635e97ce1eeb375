"""
Run settings for chartunit.

Settings can be created from a dict or a YAML file with partial overrides;
only the specified values replace the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from chartunit.chart.models import EngineVersion
from chartunit.chart.scoping import DEFAULT_TEMPLATE_DIR, PARTIAL_TEMPLATE_EXTENSION


@dataclass
class UnittestSettings:
    """Settings of a test run and its report.

    Examples:
        # All defaults
        settings = UnittestSettings()

        # Partial override from dict
        settings = UnittestSettings.from_dict({"output_file": "report.xml"})

        # From YAML file
        settings = UnittestSettings.from_yaml("chartunit.yaml")
    """

    # report format name, see chartunit.report.get_formatter
    output_type: str = "nunit"
    # no report is written when unset
    output_file: str | None = None
    omit_xml_declaration: bool = False
    engine_version: str = EngineVersion.V3.value
    colored: bool = True
    template_dir: str = DEFAULT_TEMPLATE_DIR
    partial_extension: str = PARTIAL_TEMPLATE_EXTENSION

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> UnittestSettings:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Keys that are not
                   settings fields are ignored.

        Returns:
            UnittestSettings instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> UnittestSettings:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing settings

        Returns:
            UnittestSettings instance with YAML overrides

        Example YAML:
            output_type: nunit
            output_file: test-results.xml
            engine_version: "2"
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)

    @property
    def engine(self) -> EngineVersion:
        """Engine version as an enum member.

        Raises:
            ValueError: If ``engine_version`` names no supported version
        """
        return EngineVersion(str(self.engine_version))
