"""
Value map construction for test jobs.

Jobs combine any number of values files with inline ``set`` entries. Later
sources win; nested maps are merged key by key rather than replaced.
"""

import copy
from pathlib import Path
from typing import Any

import yaml

from chartunit.core.types import Values
from chartunit.exceptions import ValuesFileError


def merge_values(base: Values, override: Values) -> Values:
    """
    Deep-merge two value maps into a new map.

    Params:
        base: Lower-precedence values
        override: Higher-precedence values

    Returns:
        New map; neither input is modified
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_values(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def expand_dotted_key(key: str, value: Any) -> Values:
    """
    Turn a dotted ``set`` key into a nested map.

    Examples:
        ("image.tag", "v1") -> {"image": {"tag": "v1"}}
    """
    expanded: Any = value
    for part in reversed(key.split(".")):
        expanded = {part: expanded}
    return expanded


def load_values_file(path: Path) -> Values:
    """
    Load a YAML values file.

    Params:
        path: File to load

    Returns:
        Parsed map, empty for an empty file

    Raises:
        ValuesFileError: If the file cannot be read, parsed, or is not a map
    """
    try:
        with path.open() as f:
            content = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValuesFileError(str(path), str(e)) from e

    if not isinstance(content, dict):
        raise ValuesFileError(str(path), "top level must be a mapping")
    return content


def build_job_values(
    values_files: list[str], set_values: Values, base_dir: Path
) -> Values:
    """
    Build the values map of a single test job.

    Params:
        values_files: Values files, relative to ``base_dir`` unless absolute
        set_values: Inline values; dotted keys address nested entries
        base_dir: Directory of the suite definition file

    Returns:
        Merged values map

    Raises:
        ValuesFileError: If any values file cannot be loaded
    """
    values: Values = {}
    for values_file in values_files:
        values = merge_values(values, load_values_file(base_dir / values_file))
    for key, value in set_values.items():
        values = merge_values(values, expand_dotted_key(key, value))
    return values
