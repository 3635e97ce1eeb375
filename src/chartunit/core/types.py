"""
Core type definitions for chartunit.

This module contains the type aliases shared across scoping, execution and
reporting code.
"""

from typing import Any

Values = dict[str, Any]

RenderedDocuments = dict[str, Any]

AssertionDefinition = dict[str, Any]
