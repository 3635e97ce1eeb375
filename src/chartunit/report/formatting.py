"""
Formatting helpers for report timestamps and durations.
"""

from datetime import datetime


def format_date(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d")


def format_time(moment: datetime) -> str:
    return moment.strftime("%H:%M:%S")


def format_duration(seconds: float) -> str:
    """Format elapsed seconds with exactly three fractional digits."""
    return f"{seconds:.3f}"


def format_bool(value: bool) -> str:
    return "true" if value else "false"
