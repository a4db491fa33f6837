"""Core subpackage for shared types, utilities, and exceptions."""

from heliocron.api.core.utils import (
    calculate_julian_date,
    format_duration,
    format_utc_offset,
)


__all__ = [
    "calculate_julian_date",
    "format_duration",
    "format_utc_offset",
]
