"""
Utility functions for heliocron time conversions and formatting.

Julian dates come from Astropy's time scales; the remaining helpers work
on fixed UTC offsets with the standard library.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from astropy.time import Time

from heliocron.api.core.constants import J2000_JULIAN_DAY, JULIAN_DAYS_PER_CENTURY


__all__ = [
    "calculate_julian_century",
    "calculate_julian_date",
    "fixed_offset",
    "format_duration",
    "format_utc_offset",
    "start_of_civil_day",
]


def calculate_julian_date(dt: datetime) -> float:
    """
    Calculate Julian Date from datetime.

    Args:
        dt: Timezone-aware datetime object

    Returns:
        Fractional Julian Date (UTC scale)
    """
    time = Time(dt.astimezone(UTC), scale="utc")
    return float(time.jd)


def calculate_julian_century(julian_date: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (julian_date - J2000_JULIAN_DAY) / JULIAN_DAYS_PER_CENTURY


def fixed_offset(dt: datetime) -> timezone:
    """
    Return the UTC offset of an aware datetime as a fixed-offset tzinfo.

    Named zones (``ZoneInfo``) are pinned to the offset in force at ``dt``.
    """
    offset = dt.utcoffset()
    if offset is None:
        raise ValueError(f"Datetime must be timezone-aware, got {dt!r}")
    if isinstance(dt.tzinfo, timezone):
        return dt.tzinfo
    return timezone(offset)


def start_of_civil_day(dt: datetime) -> datetime:
    """Midnight at the start of ``dt``'s civil date, in ``dt``'s fixed offset."""
    tz = fixed_offset(dt)
    local = dt.astimezone(tz)
    return datetime(local.year, local.month, local.day, tzinfo=tz)


def format_duration(duration: timedelta) -> str:
    """
    Format a duration as ``HH:MM:SS``.

    Negative durations are prefixed with ``-``. Fractions of a second are
    truncated.

    Args:
        duration: Duration to format

    Returns:
        Formatted string (e.g., "16:38:05")
    """
    total = int(duration.total_seconds())
    sign = "-" if total < 0 else ""
    total = abs(total)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_utc_offset(tz: timezone) -> str:
    """Format a fixed offset as ``[+|-]HH:MM``."""
    offset = tz.utcoffset(None)
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"
