"""
CLI Argument Parsers

Typer parser callbacks for the global options. Coordinate validation is
delegated to the core value types so the command line and the config file
accept exactly the same ranges.
"""

import re
from datetime import date, datetime, timedelta, timezone

import typer

from heliocron.api.core.exceptions import ValidationError
from heliocron.api.core.types import Latitude, Longitude


__all__ = [
    "parse_date",
    "parse_latitude",
    "parse_longitude",
    "parse_time_zone",
]

_TIME_ZONE_PATTERN = re.compile(r"^(?P<sign>[+-])(?P<hours>\d{2}):(?P<minutes>\d{2})$")


def parse_date(value: str) -> date:
    """Parse a ``yyyy-mm-dd`` date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid date - must be in the format 'yyyy-mm-dd'. Found '{value}'") from None


def parse_time_zone(value: str) -> timezone:
    """Parse a fixed UTC offset in the form ``[+|-]HH:MM``."""
    match = _TIME_ZONE_PATTERN.match(value.strip())
    if match is not None:
        hours = int(match["hours"])
        minutes = int(match["minutes"])
        if hours <= 23 and minutes <= 59:
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(-offset if match["sign"] == "-" else offset)
    raise typer.BadParameter(
        f"Invalid time zone - expected the format '[+|-]HH:MM' between '-23:59' and '+23:59'. Found '{value}'"
    )


def parse_latitude(value: str) -> Latitude:
    try:
        return Latitude.parse(value)
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from None


def parse_longitude(value: str) -> Longitude:
    try:
        return Longitude.parse(value)
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from None
