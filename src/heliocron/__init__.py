"""
heliocron

Sunrise, sunset, twilight and solar noon times for any date and place,
and the Sun's elevation and azimuth at any instant.

Times come from the NOAA solar calculator equations. Days on which the Sun
never crosses a threshold (polar day, polar night) give an absent event
time rather than an error.

Example:
    >>> from datetime import datetime, timedelta, timezone
    >>> from heliocron import Coordinates, EventName, EVENTS, SolarCalculations
    >>> coords = Coordinates.from_degrees(51.4769, -0.0005)
    >>> bst = timezone(timedelta(hours=1))
    >>> calcs = SolarCalculations(datetime(2022, 6, 21, 12, tzinfo=bst), coords)
    >>> calcs.event_time(EVENTS[EventName.SUNRISE]).time().hour
    4
    >>> calcs.day_part()
    <DayPart.DAY: 'Day'>
"""

# Solar calculations
from heliocron.api.astronomy.day_part import DayPart
from heliocron.api.astronomy.events import EVENTS, event_for_name, resolve_event_time
from heliocron.api.astronomy.solar_position import SolarCalculations

# Enums
from heliocron.api.core.enums import Direction, EventName, VariableElevationEvent

# Exceptions
from heliocron.api.core.exceptions import (
    ConfigurationError,
    HeliocronError,
    InvalidAltitudeError,
    InvalidConfigurationError,
    InvalidCoordinateError,
    ValidationError,
)

# Type definitions
from heliocron.api.core.types import (
    Altitude,
    Coordinates,
    EventTime,
    FixedElevationEvent,
    Latitude,
    Longitude,
)

# Reports
from heliocron.api.reports import PollReport, SolarReport


__version__ = "0.1.0"

__all__ = [
    "EVENTS",
    "Altitude",
    "ConfigurationError",
    "Coordinates",
    "DayPart",
    # Enums
    "Direction",
    "EventName",
    "EventTime",
    "FixedElevationEvent",
    # Exceptions
    "HeliocronError",
    "InvalidAltitudeError",
    "InvalidConfigurationError",
    "InvalidCoordinateError",
    # Type definitions
    "Latitude",
    "Longitude",
    "PollReport",
    # Solar calculations
    "SolarCalculations",
    # Reports
    "SolarReport",
    "ValidationError",
    "VariableElevationEvent",
    "event_for_name",
    "resolve_event_time",
]
