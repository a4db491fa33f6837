"""
Solar Event Times

Resolves the time of sunrise, sunset, the twilight boundaries, custom
elevation crossings and solar noon for the civil date of a set of solar
calculations.

Every fixed-elevation event goes through the same hour-angle inversion;
the named events are just rows in the ``EVENTS`` table.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

import deal

from heliocron.api.core.constants import (
    ASTRONOMICAL_TWILIGHT_DEGREES,
    CIVIL_TWILIGHT_DEGREES,
    DEGREES_PER_HOUR_ANGLE,
    NAUTICAL_TWILIGHT_DEGREES,
    SUNRISE_DEGREES,
)
from heliocron.api.core.enums import Direction, EventName, VariableElevationEvent
from heliocron.api.core.types import Altitude, Event, EventTime, FixedElevationEvent


if TYPE_CHECKING:
    from heliocron.api.astronomy.solar_position import SolarCalculations


logger = logging.getLogger(__name__)


__all__ = [
    "CUSTOM_EVENTS",
    "EVENTS",
    "event_for_name",
    "resolve_event_time",
    "threshold_hour_angle",
]


EVENTS: dict[EventName, Event] = {
    EventName.SUNRISE: FixedElevationEvent(Altitude(SUNRISE_DEGREES), Direction.ASCENDING),
    EventName.SUNSET: FixedElevationEvent(Altitude(SUNRISE_DEGREES), Direction.DESCENDING),
    EventName.CIVIL_DAWN: FixedElevationEvent(Altitude(CIVIL_TWILIGHT_DEGREES), Direction.ASCENDING),
    EventName.CIVIL_DUSK: FixedElevationEvent(Altitude(CIVIL_TWILIGHT_DEGREES), Direction.DESCENDING),
    EventName.NAUTICAL_DAWN: FixedElevationEvent(Altitude(NAUTICAL_TWILIGHT_DEGREES), Direction.ASCENDING),
    EventName.NAUTICAL_DUSK: FixedElevationEvent(Altitude(NAUTICAL_TWILIGHT_DEGREES), Direction.DESCENDING),
    EventName.ASTRONOMICAL_DAWN: FixedElevationEvent(Altitude(ASTRONOMICAL_TWILIGHT_DEGREES), Direction.ASCENDING),
    EventName.ASTRONOMICAL_DUSK: FixedElevationEvent(Altitude(ASTRONOMICAL_TWILIGHT_DEGREES), Direction.DESCENDING),
    EventName.SOLAR_NOON: VariableElevationEvent.SOLAR_NOON,
}
"""Named events with a threshold known in advance."""

CUSTOM_EVENTS: dict[EventName, Direction] = {
    EventName.CUSTOM_AM: Direction.ASCENDING,
    EventName.CUSTOM_PM: Direction.DESCENDING,
}
"""Named events whose threshold is supplied by the caller."""


@deal.pre(
    lambda name, altitude=None: name not in CUSTOM_EVENTS or altitude is not None,
    message="Custom events require an altitude",
)  # type: ignore[misc,arg-type]
def event_for_name(name: EventName, altitude: Altitude | None = None) -> Event:
    """
    Look up the event descriptor for a named event.

    Args:
        name: Event name
        altitude: Degrees below the horizon, required for CUSTOM_AM/CUSTOM_PM
            and ignored otherwise

    Returns:
        Fixed- or variable-elevation event descriptor
    """
    if name in CUSTOM_EVENTS:
        return FixedElevationEvent(altitude, CUSTOM_EVENTS[name])  # type: ignore[arg-type]
    return EVENTS[name]


def threshold_hour_angle(elevation: float, latitude: float, declination: float) -> float | None:
    """
    Hour angle at which the Sun reaches ``elevation``.

    Args:
        elevation: Threshold elevation in degrees (negative below the horizon)
        latitude: Observer latitude in degrees
        declination: Solar declination in degrees

    Returns:
        Hour angle in degrees (0-180), or None if the Sun stays entirely
        above or below the threshold all day
    """
    lat = math.radians(latitude)
    dec = math.radians(declination)
    denominator = math.cos(lat) * math.cos(dec)
    if denominator == 0.0:
        return None
    cos_hour_angle = (math.sin(math.radians(elevation)) - math.sin(lat) * math.sin(dec)) / denominator
    if not -1.0 <= cos_hour_angle <= 1.0:
        return None
    return math.degrees(math.acos(cos_hour_angle))


def _round_to_second(dt: datetime) -> datetime:
    return (dt + timedelta(microseconds=500_000)).replace(microsecond=0)


def resolve_event_time(event: Event, calculations: SolarCalculations) -> EventTime:
    """
    Find when ``event`` happens on the civil date of ``calculations``.

    Only the calculator's own civil date is searched; an event that falls
    on another day is not looked for.

    Args:
        event: Event descriptor
        calculations: Solar calculations for the date and place

    Returns:
        The event time, rounded to the second, or an absent EventTime if
        the event does not occur
    """
    solar_noon = calculations.solar_noon()

    match event:
        case VariableElevationEvent.SOLAR_NOON:
            return EventTime(_round_to_second(solar_noon))
        case FixedElevationEvent(direction=direction):
            hour_angle = threshold_hour_angle(
                event.elevation,
                calculations.coordinates.latitude.value,
                calculations.declination,
            )
            if hour_angle is None:
                logger.debug(
                    f"Sun does not cross {event.elevation:.3f}° on {calculations.instant.date()} "
                    f"at {calculations.coordinates}"
                )
                return EventTime(None)
            offset = timedelta(hours=hour_angle / DEGREES_PER_HOUR_ANGLE)
            when = solar_noon - offset if direction is Direction.ASCENDING else solar_noon + offset
            return EventTime(_round_to_second(when))
        case _:
            raise TypeError(f"Unsupported event: {event!r}")
