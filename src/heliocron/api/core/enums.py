"""
Common Enums

Enumerations used throughout the heliocron API.
"""

from enum import StrEnum


__all__ = [
    "Direction",
    "EventName",
    "LocationSource",
    "VariableElevationEvent",
]


class Direction(StrEnum):
    """Direction of travel of the Sun relative to the observer's horizon."""

    ASCENDING = "ascending"  # Rising through the threshold (morning)
    DESCENDING = "descending"  # Setting through the threshold (evening)


class VariableElevationEvent(StrEnum):
    """
    Events which occur when the Sun is at a variable elevation.

    Solar noon happens at the maximum elevation of the day, which varies
    with date and location, so it cannot be described by a fixed threshold.
    """

    SOLAR_NOON = "solar_noon"


class EventName(StrEnum):
    """Named solar events supported by the API and the command line."""

    SUNRISE = "sunrise"
    SUNSET = "sunset"
    CIVIL_DAWN = "civil_dawn"
    CIVIL_DUSK = "civil_dusk"
    NAUTICAL_DAWN = "nautical_dawn"
    NAUTICAL_DUSK = "nautical_dusk"
    ASTRONOMICAL_DAWN = "astronomical_dawn"
    ASTRONOMICAL_DUSK = "astronomical_dusk"
    CUSTOM_AM = "custom_am"
    CUSTOM_PM = "custom_pm"
    SOLAR_NOON = "solar_noon"


class LocationSource(StrEnum):
    """Where the observer coordinates in use came from."""

    COMMAND_LINE = "command line"
    CONFIG_FILE = "config file"
    DEFAULT = "default"
