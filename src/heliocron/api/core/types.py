"""
Type definitions for heliocron.

This module contains the validated value types and event descriptors used
throughout the library. Latitude, Longitude and Altitude validate their
range on construction, so every other part of the code can treat an
instance as proof that the value is in range.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from datetime import time as clock_time
from typing import TypeAlias

from heliocron.api.core.enums import Direction, VariableElevationEvent
from heliocron.api.core.exceptions import InvalidAltitudeError, InvalidCoordinateError, ValidationError


__all__ = [
    "Altitude",
    "Coordinates",
    "Event",
    "EventTime",
    "FixedElevationEvent",
    "Latitude",
    "Longitude",
]


def _validated(value: object, low: float, high: float, name: str, error: type[ValidationError]) -> float:
    """Coerce ``value`` to float and check it lies in ``[low, high]``."""
    message = f"{name} must be between {low} and {high}, inclusive. Found '{value}'."
    if isinstance(value, bool):
        raise error(message)
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise error(message) from None
    # NaN fails both comparisons
    if not low <= number <= high:
        raise error(message)
    return number


@dataclass(frozen=True, slots=True)
class Latitude:
    """
    Latitude in decimal degrees.

    Valid values are -90.0 to +90.0 inclusive. Positive values are to the
    north, negative values to the south.

    Raises:
        InvalidCoordinateError: If the value is out of range
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validated(self.value, -90.0, 90.0, "Latitude", InvalidCoordinateError))

    @classmethod
    def parse(cls, text: str) -> Latitude:
        """Create a Latitude from a string, such as a command line argument."""
        return cls(_validated(text.strip(), -90.0, 90.0, "Latitude", InvalidCoordinateError))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}"


@dataclass(frozen=True, slots=True)
class Longitude:
    """
    Longitude in decimal degrees.

    Valid values are -180.0 to +180.0 inclusive. Positive values are to the
    east, negative values to the west.

    Raises:
        InvalidCoordinateError: If the value is out of range
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "value", _validated(self.value, -180.0, 180.0, "Longitude", InvalidCoordinateError)
        )

    @classmethod
    def parse(cls, text: str) -> Longitude:
        """Create a Longitude from a string, such as a command line argument."""
        return cls(_validated(text.strip(), -180.0, 180.0, "Longitude", InvalidCoordinateError))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}"


@dataclass(frozen=True, slots=True)
class Altitude:
    """
    Elevation angle in degrees, -90.0 to +90.0 inclusive.

    Used both for elevation readings and for custom event thresholds.

    Raises:
        InvalidAltitudeError: If the value is out of range
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validated(self.value, -90.0, 90.0, "Altitude", InvalidAltitudeError))

    @classmethod
    def parse(cls, text: str) -> Altitude:
        """Create an Altitude from a string."""
        return cls(_validated(text.strip(), -90.0, 90.0, "Altitude", InvalidAltitudeError))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}°"


@dataclass(frozen=True, slots=True)
class Coordinates:
    """
    Observer's geographic position.

    Attributes:
        latitude: Validated latitude
        longitude: Validated longitude
    """

    latitude: Latitude
    longitude: Longitude

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> Coordinates:
        """Build coordinates from raw degrees, validating both."""
        return cls(Latitude(latitude), Longitude(longitude))

    def __str__(self) -> str:
        lat = self.latitude.value
        lon = self.longitude.value
        lat_dir = "N" if lat >= 0 else "S"
        lon_dir = "E" if lon >= 0 else "W"
        return f"{abs(lat):.4f}°{lat_dir}, {abs(lon):.4f}°{lon_dir}"


@dataclass(frozen=True, slots=True)
class FixedElevationEvent:
    """
    An event which occurs when the Sun reaches a specific elevation.

    For example, sunrise occurs when the centre of the Sun is 0.833 degrees
    below the horizon while ascending.

    Attributes:
        degrees_below_horizon: Threshold angle, positive below the horizon
        direction: Whether the Sun is rising or setting through the threshold
    """

    degrees_below_horizon: Altitude
    direction: Direction

    @property
    def elevation(self) -> float:
        """Threshold as a signed elevation angle (negative below the horizon)."""
        return -self.degrees_below_horizon.value


Event: TypeAlias = FixedElevationEvent | VariableElevationEvent


@dataclass(frozen=True, slots=True)
class EventTime:
    """
    The time of a solar event, or its absence.

    ``value`` is None when the event does not happen on the requested day
    at the requested place (polar day or polar night). That is a valid
    outcome, not an error.
    """

    value: datetime | None = None

    def is_some(self) -> bool:
        return self.value is not None

    def time(self) -> clock_time | None:
        return self.value.time() if self.value is not None else None

    def isoformat(self) -> str | None:
        return self.value.isoformat() if self.value is not None else None

    def __str__(self) -> str:
        return str(self.value) if self.value is not None else "Never"
