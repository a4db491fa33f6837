"""
Solar Position Calculations

Computes the Sun's position for an observer using the NOAA solar
calculator equations (after Meeus, "Astronomical Algorithms"). Accuracy is
around a minute of time for event times and a small fraction of a degree
for elevation, between 1800 and 2100.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

import deal

from heliocron.api.astronomy.day_part import DayPart
from heliocron.api.core.constants import MINUTES_PER_DAY, MINUTES_PER_DEGREE_OF_LONGITUDE
from heliocron.api.core.types import Coordinates, Event, EventTime
from heliocron.api.core.utils import (
    calculate_julian_century,
    calculate_julian_date,
    fixed_offset,
    start_of_civil_day,
)


if TYPE_CHECKING:
    from datetime import timezone


logger = logging.getLogger(__name__)


__all__ = [
    "SolarCalculations",
    "solar_declination_and_equation_of_time",
]


def solar_declination_and_equation_of_time(julian_century: float) -> tuple[float, float]:
    """
    Calculate the Sun's declination and the equation of time.

    Args:
        julian_century: Julian centuries since J2000.0

    Returns:
        Tuple of (declination in degrees, equation of time in minutes)
    """
    jc = julian_century

    mean_longitude = (280.46646 + jc * (36000.76983 + jc * 0.0003032)) % 360
    mean_anomaly = 357.52911 + jc * (35999.05029 - 0.0001537 * jc)
    eccentricity = 0.016708634 - jc * (0.000042037 + 0.0000001267 * jc)

    m = math.radians(mean_anomaly)
    equation_of_center = (
        math.sin(m) * (1.914602 - jc * (0.004817 + 0.000014 * jc))
        + math.sin(2 * m) * (0.019993 - 0.000101 * jc)
        + math.sin(3 * m) * 0.000289
    )
    true_longitude = mean_longitude + equation_of_center

    # Nutation and aberration
    omega = math.radians(125.04 - 1934.136 * jc)
    apparent_longitude = true_longitude - 0.00569 - 0.00478 * math.sin(omega)

    mean_obliquity = 23 + (26 + (21.448 - jc * (46.815 + jc * (0.00059 - jc * 0.001813))) / 60) / 60
    obliquity = mean_obliquity + 0.00256 * math.cos(omega)

    declination = math.degrees(
        math.asin(math.sin(math.radians(obliquity)) * math.sin(math.radians(apparent_longitude)))
    )

    y = math.tan(math.radians(obliquity / 2)) ** 2
    l0 = math.radians(mean_longitude)
    e = eccentricity
    equation_of_time = 4 * math.degrees(
        y * math.sin(2 * l0)
        - 2 * e * math.sin(m)
        + 4 * e * y * math.sin(m) * math.cos(2 * l0)
        - 0.5 * y * y * math.sin(4 * l0)
        - 1.25 * e * e * math.sin(2 * m)
    )

    return declination, equation_of_time


class SolarCalculations:
    """
    Snapshot of the Sun's position for one instant at one place.

    All derived quantities are computed once, on construction. Instances
    are never modified: ``refresh`` returns a new snapshot, so a caller
    holding an older one keeps seeing consistent values.

    Example:
        >>> from datetime import UTC, datetime
        >>> coords = Coordinates.from_degrees(51.4769, -0.0005)
        >>> calcs = SolarCalculations(datetime(2022, 6, 21, 12, tzinfo=UTC), coords)
        >>> round(calcs.solar_elevation())
        62
    """

    @deal.pre(
        lambda self, instant, coordinates: instant.utcoffset() is not None,
        message="Instant must be timezone-aware",
    )  # type: ignore[misc,arg-type]
    def __init__(self, instant: datetime, coordinates: Coordinates) -> None:
        self._time_zone = fixed_offset(instant)
        self._instant = instant.astimezone(self._time_zone)
        self._coordinates = coordinates

        self._julian_date = calculate_julian_date(self._instant)
        self._julian_century = calculate_julian_century(self._julian_date)
        self._declination, self._equation_of_time = solar_declination_and_equation_of_time(self._julian_century)

        local = self._instant
        minutes_past_midnight = (
            local.hour * 60 + local.minute + local.second / 60 + local.microsecond / 60_000_000
        )
        self._true_solar_time = (
            minutes_past_midnight
            + self._equation_of_time
            + MINUTES_PER_DEGREE_OF_LONGITUDE * coordinates.longitude.value
            - self._offset_minutes
        ) % MINUTES_PER_DAY
        # Zero at solar noon, negative in the morning
        self._hour_angle = self._true_solar_time / MINUTES_PER_DEGREE_OF_LONGITUDE - 180.0

    @property
    def _offset_minutes(self) -> float:
        return self._instant.utcoffset().total_seconds() / 60  # type: ignore[union-attr]

    @property
    def instant(self) -> datetime:
        return self._instant

    @property
    def time_zone(self) -> timezone:
        return self._time_zone

    @property
    def coordinates(self) -> Coordinates:
        return self._coordinates

    @property
    def julian_date(self) -> float:
        return self._julian_date

    @property
    def julian_century(self) -> float:
        return self._julian_century

    @property
    def declination(self) -> float:
        """Solar declination in degrees."""
        return self._declination

    @property
    def equation_of_time(self) -> float:
        """Equation of time in minutes (true solar minus mean solar time)."""
        return self._equation_of_time

    @property
    def true_solar_time(self) -> float:
        """True solar time in minutes past solar midnight."""
        return self._true_solar_time

    @property
    def hour_angle(self) -> float:
        """Hour angle in degrees, zero at solar noon."""
        return self._hour_angle

    @deal.post(lambda result: -90.0 <= result <= 90.0, message="Elevation must be -90 to +90 degrees")
    def solar_elevation(self) -> float:
        """
        Elevation of the centre of the Sun above the horizon.

        Returns:
            Elevation in degrees (negative below the horizon)
        """
        lat = math.radians(self._coordinates.latitude.value)
        dec = math.radians(self._declination)
        ha = math.radians(self._hour_angle)
        sin_elevation = math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.cos(ha)
        return math.degrees(math.asin(max(-1.0, min(1.0, sin_elevation))))

    @deal.post(lambda result: 0.0 <= result <= 360.0, message="Azimuth must be 0-360 degrees")
    def solar_azimuth(self) -> float:
        """
        Azimuth of the Sun.

        Returns:
            Azimuth in degrees clockwise from north (90=East, 180=South)
        """
        lat = math.radians(self._coordinates.latitude.value)
        dec = math.radians(self._declination)
        ha = math.radians(self._hour_angle)
        # Measured westward from south, then rotated to north
        from_south = math.atan2(math.sin(ha), math.cos(ha) * math.sin(lat) - math.tan(dec) * math.cos(lat))
        return (math.degrees(from_south) + 180.0) % 360.0

    def solar_noon(self) -> datetime:
        """
        Time of solar noon on the instant's civil date.

        Closed form from the equation of time and the longitude, expressed
        in the instant's UTC offset. The result is wrapped into the civil
        day, so offsets far from local mean time (UTC+14 east of the date
        line, UTC-12 west of it) still give the transit on the same date.
        """
        longitude = self._coordinates.longitude.value
        utc_minutes = 720.0 - MINUTES_PER_DEGREE_OF_LONGITUDE * longitude - self._equation_of_time
        local_minutes = (utc_minutes + self._offset_minutes) % MINUTES_PER_DAY
        return start_of_civil_day(self._instant) + timedelta(minutes=local_minutes)

    def solar_noon_elevation(self) -> float:
        """
        Elevation of the Sun at its meridian transit.

        Uses this snapshot's declination, the same one the event resolver
        uses, so it agrees with whether threshold events occur.

        Returns:
            Elevation in degrees (negative below the horizon)
        """
        return 90.0 - abs(self._coordinates.latitude.value - self._declination)

    def event_time(self, event: Event) -> EventTime:
        """Resolve the time of ``event`` on this instant's civil date."""
        from heliocron.api.astronomy.events import resolve_event_time

        return resolve_event_time(event, self)

    def day_part(self) -> DayPart:
        """Classify the current solar elevation."""
        return DayPart.from_elevation_angle(self.solar_elevation())

    def refresh(self, instant: datetime) -> SolarCalculations:
        """
        Recalculate for a new instant at the same coordinates.

        Returns a new object; this one is left untouched.
        """
        logger.debug(f"Refreshing solar calculations for {instant.isoformat()}")
        return SolarCalculations(instant, self._coordinates)

    def __repr__(self) -> str:
        return f"SolarCalculations(instant={self._instant.isoformat()!r}, coordinates={self._coordinates})"
