"""
Solar Reports

Report models built from solar calculations: a full day's schedule
(``SolarReport``) and an instantaneous snapshot (``PollReport``). Both
convert to plain dictionaries for JSON output; absent event times become
``None`` so no information is lost.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from heliocron.api.astronomy.day_part import DayPart
from heliocron.api.astronomy.events import EVENTS, resolve_event_time
from heliocron.api.astronomy.solar_position import SolarCalculations
from heliocron.api.core.constants import SUNRISE_DEGREES
from heliocron.api.core.enums import EventName
from heliocron.api.core.types import Coordinates, EventTime
from heliocron.api.core.utils import format_duration


__all__ = [
    "EventStatus",
    "PollReport",
    "REPORT_EVENT_ORDER",
    "SolarReport",
    "calculate_day_length",
]


REPORT_EVENT_ORDER: tuple[EventName, ...] = (
    EventName.ASTRONOMICAL_DAWN,
    EventName.NAUTICAL_DAWN,
    EventName.CIVIL_DAWN,
    EventName.SUNRISE,
    EventName.SOLAR_NOON,
    EventName.SUNSET,
    EventName.CIVIL_DUSK,
    EventName.NAUTICAL_DUSK,
    EventName.ASTRONOMICAL_DUSK,
)
"""Order in which events are listed, earliest first."""

_FULL_DAY = timedelta(days=1)


def _location_dict(coordinates: Coordinates) -> dict[str, float]:
    return {
        "latitude": coordinates.latitude.value,
        "longitude": coordinates.longitude.value,
    }


def calculate_day_length(calculations: SolarCalculations, sunrise: EventTime, sunset: EventTime) -> timedelta:
    """
    Time between sunrise and sunset.

    When the Sun never rises or never sets, the day length is zero or a
    full 24 hours, depending on whether the Sun is up at solar noon. The
    noon elevation uses the same declination that decided the events
    were absent.
    """
    if sunrise.value is not None and sunset.value is not None:
        return sunset.value - sunrise.value
    return _FULL_DAY if calculations.solar_noon_elevation() >= -SUNRISE_DEGREES else timedelta(0)


@dataclass(frozen=True)
class SolarReport:
    """Sunrise, sunset, twilight and solar noon times for one civil date."""

    coordinates: Coordinates
    date: datetime
    day_length: timedelta
    events: dict[EventName, EventTime]

    @classmethod
    def from_calculations(cls, calculations: SolarCalculations) -> SolarReport:
        events = {name: resolve_event_time(EVENTS[name], calculations) for name in REPORT_EVENT_ORDER}
        day_length = calculate_day_length(calculations, events[EventName.SUNRISE], events[EventName.SUNSET])
        return cls(
            coordinates=calculations.coordinates,
            date=calculations.instant,
            day_length=day_length,
            events=events,
        )

    @property
    def solar_noon(self) -> EventTime:
        return self.events[EventName.SOLAR_NOON]

    @property
    def sunrise(self) -> EventTime:
        return self.events[EventName.SUNRISE]

    @property
    def sunset(self) -> EventTime:
        return self.events[EventName.SUNSET]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        e = self.events
        return {
            "location": _location_dict(self.coordinates),
            "date": self.date.isoformat(),
            "day_length": format_duration(self.day_length),
            "day_length_seconds": int(self.day_length.total_seconds()),
            "solar_noon": self.solar_noon.isoformat(),
            "sunrise": self.sunrise.isoformat(),
            "sunset": self.sunset.isoformat(),
            "dawn": {
                "civil": e[EventName.CIVIL_DAWN].isoformat(),
                "nautical": e[EventName.NAUTICAL_DAWN].isoformat(),
                "astronomical": e[EventName.ASTRONOMICAL_DAWN].isoformat(),
            },
            "dusk": {
                "civil": e[EventName.CIVIL_DUSK].isoformat(),
                "nautical": e[EventName.NAUTICAL_DUSK].isoformat(),
                "astronomical": e[EventName.ASTRONOMICAL_DUSK].isoformat(),
            },
        }


@dataclass(frozen=True)
class EventStatus:
    """
    An event's time relative to the moment a poll was taken.

    Attributes:
        name: Event name
        time: When the event happens today (absent if never)
        time_until: Time left until the event, or None if it never happens
            or has already passed
    """

    name: EventName
    time: EventTime
    time_until: timedelta | None

    @property
    def has_passed(self) -> bool:
        return self.time.is_some() and self.time_until is None


@dataclass(frozen=True)
class PollReport:
    """Real-time view of the Sun at one moment."""

    coordinates: Coordinates
    timestamp: datetime
    solar_elevation: float
    solar_azimuth: float
    day_part: DayPart
    day_length: timedelta
    events: tuple[EventStatus, ...]

    @classmethod
    def from_calculations(cls, calculations: SolarCalculations) -> PollReport:
        now = calculations.instant
        statuses = []
        for name in REPORT_EVENT_ORDER:
            event_time = resolve_event_time(EVENTS[name], calculations)
            time_until = None
            if event_time.value is not None and event_time.value > now:
                time_until = event_time.value - now
            statuses.append(EventStatus(name=name, time=event_time, time_until=time_until))

        by_name = {status.name: status.time for status in statuses}
        elevation = calculations.solar_elevation()
        return cls(
            coordinates=calculations.coordinates,
            timestamp=now,
            solar_elevation=elevation,
            solar_azimuth=calculations.solar_azimuth(),
            day_part=DayPart.from_elevation_angle(elevation),
            day_length=calculate_day_length(calculations, by_name[EventName.SUNRISE], by_name[EventName.SUNSET]),
            events=tuple(statuses),
        )

    def event(self, name: EventName) -> EventStatus:
        return next(status for status in self.events if status.name == name)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "location": _location_dict(self.coordinates),
            "solar_elevation": round(self.solar_elevation, 3),
            "solar_azimuth": round(self.solar_azimuth, 3),
            "day_part": str(self.day_part),
            "day_length": format_duration(self.day_length),
            "events": {
                str(status.name): {
                    "time": status.time.isoformat(),
                    "time_until": (
                        int(status.time_until.total_seconds()) if status.time_until is not None else None
                    ),
                }
                for status in self.events
            },
        }
