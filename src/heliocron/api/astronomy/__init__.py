"""Astronomy subpackage: solar position, event times and day parts."""

from heliocron.api.astronomy.day_part import DayPart
from heliocron.api.astronomy.events import EVENTS, event_for_name, resolve_event_time
from heliocron.api.astronomy.solar_position import SolarCalculations


__all__ = [
    "EVENTS",
    "DayPart",
    "SolarCalculations",
    "event_for_name",
    "resolve_event_time",
]
