"""
CLI State Management

Holds the global options parsed by the main callback so that every
command resolves the date, time zone and location the same way.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

from heliocron.api.core.types import Latitude, Longitude
from heliocron.api.core.utils import fixed_offset
from heliocron.api.location.observer import ObserverLocation, resolve_observer_location


logger = logging.getLogger(__name__)


@dataclass
class CliState:
    """Global options shared by all commands."""

    day: date | None = None
    time_zone: timezone | None = None
    latitude: Latitude | None = None
    longitude: Longitude | None = None
    verbose: bool = False


# Global CLI state
_cli_state = CliState()


def get_state() -> CliState:
    """Get the current CLI state."""
    return _cli_state


def set_state(state: CliState) -> None:
    """Replace the CLI state."""
    global _cli_state
    _cli_state = state


def reset_state() -> None:
    """Restore the default CLI state."""
    set_state(CliState())


def now(tz: timezone | None = None) -> datetime:
    """Current time, in ``tz`` if given, otherwise in the local offset."""
    if tz is not None:
        return datetime.now(tz)
    current = datetime.now().astimezone()
    return current.astimezone(fixed_offset(current))


def resolve_time_zone() -> timezone:
    """The requested UTC offset, or the local one."""
    state = get_state()
    if state.time_zone is not None:
        return state.time_zone
    return now().tzinfo  # type: ignore[return-value]


def report_instant() -> datetime:
    """Noon on the requested date (default: today) in the requested offset."""
    state = get_state()
    tz = resolve_time_zone()
    day = state.day if state.day is not None else now(tz).date()
    instant = datetime.combine(day, time(12, 0, 0), tzinfo=tz)
    logger.debug(f"Report instant: {instant.isoformat()}")
    return instant


def current_instant() -> datetime:
    """The current time in the requested offset."""
    return now(resolve_time_zone())


def resolve_location() -> ObserverLocation:
    """Observer location from the options, config file or default."""
    state = get_state()
    location = resolve_observer_location(state.latitude, state.longitude)
    logger.debug(f"Using {location.source} location {location.coordinates}")
    return location
