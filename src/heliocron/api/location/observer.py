"""
Observer Location Management

Resolves the observer's coordinates from, in order of precedence, the
command line, the configuration file ``~/.config/heliocron.toml`` and a
hard-coded default (the Royal Observatory, Greenwich).

The configuration file is TOML:

    latitude = 51.4769
    longitude = -0.0005
    name = "Greenwich"    # optional
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

import deal

from heliocron.api.core.constants import DEFAULT_LATITUDE, DEFAULT_LONGITUDE
from heliocron.api.core.enums import LocationSource
from heliocron.api.core.exceptions import InvalidConfigurationError, ValidationError
from heliocron.api.core.types import Coordinates, Latitude, Longitude


logger = logging.getLogger(__name__)


__all__ = [
    "DEFAULT_LOCATION",
    "ObserverLocation",
    "get_config_path",
    "load_location",
    "read_config_file",
    "resolve_observer_location",
]


@dataclass(frozen=True)
class ObserverLocation:
    """Observer's coordinates and where they came from."""

    coordinates: Coordinates
    source: LocationSource
    name: str | None = None  # Optional location name


# Default location (Greenwich Observatory)
DEFAULT_LOCATION = ObserverLocation(
    coordinates=Coordinates(Latitude(DEFAULT_LATITUDE), Longitude(DEFAULT_LONGITUDE)),
    source=LocationSource.DEFAULT,
    name="Greenwich Observatory (default)",
)


@deal.post(lambda result: result.suffix == ".toml", message="Must return a TOML path")
def get_config_path() -> Path:
    """Get path to the heliocron config file."""
    return Path.home() / ".config" / "heliocron.toml"


@deal.raises(InvalidConfigurationError)
def read_config_file(path: Path) -> ObserverLocation:
    """
    Read observer coordinates from a TOML config file.

    Args:
        path: Path to the config file

    Returns:
        Location read from the file

    Raises:
        InvalidConfigurationError: If the file cannot be read or parsed, or
            its coordinates are missing or out of range
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise InvalidConfigurationError(f"Failed to read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigurationError(f"Failed to parse config file {path}: {e}") from e

    match (data.get("latitude"), data.get("longitude")):
        case (None, None):
            raise InvalidConfigurationError("Missing latitude and longitude")
        case (None, _):
            raise InvalidConfigurationError("Missing latitude")
        case (_, None):
            raise InvalidConfigurationError("Missing longitude")
        case (latitude, longitude):
            pass

    # Strings would be accepted by float(); the file format wants numbers
    for key, value in (("latitude", latitude), ("longitude", longitude)):
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise InvalidConfigurationError(f"Expected a number for {key}, found {value!r}")

    try:
        coordinates = Coordinates(Latitude(latitude), Longitude(longitude))
    except ValidationError as e:
        raise InvalidConfigurationError(str(e)) from e

    name = data.get("name")
    return ObserverLocation(
        coordinates=coordinates,
        source=LocationSource.CONFIG_FILE,
        name=str(name) if name is not None else None,
    )


@deal.post(lambda result: result is not None, message="Location must be returned")
def load_location(path: Path | None = None) -> ObserverLocation:
    """
    Load observer location from the config file.

    Args:
        path: Config file to read (default: ``get_config_path()``)

    Returns:
        Saved observer location, or the default if none is configured or
        the file is invalid
    """
    config_path = path if path is not None else get_config_path()

    if not config_path.exists():
        logger.debug(f"No config file found at {config_path}")
        return DEFAULT_LOCATION

    try:
        location = read_config_file(config_path)
    except InvalidConfigurationError as e:
        logger.warning(f"Couldn't parse configuration file {config_path}: {e}. Using default location.")
        return DEFAULT_LOCATION

    logger.info(f"Loaded observer location: {location.name or 'Unnamed'} ({location.coordinates})")
    return location


@deal.pre(
    lambda latitude, longitude, path=None: (latitude is None) == (longitude is None),
    message="Latitude and longitude must be given together",
)  # type: ignore[misc,arg-type]
def resolve_observer_location(
    latitude: Latitude | None,
    longitude: Longitude | None,
    path: Path | None = None,
) -> ObserverLocation:
    """
    Pick the observer location by precedence.

    Explicit coordinates win over the config file, which wins over the
    default.

    Args:
        latitude: Latitude from the command line, if any
        longitude: Longitude from the command line, if any
        path: Config file to fall back on (default: ``get_config_path()``)

    Returns:
        Resolved observer location
    """
    if latitude is not None and longitude is not None:
        return ObserverLocation(coordinates=Coordinates(latitude, longitude), source=LocationSource.COMMAND_LINE)
    return load_location(path)
