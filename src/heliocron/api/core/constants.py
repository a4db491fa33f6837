"""
Physical and Astronomical Constants

Constants used throughout the heliocron API for calculations.
"""

from typing import Final


__all__ = [
    "ASTRONOMICAL_TWILIGHT_DEGREES",
    "CIVIL_TWILIGHT_DEGREES",
    "DEFAULT_LATITUDE",
    "DEFAULT_LONGITUDE",
    "DEGREES_PER_HOUR_ANGLE",
    "JULIAN_DAYS_PER_CENTURY",
    "J2000_JULIAN_DAY",
    "MINUTES_PER_DAY",
    "MINUTES_PER_DEGREE_OF_LONGITUDE",
    "NAUTICAL_TWILIGHT_DEGREES",
    "SUNRISE_DEGREES",
]


# Threshold angles, in degrees below the horizon
SUNRISE_DEGREES: Final[float] = 0.833
"""Sunrise/sunset: upper limb on the horizon, refraction included."""

CIVIL_TWILIGHT_DEGREES: Final[float] = 6.0
"""Civil dawn/dusk."""

NAUTICAL_TWILIGHT_DEGREES: Final[float] = 12.0
"""Nautical dawn/dusk."""

ASTRONOMICAL_TWILIGHT_DEGREES: Final[float] = 18.0
"""Astronomical dawn/dusk."""

# Astronomical constants
DEGREES_PER_HOUR_ANGLE: Final[float] = 15.0
"""Degrees of hour angle per hour of time."""

MINUTES_PER_DEGREE_OF_LONGITUDE: Final[float] = 4.0
"""Minutes of solar time per degree of longitude."""

MINUTES_PER_DAY: Final[float] = 1440.0

J2000_JULIAN_DAY: Final[float] = 2451545.0
"""Julian Day of the J2000.0 epoch (2000-01-01 12:00 UTC)."""

JULIAN_DAYS_PER_CENTURY: Final[float] = 36525.0

# Default observer (Royal Observatory, Greenwich)
DEFAULT_LATITUDE: Final[float] = 51.4769
DEFAULT_LONGITUDE: Final[float] = -0.0005
