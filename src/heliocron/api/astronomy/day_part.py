"""
Day Part Classification

Maps a solar elevation angle onto a coarse daylight category.
"""

from __future__ import annotations

from enum import StrEnum
from typing import SupportsFloat

from heliocron.api.core.constants import (
    ASTRONOMICAL_TWILIGHT_DEGREES,
    CIVIL_TWILIGHT_DEGREES,
    NAUTICAL_TWILIGHT_DEGREES,
    SUNRISE_DEGREES,
)


__all__ = ["DayPart"]


class DayPart(StrEnum):
    """Parts of the day. Not all of them necessarily occur on a given date."""

    DAY = "Day"
    CIVIL_TWILIGHT = "Civil Twilight"
    NAUTICAL_TWILIGHT = "Nautical Twilight"
    ASTRONOMICAL_TWILIGHT = "Astronomical Twilight"
    NIGHT = "Night"

    @classmethod
    def from_elevation_angle(cls, angle: SupportsFloat) -> DayPart:
        """
        Classify a solar elevation angle.

        Each boundary belongs to the brighter category, so exactly -18.0 is
        astronomical twilight and exactly 0.833 is day.

        Args:
            angle: Solar elevation in degrees (plain float or Altitude)

        Returns:
            The matching day part
        """
        elevation = float(angle)
        if elevation < -ASTRONOMICAL_TWILIGHT_DEGREES:
            return cls.NIGHT
        if elevation < -NAUTICAL_TWILIGHT_DEGREES:
            return cls.ASTRONOMICAL_TWILIGHT
        if elevation < -CIVIL_TWILIGHT_DEGREES:
            return cls.NAUTICAL_TWILIGHT
        if elevation < SUNRISE_DEGREES:
            return cls.CIVIL_TWILIGHT
        return cls.DAY
