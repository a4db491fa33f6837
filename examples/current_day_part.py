"""
Current Day Part Example

A minimal example showing how to ask which part of the day it is right
now at a given place, and when the next sunrise and sunset happen.
"""

from datetime import datetime

from heliocron import EVENTS, Coordinates, EventName, SolarCalculations


# ============================================================================
# Quick Start Example
# ============================================================================

def main():
    """Print the current day part for Bad Kreuznach, Germany."""

    coordinates = Coordinates.from_degrees(49.8077, 7.9647)
    now = datetime.now().astimezone()

    calcs = SolarCalculations(now, coordinates)

    print(f"Location:        {coordinates}")
    print(f"Time:            {calcs.instant:%Y-%m-%d %H:%M:%S %z}")
    print(f"Solar elevation: {calcs.solar_elevation():.3f}°")
    print(f"Solar azimuth:   {calcs.solar_azimuth():.3f}°")
    print(f"Day part:        {calcs.day_part()}")

    for name in (EventName.SUNRISE, EventName.SOLAR_NOON, EventName.SUNSET):
        print(f"{name:<16} {calcs.event_time(EVENTS[name])}")


if __name__ == "__main__":
    main()
