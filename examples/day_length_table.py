"""
Day Length Table Example

Prints sunrise, sunset and day length for the first day of every month,
including the months where the Sun never rises or never sets.
"""

from datetime import UTC, datetime

from heliocron import Coordinates, SolarCalculations, SolarReport
from heliocron.api.core.utils import format_duration


def main():
    """Print a year of day lengths for Tromsø, Norway."""

    coordinates = Coordinates.from_degrees(69.6492, 18.9553)

    print(f"{'Date':<12}{'Sunrise':<12}{'Sunset':<12}Day length")
    for month in range(1, 13):
        calcs = SolarCalculations(datetime(2022, month, 1, 12, tzinfo=UTC), coordinates)
        report = SolarReport.from_calculations(calcs)

        sunrise = report.sunrise.time() or "Never"
        sunset = report.sunset.time() or "Never"
        print(f"{report.date:%Y-%m-%d}  {sunrise!s:<12}{sunset!s:<12}{format_duration(report.day_length)}")


if __name__ == "__main__":
    main()
