"""
Report Command

Full set of sunrise, sunset and twilight times for one date and place.
"""

import logging

import typer

from heliocron.api.astronomy.solar_position import SolarCalculations
from heliocron.api.core.exceptions import HeliocronError
from heliocron.api.reports import SolarReport
from heliocron.cli.utils.output import console, print_error, print_json, render_solar_report
from heliocron.cli.utils.state import report_instant, resolve_location


logger = logging.getLogger(__name__)


def report(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Produce a full set of sunrise, sunset and other related times.

    Times are calculated for the date given with --date (default: today)
    at the location given with --latitude/--longitude, the config file,
    or the default location.

    Example:
        heliocron report
        heliocron --date 2022-06-21 --time-zone +01:00 report --json
    """
    try:
        location = resolve_location()
        calculations = SolarCalculations(report_instant(), location.coordinates)
        solar_report = SolarReport.from_calculations(calculations)
    except HeliocronError as e:
        print_error(f"Failed to calculate report: {e}")
        raise typer.Exit(code=1) from e

    logger.debug(f"Report calculated for {solar_report.date.isoformat()}")

    if json_output:
        print_json(solar_report.to_dict())
    else:
        console.print(render_solar_report(solar_report, location))
