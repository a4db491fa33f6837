"""
Poll Command

Real-time data about the Sun at the current time, optionally refreshed
every second.
"""

import logging
import time

import typer
from rich.live import Live

from heliocron.api.astronomy.solar_position import SolarCalculations
from heliocron.api.core.exceptions import HeliocronError
from heliocron.api.location.observer import ObserverLocation
from heliocron.api.reports import PollReport
from heliocron.cli.utils.output import console, print_error, print_json, render_poll_report
from heliocron.cli.utils.state import current_instant, resolve_location


logger = logging.getLogger(__name__)

REFRESH_INTERVAL_SECONDS = 1.0


def _watch(calculations: SolarCalculations, location: ObserverLocation, json_output: bool) -> None:
    """Refresh and redraw until interrupted."""
    logger.debug(f"Polling every {REFRESH_INTERVAL_SECONDS}s at {location.coordinates}")
    poll_report = PollReport.from_calculations(calculations)

    if json_output:
        # One line per refresh
        while True:
            print_json(poll_report.to_dict(), indent=None)
            time.sleep(REFRESH_INTERVAL_SECONDS)
            calculations = calculations.refresh(current_instant())
            poll_report = PollReport.from_calculations(calculations)
    else:
        _watch_live(calculations, location, poll_report)


def _watch_live(calculations: SolarCalculations, location: ObserverLocation, poll_report: PollReport) -> None:
    console.print("Displaying solar calculations in real time. Press ctrl+C to cancel.\n")
    with Live(render_poll_report(poll_report, location), console=console, refresh_per_second=4) as live:
        while True:
            time.sleep(REFRESH_INTERVAL_SECONDS)
            calculations = calculations.refresh(current_instant())
            live.update(render_poll_report(PollReport.from_calculations(calculations), location))


def poll(
    watch: bool = typer.Option(False, "--watch", "-w", help="Update the values every second"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Display real time data pertaining to the Sun at the current time.

    Example:
        heliocron poll
        heliocron poll --watch
        heliocron --latitude 69.65 --longitude 18.96 poll --json
    """
    try:
        location = resolve_location()
        calculations = SolarCalculations(current_instant(), location.coordinates)
    except HeliocronError as e:
        print_error(f"Failed to calculate solar position: {e}")
        raise typer.Exit(code=1) from e

    if watch:
        try:
            _watch(calculations, location, json_output)
        except KeyboardInterrupt:
            console.print("\n[yellow]Stopped polling[/yellow]")
        return

    poll_report = PollReport.from_calculations(calculations)
    if json_output:
        print_json(poll_report.to_dict())
    else:
        console.print(render_poll_report(poll_report, location))
