"""
heliocron CLI - Main Application

This is the main entry point for the heliocron command-line interface.
"""

import logging
from datetime import date, timezone

import typer
from click import Context
from dotenv import load_dotenv
from rich.console import Console
from typer.core import TyperGroup

from heliocron.api.core.types import Latitude, Longitude
from heliocron.cli.commands import poll, report
from heliocron.cli.utils.parsing import parse_date, parse_latitude, parse_longitude, parse_time_zone
from heliocron.cli.utils.state import CliState, set_state


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


# Create main app
app = typer.Typer(
    name="heliocron",
    help="Sunrise, sunset and twilight times for any date and place",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    day: date | None = typer.Option(
        None,
        "--date",
        "-d",
        parser=parse_date,
        help="Date for the calculations, in 'yyyy-mm-dd' format. Defaults to today",
        show_default=False,
    ),
    time_zone: timezone | None = typer.Option(
        None,
        "--time-zone",
        "-t",
        parser=parse_time_zone,
        help="Time zone as '[+|-]HH:MM'. Defaults to the local time zone",
        show_default=False,
    ),
    latitude: Latitude | None = typer.Option(
        None,
        "--latitude",
        "-l",
        parser=parse_latitude,
        help="Latitude in decimal degrees, positive to the north. Requires --longitude",
        envvar="HELIOCRON_LATITUDE",
        show_default=False,
    ),
    longitude: Longitude | None = typer.Option(
        None,
        "--longitude",
        "-o",
        parser=parse_longitude,
        help="Longitude in decimal degrees, positive to the east. Requires --latitude",
        envvar="HELIOCRON_LONGITUDE",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    heliocron

    Sunrise, sunset, twilight and solar noon times, and the live position
    of the Sun.

    [bold green]Examples:[/bold green]

        heliocron report
        heliocron --date 2022-06-21 --time-zone +01:00 report --json
        heliocron --latitude 69.65 --longitude 18.96 poll --watch

    [bold blue]Location:[/bold blue]

        Coordinates come from --latitude/--longitude, then
        ~/.config/heliocron.toml, then the Royal Observatory, Greenwich.

    [bold blue]Environment Variables:[/bold blue]

        HELIOCRON_LATITUDE  - Default latitude
        HELIOCRON_LONGITUDE - Default longitude
    """
    if (latitude is None) != (longitude is None):
        raise typer.BadParameter("--latitude and --longitude must be given together")

    set_state(
        CliState(
            day=day,
            time_zone=time_zone,
            latitude=latitude,
            longitude=longitude,
            verbose=verbose,
        )
    )

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from heliocron.cli import __version__

    console.print(f"[bold]heliocron[/bold] version [cyan]{__version__}[/cyan]")


@app.command("config", rich_help_panel="Configuration")
def show_config(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the observer location in use and where it came from.

    Example:
        heliocron config
        heliocron config --json
    """
    from rich.table import Table

    from heliocron.api.location.observer import get_config_path
    from heliocron.cli.utils.output import print_info, print_json
    from heliocron.cli.utils.state import resolve_location

    location = resolve_location()
    config_path = get_config_path()
    coordinates = location.coordinates

    if json_output:
        print_json(
            {
                "location": {
                    "name": location.name,
                    "latitude": coordinates.latitude.value,
                    "longitude": coordinates.longitude.value,
                    "formatted": str(coordinates),
                    "source": str(location.source),
                },
                "config_file": {
                    "path": str(config_path),
                    "exists": config_path.exists(),
                },
            }
        )
        return

    location_table = Table(
        title="[bold]Observer Location[/bold]",
        show_header=True,
        header_style="bold magenta",
        expand=False,
    )
    location_table.add_column("Setting", style="cyan")
    location_table.add_column("Value", style="green")

    if location.name:
        location_table.add_row("Location Name", location.name)
    location_table.add_row("Coordinates", str(coordinates))
    location_table.add_row("Source", str(location.source))
    location_table.add_row(
        "Config File",
        str(config_path) + (" [green]✓[/green]" if config_path.exists() else " [dim](not found)[/dim]"),
    )

    console.print(location_table)
    print_info("Set 'latitude' and 'longitude' in the config file to change the default location")


# Solar Events
app.command("report", rich_help_panel="Solar Events")(report.report)
app.command("poll", rich_help_panel="Solar Events")(poll.poll)


def run() -> None:
    """Console script entry point: load ``.env`` before parsing options."""
    load_dotenv()
    app()


if __name__ == "__main__":
    run()
