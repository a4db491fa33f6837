"""
CLI Output Utilities

Rich console formatting utilities for heliocron reports.
"""

from typing import TYPE_CHECKING, Any

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from heliocron.api.core.enums import EventName
from heliocron.api.core.types import EventTime
from heliocron.api.core.utils import format_duration, format_utc_offset
from heliocron.api.location.observer import ObserverLocation
from heliocron.api.reports import EventStatus, PollReport, SolarReport


if TYPE_CHECKING:
    from rich.console import RenderableType


# Create console with unicode detection
# If terminal doesn't support unicode properly, Rich will use ASCII alternatives
console = Console()

_use_unicode = console.is_terminal and not console.legacy_windows

EVENT_LABELS: dict[EventName, str] = {
    EventName.ASTRONOMICAL_DAWN: "Astronomical dawn",
    EventName.NAUTICAL_DAWN: "Nautical dawn",
    EventName.CIVIL_DAWN: "Civil dawn",
    EventName.SUNRISE: "Sunrise",
    EventName.SOLAR_NOON: "Solar noon",
    EventName.SUNSET: "Sunset",
    EventName.CIVIL_DUSK: "Civil dusk",
    EventName.NAUTICAL_DUSK: "Nautical dusk",
    EventName.ASTRONOMICAL_DUSK: "Astronomical dusk",
}


def print_error(message: str) -> None:
    """Print error message in red."""
    # ✗ is widely supported (U+2717)
    console.print(f"[red]✗[/red] {message}", style="red")


def print_info(message: str) -> None:
    """Print info message in blue."""
    # U+2139 is part of the Letterlike Symbols block and widely supported
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any], indent: int | None = 2) -> None:
    """Print data as JSON. ``indent=None`` prints a single line."""
    import json

    console.print_json(json.dumps(data), indent=indent)


def format_event_time(event_time: EventTime) -> str:
    """
    Format an event time for display.

    Args:
        event_time: Event time, possibly absent

    Returns:
        Formatted string (e.g., "04:43:09"), or "Never" if the event
        does not occur
    """
    if event_time.value is None:
        return "Never"
    return event_time.value.strftime("%H:%M:%S")


def format_time_until(status: EventStatus) -> str:
    """Format the time remaining until an event (e.g., "03:12:45", "Passed", "Never")."""
    if status.time_until is not None:
        return format_duration(status.time_until)
    return "Passed" if status.has_passed else "Never"


def render_location_panel(location: ObserverLocation, title: str, lines: dict[str, str]) -> Panel:
    """
    Build the header panel shown above reports.

    The panel shrinks to its longest line and wraps at the console width,
    so long location names stay readable in narrow terminals.

    Args:
        location: Observer location in use
        title: Panel title
        lines: Extra label/value rows shown under the location
    """
    info_text = Text()
    info_text.append("Location: ", style="bold cyan")
    info_text.append(str(location.coordinates), style="white")
    if location.name:
        info_text.append(f" ({location.name})", style="dim")
    for label, value in lines.items():
        info_text.append(f"\n{label}: ", style="bold cyan")
        info_text.append(value, style="white")

    return Panel.fit(info_text, title=f"[bold]{title}[/bold]", border_style="green")


def render_solar_report(report: SolarReport, location: ObserverLocation) -> "RenderableType":
    """Render a day report as a header panel and an events table."""
    header = render_location_panel(
        location,
        "Solar Report",
        {
            "Date": f"{report.date:%Y-%m-%d} (UTC{format_utc_offset(report.date.tzinfo)})",  # type: ignore[arg-type]
            "Day length": format_duration(report.day_length),
        },
    )

    table = Table(title="Solar Events", show_header=True, header_style="bold magenta")
    table.add_column("Event", style="cyan")
    table.add_column("Time", style="green")
    for name, event_time in report.events.items():
        style = "dim" if not event_time.is_some() else None
        table.add_row(EVENT_LABELS[name], format_event_time(event_time), style=style)

    return Group(header, table)


def render_poll_report(report: PollReport, location: ObserverLocation) -> "RenderableType":
    """Render a real-time snapshot as a header panel and an events table."""
    header = render_location_panel(
        location,
        "Solar Position",
        {
            "Time": f"{report.timestamp:%Y-%m-%d %H:%M:%S %z}",
            "Solar elevation": f"{report.solar_elevation:.3f}°",
            "Solar azimuth": f"{report.solar_azimuth:.3f}°",
            "Day part": str(report.day_part),
            "Day length": format_duration(report.day_length),
        },
    )

    table = Table(title="Solar Events", show_header=True, header_style="bold magenta")
    table.add_column("Event", style="cyan")
    table.add_column("Time", style="green")
    table.add_column("Time until", style="yellow")
    for status in report.events:
        style = "dim" if status.time_until is None else None
        table.add_row(EVENT_LABELS[status.name], format_event_time(status.time), format_time_until(status), style=style)

    return Group(header, table)
