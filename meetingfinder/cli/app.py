"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..adapters.calendar_file import CalendarFileSource
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import MeetingFinderError
from ..services.meeting_finder import MeetingFinderService

app = typer.Typer(
    name="meetingfinder",
    help="Find the windows of a day in which every attendee is free",
    add_completion=False
)

console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    config_path = config_file or get_default_config_path()
    if config_file is None and not config_path.exists():
        # Running without a config file is fine; aliases just won't resolve
        return AppConfig()
    return AppConfig.load_from_yaml(config_path)


@app.command()
def find(
    participants: Annotated[Optional[List[str]], typer.Argument(help="Required attendees (names or email addresses).")] = None,
    optional: Annotated[Optional[List[str]], typer.Option("--optional", "-o", help="Optional attendee. Can be repeated.")] = None,
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", min=1, help="Meeting duration in minutes")] = None,
    calendar: Annotated[Optional[Path], typer.Option("--calendar", help="Path to the JSON calendar file")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Find free windows for a meeting.

    Examples:

        meetingfinder find alice bob --duration 60

        meetingfinder find alice -o carol --calendar today.json
    """
    try:
        config = _load_config(config_file)
        _configure_logging("DEBUG" if verbose else config.log_level)

        required = config.resolve_participants(participants or [])
        optional_attendees = [
            email for email in config.resolve_participants(optional or [])
            if email not in required
        ]
        if not required and not optional_attendees:
            console.print("[bold red]Error:[/bold red] Provide at least one attendee.")
            raise typer.Exit(1)

        min_duration = duration if duration is not None else config.defaults.duration_minutes
        service = MeetingFinderService(
            event_source=CalendarFileSource(calendar or config.calendar_file)
        )

        events = service.fetch_events()
        windows = service.calculate_windows(
            events=events,
            attendees=required,
            duration_minutes=min_duration,
            optional_attendees=optional_attendees,
        )

        console.print("\n[bold cyan]Summary:[/bold cyan]")
        console.print(f"   Required: {', '.join(required) or '-'}")
        if optional_attendees:
            console.print(f"   Optional: {', '.join(optional_attendees)}")
        console.print(f"   Duration: {min_duration} minutes")

        blocking = service.relevant_events(events, required + optional_attendees)
        if blocking:
            console.print("\n[bold]Busy:[/bold]")
            for event in blocking:
                console.print(f"  [dim]{event.when}[/dim]  {escape(event.title)}")

        console.print()
        if not windows:
            console.print(
                "[yellow]No free window found.[/yellow]\n"
                "Try a shorter duration or fewer attendees."
            )
        else:
            console.print(f"[bold green]{len(windows)} free window(s):[/bold green]\n")
            for window in windows:
                console.print(f"  {window} ({window.duration()} min)")
        console.print()

    except (FileNotFoundError, ValueError, MeetingFinderError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def list_colleagues(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    List all configured colleagues.
    """
    try:
        config = _load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    _configure_logging(config.log_level)

    if not config.colleagues:
        console.print("[yellow]No colleagues defined in the config file.[/yellow]")
        return

    table = Table(
        title="Configured colleagues",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Name (Alias)", style="bold yellow")
    table.add_column("Email", style="dim")

    for colleague in config.colleagues:
        table.add_row(colleague.name, colleague.email)

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]meetingfinder[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
