"""
Main CLI application using Typer.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..adapters.config_calendar_source import ConfigCalendarSource
from ..adapters.event_file_calendar_source import EventFileCalendarSource
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import FreeSlotsError
from ..domain.free_interval_calculator import FreeIntervalCalculator
from ..services.free_slot_finder import FreeSlotFinderService

app = typer.Typer(
    name="freeslots",
    help="Find free time shared by two participants' calendars",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configures logging to stderr with local time."""
    level = logging.DEBUG if verbose else logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s]: %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    formatter.converter = time.localtime
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    config_path = config_file or get_default_config_path()
    logger.debug("Using config file %s", config_path)
    return AppConfig.load_from_yaml(config_path)


def _build_source(config: AppConfig, events: Optional[Path], date: Optional[str]):
    """
    Pick the calendar source: an event file for one day, or the config itself.
    """
    events_file = events or config.events_file

    if events_file is None:
        if date:
            console.print("[yellow]Hinweis: --date wird ohne Event-Datei ignoriert.[/yellow]")
        return ConfigCalendarSource(config)

    if date:
        try:
            day = pendulum.from_format(date, "YYYY-MM-DD").date()
        except ValueError as e:
            console.print(f"[red]Fehler beim Parsen des Datums: {e}[/red]")
            raise typer.Exit(1)
    else:
        day = pendulum.today().date()

    return EventFileCalendarSource(events_file=events_file, config=config, day=day)


@app.command()
def find(
    participant_a: Annotated[str, typer.Argument(help="Name of the first participant")],
    participant_b: Annotated[str, typer.Argument(help="Name of the second participant")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    min_duration: Annotated[Optional[int], typer.Option("--min-duration", "-d", min=0, help="Minimum free time in minutes")] = None,
    events: Annotated[Optional[Path], typer.Option("--events", help="JSON event export to read busy times from")] = None,
    date: Annotated[Optional[str], typer.Option("--date", help="Day to search in the event export (YYYY-MM-DD)")] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Reject unsorted or overlapping calendars.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
):
    """
    Find free intervals shared by two participants.

    Examples:

        freeslots find alice bob

        freeslots find alice bob --min-duration 60

        freeslots find alice bob --events events.json --date 2024-11-25
    """
    setup_logging(verbose)

    try:
        config = _load_config(config_file)
        minimum = min_duration if min_duration is not None else config.defaults.minimum_free_minutes

        source = _build_source(config, events, date)
        calculator = FreeIntervalCalculator()
        service = FreeSlotFinderService(
            calendar_source=source,
            calculator=calculator,
            strict=strict or config.strict,
        )

        calendar_a, calendar_b = service.load_calendars(participant_a, participant_b)
        window_start, window_end = calculator.working_window(calendar_a, calendar_b)

        console.print(f"\n[bold cyan]Freie Zeiten für {participant_a} und {participant_b}[/bold cyan]")
        console.print(f"   Gemeinsames Zeitfenster: {window_start} - {window_end}")
        console.print(f"   Mindestdauer: {minimum} Minuten\n")

        free_intervals = service.calculate(calendar_a, calendar_b, minimum)

        if not free_intervals:
            console.print(
                "[yellow]⚠ Keine gemeinsamen freien Zeiten gefunden.[/yellow]\n"
                "Versuchen Sie eine kürzere Mindestdauer."
            )
        else:
            console.print(f"[bold green]✓ {len(free_intervals)} freie(s) Intervall(e) gefunden:[/bold green]\n")
            for interval in free_intervals:
                console.print(f"  {interval} ({interval.duration_minutes()} Min.)")

        console.print()

    except (FileNotFoundError, ValueError, FreeSlotsError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def list_participants(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    List all configured participants.
    """
    try:
        config = _load_config(config_file)

        if not config.participants:
            console.print("[yellow]Keine Teilnehmer in der Config-Datei definiert.[/yellow]")
            return

        table = Table(
            title="Konfigurierte Teilnehmer",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Name (Alias)", style="bold yellow")
        table.add_column("Arbeitszeit", style="dim")
        table.add_column("Termine", justify="right")

        for participant in config.participants:
            calendar = participant.to_calendar(config.defaults)
            table.add_row(
                participant.name,
                str(calendar.working_day()),
                str(len(calendar.busy_intervals))
            )

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]freeslots[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
