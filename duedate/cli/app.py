"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import AppConfig
from ..domain.calculator import DueDateCalculator
from ..domain.exceptions import DueDateError
from ..domain.models import SubmissionRequest

app = typer.Typer(
    name="duedate",
    help="Calculate issue due dates on a Monday to Friday working calendar",
    add_completion=False
)

console = Console()

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Calculate issue due dates on a Monday to Friday working calendar.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def calculate(
    submit_time: Annotated[str, typer.Argument(help="Submit time, e.g. '2020-01-31 10:05'")],
    turnover: Annotated[int, typer.Argument(help="Turnover in working hours")],
    config_file: ConfigOption = None,
):
    """
    Calculate the due date of an issue.

    Examples:

        duedate calculate "2020-01-31 10:05" 9

        duedate calculate "2020-02-01 10:59" 16 --config config.yaml
    """
    try:
        config = AppConfig.load(config_file)

        try:
            submitted = pendulum.from_format(submit_time, config.input_format)
        except ValueError as e:
            console.print(f"[red]Could not parse submit time '{submit_time}': {e}[/red]")
            raise typer.Exit(1)

        calculator = DueDateCalculator(config.calendar.to_working_calendar())
        due = calculator.calculate_due_date(
            SubmissionRequest(submit_time=submitted, turnover_hours=turnover)
        )

        console.print(
            f"[bold green]Due:[/bold green] {WEEKDAY_NAMES[due.day_of_week]}, "
            f"{due.format(config.output_format)}"
        )

    except (DueDateError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command("calendar")
def show_calendar(config_file: ConfigOption = None):
    """
    Show the working calendar used for calculations.
    """
    try:
        config = AppConfig.load(config_file)
        calendar = config.calendar.to_working_calendar()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(
        title="Working calendar",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Day", style="bold yellow")
    table.add_column("Working hours")

    for index, name in enumerate(WEEKDAY_NAMES):
        if index in calendar.WORKING_DAYS:
            hours = f"{calendar.start_time:%H:%M} - {calendar.end_time:%H:%M}"
        else:
            hours = "[dim]-[/dim]"
        table.add_row(name, hours)

    console.print()
    console.print(table)
    console.print(
        f"{calendar.hours_per_day} hours per day, {calendar.hours_per_week} hours per week"
    )
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]duedate[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
