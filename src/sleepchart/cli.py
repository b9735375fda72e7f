"""Command-line interface for the sleep chart generator."""

from datetime import timedelta
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import build_config
from .errors import SleepChartError
from .logging_config import setup_logging
from .models import ChartRow
from .pipeline import build_chart, process

console = Console()


def format_options(f):
    """Shared input-format options."""
    f = click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
                     help="YAML file with delimiter/date_format defaults")(f)
    f = click.option("--date-format", help="strptime format of the timestamps (default: %Y-%m-%d %H:%M:%S)")(f)
    f = click.option("--delimiter", help="Field delimiter of the sleep log (default: ;)")(f)
    return f


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def cli(verbose):
    """Sleep chart - turn a sleep log into an hourly chart."""
    setup_logging(verbose=verbose)


@cli.command("process")
@click.argument("input_path", type=click.Path(path_type=Path))
@click.argument("output_path", type=click.Path(path_type=Path))
@format_options
def process_cmd(input_path, output_path, delimiter, date_format, config_path):
    """Convert a sleep log into a tab-delimited hourly chart.

    Paste the output into a spreadsheet: one row per sleep day
    (18:00 to 17:59), 24 hourly cells and the daily total.
    """
    try:
        config = build_config(
            input_path,
            output_path,
            delimiter=delimiter,
            date_format=date_format,
            config_path=Path(config_path) if config_path else None,
        )
        result = process(config)
    except SleepChartError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)

    console.print(f"[green]Processing complete. Output saved to {result.output_path}[/green]")


def _asleep_hours(row: ChartRow) -> tuple[str, str]:
    """First and last hour of the sleep day with any sleep, as HH:MM."""
    slept = [i for i, f in enumerate(row.hourly_fractions) if f]
    if not slept:
        return "", ""
    first = row.day_start + timedelta(hours=slept[0])
    last = row.day_start + timedelta(hours=slept[-1])
    return first.strftime("%H:%M"), last.strftime("%H:%M")


@cli.command()
@click.argument("input_path", type=click.Path(path_type=Path))
@click.option("--days", default=14, help="Number of most recent sleep days to show (default: 14)")
@format_options
def preview(input_path, days, delimiter, date_format, config_path):
    """Show the most recent sleep days without writing a chart."""
    try:
        config = build_config(
            input_path,
            Path(),
            delimiter=delimiter,
            date_format=date_format,
            config_path=Path(config_path) if config_path else None,
        )
        window, rows, interval_count = build_chart(config)
    except SleepChartError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)

    shown = rows[-days:] if days > 0 else rows

    table = Table(title=f"Sleep chart ({len(shown)} of {len(rows)} days)")
    table.add_column("Sleep day", style="cyan")
    table.add_column("Asleep", justify="right")
    table.add_column("First hour", justify="right")
    table.add_column("Last hour", justify="right")

    for row in shown:
        first, last = _asleep_hours(row)
        table.add_row(row.date_label, row.daily_total or "-", first, last)

    console.print(table)
    console.print(
        f"[dim]{interval_count} interval(s), "
        f"{window.start_date:%Y-%m-%d %H:%M} → {window.end_date:%Y-%m-%d %H:%M}[/dim]"
    )


if __name__ == "__main__":
    cli()
