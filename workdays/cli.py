"""
CLI interface for the work calendar.
"""

import logging
import sys
from datetime import date, datetime
from typing import Optional, Sequence

import click

from workdays import __version__
from workdays.config.manager import ConfigManager, load_calendar_file
from workdays.core.calculator import WorkdayCalculator
from workdays.core.calendar import WorkCalendar
from workdays.core.exceptions import WorkCalendarError
from workdays.data.loader import dump_calendar_config
from workdays.data.schemas import Config
from workdays.output.exporter import ResultExporter
from workdays.output.formatter import ConsoleFormatter

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    formats = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
    )


def calendar_options(func):
    """Options shared by every command that needs a calendar."""
    options = [
        click.option(
            "--calendar", "-C", "calendar_file",
            type=click.Path(exists=True, dir_okay=False),
            help="Calendar file (YAML or JSON) with work_days and holidays",
        ),
        click.option(
            "--work-days", "-w",
            help="Work weekdays, e.g. 'Mon,Tue,Wed' (overrides the calendar file)",
        ),
        click.option(
            "--holiday", "-H", "holidays",
            multiple=True,
            help="Additional holiday date (repeatable)",
        ),
        click.option(
            "--config", "-c",
            type=click.Path(exists=True),
            help="Path to config file (optional)",
        ),
        click.option(
            "--verbose", "-v",
            is_flag=True,
            default=False,
            help="Enable debug logging",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def export_options(func):
    """Output options for commands that produce a report."""
    func = click.option(
        "--output", "-o",
        type=click.Path(),
        help="Output file path (optional)",
    )(func)
    func = click.option(
        "--format", "-f", "output_format",
        type=click.Choice(["json", "csv", "both", "console"]),
        default=None,
        help="Output format (default: from config, console)",
    )(func)
    return func


def load_settings(config_path: Optional[str], verbose: bool) -> Config:
    """Load settings and configure the log level."""
    cfg = ConfigManager(config_path).load_config()
    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level)
    logging.getLogger().setLevel(level)
    return cfg


def build_calendar(
    cfg: Config,
    calendar_file: Optional[str],
    work_days: Optional[str],
    holidays: Sequence[str],
) -> WorkCalendar:
    """
    Build the effective calendar from settings and command line options.

    The --calendar file wins over the configured calendar file; --work-days
    replaces the work week; --holiday dates are added on top.
    """
    path = calendar_file or cfg.calendar_file
    calendar = load_calendar_file(path) if path else WorkCalendar()

    if work_days is not None:
        calendar.set_work_days(work_days)
    for holiday in holidays:
        calendar.add_holiday(parse_date(holiday))

    logger.debug(f"Effective calendar: {calendar!r}")
    return calendar


def emit_report(formatter, cfg, report, output_format, output, print_console):
    """Print and/or export a report."""
    output_format = output_format or cfg.output_format

    if output_format in ("console", "both"):
        print_console(report)

    if output_format in ("json", "csv", "both"):
        exporter = ResultExporter(output_directory=cfg.output_directory)

        if output_format == "json":
            path = exporter.export_json(report, output)
            formatter.print_success(f"Result saved to {path}")
        elif output_format == "csv":
            path = exporter.export_csv(report, output)
            formatter.print_success(f"Result saved to {path}")
        else:
            json_path, csv_path = exporter.export_both(report)
            formatter.print_success(f"Results saved to:\n  - {json_path}\n  - {csv_path}")


def fail(formatter: ConsoleFormatter, message: str) -> None:
    formatter.print_error(message)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="workdays")
def main():
    """Workdays - work-day arithmetic over a configurable calendar."""
    pass


@main.command()
@click.argument("start")
@click.argument("days", type=int)
@calendar_options
@export_options
def add(start, days, calendar_file, work_days, holidays, config, verbose, output_format, output):
    """Compute the date DAYS work days after START (before it if negative)."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_settings(config, verbose)
        calendar = build_calendar(cfg, calendar_file, work_days, holidays)
        report = WorkdayCalculator(calendar).end_date(parse_date(start), days)
        emit_report(formatter, cfg, report, output_format, output, formatter.print_end_date)

    except (WorkCalendarError, ValueError, FileNotFoundError) as e:
        fail(formatter, str(e))
    except Exception as e:
        logger.exception("Detailed error:")
        fail(formatter, f"Unexpected error: {e}")


@main.command()
@click.argument("start")
@click.argument("end")
@calendar_options
@export_options
def count(start, end, calendar_file, work_days, holidays, config, verbose, output_format, output):
    """Count work days from START (inclusive) to END (exclusive)."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_settings(config, verbose)
        calendar = build_calendar(cfg, calendar_file, work_days, holidays)
        report = WorkdayCalculator(calendar).count(parse_date(start), parse_date(end))
        emit_report(formatter, cfg, report, output_format, output, formatter.print_count)

    except (WorkCalendarError, ValueError, FileNotFoundError) as e:
        fail(formatter, str(e))
    except Exception as e:
        logger.exception("Detailed error:")
        fail(formatter, f"Unexpected error: {e}")


@main.command()
@click.argument("day")
@calendar_options
def check(day, calendar_file, work_days, holidays, config, verbose):
    """Check whether DAY is a work day."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_settings(config, verbose)
        calendar = build_calendar(cfg, calendar_file, work_days, holidays)
        formatter.print_check(WorkdayCalculator(calendar).check(parse_date(day)))

    except (WorkCalendarError, ValueError, FileNotFoundError) as e:
        fail(formatter, str(e))
    except Exception as e:
        logger.exception("Detailed error:")
        fail(formatter, f"Unexpected error: {e}")


@main.command()
@calendar_options
@click.option(
    "--dump", "-d",
    type=click.Choice(["yaml", "json"]),
    default=None,
    help="Print the calendar as configuration text instead of tables",
)
def show(calendar_file, work_days, holidays, config, verbose, dump):
    """Show the effective work calendar."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_settings(config, verbose)
        calendar = build_calendar(cfg, calendar_file, work_days, holidays)

        if dump:
            click.echo(dump_calendar_config(calendar.to_config(), dump), nl=False)
        else:
            formatter.print_calendar(calendar)

    except (WorkCalendarError, ValueError, FileNotFoundError) as e:
        fail(formatter, str(e))
    except Exception as e:
        logger.exception("Detailed error:")
        fail(formatter, f"Unexpected error: {e}")


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = ConfigManager(config).load_config()

        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "workdays.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        fail(formatter, "uvicorn is required for the API server. Install it with: pip install uvicorn")
    except Exception as e:
        fail(formatter, f"Error starting server: {e}")


if __name__ == "__main__":
    main()
