"""
Console output formatting using Rich.
"""

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from workdays.core.calendar import WorkCalendar
from workdays.core.weekday import Weekday
from workdays.data.schemas import EndDateReport, WorkDayCheckReport, WorkDayCountReport


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Console = None):
        """
        Initialize the console formatter.

        Args:
            console: Rich console to print to. A new one is created if not given.
        """
        self.console = console or Console()

    def print_end_date(self, report: EndDateReport) -> None:
        """
        Print the result of a work-day advance.

        Args:
            report: EndDateReport to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Work Day Advance[/bold blue]")
        self.console.print()

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=20)
        table.add_column("Value", style="white")

        direction = "forward" if report.days >= 0 else "backward"
        table.add_row("Start Date:", self._format_date(report.start_date))
        table.add_row("Work Days:", f"{abs(report.days)} ({direction})")
        table.add_row("Calendar Days:", str(report.calendar_days))
        table.add_row(
            Text("End Date:", style="bold green"),
            Text(self._format_date(report.end_date), style="bold green"),
        )

        self.console.print(Panel(table, title="[bold]Result[/bold]"))
        self._print_calendar_summary(report.work_days, report.holidays)
        self.console.print()

    def print_count(self, report: WorkDayCountReport) -> None:
        """
        Print the result of a work-day count.

        Args:
            report: WorkDayCountReport to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Work Day Count[/bold blue]")
        self.console.print()

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=20)
        table.add_column("Value", style="white")

        table.add_row(
            "Period:",
            f"{self._format_date(report.start_date)} - {self._format_date(report.end_date)} (end excluded)",
        )
        table.add_row("Calendar Days:", str(report.calendar_days))
        table.add_row("Holidays:", str(len(report.holidays_in_range)))
        table.add_row(
            Text("Work Days:", style="bold green"),
            Text(str(report.work_days_count), style="bold green"),
        )

        self.console.print(Panel(table, title="[bold]Calculation[/bold]"))
        if report.holidays_in_range:
            self.print_holidays(report.holidays_in_range)
        self.console.print()

    def print_check(self, report: WorkDayCheckReport) -> None:
        """Print whether a single date is a work day."""
        label = report.checked_date.isoformat()
        if report.is_work_day:
            self.console.print(f"[bold green]{label} ({report.weekday}) is a work day[/bold green]")
            return

        reasons = []
        if not report.is_work_weekday:
            reasons.append(f"{report.weekday} is not a work weekday")
        if report.is_holiday:
            reasons.append("it is a holiday")
        self.console.print(
            f"[bold yellow]{label} ({report.weekday}) is not a work day[/bold yellow]: "
            + " and ".join(reasons)
        )

    def print_calendar(self, calendar: WorkCalendar) -> None:
        """
        Print the work weekdays and holidays of a calendar.

        Args:
            calendar: Calendar to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Work Calendar[/bold blue]")
        self.console.print()

        week_table = Table(title="[bold]Work Week[/bold]")
        week_table.add_column("Day", style="cyan", width=12)
        week_table.add_column("Work Day", justify="center")

        for day in Weekday:
            working = calendar.is_work_day(day)
            week_table.add_row(
                day.full_name,
                "[green]yes[/green]" if working else "[dim]no[/dim]",
            )

        self.console.print(week_table)

        if calendar.holidays:
            self.print_holidays(calendar.holidays)
        else:
            self.console.print("[dim]No holidays defined.[/dim]")
        self.console.print()

    def print_holidays(self, holidays: Iterable) -> None:
        """
        Print a table of holidays.

        Args:
            holidays: Holiday dates to display.
        """
        holiday_table = Table(title="[bold]Holidays[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=12)

        for holiday in sorted(holidays):
            holiday_table.add_row(
                holiday.isoformat(),
                Weekday(holiday.weekday()).full_name,
            )

        self.console.print(holiday_table)

    def _print_calendar_summary(self, work_days, holidays) -> None:
        self.console.print(
            f"[dim]Work days: {', '.join(work_days) or 'none'} | "
            f"Holidays: {len(holidays)}[/dim]"
        )

    def _format_date(self, value) -> str:
        return f"{value.isoformat()} ({Weekday(value.weekday()).short_name})"

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
