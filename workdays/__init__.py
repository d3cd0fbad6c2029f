"""
workdays
~~~~~~~~

Work-day arithmetic over a configurable calendar, in the spirit of the
spreadsheet WORKDAY function.

Basic usage::

    from datetime import date
    from workdays import WorkCalendar

    calendar = WorkCalendar()                    # Mon-Fri, no holidays
    calendar.add_holiday(date(2023, 12, 25))
    calendar.set_work_days("Mon,Tue,Wed,Thu,Fri")

    end_date, duration = calendar.compute_end_date(date(2023, 8, 21), 20)
    # end_date == date(2023, 9, 18), duration.days == 28
"""

from workdays.core import (
    CalendarOverflowError,
    EndDateResult,
    InvalidConfigurationError,
    InvalidWeekdayError,
    NoWorkDaysDefinedError,
    Weekday,
    WorkCalendar,
    WorkCalendarError,
    parse_weekday,
    parse_weekday_spec,
)
from workdays.data import WorkCalendarConfig, dump_calendar_config, parse_calendar_config

__version__ = "0.1.0"

__all__ = [
    "CalendarOverflowError",
    "EndDateResult",
    "InvalidConfigurationError",
    "InvalidWeekdayError",
    "NoWorkDaysDefinedError",
    "Weekday",
    "WorkCalendar",
    "WorkCalendarConfig",
    "WorkCalendarError",
    "dump_calendar_config",
    "parse_calendar_config",
    "parse_weekday",
    "parse_weekday_spec",
]
