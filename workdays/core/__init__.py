"""
Core work calendar logic.
"""

from workdays.core.exceptions import (
    CalendarOverflowError,
    InvalidConfigurationError,
    InvalidWeekdayError,
    NoWorkDaysDefinedError,
    WorkCalendarError,
)
from workdays.core.weekday import Weekday, parse_weekday, parse_weekday_spec
from workdays.core.calendar import EndDateResult, WorkCalendar
from workdays.core.calculator import WorkdayCalculator

__all__ = [
    "CalendarOverflowError",
    "EndDateResult",
    "InvalidConfigurationError",
    "InvalidWeekdayError",
    "NoWorkDaysDefinedError",
    "Weekday",
    "WorkCalendar",
    "WorkCalendarError",
    "WorkdayCalculator",
    "parse_weekday",
    "parse_weekday_spec",
]
