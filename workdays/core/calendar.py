"""
Work calendar: work-day tests, counting and date advancement.
"""

import logging
import operator
from datetime import date, datetime, timedelta
from typing import FrozenSet, Iterable, NamedTuple, Optional, Union

from workdays.core.exceptions import (
    CalendarOverflowError,
    NoWorkDaysDefinedError,
)
from workdays.core.weekday import (
    DEFAULT_WORK_DAYS,
    Weekday,
    format_weekdays,
    parse_weekday,
    parse_weekday_spec,
)

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)

# Upper bound on single-day steps: the whole representable date range
MAX_WALK_DAYS = (date.max - date.min).days + 1


class EndDateResult(NamedTuple):
    """End date of a work-day advance and the calendar days it spans."""

    end_date: date
    calendar_duration: timedelta


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TypeError(f"Expected a date, got {type(value).__name__}")
    return value


class WorkCalendar:
    """
    A set of work weekdays plus a set of holiday dates.

    A date is a work day when its weekday is a work weekday and it is not a
    holiday. New calendars work Monday to Friday and have no holidays.
    """

    def __init__(
        self,
        work_days: Optional[Iterable[Union[Weekday, str]]] = None,
        holidays: Optional[Iterable[date]] = None,
    ):
        """
        Initialize the calendar.

        Args:
            work_days: Work weekdays (Weekday values or weekday tokens), or a
                comma-separated string such as "Mon,Tue". Defaults to Monday
                to Friday.
            holidays: Holiday dates. Defaults to none.
        """
        if work_days is None:
            self._work_days = set(DEFAULT_WORK_DAYS)
        elif isinstance(work_days, str):
            self._work_days = set(parse_weekday_spec(work_days))
        else:
            self._work_days = {parse_weekday(day) for day in work_days}
        self._holidays = {_as_date(d) for d in holidays or ()}

    # -- configuration -------------------------------------------------

    @classmethod
    def from_config(cls, text: str) -> "WorkCalendar":
        """
        Build a calendar from YAML or JSON configuration text.

        Example::

            work_days:
              - Monday
              - Wednesday
            holidays:
              - 2023-12-25

        Raises:
            InvalidConfigurationError: If the text cannot be parsed.
        """
        from workdays.data.loader import parse_calendar_config

        return cls.from_config_model(parse_calendar_config(text))

    @classmethod
    def from_config_model(cls, config) -> "WorkCalendar":
        """Build a calendar from a parsed WorkCalendarConfig."""
        return cls(work_days=config.work_days, holidays=config.holidays)

    def to_config(self):
        """Return the calendar's fields as a WorkCalendarConfig."""
        from workdays.data.schemas import WorkCalendarConfig

        return WorkCalendarConfig(
            work_days=sorted(self._work_days),
            holidays=sorted(self._holidays),
        )

    def copy(self) -> "WorkCalendar":
        return WorkCalendar(work_days=self._work_days, holidays=self._holidays)

    # -- mutation ------------------------------------------------------

    def add_holiday(self, holiday: date) -> None:
        self._holidays.add(_as_date(holiday))

    def remove_holiday(self, holiday: date) -> None:
        self._holidays.discard(_as_date(holiday))

    def add_work_day(self, day: Union[Weekday, str]) -> None:
        self._work_days.add(parse_weekday(day))

    def remove_work_day(self, day: Union[Weekday, str]) -> None:
        self._work_days.discard(parse_weekday(day))

    def set_work_days(self, spec: str) -> None:
        """
        Replace the work weekdays from a comma-separated spec.

        Tokens may be full names or three-letter abbreviations in any case,
        e.g. "mon,Tue, Wednesday". The calendar is left unchanged if any
        token is invalid.

        Raises:
            InvalidWeekdayError: If a token names no weekday.
        """
        new_work_days = parse_weekday_spec(spec)
        self._work_days = set(new_work_days)
        logger.debug(f"Work days set to {format_weekdays(new_work_days) or '<none>'}")

    # -- queries -------------------------------------------------------

    @property
    def work_days(self) -> FrozenSet[Weekday]:
        return frozenset(self._work_days)

    @property
    def holidays(self) -> FrozenSet[date]:
        return frozenset(self._holidays)

    def is_holiday(self, value: date) -> bool:
        return _as_date(value) in self._holidays

    def is_work_day(self, value: Union[Weekday, str, date]) -> bool:
        """
        Check whether a weekday or a date is a work day.

        A weekday (Weekday or token) is only checked against the work
        weekdays. A date must also not be a holiday.
        """
        if isinstance(value, (Weekday, str)):
            return parse_weekday(value) in self._work_days
        if isinstance(value, date):
            day = _as_date(value)
            return day.weekday() in self._work_days and day not in self._holidays
        raise TypeError(f"Expected a Weekday or a date, got {type(value).__name__}")

    def num_work_days(self, start: date, end: date) -> timedelta:
        """
        Count the work days from start (inclusive) to end (exclusive).

        Returns:
            The count as a timedelta of that many days; zero if end <= start.
        """
        start, end = _as_date(start), _as_date(end)
        count = 0
        current = start
        while current < end:
            if self.is_work_day(current):
                count += 1
            current += ONE_DAY
        return timedelta(days=count)

    def work_days_between(self, start: date, end: date) -> int:
        """Count the work days from start to end, both inclusive."""
        start, end = _as_date(start), _as_date(end)
        if end < start:
            return 0
        count = self.num_work_days(start, end).days
        return count + 1 if self.is_work_day(end) else count

    # -- advancement ---------------------------------------------------

    def compute_end_date(self, start: date, days: int) -> EndDateResult:
        """
        Advance start by a number of work days.

        The start date itself is never counted: the result is the date of
        the n-th work day after start, or before it when days is negative.

        Args:
            start: Date to count from.
            days: Work days to advance; negative walks backwards.

        Returns:
            EndDateResult(end_date, calendar_duration), where the duration is
            end_date - start in calendar days.

        Raises:
            NoWorkDaysDefinedError: If the calendar has no work weekdays.
            CalendarOverflowError: If the walk leaves the representable date range.
        """
        if not self._work_days:
            raise NoWorkDaysDefinedError()

        start = _as_date(start)
        days = operator.index(days)
        if days == 0:
            return EndDateResult(start, timedelta(0))
        if abs(days) > MAX_WALK_DAYS:
            raise CalendarOverflowError(
                f"Cannot advance {days} work days within the supported date range"
            )

        step = ONE_DAY if days > 0 else -ONE_DAY
        remaining = abs(days)
        current = start
        for _ in range(MAX_WALK_DAYS):
            try:
                current += step
            except OverflowError as e:
                raise CalendarOverflowError(
                    f"Advancing {days} work days from {start.isoformat()} "
                    f"leaves the supported date range"
                ) from e
            if self.is_work_day(current):
                remaining -= 1
                if remaining == 0:
                    logger.debug(
                        f"Advanced {days} work days from {start.isoformat()} to {current.isoformat()}"
                    )
                    return EndDateResult(current, current - start)

        raise CalendarOverflowError(
            f"No end date found within {MAX_WALK_DAYS} calendar days"
        )

    # -- dunder --------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, WorkCalendar):
            return NotImplemented
        return self._work_days == other._work_days and self._holidays == other._holidays

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"WorkCalendar(work_days={format_weekdays(self._work_days)!r}, "
            f"holidays={len(self._holidays)})"
        )
