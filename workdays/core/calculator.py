"""
Builds report models from work calendar calculations.
"""

from datetime import date

from workdays.core.calendar import WorkCalendar
from workdays.core.weekday import Weekday
from workdays.data.schemas import EndDateReport, WorkDayCheckReport, WorkDayCountReport


class WorkdayCalculator:
    """Runs calendar operations and wraps their results in report models."""

    def __init__(self, calendar: WorkCalendar):
        """
        Initialize the workday calculator.

        Args:
            calendar: Calendar to calculate with.
        """
        self.calendar = calendar

    def _work_day_names(self):
        return [day.full_name for day in sorted(self.calendar.work_days)]

    def end_date(self, start_date: date, days: int) -> EndDateReport:
        """
        Advance start_date by a number of work days.

        Raises:
            NoWorkDaysDefinedError: If the calendar has no work weekdays.
            CalendarOverflowError: If the end date is out of range.
        """
        end, duration = self.calendar.compute_end_date(start_date, days)
        return EndDateReport(
            start_date=start_date,
            days=days,
            end_date=end,
            calendar_days=duration.days,
            work_days=self._work_day_names(),
            holidays=sorted(self.calendar.holidays),
        )

    def count(self, start_date: date, end_date: date) -> WorkDayCountReport:
        """Count work days from start_date (inclusive) to end_date (exclusive)."""
        work_days = self.calendar.num_work_days(start_date, end_date)
        calendar_days = max((end_date - start_date).days, 0)
        holidays_in_range = sorted(
            h for h in self.calendar.holidays if start_date <= h < end_date
        )
        return WorkDayCountReport(
            start_date=start_date,
            end_date=end_date,
            work_days_count=work_days.days,
            calendar_days=calendar_days,
            holidays_in_range=holidays_in_range,
            work_days=self._work_day_names(),
        )

    def check(self, day: date) -> WorkDayCheckReport:
        """Describe whether a date is a work day and why."""
        weekday = Weekday(day.weekday())
        return WorkDayCheckReport(
            checked_date=day,
            weekday=weekday.full_name,
            is_work_day=self.calendar.is_work_day(day),
            is_work_weekday=self.calendar.is_work_day(weekday),
            is_holiday=self.calendar.is_holiday(day),
        )
