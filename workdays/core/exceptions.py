"""
Exceptions raised by the work calendar.
"""


class WorkCalendarError(Exception):
    """Base class for all work calendar errors."""


class InvalidWeekdayError(WorkCalendarError, ValueError):
    """A weekday token did not resolve to one of the seven weekdays."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid weekday: {token!r}")


class InvalidConfigurationError(WorkCalendarError, ValueError):
    """Calendar configuration text could not be parsed."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid calendar configuration: {detail}")


class NoWorkDaysDefinedError(WorkCalendarError):
    """The calendar has no work days, so no date can ever be reached."""

    def __init__(self):
        super().__init__("No work days defined")


class CalendarOverflowError(WorkCalendarError, OverflowError):
    """Date advancement ran past the representable date range."""
