"""
Weekday enum and token parsing.
"""

import re
from enum import IntEnum
from typing import FrozenSet

from workdays.core.exceptions import InvalidWeekdayError


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @property
    def full_name(self) -> str:
        return WEEKDAY_NAMES[self]

    @property
    def short_name(self) -> str:
        return WEEKDAY_NAMES[self][:3]


WEEKDAY_NAMES = {
    Weekday.MON: "Monday",
    Weekday.TUE: "Tuesday",
    Weekday.WED: "Wednesday",
    Weekday.THU: "Thursday",
    Weekday.FRI: "Friday",
    Weekday.SAT: "Saturday",
    Weekday.SUN: "Sunday",
}

# Full names and three-letter abbreviations, lowercased
_TOKEN_MAPPING = {name.lower(): day for day, name in WEEKDAY_NAMES.items()}
_TOKEN_MAPPING.update({name[:3].lower(): day for day, name in WEEKDAY_NAMES.items()})

_SPEC_DELIMITERS = re.compile(r"[,;]")

DEFAULT_WORK_DAYS: FrozenSet[Weekday] = frozenset(
    [Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI]
)


def parse_weekday(token: str) -> Weekday:
    """
    Resolve a weekday token to a Weekday.

    Accepts full names ("Monday") and three-letter abbreviations ("Mon"),
    case-insensitive, with surrounding whitespace ignored.

    Args:
        token: Weekday name or abbreviation.

    Returns:
        The matching Weekday.

    Raises:
        InvalidWeekdayError: If the token names no weekday.
    """
    if isinstance(token, Weekday):
        return token
    if not isinstance(token, str):
        raise InvalidWeekdayError(str(token))

    day = _TOKEN_MAPPING.get(token.strip().lower())
    if day is None:
        raise InvalidWeekdayError(token)
    return day


def parse_weekday_spec(spec: str) -> FrozenSet[Weekday]:
    """
    Parse a comma-separated weekday spec such as "Mon, Wed, friday".

    Empty tokens are skipped and duplicates collapse.

    Raises:
        InvalidWeekdayError: On the first token that names no weekday.
    """
    tokens = [token.strip() for token in _SPEC_DELIMITERS.split(spec)]
    return frozenset(parse_weekday(token) for token in tokens if token)


def format_weekdays(days) -> str:
    """Render weekdays as a spec string in week order, e.g. "Mon,Tue,Wed"."""
    return ",".join(day.short_name for day in sorted(days))
