"""
Data models and configuration loading for the work calendar.
"""

from workdays.data.schemas import (
    Config,
    EndDateReport,
    WorkCalendarConfig,
    WorkDayCheckReport,
    WorkDayCountReport,
)
from workdays.data.loader import dump_calendar_config, parse_calendar_config

__all__ = [
    "Config",
    "EndDateReport",
    "WorkCalendarConfig",
    "WorkDayCheckReport",
    "WorkDayCountReport",
    "dump_calendar_config",
    "parse_calendar_config",
]
