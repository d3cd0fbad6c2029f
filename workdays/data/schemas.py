"""
Data models for the work calendar using Pydantic.
"""

import re
from datetime import date, datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.json_schema import WithJsonSchema

from workdays.core.weekday import WEEKDAY_NAMES, Weekday, parse_weekday

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Weekdays travel as names in JSON; the integer enum values are not accepted.
WeekdayName = Annotated[
    Weekday,
    WithJsonSchema(
        {
            "type": "string",
            "enum": list(WEEKDAY_NAMES.values()) + [name[:3] for name in WEEKDAY_NAMES.values()],
            "description": "Weekday name or three-letter abbreviation, case-insensitive",
        }
    ),
]


class WorkCalendarConfig(BaseModel):
    """Structured fields of a calendar configuration (YAML or JSON)."""

    model_config = ConfigDict(extra="forbid")

    work_days: Optional[List[WeekdayName]] = Field(
        default=None, description="Work weekday names; Monday to Friday if omitted"
    )
    holidays: Optional[List[date]] = Field(
        default=None, description="Holiday dates in YYYY-MM-DD form"
    )

    @field_validator("work_days", mode="before")
    @classmethod
    def validate_work_days(cls, v):
        """Resolve weekday names and abbreviations to Weekday values."""
        if v is None:
            return v
        if not isinstance(v, (list, tuple)):
            raise ValueError("work_days must be a list of weekday names")
        return [parse_weekday(day) for day in v]

    @field_validator("holidays", mode="before")
    @classmethod
    def validate_holidays(cls, v):
        """Accept YYYY-MM-DD strings and plain dates only."""
        if v is None:
            return v
        if not isinstance(v, (list, tuple)):
            raise ValueError("holidays must be a list of YYYY-MM-DD dates")

        result = []
        for item in v:
            if isinstance(item, datetime):
                raise ValueError(f"Holiday must be a date without time: {item}")
            if isinstance(item, date):
                result.append(item)
            elif isinstance(item, str) and _ISO_DATE.match(item.strip()):
                result.append(date.fromisoformat(item.strip()))
            else:
                raise ValueError(f"Invalid holiday date {item!r}, expected YYYY-MM-DD")
        return result

    @field_serializer("work_days")
    def serialize_work_days(self, v: Optional[List[Weekday]]):
        if v is None:
            return None
        return [day.full_name for day in v]


class EndDateReport(BaseModel):
    """Result of advancing a date by a number of work days."""

    start_date: date = Field(..., description="Date the advance starts from")
    days: int = Field(..., description="Work days advanced; negative walks backwards")
    end_date: date = Field(..., description="Computed end date")
    calendar_days: int = Field(..., description="Signed calendar days from start to end")
    work_days: List[str] = Field(default_factory=list, description="Work weekdays of the calendar")
    holidays: List[date] = Field(default_factory=list, description="Holidays of the calendar")
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )


class WorkDayCountReport(BaseModel):
    """Result of counting work days in a date range."""

    start_date: date = Field(..., description="First date of the range (inclusive)")
    end_date: date = Field(..., description="End of the range (exclusive)")
    work_days_count: int = Field(..., ge=0, description="Work days in the range")
    calendar_days: int = Field(..., ge=0, description="Calendar days in the range")
    holidays_in_range: List[date] = Field(
        default_factory=list, description="Holidays falling inside the range"
    )
    work_days: List[str] = Field(default_factory=list, description="Work weekdays of the calendar")
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )


class WorkDayCheckReport(BaseModel):
    """Result of checking a single date."""

    checked_date: date = Field(..., description="Checked date")
    weekday: str = Field(..., description="Weekday name of the date")
    is_work_day: bool = Field(..., description="Whether the date is a work day")
    is_work_weekday: bool = Field(..., description="Whether its weekday is a work weekday")
    is_holiday: bool = Field(..., description="Whether the date is a holiday")


class Config(BaseModel):
    """Application settings."""

    calendar_file: Optional[str] = Field(
        default=None, description="Default calendar configuration file (YAML or JSON)"
    )
    output_format: str = Field(default="console", description="Default output format")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
    log_level: str = Field(default="WARNING", description="Default logging level")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        if v not in ("console", "json", "csv", "both"):
            raise ValueError("output_format must be one of: console, json, csv, both")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level
