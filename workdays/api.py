"""
FastAPI REST API for the work calendar.
"""

import logging
from datetime import date
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from workdays import __version__
from workdays.config.manager import ConfigManager
from workdays.core.calculator import WorkdayCalculator
from workdays.core.calendar import WorkCalendar
from workdays.core.exceptions import (
    CalendarOverflowError,
    NoWorkDaysDefinedError,
    WorkCalendarError,
)
from workdays.data.schemas import (
    EndDateReport,
    WorkCalendarConfig,
    WorkDayCheckReport,
    WorkDayCountReport,
)

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()
default_calendar = config_manager.load_calendar(config)


# API Models
class EndDateRequest(BaseModel):
    """Request model for advancing a date by work days."""

    start_date: date = Field(..., description="Date to count from (never counted itself)")
    days: int = Field(..., description="Work days to advance; negative walks backwards")
    calendar: Optional[WorkCalendarConfig] = Field(
        None, description="Calendar to use; the server default if omitted"
    )


class CountRequest(BaseModel):
    """Request model for counting work days."""

    start_date: date = Field(..., description="First date of the range (inclusive)")
    end_date: date = Field(..., description="End of the range (exclusive)")
    calendar: Optional[WorkCalendarConfig] = Field(
        None, description="Calendar to use; the server default if omitted"
    )


class CheckRequest(BaseModel):
    """Request model for checking a single date."""

    checked_date: date = Field(..., description="Date to check")
    calendar: Optional[WorkCalendarConfig] = Field(
        None, description="Calendar to use; the server default if omitted"
    )


def resolve_calendar(calendar_config: Optional[WorkCalendarConfig]) -> WorkCalendar:
    """Build a fresh calendar for one request."""
    if calendar_config is None:
        return default_calendar.copy()
    return WorkCalendar.from_config_model(calendar_config)


# FastAPI app
app = FastAPI(
    title="Workdays API",
    description="Work-day arithmetic over a configurable calendar",
    version=__version__,
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Workdays API",
        "version": __version__,
        "endpoints": {
            "POST /end-date": "Advance a date by a number of work days",
            "POST /count": "Count work days in a date range",
            "POST /check": "Check whether a date is a work day",
            "GET /calendar": "Show the default calendar",
        },
    }


@app.post("/end-date", response_model=EndDateReport)
def compute_end_date(request: EndDateRequest):
    """
    Advance start_date by a number of work days.

    The start date is never counted; the result is the n-th work day after
    it, or before it when days is negative.
    """
    calendar = resolve_calendar(request.calendar)
    try:
        return WorkdayCalculator(calendar).end_date(request.start_date, request.days)
    except NoWorkDaysDefinedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CalendarOverflowError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except WorkCalendarError as e:
        logger.error(f"End date calculation failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/count", response_model=WorkDayCountReport)
def count_work_days(request: CountRequest):
    """Count work days from start_date (inclusive) to end_date (exclusive)."""
    calendar = resolve_calendar(request.calendar)
    return WorkdayCalculator(calendar).count(request.start_date, request.end_date)


@app.post("/check", response_model=WorkDayCheckReport)
def check_work_day(request: CheckRequest):
    """Check whether a date is a work day."""
    calendar = resolve_calendar(request.calendar)
    return WorkdayCalculator(calendar).check(request.checked_date)


@app.get("/calendar", response_model=WorkCalendarConfig)
async def get_default_calendar():
    """Show the server's default calendar."""
    return default_calendar.to_config()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
