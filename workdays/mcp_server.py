"""
MCP Server for the work calendar.

This module provides an MCP (Model Context Protocol) server that exposes
work-day arithmetic to MCP clients.

Supports two transport modes:
- stdio: For local desktop client integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from datetime import date
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from workdays.config.manager import ConfigManager
from workdays.core.calculator import WorkdayCalculator
from workdays.core.calendar import WorkCalendar
from workdays.core.exceptions import WorkCalendarError

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()
default_calendar = config_manager.load_calendar(config)


def _build_calendar(work_days: Optional[str], holidays: Optional[List[str]]) -> WorkCalendar:
    calendar = default_calendar.copy()
    if work_days is not None:
        calendar.set_work_days(work_days)
    for holiday in holidays or []:
        calendar.add_holiday(date.fromisoformat(holiday))
    return calendar


def _parse_iso(value: str, field: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid {field}. Use YYYY-MM-DD. Details: {e}") from e


def compute_end_date(
    start_date: str,
    days: int,
    work_days: Optional[str] = None,
    holidays: Optional[List[str]] = None,
) -> dict:
    """
    Compute the date a number of work days after (or before) a start date.

    The start date itself is never counted, like the spreadsheet WORKDAY
    function: advancing 1 work day from a Friday lands on the next Monday.

    Args:
        start_date: Start date in format YYYY-MM-DD (e.g., "2023-08-21")
        days: Work days to advance; negative values count backwards
        work_days: Work weekdays, e.g. "Mon,Tue,Wed,Thu,Fri" (default calendar if omitted)
        holidays: Holiday dates in format YYYY-MM-DD

    Returns:
        Dictionary with:
        - start_date: The start date
        - days: Work days advanced
        - end_date: The computed end date
        - calendar_days: Calendar days between start and end (signed)

    Examples:
        Twenty work days after Monday 2023-08-21:
        >>> compute_end_date("2023-08-21", 20)
    """
    try:
        start = _parse_iso(start_date, "start_date")
        calendar = _build_calendar(work_days, holidays)
        report = WorkdayCalculator(calendar).end_date(start, days)
    except (WorkCalendarError, ValueError) as e:
        logger.error(f"compute_end_date failed: {e}")
        return {"error": str(e)}

    return {
        "start_date": report.start_date.isoformat(),
        "days": report.days,
        "end_date": report.end_date.isoformat(),
        "calendar_days": report.calendar_days,
        "work_days": report.work_days,
    }


def count_work_days(
    start_date: str,
    end_date: str,
    work_days: Optional[str] = None,
    holidays: Optional[List[str]] = None,
) -> dict:
    """
    Count work days from start_date (inclusive) to end_date (exclusive).

    Args:
        start_date: First date of the range, YYYY-MM-DD
        end_date: End of the range (not counted), YYYY-MM-DD
        work_days: Work weekdays, e.g. "Mon,Tue,Wed,Thu,Fri"
        holidays: Holiday dates in format YYYY-MM-DD

    Returns:
        Dictionary with work_days_count, calendar_days and the holidays in range.
    """
    try:
        start = _parse_iso(start_date, "start_date")
        end = _parse_iso(end_date, "end_date")
        calendar = _build_calendar(work_days, holidays)
        report = WorkdayCalculator(calendar).count(start, end)
    except (WorkCalendarError, ValueError) as e:
        logger.error(f"count_work_days failed: {e}")
        return {"error": str(e)}

    return {
        "start_date": report.start_date.isoformat(),
        "end_date": report.end_date.isoformat(),
        "work_days_count": report.work_days_count,
        "calendar_days": report.calendar_days,
        "holidays_in_range": [h.isoformat() for h in report.holidays_in_range],
    }


def check_work_day(
    checked_date: str,
    work_days: Optional[str] = None,
    holidays: Optional[List[str]] = None,
) -> dict:
    """
    Check whether a date is a work day.

    Args:
        checked_date: Date to check, YYYY-MM-DD
        work_days: Work weekdays, e.g. "Mon,Tue,Wed,Thu,Fri"
        holidays: Holiday dates in format YYYY-MM-DD

    Returns:
        Dictionary with is_work_day plus is_work_weekday and is_holiday.
    """
    try:
        day = _parse_iso(checked_date, "checked_date")
        calendar = _build_calendar(work_days, holidays)
        report = WorkdayCalculator(calendar).check(day)
    except (WorkCalendarError, ValueError) as e:
        logger.error(f"check_work_day failed: {e}")
        return {"error": str(e)}

    return {
        "checked_date": report.checked_date.isoformat(),
        "weekday": report.weekday,
        "is_work_day": report.is_work_day,
        "is_work_weekday": report.is_work_weekday,
        "is_holiday": report.is_holiday,
    }


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Workdays", host=host, port=port)

    mcp.tool()(compute_end_date)
    mcp.tool()(count_work_days)
    mcp.tool()(check_work_day)

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Workdays MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", "0.0.0.0"),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", "8080")),
        help="Port to listen on (SSE mode only, default: 8080)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    mcp = create_mcp_server(host=args.host, port=args.port)

    logger.info(f"Starting Workdays MCP server ({args.transport})")
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
