"""
Export functionality for work calendar reports.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

from workdays.data.schemas import EndDateReport, WorkDayCountReport

Report = Union[EndDateReport, WorkDayCountReport]


class ResultExporter:
    """Exports work calendar reports to JSON and CSV."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, report: Report, extension: str, output_path: Optional[str]) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path

        prefix = "end_date" if isinstance(report, EndDateReport) else "work_day_count"
        return self._ensure_output_dir() / self._generate_filename(prefix, extension)

    def export_json(self, report: Report, output_path: Optional[str] = None) -> str:
        """
        Export a report to a JSON file.

        Args:
            report: Report to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(report, "json", output_path)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self._report_to_dict(report), f, indent=2, ensure_ascii=False)

        return str(file_path)

    def export_csv(self, report: Report, output_path: Optional[str] = None) -> str:
        """
        Export a report to a CSV file with one header row and one data row.

        Args:
            report: Report to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(report, "csv", output_path)
        header, row = self._report_to_row(report)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(header)
            writer.writerow(row)

        return str(file_path)

    def export_both(self, report: Report) -> Tuple[str, str]:
        """
        Export a report to both JSON and CSV.

        Returns:
            Tuple of (json_path, csv_path).
        """
        json_path = self.export_json(report)
        csv_path = self.export_csv(report)
        return json_path, csv_path

    def _report_to_dict(self, report: Report) -> dict:
        """
        Convert a report to a JSON-serializable dictionary.

        Args:
            report: Report to convert.

        Returns:
            Dictionary representation.
        """
        if isinstance(report, EndDateReport):
            calculation = {
                "start_date": report.start_date.isoformat(),
                "days": report.days,
                "end_date": report.end_date.isoformat(),
                "calendar_days": report.calendar_days,
            }
            holidays = report.holidays
        else:
            calculation = {
                "start_date": report.start_date.isoformat(),
                "end_date": report.end_date.isoformat(),
                "calendar_days": report.calendar_days,
                "work_days_count": report.work_days_count,
            }
            holidays = report.holidays_in_range

        return {
            "calculation": calculation,
            "calendar": {
                "work_days": list(report.work_days),
                "holidays": [h.isoformat() for h in holidays],
            },
            "metadata": {
                "calculation_timestamp": report.calculation_timestamp.isoformat(),
            },
        }

    def _report_to_row(self, report: Report) -> Tuple[List[str], list]:
        work_days = ",".join(report.work_days)
        if isinstance(report, EndDateReport):
            header = ["Start Date", "Work Days", "End Date", "Calendar Days", "Work Week", "Holidays"]
            row = [
                report.start_date.isoformat(),
                report.days,
                report.end_date.isoformat(),
                report.calendar_days,
                work_days,
                len(report.holidays),
            ]
        else:
            header = ["Start Date", "End Date", "Calendar Days", "Work Days Count", "Work Week", "Holidays"]
            row = [
                report.start_date.isoformat(),
                report.end_date.isoformat(),
                report.calendar_days,
                report.work_days_count,
                work_days,
                len(report.holidays_in_range),
            ]
        return header, row
