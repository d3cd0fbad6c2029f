"""
Output formatting and export functionality.
"""

from workdays.output.formatter import ConsoleFormatter
from workdays.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
