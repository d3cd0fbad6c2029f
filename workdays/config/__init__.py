"""
Application settings.
"""

from workdays.config.manager import ConfigManager, load_calendar_file

__all__ = ["ConfigManager", "load_calendar_file"]
