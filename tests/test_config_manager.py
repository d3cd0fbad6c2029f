"""
Tests for the configuration manager.
"""

from datetime import date

import pytest
import yaml

from workdays.config.manager import ConfigManager, load_calendar_file
from workdays.core.calendar import WorkCalendar
from workdays.core.exceptions import InvalidConfigurationError
from workdays.core.weekday import Weekday
from workdays.data.schemas import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove WORKDAYS_* overrides from the environment."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def settings_file(tmp_path):
    """Create a nested settings file."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        yaml.dump(
            {
                "output": {"format": "json", "directory": "out"},
                "api": {"host": "127.0.0.1", "port": 9000},
                "logging": {"level": "info"},
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def calendar_file(tmp_path):
    """Create a YAML calendar file."""
    path = tmp_path / "calendar.yaml"
    path.write_text(
        "work_days: [Mon, Tue, Wed]\nholidays: [2023-12-25]\n",
        encoding="utf-8",
    )
    return path


class TestLoadConfig:
    """Tests for loading settings."""

    def test_packaged_defaults(self):
        """Test the settings shipped with the package."""
        config = ConfigManager().load_config()

        assert config.calendar_file is None
        assert config.output_format == "console"
        assert config.api_port == 8000
        assert config.log_level == "WARNING"

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test that a missing settings file falls back to defaults."""
        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert config == Config()

    def test_nested_sections(self, settings_file):
        """Test that nested YAML sections are flattened."""
        config = ConfigManager(str(settings_file)).load_config()

        assert config.output_format == "json"
        assert config.output_directory == "out"
        assert config.api_host == "127.0.0.1"
        assert config.api_port == 9000
        assert config.log_level == "INFO"

    def test_env_overrides(self, settings_file, monkeypatch):
        """Test that environment variables win over the file."""
        monkeypatch.setenv("WORKDAYS_API_PORT", "9100")
        monkeypatch.setenv("WORKDAYS_OUTPUT_FORMAT", "csv")
        monkeypatch.setenv("WORKDAYS_CALENDAR_FILE", "/tmp/calendar.yaml")

        config = ConfigManager(str(settings_file)).load_config()

        assert config.api_port == 9100
        assert config.output_format == "csv"
        assert config.calendar_file == "/tmp/calendar.yaml"

    def test_invalid_env_value_is_ignored(self, settings_file, monkeypatch):
        """Test that an unparsable port override keeps the file value."""
        monkeypatch.setenv("WORKDAYS_API_PORT", "not-a-port")

        config = ConfigManager(str(settings_file)).load_config()

        assert config.api_port == 9000

    def test_invalid_value_raises(self, tmp_path):
        """Test that invalid settings raise ValueError."""
        path = tmp_path / "settings.yaml"
        path.write_text("output:\n  format: pdf\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(str(path)).load_config()

    def test_invalid_yaml_raises(self, tmp_path):
        """Test that malformed YAML raises ValueError."""
        path = tmp_path / "settings.yaml"
        path.write_text("output: [json\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            ConfigManager(str(path)).load_config()

    def test_save_and_reload(self, tmp_path):
        """Test that saved settings load back unchanged."""
        path = tmp_path / "nested" / "settings.yaml"
        config = Config(output_format="both", api_port=8123, calendar_file="cal.yaml")

        manager = ConfigManager(str(path))
        manager.save_config(config)

        assert manager.load_config() == config


class TestLoadCalendar:
    """Tests for loading the default calendar."""

    def test_no_calendar_file(self):
        """Test the Monday to Friday fallback."""
        calendar = ConfigManager().load_calendar(Config())

        assert calendar == WorkCalendar()

    def test_configured_calendar_file(self, calendar_file):
        """Test reading the configured calendar file."""
        calendar = ConfigManager().load_calendar(Config(calendar_file=str(calendar_file)))

        assert calendar.work_days == {Weekday.MON, Weekday.TUE, Weekday.WED}
        assert calendar.is_holiday(date(2023, 12, 25))

    def test_missing_calendar_file(self, tmp_path):
        """Test that a missing calendar file is reported."""
        with pytest.raises(FileNotFoundError):
            load_calendar_file(str(tmp_path / "missing.yaml"))

    def test_invalid_calendar_file(self, tmp_path):
        """Test that an invalid calendar file raises a configuration error."""
        path = tmp_path / "calendar.json"
        path.write_text('{"work_days": ["Caturday"]}', encoding="utf-8")

        with pytest.raises(InvalidConfigurationError):
            load_calendar_file(str(path))
