"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from workdays.core.calendar import WorkCalendar
from workdays.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    ENV_MAPPINGS = {
        "WORKDAYS_CALENDAR_FILE": "calendar_file",
        "WORKDAYS_OUTPUT_FORMAT": "output_format",
        "WORKDAYS_OUTPUT_DIRECTORY": "output_directory",
        "WORKDAYS_API_HOST": "api_host",
        "WORKDAYS_API_PORT": ("api_port", int),
        "WORKDAYS_LOG_LEVEL": "log_level",
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        return str(Path(__file__).parent / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        try:
            return Config(**config_dict)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}, using defaults")
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}") from e

        logger.debug(f"Loaded config from: {config_path}")
        if not config:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"Invalid configuration: expected a mapping in {config_path}")
        return self._flatten_config(config)

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        calendar = config.get("calendar") or {}
        if "file" in calendar:
            result["calendar_file"] = calendar["file"]

        output = config.get("output") or {}
        if "format" in output:
            result["output_format"] = output["format"]
        if "directory" in output:
            result["output_directory"] = output["directory"]

        api = config.get("api") or {}
        if "host" in api:
            result["api_host"] = api["host"]
        if "port" in api:
            result["api_port"] = api["port"]

        logging_section = config.get("logging") or {}
        if "level" in logging_section:
            result["log_level"] = logging_section["level"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - WORKDAYS_CALENDAR_FILE -> calendar_file
        - WORKDAYS_OUTPUT_FORMAT -> output_format
        - WORKDAYS_OUTPUT_DIRECTORY -> output_directory
        - WORKDAYS_API_HOST -> api_host
        - WORKDAYS_API_PORT -> api_port
        - WORKDAYS_LOG_LEVEL -> log_level

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        for env_var, mapping in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if isinstance(mapping, tuple):
                config_key, type_converter = mapping
                try:
                    config_dict[config_key] = type_converter(env_value)
                except ValueError:
                    logger.warning(f"Ignoring invalid value for {env_var}: {env_value!r}")
            else:
                config_dict[mapping] = env_value

        return config_dict

    def load_calendar(self, config: Optional[Config] = None) -> WorkCalendar:
        """
        Load the default calendar named by the settings.

        Args:
            config: Loaded settings. Loaded from file if not provided.

        Returns:
            Calendar read from ``calendar_file``, or the Monday to Friday
            calendar if no file is configured.

        Raises:
            FileNotFoundError: If the configured calendar file is missing.
            InvalidConfigurationError: If the calendar file is invalid.
        """
        config = config or self.load_config()
        if not config.calendar_file:
            return WorkCalendar()

        return load_calendar_file(config.calendar_file)

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "calendar": {
                "file": config.calendar_file,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
            "logging": {
                "level": config.log_level,
            },
        }

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)


def load_calendar_file(path: str) -> WorkCalendar:
    """
    Read a YAML or JSON calendar file.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidConfigurationError: If its contents are invalid.
    """
    calendar_path = Path(path)
    if not calendar_path.exists():
        raise FileNotFoundError(f"Calendar file not found: {calendar_path}")

    text = calendar_path.read_text(encoding="utf-8")
    logger.debug(f"Loading calendar from: {calendar_path}")
    return WorkCalendar.from_config(text)
