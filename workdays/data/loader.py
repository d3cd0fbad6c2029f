"""
Loading and dumping calendar configuration text (YAML or JSON).
"""

import json
import logging
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from workdays.core.exceptions import InvalidConfigurationError
from workdays.data.schemas import WorkCalendarConfig

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("yaml", "json")


def detect_format(text: str) -> str:
    """Text starting with "{" is JSON, anything else is YAML."""
    return "json" if text.lstrip().startswith("{") else "yaml"


def _load_document(text: str, fmt: str) -> Any:
    if fmt == "json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidConfigurationError(f"Error parsing JSON: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(f"Error parsing YAML: {e}") from e


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        messages.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(messages)


def parse_calendar_config(text: str) -> WorkCalendarConfig:
    """
    Parse calendar configuration text into a WorkCalendarConfig.

    Recognized fields are ``work_days`` (list of weekday names) and
    ``holidays`` (list of YYYY-MM-DD dates); both are optional.

    Args:
        text: YAML or JSON configuration text.

    Returns:
        Validated WorkCalendarConfig.

    Raises:
        InvalidConfigurationError: If the text is empty, malformed, not a
            mapping, or contains unknown fields or invalid values.
    """
    if not isinstance(text, str):
        raise InvalidConfigurationError(
            f"Expected configuration text, got {type(text).__name__}"
        )

    fmt = detect_format(text)
    document = _load_document(text, fmt)

    if document is None:
        raise InvalidConfigurationError("Configuration is empty")
    if not isinstance(document, dict):
        raise InvalidConfigurationError(
            f"Configuration must be a mapping, got {type(document).__name__}"
        )

    try:
        config = WorkCalendarConfig(**_normalize_keys(document))
    except ValidationError as e:
        raise InvalidConfigurationError(_format_validation_error(e)) from e

    work_day_count = "default" if config.work_days is None else len(config.work_days)
    logger.debug(
        f"Loaded {fmt} calendar config: {work_day_count} work days, "
        f"{len(config.holidays or [])} holidays"
    )
    return config


def _normalize_keys(document: Dict[Any, Any]) -> Dict[str, Any]:
    result = {}
    for key, value in document.items():
        if not isinstance(key, str):
            raise InvalidConfigurationError(f"Invalid field name: {key!r}")
        result[key] = value
    return result


def dump_calendar_config(config: WorkCalendarConfig, fmt: str = "yaml") -> str:
    """
    Serialize a calendar configuration to YAML or JSON text.

    The output can be read back with parse_calendar_config.

    Args:
        config: Configuration to serialize.
        fmt: "yaml" or "json".

    Returns:
        Configuration text.
    """
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported format: {fmt}. Use one of: {', '.join(SUPPORTED_FORMATS)}")

    data = config.model_dump(mode="json", exclude_none=True)
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    return yaml.dump(data, default_flow_style=False, sort_keys=False)
