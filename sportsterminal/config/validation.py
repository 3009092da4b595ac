"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_api_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate API parameters."""
        errors = []

        if "base_url" in params:
            value = params["base_url"]
            parsed = urlparse(value) if isinstance(value, str) else None
            if parsed is None or parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(ValidationError(
                    field="api.base_url",
                    message="Must be an http(s) URL",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="api.timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        if "max_retries" in params:
            value = params["max_retries"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="api.max_retries",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "retry_delay_seconds" in params:
            value = params["retry_delay_seconds"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="api.retry_delay_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "user_agent" in params:
            value = params["user_agent"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="api.user_agent",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "upcoming_days" in params:
            value = params["upcoming_days"]
            if not _is_int(value) or value < 1 or value > 31:
                errors.append(ValidationError(
                    field="api.upcoming_days",
                    message="Must be an integer between 1 and 31",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_ui_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate UI parameters."""
        errors = []

        for name in ("refresh_interval_seconds", "max_plays", "max_stats", "input_timeout_ms"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=f"ui.{name}",
                        message="Must be a positive integer",
                        value=value
                    ))

        for name in ("auto_refresh", "show_logos"):
            if name in params:
                value = params[name]
                if not isinstance(value, bool):
                    errors.append(ValidationError(
                        field=f"ui.{name}",
                        message="Must be a boolean",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="logging.format_json",
                    message="Must be a boolean",
                    value=value
                ))

        if "file" in params:
            value = params["file"]
            if value is not None and (not isinstance(value, str) or not value):
                errors.append(ValidationError(
                    field="logging.file",
                    message="Must be a path string or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in ("api", "ui", "logging"):
            if section in config and not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))

        if isinstance(config.get("api"), dict):
            errors.extend(ConfigValidator.validate_api_params(config["api"]))

        if isinstance(config.get("ui"), dict):
            errors.extend(ConfigValidator.validate_ui_params(config["ui"]))

        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
