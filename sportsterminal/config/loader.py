"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigError
from .defaults import (
    ApiParams,
    DefaultConfig,
    LoggingParams,
    UiParams,
    default_config_path,
    get_default_config,
)
from .validation import ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_path: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_path is None:
            config_path = default_config_path()

        return cls(
            config_path=Path(config_path).expanduser(),
            defaults=get_default_config(),
        )

    def load_user_config(self) -> dict[str, Any]:
        """Load the user config file; a missing file means no overrides."""
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path) as f:
                user_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(
                f"Cannot read config file {self.config_path}: {e}",
                path=str(self.config_path)
            ) from e

        if user_config is None:
            return {}

        if not isinstance(user_config, dict):
            raise ConfigError(
                f"Config file {self.config_path} must contain a mapping",
                path=str(self.config_path)
            )

        return user_config

    def merge_config(self, cli_overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Command-line overrides (highest priority)
        2. User config file
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_user_config())

        if cli_overrides:
            config = self._deep_merge(config, cli_overrides)

        return config

    def load(self, cli_overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and build the typed configuration."""
        merged = self.merge_config(cli_overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
            raise ConfigError(
                f"Invalid configuration: {details}",
                path=str(self.config_path),
                errors=errors
            )

        return DefaultConfig(
            api=ApiParams(**self._known_fields(ApiParams, merged.get("api", {}))),
            ui=UiParams(**self._known_fields(UiParams, merged.get("ui", {}))),
            logging=LoggingParams(**self._known_fields(LoggingParams, merged.get("logging", {}))),
        )

    def _known_fields(self, params_cls: type, values: dict[str, Any]) -> dict[str, Any]:
        """Drop keys the dataclass does not declare."""
        return {k: v for k, v in values.items() if k in params_cls.__dataclass_fields__}

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
