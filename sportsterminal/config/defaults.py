"""Default configuration parameters for sportsterminal."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


ESPN_API_BASE = "https://site.api.espn.com/apis/site/v2/sports"


@dataclass(frozen=True)
class ApiParams:
    """ESPN API access parameters."""
    base_url: str = ESPN_API_BASE
    timeout_seconds: float = 10.0                    # Per-request timeout
    max_retries: int = 2                             # Retries after the first attempt
    retry_delay_seconds: float = 1.0                 # Pause between attempts
    user_agent: str = "sportsterminal/1.0"
    upcoming_days: int = 7                           # Window for upcoming games


@dataclass(frozen=True)
class UiParams:
    """Terminal UI parameters."""
    refresh_interval_seconds: int = 30               # Live game auto-refresh tick
    auto_refresh: bool = True
    max_plays: int = 20                              # Recent plays shown in detail
    max_stats: int = 12                              # Stat rows shown per team
    show_logos: bool = True
    input_timeout_ms: int = 200                      # Key poll interval


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False
    file: Optional[str] = None                       # None: default file in TUI mode


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    api: ApiParams
    ui: UiParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        api=ApiParams(),
        ui=UiParams(),
        logging=LoggingParams(),
    )


def default_config_path() -> Path:
    """Location of the user config file, honoring XDG_CONFIG_HOME."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "sportsterminal" / "config.yaml"


def default_log_path() -> Path:
    """Location of the TUI log file, honoring XDG_CACHE_HOME."""
    base = os.environ.get("XDG_CACHE_HOME") or str(Path.home() / ".cache")
    return Path(base) / "sportsterminal" / "sportsterminal.log"
