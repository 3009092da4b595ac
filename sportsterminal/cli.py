"""Command-line entry point."""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from . import __version__
from .api.client import ESPNClient
from .api.models import AVAILABLE_SPORTS, find_league
from .config.defaults import DefaultConfig, default_log_path
from .config.loader import ConfigLoader
from .config.validation import VALID_LOG_LEVELS
from .errors import ApiError, ConfigError, SportsTerminalError
from .logging.config import configure_logging, get_logger
from .ui.app import ensure_terminal, run_tui
from .ui.render import render_scoreboard_text

logger = get_logger(__name__)

LEAGUE_IDS = [league.id for sport in AVAILABLE_SPORTS for league in sport.leagues]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sportsterminal",
        description="Live sports scores in your terminal",
    )
    parser.add_argument("-v", "--version", action="store_true", help="Print the version and exit")
    parser.add_argument("--config", type=Path, help="Config file (default: $XDG_CONFIG_HOME/sportsterminal/config.yaml)")
    parser.add_argument("--log-level", type=str.upper, choices=VALID_LOG_LEVELS, help="Override the log level")
    parser.add_argument("--log-file", type=str, help="Write logs to this file")
    parser.add_argument("--league", choices=LEAGUE_IDS, metavar="LEAGUE",
                        help=f"Print one league's scoreboard and exit ({', '.join(LEAGUE_IDS)})")
    parser.add_argument("--upcoming", action="store_true", help="With --league, show upcoming games")
    return parser


def cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Config overrides taken from command-line flags."""
    overrides: dict[str, Any] = {}
    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level
    if args.log_file:
        overrides.setdefault("logging", {})["file"] = args.log_file
    return overrides


def print_scoreboard(config: DefaultConfig, league_id: str, upcoming: bool,
                     client: Optional[ESPNClient] = None) -> int:
    """Non-interactive mode: print a scoreboard and return the exit status."""
    sport, league = find_league(league_id)
    client = client or ESPNClient(config.api)
    try:
        games = client.get_games(sport.id, league.id, show_upcoming=upcoming)
    except ApiError as e:
        logger.error("Scoreboard fetch failed", league=league.id, error=str(e))
        print(f"Error: {e}")
        return 1

    title = f"{sport.name} - {league.name}" + (" (upcoming)" if upcoming else "")
    sys.stdout.write(render_scoreboard_text(games, title))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"sportsterminal version {__version__}")
        return 0

    if args.upcoming and not args.league:
        parser.error("--upcoming requires --league")

    interactive = args.league is None
    error_prefix = "Error running program" if interactive else "Error"

    try:
        config = ConfigLoader.create(args.config).load(cli_overrides(args))

        if interactive:
            ensure_terminal()
            log_file = config.logging.file or str(default_log_path())
        else:
            log_file = config.logging.file

        try:
            configure_logging(
                level=config.logging.level,
                format_json=config.logging.format_json,
                log_file=log_file,
            )
        except OSError as e:
            raise ConfigError(f"cannot open log file {log_file}: {e}", path=log_file) from e

        if not interactive:
            return print_scoreboard(config, args.league, args.upcoming)

        run_tui(config)
        return 0

    except SportsTerminalError as e:
        print(f"{error_prefix}: {e}")
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
