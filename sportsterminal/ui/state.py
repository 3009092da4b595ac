"""
Navigation state models for the terminal UI.

This module defines the immutable view state the controller transforms and
the renderer draws, plus the commands the controller asks the app to run.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from ..api.models import Game, GameDetail, League, Sport

# Game card height including spacing, and lines reserved for title,
# status, help and margins on the games view.
LINES_PER_GAME = 11
RESERVED_GAME_LINES = 11

# Fixed detail header height and the lines kept for help and margins.
DETAIL_HEADER_LINES = 8
DETAIL_RESERVED_LINES = 4


class ViewState(str, Enum):
    """Screens in navigation order."""
    SPORTS = "sports"
    LEAGUES = "leagues"
    GAMES = "games"
    DETAIL = "detail"


@dataclass(frozen=True)
class LoadGames:
    """Fetch the scoreboard for a league."""
    sport_id: str
    league_id: str
    show_upcoming: bool
    generation: int


@dataclass(frozen=True)
class LoadDetail:
    """Fetch the summary for one event."""
    sport_id: str
    league_id: str
    event_id: str
    generation: int


@dataclass(frozen=True)
class Quit:
    """Leave the application."""


Command = Union[LoadGames, LoadDetail, Quit]


def visible_games(height: int) -> int:
    """Number of game cards that fit the viewport, never less than one."""
    available = height - RESERVED_GAME_LINES
    if available < LINES_PER_GAME:
        return 1
    return available // LINES_PER_GAME


def detail_viewport(height: int) -> int:
    """Lines available to the scrollable part of the detail view."""
    return max(1, height - DETAIL_HEADER_LINES - DETAIL_RESERVED_LINES)


@dataclass(frozen=True)
class NavigationState:
    """Everything the UI shows, as an immutable snapshot."""

    view: ViewState = ViewState.SPORTS

    # Selection
    sport: Optional[Sport] = None
    league: Optional[League] = None

    # Cursors and scroll offsets
    sport_cursor: int = 0
    league_cursor: int = 0
    game_cursor: int = 0
    game_scroll: int = 0
    detail_scroll: int = 0

    # Loaded data
    games: tuple[Game, ...] = field(default_factory=tuple)
    detail: Optional[GameDetail] = None

    # Fetch status
    loading: bool = False
    loading_detail: bool = False
    show_upcoming: bool = False
    error: Optional[str] = None
    last_update: Optional[datetime] = None
    # Bumped on every fetch so late responses for abandoned views are dropped
    generation: int = 0

    auto_refresh: bool = True

    # Viewport
    width: int = 0
    height: int = 0

    @property
    def has_live_games(self) -> bool:
        """True if any loaded game is in progress."""
        return any(game.is_live for game in self.games)

    def with_size(self, width: int, height: int) -> 'NavigationState':
        """Record a new viewport size, keeping the game cursor visible."""
        resized = replace(self, width=width, height=height)
        return resized.with_game_cursor(resized.game_cursor)

    def with_game_cursor(self, cursor: int) -> 'NavigationState':
        """Move the game cursor and slide the scroll window to contain it."""
        window = visible_games(self.height)
        scroll = self.game_scroll
        if cursor < scroll:
            scroll = cursor
        elif cursor >= scroll + window:
            scroll = cursor - window + 1
        return replace(self, game_cursor=cursor, game_scroll=max(0, scroll))

    def with_games_loading(self) -> 'NavigationState':
        """Start a scoreboard fetch under a new generation."""
        return replace(self, loading=True, error=None, generation=self.generation + 1)

    def with_detail_loading(self) -> 'NavigationState':
        """Start a summary fetch under a new generation."""
        return replace(
            self,
            loading_detail=True,
            detail=None,
            detail_scroll=0,
            error=None,
            generation=self.generation + 1
        )
