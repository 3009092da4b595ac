"""
Key and message handling for the terminal UI.

Handlers take the current NavigationState and return the next state along
with the commands (fetches, quit) the app should run. They never block and
never perform I/O, which keeps the whole interaction model testable.
"""

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..api.models import AVAILABLE_SPORTS, Game, GameDetail
from ..config.defaults import UiParams
from ..logging.config import get_ui_logger, log_view_transition
from ..utils.time import now_utc
from .render import detail_content_lines
from .state import (
    Command,
    LoadDetail,
    LoadGames,
    NavigationState,
    Quit,
    ViewState,
    detail_viewport,
)

logger = get_ui_logger(__name__)

QUIT_KEYS = ("ctrl+c", "q")
BACK_KEYS = ("esc", "backspace")
UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")
SELECT_KEYS = ("enter", "right", "l")

Result = tuple[NavigationState, list[Command]]


def _load_games(state: NavigationState) -> Result:
    loading = state.with_games_loading()
    assert loading.sport is not None and loading.league is not None
    return loading, [LoadGames(
        sport_id=loading.sport.id,
        league_id=loading.league.id,
        show_upcoming=loading.show_upcoming,
        generation=loading.generation,
    )]


def _max_detail_scroll(state: NavigationState, ui: Optional[UiParams]) -> int:
    if state.detail is None:
        return 0
    content = detail_content_lines(state.detail, ui)
    return max(0, len(content) - detail_viewport(state.height))


def _back(state: NavigationState) -> Result:
    if state.view == ViewState.LEAGUES:
        return replace(state, view=ViewState.SPORTS, league_cursor=0), []
    if state.view == ViewState.GAMES:
        return replace(
            state,
            view=ViewState.LEAGUES,
            game_cursor=0,
            game_scroll=0,
            games=(),
            loading=False,
            error=None,
            # Drop any scoreboard still in flight
            generation=state.generation + 1
        ), []
    if state.view == ViewState.DETAIL:
        return replace(
            state,
            view=ViewState.GAMES,
            detail=None,
            detail_scroll=0,
            loading_detail=False,
            error=None,
            generation=state.generation + 1
        ), []
    return state, []


def _up(state: NavigationState) -> NavigationState:
    if state.view == ViewState.SPORTS and state.sport_cursor > 0:
        return replace(state, sport_cursor=state.sport_cursor - 1)
    if state.view == ViewState.LEAGUES and state.league_cursor > 0:
        return replace(state, league_cursor=state.league_cursor - 1)
    if state.view == ViewState.GAMES and state.game_cursor > 0:
        return state.with_game_cursor(state.game_cursor - 1)
    if state.view == ViewState.DETAIL and state.detail_scroll > 0:
        return replace(state, detail_scroll=state.detail_scroll - 1)
    return state


def _down(state: NavigationState, ui: Optional[UiParams]) -> NavigationState:
    if state.view == ViewState.SPORTS and state.sport_cursor < len(AVAILABLE_SPORTS) - 1:
        return replace(state, sport_cursor=state.sport_cursor + 1)
    if (state.view == ViewState.LEAGUES and state.sport is not None
            and state.league_cursor < len(state.sport.leagues) - 1):
        return replace(state, league_cursor=state.league_cursor + 1)
    if state.view == ViewState.GAMES and state.game_cursor < len(state.games) - 1:
        return state.with_game_cursor(state.game_cursor + 1)
    if state.view == ViewState.DETAIL and state.detail_scroll < _max_detail_scroll(state, ui):
        return replace(state, detail_scroll=state.detail_scroll + 1)
    return state


def _select(state: NavigationState) -> Result:
    if state.view == ViewState.SPORTS and state.sport_cursor < len(AVAILABLE_SPORTS):
        return replace(
            state,
            view=ViewState.LEAGUES,
            sport=AVAILABLE_SPORTS[state.sport_cursor],
            league_cursor=0
        ), []

    if (state.view == ViewState.LEAGUES and state.sport is not None
            and state.league_cursor < len(state.sport.leagues)):
        chosen = replace(
            state,
            view=ViewState.GAMES,
            league=state.sport.leagues[state.league_cursor],
            game_cursor=0,
            game_scroll=0,
            games=(),
            # Changing leagues always starts on current games
            show_upcoming=False
        )
        return _load_games(chosen)

    if state.view == ViewState.GAMES and state.game_cursor < len(state.games):
        assert state.sport is not None and state.league is not None
        game = state.games[state.game_cursor]
        loading = replace(state, view=ViewState.DETAIL).with_detail_loading()
        return loading, [LoadDetail(
            sport_id=state.sport.id,
            league_id=state.league.id,
            event_id=game.id,
            generation=loading.generation,
        )]

    return state, []


def handle_key(state: NavigationState, key: str, ui: Optional[UiParams] = None) -> Result:
    """
    Apply one key press.

    Args:
        state: Current navigation state
        key: Normalized key name (``up``, ``enter``, ``q``, ...)
        ui: UI parameters, used to bound detail scrolling

    Returns:
        Next state and the commands to run
    """
    if key in QUIT_KEYS:
        return state, [Quit()]

    if key in BACK_KEYS:
        new_state, commands = _back(state)
    elif key in UP_KEYS:
        new_state, commands = _up(state), []
    elif key in DOWN_KEYS:
        new_state, commands = _down(state, ui), []
    elif key in SELECT_KEYS:
        new_state, commands = _select(state)
    elif key == "r" and state.view == ViewState.GAMES and state.league is not None:
        new_state, commands = _load_games(state)
    elif key == "u" and state.view == ViewState.GAMES and state.league is not None:
        toggled = replace(state, show_upcoming=not state.show_upcoming, game_cursor=0, game_scroll=0)
        new_state, commands = _load_games(toggled)
    else:
        return state, []

    if new_state.view != state.view:
        log_view_transition(logger, state.view.value, new_state.view.value, key)
    return new_state, commands


def handle_resize(state: NavigationState, width: int, height: int) -> NavigationState:
    """Apply a terminal size change."""
    return state.with_size(width, height)


def handle_games_loaded(state: NavigationState, generation: int, games: Optional[list[Game]],
                        error: Optional[str] = None,
                        loaded_at: Optional[datetime] = None) -> NavigationState:
    """
    Apply a finished scoreboard fetch.

    Responses from an older generation (the user navigated away or started a
    newer fetch) are ignored.
    """
    if generation != state.generation:
        return state

    games_tuple = tuple(games or ())
    cursor = min(state.game_cursor, max(0, len(games_tuple) - 1))
    loaded = replace(
        state,
        loading=False,
        games=games_tuple,
        error=error,
        last_update=loaded_at or now_utc(),
    )
    return loaded.with_game_cursor(cursor)


def handle_detail_loaded(state: NavigationState, generation: int, detail: Optional[GameDetail],
                         error: Optional[str] = None) -> NavigationState:
    """Apply a finished summary fetch, ignoring stale generations."""
    if generation != state.generation:
        return state
    return replace(state, loading_detail=False, detail=detail, error=error)


def handle_tick(state: NavigationState) -> Result:
    """
    Periodic refresh.

    Reloads the scoreboard only while auto-refresh is on, the games view is
    showing, no fetch is pending and at least one game is live. The caller
    re-arms the timer regardless.
    """
    if (state.auto_refresh and state.view == ViewState.GAMES
            and state.sport is not None and state.league is not None
            and not state.loading and state.has_live_games):
        return _load_games(state)
    return state, []
