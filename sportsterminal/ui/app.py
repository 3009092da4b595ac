"""
Curses front end.

Runs the key loop, draws rendered lines, and performs fetches on background
threads that report back through a queue so the screen never blocks on the
network.
"""

import curses
import locale
import os
import queue
import sys
import threading
import time
from typing import Any, Optional, Union

from ..api.client import ESPNClient
from ..config.defaults import DefaultConfig, UiParams
from ..errors import ApiError, TerminalError
from ..logging.config import get_ui_logger
from .controller import (
    handle_detail_loaded,
    handle_games_loaded,
    handle_key,
    handle_resize,
    handle_tick,
)
from .logos import detect_image_support
from .render import Line, Style, render
from .state import Command, LoadDetail, LoadGames, NavigationState, Quit

logger = get_ui_logger(__name__)

KEY_NAMES = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_ENTER: "enter",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_RESIZE: "resize",
}

CHAR_NAMES = {
    "\n": "enter",
    "\r": "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl+c",
}


def key_name(ch: Any) -> Optional[str]:
    """Normalize a ``get_wch`` result to a controller key name."""
    if isinstance(ch, int):
        return KEY_NAMES.get(ch)
    if isinstance(ch, str):
        return CHAR_NAMES.get(ch, ch)
    return None


class StylePalette:
    """Maps render styles to curses attributes."""

    # (foreground, extra attribute)
    COLORS = {
        Style.TITLE: (curses.COLOR_MAGENTA, curses.A_BOLD),
        Style.SUBTITLE: (-1, curses.A_DIM),
        Style.ITEM: (-1, curses.A_NORMAL),
        Style.SELECTED: (curses.COLOR_YELLOW, curses.A_BOLD),
        Style.HELP: (-1, curses.A_DIM),
        Style.BORDER: (-1, curses.A_DIM),
        Style.BORDER_SELECTED: (curses.COLOR_MAGENTA, curses.A_NORMAL),
        Style.TEAM: (-1, curses.A_BOLD),
        Style.STATUS: (-1, curses.A_DIM),
        Style.LIVE: (curses.COLOR_RED, curses.A_BOLD),
        Style.VENUE: (-1, curses.A_DIM),
        Style.ERROR: (curses.COLOR_RED, curses.A_NORMAL),
        Style.SECTION: (curses.COLOR_YELLOW, curses.A_BOLD),
        Style.HEADER: (curses.COLOR_MAGENTA, curses.A_BOLD),
        Style.DIM: (-1, curses.A_DIM),
    }

    def __init__(self) -> None:
        self.attrs: dict[Style, int] = {}
        has_colors = curses.has_colors()
        if has_colors:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                logger.debug("Terminal has no default colors")

        for pair, (style, (fg, attr)) in enumerate(self.COLORS.items(), start=1):
            if has_colors and fg != -1:
                curses.init_pair(pair, fg, -1)
                attr |= curses.color_pair(pair)
            self.attrs[style] = attr

    def attr(self, style: Style) -> int:
        return self.attrs.get(style, curses.A_NORMAL)


def draw(stdscr: Any, lines: list[Line], palette: StylePalette) -> None:
    """Draw rendered lines, clipping to the window."""
    height, width = stdscr.getmaxyx()
    stdscr.erase()
    for y, line in enumerate(lines[:height]):
        x = 0
        for text, style in line:
            if x >= width - 1:
                break
            try:
                stdscr.addnstr(y, x, text, width - 1 - x, palette.attr(style))
            except curses.error:
                # Writing the last cell of the window always errors
                break
            # Wide characters advance the cursor by two cells
            cursor_y, x = stdscr.getyx()
            if cursor_y != y:
                break
    stdscr.refresh()


class TerminalApp:
    """Owns the screen, the navigation state and the fetch threads."""

    def __init__(self, config: DefaultConfig, client: Optional[ESPNClient] = None):
        self.config = config
        self.ui: UiParams = config.ui
        self.client = client or ESPNClient(config.api)
        self.results: "queue.Queue[tuple]" = queue.Queue()
        self.state = NavigationState(auto_refresh=self.ui.auto_refresh)

    def dispatch(self, commands: list[Command]) -> bool:
        """Start commands; returns False when the app should exit."""
        for command in commands:
            if isinstance(command, Quit):
                return False
            if isinstance(command, (LoadGames, LoadDetail)):
                threading.Thread(target=self._fetch, args=(command,), daemon=True).start()
        return True

    def _fetch(self, command: Union[LoadGames, LoadDetail]) -> None:
        kind = "games" if isinstance(command, LoadGames) else "detail"
        try:
            if isinstance(command, LoadGames):
                payload: Any = self.client.get_games(command.sport_id, command.league_id, command.show_upcoming)
            else:
                payload = self.client.get_game_detail(command.sport_id, command.league_id, command.event_id)
        except ApiError as e:
            logger.warning("Fetch failed", kind=kind, command=repr(command), error=str(e))
            self.results.put((kind, command.generation, None, str(e)))
        except Exception as e:
            # The loading flag only clears when a result is posted
            logger.exception("Fetch crashed", kind=kind, command=repr(command))
            self.results.put((kind, command.generation, None, str(e) or type(e).__name__))
        else:
            self.results.put((kind, command.generation, payload, None))

    def drain_results(self) -> None:
        """Apply all finished fetches to the state."""
        while True:
            try:
                kind, generation, payload, error = self.results.get_nowait()
            except queue.Empty:
                return
            if kind == "games":
                self.state = handle_games_loaded(self.state, generation, payload, error)
            else:
                self.state = handle_detail_loaded(self.state, generation, payload, error)

    def run(self, stdscr: Any) -> None:
        """Main loop, called by ``curses.wrapper``."""
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        stdscr.keypad(True)
        stdscr.timeout(self.ui.input_timeout_ms)
        palette = StylePalette()

        height, width = stdscr.getmaxyx()
        self.state = handle_resize(self.state, width, height)
        logger.info("Terminal UI started", width=width, height=height,
                    image_support=detect_image_support())

        interval = self.ui.refresh_interval_seconds
        next_tick = time.monotonic() + interval

        while True:
            self.drain_results()

            if time.monotonic() >= next_tick:
                self.state, commands = handle_tick(self.state)
                self.dispatch(commands)
                next_tick = time.monotonic() + interval

            draw(stdscr, render(self.state, self.ui), palette)

            try:
                ch = stdscr.get_wch()
            except curses.error:
                continue  # input timeout

            key = key_name(ch)
            if key is None:
                continue
            if key == "resize":
                height, width = stdscr.getmaxyx()
                self.state = handle_resize(self.state, width, height)
                continue

            self.state, commands = handle_key(self.state, key, self.ui)
            if not self.dispatch(commands):
                logger.info("Terminal UI exiting", **self.client.get_stats())
                return


def ensure_terminal() -> None:
    """
    Require interactive stdin and stdout.

    Raises:
        TerminalError: Naming the first stream that is not a terminal
    """
    for name, stream in (("stdin", sys.stdin), ("stdout", sys.stdout)):
        if stream is None or not stream.isatty():
            raise TerminalError(f"could not open a new TTY: {name} is not a terminal", stream=name)


def run_tui(config: DefaultConfig, client: Optional[ESPNClient] = None) -> None:
    """
    Run the interactive UI until the user quits.

    Raises:
        TerminalError: If stdin/stdout are not a terminal or curses fails
    """
    ensure_terminal()

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as e:
        logger.warning("Unsupported locale, using C locale", error=str(e))
    os.environ.setdefault("ESCDELAY", "25")

    app = TerminalApp(config, client)
    try:
        curses.wrapper(app.run)
    except KeyboardInterrupt:
        logger.info("Interrupted", **app.client.get_stats())
    except curses.error as e:
        raise TerminalError(f"terminal error: {e}") from e
