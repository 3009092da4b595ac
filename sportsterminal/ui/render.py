"""
Pure view rendering for the terminal UI.

Every view is rendered to a list of lines, each line a list of
``(text, Style)`` segments. The curses layer only maps styles to color
pairs and draws; nothing here touches the terminal.
"""

import unicodedata
from enum import Enum
from typing import Optional

from ..api.models import AVAILABLE_SPORTS, Game, GameDetail, TeamDetail
from ..config.defaults import UiParams
from ..utils.time import format_clock_time, format_game_time
from .logos import sport_icon, team_emoji
from .state import NavigationState, ViewState, detail_viewport, visible_games


class Style(str, Enum):
    """Semantic text styles, mapped to colors by the app."""
    TITLE = "title"
    SUBTITLE = "subtitle"
    ITEM = "item"
    SELECTED = "selected"
    HELP = "help"
    BORDER = "border"
    BORDER_SELECTED = "border_selected"
    TEAM = "team"
    STATUS = "status"
    LIVE = "live"
    VENUE = "venue"
    ERROR = "error"
    SECTION = "section"
    HEADER = "header"
    DIM = "dim"


Segment = tuple[str, Style]
Line = list[Segment]

CURSOR = "❯ "
NO_CURSOR = "  "
GAME_CARD_WIDTH = 60
SEPARATOR = " • "


def line_text(line: Line) -> str:
    """Plain text of a rendered line."""
    return "".join(text for text, _ in line)


def display_width(text: str) -> int:
    """Terminal cells taken by text; wide and emoji characters take two."""
    return sum(_char_width(ch) for ch in text)


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch) or ch == "\ufe0f":
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def truncate_line(line: Line, cells: int) -> Line:
    """Cut a line to at most ``cells`` terminal cells, ending in an ellipsis."""
    if display_width(line_text(line)) <= cells:
        return line

    budget = max(0, cells - 1)
    cut: Line = []
    for text, style in line:
        kept = []
        for ch in text:
            w = _char_width(ch)
            if w > budget:
                break
            kept.append(ch)
            budget -= w
        else:
            cut.append((text, style))
            continue
        cut.append(("".join(kept) + ("…" if cells > 0 else ""), style))
        break
    return cut


def _pad(text: str, style: Style, indent: int = 2) -> Line:
    return [(" " * indent + text, style)]


def _title(text: str) -> list[Line]:
    # Padding(1, 2) plus a bottom margin
    return [[], _pad(text, Style.TITLE), [], []]


def _help(parts: list[str]) -> list[Line]:
    return [[], _pad(SEPARATOR.join(parts), Style.HELP), []]


def help_parts(state: NavigationState) -> list[str]:
    """Key hints for the current view."""
    if state.view == ViewState.SPORTS:
        return ["↑/k up", "↓/j down", "enter select", "q quit"]
    if state.view == ViewState.LEAGUES:
        return ["↑/k up", "↓/j down", "enter select", "esc back", "q quit"]
    if state.view == ViewState.DETAIL:
        if state.error:
            return ["esc back", "q quit"]
        return ["↑/k up", "↓/j down", "esc back", "q quit"]

    toggle = "u current" if state.show_upcoming else "u upcoming"
    if state.error:
        return ["r refresh", "esc back", "q quit"]
    if not state.games:
        return [toggle, "r refresh", "esc back", "q quit"]
    return ["↑/k up", "↓/j down", "enter details", toggle, "r refresh", "esc back", "q quit"]


def render_sports_view(state: NavigationState) -> list[Line]:
    """Sport picker."""
    lines = _title("🏆 Sports Scores")
    lines.append(_pad("Select a sport", Style.SUBTITLE))
    lines.append([])

    for i, sport in enumerate(AVAILABLE_SPORTS):
        selected = i == state.sport_cursor
        cursor = CURSOR if selected else NO_CURSOR
        style = Style.SELECTED if selected else Style.ITEM
        lines.append(_pad(f"{cursor}{sport_icon(sport.id)} {sport.name}", style))

    lines.append([])
    lines.extend(_help(help_parts(state)))
    return lines


def render_leagues_view(state: NavigationState) -> list[Line]:
    """League picker for the selected sport."""
    if state.sport is None:
        return [_pad("No sport selected", Style.ITEM, indent=0)]

    lines = _title(f"🏆 {state.sport.name}")
    lines.append(_pad("Select a league", Style.SUBTITLE))
    lines.append([])

    for i, league in enumerate(state.sport.leagues):
        selected = i == state.league_cursor
        cursor = CURSOR if selected else NO_CURSOR
        style = Style.SELECTED if selected else Style.ITEM
        lines.append(_pad(f"{cursor}{league.name}", style))

    lines.append([])
    lines.extend(_help(help_parts(state)))
    return lines


def _box(content: list[Line], width: int, border: Style) -> list[Line]:
    """Rounded border with Padding(1, 2) around content lines."""
    inner = max(0, width - 6)
    top = [("╭" + "─" * (width - 2) + "╮", border)]
    bottom = [("╰" + "─" * (width - 2) + "╯", border)]
    blank = [("│" + " " * (width - 2) + "│", border)]

    boxed = [top, blank]
    for line in content:
        line = truncate_line(line, inner)
        fill = max(0, inner - display_width(line_text(line)))
        boxed.append([("│  ", border)] + line + [(" " * fill + "  │", border)])
    boxed.extend([blank, bottom])
    return boxed


def _score(score: str) -> str:
    return score or "-"


def render_game_card(game: Game, selected: bool, width: int = GAME_CARD_WIDTH) -> list[Line]:
    """Boxed scoreboard card for one game."""
    if game.is_live:
        status: Line = [(f"🔴 LIVE - {game.status}", Style.LIVE)]
    else:
        status = [(game.status, Style.STATUS)]

    content: list[Line] = [
        status,
        [],
        [(f"{game.away_team.name:<30} {_score(game.away_team.score):>3}", Style.TEAM)],
        [(f"{game.home_team.name:<30} {_score(game.home_team.score):>3}", Style.TEAM)],
        [],
        [(f"📍 {game.venue}", Style.VENUE)],
        [(f"🕐 {format_game_time(game.date)}", Style.VENUE)],
    ]
    return _box(content, width, Style.BORDER_SELECTED if selected else Style.BORDER)


def render_games_view(state: NavigationState) -> list[Line]:
    """Scoreboard list for the selected league."""
    if state.league is None or state.sport is None:
        return [_pad("No league selected", Style.ITEM, indent=0)]

    lines = _title(f"🏆 {state.sport.name} - {state.league.name}")

    if state.error:
        lines.append([])
        lines.append(_pad(f"Error: {state.error}", Style.ERROR))
        lines.append([])
        lines.extend(_help(help_parts(state)))
        return lines

    if state.loading:
        status_line = _pad("Loading games...", Style.SUBTITLE)
    else:
        updated = format_clock_time(state.last_update) if state.last_update else "-"
        status_line = _pad(f"Last updated: {updated}", Style.SUBTITLE)

    if not state.games and not state.loading:
        if state.show_upcoming:
            empty = "No upcoming games scheduled."
        else:
            empty = "No current games. Press 'u' to view upcoming games."
        lines.append(status_line)
        lines.append([])
        lines.append(_pad(empty, Style.ITEM))
        lines.append([])
        lines.extend(_help(help_parts(state)))
        return lines

    window = visible_games(state.height)
    start = state.game_scroll
    end = min(start + window, len(state.games))

    if len(state.games) > window:
        status_line = status_line + [(f" (Showing {start + 1}-{end} of {len(state.games)} games)", Style.DIM)]
    lines.append(status_line)
    lines.append([])

    for i in range(start, end):
        selected = i == state.game_cursor
        card = render_game_card(state.games[i], selected)
        prefix = CURSOR if selected else NO_CURSOR
        for j, card_line in enumerate(card):
            lead = prefix if j == 0 else NO_CURSOR
            lines.append([(lead, Style.SELECTED if selected else Style.ITEM)] + card_line)
        lines.extend([[], []])

    lines.extend(_help(help_parts(state)))
    return lines


def _team_label(team: TeamDetail) -> str:
    return team.display_name


def detail_content_lines(detail: GameDetail, ui: Optional[UiParams] = None) -> list[Line]:
    """Scrollable sections of the detail view: info, leaders, stats, plays."""
    ui = ui or UiParams()
    lines: list[Line] = []

    if detail.venue or detail.attendance:
        lines.append([("📍 Game Info", Style.SECTION)])
        lines.append([])
        if detail.venue:
            lines.append([(f"  Venue: {detail.venue}", Style.VENUE)])
        if detail.attendance:
            lines.append([(f"  Attendance: {detail.attendance}", Style.VENUE)])
        lines.append([])

    if detail.leaders:
        lines.append([("⭐ Game Leaders", Style.SECTION)])
        lines.append([])
        for leader in detail.leaders:
            lines.append([(
                f"  {leader.category}: {leader.athlete} ({leader.team}) - {leader.value}",
                Style.ITEM
            )])
        lines.append([])

    away_stats = detail.away_team.statistics
    home_stats = detail.home_team.statistics
    if away_stats or home_stats:
        lines.append([("📊 Team Statistics", Style.SECTION)])
        lines.append([])
        lines.append([(
            f"  {'Stat':<18} {_team_label(detail.away_team):>8}    |    "
            f"{'Stat':<18} {_team_label(detail.home_team):>8}",
            Style.HEADER
        )])
        lines.append([(
            "  " + "-" * 18 + " " + "-" * 8 + "    |    " + "-" * 18 + " " + "-" * 8,
            Style.STATUS
        )])

        rows = min(max(len(away_stats), len(home_stats)), ui.max_stats)
        for i in range(rows):
            if i < len(away_stats):
                row = f"  {away_stats[i].label:<18} {away_stats[i].value:>8}"
            else:
                row = f"  {'':<18} {'':>8}"
            if i < len(home_stats):
                row += f"    |    {home_stats[i].label:<18} {home_stats[i].value:>8}"
            else:
                row += f"    |    {'':<18} {'':>8}"
            lines.append([(row, Style.STATUS)])
        lines.append([])

    if detail.plays:
        lines.append([("📝 Recent Plays", Style.SECTION)])
        lines.append([])
        for play in detail.plays[:ui.max_plays]:
            prefix = "🎯 " if play.scoring_play else "  "
            clock = f"[{play.period} {play.clock}] " if play.period and play.clock else ""
            style = Style.LIVE if play.scoring_play else Style.STATUS
            lines.append([(f"{prefix}{clock}{play.text}", style)])

    return lines


def render_detail_header(detail: GameDetail, width: int, league_id: Optional[str] = None,
                         show_logos: bool = True) -> list[Line]:
    """Fixed score box at the top of the detail view."""
    if detail.is_live:
        status: Line = [(f"🔴 LIVE - {detail.status}", Style.LIVE)]
        if detail.period and detail.clock:
            status.append((f" • {detail.period} {detail.clock}", Style.STATUS))
    else:
        status = [(detail.status, Style.STATUS)]

    rows: list[Line] = [status, []]
    for team in (detail.away_team, detail.home_team):
        logo = f"{team_emoji(team.name, league_id)} " if show_logos else ""
        record = f" ({team.record})" if team.record else ""
        rows.append([(f"{logo}{team.name + record:<32} {team.score:>5}", Style.TEAM)])

    return _box(rows, max(20, width - 8), Style.BORDER_SELECTED)


def render_detail_view(state: NavigationState, ui: Optional[UiParams] = None) -> list[Line]:
    """Game detail: fixed header plus a scrolling window over the sections."""
    ui = ui or UiParams()
    title = "🏆 Game Details"

    if state.loading_detail:
        return _title(title)[:-2] + [_pad("Loading game details...", Style.SUBTITLE)]

    if state.error:
        lines = _title(title)
        lines.append([])
        lines.append(_pad(f"Error: {state.error}", Style.ERROR))
        lines.append([])
        lines.extend(_help(help_parts(state)))
        return lines

    if state.detail is None:
        return [_pad("No game details available", Style.ITEM, indent=0)]

    league_id = state.league.id if state.league else None
    header = render_detail_header(state.detail, state.width, league_id, ui.show_logos)
    content = detail_content_lines(state.detail, ui)

    available = detail_viewport(state.height)
    start = min(state.detail_scroll, max(0, len(content) - available))
    end = min(start + available, len(content))

    title_line = _pad(title, Style.TITLE)
    if len(content) > available:
        title_line = title_line + [(f" (Scroll: {start + 1}/{len(content)} lines)", Style.DIM)]

    lines: list[Line] = [[], title_line, [], []]
    lines.extend(header)
    lines.append([])
    lines.extend(content[start:end])
    lines.append([])
    lines.extend(_help(help_parts(state)))
    return lines


def render(state: NavigationState, ui: Optional[UiParams] = None) -> list[Line]:
    """Render whichever view the state is on."""
    if state.width == 0:
        return [[("Initializing...", Style.ITEM)]]

    if state.view == ViewState.SPORTS:
        return render_sports_view(state)
    if state.view == ViewState.LEAGUES:
        return render_leagues_view(state)
    if state.view == ViewState.GAMES:
        return render_games_view(state)
    return render_detail_view(state, ui)


def render_scoreboard_text(games: list[Game], title: str) -> str:
    """Plain-text scoreboard for non-interactive output."""
    out = [title, ""]
    if not games:
        out.append("No games.")
        return "\n".join(out) + "\n"

    for game in games:
        for line in render_game_card(game, selected=False):
            out.append(line_text(line))
        out.append("")
    return "\n".join(out).rstrip() + "\n"
