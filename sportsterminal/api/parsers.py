"""
ESPN payload parsers for converting raw JSON into normalized objects.

This module handles parsing of ESPN scoreboard and game summary payloads into
the canonical data structures in ``models``. Scoreboard payloads are strict
at the top level and lenient per event; summary payloads tolerate missing
sections because ESPN omits them per sport and game state.
"""

from typing import Any, Optional

from ..errors import ApiParseError
from ..utils.time import parse_event_date
from .models import (
    Game,
    GameDetail,
    Leader,
    Play,
    Statistic,
    Team,
    TeamDetail,
)


def _get(data: Any, *path: Any, default: Any = None) -> Any:
    """Walk nested dicts and lists, returning default on any miss."""
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or key >= len(current) or key < -len(current):
                return default
        elif not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return default if current is None else current


def _items(data: Any, *path: Any) -> list:
    """Like _get, but only ever returns a list."""
    value = _get(data, *path)
    return value if isinstance(value, list) else []


def _text(value: Any) -> str:
    """Coerce a scalar JSON value to display text."""
    if value is None:
        return ""
    return str(value)


def _ordinal(number: int) -> str:
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def _period_label(period: Any) -> str:
    """Render a period as ``2nd``; dict periods prefer their display value."""
    if isinstance(period, dict):
        display = period.get("displayValue")
        if display:
            return str(display)
        period = period.get("number")
    if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
        return ""
    return _ordinal(period)


def parse_scoreboard_payload(payload: Any) -> list[Game]:
    """
    Parse an ESPN scoreboard payload into Game objects.

    Expected ESPN format (abridged):
    {
        "events": [
            {
                "id": "401671793",
                "name": "Kansas City Chiefs at Buffalo Bills",
                "shortName": "KC @ BUF",
                "date": "2024-11-17T21:25Z",
                "competitions": [
                    {
                        "venue": {"fullName": "Highmark Stadium"},
                        "status": {"type": {"state": "in", "description": "In Progress"}},
                        "competitors": [
                            {"homeAway": "home", "score": "21",
                             "team": {"displayName": "Buffalo Bills", "shortDisplayName": "Bills", "logo": "..."}}
                        ]
                    }
                ]
            }
        ]
    }

    Args:
        payload: Decoded JSON body

    Returns:
        Games in payload order; events without competitions are skipped

    Raises:
        ApiParseError: If the payload or its events list has the wrong type
    """
    if not isinstance(payload, dict):
        raise ApiParseError("Scoreboard payload must be an object", expected_format="object")

    events = payload.get("events")
    if events is None:
        return []
    if not isinstance(events, list):
        raise ApiParseError("'events' field must be a list", expected_format="list")

    games = []
    for event in events:
        if not isinstance(event, dict):
            continue

        competitions = event.get("competitions")
        if not isinstance(competitions, list) or not competitions:
            continue

        comp = competitions[0]
        home, away = Team(), Team()
        for competitor in _items(comp, "competitors"):
            team = Team(
                name=_text(_get(competitor, "team", "displayName")),
                short_name=_text(_get(competitor, "team", "shortDisplayName")),
                score=_text(_get(competitor, "score")),
                logo=_text(_get(competitor, "team", "logo")),
            )
            if _get(competitor, "homeAway") == "home":
                home = team
            else:
                away = team

        games.append(Game(
            id=_text(event.get("id")),
            name=_text(event.get("name")),
            short_name=_text(event.get("shortName")),
            date=parse_event_date(event.get("date")),
            status=_text(_get(comp, "status", "type", "description")),
            state=_text(_get(comp, "status", "type", "state")),
            home_team=home,
            away_team=away,
            venue=_text(_get(comp, "venue", "fullName")),
        ))

    return games


def _parse_record(competitor: dict[str, Any]) -> str:
    """Overall record summary (``10-2``); ESPN uses ``record`` or ``records``."""
    records = competitor.get("record") or competitor.get("records") or []
    if not isinstance(records, list):
        return ""
    for record in records:
        if isinstance(record, dict) and record.get("type") in (None, "total"):
            return _text(record.get("summary") or record.get("displayValue"))
    return _text(_get(records, 0, "summary"))


def _parse_statistics(box_team: Any) -> tuple[Statistic, ...]:
    stats = []
    for stat in _items(box_team, "statistics"):
        label = _get(stat, "label") or _get(stat, "name")
        if not label:
            continue
        stats.append(Statistic(label=_text(label), value=_text(_get(stat, "displayValue"))))
    return tuple(stats)


def _match_box_team(box_teams: list, side: str, team_id: Optional[str], index: int) -> Any:
    """Find the boxscore entry for one side: by homeAway, then team id, then order."""
    for box_team in box_teams:
        if _get(box_team, "homeAway") == side:
            return box_team
    if team_id:
        for box_team in box_teams:
            if _text(_get(box_team, "team", "id")) == team_id:
                return box_team
    # ESPN lists boxscore teams away first
    return _get(box_teams, index, default={})


def _parse_leaders(payload: dict[str, Any]) -> tuple[Leader, ...]:
    leaders = []
    for team_block in _items(payload, "leaders"):
        team_name = _text(_get(team_block, "team", "displayName"))
        for category in _items(team_block, "leaders"):
            top = _get(category, "leaders", 0)
            if not top:
                continue
            leaders.append(Leader(
                category=_text(_get(category, "displayName") or _get(category, "name")),
                athlete=_text(_get(top, "athlete", "displayName")),
                team=team_name,
                value=_text(_get(top, "displayValue")),
            ))
    return tuple(leaders)


def _parse_plays(payload: dict[str, Any]) -> tuple[Play, ...]:
    plays = []
    for play in reversed(_items(payload, "plays")):
        text = _text(_get(play, "text"))
        if not text:
            continue
        plays.append(Play(
            text=text,
            period=_period_label(_get(play, "period")),
            clock=_text(_get(play, "clock", "displayValue")),
            scoring_play=bool(_get(play, "scoringPlay", default=False)),
        ))
    return tuple(plays)


def _format_attendance(value: Any) -> str:
    if isinstance(value, bool) or value in (None, "", 0):
        return ""
    if isinstance(value, int):
        return f"{value:,}"
    return _text(value)


def parse_summary_payload(payload: Any, event_id: str) -> GameDetail:
    """
    Parse an ESPN game summary payload into a GameDetail.

    Sections used: ``header.competitions[0]`` for teams, scores, records,
    status, period and clock; ``gameInfo`` for venue and attendance;
    ``boxscore.teams`` for statistics; ``leaders`` for top performers;
    ``plays`` for play-by-play (returned most recent first).

    Args:
        payload: Decoded JSON body
        event_id: Requested event id, used when the header omits it

    Returns:
        Parsed game detail

    Raises:
        ApiParseError: If the payload is not an object or has no header competition
    """
    if not isinstance(payload, dict):
        raise ApiParseError("Summary payload must be an object", expected_format="object")

    comp = _get(payload, "header", "competitions", 0)
    if not isinstance(comp, dict):
        raise ApiParseError(
            "Summary payload has no header competition",
            expected_format="header.competitions[0]"
        )

    box_teams = _items(payload, "boxscore", "teams")
    sides: dict[str, TeamDetail] = {}
    for side, index in (("away", 0), ("home", 1)):
        competitor = next(
            (c for c in _items(comp, "competitors") if _get(c, "homeAway") == side),
            {}
        )
        team_id = _text(_get(competitor, "team", "id"))
        box_team = _match_box_team(box_teams, side, team_id, index)
        sides[side] = TeamDetail(
            name=_text(_get(competitor, "team", "displayName")),
            short_name=_text(_get(competitor, "team", "shortDisplayName")
                             or _get(competitor, "team", "abbreviation")),
            score=_text(_get(competitor, "score")),
            logo=_text(_get(competitor, "team", "logo") or _get(competitor, "team", "logos", 0, "href")),
            record=_parse_record(competitor) if competitor else "",
            statistics=_parse_statistics(box_team),
        )

    return GameDetail(
        id=_text(_get(payload, "header", "id")) or event_id,
        status=_text(_get(comp, "status", "type", "description")),
        state=_text(_get(comp, "status", "type", "state")),
        home_team=sides["home"],
        away_team=sides["away"],
        period=_period_label(_get(comp, "status", "period")),
        clock=_text(_get(comp, "status", "displayClock")),
        venue=_text(_get(payload, "gameInfo", "venue", "fullName")),
        attendance=_format_attendance(_get(payload, "gameInfo", "attendance")),
        leaders=_parse_leaders(payload),
        plays=_parse_plays(payload),
    )
