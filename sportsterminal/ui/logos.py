"""
Team logo and sport icon lookup.

Inline image protocols (kitty, iTerm2, WezTerm) are detected, but logos are
always drawn as colored emoji markers derived from team identity.
"""

import os
from collections.abc import Mapping
from typing import Optional

DEFAULT_TEAM_EMOJI = "🏆"
DEFAULT_SPORT_ICON = "🏃"

SPORT_ICONS = {
    "football": "🏈",
    "basketball": "🏀",
    "baseball": "⚾",
    "hockey": "🏒",
    "soccer": "⚽",
}

NBA_EMOJIS = {
    "lakers": "🟡", "warriors": "🏀", "celtics": "🟢", "bulls": "🔴",
    "heat": "🔥", "spurs": "⚫", "pistons": "🔵", "cavaliers": "🏹",
    "knicks": "🟠", "nets": "⚫", "76ers": "🔵", "raptors": "🔴",
    "hawks": "🔴", "hornets": "🟣", "magic": "🔵", "wizards": "🔴",
    "bucks": "🟢", "pacers": "🟡", "rockets": "🔴", "mavericks": "🔵",
    "grizzlies": "🔵", "pelicans": "🟣", "suns": "🟡", "jazz": "🟡",
    "nuggets": "🔵", "timberwolves": "🟢", "thunder": "🟡", "blazers": "🔴",
    "kings": "🟣", "clippers": "🔵",
}

NFL_EMOJIS = {
    "patriots": "🔴", "bills": "🔴", "dolphins": "🔵", "jets": "🟢",
    "steelers": "🟡", "ravens": "🟣", "browns": "🟠", "bengals": "🟠",
    "texans": "🔴", "colts": "🔵", "jaguars": "🟢", "titans": "🔵",
    "chiefs": "🔴", "raiders": "⚫", "chargers": "🔵", "broncos": "🟠",
    "cowboys": "🔵", "eagles": "🟢", "giants": "🔵", "commanders": "🔴",
    "packers": "🟢", "vikings": "🟣", "bears": "🟠", "lions": "🔵",
    "falcons": "🔴", "panthers": "🔵", "saints": "🟣", "buccaneers": "🔴",
    "cardinals": "🔴", "49ers": "🔴", "seahawks": "🟢", "rams": "🟡",
}

MLB_EMOJIS = {
    "yankees": "🔵", "red sox": "🔴", "blue jays": "🔵", "orioles": "🟠",
    "rays": "🔵", "astros": "🟠", "angels": "🔴", "athletics": "🟢",
    "mariners": "🔵", "rangers": "🔴", "twins": "🔵", "white sox": "⚫",
    "guardians": "🔵", "tigers": "🟠", "royals": "🔵", "braves": "🔴",
    "mets": "🔵", "phillies": "🔴", "marlins": "🔵", "nationals": "🔴",
    "cubs": "🔵", "cardinals": "🔴", "brewers": "🟡", "pirates": "⚫",
    "reds": "🔴", "dodgers": "🔵", "giants": "🟠", "padres": "🟡",
    "diamondbacks": "🔴", "rockies": "🟣",
}

LEAGUE_EMOJIS = {
    "nba": NBA_EMOJIS,
    "nfl": NFL_EMOJIS,
    "mlb": MLB_EMOJIS,
}


def detect_image_support(env: Optional[Mapping[str, str]] = None) -> bool:
    """True when the terminal speaks an inline image protocol."""
    if env is None:
        env = os.environ

    term = env.get("TERM", "")
    term_program = env.get("TERM_PROGRAM", "")

    if "kitty" in term or term_program == "kitty":
        return True
    if term_program == "iTerm.app":
        return True
    if "wezterm" in term.lower() or term_program == "WezTerm":
        return True
    return False


def _match(name: str, table: Mapping[str, str]) -> Optional[str]:
    # Longest keyword wins so "red sox" beats "reds"
    for keyword in sorted(table, key=len, reverse=True):
        if keyword in name:
            return table[keyword]
    return None


def team_emoji(team_name: str, league: Optional[str] = None) -> str:
    """
    Emoji marker for a team.

    Args:
        team_name: Display name, matched case-insensitively by keyword
        league: League id; its table is searched first so shared nicknames
            (Giants, Cardinals) resolve to the right franchise

    Returns:
        Team marker, or the trophy fallback
    """
    name = team_name.lower()

    preferred = LEAGUE_EMOJIS.get(league or "")
    tables = [preferred] if preferred is not None else []
    tables.extend(t for t in (NBA_EMOJIS, NFL_EMOJIS, MLB_EMOJIS) if t is not preferred)

    for table in tables:
        emoji = _match(name, table)
        if emoji is not None:
            return emoji
    return DEFAULT_TEAM_EMOJI


def sport_icon(sport_id: str) -> str:
    """Icon for a sport id."""
    return SPORT_ICONS.get(sport_id, DEFAULT_SPORT_ICON)
