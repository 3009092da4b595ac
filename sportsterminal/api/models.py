"""
Canonical data models for normalized scoreboard data.

This module defines immutable data structures that represent games and game
details after normalization from ESPN's raw JSON payloads.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class League:
    """A league as addressed by ESPN (``nfl``, ``eng.1``, ...)."""
    name: str
    id: str


@dataclass(frozen=True)
class Sport:
    """A sport with the leagues offered for it."""
    name: str
    id: str
    leagues: tuple[League, ...]


AVAILABLE_SPORTS: tuple[Sport, ...] = (
    Sport(
        name="Football",
        id="football",
        leagues=(
            League(name="NFL", id="nfl"),
            League(name="College Football", id="college-football"),
        ),
    ),
    Sport(
        name="Basketball",
        id="basketball",
        leagues=(
            League(name="NBA", id="nba"),
            League(name="WNBA", id="wnba"),
            League(name="College Basketball (Men)", id="mens-college-basketball"),
            League(name="College Basketball (Women)", id="womens-college-basketball"),
        ),
    ),
    Sport(
        name="Baseball",
        id="baseball",
        leagues=(
            League(name="MLB", id="mlb"),
            League(name="College Baseball", id="college-baseball"),
        ),
    ),
    Sport(
        name="Hockey",
        id="hockey",
        leagues=(
            League(name="NHL", id="nhl"),
        ),
    ),
    Sport(
        name="Soccer",
        id="soccer",
        leagues=(
            League(name="Premier League", id="eng.1"),
            League(name="La Liga", id="esp.1"),
            League(name="Serie A", id="ita.1"),
            League(name="Bundesliga", id="ger.1"),
            League(name="MLS", id="usa.1"),
            League(name="Champions League", id="uefa.champions"),
        ),
    ),
)


def find_league(league_id: str) -> tuple[Sport, League]:
    """
    Look up a league by its ESPN id.

    Raises:
        KeyError: If no catalog sport offers the league
    """
    for sport in AVAILABLE_SPORTS:
        for league in sport.leagues:
            if league.id == league_id:
                return sport, league
    raise KeyError(league_id)


@dataclass(frozen=True)
class Team:
    """One side of a scoreboard game."""
    name: str = ""
    short_name: str = ""
    score: str = ""       # Empty before the game starts
    logo: str = ""


@dataclass(frozen=True)
class Game:
    """Scoreboard entry for a single event."""
    id: str
    name: str
    short_name: str
    date: Optional[datetime]     # UTC, None if unparseable
    status: str                  # Human description ("Halftime", "Final")
    state: str                   # pre | in | post
    home_team: Team
    away_team: Team
    venue: str = ""

    @property
    def is_live(self) -> bool:
        """True while the game is in progress."""
        return self.state == "in"


@dataclass(frozen=True)
class Statistic:
    """A labelled team statistic, value kept as displayed."""
    label: str
    value: str


@dataclass(frozen=True)
class Leader:
    """Top performer for one category on one team."""
    category: str
    athlete: str
    team: str
    value: str


@dataclass(frozen=True)
class Play:
    """Single play-by-play entry."""
    text: str
    period: str = ""
    clock: str = ""
    scoring_play: bool = False


@dataclass(frozen=True)
class TeamDetail:
    """Team side of a game summary, with record and box score statistics."""
    name: str = ""
    short_name: str = ""
    score: str = ""
    logo: str = ""
    record: str = ""
    statistics: tuple[Statistic, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        """Short name when available, full name otherwise."""
        return self.short_name or self.name


@dataclass(frozen=True)
class GameDetail:
    """Full summary for a single event."""
    id: str
    status: str
    state: str
    home_team: TeamDetail
    away_team: TeamDetail
    period: str = ""
    clock: str = ""
    venue: str = ""
    attendance: str = ""
    leaders: tuple[Leader, ...] = field(default_factory=tuple)
    plays: tuple[Play, ...] = field(default_factory=tuple)   # Most recent first

    @property
    def is_live(self) -> bool:
        """True while the game is in progress."""
        return self.state == "in"
