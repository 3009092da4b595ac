"""Pytest configuration and shared fixtures."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
import structlog

from sportsterminal.api.models import Game, GameDetail, Leader, Play, Statistic, Team, TeamDetail


@pytest.fixture
def scoreboard_payload() -> Dict[str, Any]:
    """ESPN scoreboard with one live, one final and one scheduled game."""
    return {
        "events": [
            {
                "id": "401",
                "name": "Boston Celtics at Los Angeles Lakers",
                "shortName": "BOS @ LAL",
                "date": "2024-01-15T03:30Z",
                "competitions": [
                    {
                        "venue": {"fullName": "Crypto.com Arena"},
                        "status": {"type": {"state": "in", "completed": False, "description": "In Progress"}},
                        "competitors": [
                            {
                                "homeAway": "home",
                                "score": "88",
                                "team": {
                                    "displayName": "Los Angeles Lakers",
                                    "shortDisplayName": "Lakers",
                                    "logo": "https://a.espncdn.com/lal.png",
                                },
                            },
                            {
                                "homeAway": "away",
                                "score": "91",
                                "team": {
                                    "displayName": "Boston Celtics",
                                    "shortDisplayName": "Celtics",
                                    "logo": "https://a.espncdn.com/bos.png",
                                },
                            },
                        ],
                    }
                ],
            },
            {
                "id": "402",
                "name": "Miami Heat at Chicago Bulls",
                "shortName": "MIA @ CHI",
                "date": "2024-01-15T01:00Z",
                "competitions": [
                    {
                        "venue": {"fullName": "United Center"},
                        "status": {"type": {"state": "post", "completed": True, "description": "Final"}},
                        "competitors": [
                            {"homeAway": "home", "score": "102",
                             "team": {"displayName": "Chicago Bulls", "shortDisplayName": "Bulls"}},
                            {"homeAway": "away", "score": "99",
                             "team": {"displayName": "Miami Heat", "shortDisplayName": "Heat"}},
                        ],
                    }
                ],
            },
            {
                "id": "403",
                "name": "Denver Nuggets at Phoenix Suns",
                "shortName": "DEN @ PHX",
                "date": "2024-01-16T02:00Z",
                "competitions": [
                    {
                        "venue": {"fullName": "Footprint Center"},
                        "status": {"type": {"state": "pre", "completed": False, "description": "Scheduled"}},
                        "competitors": [
                            {"homeAway": "home", "score": "",
                             "team": {"displayName": "Phoenix Suns", "shortDisplayName": "Suns"}},
                            {"homeAway": "away", "score": "",
                             "team": {"displayName": "Denver Nuggets", "shortDisplayName": "Nuggets"}},
                        ],
                    }
                ],
            },
        ]
    }


@pytest.fixture
def summary_payload() -> Dict[str, Any]:
    """ESPN game summary for a live game."""
    return {
        "header": {
            "id": "401",
            "competitions": [
                {
                    "status": {
                        "period": 3,
                        "displayClock": "4:12",
                        "type": {"state": "in", "description": "In Progress"},
                    },
                    "competitors": [
                        {
                            "homeAway": "home",
                            "score": "88",
                            "record": [{"type": "total", "summary": "25-17"}],
                            "team": {"id": "13", "displayName": "Los Angeles Lakers", "abbreviation": "LAL"},
                        },
                        {
                            "homeAway": "away",
                            "score": "91",
                            "record": [{"type": "total", "summary": "32-9"}],
                            "team": {"id": "2", "displayName": "Boston Celtics", "abbreviation": "BOS"},
                        },
                    ],
                }
            ],
        },
        "gameInfo": {"venue": {"fullName": "Crypto.com Arena"}, "attendance": 18997},
        "boxscore": {
            "teams": [
                {
                    "team": {"id": "2", "displayName": "Boston Celtics"},
                    "statistics": [
                        {"name": "fieldGoalPct", "label": "FG%", "displayValue": "48.1"},
                        {"name": "rebounds", "label": "Rebounds", "displayValue": "33"},
                    ],
                },
                {
                    "team": {"id": "13", "displayName": "Los Angeles Lakers"},
                    "statistics": [
                        {"name": "fieldGoalPct", "label": "FG%", "displayValue": "45.9"},
                        {"name": "rebounds", "label": "Rebounds", "displayValue": "38"},
                        {"name": "assists", "label": "Assists", "displayValue": "21"},
                    ],
                },
            ]
        },
        "leaders": [
            {
                "team": {"displayName": "Boston Celtics"},
                "leaders": [
                    {
                        "name": "points",
                        "displayName": "Points",
                        "leaders": [{"displayValue": "27", "athlete": {"displayName": "Jayson Tatum"}}],
                    },
                    {"name": "assists", "displayName": "Assists", "leaders": []},
                ],
            }
        ],
        "plays": [
            {"text": "Tatum makes 3-pt jump shot", "scoringPlay": True,
             "period": {"number": 3, "displayValue": "3rd Quarter"}, "clock": {"displayValue": "4:30"}},
            {"text": "James defensive rebound", "scoringPlay": False,
             "period": {"number": 3}, "clock": {"displayValue": "4:12"}},
        ],
    }


@pytest.fixture
def sample_games() -> list:
    """Parsed games: live, final, scheduled."""
    return [
        Game(
            id="401", name="BOS @ LAL", short_name="BOS @ LAL",
            date=datetime(2024, 1, 15, 3, 30, tzinfo=timezone.utc),
            status="In Progress", state="in",
            home_team=Team(name="Los Angeles Lakers", short_name="Lakers", score="88"),
            away_team=Team(name="Boston Celtics", short_name="Celtics", score="91"),
            venue="Crypto.com Arena",
        ),
        Game(
            id="402", name="MIA @ CHI", short_name="MIA @ CHI",
            date=datetime(2024, 1, 15, 1, 0, tzinfo=timezone.utc),
            status="Final", state="post",
            home_team=Team(name="Chicago Bulls", score="102"),
            away_team=Team(name="Miami Heat", score="99"),
            venue="United Center",
        ),
        Game(
            id="403", name="DEN @ PHX", short_name="DEN @ PHX",
            date=datetime(2024, 1, 16, 2, 0, tzinfo=timezone.utc),
            status="Scheduled", state="pre",
            home_team=Team(name="Phoenix Suns"),
            away_team=Team(name="Denver Nuggets"),
            venue="Footprint Center",
        ),
    ]


@pytest.fixture
def sample_detail() -> GameDetail:
    """Parsed live game detail."""
    return GameDetail(
        id="401",
        status="In Progress",
        state="in",
        period="3rd",
        clock="4:12",
        venue="Crypto.com Arena",
        attendance="18,997",
        home_team=TeamDetail(
            name="Los Angeles Lakers", short_name="LAL", score="88", record="25-17",
            statistics=(Statistic("FG%", "45.9"), Statistic("Rebounds", "38")),
        ),
        away_team=TeamDetail(
            name="Boston Celtics", short_name="BOS", score="91", record="32-9",
            statistics=(Statistic("FG%", "48.1"),),
        ),
        leaders=(Leader(category="Points", athlete="Jayson Tatum", team="Boston Celtics", value="27"),),
        plays=(
            Play(text="James defensive rebound", period="3rd Quarter", clock="4:12"),
            Play(text="Tatum makes 3-pt jump shot", period="3rd Quarter", clock="4:30", scoring_play=True),
        ),
    )


def make_response(payload: Any, status: int = 200) -> MagicMock:
    """urlopen() context manager returning a JSON body."""
    response = MagicMock()
    response.getcode.return_value = status
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    response.read.return_value = body
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


@pytest.fixture
def mock_response():
    """Factory for fake urlopen responses."""
    return make_response


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers a test installed through configure_logging()."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()
