"""Tests for the sport catalog and model helpers."""

import pytest

from sportsterminal.api.models import AVAILABLE_SPORTS, TeamDetail, find_league


class TestCatalog:
    """The fixed sport and league catalog."""

    def test_sports_in_menu_order(self):
        assert [s.name for s in AVAILABLE_SPORTS] == ["Football", "Basketball", "Baseball", "Hockey", "Soccer"]

    def test_every_sport_has_leagues(self):
        for sport in AVAILABLE_SPORTS:
            assert sport.leagues, sport.name

    def test_league_ids_are_unique(self):
        ids = [league.id for sport in AVAILABLE_SPORTS for league in sport.leagues]
        assert len(ids) == len(set(ids))

    def test_find_league(self):
        sport, league = find_league("eng.1")

        assert sport.id == "soccer"
        assert league.name == "Premier League"

    def test_find_unknown_league(self):
        with pytest.raises(KeyError):
            find_league("xfl")


class TestTeamDetail:
    def test_display_name_prefers_short_name(self):
        assert TeamDetail(name="Boston Celtics", short_name="BOS").display_name == "BOS"
        assert TeamDetail(name="Boston Celtics").display_name == "Boston Celtics"
