"""Tests for view rendering."""

from dataclasses import replace
from datetime import datetime, timezone

from sportsterminal.api.models import AVAILABLE_SPORTS, Play
from sportsterminal.config.defaults import UiParams
from sportsterminal.ui.render import (
    Style,
    detail_content_lines,
    help_parts,
    display_width,
    line_text,
    render,
    render_game_card,
    render_scoreboard_text,
    truncate_line,
)
from sportsterminal.ui.state import NavigationState, ViewState

BASKETBALL = AVAILABLE_SPORTS[1]
NBA = BASKETBALL.leagues[0]


def text_of(lines) -> str:
    return "\n".join(line_text(line) for line in lines)


def games_state(games=(), **kwargs) -> NavigationState:
    defaults = dict(view=ViewState.GAMES, sport=BASKETBALL, league=NBA, games=tuple(games), width=100, height=60)
    defaults.update(kwargs)
    return NavigationState(**defaults)


class TestMenus:
    """Sport and league pickers."""

    def test_initializing_before_first_resize(self):
        assert text_of(render(NavigationState())) == "Initializing..."

    def test_sports_view(self):
        output = text_of(render(NavigationState(width=80, height=24)))

        assert "🏆 Sports Scores" in output
        assert "Select a sport" in output
        assert "❯ 🏈 Football" in output
        assert "  🏀 Basketball" in output
        assert "↑/k up • ↓/j down • enter select • q quit" in output

    def test_selected_sport_is_highlighted(self):
        lines = render(NavigationState(width=80, height=24, sport_cursor=4))

        selected = [line for line in lines if line and line[0][1] == Style.SELECTED]
        assert len(selected) == 1
        assert "Soccer" in line_text(selected[0])

    def test_leagues_view(self):
        state = NavigationState(view=ViewState.LEAGUES, sport=BASKETBALL, league_cursor=1, width=80, height=24)

        output = text_of(render(state))

        assert "🏆 Basketball" in output
        assert "Select a league" in output
        assert "❯ WNBA" in output
        assert "esc back" in output


class TestGameCard:
    """Boxed scoreboard card."""

    def test_live_card(self, sample_games):
        card = render_game_card(sample_games[0], selected=True)
        output = text_of(card)

        assert output.startswith("╭")
        assert "🔴 LIVE - In Progress" in output
        assert "Boston Celtics" in output
        assert "📍 Crypto.com Arena" in output
        assert card[0][0][1] == Style.BORDER_SELECTED

    def test_team_rows_are_aligned(self, sample_games):
        output = text_of(render_game_card(sample_games[0], selected=False))

        assert f"{'Boston Celtics':<30}  91" in output
        assert f"{'Los Angeles Lakers':<30}  88" in output

    def test_scheduled_card_shows_dash_scores(self, sample_games):
        output = text_of(render_game_card(sample_games[2], selected=False))

        assert "LIVE" not in output
        assert "Scheduled" in output
        assert f"{'Denver Nuggets':<30}   -" in output

    def test_unknown_time_is_tbd(self, sample_games):
        game = replace(sample_games[2], date=None)

        assert "🕐 TBD" in text_of(render_game_card(game, selected=False))

    def test_card_lines_have_constant_width(self, sample_games):
        widths = {display_width(line_text(line)) for line in render_game_card(sample_games[1], selected=False)}

        assert widths == {60}

    def test_long_names_are_cut_to_the_card(self, sample_games):
        game = replace(
            sample_games[0],
            venue="Estadio Monumental Antonio Vespucio Liberti de Buenos Aires",
            away_team=replace(sample_games[0].away_team, name="Universidad Católica del Ecuador Fútbol Club de Quito Pichincha"),
        )
        lines = render_game_card(game, selected=True)

        assert {display_width(line_text(line)) for line in lines} == {60}
        assert "📍 Estadio Monumental" in text_of(lines)
        assert text_of(lines).count("…") == 2


class TestTruncateLine:
    """Cell-accurate line cutting."""

    def test_short_line_untouched(self):
        line = [("abc", Style.ITEM)]
        assert truncate_line(line, 10) is line

    def test_cut_keeps_segment_styles(self):
        line = [("Score ", Style.TEAM), ("123456", Style.LIVE)]

        cut = truncate_line(line, 9)

        assert cut == [("Score ", Style.TEAM), ("12…", Style.LIVE)]

    def test_wide_characters_count_twice(self):
        cut = truncate_line([("🏀🏀🏀🏀", Style.ITEM)], 6)

        assert line_text(cut) == "🏀🏀…"
        assert display_width(line_text(cut)) == 5


class TestGamesView:
    """Scoreboard list states."""

    def test_loading(self):
        output = text_of(render(games_state(loading=True)))

        assert "🏆 Basketball - NBA" in output
        assert "Loading games..." in output

    def test_error(self):
        output = text_of(render(games_state(error="API returned status code: 500")))

        assert "Error: API returned status code: 500" in output
        assert "r refresh • esc back • q quit" in output

    def test_no_current_games(self):
        output = text_of(render(games_state()))

        assert "No current games. Press 'u' to view upcoming games." in output
        assert "u upcoming" in output

    def test_no_upcoming_games(self):
        output = text_of(render(games_state(show_upcoming=True)))

        assert "No upcoming games scheduled." in output
        assert "u current" in output

    def test_last_updated(self, sample_games):
        updated = datetime(2024, 1, 15, 4, 5, tzinfo=timezone.utc)

        output = text_of(render(games_state(sample_games, last_update=updated)))

        assert "Last updated:" in output
        assert "Showing" not in output
        assert output.count("╭") == 3

    def test_window_indicator(self, sample_games):
        state = games_state(sample_games, height=25, game_cursor=1, game_scroll=1)

        output = text_of(render(state))

        assert "(Showing 2-2 of 3 games)" in output
        assert output.count("╭") == 1
        assert "Chicago Bulls" in output
        assert "Los Angeles Lakers" not in output

    def test_help_with_games(self, sample_games):
        parts = help_parts(games_state(sample_games))

        assert parts == ["↑/k up", "↓/j down", "enter details", "u upcoming", "r refresh", "esc back", "q quit"]


class TestDetailView:
    """Game detail rendering and scrolling."""

    def test_loading(self):
        state = games_state(view=ViewState.DETAIL, loading_detail=True)

        output = text_of(render(state))

        assert "🏆 Game Details" in output
        assert "Loading game details..." in output

    def test_error(self):
        state = games_state(view=ViewState.DETAIL, error="failed to fetch: timed out")

        output = text_of(render(state))

        assert "Error: failed to fetch: timed out" in output
        assert help_parts(state) == ["esc back", "q quit"]

    def test_header(self, sample_detail):
        state = games_state(view=ViewState.DETAIL, detail=sample_detail)

        output = text_of(render(state))

        assert "🔴 LIVE - In Progress • 3rd 4:12" in output
        assert "Boston Celtics (32-9)" in output
        assert "🟡 Los Angeles Lakers (25-17)" in output

    def test_header_without_logos(self, sample_detail):
        state = games_state(view=ViewState.DETAIL, detail=sample_detail)

        output = text_of(render(state, UiParams(show_logos=False)))

        assert "🟡" not in output

    def test_sections(self, sample_detail):
        output = text_of(detail_content_lines(sample_detail))

        assert "📍 Game Info" in output
        assert "Venue: Crypto.com Arena" in output
        assert "Attendance: 18,997" in output
        assert "Points: Jayson Tatum (Boston Celtics) - 27" in output
        assert "📊 Team Statistics" in output
        assert "📝 Recent Plays" in output
        assert "🎯 [3rd Quarter 4:30] Tatum makes 3-pt jump shot" in output

    def test_stats_table_two_columns(self, sample_detail):
        lines = [line_text(line) for line in detail_content_lines(sample_detail)]

        header = next(line for line in lines if line.strip().startswith("Stat"))
        assert "BOS" in header and "LAL" in header
        rebounds = next(line for line in lines if "Rebounds" in line)
        # Away has no second stat; the home column still lines up
        assert rebounds.split("|")[1].split() == ["Rebounds", "38"]

    def test_empty_sections_are_omitted(self, sample_detail):
        bare = replace(sample_detail, venue="", attendance="", leaders=(), plays=())

        output = text_of(detail_content_lines(bare))

        assert "Game Info" not in output
        assert "Game Leaders" not in output
        assert "Recent Plays" not in output

    def test_play_and_stat_limits(self, sample_detail):
        plays = tuple(Play(text=f"play {i}") for i in range(30))
        detail = replace(sample_detail, plays=plays)

        output = text_of(detail_content_lines(detail, UiParams(max_plays=5, max_stats=1)))

        assert "play 4" in output
        assert "play 5" not in output
        assert "Rebounds" not in output

    def test_scroll_indicator_and_clamp(self, sample_detail):
        plays = tuple(Play(text=f"play {i}") for i in range(40))
        detail = replace(sample_detail, plays=plays)
        state = games_state(view=ViewState.DETAIL, detail=detail, height=30, detail_scroll=999)
        ui = UiParams(max_plays=40)

        output = text_of(render(state, ui))
        total = len(detail_content_lines(detail, ui))

        assert f"(Scroll: {total - 18 + 1}/{total} lines)" in output
        assert "play 39" in output


class TestPlainScoreboard:
    """Non-interactive output."""

    def test_with_games(self, sample_games):
        output = render_scoreboard_text(sample_games, "Basketball - NBA")

        assert output.startswith("Basketball - NBA\n\n")
        assert output.count("╭") == 3
        assert output.endswith("╯\n")

    def test_without_games(self):
        assert render_scoreboard_text([], "Hockey - NHL") == "Hockey - NHL\n\nNo games.\n"
