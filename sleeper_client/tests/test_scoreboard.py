"""Tests for scoreboard formatting and game status."""

import asyncio
from datetime import datetime
import pytest
from unittest.mock import AsyncMock, Mock

from sleeper_client.models.matchup import EnhancedMatchup, MatchupPair
from sleeper_client.models.state import NflState
from sleeper_client.models.user import User
from sleeper_client.services.matchups import MatchupComposer
from sleeper_client.services.scoreboard import (
    ScoreboardFormatter,
    build_scoreboard,
    infer_game_status,
)
from sleeper_client.services.state import StateService

# Week of 2024-10-13: Sunday, Monday, Tuesday, Saturday
SUNDAY = datetime(2024, 10, 13, 16, 0)
MONDAY = datetime(2024, 10, 14, 21, 0)
TUESDAY = datetime(2024, 10, 15, 9, 0)
SATURDAY = datetime(2024, 10, 19, 12, 0)

REGULAR = NflState(week=6, season="2024", season_type="regular")


def side(roster_id, points, user=None):
    return EnhancedMatchup(roster_id=roster_id, matchup_id=1, points=points, starters=["4034"],
                           players_points={"4034": points}, user=user)


class TestInferGameStatus:
    def test_not_regular_season(self):
        post = NflState(week=16, season="2024", season_type="post")
        assert infer_game_status(10, post, 100, 90, TUESDAY) == "upcoming"

    def test_future_week(self):
        assert infer_game_status(7, REGULAR, 0, 0, TUESDAY) == "upcoming"

    def test_past_week(self):
        assert infer_game_status(5, REGULAR, 0, 0, SUNDAY) == "complete"

    def test_current_week_not_started(self):
        assert infer_game_status(6, REGULAR, 0, 0, TUESDAY) == "upcoming"

    @pytest.mark.parametrize("as_of", [SUNDAY, MONDAY])
    def test_current_week_game_days(self, as_of):
        assert infer_game_status(6, REGULAR, 45.5, 0, as_of) == "in_progress"

    @pytest.mark.parametrize("as_of", [TUESDAY, SATURDAY])
    def test_current_week_after_monday(self, as_of):
        assert infer_game_status(6, REGULAR, 101.5, 99.0, as_of) == "complete"


class TestBuildScoreboard:
    def test_numbering_names_and_points(self):
        pairs = [
            MatchupPair(matchup_id=3, team1=side(1, 101.5, User(user_id="u1", team_name="Alpha Dogs")),
                        team2=side(2, 99, User(user_id="u2", display_name="Bob"))),
            MatchupPair(matchup_id=1, team1=side(3, 0), team2=side(4, 12.5)),
        ]

        scoreboard = build_scoreboard(pairs, 5, REGULAR, TUESDAY)

        assert [m.matchup_number for m in scoreboard] == [1, 2]
        assert [m.matchup_id for m in scoreboard] == [3, 1]
        first = scoreboard[0]
        assert first.team1.name == "Alpha Dogs"
        assert first.team2.name == "Bob"
        assert first.team1.points == "101.50"
        assert first.team2.points == "99.00"
        assert first.team1.starters == ["4034"]
        assert first.status == "complete"
        assert first.winner == "team1"
        assert scoreboard[1].team1.name == "Unknown"
        assert scoreboard[1].team1.points == "0.00"
        assert scoreboard[1].team2.points == "12.50"
        assert scoreboard[1].winner == "team2"

    def test_tie(self):
        pairs = [MatchupPair(matchup_id=1, team1=side(1, 88.8), team2=side(2, 88.8))]
        assert build_scoreboard(pairs, 5, REGULAR, TUESDAY)[0].winner == "tie"

    def test_bye_has_no_winner(self):
        pairs = [MatchupPair(matchup_id=None, team1=side(1, 120))]

        matchup = build_scoreboard(pairs, 5, REGULAR, TUESDAY)[0]

        assert matchup.team2 is None
        assert matchup.winner is None
        assert matchup.status == "complete"

    def test_no_winner_while_in_progress(self):
        pairs = [MatchupPair(matchup_id=1, team1=side(1, 40), team2=side(2, 30))]

        matchup = build_scoreboard(pairs, 6, REGULAR, SUNDAY)[0]

        assert matchup.status == "in_progress"
        assert matchup.winner is None

    def test_no_winner_when_upcoming(self):
        pairs = [MatchupPair(matchup_id=1, team1=side(1, 0), team2=side(2, 0))]
        assert build_scoreboard(pairs, 6, REGULAR, TUESDAY)[0].winner is None


class TestScoreboardFormatter:
    def setup_method(self):
        self.pairs = [MatchupPair(matchup_id=1, team1=side(1, 40), team2=side(2, 30))]
        self.matchups = Mock(spec=MatchupComposer)
        self.matchups.compose_weekly_matchups = AsyncMock(return_value=self.pairs)
        self.state = Mock(spec=StateService)
        self.state.get_nfl_state = AsyncMock(return_value=REGULAR)

    def test_explicit_as_of(self):
        formatter = ScoreboardFormatter(self.matchups, self.state)

        sunday = asyncio.run(formatter.format_scoreboard("123", 6, as_of=SUNDAY))
        tuesday = asyncio.run(formatter.format_scoreboard("123", 6, as_of=TUESDAY))

        assert sunday[0].status == "in_progress"
        assert tuesday[0].status == "complete"
        assert tuesday[0].winner == "team1"
        self.matchups.compose_weekly_matchups.assert_awaited_with("123", 6)
        assert self.state.get_nfl_state.await_count == 2

    def test_injected_clock(self):
        formatter = ScoreboardFormatter(self.matchups, self.state, clock=lambda: MONDAY)

        scoreboard = asyncio.run(formatter.format_scoreboard("123", 6))

        assert scoreboard[0].status == "in_progress"

    def test_requires_league_id(self):
        formatter = ScoreboardFormatter(self.matchups, self.state)

        with pytest.raises(ValueError):
            asyncio.run(formatter.format_scoreboard("", 6))
        self.matchups.compose_weekly_matchups.assert_not_called()
