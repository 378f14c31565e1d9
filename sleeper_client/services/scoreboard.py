"""Scoreboard: matchup pairs formatted for display, with game status."""

from datetime import datetime
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from sleeper_client.models.matchup import EnhancedMatchup, MatchupPair
from sleeper_client.models.scoreboard import GameStatus, ScoreboardMatchup, ScoreboardSide
from sleeper_client.models.state import NflState
from sleeper_client.services.api import fetch_all, require
from sleeper_client.services.matchups import MatchupComposer
from sleeper_client.services.state import StateService

# datetime.weekday(): Monday is 0, Sunday is 6
GAME_DAYS = (6, 0)


def infer_game_status(
    week: int,
    nfl_state: NflState,
    team1_points: float,
    team2_points: float,
    as_of: datetime,
) -> GameStatus:
    """Best guess at whether a week's games have been played.

    Sleeper has no "final" flag on matchups. Scores of zero mean the games
    have not started; from Tuesday on the current week is treated as final.
    """
    if not nfl_state.is_regular_season:
        return "upcoming"
    if week > nfl_state.week:
        return "upcoming"
    if week < nfl_state.week:
        return "complete"

    if not team1_points and not team2_points:
        return "upcoming"
    if as_of.weekday() not in GAME_DAYS:
        return "complete"
    return "in_progress"


def pick_winner(team1_points: float, team2_points: float) -> str:
    if team1_points > team2_points:
        return "team1"
    if team2_points > team1_points:
        return "team2"
    return "tie"


def build_side(matchup: EnhancedMatchup) -> ScoreboardSide:
    user = matchup.user
    return ScoreboardSide(
        name=user.effective_name if user else "Unknown",
        points=f"{matchup.points or 0:.2f}",
        roster_id=matchup.roster_id,
        starters=matchup.starters,
        players_points=matchup.players_points,
    )


def build_scoreboard(pairs: List[MatchupPair], week: int, nfl_state: NflState, as_of: datetime) -> List[ScoreboardMatchup]:
    """Format pairs in their given order, numbering them from 1."""
    scoreboard = []
    for index, pair in enumerate(pairs):
        team1_points = pair.team1.points or 0
        team2_points = (pair.team2.points or 0) if pair.team2 else 0
        status = infer_game_status(week, nfl_state, team1_points, team2_points, as_of)

        winner = None
        if pair.team2 is not None and status == "complete":
            winner = pick_winner(team1_points, team2_points)

        scoreboard.append(ScoreboardMatchup(
            matchup_id=pair.matchup_id,
            matchup_number=index + 1,
            week=week,
            status=status,
            team1=build_side(pair.team1),
            team2=build_side(pair.team2) if pair.team2 else None,
            winner=winner,
        ))
    return scoreboard


class ScoreboardFormatter:
    """Scoreboard for a league week.

    ``clock`` supplies "now" when format_scoreboard gets no ``as_of``;
    it defaults to the wall clock in ``timezone``.
    """

    def __init__(
        self,
        matchups: MatchupComposer,
        state: StateService,
        timezone: str = "America/New_York",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.matchups = matchups
        self.state = state
        self.timezone = timezone
        self.clock = clock or (lambda: datetime.now(ZoneInfo(self.timezone)))

    async def format_scoreboard(self, league_id: str, week: int, as_of: Optional[datetime] = None) -> List[ScoreboardMatchup]:
        require(league_id=league_id, week=week)
        pairs, nfl_state = await fetch_all(
            "scoreboard",
            self.matchups.compose_weekly_matchups(league_id, week),
            self.state.get_nfl_state(),
        )
        return build_scoreboard(pairs, week, nfl_state, as_of or self.clock())
