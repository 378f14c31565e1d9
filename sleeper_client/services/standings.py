"""Standings: teams ranked by wins, then points for."""

from typing import List

from sleeper_client.models.team import StandingTeam, Team
from sleeper_client.services.overview import LeagueComposer


def rank_teams(teams: List[Team]) -> List[StandingTeam]:
    """Sort by wins desc, then fpts_total desc, and number from 1.

    sorted() is stable, so teams tied on both keys keep their input order.
    Ties never share a rank.
    """
    ordered = sorted(teams, key=lambda team: (-team.wins, -team.fpts_total))
    return [
        StandingTeam(**dict(team), rank=index + 1)
        for index, team in enumerate(ordered)
    ]


class StandingsRanker:
    def __init__(self, composer: LeagueComposer):
        self.composer = composer

    async def compute_standings(self, league_id: str) -> List[StandingTeam]:
        """Returns teams in a league sorted by rank."""
        overview = await self.composer.compose_league_overview(league_id)
        return rank_teams(overview.teams)
