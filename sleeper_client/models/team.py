"""Derived team models: roster joined with its owner."""

from typing import Optional
from pydantic import BaseModel

from sleeper_client.models.league import League
from sleeper_client.models.roster import Roster
from sleeper_client.models.user import User


class Team(Roster):
    """A roster with point totals and its owning user (None if unmatched)."""

    user: Optional[User] = None


class StandingTeam(Team):
    """A team with its 1-based position in the standings."""

    rank: int


class LeagueOverview(BaseModel):
    """League plus every team in gateway order."""

    league: League
    teams: list[Team]
