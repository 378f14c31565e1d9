"""League overview: league, users and rosters joined into teams."""

from typing import Dict, List, Optional
from rich.console import Console

from sleeper_client.models.league import League
from sleeper_client.models.roster import Roster
from sleeper_client.models.team import LeagueOverview, Team
from sleeper_client.models.user import User
from sleeper_client.services.api import fetch_all, require
from sleeper_client.services.leagues import LeagueService

console = Console()


def enhance_roster(roster: Roster) -> Roster:
    """Copy of the roster with fpts/fpts_against/ppts totals filled in."""
    return roster.model_copy(update={"settings": roster.settings.with_totals()})


def build_teams(rosters: List[Roster], users: List[User]) -> List[Team]:
    """Join each roster to its owner, keeping roster order.

    A roster whose owner is not among the users (deleted account, orphaned
    team) gets user=None.
    """
    user_map: Dict[str, User] = {user.user_id: user for user in users}
    teams = []
    for roster in rosters:
        enhanced = enhance_roster(roster)
        user: Optional[User] = user_map.get(enhanced.owner_id) if enhanced.owner_id else None
        teams.append(Team(**dict(enhanced), user=user))
    return teams


class LeagueComposer:
    """Builds the league overview from three concurrent fetches."""

    def __init__(self, leagues: LeagueService):
        self.leagues = leagues

    async def compose_league_overview(self, league_id: str) -> LeagueOverview:
        """Get league information and its teams (roster + owner)."""
        require(league_id=league_id)
        league, users, rosters = await fetch_all(
            "league overview",
            self.leagues.get_league(league_id),
            self.leagues.get_users(league_id),
            self.leagues.get_rosters(league_id),
        )

        teams = build_teams(rosters, users)
        orphans = sum(1 for team in teams if team.user is None)
        if orphans:
            console.print(f"[yellow]{orphans} roster(s) in {league.name} have no matching owner[/yellow]")

        return LeagueOverview(league=league, teams=teams)
