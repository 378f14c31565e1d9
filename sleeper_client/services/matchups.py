"""Weekly matchups joined with rosters and owners."""

from typing import Dict, List, Optional
from rich.console import Console

from sleeper_client.models.matchup import EnhancedMatchup, Matchup, MatchupPair
from sleeper_client.models.roster import Roster
from sleeper_client.models.user import User
from sleeper_client.services.api import fetch_all, require
from sleeper_client.services.leagues import LeagueService
from sleeper_client.services.state import StateService

console = Console()


def group_matchups_by_id(matchups: List[Matchup]) -> List[List[Matchup]]:
    """Group matchups by matchup_id in first-encounter order.

    Entries without a matchup_id are byes and each get a group of their own.
    """
    grouped: Dict[int, List[Matchup]] = {}
    groups: List[List[Matchup]] = []

    for matchup in matchups:
        if matchup.has_bye:
            groups.append([matchup])
            continue
        group = grouped.get(matchup.matchup_id)
        if group is None:
            group = grouped[matchup.matchup_id] = []
            groups.append(group)
        group.append(matchup)

    for group in groups:
        if len(group) > 2:
            raise ValueError(f"Matchup {group[0].matchup_id} has {len(group)} rosters; expected at most 2")
    return groups


def enhance_matchup(matchup: Matchup, roster_map: Dict[int, Roster], user_map: Dict[str, User]) -> EnhancedMatchup:
    roster = roster_map.get(matchup.roster_id)
    user: Optional[User] = None
    if roster is not None and roster.owner_id:
        user = user_map.get(roster.owner_id)
    return EnhancedMatchup(**dict(matchup), roster=roster, user=user)


def pair_matchups(matchups: List[Matchup], rosters: List[Roster], users: List[User]) -> List[MatchupPair]:
    """Turn a week's matchup entries into opponent pairs."""
    roster_map = {roster.roster_id: roster for roster in rosters}
    user_map = {user.user_id: user for user in users}

    pairs = []
    for group in group_matchups_by_id(matchups):
        sides = [enhance_matchup(matchup, roster_map, user_map) for matchup in group]
        pairs.append(MatchupPair(
            matchup_id=group[0].matchup_id,
            team1=sides[0],
            team2=sides[1] if len(sides) > 1 else None,
        ))
    return pairs


class MatchupComposer:
    """Builds head-to-head pairs for a league week."""

    def __init__(self, leagues: LeagueService, state: StateService):
        self.leagues = leagues
        self.state = state

    async def compose_weekly_matchups(self, league_id: str, week: int) -> List[MatchupPair]:
        """Fetch matchups, users and rosters together and pair opponents."""
        require(league_id=league_id, week=week)
        console.print(f"[blue]Fetching matchups for week {week}...[/blue]")
        matchups, users, rosters = await fetch_all(
            f"matchups for week {week}",
            self.leagues.get_matchups(league_id, week),
            self.leagues.get_users(league_id),
            self.leagues.get_rosters(league_id),
        )

        pairs = pair_matchups(matchups, rosters, users)
        console.print(f"[green]Found {len(pairs)} matchups for week {week}[/green]")
        return pairs

    async def compose_current_week_matchups(self, league_id: str) -> List[MatchupPair]:
        """Same as compose_weekly_matchups for the NFL state's current week."""
        require(league_id=league_id)
        (nfl_state,) = await fetch_all("current week", self.state.get_nfl_state())
        return await self.compose_weekly_matchups(league_id, nfl_state.week)
