"""League-scoped endpoint wrappers."""

from typing import List

from sleeper_client.models.league import League
from sleeper_client.models.matchup import Matchup
from sleeper_client.models.roster import Roster
from sleeper_client.models.transaction import Transaction
from sleeper_client.models.draft import Draft, TradedPick
from sleeper_client.models.user import User
from sleeper_client.services.api import SleeperAPIClient, NotFoundError, expect_list, require


class LeagueService:
    """Typed access to /league/{league_id}/... resources."""

    def __init__(self, api: SleeperAPIClient):
        self.api = api

    async def get_league(self, league_id: str) -> League:
        """Get league information."""
        require(league_id=league_id)
        data = await self.api.get_json(f"league/{league_id}")
        # Unknown leagues come back as 200 with a null body
        if not data:
            raise NotFoundError(f"League not found: {league_id}")
        return League.from_api_response(data)

    async def get_rosters(self, league_id: str) -> List[Roster]:
        """Get all rosters in the league."""
        require(league_id=league_id)
        data = await self.api.get_json(f"league/{league_id}/rosters")
        return [Roster.from_api_response(item) for item in expect_list(data, "rosters")]

    async def get_users(self, league_id: str) -> List[User]:
        """Get all users in the league."""
        require(league_id=league_id)
        data = await self.api.get_json(f"league/{league_id}/users")
        return [User.from_api_response(item) for item in expect_list(data, "users")]

    async def get_matchups(self, league_id: str, week: int) -> List[Matchup]:
        """Get every roster's matchup entry for one week."""
        require(league_id=league_id, week=week)
        data = await self.api.get_json(f"league/{league_id}/matchups/{week}")
        return [Matchup.from_api_response(item) for item in expect_list(data, "matchups")]

    async def get_winners_bracket(self, league_id: str) -> List[dict]:
        require(league_id=league_id)
        return expect_list(await self.api.get_json(f"league/{league_id}/winners_bracket"), "bracket games")

    async def get_losers_bracket(self, league_id: str) -> List[dict]:
        require(league_id=league_id)
        return expect_list(await self.api.get_json(f"league/{league_id}/losers_bracket"), "bracket games")

    async def get_transactions(self, league_id: str, week: int) -> List[Transaction]:
        """Get transactions for one week (Sleeper calls it a "round")."""
        require(league_id=league_id, week=week)
        data = await self.api.get_json(f"league/{league_id}/transactions/{week}")
        return [Transaction.from_api_response(item) for item in expect_list(data, "transactions")]

    async def get_traded_picks(self, league_id: str) -> List[TradedPick]:
        require(league_id=league_id)
        data = await self.api.get_json(f"league/{league_id}/traded_picks")
        return [TradedPick.from_api_response(item) for item in expect_list(data, "traded picks")]

    async def get_drafts(self, league_id: str) -> List[Draft]:
        require(league_id=league_id)
        data = await self.api.get_json(f"league/{league_id}/drafts")
        return [Draft.from_api_response(item) for item in expect_list(data, "drafts")]
