"""SleeperClient: one object exposing every endpoint and helper view."""

from datetime import datetime
from typing import Dict, List, Optional
import httpx

from sleeper_client.config import Config
from sleeper_client.models.draft import Draft, DraftPick, TradedPick
from sleeper_client.models.league import League
from sleeper_client.models.matchup import Matchup, MatchupPair
from sleeper_client.models.player import Player, TrendingPlayer
from sleeper_client.models.playoffs import BracketStructure, PlayoffFormatResult, PlayoffStructure
from sleeper_client.models.roster import Roster
from sleeper_client.models.scoreboard import ScoreboardMatchup
from sleeper_client.models.state import NflState
from sleeper_client.models.team import LeagueOverview, StandingTeam
from sleeper_client.models.transaction import Transaction
from sleeper_client.models.user import User
from sleeper_client.services.api import SleeperAPIClient
from sleeper_client.services.drafts import DraftService
from sleeper_client.services.identity import IdentityResolver
from sleeper_client.services.leagues import LeagueService
from sleeper_client.services.matchups import MatchupComposer
from sleeper_client.services.overview import LeagueComposer
from sleeper_client.services.players import PlayerService
from sleeper_client.services.playoffs import PlayoffFormatResolver, generate_bracket_structure
from sleeper_client.services.scoreboard import ScoreboardFormatter
from sleeper_client.services.standings import StandingsRanker
from sleeper_client.services.state import StateService
from sleeper_client.services.users import UserService


class SleeperClient:
    """Facade over the Sleeper API.

    Holds a single SleeperAPIClient and delegates to the per-resource
    services and the helper composers, each of which can also be used on its
    own. Use as an async context manager so the HTTP client gets closed::

        async with SleeperClient() as sleeper:
            standings = await sleeper.get_league_standings("123")
    """

    def __init__(self, config: Optional[Config] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or Config()
        self.api = SleeperAPIClient(self.config, transport=transport)

        self.users = UserService(self.api)
        self.leagues = LeagueService(self.api)
        self.drafts = DraftService(self.api)
        self.players = PlayerService(self.api)
        self.state = StateService(self.api)

        self.identity = IdentityResolver(self.users)
        self.overview = LeagueComposer(self.leagues)
        self.standings = StandingsRanker(self.overview)
        self.matchups = MatchupComposer(self.leagues, self.state)
        self.scoreboard = ScoreboardFormatter(self.matchups, self.state, timezone=self.config.timezone)
        self.playoffs = PlayoffFormatResolver(self.leagues, self.state)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.api.aclose()

    # State

    async def get_nfl_state(self) -> NflState:
        return await self.state.get_nfl_state()

    # Users

    async def get_user(self, username: str) -> User:
        return await self.users.get_user(username)

    async def get_user_by_id(self, user_id: str) -> User:
        return await self.users.get_user_by_id(user_id)

    async def get_leagues_for_user(self, user_id: str, season: str) -> List[League]:
        return await self.users.get_leagues_for_user(user_id, season)

    async def get_drafts_by_user(self, user_id: str, season: str) -> List[Draft]:
        return await self.users.get_drafts_by_user(user_id, season)

    # Leagues

    async def get_league(self, league_id: str) -> League:
        return await self.leagues.get_league(league_id)

    async def get_rosters_by_league(self, league_id: str) -> List[Roster]:
        return await self.leagues.get_rosters(league_id)

    async def get_users_by_league(self, league_id: str) -> List[User]:
        return await self.leagues.get_users(league_id)

    async def get_week_matchups_by_league(self, league_id: str, week: int) -> List[Matchup]:
        return await self.leagues.get_matchups(league_id, week)

    async def get_winners_playoff_bracket(self, league_id: str) -> List[dict]:
        return await self.leagues.get_winners_bracket(league_id)

    async def get_losers_playoff_bracket(self, league_id: str) -> List[dict]:
        return await self.leagues.get_losers_bracket(league_id)

    async def get_week_transactions_by_league(self, league_id: str, week: int) -> List[Transaction]:
        return await self.leagues.get_transactions(league_id, week)

    async def get_traded_picks_by_league(self, league_id: str) -> List[TradedPick]:
        return await self.leagues.get_traded_picks(league_id)

    async def get_drafts_by_league(self, league_id: str) -> List[Draft]:
        return await self.leagues.get_drafts(league_id)

    # Drafts

    async def get_draft(self, draft_id: str) -> Draft:
        return await self.drafts.get_draft(draft_id)

    async def get_picks_by_draft(self, draft_id: str) -> List[DraftPick]:
        return await self.drafts.get_picks(draft_id)

    async def get_traded_picks_by_draft(self, draft_id: str) -> List[TradedPick]:
        return await self.drafts.get_traded_picks(draft_id)

    # Players

    async def get_players(self) -> Dict[str, Player]:
        return await self.players.get_players()

    async def get_trending_players(self, trend_type: str, lookback_hours: int = 24, limit: int = 25) -> List[TrendingPlayer]:
        return await self.players.get_trending_players(trend_type, lookback_hours, limit)

    # Helpers

    async def get_user_id_by_username(self, username: str) -> str:
        return await self.identity.resolve_user_id_by_username(username)

    async def get_username_by_user_id(self, user_id: str) -> str:
        return await self.identity.resolve_username_by_user_id(user_id)

    async def get_league_overview(self, league_id: str) -> LeagueOverview:
        return await self.overview.compose_league_overview(league_id)

    async def get_league_standings(self, league_id: str) -> List[StandingTeam]:
        return await self.standings.compute_standings(league_id)

    async def get_week_matchups(self, league_id: str, week: int) -> List[MatchupPair]:
        return await self.matchups.compose_weekly_matchups(league_id, week)

    async def get_current_week_matchups(self, league_id: str) -> List[MatchupPair]:
        return await self.matchups.compose_current_week_matchups(league_id)

    async def get_scoreboard(self, league_id: str, week: int, as_of: Optional[datetime] = None) -> List[ScoreboardMatchup]:
        return await self.scoreboard.format_scoreboard(league_id, week, as_of=as_of)

    async def get_playoff_format(self, league_id: str) -> PlayoffFormatResult:
        return await self.playoffs.resolve_playoff_format(league_id)

    async def get_playoff_structure(self, league_id: str) -> PlayoffStructure:
        return await self.playoffs.resolve_playoff_structure(league_id)

    @staticmethod
    def generate_bracket_structure(teams: int, weeks: int, start_week: int) -> BracketStructure:
        return generate_bracket_structure(teams, weeks, start_week)
