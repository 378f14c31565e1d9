"""Player endpoint wrappers."""

from typing import Dict, List
from rich.console import Console

from sleeper_client.models.player import Player, TrendingPlayer
from sleeper_client.services.api import SleeperAPIClient, MalformedResponseError

console = Console()

TRENDING_TYPES = ("add", "drop")


class PlayerService:
    """Typed access to /players/nfl resources."""

    def __init__(self, api: SleeperAPIClient):
        self.api = api

    async def get_players(self) -> Dict[str, Player]:
        """Fetch every NFL player keyed by player_id (a ~5MB payload)."""
        console.print("[blue]Fetching NFL players database...[/blue]")
        data = await self.api.get_json("players/nfl")
        if not isinstance(data, dict):
            raise MalformedResponseError(200, "Expected a mapping of players")

        players = {
            player_id: Player.from_api_response(player_id, player_data)
            for player_id, player_data in data.items()
            if isinstance(player_data, dict)
        }
        console.print(f"[green]Loaded {len(players)} players from API[/green]")
        return players

    async def get_trending_players(self, trend_type: str, lookback_hours: int = 24, limit: int = 25) -> List[TrendingPlayer]:
        """Players trending on waivers over the lookback window."""
        if trend_type not in TRENDING_TYPES:
            raise ValueError("Type (add or drop) is required")
        data = await self.api.get_json(
            f"players/nfl/trending/{trend_type}",
            params={"lookback_hours": lookback_hours, "limit": limit},
        )
        if not isinstance(data, list):
            raise MalformedResponseError(200, "Expected a list of trending players")
        return [TrendingPlayer.from_api_response(item) for item in data]
