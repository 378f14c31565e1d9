"""Player data models."""

from typing import Optional
from pydantic import BaseModel


class Player(BaseModel):
    """NFL player model."""

    player_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    team: Optional[str] = None
    status: Optional[str] = None
    injury_status: Optional[str] = None
    fantasy_positions: Optional[list[str]] = None

    @classmethod
    def from_api_response(cls, player_id: str, data: dict) -> "Player":
        """Create Player from API response."""
        return cls(
            player_id=player_id,
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            position=data.get("position"),
            team=data.get("team"),
            status=data.get("status"),
            injury_status=data.get("injury_status"),
            fantasy_positions=data.get("fantasy_positions")
        )

    @property
    def full_name(self) -> str:
        """Get player's full name."""
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) or "Unknown Player"


class TrendingPlayer(BaseModel):
    """Entry from the trending add/drop feed."""

    player_id: str
    count: int

    @classmethod
    def from_api_response(cls, data: dict) -> "TrendingPlayer":
        return cls(player_id=str(data["player_id"]), count=data.get("count", 0))
