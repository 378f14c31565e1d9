"""Matchup data models."""

from typing import Optional, Union
from pydantic import BaseModel, Field

from sleeper_client.models.roster import Roster
from sleeper_client.models.user import User


class Matchup(BaseModel):
    """Sleeper matchup model: one roster's entry for one week."""

    roster_id: int
    matchup_id: Optional[int] = None
    points: float = 0.0
    players: list[str] = Field(default_factory=list)
    starters: list[Optional[str]] = Field(default_factory=list)
    players_points: dict[str, float] = Field(default_factory=dict)
    starters_points: Optional[Union[list[Optional[float]], dict[str, float]]] = None
    custom_points: Optional[float] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Matchup":
        """Create Matchup from API response."""
        return cls(
            roster_id=data["roster_id"],
            matchup_id=data.get("matchup_id"),
            points=data.get("points") or 0.0,
            players=data.get("players") or [],
            starters=data.get("starters") or [],
            players_points=data.get("players_points") or {},
            starters_points=data.get("starters_points"),
            custom_points=data.get("custom_points")
        )

    @property
    def has_bye(self) -> bool:
        """Check if this is a bye week (no matchup_id)."""
        return self.matchup_id is None


class EnhancedMatchup(Matchup):
    """Matchup joined with its roster and the roster's owner."""

    roster: Optional[Roster] = None
    user: Optional[User] = None


class MatchupPair(BaseModel):
    """Opponents sharing a matchup_id. team2 is None on a bye."""

    matchup_id: Optional[int] = None
    team1: EnhancedMatchup
    team2: Optional[EnhancedMatchup] = None

    @property
    def is_bye(self) -> bool:
        return self.team2 is None

    @property
    def teams(self) -> list[EnhancedMatchup]:
        return [self.team1] if self.team2 is None else [self.team1, self.team2]
