"""League data models."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class LeagueSettings(BaseModel):
    """League settings blob; only the playoff keys are typed."""

    model_config = ConfigDict(extra="allow")

    playoff_teams: Optional[int] = None
    playoff_weeks: Optional[int] = None
    playoff_week_start: Optional[int] = None
    playoff_type: Optional[int] = None


class League(BaseModel):
    """Sleeper league model."""

    league_id: str
    name: str
    season: str
    season_type: Optional[str] = None
    status: str
    sport: Optional[str] = None
    total_rosters: Optional[int] = None
    settings: LeagueSettings = Field(default_factory=LeagueSettings)
    scoring_settings: Optional[dict] = None
    roster_positions: Optional[list[str]] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "League":
        """Create League from API response."""
        return cls(
            league_id=str(data["league_id"]),
            name=data.get("name", "Unknown League"),
            season=str(data.get("season", "")),
            season_type=data.get("season_type"),
            status=data.get("status", "unknown"),
            sport=data.get("sport"),
            total_rosters=data.get("total_rosters"),
            settings=LeagueSettings(**(data.get("settings") or {})),
            scoring_settings=data.get("scoring_settings"),
            roster_positions=data.get("roster_positions")
        )
