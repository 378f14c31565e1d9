"""Roster data models."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


def combine_points(whole: Optional[int], decimal: Optional[int]) -> float:
    """Sleeper splits points into an integer part and hundredths."""
    return (whole or 0) + (decimal or 0) / 100


class RosterSettings(BaseModel):
    """Season record and split point fields for a roster."""

    model_config = ConfigDict(extra="allow")

    wins: int = 0
    losses: int = 0
    ties: int = 0
    fpts: int = 0
    fpts_decimal: int = 0
    fpts_against: int = 0
    fpts_against_decimal: int = 0
    ppts: int = 0
    ppts_decimal: int = 0

    # Filled in by with_totals()
    fpts_total: Optional[float] = None
    fpts_against_total: Optional[float] = None
    ppts_total: Optional[float] = None

    def with_totals(self) -> "RosterSettings":
        """Return a copy with the combined point totals filled in."""
        return self.model_copy(update={
            "fpts_total": combine_points(self.fpts, self.fpts_decimal),
            "fpts_against_total": combine_points(self.fpts_against, self.fpts_against_decimal),
            "ppts_total": combine_points(self.ppts, self.ppts_decimal),
        })


class Roster(BaseModel):
    """Sleeper roster model."""

    roster_id: int
    owner_id: Optional[str] = None
    league_id: Optional[str] = None
    players: list[str] = Field(default_factory=list)
    starters: list[str] = Field(default_factory=list)
    reserve: Optional[list[str]] = None
    taxi: Optional[list[str]] = None
    settings: RosterSettings = Field(default_factory=RosterSettings)

    @classmethod
    def from_api_response(cls, data: dict) -> "Roster":
        """Create Roster from API response."""
        owner_id = data.get("owner_id")
        return cls(
            roster_id=data["roster_id"],
            owner_id=str(owner_id) if owner_id else None,
            league_id=data.get("league_id"),
            players=data.get("players") or [],
            starters=data.get("starters") or [],
            reserve=data.get("reserve"),
            taxi=data.get("taxi"),
            settings=RosterSettings(**{k: v for k, v in (data.get("settings") or {}).items() if v is not None})
        )

    @property
    def wins(self) -> int:
        return self.settings.wins

    @property
    def fpts_total(self) -> float:
        """Combined points for, computed on demand if not filled in."""
        if self.settings.fpts_total is not None:
            return self.settings.fpts_total
        return combine_points(self.settings.fpts, self.settings.fpts_decimal)
