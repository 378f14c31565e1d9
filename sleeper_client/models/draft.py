"""Draft data models."""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel


def _from_millis(value: Optional[int]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


class Draft(BaseModel):
    """Sleeper draft model."""

    draft_id: str
    league_id: Optional[str] = None
    season: Optional[str] = None
    status: str = "unknown"
    type: str = "unknown"
    start_time: Optional[int] = None
    settings: Optional[dict] = None
    metadata: Optional[dict] = None
    draft_order: Optional[dict[str, int]] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Draft":
        """Create Draft from API response."""
        return cls(
            draft_id=str(data["draft_id"]),
            league_id=data.get("league_id"),
            season=data.get("season"),
            status=data.get("status") or "unknown",
            type=data.get("type") or "unknown",
            start_time=data.get("start_time"),
            settings=data.get("settings"),
            metadata=data.get("metadata"),
            draft_order=data.get("draft_order")
        )

    @property
    def start_datetime(self) -> Optional[datetime]:
        """Draft start time as an aware UTC datetime."""
        return _from_millis(self.start_time)


class DraftPick(BaseModel):
    """Sleeper draft pick model."""

    pick_no: int
    round: int
    draft_slot: Optional[int] = None
    player_id: Optional[str] = None
    picked_by: Optional[str] = None
    roster_id: Optional[int] = None
    is_keeper: Optional[bool] = None
    metadata: Optional[dict] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "DraftPick":
        """Create DraftPick from API response."""
        return cls(
            pick_no=data.get("pick_no", 0),
            round=data.get("round", 0),
            draft_slot=data.get("draft_slot"),
            player_id=data.get("player_id"),
            picked_by=data.get("picked_by") or None,
            roster_id=data.get("roster_id"),
            is_keeper=data.get("is_keeper"),
            metadata=data.get("metadata")
        )


class TradedPick(BaseModel):
    """A future pick that changed hands, league- or draft-scoped."""

    season: str
    round: int
    roster_id: int  # original owner's roster
    previous_owner_id: Optional[int] = None
    owner_id: int

    @classmethod
    def from_api_response(cls, data: dict) -> "TradedPick":
        return cls(
            season=str(data.get("season", "")),
            round=data.get("round", 0),
            roster_id=data["roster_id"],
            previous_owner_id=data.get("previous_owner_id"),
            owner_id=data["owner_id"]
        )
