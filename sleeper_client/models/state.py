"""NFL season state model."""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class NflState(BaseModel):
    """Sleeper's view of the current NFL week and season."""

    model_config = ConfigDict(extra="allow")

    week: int = 0
    season: str = ""
    season_type: str = ""
    display_week: Optional[int] = None
    leg: Optional[int] = None
    league_season: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "NflState":
        """Create NflState from API response."""
        return cls(**{
            **data,
            "week": data.get("week") or 0,
            "season": str(data.get("season") or ""),
            "season_type": data.get("season_type") or "",
        })

    @property
    def is_regular_season(self) -> bool:
        return self.season_type == "regular"
