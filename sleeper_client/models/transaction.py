"""Transaction data models."""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class Transaction(BaseModel):
    """Sleeper transaction model (trade, waiver, free_agent, commissioner)."""

    model_config = ConfigDict(extra="allow")

    transaction_id: str
    type: str
    status: str
    leg: int  # week number
    roster_ids: List[int] = []
    creator: Optional[str] = None
    created: Optional[int] = None  # epoch millis
    settings: Optional[Dict] = None
    metadata: Optional[Dict] = None
    adds: Optional[Dict[str, int]] = None  # {player_id: roster_id}
    drops: Optional[Dict[str, int]] = None
    consenter_ids: Optional[List[int]] = None
    draft_picks: Optional[List[Dict]] = None
    waiver_budget: Optional[List[Dict]] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Transaction":
        """Create Transaction from API response."""
        return cls(**{key: value for key, value in data.items() if value is not None})

    @property
    def week(self) -> int:
        return self.leg

    @property
    def is_completed(self) -> bool:
        return self.status == "complete"

    def players_moved(self, roster_id: int) -> Dict[str, List[str]]:
        """Players added to and dropped from one roster."""
        return {
            "added": [pid for pid, rid in (self.adds or {}).items() if rid == roster_id],
            "dropped": [pid for pid, rid in (self.drops or {}).items() if rid == roster_id],
        }
