"""Draft endpoint wrappers."""

from typing import List

from sleeper_client.models.draft import Draft, DraftPick, TradedPick
from sleeper_client.services.api import SleeperAPIClient, NotFoundError, expect_list, require


class DraftService:
    """Typed access to /draft/{draft_id}/... resources."""

    def __init__(self, api: SleeperAPIClient):
        self.api = api

    async def get_draft(self, draft_id: str) -> Draft:
        require(draft_id=draft_id)
        data = await self.api.get_json(f"draft/{draft_id}")
        if not data:
            raise NotFoundError(f"Draft not found: {draft_id}")
        return Draft.from_api_response(data)

    async def get_picks(self, draft_id: str) -> List[DraftPick]:
        """Get all picks made in a draft, in pick order."""
        require(draft_id=draft_id)
        data = await self.api.get_json(f"draft/{draft_id}/picks")
        picks = [DraftPick.from_api_response(item) for item in expect_list(data, "picks")]
        return sorted(picks, key=lambda pick: pick.pick_no)

    async def get_traded_picks(self, draft_id: str) -> List[TradedPick]:
        require(draft_id=draft_id)
        data = await self.api.get_json(f"draft/{draft_id}/traded_picks")
        return [TradedPick.from_api_response(item) for item in expect_list(data, "traded picks")]
