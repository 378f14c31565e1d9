"""NFL season state endpoint."""

from sleeper_client.models.state import NflState
from sleeper_client.services.api import SleeperAPIClient


class StateService:
    """Reads /state/nfl. Never cached: every call re-fetches."""

    def __init__(self, api: SleeperAPIClient):
        self.api = api

    async def get_nfl_state(self) -> NflState:
        data = await self.api.get_json("state/nfl")
        return NflState.from_api_response(data or {})
