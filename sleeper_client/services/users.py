"""User-scoped endpoint wrappers."""

from typing import List

from sleeper_client.models.draft import Draft
from sleeper_client.models.league import League
from sleeper_client.models.user import User
from sleeper_client.services.api import SleeperAPIClient, NotFoundError, expect_list, require


class UserService:
    """Typed access to /user/... resources. Only "nfl" is supported."""

    def __init__(self, api: SleeperAPIClient):
        self.api = api

    async def _fetch_user(self, identifier: str) -> User:
        data = await self.api.get_json(f"user/{identifier}")
        # Unknown users come back as 200 with a null body
        if not data:
            raise NotFoundError(f"User not found: {identifier}")
        return User.from_api_response(data)

    async def get_user(self, username: str) -> User:
        """Get user information by username."""
        require(username=username)
        return await self._fetch_user(username)

    async def get_user_by_id(self, user_id: str) -> User:
        """Get user information by user ID."""
        require(user_id=user_id)
        return await self._fetch_user(user_id)

    async def get_leagues_for_user(self, user_id: str, season: str) -> List[League]:
        require(user_id=user_id, season=season)
        data = await self.api.get_json(f"user/{user_id}/leagues/nfl/{season}")
        return [League.from_api_response(item) for item in expect_list(data or [], "leagues")]

    async def get_drafts_by_user(self, user_id: str, season: str) -> List[Draft]:
        require(user_id=user_id, season=season)
        data = await self.api.get_json(f"user/{user_id}/drafts/nfl/{season}")
        return [Draft.from_api_response(item) for item in expect_list(data or [], "drafts")]
