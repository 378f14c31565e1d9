"""Tests for username/user_id resolution."""

import asyncio
import pytest
from unittest.mock import AsyncMock, Mock

from sleeper_client.models.user import User
from sleeper_client.services.api import NotFoundError
from sleeper_client.services.identity import IdentityResolver
from sleeper_client.services.users import UserService


class TestIdentityResolver:
    def setup_method(self):
        alice = User(user_id="u1", username="alice", display_name="Alice")
        self.users = Mock(spec=UserService)
        self.users.get_user = AsyncMock(return_value=alice)
        self.users.get_user_by_id = AsyncMock(return_value=alice)
        self.resolver = IdentityResolver(self.users)

    def test_round_trip(self):
        user_id = asyncio.run(self.resolver.resolve_user_id_by_username("alice"))
        username = asyncio.run(self.resolver.resolve_username_by_user_id(user_id))

        assert user_id == "u1"
        assert username == "alice"
        self.users.get_user.assert_awaited_once_with("alice")
        self.users.get_user_by_id.assert_awaited_once_with("u1")

    def test_unknown_username(self):
        self.users.get_user.side_effect = NotFoundError("User not found: ghost")

        with pytest.raises(NotFoundError):
            asyncio.run(self.resolver.resolve_user_id_by_username("ghost"))

    def test_unknown_user_id(self):
        self.users.get_user_by_id.side_effect = NotFoundError("User not found: 999")

        with pytest.raises(NotFoundError):
            asyncio.run(self.resolver.resolve_username_by_user_id("999"))
