"""Username <-> user_id resolution."""

from sleeper_client.services.users import UserService


class IdentityResolver:
    """Maps usernames to user ids and back through the user endpoint."""

    def __init__(self, users: UserService):
        self.users = users

    async def resolve_user_id_by_username(self, username: str) -> str:
        """Raises NotFoundError if the username is unknown."""
        user = await self.users.get_user(username)
        return user.user_id

    async def resolve_username_by_user_id(self, user_id: str) -> str:
        """Raises NotFoundError if the user id is unknown."""
        user = await self.users.get_user_by_id(user_id)
        return user.username
