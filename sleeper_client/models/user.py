"""User data models."""

from typing import Optional
from pydantic import BaseModel


class User(BaseModel):
    """Sleeper user model."""

    user_id: str
    username: Optional[str] = None
    display_name: Optional[str] = None
    team_name: Optional[str] = None
    avatar: Optional[str] = None
    metadata: Optional[dict] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "User":
        """Create User from API response."""
        metadata = data.get("metadata") or {}
        return cls(
            user_id=str(data["user_id"]),
            username=data.get("username"),
            display_name=data.get("display_name"),
            team_name=metadata.get("team_name") or None,
            avatar=data.get("avatar"),
            metadata=data.get("metadata"),
        )

    @property
    def effective_name(self) -> str:
        """Team name, then display name, then "Unknown"."""
        return self.team_name or self.display_name or "Unknown"
