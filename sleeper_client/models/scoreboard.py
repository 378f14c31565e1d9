"""Presentation models for the weekly scoreboard."""

from typing import Literal, Optional
from pydantic import BaseModel, Field

GameStatus = Literal["upcoming", "in_progress", "complete"]


class ScoreboardSide(BaseModel):
    name: str
    points: str  # always two decimals, e.g. "101.50"
    roster_id: int
    starters: list[Optional[str]] = Field(default_factory=list)
    players_points: dict[str, float] = Field(default_factory=dict)


class ScoreboardMatchup(BaseModel):
    """One scoreboard line; winner is "team1", "team2", "tie" or None."""

    matchup_id: Optional[int] = None
    matchup_number: int
    week: int
    status: GameStatus
    team1: ScoreboardSide
    team2: Optional[ScoreboardSide] = None
    winner: Optional[Literal["team1", "team2", "tie"]] = None
