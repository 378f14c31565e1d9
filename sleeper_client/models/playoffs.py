"""Playoff format and bracket template models."""

from pydantic import BaseModel

from sleeper_client.models.league import League
from sleeper_client.models.state import NflState

# Used when a league leaves a playoff setting unset
PLAYOFF_DEFAULTS = {
    "playoff_teams": 6,
    "playoff_weeks": 3,
    "playoff_start_week": 15,
    "playoff_type": 0,  # standard bracket
    "total_teams": 12,
}


def teams_with_bye(playoff_teams: int) -> int:
    """Teams beyond the largest power-of-two bracket that fits."""
    if playoff_teams <= 0:
        return 0
    largest_bracket = 1 << (playoff_teams.bit_length() - 1)
    return max(0, playoff_teams - largest_bracket)


class PlayoffFormat(BaseModel):
    """Playoff configuration resolved from league settings."""

    playoff_teams: int
    playoff_weeks: int
    playoff_start_week: int
    playoff_type: int
    total_teams: int
    regular_season_weeks: int
    championship_week: int
    has_wildcard_round: bool
    teams_with_bye: int

    @classmethod
    def from_league(cls, league: League) -> "PlayoffFormat":
        """Resolve settings against PLAYOFF_DEFAULTS and derive the rest."""
        settings = league.settings
        resolved = {
            "playoff_teams": settings.playoff_teams,
            "playoff_weeks": settings.playoff_weeks,
            "playoff_start_week": settings.playoff_week_start,
            "playoff_type": settings.playoff_type,
            "total_teams": league.total_rosters,
        }
        # Sleeper reports 0 for settings that were never configured
        for key, value in resolved.items():
            if not value:
                resolved[key] = PLAYOFF_DEFAULTS[key]

        teams = resolved["playoff_teams"]
        weeks = resolved["playoff_weeks"]
        start = resolved["playoff_start_week"]
        return cls(
            **resolved,
            regular_season_weeks=start - 1,
            championship_week=start + weeks - 1,
            has_wildcard_round=(teams == 6 and weeks == 3),
            teams_with_bye=teams_with_bye(teams),
        )


class PlayoffFormatResult(BaseModel):
    playoff_settings: PlayoffFormat
    season_info: NflState
    league: League


class BracketGame(BaseModel):
    game: int
    team1_label: str
    team2_label: str


class BracketRound(BaseModel):
    round: int
    week: int
    name: str
    games: list[BracketGame]


class BracketStructure(BaseModel):
    format: str
    rounds: list[BracketRound]
    total_games: int


class PlayoffStructure(BaseModel):
    playoff_settings: PlayoffFormat
    season_info: NflState
    bracket: BracketStructure
