"""Playoff format resolution and bracket templates."""

from typing import Dict, List, Tuple
from rich.console import Console

from sleeper_client.models.playoffs import (
    BracketGame,
    BracketRound,
    BracketStructure,
    PlayoffFormat,
    PlayoffFormatResult,
    PlayoffStructure,
)
from sleeper_client.services.api import fetch_all, require
from sleeper_client.services.leagues import LeagueService
from sleeper_client.services.state import StateService

console = Console()


def seed(number: int) -> str:
    return f"Seed {number}"


def winner_of(round_number: int, game: int) -> str:
    return f"Winner of Round {round_number} Game {game}"


# (teams, weeks) -> [(round name, [(team1 label, team2 label), ...]), ...]
BRACKET_TEMPLATES: Dict[Tuple[int, int], List[Tuple[str, List[Tuple[str, str]]]]] = {
    (6, 3): [
        ("Wild Card", [(seed(3), seed(6)), (seed(4), seed(5))]),
        ("Semifinals", [(seed(1), winner_of(1, 1)), (seed(2), winner_of(1, 2))]),
        ("Championship", [(winner_of(2, 1), winner_of(2, 2))]),
    ],
    (4, 2): [
        ("Semifinals", [(seed(1), seed(4)), (seed(2), seed(3))]),
        ("Championship", [(winner_of(1, 1), winner_of(1, 2))]),
    ],
    (8, 3): [
        ("Quarterfinals", [(seed(1), seed(8)), (seed(4), seed(5)), (seed(2), seed(7)), (seed(3), seed(6))]),
        ("Semifinals", [(winner_of(1, 1), winner_of(1, 2)), (winner_of(1, 3), winner_of(1, 4))]),
        ("Championship", [(winner_of(2, 1), winner_of(2, 2))]),
    ],
}


def generate_bracket_structure(teams: int, weeks: int, start_week: int) -> BracketStructure:
    """Expand a playoff format into its round/game template.

    Only 6-team/3-week, 4-team/2-week and 8-team/3-week formats have a
    template; anything else yields no rounds.
    """
    template = BRACKET_TEMPLATES.get((teams, weeks), [])
    rounds = [
        BracketRound(
            round=index + 1,
            week=start_week + index,
            name=name,
            games=[
                BracketGame(game=game_index + 1, team1_label=team1, team2_label=team2)
                for game_index, (team1, team2) in enumerate(games)
            ],
        )
        for index, (name, games) in enumerate(template)
    ]
    return BracketStructure(
        format=f"{teams}-team, {weeks}-week",
        rounds=rounds,
        total_games=sum(len(r.games) for r in rounds),
    )


class PlayoffFormatResolver:
    """Reads playoff settings for a league alongside the season state."""

    def __init__(self, leagues: LeagueService, state: StateService):
        self.leagues = leagues
        self.state = state

    async def resolve_playoff_format(self, league_id: str) -> PlayoffFormatResult:
        require(league_id=league_id)
        league, nfl_state = await fetch_all(
            "playoff format",
            self.leagues.get_league(league_id),
            self.state.get_nfl_state(),
        )
        return PlayoffFormatResult(
            playoff_settings=PlayoffFormat.from_league(league),
            season_info=nfl_state,
            league=league,
        )

    async def resolve_playoff_structure(self, league_id: str) -> PlayoffStructure:
        """Playoff format plus its bracket template."""
        result = await self.resolve_playoff_format(league_id)
        settings = result.playoff_settings
        bracket = generate_bracket_structure(
            settings.playoff_teams, settings.playoff_weeks, settings.playoff_start_week
        )
        if not bracket.rounds:
            console.print(f"[yellow]No bracket template for {bracket.format} playoffs[/yellow]")
        return PlayoffStructure(
            playoff_settings=settings,
            season_info=result.season_info,
            bracket=bracket,
        )
