"""Command line interface for Sleeper Client."""

import asyncio
from typing import Awaitable, Callable, List, Optional, TypeVar
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from sleeper_client.client import SleeperClient
from sleeper_client.config import Config, ConfigManager
from sleeper_client.io.csv_export import CSVExporter
from sleeper_client.models.matchup import MatchupPair
from sleeper_client.models.playoffs import PlayoffStructure
from sleeper_client.models.scoreboard import ScoreboardMatchup
from sleeper_client.models.team import LeagueOverview, StandingTeam
from sleeper_client.services.api import CompositionError, SleeperAPIError

app = typer.Typer(
    name="sleeper-client",
    help="Sleeper Fantasy Football API client",
    add_completion=False
)
console = Console()

T = TypeVar("T")

LEAGUE_ID_OPTION = typer.Option(None, "--league-id", "-l", help="League ID to use (defaults to the saved one)")


def load_config(league_id: Optional[str] = None, require_league: bool = True) -> Config:
    """Load config and apply --league-id on top of it."""
    config = ConfigManager().load_config()

    if league_id:
        config.league_id = league_id

    if require_league and not config.league_id:
        console.print("[red]❌ No league ID provided. Use --league-id or set SLEEPER_LEAGUE_ID.[/red]")
        raise typer.Exit(1)
    return config


def run_with_client(
    config: Config,
    call: Callable[[SleeperClient], Awaitable[T]],
    remember_league: bool = False,
) -> T:
    """Run one request flow against a fresh client and report failures.

    With remember_league, the league id is saved only once the flow succeeds.
    """
    async def _run() -> T:
        async with SleeperClient(config) as sleeper:
            return await call(sleeper)

    try:
        result = asyncio.run(_run())
    except (SleeperAPIError, CompositionError, ValueError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    if remember_league:
        ConfigManager().save_config(config)
    return result


def points(value: Optional[float]) -> str:
    return f"{value or 0:.2f}"


def render_overview(overview: LeagueOverview) -> Table:
    league = overview.league
    table = Table(title=f"{league.name} ({league.season}, {league.status})")
    table.add_column("Roster", style="cyan", justify="right")
    table.add_column("Team", style="green")
    table.add_column("Owner")
    table.add_column("Players", justify="right")
    table.add_column("PF", justify="right")

    for team in overview.teams:
        user = team.user
        table.add_row(
            str(team.roster_id),
            user.effective_name if user else "Unknown",
            (user.username or user.display_name or "") if user else "-",
            str(len(team.players)),
            points(team.settings.fpts_total),
        )
    return table


def render_standings(standings: List[StandingTeam]) -> Table:
    table = Table(title="Standings")
    table.add_column("#", style="bold cyan", justify="right")
    table.add_column("Team", style="green")
    table.add_column("W-L-T", justify="center")
    table.add_column("PF", justify="right")
    table.add_column("PA", justify="right")

    for team in standings:
        settings = team.settings
        table.add_row(
            str(team.rank),
            team.user.effective_name if team.user else "Unknown",
            f"{settings.wins}-{settings.losses}-{settings.ties}",
            points(settings.fpts_total),
            points(settings.fpts_against_total),
        )
    return table


def render_matchups(pairs: List[MatchupPair]) -> Table:
    table = Table(title="Matchups")
    table.add_column("Matchup", style="cyan", justify="right")
    table.add_column("Team 1", style="green")
    table.add_column("Team 2", style="green")

    def label(side) -> str:
        name = side.user.effective_name if side.user else "Unknown"
        return f"{name} ({points(side.points)})"

    for pair in pairs:
        table.add_row(
            str(pair.matchup_id if pair.matchup_id is not None else "-"),
            label(pair.team1),
            label(pair.team2) if pair.team2 else "[dim]BYE[/dim]",
        )
    return table


def render_scoreboard(scoreboard: List[ScoreboardMatchup], week: int) -> Table:
    table = Table(title=f"Week {week} Scoreboard")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Team 1", style="green")
    table.add_column("Pts", justify="right")
    table.add_column("Team 2", style="green")
    table.add_column("Pts", justify="right")
    table.add_column("Status")
    table.add_column("Winner", style="bold")

    for matchup in scoreboard:
        team2 = matchup.team2
        winner = ""
        if matchup.winner == "tie":
            winner = "Tie"
        elif matchup.winner:
            winner = getattr(matchup, matchup.winner).name
        table.add_row(
            str(matchup.matchup_number),
            matchup.team1.name,
            matchup.team1.points,
            team2.name if team2 else "[dim]BYE[/dim]",
            team2.points if team2 else "",
            matchup.status.replace("_", " "),
            winner,
        )
    return table


def render_playoffs(structure: PlayoffStructure) -> None:
    settings = structure.playoff_settings
    summary = (
        f"Playoff teams: {settings.playoff_teams} of {settings.total_teams}\n"
        f"Weeks {settings.playoff_start_week}-{settings.championship_week} "
        f"(regular season: {settings.regular_season_weeks} weeks)\n"
        f"First-round byes: {settings.teams_with_bye}"
        + (" (wild card round)" if settings.has_wildcard_round else "")
    )
    console.print(Panel(summary, title="Playoff Format", border_style="green"))

    bracket = structure.bracket
    if not bracket.rounds:
        console.print(f"[yellow]No bracket template for {bracket.format} playoffs[/yellow]")
        return

    table = Table(title=f"Bracket ({bracket.format}, {bracket.total_games} games)")
    table.add_column("Week", style="cyan", justify="right")
    table.add_column("Round", style="bold")
    table.add_column("Game", justify="right")
    table.add_column("Matchup")
    for bracket_round in bracket.rounds:
        for game in bracket_round.games:
            table.add_row(
                str(bracket_round.week),
                bracket_round.name,
                str(game.game),
                f"{game.team1_label} vs {game.team2_label}",
            )
    console.print(table)


@app.command("user")
def user(username: str = typer.Argument(..., help="Sleeper username")) -> None:
    """Look up a user's ID and resolve it back to the username."""
    config = load_config(require_league=False)

    async def _lookup(sleeper: SleeperClient):
        user_id = await sleeper.get_user_id_by_username(username)
        return user_id, await sleeper.get_username_by_user_id(user_id)

    user_id, resolved = run_with_client(config, _lookup)
    console.print(f"[green]✅ {resolved}[/green] (ID: {user_id})")


@app.command("overview")
def overview(league_id: Optional[str] = LEAGUE_ID_OPTION) -> None:
    """Show the league and every team with its owner."""
    config = load_config(league_id)
    result = run_with_client(
        config, lambda sleeper: sleeper.get_league_overview(config.league_id), remember_league=bool(league_id)
    )
    console.print(render_overview(result))


@app.command("standings")
def standings(
    league_id: Optional[str] = LEAGUE_ID_OPTION,
    export: bool = typer.Option(False, "--export", help="Also write the standings to CSV"),
) -> None:
    """Show teams ranked by wins, then points for."""
    config = load_config(league_id)
    result = run_with_client(
        config, lambda sleeper: sleeper.get_league_standings(config.league_id), remember_league=bool(league_id)
    )
    console.print(render_standings(result))

    if export:
        try:
            CSVExporter().export_standings(result, config.league_id)
        except (ValueError, OSError) as e:
            console.print(f"[red]❌ Export failed: {e}[/red]")
            raise typer.Exit(1)


@app.command("matchups")
def matchups(
    week: Optional[int] = typer.Option(None, help="NFL week (defaults to the current week)"),
    league_id: Optional[str] = LEAGUE_ID_OPTION,
) -> None:
    """Show head-to-head pairs for a week."""
    config = load_config(league_id)

    async def _fetch(sleeper: SleeperClient):
        if week is None:
            return await sleeper.get_current_week_matchups(config.league_id)
        return await sleeper.get_week_matchups(config.league_id, week)

    console.print(render_matchups(run_with_client(config, _fetch, remember_league=bool(league_id))))


@app.command("scoreboard")
def scoreboard(
    week: Optional[int] = typer.Option(None, help="NFL week (defaults to the current week)"),
    league_id: Optional[str] = LEAGUE_ID_OPTION,
    export: bool = typer.Option(False, "--export", help="Also write the scoreboard to CSV"),
) -> None:
    """Show scores, game status and winners for a week."""
    config = load_config(league_id)

    async def _fetch(sleeper: SleeperClient):
        target_week = week
        if target_week is None:
            target_week = (await sleeper.get_nfl_state()).week
        return target_week, await sleeper.get_scoreboard(config.league_id, target_week)

    target_week, result = run_with_client(config, _fetch, remember_league=bool(league_id))
    console.print(render_scoreboard(result, target_week))

    if export:
        try:
            CSVExporter().export_scoreboard(result, config.league_id, target_week)
        except (ValueError, OSError) as e:
            console.print(f"[red]❌ Export failed: {e}[/red]")
            raise typer.Exit(1)


@app.command("playoffs")
def playoffs(league_id: Optional[str] = LEAGUE_ID_OPTION) -> None:
    """Show the playoff format and its bracket template."""
    config = load_config(league_id)
    structure = run_with_client(
        config, lambda sleeper: sleeper.get_playoff_structure(config.league_id), remember_league=bool(league_id)
    )
    render_playoffs(structure)


if __name__ == "__main__":
    app()
