"""CSV export utilities for standings and scoreboards."""

from pathlib import Path
from typing import List, Optional
import pandas as pd
from rich.console import Console

from sleeper_client.io.files import FileManager
from sleeper_client.models.scoreboard import ScoreboardMatchup
from sleeper_client.models.team import StandingTeam

console = Console()

STANDINGS_COLUMNS = [
    "rank", "roster_id", "owner_id", "team_name", "wins", "losses", "ties",
    "fpts_total", "fpts_against_total", "ppts_total",
]

SCOREBOARD_COLUMNS = [
    "matchup_number", "matchup_id", "week", "status",
    "team1_roster_id", "team1_name", "team1_points",
    "team2_roster_id", "team2_name", "team2_points",
    "winner",
]


def standings_dataframe(standings: List[StandingTeam]) -> pd.DataFrame:
    """One row per team, in rank order."""
    rows = [
        {
            "rank": team.rank,
            "roster_id": team.roster_id,
            "owner_id": team.owner_id or "",
            "team_name": team.user.effective_name if team.user else "Unknown",
            "wins": team.settings.wins,
            "losses": team.settings.losses,
            "ties": team.settings.ties,
            "fpts_total": team.settings.fpts_total,
            "fpts_against_total": team.settings.fpts_against_total,
            "ppts_total": team.settings.ppts_total,
        }
        for team in standings
    ]
    return pd.DataFrame(rows, columns=STANDINGS_COLUMNS)


def scoreboard_dataframe(scoreboard: List[ScoreboardMatchup]) -> pd.DataFrame:
    """One row per matchup; team2 columns are blank on a bye."""
    rows = []
    for matchup in scoreboard:
        team2 = matchup.team2
        rows.append({
            "matchup_number": matchup.matchup_number,
            "matchup_id": matchup.matchup_id if matchup.matchup_id is not None else "",
            "week": matchup.week,
            "status": matchup.status,
            "team1_roster_id": matchup.team1.roster_id,
            "team1_name": matchup.team1.name,
            "team1_points": matchup.team1.points,
            "team2_roster_id": team2.roster_id if team2 else "",
            "team2_name": team2.name if team2 else "",
            "team2_points": team2.points if team2 else "",
            "winner": matchup.winner or "",
        })
    return pd.DataFrame(rows, columns=SCOREBOARD_COLUMNS)


class CSVExporter:
    """Handles CSV export operations."""

    def __init__(self, file_manager: Optional[FileManager] = None):
        self.file_manager = file_manager or FileManager()

    def _write(self, df: pd.DataFrame, filename: str) -> Path:
        output_path = self.file_manager.get_output_path(filename)
        self.file_manager.ensure_output_dir()
        df.to_csv(output_path, index=False, encoding='utf-8')
        return output_path

    def export_standings(self, standings: List[StandingTeam], league_id: str) -> Path:
        """Export league standings to CSV."""
        if not standings:
            raise ValueError("No standings data to export")

        df = standings_dataframe(standings)
        output_path = self._write(df, self.file_manager.standings_filename(league_id))

        console.print(f"[green]✅ Standings exported: {output_path}[/green]")
        console.print(f"[blue]📊 {len(df)} teams exported[/blue]")
        return output_path

    def export_scoreboard(self, scoreboard: List[ScoreboardMatchup], league_id: str, week: int) -> Path:
        """Export a week's scoreboard to CSV."""
        if not scoreboard:
            raise ValueError("No scoreboard data to export")

        df = scoreboard_dataframe(scoreboard)
        output_path = self._write(df, self.file_manager.scoreboard_filename(league_id, week))

        console.print(f"[green]✅ Week {week} scoreboard exported: {output_path}[/green]")
        console.print(f"[blue]📊 {len(df)} matchups exported[/blue]")
        return output_path
