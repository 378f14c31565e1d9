"""File management utilities."""

from pathlib import Path
from typing import Optional
from sleeper_client.config import ConfigManager


class FileManager:
    """Manages file paths and directories."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self.config_manager = config_manager or ConfigManager()

    def get_output_path(self, filename: str) -> Path:
        """Get output file path."""
        output_dir = self.config_manager.get_output_dir()
        return output_dir / filename

    def standings_filename(self, league_id: str) -> str:
        """Generate standings CSV filename."""
        return f"standings_{league_id}.csv"

    def scoreboard_filename(self, league_id: str, week: int) -> str:
        """Generate scoreboard CSV filename."""
        return f"scoreboard_{league_id}_week{week}.csv"

    def ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        return self.config_manager.get_output_dir()
