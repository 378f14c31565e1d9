"""Configuration management for Sleeper Client."""

import json
import os
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator
from rich.console import Console

console = Console()

DEFAULT_BASE_URL = "https://api.sleeper.app/v1"

# Environment variable -> Config field
ENV_OVERRIDES = {
    "SLEEPER_LEAGUE_ID": "league_id",
    "SLEEPER_BASE_URL": "base_url",
    "SLEEPER_TIMEOUT": "timeout",
    "SLEEPER_MAX_ATTEMPTS": "max_attempts",
    "SLEEPER_TIMEZONE": "timezone",
}


class Config(BaseModel):
    """Application configuration."""

    league_id: Optional[str] = None
    last_used: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0  # seconds, per request
    max_attempts: int = 1  # 1 = no retries
    timezone: str = "America/New_York"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value


class ConfigManager:
    """Manages application configuration persistence."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path.home() / ".sleeper_client"
        self.config_file = self.config_dir / "config.json"
        self._ensure_config_dir()

    def _ensure_config_dir(self) -> None:
        """Ensure config directory exists."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def _apply_env_overrides(self, data: dict) -> dict:
        """Layer SLEEPER_* environment variables over file values."""
        load_dotenv()
        merged = dict(data)
        for env_name, field in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                merged[field] = value
        return merged

    def load_config(self) -> Config:
        """Load configuration from file, then environment."""
        data = {}
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r') as f:
                    data = json.load(f)
            except (json.JSONDecodeError, ValueError) as e:
                console.print(f"[yellow]Warning: Invalid config file, using defaults: {e}[/yellow]")
                data = {}

        try:
            return Config(**self._apply_env_overrides(data))
        except ValueError as e:
            console.print(f"[yellow]Warning: Invalid configuration values, using defaults: {e}[/yellow]")
            return Config()

    def save_config(self, config: Config) -> None:
        """Save configuration to file."""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(config.model_dump(), f, indent=2)
        except OSError as e:
            console.print(f"[yellow]Warning: Could not save config: {e}[/yellow]")

    def get_output_dir(self) -> Path:
        """Get output directory path."""
        output_dir = Path("out")
        output_dir.mkdir(exist_ok=True)
        return output_dir
