"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from typing import List

import pytz
from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


# Standard laughing emoji plus the community's custom ones (by emoji id)
DEFAULT_FUNNY_REACTIONS = [
    "🤣",
    "😂",
    "🥇",
    "930549056466485298",
    "956966036354265180",  # :pepehardlaugh:
    "974777892418519081",  # :doggokek:
    "954075635310035024",  # :kekw:
    "956966037063106580",  # :pepelaugh:
]

DEFAULT_BONE_REACTIONS = ["🦴"]


class Settings(BaseSettings):
    """Application settings with environment-based configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    debug: bool = Field(default=False, description="Enable debug logging for the bot and its libraries")
    log_level: str = Field(default="INFO", description="Logging level")

    # Discord Bot
    discord_bot_token: str = Field(
        default="",
        description="Discord bot token",
    )
    meme_channel_id: str = Field(
        default="",
        description="Channel scanned for contest entries (validated when the command runs)",
    )

    # Contest window
    contest_timezone: str = Field(
        default="America/Bogota",
        description="Timezone the weekly contest boundary is expressed in",
    )
    contest_anchor_weekday: int = Field(
        default=4,
        description="Weekday the contest week starts on (Monday=0, Friday=4)",
    )
    contest_anchor_hour: int = Field(
        default=12,
        description="Local hour the contest week starts at",
    )

    # Contest categories
    funny_reactions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FUNNY_REACTIONS),
        description="Reaction names or custom emoji ids counted for the meme contest",
    )
    bone_reactions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_BONE_REACTIONS),
        description="Reaction names or custom emoji ids counted for the bone contest",
    )
    contest_max_winners: int = Field(
        default=3,
        description="Number of winners announced per category",
    )
    message_page_size: int = Field(
        default=100,
        description="Messages requested per history page (Discord caps this at 100)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v

    @field_validator("contest_timezone")
    @classmethod
    def validate_contest_timezone(cls, v: str) -> str:
        """Validate the timezone name against the tz database."""
        if v not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator("contest_anchor_weekday")
    @classmethod
    def validate_contest_anchor_weekday(cls, v: int) -> int:
        if not 0 <= v <= 6:
            raise ValueError("Anchor weekday must be between 0 (Monday) and 6 (Sunday)")
        return v

    @field_validator("contest_anchor_hour")
    @classmethod
    def validate_contest_anchor_hour(cls, v: int) -> int:
        if not 0 <= v <= 23:
            raise ValueError("Anchor hour must be between 0 and 23")
        return v

    @field_validator("contest_max_winners")
    @classmethod
    def validate_contest_max_winners(cls, v: int) -> int:
        if v < 1:
            raise ValueError("At least one winner must be announced")
        return v

    @field_validator("message_page_size")
    @classmethod
    def validate_message_page_size(cls, v: int) -> int:
        """Discord refuses history requests for more than 100 messages."""
        if not 1 <= v <= 100:
            raise ValueError("Message page size must be between 1 and 100")
        return v

    @property
    def tzinfo(self) -> pytz.BaseTzInfo:
        """The contest timezone as a pytz timezone object."""
        return pytz.timezone(self.contest_timezone)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def override_settings(**kwargs) -> Settings:
    """Create a settings instance with overrides (useful for testing)."""
    return Settings(**kwargs)
