"""Application configuration using Pydantic settings."""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INDIGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Match
    seed: Optional[int] = Field(default=None, description="Seed for the match RNG")

    # Console
    player_name: str = Field(default="Player", description="Label for the human participant")
    computer_name: str = Field(default="Computer", description="Label for the automated participant")
    max_prompt_attempts: Optional[int] = Field(
        default=None,
        ge=1,
        description="Re-prompt limit for invalid input (unlimited when unset)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level for indigo loggers"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value


# Global settings instance
settings = Settings()
