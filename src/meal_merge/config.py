"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Merge settings loaded from environment variables."""

    similarity_threshold: float = Field(default=0.85, ge=0.0, le=1.0)
    significant_change_ratio: float = Field(default=0.1, ge=0.0)
    refinement_model: str = "gpt-4.1-mini"
    refinement_temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="MEAL_MERGE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
