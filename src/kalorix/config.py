"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    environment: str = _ENVIRONMENT
    timezone: str = "America/Sao_Paulo"
    fixed_neat_kcal: float = 350.0
    profile_bmr_strategy: str = "harris_benedict"
    client_bmr_strategy: str = "mifflin_st_jeor"
    platform_url: str | None = "https://kalorix-hub-progress.vercel.app/"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
