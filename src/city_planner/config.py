"""Planner configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Planner settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CITY_PLANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # City defaults
    default_size: str = "medium"
    history_limit: int = 50

    # Simulation window
    base_year: int = 2025
    max_year: int = 2050

    # Fixed seed for layout generation (None = unseeded)
    layout_seed: int | None = None

    # Logging
    log_level: str = "info"


settings = Settings()
