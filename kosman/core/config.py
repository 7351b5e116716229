"""Application configuration settings."""

import os
from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_default_database_url() -> str:
    """Get the default database URL, using Fly Volume path if available."""
    if os.path.isdir("/data"):
        return "sqlite:////data/kosman.db"
    return "sqlite:///./kosman.db"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    PROJECT_NAME: str = "Kos Manager"
    VERSION: str = "0.1.0"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Durable key-value storage - defaults to Fly Volume path if /data exists
    DATABASE_URL: str = _get_default_database_url()
    STORAGE_KEY_PREFIX: str = "kos-man"

    # Seed data used when a storage key has never been written
    SEED_DEMO_DATA: bool = True
    DEFAULT_COST_PER_KWH: Decimal = Decimal("1500")
    DEFAULT_TRASH_FEE: Decimal = Decimal("25000")
    DEFAULT_WATER_FEE: Decimal = Decimal("50000")


settings = Settings()
