"""
Application configuration using Pydantic Settings.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("APP_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./portfolio.db"

    # App settings
    app_name: str = "RE Portfolio Tracker"
    debug: bool = False
    log_level: str = "INFO"
    app_env: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Record storage
    storage_namespace: str = "@realestate"
    seed_on_first_access: bool = True

    # Dashboard limits
    attention_limit: int = 3
    category_budget_limit: int = 5

    class Config:
        env_file = get_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def properties_key(self) -> str:
        return f"{self.storage_namespace}_properties"

    @property
    def renovations_key(self) -> str:
        return f"{self.storage_namespace}_renovations"

    @property
    def onboarded_key(self) -> str:
        return f"{self.storage_namespace}_onboarded"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
