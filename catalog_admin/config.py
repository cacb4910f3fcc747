"""Configuration settings for Catalog Admin."""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = Field(default="Catalog Admin", env="APP_NAME")
    debug: bool = Field(default=False, env="DEBUG")
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "environment"),
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./catalog.db", env="DATABASE_URL"
    )
    # Seconds a store call may block before failing
    store_timeout_seconds: float = Field(default=10.0, env="STORE_TIMEOUT_SECONDS")

    # Catalog behaviour
    atomic_renames: bool = Field(default=True, env="ATOMIC_RENAMES")
    reload_on_change: bool = Field(default=True, env="RELOAD_ON_CHANGE")
    currency_symbol: str = Field(default="₹", env="CURRENCY_SYMBOL")
    seed_demo_data: bool = Field(default=True, env="SEED_DEMO_DATA")

    # Logging
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_file: Optional[str] = Field(default="app.log", env="LOG_FILE")

    # HTTP
    cors_origins: List[str] = Field(
        default=[
            "http://localhost:3000",  # Next.js dev server
            "http://127.0.0.1:3000",
        ],
        env="CORS_ORIGINS",
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Create global settings instance
settings = Settings()
