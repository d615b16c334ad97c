"""
App configuration - using pydantic settings for env vars
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="NoteLayer")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)  # set to True for dev

    # which front-end to start: "repl" or "http"
    app_mode: str = Field(default="repl", description="Application mode (repl or http)")

    # server config - loopback only by default
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)
    reload: bool = Field(default=False)

    # storage
    storage_backend: str = Field(default="memory", description="Storage backend (memory or sql)")
    database_url: str = Field(
        default="sqlite+aiosqlite:///:memory:", description="Database URL for the sql backend"
    )
    database_echo: bool = Field(default=False)  # useful for debugging

    # REPL
    repl_prompt: str = Field(default="REPL > ", description="Prompt printed before each line")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format"
    )
    log_dir: Optional[str] = Field(
        default=None, description="Directory for rotating log files (disabled when unset)"
    )

    # Environment
    environment: str = Field(default="development", description="Environment name")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
