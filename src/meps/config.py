"""Application configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage
    data_dir: Path = Path(".meps")

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_prefix = "MEPS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
