"""Application configuration and settings management."""
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="PROFILEHUB_",
        extra="ignore",
    )

    app_name: str = "ProfileHub"
    secret_key: str = "change-me"

    # Storage
    data_file: Path = Path("./db.json")
    static_dir: Path = Path("./public")

    # Sessions
    session_cookie_name: str = "profilehub_session"
    session_max_age_seconds: int = 7 * 24 * 60 * 60
    session_cookie_secure: bool = False
    session_sweep_interval_seconds: int = 60 * 60

    allowed_origins: Annotated[List[str], NoDecode] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: List[str] | str) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
