"""Index configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_STORAGE_ROOT = PROJECT_ROOT / "var" / "libindex" / "storage"


class IndexApiSettings(BaseSettings):
    """Process/runtime settings for the index API server."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="LIBINDEX_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Bind address for the index API.")
    port: PositiveInt = Field(default=8320, description="Port for the index API.")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload (dev only).")
    workers: PositiveInt = Field(default=1, description="Number of uvicorn worker processes.")
    log_level: Literal["critical", "error", "warning", "info", "debug", "trace"] = Field(
        default="info",
        description="Log level for index API / uvicorn.",
    )


class IndexSettings(BaseSettings):
    """Validated settings for the ingestion pipeline."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="LIBINDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    storage_root: Path = Field(
        default=DEFAULT_STORAGE_ROOT,
        description="Base directory for staged and permanent POM files and GitHub data.",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API.",
    )
    github_timeout_seconds: PositiveInt = Field(
        default=10,
        description="Timeout for a single GitHub request (seconds).",
    )
    enrichment_enabled: bool = Field(
        default=True,
        description="Fetch GitHub repository data after a successful publish.",
    )
    trusted_publishers: list[str] = Field(
        default_factory=list,
        description="GitHub logins allowed to publish for any repository.",
    )
    lock_table_warn_size: PositiveInt = Field(
        default=1024,
        description="Log a warning when this many references are locked at once.",
    )

    def trusted_logins(self) -> set[str]:
        return {login.strip().lower() for login in self.trusted_publishers if login.strip()}


@lru_cache()
def get_settings() -> IndexSettings:
    """Return memoized pipeline settings."""

    return IndexSettings()


@lru_cache()
def get_api_settings() -> IndexApiSettings:
    """Return memoized API process settings."""

    return IndexApiSettings()
