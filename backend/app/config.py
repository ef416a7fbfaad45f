"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - descriptors_path None means the built-in catalogue is served

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: works out-of-the-box with no .env
    - search_case_sensitive defaults to False for the HTTP surface; the core
      query keeps case-sensitive matching as its own default
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from app.core.domain_types import LogFormat


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Descriptors
    descriptors_path: str | None = None

    @field_validator("descriptors_path", mode="before")
    @classmethod
    def blank_path_is_none(cls, v: str | None) -> str | None:
        """DESCRIPTORS_PATH= in .env means "use the built-in catalogue"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Search
    search_case_sensitive: bool = False
    search_max_query_length: int = 200

    # API
    service_name: str = "zoo-api"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON


@lru_cache
def get_settings() -> Settings:
    return Settings()
