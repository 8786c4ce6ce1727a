"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Settings come from STRKIT_* environment variables or a .env file
    - get_settings() is cached (lru_cache) - single instance per process
    - Core functions never read settings; only the dispatch shell and CLI do

Design Decisions:
    - default_hash_algorithm validated at load time, so a typo fails on startup
      instead of on the first hash request
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from strkit.core.errors import UnsupportedAlgorithmError
from strkit.core.hashing import normalize_algorithm


class Settings(BaseSettings):
    """strkit settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STRKIT_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Observability
    log_level: str = "WARNING"
    log_format: str = Field(default="text", pattern=r"^(json|text)$")

    # Operation defaults used when a request omits the argument
    default_hash_algorithm: str = "sha256"
    random_string_length: int = Field(default=16, ge=0)
    truncate_length: int = Field(default=100, ge=0)

    @field_validator("default_hash_algorithm")
    @classmethod
    def check_hash_algorithm(cls, v: str) -> str:
        try:
            return normalize_algorithm(v)
        except UnsupportedAlgorithmError as exc:
            raise ValueError(exc.message) from exc


@lru_cache
def get_settings() -> Settings:
    return Settings()
