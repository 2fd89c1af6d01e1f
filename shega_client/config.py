"""Client Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - short_cache_seconds < default_cache_seconds < long_cache_seconds
    - resolve_config() is cached (lru_cache): single instance per process
    - Instance is frozen: read by every request, never mutated
    - Missing environment never fails: every field has a default

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Base URL accepts NEXT_PUBLIC_API_URL so the dashboard deployment's env file works unchanged
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shega_client.core.domain_types import CacheTier

DEFAULT_BASE_URL = "http://localhost:8000/api"


class ClientConfig(BaseSettings):
    """Process-wide client settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHEGA_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # Backend
    base_url: str = Field(
        DEFAULT_BASE_URL,
        validation_alias=AliasChoices("SHEGA_API_URL", "NEXT_PUBLIC_API_URL"),
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths always start with '/', so the root must not end with one."""
        if isinstance(v, str):
            v = v.strip().rstrip("/")
            return v or DEFAULT_BASE_URL
        return v

    # Cache tiers (seconds)
    short_cache_seconds: int = Field(60, ge=0)  # status / health
    default_cache_seconds: int = Field(300, ge=0)  # most analytics reads
    long_cache_seconds: int = Field(3600, ge=0)  # historical aggregates
    cache_enabled: bool = True
    cache_max_entries: int = Field(1024, ge=1)

    @model_validator(mode="after")
    def check_tier_order(self) -> "ClientConfig":
        if not (
            self.short_cache_seconds
            < self.default_cache_seconds
            < self.long_cache_seconds
        ):
            raise ValueError(
                "cache tiers must satisfy short < default < long "
                f"(got {self.short_cache_seconds}, "
                f"{self.default_cache_seconds}, {self.long_cache_seconds})"
            )
        return self

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def cache_seconds(self, tier: CacheTier) -> int:
        """Lifetime in seconds for a cache tier."""
        return {
            CacheTier.SHORT: self.short_cache_seconds,
            CacheTier.DEFAULT: self.default_cache_seconds,
            CacheTier.LONG: self.long_cache_seconds,
        }[tier]


@lru_cache
def resolve_config() -> ClientConfig:
    return ClientConfig()
