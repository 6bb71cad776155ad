"""Configuration helpers for scorecard constants."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    default_yardage: int = Field(default=400, alias="SCORECARD_DEFAULT_YARDAGE")
    synthetic_yardage_jitter: int = Field(
        default=20, alias="SCORECARD_YARDAGE_JITTER", ge=0, le=100
    )
    course_catalog_path: str | None = Field(
        default=None, alias="SCORECARD_COURSES_FILE"
    )
    course_search_min_chars: int = Field(
        default=2, alias="SCORECARD_SEARCH_MIN_CHARS", ge=0
    )
    course_search_limit: int = Field(default=10, alias="SCORECARD_SEARCH_LIMIT", ge=1)

    require_api_key: bool = Field(default=False, alias="REQUIRE_API_KEY")
    api_keys: str = Field(default="", alias="API_KEY")
    cors_allow_origins: str = Field(
        default="http://localhost,http://127.0.0.1", alias="CORS_ALLOW_ORIGINS"
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allowed_api_keys(self) -> set[str]:
        return {key.strip() for key in self.api_keys.split(",") if key.strip()}

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["get_settings", "reset_settings_cache"]
