from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POINTER_PATCH_",
        extra="ignore",
    )

    # --- Operation dispatch ---
    # Unknown "op" tags pass through unchanged unless this is set.
    STRICT_OPERATIONS: bool = False

    # --- Array index tokens ---
    # RFC 6901 forbids leading zeros ("01"); accepted unless this is set.
    STRICT_ARRAY_INDICES: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def reset_settings_cache() -> None:
    get_settings.cache_clear()
