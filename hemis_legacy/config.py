"""
Configuration settings for the HEMIS legacy adapter.

Uses Pydantic Settings to load environment variables for logging and the
defaults applied by callers that expose CUBA-style query parameters
(`returnNulls`, `view`).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Wire defaults used when a caller omits the query parameter
    return_nulls_default: bool = Field(False, alias="RETURN_NULLS_DEFAULT")
    default_view: Optional[str] = Field(None, alias="DEFAULT_VIEW")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
