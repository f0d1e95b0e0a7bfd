from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field

from core.settings.base import RiceBaseSettings


class AppSettings(RiceBaseSettings):
    """
    Application settings.
    Loaded from the environment / .env file with exact variable name matching.
    """

    app_name: str = Field(default="Rice Order API", alias="RICE_API_APP_NAME")
    app_version: str = Field(default="1.0.0", alias="RICE_API_APP_VERSION")
    log_level: str = Field(default="INFO", alias="RICE_API_LOG_LEVEL")

    api_host: str = Field(default="127.0.0.1", alias="RICE_API_HOST")
    api_port: int = Field(default=8080, alias="RICE_API_PORT")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        alias="RICE_API_CORS_ORIGINS",
    )

    # Load ORD001..ORD005 into the repository on first use
    seed_sample_data: bool = Field(default=True, alias="RICE_API_SEED_SAMPLE_DATA")


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
