from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHERPAGE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    # Unset means the transport default applies.
    http_timeout_seconds: float | None = Field(default=None, ge=1.0, le=60.0)

    # OpenWeatherMap
    openweather_api_key: str = Field(default="")
    openweather_base_url: str = Field(default="https://api.openweathermap.org/data/2.5")
    icon_base_url: str = Field(default="https://openweathermap.org/img/wn")

    rate_limit: str = Field(default="60/minute")
    log_level: str = Field(default="INFO")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: Any) -> Any:
        # Allow WEATHERPAGE_CORS_ORIGINS as JSON array or comma-separated string.
        if not isinstance(value, str):
            return value
        parsed = value.strip()
        if parsed.startswith("["):
            try:
                return [str(x).strip() for x in json.loads(parsed) if str(x).strip()]
            except ValueError:
                pass
        return [s.strip() for s in parsed.split(",") if s.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
