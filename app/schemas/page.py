from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Phase(str, Enum):
    IDLE = "idle"
    AWAITING_CITY_INPUT = "awaiting_city_input"
    AWAITING_GEOLOCATION = "awaiting_geolocation"
    DISPLAYING = "displaying"
    ERROR_SHOWN = "error_shown"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    FETCH = "fetch"
    TRANSPORT = "transport"
    GEOLOCATION_PERMISSION = "geolocation_permission"
    GEOLOCATION_UNAVAILABLE = "geolocation_unavailable"
    GEOLOCATION_UNSUPPORTED = "geolocation_unsupported"


class CurrentWeatherView(BaseModel):
    model_config = ConfigDict(frozen=True)

    location_name: str
    icon_url: str
    icon_alt: str
    temperature: int = Field(..., description="Rounded temperature (C).")
    condition: str
    humidity: int
    wind_speed: str = Field(..., description="Wind speed (m/s), one decimal.")
    sunrise: str
    sunset: str


class ForecastDayView(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: str
    icon_url: str
    temperature: int
    description: str


class PageState(BaseModel):
    """Everything the page shows. Transitions return a new instance."""

    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.IDLE
    current: CurrentWeatherView | None = None
    forecast: list[ForecastDayView] = Field(default_factory=list)
    error_message: str | None = None
    error_kind: ErrorKind | None = None

    current_visible: bool = False
    forecast_visible: bool = False
    error_visible: bool = False
