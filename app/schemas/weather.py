from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CityQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str = Field(..., min_length=1)


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


LocationQuery = Union[CityQuery, Coordinates]


def _section(value: Any) -> dict:
    # Anything but an object reads as empty and fails field validation.
    return value if isinstance(value, dict) else {}


def _first_condition(data: Any) -> Any:
    # The API reports a list of conditions; the first one is the primary.
    if isinstance(data, dict):
        weather = data.get("weather")
        if isinstance(weather, list) and weather:
            cond = _section(weather[0])
            data = {**data, "description": cond.get("description"), "icon": cond.get("icon")}
    return data


class CurrentWeatherSnapshot(BaseModel):
    """Current conditions as reported by the ``/weather`` endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str
    timezone: int = Field(..., description="Offset from UTC (seconds).")
    temp: float = Field(..., description="Air temperature (C).")
    humidity: int = Field(..., description="Relative humidity (%).")
    wind_speed: float = Field(..., description="Wind speed (m/s).")
    description: str
    icon: str
    sunrise: int
    sunset: int

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, data: Any) -> Any:
        data = _first_condition(data)
        if not isinstance(data, dict) or "main" not in data:
            return data
        main = _section(data.get("main"))
        wind = _section(data.get("wind"))
        sun = _section(data.get("sys"))
        return {
            "name": data.get("name"),
            "timezone": data.get("timezone"),
            "temp": main.get("temp"),
            "humidity": main.get("humidity"),
            "wind_speed": wind.get("speed"),
            "description": data.get("description"),
            "icon": data.get("icon"),
            "sunrise": sun.get("sunrise"),
            "sunset": sun.get("sunset"),
        }


class ForecastReading(BaseModel):
    """One 3-hour step of the ``/forecast`` endpoint."""

    model_config = ConfigDict(frozen=True)

    dt: int
    dt_txt: str
    temp: float
    description: str
    icon: str

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, data: Any) -> Any:
        data = _first_condition(data)
        if not isinstance(data, dict) or "main" not in data:
            return data
        return {
            "dt": data.get("dt"),
            "dt_txt": data.get("dt_txt"),
            "temp": _section(data.get("main")).get("temp"),
            "description": data.get("description"),
            "icon": data.get("icon"),
        }


class ForecastResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    readings: list[ForecastReading] = Field(default_factory=list, alias="list")
    timezone: int = 0

    @model_validator(mode="before")
    @classmethod
    def _city_timezone(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("city"), dict):
            tz = data["city"].get("timezone")
            if tz is not None:
                data = {**data, "timezone": tz}
        return data
