from __future__ import annotations

from typing import Sequence

from app.schemas.page import CurrentWeatherView, ErrorKind, ForecastDayView, PageState
from app.schemas.weather import CurrentWeatherSnapshot, ForecastReading
from app.services.weather.formatting import (
    format_day_label,
    format_temperature,
    format_time,
    format_wind_speed,
    icon_url,
)


def render_current_weather(state: PageState, snapshot: CurrentWeatherSnapshot) -> PageState:
    view = CurrentWeatherView(
        location_name=snapshot.name,
        icon_url=icon_url(snapshot.icon, large=True),
        icon_alt=snapshot.description,
        temperature=format_temperature(snapshot.temp),
        condition=snapshot.description,
        humidity=snapshot.humidity,
        wind_speed=format_wind_speed(snapshot.wind_speed),
        sunrise=format_time(snapshot.sunrise, snapshot.timezone),
        sunset=format_time(snapshot.sunset, snapshot.timezone),
    )
    return state.model_copy(update={"current": view, "current_visible": True})


def render_forecast(
    state: PageState, selection: Sequence[ForecastReading], timezone_offset: int = 0
) -> PageState:
    # Prior entries are replaced, never appended to.
    days = [
        ForecastDayView(
            day=format_day_label(reading.dt, timezone_offset),
            icon_url=icon_url(reading.icon),
            temperature=format_temperature(reading.temp),
            description=reading.description,
        )
        for reading in selection
    ]
    return state.model_copy(update={"forecast": days, "forecast_visible": True})


def render_error(state: PageState, message: str, kind: ErrorKind) -> PageState:
    return state.model_copy(
        update={
            "error_message": message,
            "error_kind": kind,
            "error_visible": True,
            "current_visible": False,
            "forecast_visible": False,
        }
    )


def clear_error(state: PageState) -> PageState:
    return state.model_copy(update={"error_message": None, "error_kind": None, "error_visible": False})
