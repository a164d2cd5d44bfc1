from __future__ import annotations

from app.services.weather.controller import WeatherController


def get_weather_controller() -> WeatherController:
    return WeatherController()
