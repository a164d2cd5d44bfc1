from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Union

import httpx
from pydantic import ValidationError

from app.core.config import Settings, get_settings
from app.core.http import get_http_client
from app.schemas.page import ErrorKind
from app.schemas.weather import CityQuery, CurrentWeatherSnapshot, ForecastResponse, LocationQuery
from app.services.weather.errors import (
    FETCH_STATUS_MESSAGE,
    MALFORMED_MESSAGE,
    NOT_FOUND_MESSAGE,
    TRANSPORT_MESSAGE,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchSuccess:
    data: Any


@dataclass(frozen=True)
class FetchFailure:
    kind: ErrorKind
    message: str
    status_code: int | None = None


FetchResult = Union[FetchSuccess, FetchFailure]


@dataclass(frozen=True)
class WeatherData:
    current: CurrentWeatherSnapshot
    forecast: ForecastResponse


WeatherFetchResult = Union[WeatherData, FetchFailure]


def current_weather_url(settings: Settings) -> str:
    return f"{settings.openweather_base_url.rstrip('/')}/weather"


def forecast_url(settings: Settings) -> str:
    return f"{settings.openweather_base_url.rstrip('/')}/forecast"


def build_request_params(query: LocationQuery, settings: Settings) -> dict[str, Any]:
    if isinstance(query, CityQuery):
        params: dict[str, Any] = {"q": query.city}
    else:
        params = {"lat": query.lat, "lon": query.lon}
    params["units"] = "metric"
    params["appid"] = settings.openweather_api_key
    return params


async def fetch_weather_data(url: str, params: dict[str, Any]) -> FetchResult:
    """GET one endpoint. Failures come back as ``FetchFailure``, never raised."""
    client = get_http_client()
    try:
        resp = await client.get(url, params=params)
    except httpx.HTTPError as exc:
        logger.error("Weather request to %s failed: %s: %s", url, type(exc).__name__, exc)
        return FetchFailure(kind=ErrorKind.TRANSPORT, message=TRANSPORT_MESSAGE)

    if resp.status_code == 404:
        logger.warning("Location not found: %s %s", url, params.get("q") or (params.get("lat"), params.get("lon")))
        return FetchFailure(kind=ErrorKind.NOT_FOUND, message=NOT_FOUND_MESSAGE, status_code=404)
    if not resp.is_success:
        logger.error("Weather request to %s returned status %s", url, resp.status_code)
        return FetchFailure(
            kind=ErrorKind.FETCH,
            message=FETCH_STATUS_MESSAGE.format(status=resp.status_code),
            status_code=resp.status_code,
        )

    try:
        data = resp.json()
    except ValueError:
        logger.error("Weather response from %s is not JSON", url)
        return FetchFailure(kind=ErrorKind.FETCH, message=MALFORMED_MESSAGE, status_code=resp.status_code)

    logger.debug("Weather request to %s succeeded", url)
    return FetchSuccess(data=data)


def _parse(current: Any, forecast: Any) -> WeatherFetchResult:
    try:
        return WeatherData(
            current=CurrentWeatherSnapshot.model_validate(current),
            forecast=ForecastResponse.model_validate(forecast),
        )
    except ValidationError as exc:
        logger.error("Weather response has an unexpected shape: %d errors", exc.error_count())
        return FetchFailure(kind=ErrorKind.FETCH, message=MALFORMED_MESSAGE)


async def fetch_weather(query: LocationQuery) -> WeatherFetchResult:
    """Fetch current conditions and the forecast concurrently.

    Both calls must succeed; otherwise the first failure (current conditions
    before forecast) is returned and nothing is rendered.
    """
    settings = get_settings()
    params = build_request_params(query, settings)
    current, forecast = await asyncio.gather(
        fetch_weather_data(current_weather_url(settings), params),
        fetch_weather_data(forecast_url(settings), params),
    )
    for result in (current, forecast):
        if isinstance(result, FetchFailure):
            return result
    return _parse(current.data, forecast.data)
