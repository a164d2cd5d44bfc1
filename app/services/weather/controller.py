from __future__ import annotations

import logging
from typing import Awaitable, Callable

from app.schemas.page import ErrorKind, PageState, Phase
from app.schemas.weather import CityQuery, LocationQuery
from app.services.weather.errors import (
    GEOLOCATION_MESSAGES,
    VALIDATION_MESSAGE,
    InvalidTransition,
    fetch_error_message,
)
from app.services.weather.forecast import select_daily_forecast
from app.services.weather.geolocation import GeolocationFailure, GeolocationProvider
from app.services.weather.openweathermap import FetchFailure, WeatherFetchResult, fetch_weather
from app.services.weather.render import clear_error, render_current_weather, render_error, render_forecast


logger = logging.getLogger(__name__)


Fetcher = Callable[[LocationQuery], Awaitable[WeatherFetchResult]]


TRANSITIONS: dict[Phase, set[Phase]] = {
    Phase.IDLE: {Phase.AWAITING_CITY_INPUT, Phase.AWAITING_GEOLOCATION},
    Phase.AWAITING_CITY_INPUT: {Phase.DISPLAYING, Phase.ERROR_SHOWN},
    Phase.AWAITING_GEOLOCATION: {Phase.DISPLAYING, Phase.ERROR_SHOWN},
    Phase.DISPLAYING: {Phase.IDLE},
    Phase.ERROR_SHOWN: {Phase.IDLE},
}


def transition(state: PageState, phase: Phase) -> PageState:
    current = state.phase
    # A finished cycle goes back to idle on the next user action.
    if current in (Phase.DISPLAYING, Phase.ERROR_SHOWN) and phase is not Phase.IDLE:
        current = Phase.IDLE
    if phase not in TRANSITIONS[current]:
        raise InvalidTransition(f"{state.phase.value} -> {phase.value}")
    return state.model_copy(update={"phase": phase})


class WeatherController:
    """Drives a page through one search or location request."""

    def __init__(self, fetcher: Fetcher = fetch_weather):
        self.fetcher = fetcher

    async def submit_city(self, state: PageState, text: str | None) -> PageState:
        state = clear_error(transition(state, Phase.AWAITING_CITY_INPUT))
        city = (text or "").strip()
        if not city:
            logger.info("Rejected empty city search")
            return self._fail(state, VALIDATION_MESSAGE, ErrorKind.VALIDATION)
        return await self._load(state, CityQuery(city=city))

    async def request_location(self, state: PageState, geolocation: GeolocationProvider) -> PageState:
        state = transition(state, Phase.AWAITING_GEOLOCATION)
        result = await geolocation.locate()
        if isinstance(result, GeolocationFailure):
            logger.info("Geolocation failed: %s", result.kind.value)
            return self._fail(state, GEOLOCATION_MESSAGES[result.kind], result.kind)
        return await self._load(clear_error(state), result)

    async def _load(self, state: PageState, query: LocationQuery) -> PageState:
        result = await self.fetcher(query)
        if isinstance(result, FetchFailure):
            return self._fail(state, fetch_error_message(result.message), result.kind)

        state = render_current_weather(state, result.current)
        selection = select_daily_forecast(result.forecast.readings)
        state = render_forecast(state, selection, result.forecast.timezone)
        return transition(state, Phase.DISPLAYING)

    @staticmethod
    def _fail(state: PageState, message: str, kind: ErrorKind) -> PageState:
        return transition(render_error(state, message, kind), Phase.ERROR_SHOWN)
