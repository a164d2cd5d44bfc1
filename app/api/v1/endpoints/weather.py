from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.deps import get_weather_controller
from app.core.rate_limit import limiter, weather_rate_limit
from app.schemas.page import PageState
from app.services.weather.controller import WeatherController
from app.services.weather.geolocation import SubmittedGeolocation


router = APIRouter()


@router.get("/search", response_model=PageState)
@limiter.limit(weather_rate_limit)
async def search_city(
    request: Request,
    city: str = Query("", max_length=120),
    controller: WeatherController = Depends(get_weather_controller),
):
    """Page state for a city search. Failures are reported in the state, not as HTTP errors."""
    return await controller.submit_city(PageState(), city)


@router.get("/location", response_model=PageState)
@limiter.limit(weather_rate_limit)
async def search_location(
    request: Request,
    lat: float | None = Query(None, ge=-90, le=90),
    lon: float | None = Query(None, ge=-180, le=180),
    geo_error: str | None = Query(None, max_length=32),
    controller: WeatherController = Depends(get_weather_controller),
):
    geolocation = SubmittedGeolocation(lat=lat, lon=lon, error=geo_error)
    return await controller.request_location(PageState(), geolocation)
