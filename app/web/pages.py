from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.v1.deps import get_weather_controller
from app.core.rate_limit import limiter, weather_rate_limit
from app.schemas.page import PageState
from app.services.weather.controller import WeatherController
from app.services.weather.geolocation import PERMISSION_DENIED, UNAVAILABLE, UNSUPPORTED, SubmittedGeolocation


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@limiter.limit(weather_rate_limit)
async def index(
    request: Request,
    city: str | None = Query(None, max_length=120),
    lat: float | None = Query(None, ge=-90, le=90),
    lon: float | None = Query(None, ge=-180, le=180),
    geo_error: str | None = Query(None, max_length=32),
    controller: WeatherController = Depends(get_weather_controller),
):
    state = PageState()
    if city is not None:
        state = await controller.submit_city(state, city)
    elif lat is not None or lon is not None or geo_error:
        geolocation = SubmittedGeolocation(lat=lat, lon=lon, error=geo_error)
        state = await controller.request_location(state, geolocation)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": state,
            "city": city or "",
            "geo_codes": {
                "permission_denied": PERMISSION_DENIED,
                "unavailable": UNAVAILABLE,
                "unsupported": UNSUPPORTED,
            },
        },
    )
