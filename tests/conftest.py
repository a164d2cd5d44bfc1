from datetime import datetime, timedelta, timezone as dt_timezone

import httpx
import pytest
import pytest_asyncio

from app.core.http import set_http_client


# Monday 2024-01-01 00:00:00 UTC
FORECAST_START = 1704067200


def make_reading(dt: int, temp: float = 10.0, description: str = "light rain", icon: str = "10d") -> dict:
    dt_txt = (datetime(1970, 1, 1, tzinfo=dt_timezone.utc) + timedelta(seconds=dt)).strftime("%Y-%m-%d %H:%M:%S")
    return {
        "dt": dt,
        "dt_txt": dt_txt,
        "main": {"temp": temp, "humidity": 70},
        "weather": [{"id": 500, "main": "Rain", "description": description, "icon": icon}],
    }


@pytest_asyncio.fixture
async def http_client():
    client = httpx.AsyncClient()
    set_http_client(client)
    try:
        yield client
    finally:
        set_http_client(None)
        await client.aclose()


@pytest.fixture
def current_payload():
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "main": {"temp": 12.6, "feels_like": 11.9, "humidity": 81},
        "wind": {"speed": 4.12, "deg": 240},
        "sys": {"country": "GB", "sunrise": 1704096000, "sunset": 1704124800},
        "timezone": 0,
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def forecast_payload():
    readings = [make_reading(FORECAST_START + i * 10800, temp=5.0 + i * 0.5) for i in range(40)]
    return {"cod": "200", "cnt": len(readings), "list": readings, "city": {"name": "London", "timezone": 0}}


@pytest.fixture
def reading():
    return make_reading
