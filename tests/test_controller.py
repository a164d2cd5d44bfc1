import pytest

from app.schemas.page import ErrorKind, PageState, Phase
from app.schemas.weather import CityQuery, Coordinates, CurrentWeatherSnapshot, ForecastResponse
from app.services.weather.controller import WeatherController, transition
from app.services.weather.errors import InvalidTransition
from app.services.weather.geolocation import GeolocationFailure, SubmittedGeolocation
from app.services.weather.openweathermap import FetchFailure, WeatherData


class RecordingFetcher:
    def __init__(self, result):
        self.result = result
        self.queries = []

    async def __call__(self, query):
        self.queries.append(query)
        return self.result


class FixedGeolocation:
    def __init__(self, result):
        self.result = result

    async def locate(self):
        return self.result


@pytest.fixture
def weather(current_payload, forecast_payload):
    return WeatherData(
        current=CurrentWeatherSnapshot.model_validate(current_payload),
        forecast=ForecastResponse.model_validate(forecast_payload),
    )


@pytest.mark.asyncio
async def test_submit_city_displays_weather(weather):
    fetcher = RecordingFetcher(weather)

    state = await WeatherController(fetcher).submit_city(PageState(), "  London ")

    assert fetcher.queries == [CityQuery(city="London")]
    assert state.phase is Phase.DISPLAYING
    assert state.current_visible and state.forecast_visible
    assert not state.error_visible
    assert len(state.forecast) == 5


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
async def test_blank_city_is_rejected_without_fetch(text):
    fetcher = RecordingFetcher(None)

    state = await WeatherController(fetcher).submit_city(PageState(), text)

    assert fetcher.queries == []
    assert state.phase is Phase.ERROR_SHOWN
    assert state.error_kind is ErrorKind.VALIDATION
    assert state.error_message == "Please enter a city name."


@pytest.mark.asyncio
async def test_fetch_failure_shows_error():
    fetcher = RecordingFetcher(FetchFailure(kind=ErrorKind.NOT_FOUND, message="City not found. Please check the name."))

    state = await WeatherController(fetcher).submit_city(PageState(), "Atlantis")

    assert state.phase is Phase.ERROR_SHOWN
    assert state.error_message == "Error: City not found. Please check the name."
    assert not state.current_visible
    assert not state.forecast_visible


@pytest.mark.asyncio
async def test_location_success_uses_coordinates(weather):
    fetcher = RecordingFetcher(weather)
    geolocation = FixedGeolocation(Coordinates(lat=48.85, lon=2.35))

    state = await WeatherController(fetcher).request_location(PageState(), geolocation)

    assert fetcher.queries == [Coordinates(lat=48.85, lon=2.35)]
    assert state.phase is Phase.DISPLAYING


@pytest.mark.asyncio
async def test_geolocation_failures_have_distinct_messages():
    controller = WeatherController(RecordingFetcher(None))
    messages = {}
    for kind in (
        ErrorKind.GEOLOCATION_PERMISSION,
        ErrorKind.GEOLOCATION_UNAVAILABLE,
        ErrorKind.GEOLOCATION_UNSUPPORTED,
    ):
        state = await controller.request_location(PageState(), FixedGeolocation(GeolocationFailure(kind=kind)))
        assert state.phase is Phase.ERROR_SHOWN
        assert state.error_kind is kind
        messages[kind] = state.error_message

    assert len(set(messages.values())) == 3
    assert "denied" in messages[ErrorKind.GEOLOCATION_PERMISSION]
    assert "not supported" in messages[ErrorKind.GEOLOCATION_UNSUPPORTED]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "code, kind",
    [
        ("permission_denied", ErrorKind.GEOLOCATION_PERMISSION),
        ("unavailable", ErrorKind.GEOLOCATION_UNAVAILABLE),
        ("timeout", ErrorKind.GEOLOCATION_UNAVAILABLE),
        ("unsupported", ErrorKind.GEOLOCATION_UNSUPPORTED),
    ],
)
async def test_submitted_geolocation_error_codes(code, kind):
    result = await SubmittedGeolocation(error=code).locate()
    assert result == GeolocationFailure(kind=kind)


@pytest.mark.asyncio
async def test_next_action_overwrites_previous_state(weather):
    failing = WeatherController(RecordingFetcher(FetchFailure(kind=ErrorKind.TRANSPORT, message="offline")))
    state = await failing.submit_city(PageState(), "London")
    assert state.phase is Phase.ERROR_SHOWN

    state = await WeatherController(RecordingFetcher(weather)).submit_city(state, "London")

    assert state.phase is Phase.DISPLAYING
    assert state.error_message is None
    assert not state.error_visible


def test_invalid_transition_is_rejected():
    with pytest.raises(InvalidTransition):
        transition(PageState(), Phase.DISPLAYING)
