from app.schemas.page import ErrorKind, PageState
from app.schemas.weather import CurrentWeatherSnapshot, ForecastResponse
from app.services.weather.forecast import select_daily_forecast
from app.services.weather.render import clear_error, render_current_weather, render_error, render_forecast


def test_render_current_weather(current_payload):
    snapshot = CurrentWeatherSnapshot.model_validate(current_payload)

    state = render_current_weather(PageState(), snapshot)

    assert state.current_visible
    view = state.current
    assert view.location_name == "London"
    assert view.temperature == 13
    assert view.humidity == 81
    assert view.wind_speed == "4.1"
    assert view.condition == "broken clouds"
    assert view.icon_url.endswith("/04d@2x.png")
    assert view.sunrise == "08:00 AM"
    assert view.sunset == "04:00 PM"


def test_render_forecast_replaces_previous_entries(forecast_payload):
    readings = ForecastResponse.model_validate(forecast_payload).readings

    state = render_forecast(PageState(), readings[:2])
    state = render_forecast(state, select_daily_forecast(readings))

    assert state.forecast_visible
    assert [d.day for d in state.forecast] == ["Mon", "Tue", "Wed", "Thu", "Fri"]
    assert state.forecast[0].icon_url.endswith("/10d.png")
    # 12:00 on day one is the fifth step: 5.0 + 4 * 0.5
    assert state.forecast[0].temperature == 7


def test_render_error_hides_weather(current_payload, forecast_payload):
    state = render_current_weather(PageState(), CurrentWeatherSnapshot.model_validate(current_payload))
    state = render_forecast(state, ForecastResponse.model_validate(forecast_payload).readings[:5])

    state = render_error(state, "Error: boom", ErrorKind.FETCH)

    assert state.error_visible
    assert state.error_message == "Error: boom"
    assert not state.current_visible
    assert not state.forecast_visible


def test_clear_error_leaves_weather_sections(current_payload):
    state = render_current_weather(PageState(), CurrentWeatherSnapshot.model_validate(current_payload))
    state = state.model_copy(update={"error_message": "old", "error_visible": True})

    state = clear_error(state)

    assert not state.error_visible
    assert state.error_message is None
    assert state.current_visible


def test_render_does_not_mutate_input():
    original = PageState()
    render_error(original, "Error: boom", ErrorKind.TRANSPORT)
    assert original == PageState()
