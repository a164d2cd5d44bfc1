from __future__ import annotations

from typing import Sequence

from app.schemas.weather import ForecastReading


MIDDAY_MARKER = "12:00:00"
FORECAST_DAYS = 5


def is_midday(reading: ForecastReading) -> bool:
    return MIDDAY_MARKER in reading.dt_txt


def select_daily_forecast(readings: Sequence[ForecastReading]) -> list[ForecastReading]:
    """Pick one reading per day, preferring the midday step.

    Readings arrive in chronological order at 3-hour resolution. When no
    midday step exists at all, the first readings are used unfiltered; those
    may share a calendar day.
    """
    selection = [r for r in readings if is_midday(r)][:FORECAST_DAYS]
    if not selection:
        selection = list(readings[:FORECAST_DAYS])
    return selection
