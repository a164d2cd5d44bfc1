"""Display formatting for OpenWeatherMap fields."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone as dt_timezone

from app.core.config import get_settings


_EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)


def _local_datetime(timestamp: int, timezone_offset: int) -> datetime:
    # The API reports a flat offset in seconds, not a zone name.
    return _EPOCH + timedelta(seconds=timestamp + timezone_offset)


def format_time(timestamp: int, timezone_offset: int) -> str:
    """Local wall-clock time at the location, e.g. ``"06:42 AM"``."""
    local = _local_datetime(timestamp, timezone_offset)
    suffix = "AM" if local.hour < 12 else "PM"
    hour = local.hour % 12 or 12
    return f"{hour:02d}:{local.minute:02d} {suffix}"


def format_temperature(value: float) -> int:
    # Halves round up, so 2.5 -> 3 and -2.5 -> -2.
    return math.floor(value + 0.5)


def format_wind_speed(value: float) -> str:
    return f"{value:.1f}"


def format_day_label(timestamp: int, timezone_offset: int = 0) -> str:
    return _local_datetime(timestamp, timezone_offset).strftime("%a")


def icon_url(code: str, *, large: bool = False) -> str:
    base = get_settings().icon_base_url.rstrip("/")
    suffix = "@2x" if large else ""
    return f"{base}/{code}{suffix}.png"
