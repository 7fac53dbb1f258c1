# ABOUTME: Forecast shaping for display: day bucketing of 3-hour samples and short date labels.
# ABOUTME: Pure functions with no I/O, consumed by the orchestrator and the templates.

from collections.abc import Iterable
from datetime import datetime

from weather_dashboard.models import ForecastEntry

MAX_FORECAST_DAYS = 5


def date_key(dt_txt: str) -> str:
    """Calendar-date part of a provider timestamp text such as '2025-01-15 12:00:00'."""
    return dt_txt.split(" ")[0]


def group_forecast_by_day(entries: Iterable[ForecastEntry]) -> list[ForecastEntry]:
    """Keep the first sample seen for each calendar date, in input order, capped at five days.

    The key is the literal date prefix of ``dt_txt``; no timezone conversion is done.
    Min/max temperatures are those of the kept sample, not of the whole day.
    """
    days: dict[str, ForecastEntry] = {}
    for entry in entries:
        days.setdefault(date_key(entry.dt_txt), entry)
    return list(days.values())[:MAX_FORECAST_DAYS]


def format_date(dt_txt: str) -> str:
    """Render a timestamp text as a short weekday plus day number, e.g. 'Wed 15'.

    Parsed as a naive local date-time; the weekday name follows the runtime locale.
    """
    parsed = datetime.fromisoformat(dt_txt)
    return f"{parsed.strftime('%a')} {parsed.day}"


def format_time(epoch_seconds: int) -> str:
    """Local clock time (HH:MM) for a provider epoch timestamp such as sunrise."""
    return datetime.fromtimestamp(epoch_seconds).strftime("%H:%M")
