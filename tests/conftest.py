# ABOUTME: Shared test fixtures for the weather dashboard test suite.
# ABOUTME: Provides settings, OpenWeatherMap payload builders, and a URL-routing mock HTTP client.

from unittest.mock import AsyncMock

import httpx
import pytest

from weather_dashboard.config import Settings
from weather_dashboard.deps import DashboardDeps


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", base_url="https://owm.test", uv_url="https://owm.test/data/3.0/onecall")


def current_payload(name: str = "London", lat: float = 51.5085, lon: float = -0.1257) -> dict:
    return {
        "coord": {"lon": lon, "lat": lat},
        "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "main": {"temp": 11.6, "feels_like": 10.9, "temp_min": 10.2, "temp_max": 12.8, "pressure": 1012, "humidity": 81},
        "wind": {"speed": 4.63, "deg": 250, "gust": 8.2},
        "dt": 1736942400,
        "sys": {"country": "GB", "sunrise": 1736927912, "sunset": 1736957718},
        "name": name,
    }


def forecast_item(dt_txt: str, temp_min: float = 5.0, temp_max: float = 9.0, dt: int = 0) -> dict:
    return {
        "dt": dt,
        "dt_txt": dt_txt,
        "main": {"temp": (temp_min + temp_max) / 2, "temp_min": temp_min, "temp_max": temp_max},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
    }


def forecast_payload(days: int = 6, samples_per_day: int = 8) -> dict:
    items = []
    for day in range(days):
        for step in range(samples_per_day):
            items.append(
                forecast_item(
                    f"2025-01-{15 + day:02d} {step * 3:02d}:00:00",
                    temp_min=day + step,
                    temp_max=day + step + 4,
                    dt=1736899200 + (day * 8 + step) * 10800,
                )
            )
    return {"cod": "200", "list": items, "city": {"name": "London", "country": "GB"}}


def uv_payload(uvi: float = 3.2) -> dict:
    return {"lat": 51.5085, "lon": -0.1257, "current": {"dt": 1736942400, "uvi": uvi}}


def json_response(url: str, payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code=status_code, json=payload, request=httpx.Request("GET", url))


def routing_client(
    settings: Settings,
    current=None,
    forecast=None,
    uv=None,
) -> AsyncMock:
    """Mock httpx.AsyncClient answering each provider URL with its own result.

    Each of ``current``, ``forecast``, ``uv`` is a payload dict, an httpx.Response,
    or an exception instance to raise. ``None`` means the default payload.
    """
    routes = {
        settings.current_weather_url: current if current is not None else current_payload(),
        settings.forecast_url: forecast if forecast is not None else forecast_payload(),
        settings.uv_url: uv if uv is not None else uv_payload(),
    }

    def get(url, params=None, **kwargs):
        result = routes[url]
        if isinstance(result, Exception):
            raise result
        if isinstance(result, httpx.Response):
            return result
        return json_response(url, result)

    client = AsyncMock(spec=httpx.AsyncClient)
    client.get.side_effect = get
    return client


@pytest.fixture
def deps(settings) -> DashboardDeps:
    return DashboardDeps(http_client=routing_client(settings), settings=settings)
