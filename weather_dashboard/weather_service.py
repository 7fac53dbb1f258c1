# ABOUTME: Service layer for OpenWeatherMap API calls and response parsing.
# ABOUTME: Fetches current conditions and the 3-hour forecast by city name, and UV index by coordinates.

import httpx
from pydantic import ValidationError

from weather_dashboard.config import Settings
from weather_dashboard.models import CurrentConditions, ForecastEntry, Location, WeatherCondition

ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"

UV_EXCLUDE = "minutely,hourly,daily"


class MalformedResponseError(ValueError):
    """A 2xx provider response whose body is not the expected JSON shape."""


async def get_current_conditions(client: httpx.AsyncClient, settings: Settings, city: str) -> CurrentConditions:
    """Fetch current weather for a city name in metric units."""
    resp = await client.get(
        settings.current_weather_url,
        params={"q": city, "units": "metric", "appid": settings.api_key},
    )
    resp.raise_for_status()
    return parse_current_conditions(_json(resp))


async def get_forecast(client: httpx.AsyncClient, settings: Settings, city: str) -> list[ForecastEntry]:
    """Fetch the 5-day / 3-hour forecast for a city name in metric units."""
    resp = await client.get(
        settings.forecast_url,
        params={"q": city, "units": "metric", "appid": settings.api_key},
    )
    resp.raise_for_status()
    return parse_forecast(_json(resp))


async def get_uv_index(client: httpx.AsyncClient, settings: Settings, latitude: float, longitude: float) -> float:
    """Fetch the current UV index at a coordinate, skipping the minutely/hourly/daily blocks."""
    resp = await client.get(
        settings.uv_url,
        params={"lat": latitude, "lon": longitude, "exclude": UV_EXCLUDE, "appid": settings.api_key},
    )
    resp.raise_for_status()
    data = _json(resp)
    try:
        return float(data["current"]["uvi"])
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponseError(f"UV response has no current.uvi: {e}") from e


def parse_current_conditions(data: dict) -> CurrentConditions:
    """Map the provider's nested current-weather payload onto CurrentConditions."""
    try:
        main = data["main"]
        wind = data["wind"]
        sys = data["sys"]
        return CurrentConditions(
            location=Location(
                name=data["name"],
                country=sys.get("country"),
                latitude=data["coord"]["lat"],
                longitude=data["coord"]["lon"],
            ),
            temperature=main["temp"],
            feels_like=main["feels_like"],
            humidity=main["humidity"],
            pressure=main["pressure"],
            wind_speed=wind["speed"],
            wind_deg=wind.get("deg", 0),
            wind_gust=wind.get("gust"),
            condition=parse_condition(data["weather"]),
            sunrise=sys["sunrise"],
            sunset=sys["sunset"],
            dt=data["dt"],
        )
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise MalformedResponseError(f"Unexpected current weather payload: {e}") from e


def parse_forecast(data: dict) -> list[ForecastEntry]:
    """Map the provider's forecast list onto ForecastEntry rows, keeping provider order."""
    try:
        return [
            ForecastEntry(
                dt=item["dt"],
                dt_txt=item["dt_txt"],
                temperature=item["main"].get("temp"),
                temp_min=item["main"]["temp_min"],
                temp_max=item["main"]["temp_max"],
                condition=parse_condition(item["weather"]),
            )
            for item in data["list"]
        ]
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise MalformedResponseError(f"Unexpected forecast payload: {e}") from e


def parse_condition(weather: list[dict]) -> WeatherCondition:
    """Use the first entry of the provider's weather array as the primary condition."""
    try:
        first = weather[0]
    except IndexError as e:
        raise MalformedResponseError("Empty weather condition array") from e
    return WeatherCondition(
        id=first["id"],
        main=first["main"],
        description=first["description"],
        icon=first["icon"],
    )


def icon_url(icon: str) -> str:
    return ICON_URL.format(icon=icon)


def _json(resp: httpx.Response) -> dict:
    try:
        data = resp.json()
    except ValueError as e:
        raise MalformedResponseError(f"Response body is not JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedResponseError("Response body is not a JSON object")
    return data
