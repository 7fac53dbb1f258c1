# ABOUTME: Pydantic BaseModels for OpenWeatherMap responses and dashboard search state.
# ABOUTME: Defines locations, current conditions, forecast samples, display units, and SearchState.

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class Location(BaseModel):
    """City identity and coordinates taken from the current-conditions response."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str | None = None
    latitude: float
    longitude: float


class WeatherCondition(BaseModel):
    """Primary condition block (first element of the provider's weather array)."""

    model_config = ConfigDict(frozen=True)

    id: int
    main: str
    description: str
    icon: str


class CurrentConditions(BaseModel):
    """Current weather for one searched city, in metric units."""

    model_config = ConfigDict(frozen=True)

    location: Location
    temperature: float
    feels_like: float
    humidity: int
    pressure: int
    wind_speed: float
    wind_deg: float
    wind_gust: float | None = None
    condition: WeatherCondition
    sunrise: int
    sunset: int
    dt: int


class ForecastEntry(BaseModel):
    """One 3-hour forecast sample."""

    model_config = ConfigDict(frozen=True)

    dt: int
    dt_txt: str
    temperature: float | None = None
    temp_min: float
    temp_max: float
    condition: WeatherCondition

    @field_validator("dt_txt")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        datetime.fromisoformat(value)
        return value


class DisplayUnit(str, Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SearchState(BaseModel):
    """Snapshot of the dashboard after a state transition.

    Replaced wholesale on every transition, never mutated. After a terminal
    transition exactly one of ``current`` and ``error`` is set.
    """

    model_config = ConfigDict(frozen=True)

    status: SearchStatus = SearchStatus.IDLE
    query: str = ""
    current: CurrentConditions | None = None
    forecast: list[ForecastEntry] = []
    uv_index: float | None = None
    error: str | None = None

    @property
    def loading(self) -> bool:
        return self.status is SearchStatus.LOADING
