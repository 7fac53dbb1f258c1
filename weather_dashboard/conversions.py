# ABOUTME: Pure unit and wind helpers used by the dashboard templates.
# ABOUTME: Converts Celsius for display and maps wind degrees to compass labels and needle angles.

from decimal import ROUND_HALF_UP, Decimal

from weather_dashboard.models import DisplayUnit

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def convert_temperature(celsius: float, unit: DisplayUnit | str) -> int:
    """Convert a provider-native Celsius value into a rounded display value."""
    if DisplayUnit(unit) is DisplayUnit.FAHRENHEIT:
        return round_half_away(celsius * 9 / 5 + 32)
    return round_half_away(celsius)


def get_wind_direction(degrees: float) -> str:
    """Map a heading in degrees to one of eight compass points, N centred on 0."""
    index = round_half_away((degrees % 360) / 45) % 8
    return COMPASS_POINTS[index]


def get_wind_rotation(degrees: float) -> float:
    """Needle angle pointing where the wind blows to (the heading is where it blows from)."""
    return (degrees + 180) % 360
