# ABOUTME: Jinja2 rendering for the dashboard page: a shared environment plus display filters.
# ABOUTME: Turns a SearchState and the chosen DisplayUnit into the full HTML page.

from pathlib import Path
from typing import Any

import jinja2

from weather_dashboard.conversions import convert_temperature, get_wind_direction, get_wind_rotation
from weather_dashboard.forecast import format_date, format_time
from weather_dashboard.models import DisplayUnit, SearchState
from weather_dashboard.uv import get_uv_index_color, get_uv_index_label
from weather_dashboard.weather_service import icon_url

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)
_jinja_env.filters.update(
    temperature=convert_temperature,
    wind_direction=get_wind_direction,
    wind_rotation=get_wind_rotation,
    uv_severity=get_uv_index_color,
    uv_label=get_uv_index_label,
    short_date=format_date,
    clock=format_time,
    icon_url=icon_url,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)


def render_dashboard(state: SearchState, unit: DisplayUnit = DisplayUnit.CELSIUS) -> str:
    """Full dashboard page for the given state, temperatures shown in ``unit``."""
    other = DisplayUnit.FAHRENHEIT if unit is DisplayUnit.CELSIUS else DisplayUnit.CELSIUS
    return render_template("dashboard.html.j2", state=state, unit=unit, other_unit=other)
