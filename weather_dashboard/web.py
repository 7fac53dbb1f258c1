# ABOUTME: ASGI web entry point for the weather dashboard UI.
# ABOUTME: Creates a Starlette app serving the HTML dashboard and a JSON search endpoint over one orchestrator.

import logging
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route

from weather_dashboard.deps import DashboardDeps, create_deps
from weather_dashboard.models import DisplayUnit
from weather_dashboard.orchestrator import WeatherOrchestrator
from weather_dashboard.rendering import render_dashboard

logger = logging.getLogger(__name__)


def parse_unit(raw: str | None) -> DisplayUnit:
    """Read the C/F toggle from the query string, falling back to Celsius."""
    try:
        return DisplayUnit((raw or "").upper())
    except ValueError:
        return DisplayUnit.CELSIUS


def create_app(deps: DashboardDeps | None = None) -> Starlette:
    """Build the dashboard app.

    Every request gets its own orchestrator, so display state never leaks between
    visitors. A blank or missing ``city`` renders the idle page without searching.
    """
    deps = deps or create_deps()
    logging.basicConfig(level=deps.settings.log_level)
    if not deps.settings.api_key:
        logger.warning("OPENWEATHER_API_KEY is not set, every search will fail")

    async def dashboard(request: Request) -> HTMLResponse:
        state = await WeatherOrchestrator(deps).search(request.query_params.get("city", ""))
        unit = parse_unit(request.query_params.get("unit"))
        return HTMLResponse(render_dashboard(state, unit))

    async def search(request: Request) -> JSONResponse:
        state = await WeatherOrchestrator(deps).search(request.query_params.get("city", ""))
        return JSONResponse(state.model_dump(mode="json"))

    @asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await deps.http_client.aclose()

    app = Starlette(
        routes=[Route("/", dashboard), Route("/api/search", search)],
        lifespan=lifespan,
    )
    app.state.deps = deps
    return app


app = create_app()
