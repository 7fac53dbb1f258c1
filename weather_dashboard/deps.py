# ABOUTME: Dependency container for the dashboard using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and Settings shared by the orchestrator and web shell.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_dashboard.config import Settings, load_settings


class DashboardDeps(BaseModel):
    """Dependencies injected into the orchestrator."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client() -> httpx.AsyncClient:
    """Create a plain httpx client. No retries; the transport's default timeout applies."""
    return httpx.AsyncClient()


def create_deps(settings: Settings | None = None) -> DashboardDeps:
    return DashboardDeps(http_client=create_http_client(), settings=settings or load_settings())
