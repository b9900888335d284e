# ABOUTME: Dependency container for the dashboard using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and Settings shared by the service calls.

import httpx
from pydantic import BaseModel, ConfigDict, Field

from weather_dashboard.config import Settings


class DashboardDeps(BaseModel):
    """Dependencies injected into the dashboard controller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings = Field(default_factory=Settings)


def create_http_client(timeout: float = 10.0) -> httpx.AsyncClient:
    """Create an httpx client for the weather APIs.

    No retry transport: a failed request surfaces immediately as an error.
    """
    return httpx.AsyncClient(timeout=timeout)


def create_deps(settings: Settings | None = None) -> DashboardDeps:
    """Build deps from settings, reading the environment when none are given."""
    settings = settings or Settings()
    return DashboardDeps(http_client=create_http_client(settings.http_timeout), settings=settings)
