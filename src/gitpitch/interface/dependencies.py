"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx
from fastapi import Request

from gitpitch.domain.ports.repo_fetcher import RepoFetcher
from gitpitch.domain.ports.route_builder import RouteBuilder
from gitpitch.infrastructure.config import Settings, get_settings
from gitpitch.infrastructure.github_rest_adapter import GitHubRestAdapter

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(10.0))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_app_settings() -> Settings:
    return get_settings()


def get_repo_fetcher() -> RepoFetcher:
    """Build a GitHub adapter on the shared HTTP client."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    return GitHubRestAdapter(client=_http_client, token=token)


def get_route_builder(request: Request) -> RouteBuilder:
    """Return the reverse router built over this application's routes."""
    return request.app.state.route_builder
