"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from gitpitch.interface.dependencies import shutdown, startup
from gitpitch.interface.error_handlers import register_error_handlers
from gitpitch.interface.route_builder import FastAPIRouteBuilder
from gitpitch.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitPitch",
        version="1.0.0",
        description=(
            "Serves slide decks stored as PITCHME.md in public GitHub "
            "repositories, addressed by owner, repository and branch."
        ),
        lifespan=_lifespan,
    )

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    register_error_handlers(app)
    app.include_router(router)
    app.state.route_builder = FastAPIRouteBuilder(app.routes)

    return app
