"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from gitpitch.domain.entities import RepoMetadata
from gitpitch.infrastructure.config import Settings
from gitpitch.interface.app import create_app
from gitpitch.interface.route_builder import FastAPIRouteBuilder


@pytest.fixture
def metadata() -> RepoMetadata:
    return RepoMetadata(owner="acme", name="deck", stargazers=5, forks=2, lang="Go")


@pytest.fixture
def routes() -> FastAPIRouteBuilder:
    """Reverse router over the real application route table."""
    return FastAPIRouteBuilder(create_app().routes)


@pytest.fixture
def settings() -> Settings:
    return Settings(https=True, hostname="gitpitch.com")
