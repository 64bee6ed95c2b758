"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from gitpitch.domain.entities import RepoMetadata


class RepoFetcher(Protocol):
    """Abstract contract for fetching GitHub repository data."""

    async def fetch_metadata(self, owner: str, repo: str) -> RepoMetadata:
        """Return repository metadata, or raise a GitHub error."""
        ...
