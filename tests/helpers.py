"""Test doubles shared across unit tests."""

from __future__ import annotations

from gitpitch.domain.entities import RepoMetadata


class FakeFetcher:
    """RepoFetcher returning a canned record, or raising a canned error."""

    def __init__(
        self, metadata: RepoMetadata | None = None, error: Exception | None = None
    ) -> None:
        self.metadata = metadata
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def fetch_metadata(self, owner: str, repo: str) -> RepoMetadata:
        self.calls.append((owner, repo))
        if self.error is not None:
            raise self.error
        assert self.metadata is not None
        return self.metadata
