"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import httpx

from gitpitch.domain.entities import RepoMetadata
from gitpitch.domain.exceptions import (
    GitHubRateLimitError,
    MetadataFetchError,
    RepositoryAccessDeniedError,
    RepositoryNotFoundError,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(self, client: httpx.AsyncClient, token: str | None = None) -> None:
        self._client = client
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "gitpitch/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_metadata(self, owner: str, repo: str) -> RepoMetadata:
        """GET /repos/{owner}/{repo} → RepoMetadata."""
        resp = await self._api_get(f"/repos/{owner}/{repo}")
        data = resp.json()
        return RepoMetadata(
            owner=(data.get("owner") or {}).get("login", owner),
            name=data.get("name", repo),
            stargazers=max(int(data.get("stargazers_count") or 0), 0),
            forks=max(int(data.get("forks_count") or 0), 0),
            lang=data.get("language"),
        )

    async def _api_get(self, endpoint: str) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{_GITHUB_API}{endpoint}"
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            raise MetadataFetchError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise RepositoryNotFoundError(f"Repository not found: {endpoint}")

        if resp.status_code == 403:
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(
                        int(reset_raw), tz=timezone.utc
                    ).strftime("%Y-%m-%d %H:%M:%S UTC")
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise GitHubRateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                    "Set GITPITCH_GITHUB_TOKEN to increase the limit."
                )
            raise RepositoryAccessDeniedError(
                "Access denied. The repository may be private."
            )

        if resp.status_code == 429:
            raise GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        logger.debug("Unexpected GitHub response %d for %s", resp.status_code, url)
        raise MetadataFetchError(
            f"GitHub API returned HTTP {resp.status_code} for {url}"
        )
