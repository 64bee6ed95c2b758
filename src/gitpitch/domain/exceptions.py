"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.

Parameter normalization never raises: a missing branch or an unknown theme
is defaulted, not reported.
"""

from __future__ import annotations


class GitPitchError(Exception):
    """Base exception for the entire application."""


# ── Configuration errors ────────────────────────────────────────────────────


class MissingConfigurationError(GitPitchError):
    """A setting needed to build absolute links is not configured."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class RepositoryNotFoundError(GitPitchError):
    """The repository does not exist or is not accessible (404)."""


class RepositoryAccessDeniedError(GitPitchError):
    """Access to the repository was denied (403)."""


class GitHubRateLimitError(GitPitchError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class MetadataFetchError(GitPitchError):
    """Network failure or unexpected response while fetching metadata."""
