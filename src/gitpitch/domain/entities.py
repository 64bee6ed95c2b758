"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RepoMetadata:
    """Read-only snapshot of a GitHub repository, as returned by the API.

    ``owner`` and ``name`` are GitHub's canonical spelling, which may differ
    in case from what the visitor typed.
    """

    owner: str
    name: str
    stargazers: int = 0
    forks: int = 0
    lang: str | None = None


@dataclass(frozen=True, slots=True)
class WithMetadata:
    """Repository state once a metadata lookup succeeded."""

    metadata: RepoMetadata


@dataclass(frozen=True, slots=True)
class WithoutMetadata:
    """Repository state when no metadata is available."""


RepoState = WithMetadata | WithoutMetadata


def repo_state(metadata: RepoMetadata | None) -> RepoState:
    """Wrap an optional metadata record in the matching state."""
    if metadata is None:
        return WithoutMetadata()
    return WithMetadata(metadata)
