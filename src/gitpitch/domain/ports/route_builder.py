"""Port: route builder — defined by the domain, implemented by the web layer."""

from __future__ import annotations

from typing import Protocol


class RouteBuilder(Protocol):
    """Reverse routing for named GitPitch endpoints.

    Which parameters end up as path segments and which as query parameters
    is decided by the implementation's route table, not by callers.
    Parameters whose value is ``None`` are left out.
    """

    def path_for(self, endpoint: str, **params: str | None) -> str:
        """Return the relative URL for *endpoint*."""
        ...

    def absolute_url_for(
        self, endpoint: str, *, secure: bool, hostname: str, **params: str | None
    ) -> str:
        """Return the scheme- and host-qualified URL for *endpoint*."""
        ...


# ── Endpoint names ──────────────────────────────────────────────────────────

LANDING = "landing"
SLIDESHOW = "slideshow"
MARKDOWN = "markdown"
PRINT = "print"
OFFLINE = "offline"
