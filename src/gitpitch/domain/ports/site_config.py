"""Port: site configuration consulted when building absolute links."""

from __future__ import annotations

from typing import Protocol


class SiteConfig(Protocol):
    """The two deployment settings absolute links depend on."""

    @property
    def https(self) -> bool | None: ...

    @property
    def hostname(self) -> str | None: ...
