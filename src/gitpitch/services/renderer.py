"""Rendering model for the pitch landing page.

Combines one :class:`PitchParams` with the optional :class:`RepoMetadata`
fetched for it and derives every link and label the views need.  When no
metadata is available the renderer still returns something renderable:
links that depend on the repository resolve to ``#``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gitpitch.domain.entities import (
    RepoMetadata,
    RepoState,
    WithMetadata,
    WithoutMetadata,
    repo_state,
)
from gitpitch.domain.exceptions import MissingConfigurationError
from gitpitch.domain.ports.route_builder import (
    LANDING,
    MARKDOWN,
    OFFLINE,
    PRINT,
    SLIDESHOW,
    RouteBuilder,
)
from gitpitch.domain.ports.site_config import SiteConfig
from gitpitch.domain.value_objects import PitchParams

logger = logging.getLogger(__name__)

# ── Templates ───────────────────────────────────────────────────────────────

GITHUB_BASE = "https://github.com"
PLACEHOLDER = "#"
EMBED_TEMPLATE = (
    "<iframe width='770' height='515' src='{link}' "
    "frameborder='0' allowfullscreen></iframe>"
)
BADGE_TEMPLATE = "[![GitPitch](https://gitpitch.com/assets/badge.svg)]({link})"


@dataclass(frozen=True, slots=True)
class _Links:
    """Links memoized when the renderer is built."""

    landing: str
    slideshow: str
    markdown: str
    org_hub: str
    repo_hub: str
    star_hub: str
    fork_hub: str


_NO_LINKS = _Links(*(PLACEHOLDER,) * 7)


class GitRepoRenderer:
    """View model for one pitch page.

    Parameters
    ----------
    params:
        Normalized request parameters.
    state:
        :class:`WithMetadata` after a successful GitHub lookup, otherwise
        :class:`WithoutMetadata`.
    routes:
        Reverse router used for every relative and absolute view link.
    config:
        Deployment settings; only consulted for absolute links.
    """

    def __init__(
        self,
        params: PitchParams,
        state: RepoState,
        routes: RouteBuilder,
        config: SiteConfig | None = None,
    ) -> None:
        self._params = params
        self._state = state
        self._routes = routes
        self._config = config
        self._links = self._derive_links()

    @classmethod
    def build(
        cls,
        params: PitchParams,
        metadata: RepoMetadata | None,
        routes: RouteBuilder,
        config: SiteConfig | None = None,
    ) -> GitRepoRenderer:
        return cls(params, repo_state(metadata), routes, config)

    def _derive_links(self) -> _Links:
        if isinstance(self._state, WithoutMetadata):
            logger.debug("Rendering %s without repository metadata", self._params)
            return _NO_LINKS

        # GitHub's spelling of owner/name wins over what the visitor typed.
        meta = self._state.metadata
        pp = self._params
        org_hub = f"{GITHUB_BASE}/{meta.owner}"
        repo_hub = f"{org_hub}/{meta.name}"
        return _Links(
            landing=self._meta_landing(meta, pp.theme),
            slideshow=self._routes.path_for(
                SLIDESHOW,
                user=meta.owner,
                repo=meta.name,
                branch=pp.branch,
                theme=pp.theme,
                notes=pp.notes,
            ),
            markdown=self._routes.path_for(
                MARKDOWN, user=meta.owner, repo=meta.name, branch=pp.branch
            ),
            org_hub=org_hub,
            repo_hub=repo_hub,
            star_hub=f"{repo_hub}/stargazers",
            fork_hub=f"{repo_hub}/network",
        )

    def _meta_landing(self, meta: RepoMetadata, theme: str) -> str:
        return self._routes.path_for(
            LANDING,
            user=meta.owner,
            repo=meta.name,
            branch=self._params.branch,
            theme=theme,
            notes=self._params.notes,
        )

    def _view_params(self, theme: str | None = None) -> dict[str, str | None]:
        pp = self._params
        return {
            "user": pp.owner,
            "repo": pp.repo,
            "branch": pp.branch,
            "theme": theme or pp.theme,
            "notes": pp.notes,
        }

    # ── Underlying records ──────────────────────────────────────────────

    @property
    def params(self) -> PitchParams:
        return self._params

    @property
    def model(self) -> RepoMetadata | None:
        if isinstance(self._state, WithMetadata):
            return self._state.metadata
        return None

    @property
    def is_valid(self) -> bool:
        """True if this view represents a repository found on GitHub."""
        return isinstance(self._state, WithMetadata)

    # ── Pass-through parameters ─────────────────────────────────────────

    @property
    def user(self) -> str:
        return self._params.owner

    @property
    def repo(self) -> str:
        return self._params.repo

    @property
    def branch(self) -> str:
        return self._params.branch

    @property
    def theme(self) -> str:
        return self._params.theme

    @property
    def theme_css(self) -> str:
        return PitchParams.fetch_theme_css(self._params.theme)

    @property
    def is_master(self) -> bool:
        return self._params.is_master

    # ── Relative view links ─────────────────────────────────────────────

    def landing_url(self, theme: str | None = None) -> str:
        """Return the landing link, optionally for an alternate *theme*."""
        if theme is None:
            return self._links.landing
        if isinstance(self._state, WithoutMetadata):
            return PLACEHOLDER
        return self._meta_landing(self._state.metadata, theme)

    @property
    def slideshow_url(self) -> str:
        return self._links.slideshow

    @property
    def markdown_url(self) -> str:
        """Relative link to the PITCHME.md source."""
        return self._links.markdown

    # ── GitHub links ────────────────────────────────────────────────────

    @property
    def org_hub(self) -> str:
        return self._links.org_hub

    @property
    def repo_hub(self) -> str:
        return self._links.repo_hub

    @property
    def star_hub(self) -> str:
        return self._links.star_hub

    @property
    def fork_hub(self) -> str:
        return self._links.fork_hub

    # ── Repository stats ────────────────────────────────────────────────

    @property
    def stargazers(self) -> int:
        meta = self.model
        return meta.stargazers if meta is not None else 0

    @property
    def forks(self) -> int:
        meta = self.model
        return meta.forks if meta is not None else 0

    @property
    def repo_lang(self) -> str | None:
        meta = self.model
        return meta.lang if meta is not None else None

    @property
    def display_lang_or_branch(self) -> str:
        """Label shown under the repository name on the landing page.

        The repository language is preferred on master; any other branch
        is shown by name.
        """
        if not self.is_valid:
            return self._params.branch
        if self.is_master and self.repo_lang is not None:
            return self.repo_lang
        return self._params.branch

    # ── Shareable links ─────────────────────────────────────────────────

    def page_link(self, absolute: bool = False) -> str:
        """Return the landing link built from the visitor's parameters.

        The absolute form needs both ``https`` and ``hostname`` configured
        and raises :class:`MissingConfigurationError` otherwise.
        """
        if not absolute:
            return self._routes.path_for(LANDING, **self._view_params())
        return self._routes.absolute_url_for(
            LANDING,
            secure=self._is_encrypted(),
            hostname=self._hostname(),
            **self._view_params(),
        )

    def page_link_with_theme(self, theme: str) -> str:
        return self._routes.path_for(LANDING, **self._view_params(theme))

    def print_link(self) -> str:
        return self._routes.path_for(PRINT, **self._view_params())

    def offline_link(self) -> str:
        return self._routes.path_for(OFFLINE, **self._view_params())

    def page_embed(self) -> str:
        """Return an ``<iframe>`` snippet embedding the pitch."""
        return EMBED_TEMPLATE.format(link=self.page_link(absolute=True))

    def page_badge(self) -> str:
        """Return a Markdown badge linking to the pitch."""
        return BADGE_TEMPLATE.format(link=self.page_link(absolute=True))

    # ── Configuration ───────────────────────────────────────────────────

    def _is_encrypted(self) -> bool:
        https = self._config.https if self._config is not None else None
        if https is None:
            raise MissingConfigurationError("gitpitch.https is not configured")
        return https

    def _hostname(self) -> str:
        hostname = self._config.hostname if self._config is not None else None
        if not hostname:
            raise MissingConfigurationError("gitpitch.hostname is not configured")
        return hostname

    def __str__(self) -> str:
        return self._links.landing
