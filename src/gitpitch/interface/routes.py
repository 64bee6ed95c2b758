"""Pitch routes — thin controllers that build a renderer and expose its links."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import RedirectResponse

from gitpitch.domain.entities import RepoMetadata
from gitpitch.domain.exceptions import (
    GitHubRateLimitError,
    RepositoryAccessDeniedError,
    RepositoryNotFoundError,
)
from gitpitch.domain.ports.repo_fetcher import RepoFetcher
from gitpitch.domain.ports.route_builder import (
    LANDING,
    MARKDOWN,
    OFFLINE,
    PRINT,
    SLIDESHOW,
    RouteBuilder,
)
from gitpitch.domain.value_objects import THEMES, PitchParams
from gitpitch.infrastructure.config import Settings
from gitpitch.interface.dependencies import (
    get_app_settings,
    get_repo_fetcher,
    get_route_builder,
)
from gitpitch.interface.schemas import ErrorResponse, PitchView
from gitpitch.services.renderer import GitRepoRenderer

logger = logging.getLogger(__name__)

router = APIRouter()

_RAW_BASE = "https://raw.githubusercontent.com"

Branch = Annotated[str | None, Query(alias="b")]
ThemeName = Annotated[str | None, Query(alias="t")]
Notes = Annotated[str | None, Query(alias="n")]
Fetcher = Annotated[RepoFetcher, Depends(get_repo_fetcher)]
Routes = Annotated[RouteBuilder, Depends(get_route_builder)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]


async def _fetch_metadata(fetcher: RepoFetcher, pp: PitchParams) -> RepoMetadata | None:
    """Look up the repository; a missing, private or rate-limited one renders degraded."""
    try:
        return await fetcher.fetch_metadata(pp.owner, pp.repo)
    except (
        RepositoryNotFoundError,
        RepositoryAccessDeniedError,
        GitHubRateLimitError,
    ) as exc:
        logger.warning("Rendering %s without metadata: %s", pp.pretty(), exc)
        return None


def _to_view(renderer: GitRepoRenderer) -> PitchView:
    pp = renderer.params
    return PitchView(
        user=renderer.user,
        repo=renderer.repo,
        branch=renderer.branch,
        theme=renderer.theme,
        theme_css=renderer.theme_css,
        notes=pp.notes,
        logo=pp.as_logo(),
        is_master=renderer.is_master,
        dark_theme=pp.dark_theme,
        is_valid=renderer.is_valid,
        landing_url=renderer.landing_url(),
        slideshow_url=renderer.slideshow_url,
        markdown_url=renderer.markdown_url,
        print_link=renderer.print_link(),
        offline_link=renderer.offline_link(),
        theme_links={theme: renderer.landing_url(theme) for theme in sorted(THEMES)},
        org_hub=renderer.org_hub,
        repo_hub=renderer.repo_hub,
        star_hub=renderer.star_hub,
        fork_hub=renderer.fork_hub,
        stargazers=renderer.stargazers,
        forks=renderer.forks,
        repo_lang=renderer.repo_lang,
        display_lang_or_branch=renderer.display_lang_or_branch,
        page_link=renderer.page_link(),
        page_embed=renderer.page_embed(),
        page_badge=renderer.page_badge(),
    )


async def _render(
    pp: PitchParams,
    response: Response,
    fetcher: RepoFetcher,
    routes: RouteBuilder,
    settings: Settings,
) -> PitchView:
    metadata = await _fetch_metadata(fetcher, pp)
    renderer = GitRepoRenderer.build(pp, metadata, routes, settings)

    max_age = (
        settings.long_lived_cache_max_age if pp.is_long_lived else settings.cache_max_age
    )
    response.headers["Cache-Control"] = f"max-age={max_age}"
    return _to_view(renderer)


@router.get("/pitchme/slideshow/{user}/{repo}", name=SLIDESHOW, response_model=PitchView)
async def slideshow(
    user: str,
    repo: str,
    response: Response,
    fetcher: Fetcher,
    routes: Routes,
    settings: AppSettings,
    branch: Branch = None,
    theme: ThemeName = None,
    notes: Notes = None,
) -> PitchView:
    """Render context for the slideshow view."""
    pp = PitchParams.build(user, repo, branch, theme, notes)
    return await _render(pp, response, fetcher, routes, settings)


@router.get(
    "/pitchme/markdown/{user}/{repo}/{branch:path}/PITCHME.md",
    name=MARKDOWN,
    response_class=RedirectResponse,
)
async def markdown(user: str, repo: str, branch: str) -> RedirectResponse:
    """Redirect to the raw PITCHME.md on GitHub."""
    pp = PitchParams.build(user, repo, branch)
    return RedirectResponse(f"{_RAW_BASE}{pp.pretty()}/PITCHME.md")


@router.get("/pitchme/print/{user}/{repo}", name=PRINT, response_model=PitchView)
async def print_view(
    user: str,
    repo: str,
    response: Response,
    fetcher: Fetcher,
    routes: Routes,
    settings: AppSettings,
    branch: Branch = None,
    theme: ThemeName = None,
    notes: Notes = None,
) -> PitchView:
    """Render context for the printable view."""
    pp = PitchParams.build(user, repo, branch, theme, notes)
    return await _render(pp, response, fetcher, routes, settings)


@router.get("/pitchme/offline/{user}/{repo}", name=OFFLINE, response_model=PitchView)
async def offline(
    user: str,
    repo: str,
    response: Response,
    fetcher: Fetcher,
    routes: Routes,
    settings: AppSettings,
    branch: Branch = None,
    theme: ThemeName = None,
    notes: Notes = None,
) -> PitchView:
    """Render context for the offline export."""
    pp = PitchParams.build(user, repo, branch, theme, notes)
    return await _render(pp, response, fetcher, routes, settings)


@router.get(
    "/{user}/{repo}",
    name=LANDING,
    response_model=PitchView,
    responses={
        500: {"model": ErrorResponse, "description": "Absolute links are not configured"},
        502: {"model": ErrorResponse, "description": "GitHub API unreachable"},
    },
)
async def landing(
    user: str,
    repo: str,
    response: Response,
    fetcher: Fetcher,
    routes: Routes,
    settings: AppSettings,
    branch: Branch = None,
    theme: ThemeName = None,
    notes: Notes = None,
) -> PitchView:
    """Render context for the pitch landing page."""
    pp = PitchParams.build(user, repo, branch, theme, notes)
    return await _render(pp, response, fetcher, routes, settings)
