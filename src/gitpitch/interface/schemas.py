"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel


class PitchView(BaseModel):
    """Everything a pitch page template reads from the renderer."""

    user: str
    repo: str
    branch: str
    theme: str
    theme_css: str
    notes: str | None = None
    logo: str
    is_master: bool
    dark_theme: bool
    is_valid: bool

    landing_url: str
    slideshow_url: str
    markdown_url: str
    print_link: str
    offline_link: str
    theme_links: dict[str, str]

    org_hub: str
    repo_hub: str
    star_hub: str
    fork_hub: str
    stargazers: int
    forks: int
    repo_lang: str | None = None
    display_lang_or_branch: str

    page_link: str
    page_embed: str
    page_badge: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
