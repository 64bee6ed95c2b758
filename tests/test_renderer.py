"""Unit tests for the GitRepoRenderer view model."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from gitpitch.domain.entities import RepoMetadata, WithoutMetadata
from gitpitch.domain.exceptions import MissingConfigurationError
from gitpitch.domain.value_objects import PitchParams
from gitpitch.infrastructure.config import Settings
from gitpitch.interface.route_builder import FastAPIRouteBuilder
from gitpitch.services.renderer import GitRepoRenderer


@dataclass
class StaticConfig:
    https: bool | None = None
    hostname: str | None = None


@pytest.fixture
def valid(
    metadata: RepoMetadata, routes: FastAPIRouteBuilder, settings: Settings
) -> GitRepoRenderer:
    pp = PitchParams.build("ACME", "Deck", "master", "moon", "speaker")
    return GitRepoRenderer.build(pp, metadata, routes, settings)


@pytest.fixture
def invalid(routes: FastAPIRouteBuilder, settings: Settings) -> GitRepoRenderer:
    pp = PitchParams.build("acme", "deck", "dev", "sky")
    return GitRepoRenderer.build(pp, None, routes, settings)


class TestValidMode:
    """Renderer built with repository metadata."""

    def test_is_valid(self, valid: GitRepoRenderer, metadata: RepoMetadata) -> None:
        assert valid.is_valid
        assert valid.model is metadata

    def test_github_links_use_metadata_identity(self, valid: GitRepoRenderer) -> None:
        assert valid.org_hub == "https://github.com/acme"
        assert valid.repo_hub == "https://github.com/acme/deck"
        assert valid.star_hub == "https://github.com/acme/deck/stargazers"
        assert valid.fork_hub == "https://github.com/acme/deck/network"

    def test_view_links_use_metadata_identity(self, valid: GitRepoRenderer) -> None:
        assert valid.landing_url() == "/acme/deck?b=master&t=moon&n=speaker"
        assert valid.slideshow_url == (
            "/pitchme/slideshow/acme/deck?b=master&t=moon&n=speaker"
        )
        assert valid.markdown_url == "/pitchme/markdown/acme/deck/master/PITCHME.md"
        assert str(valid) == valid.landing_url()

    def test_landing_url_for_alternate_theme(self, valid: GitRepoRenderer) -> None:
        assert valid.landing_url("black") == "/acme/deck?b=master&t=black&n=speaker"
        assert valid.theme == "moon"
        assert valid.landing_url() == "/acme/deck?b=master&t=moon&n=speaker"

    def test_stats_come_from_metadata(self, valid: GitRepoRenderer) -> None:
        assert valid.stargazers == 5
        assert valid.forks == 2
        assert valid.repo_lang == "Go"

    def test_pass_through_accessors(self, valid: GitRepoRenderer) -> None:
        assert valid.user == "ACME"
        assert valid.repo == "Deck"
        assert valid.branch == "master"
        assert valid.theme == "moon"
        assert valid.theme_css == "moon.css"
        assert valid.is_master


class TestInvalidMode:
    """Renderer built without repository metadata."""

    def test_is_not_valid(self, invalid: GitRepoRenderer) -> None:
        assert not invalid.is_valid
        assert invalid.model is None

    def test_metadata_links_are_placeholders(self, invalid: GitRepoRenderer) -> None:
        for link in (
            invalid.org_hub,
            invalid.repo_hub,
            invalid.star_hub,
            invalid.fork_hub,
            invalid.slideshow_url,
            invalid.landing_url(),
            invalid.landing_url("moon"),
            invalid.markdown_url,
            str(invalid),
        ):
            assert link == "#"

    def test_stats_default_to_zero(self, invalid: GitRepoRenderer) -> None:
        assert invalid.stargazers == 0
        assert invalid.forks == 0
        assert invalid.repo_lang is None

    def test_parameter_links_still_resolve(self, invalid: GitRepoRenderer) -> None:
        assert invalid.page_link() == "/acme/deck?b=dev&t=sky"
        assert invalid.print_link() == "/pitchme/print/acme/deck?b=dev&t=sky"
        assert invalid.offline_link() == "/pitchme/offline/acme/deck?b=dev&t=sky"

    def test_state_can_be_passed_directly(self, routes: FastAPIRouteBuilder) -> None:
        pp = PitchParams.build("acme", "deck")
        renderer = GitRepoRenderer(pp, WithoutMetadata(), routes)
        assert renderer.repo_hub == "#"


class TestDisplayLangOrBranch:
    def test_language_on_master(
        self, metadata: RepoMetadata, routes: FastAPIRouteBuilder
    ) -> None:
        pp = PitchParams.build("acme", "deck", "master")
        assert GitRepoRenderer.build(pp, metadata, routes).display_lang_or_branch == "Go"

    def test_branch_off_master(
        self, metadata: RepoMetadata, routes: FastAPIRouteBuilder
    ) -> None:
        pp = PitchParams.build("acme", "deck", "feature-x")
        renderer = GitRepoRenderer.build(pp, metadata, routes)
        assert renderer.display_lang_or_branch == "feature-x"

    def test_branch_when_language_unknown(self, routes: FastAPIRouteBuilder) -> None:
        meta = RepoMetadata(owner="acme", name="deck")
        pp = PitchParams.build("acme", "deck")
        assert GitRepoRenderer.build(pp, meta, routes).display_lang_or_branch == "master"

    def test_branch_without_metadata(self, routes: FastAPIRouteBuilder) -> None:
        pp = PitchParams.build("acme", "deck")
        assert GitRepoRenderer.build(pp, None, routes).display_lang_or_branch == "master"


class TestShareableLinks:
    def test_page_link_uses_visitor_identity(self, valid: GitRepoRenderer) -> None:
        assert valid.page_link() == "/ACME/Deck?b=master&t=moon&n=speaker"
        assert valid.page_link(absolute=True) == (
            "https://gitpitch.com/ACME/Deck?b=master&t=moon&n=speaker"
        )

    def test_page_link_with_theme(self, valid: GitRepoRenderer) -> None:
        assert valid.page_link_with_theme("beige") == (
            "/ACME/Deck?b=master&t=beige&n=speaker"
        )

    def test_plain_http_when_not_encrypted(self, routes: FastAPIRouteBuilder) -> None:
        config = StaticConfig(https=False, hostname="localhost:9000")
        renderer = GitRepoRenderer.build(
            PitchParams.build("acme", "deck"), None, routes, config
        )
        assert renderer.page_link(absolute=True) == (
            "http://localhost:9000/acme/deck?b=master&t=white"
        )

    @pytest.mark.parametrize("with_metadata", [True, False])
    def test_embed_and_badge_wrap_absolute_link(
        self,
        with_metadata: bool,
        metadata: RepoMetadata,
        routes: FastAPIRouteBuilder,
        settings: Settings,
    ) -> None:
        pp = PitchParams.build("acme", "deck")
        renderer = GitRepoRenderer.build(
            pp, metadata if with_metadata else None, routes, settings
        )
        link = "https://gitpitch.com/acme/deck?b=master&t=white"
        assert renderer.page_embed() == (
            f"<iframe width='770' height='515' src='{link}' "
            "frameborder='0' allowfullscreen></iframe>"
        )
        assert renderer.page_badge() == (
            f"[![GitPitch](https://gitpitch.com/assets/badge.svg)]({link})"
        )

    @pytest.mark.parametrize(
        "config",
        [None, StaticConfig(hostname="gitpitch.com"), StaticConfig(https=True)],
    )
    def test_absolute_link_requires_configuration(
        self, config: StaticConfig | None, routes: FastAPIRouteBuilder
    ) -> None:
        renderer = GitRepoRenderer.build(
            PitchParams.build("acme", "deck"), None, routes, config
        )
        assert renderer.page_link() == "/acme/deck?b=master&t=white"
        with pytest.raises(MissingConfigurationError):
            renderer.page_link(absolute=True)
        with pytest.raises(MissingConfigurationError):
            renderer.page_embed()
        with pytest.raises(MissingConfigurationError):
            renderer.page_badge()


_EDGE_PARAMS = [
    pytest.param(("acme", "deck", "feature/x", None, None), id="slash-branch"),
    pytest.param(("acme", "deck", "fix#12", None, None), id="hash-branch"),
    pytest.param(("acme", "deck", "what?", None, None), id="question-branch"),
    pytest.param(("acme", "deck", "master", "moon", "Grüße ✨"), id="unicode-notes"),
    pytest.param(("", "deck", None, None, None), id="empty-owner"),
    pytest.param(("acme", "", None, None, None), id="empty-repo"),
]


class TestEdgeValues:
    """View links never raise for values GitHub or visitors may supply."""

    @pytest.mark.parametrize("raw", _EDGE_PARAMS)
    @pytest.mark.parametrize("with_metadata", [True, False])
    def test_view_links_are_strings(
        self,
        raw: tuple[str, str, str | None, str | None, str | None],
        with_metadata: bool,
        metadata: RepoMetadata,
        routes: FastAPIRouteBuilder,
        settings: Settings,
    ) -> None:
        pp = PitchParams.build(*raw)
        renderer = GitRepoRenderer.build(
            pp, metadata if with_metadata else None, routes, settings
        )

        links = [
            renderer.landing_url(),
            renderer.landing_url("night"),
            renderer.slideshow_url,
            renderer.markdown_url,
            renderer.page_link(),
            renderer.page_link(absolute=True),
            renderer.page_link_with_theme("sky"),
            renderer.print_link(),
            renderer.offline_link(),
            renderer.page_embed(),
            renderer.page_badge(),
        ]

        assert all(isinstance(link, str) and link for link in links)
        if not with_metadata:
            assert links[:4] == ["#"] * 4

    def test_slash_branch_in_valid_mode(
        self, metadata: RepoMetadata, routes: FastAPIRouteBuilder, settings: Settings
    ) -> None:
        pp = PitchParams.build("acme", "deck", "feature/x")
        renderer = GitRepoRenderer.build(pp, metadata, routes, settings)

        assert renderer.markdown_url == (
            "/pitchme/markdown/acme/deck/feature/x/PITCHME.md"
        )
        assert renderer.landing_url() == "/acme/deck?b=feature%2Fx&t=white"
        assert renderer.page_link() == "/acme/deck?b=feature%2Fx&t=white"
        assert renderer.display_lang_or_branch == "feature/x"

    def test_empty_owner_page_link(self, routes: FastAPIRouteBuilder) -> None:
        renderer = GitRepoRenderer.build(PitchParams.build("", "deck"), None, routes)
        assert renderer.page_link() == "//deck?b=master&t=white"
        assert renderer.print_link() == "/pitchme/print//deck?b=master&t=white"
        assert renderer.offline_link() == "/pitchme/offline//deck?b=master&t=white"
