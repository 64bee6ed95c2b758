"""Value objects — self-normalizing domain primitives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Theme(str, Enum):
    """Slideshow themes a pitch may be rendered with."""

    WHITE = "white"
    BEIGE = "beige"
    BLACK = "black"
    MOON = "moon"
    NIGHT = "night"
    SKY = "sky"


# ── Constants ───────────────────────────────────────────────────────────────

DEFAULT_BRANCH = "master"
DEFAULT_THEME = Theme.WHITE.value
DEFAULT_THEME_CSS = "white.css"
LONG_LIVED_USER = "gitpitch"

DARK_THEMES: frozenset[str] = frozenset(
    t.value for t in (Theme.BLACK, Theme.MOON, Theme.NIGHT)
)
LIGHT_THEMES: frozenset[str] = frozenset(
    t.value for t in (Theme.BEIGE, Theme.SKY, Theme.WHITE)
)
THEMES: frozenset[str] = DARK_THEMES | LIGHT_THEMES

_CSS = ".css"


def _theme_name(theme: str | Theme | None) -> str | None:
    """Return the plain theme name for a :class:`Theme` member or string."""
    if isinstance(theme, Theme):
        return theme.value
    return theme


@dataclass(frozen=True, slots=True)
class PitchParams:
    """Normalized GitPitch request parameters.

    ``branch`` falls back to ``master`` when missing or empty, and any theme
    outside :data:`THEMES` is replaced by ``white``.  Normalization happens
    on construction, so every instance holds a usable branch and theme.
    """

    owner: str
    repo: str
    branch: str = DEFAULT_BRANCH
    theme: str = DEFAULT_THEME
    notes: str | None = None

    def __post_init__(self) -> None:
        if not self.branch:
            object.__setattr__(self, "branch", DEFAULT_BRANCH)
        theme = _theme_name(self.theme)
        object.__setattr__(self, "theme", theme if theme in THEMES else DEFAULT_THEME)

    @classmethod
    def build(
        cls,
        owner: str,
        repo: str,
        branch: str | None = None,
        theme: str | None = None,
        notes: str | None = None,
    ) -> PitchParams:
        """Build parameters from raw, possibly missing request values."""
        return cls(
            owner=owner,
            repo=repo,
            branch=branch or DEFAULT_BRANCH,
            theme=theme or DEFAULT_THEME,
            notes=notes,
        )

    # ── Theme tables ────────────────────────────────────────────────────

    @staticmethod
    def is_dark_theme(theme: str | None) -> bool:
        return _theme_name(theme) in DARK_THEMES

    @staticmethod
    def is_light_theme(theme: str | None) -> bool:
        return _theme_name(theme) in LIGHT_THEMES

    @staticmethod
    def is_valid_theme(theme: str | None) -> bool:
        return _theme_name(theme) in THEMES

    @staticmethod
    def fetch_theme_css(theme: str) -> str:
        """Return the stylesheet name for *theme*, e.g. ``moon.css``."""
        return f"{_theme_name(theme)}{_CSS}"

    # ── Derived attributes ──────────────────────────────────────────────

    @property
    def is_master(self) -> bool:
        return self.branch == DEFAULT_BRANCH

    @property
    def is_long_lived(self) -> bool:
        """True for pitches owned by the GitPitch account itself."""
        return self.owner == LONG_LIVED_USER

    @property
    def dark_theme(self) -> bool:
        return self.theme in DARK_THEMES

    @property
    def light_theme(self) -> bool:
        return self.theme in LIGHT_THEMES

    def pretty(self) -> str:
        """Return ``/owner/repo/branch``."""
        return f"/{self.owner}/{self.repo}/{self.branch}"

    def as_logo(self) -> str:
        """Return ``owner / repo`` for display next to the logo."""
        return f"{self.owner} / {self.repo}"

    def __str__(self) -> str:
        return f"{self.pretty()} [ {self.theme} ]"
