"""Data models for Art of the Day."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .iiif import compose_image_url

if TYPE_CHECKING:
    from .errors import ArtFetchError


DEFAULT_IIIF_URL = "https://www.artic.edu/iiif/2"
WEB_BASE_URL = "https://www.artic.edu/artworks/"


@dataclass(frozen=True)
class HslColor:
    """Dominant color of an artwork, as reported by AIC."""

    h: float
    s: float
    l: float  # noqa: E741

    def css(self) -> str:
        """Render as a CSS color string."""
        return f"hsl({self.h:g} {self.s:g}% {self.l:g}%)"


@dataclass(frozen=True)
class ArtworkRecord:
    """Artwork metadata for a single candidate."""

    id: int
    image_id: str | None
    viewed_rarely: bool
    is_public_domain: bool

    # Display fields
    title: str | None = None
    artist: str | None = None
    medium: str | None = None
    origin: str | None = None
    style: str | None = None
    color: HslColor | None = None

    # IIIF server the artwork's images live on
    iiif_base_url: str = DEFAULT_IIIF_URL

    @property
    def web_url(self) -> str:
        """Public page for this artwork on artic.edu."""
        return f"{WEB_BASE_URL}{self.id}"


@dataclass(frozen=True)
class ImageRecord:
    """Image metadata for a validated artwork."""

    image_id: str
    base_url: str
    path: str
    width: int
    alt_text: str | None = None
    credit_line: str | None = None

    # License info comes from the response's `info` block
    license_text: str | None = None
    license_links: tuple[str, ...] = ()

    @property
    def url(self) -> str:
        """Display URL, sized for the page."""
        return compose_image_url(self.base_url, self.path, self.width)


class CycleState(Enum):
    """Where the retry controller is within a resolution cycle."""

    IDLE = "idle"
    FETCHING = "fetching"
    SUCCESS = "success"
    RETRYING = "retrying"
    GIVING_UP = "giving_up"


@dataclass
class ResolutionResult:
    """Outcome of one resolution cycle."""

    state: CycleState
    attempts: int = 0  # Fetch attempts made during the cycle
    artwork: ArtworkRecord | None = None
    image: ImageRecord | None = None
    error: ArtFetchError | None = None
    failures: list[str] = field(default_factory=list)  # Diagnostics, one per failed attempt

    @property
    def success(self) -> bool:
        """True if the cycle produced an artwork/image pair."""
        return self.state is CycleState.SUCCESS and self.artwork is not None
