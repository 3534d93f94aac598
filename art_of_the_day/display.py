"""Text and color helpers for rendering a resolved artwork."""

from __future__ import annotations

from dataclasses import dataclass

from .models import ArtworkRecord, ImageRecord


@dataclass(frozen=True)
class DisplayText:
    """Lines to show for one field, and whether they are a placeholder."""

    lines: tuple[str, ...]
    unknown: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def display_lines(value: str | None, label: str | None = None,
                  use_unknown: bool = True) -> DisplayText:
    """
    Prepare a field value for display.

    Multi-line values are split so each line renders as its own element.
    Missing values fall back to "Unknown {label}", or to `label` verbatim
    when use_unknown is False.
    """
    if value:
        return DisplayText(lines=tuple(value.split("\n")))

    if use_unknown:
        placeholder = f"Unknown {label}" if label else "Unknown"
    else:
        placeholder = label or ""
    return DisplayText(lines=(placeholder,), unknown=True)


def artwork_heading(artwork: ArtworkRecord) -> tuple[DisplayText, DisplayText]:
    """Title and artist lines for the header."""
    return (
        display_lines(artwork.title, "Title"),
        display_lines(artwork.artist, "Artist"),
    )


def artwork_details(artwork: ArtworkRecord, image: ImageRecord) -> list[tuple[str, DisplayText]]:
    """Ordered (heading, text) pairs for the artwork's side panel."""
    return [
        ("Medium", display_lines(artwork.medium, "Medium")),
        ("Place of Origin", display_lines(artwork.origin, "Place of Origin")),
        ("Style", display_lines(artwork.style, "Style")),
        ("Image Copyright", display_lines(
            image.credit_line, "No credit information provided", use_unknown=False
        )),
    ]


def license_text(image: ImageRecord) -> DisplayText:
    return display_lines(image.license_text, "No license information provided.", use_unknown=False)


def theme_color(artwork: ArtworkRecord) -> str | None:
    """CSS accent color taken from the artwork's dominant color."""
    if artwork.color is None:
        return None
    return artwork.color.css()


def license_links(image: ImageRecord) -> list[str]:
    """License links that are safe to render as anchors (http and https only)."""
    return [link for link in image.license_links if link.startswith(("https://", "http://"))]
