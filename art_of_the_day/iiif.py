"""IIIF image URL construction.

Per https://api.artic.edu/docs/#iiif-image-api, AIC recommends requesting
images at a width of 843px. Asking for 843px on a narrower source image
upscales it, so smaller images are requested at full size instead.
"""

from __future__ import annotations

TARGET_WIDTH = 843


def size_spec(width: int, target_width: int = TARGET_WIDTH) -> str:
    """Return the IIIF size segment (with trailing slash) for an image width."""
    if width < target_width:
        return "pct:100/"
    return f"{target_width},/"


def compose_image_url(base_url: str, path: str, width: int,
                      target_width: int = TARGET_WIDTH) -> str:
    """
    Build the display URL for an image.

    Args:
        base_url: IIIF server base (e.g. "https://www.artic.edu/iiif/2")
        path: Image path appended to the base, starting with "/"
        width: Source image width in pixels
        target_width: Width to request when the source is wide enough

    Returns:
        URL ending in "/full/{size}/0/default.jpg"
    """
    return f"{base_url}{path}/full/{size_spec(width, target_width)}0/default.jpg"
