"""Art Institute of Chicago sources."""

from __future__ import annotations

from typing import Any

from . import register
from .base import ArtworkSource
from ..errors import MalformedResponseError
from ..models import DEFAULT_IIIF_URL, ArtworkRecord, HslColor, ImageRecord

API_BASE_URL = "https://api.artic.edu/api/v1"

ARTWORK_FIELDS = [
    # Link
    "id",
    # Image
    "image_id",
    # Info
    "title",
    "artist_display",
    "medium_display",
    "place_of_origin",
    "style_title",
    # Styling
    "color",
    # Acceptance
    "has_not_been_viewed_much",
    "is_public_domain",
]

IMAGE_FIELDS = [
    "alt_text",
    "credit_line",
    "iiif_url",
    "width",
]


def _optional_str(item: dict[str, Any], key: str) -> str | None:
    value = item.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _flag(item: dict[str, Any], key: str) -> bool:
    """Read a required boolean flag."""
    value = item[key]
    if not isinstance(value, bool):
        raise TypeError(f"{key} is not a boolean: {value!r}")
    return value


def _color(item: dict[str, Any]) -> HslColor | None:
    """Dominant color, or None when absent or incomplete."""
    color = item.get("color")
    if not isinstance(color, dict):
        return None
    try:
        return HslColor(h=float(color["h"]), s=float(color["s"]), l=float(color["l"]))
    except (KeyError, TypeError, ValueError):
        return None


def _iiif_url(payload: dict[str, Any], fallback: str) -> str:
    config = payload.get("config") or {}
    return config.get("iiif_url") or fallback


def _iiif_path(data: dict[str, Any], base_url: str, image_id: str | None) -> str:
    """Image path under the IIIF base, from `data.iiif_url` when it has one."""
    iiif_url = data.get("iiif_url")
    if isinstance(iiif_url, str):
        if iiif_url.startswith(base_url + "/"):
            return iiif_url[len(base_url):]
        if iiif_url.startswith("/"):
            return iiif_url
    return f"/{image_id}"


@register
class AICArtworkSource(ArtworkSource):
    """Looks up artworks directly by id on the AIC artworks endpoint."""

    name = "Art Institute of Chicago"
    short_name = "AIC"
    base_url = f"{API_BASE_URL}/artworks"
    images_url = f"{API_BASE_URL}/images"

    # Requested as a courtesy by AIC
    user_agent_header = "AIC-User-Agent"

    def _do_fetch_artwork(self, candidate: int) -> ArtworkRecord:
        payload = self._get_json(
            f"{self.base_url}/{candidate}",
            params={"fields": self.fields_param(ARTWORK_FIELDS)},
        )
        return self._parse_artwork(payload.get("data"), payload)

    def _do_fetch_image(self, artwork: ArtworkRecord) -> ImageRecord:
        payload = self._get_json(
            f"{self.images_url}/{artwork.image_id}",
            params={"fields": self.fields_param(IMAGE_FIELDS)},
        )
        return self._parse_image(payload, artwork)

    def _parse_artwork(self, item: Any, payload: dict[str, Any]) -> ArtworkRecord:
        """Build an ArtworkRecord from one `data` entry of an artworks response."""
        if not isinstance(item, dict):
            raise MalformedResponseError(f"{self.name} response has no artwork data.")

        try:
            artwork_id = item["id"]
            if not isinstance(artwork_id, int) or isinstance(artwork_id, bool):
                raise TypeError(f"id is not an integer: {artwork_id!r}")

            return ArtworkRecord(
                id=artwork_id,
                image_id=_optional_str(item, "image_id"),
                viewed_rarely=_flag(item, "has_not_been_viewed_much"),
                is_public_domain=_flag(item, "is_public_domain"),
                title=_optional_str(item, "title"),
                artist=_optional_str(item, "artist_display"),
                medium=_optional_str(item, "medium_display"),
                origin=_optional_str(item, "place_of_origin"),
                style=_optional_str(item, "style_title"),
                color=_color(item),
                iiif_base_url=_iiif_url(payload, DEFAULT_IIIF_URL),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            self._log_warning(f"Failed to parse artwork {item.get('id')}: {e}")
            raise MalformedResponseError(f"{self.name} returned an unreadable artwork.") from e

    def _parse_image(self, payload: dict[str, Any], artwork: ArtworkRecord) -> ImageRecord:
        """Build an ImageRecord from an images response."""
        data = payload.get("data")
        if not isinstance(data, dict):
            raise MalformedResponseError(f"{self.name} response has no image data.")

        try:
            width = data["width"]
            if not isinstance(width, int) or isinstance(width, bool):
                raise TypeError(f"width is not an integer: {width!r}")

            info = payload.get("info") or {}
            links = info.get("license_links") or []

            base_url = _iiif_url(payload, artwork.iiif_base_url)

            return ImageRecord(
                image_id=str(artwork.image_id),
                base_url=base_url,
                path=_iiif_path(data, base_url, artwork.image_id),
                width=width,
                alt_text=_optional_str(data, "alt_text"),
                credit_line=_optional_str(data, "credit_line"),
                license_text=_optional_str(info, "license_text"),
                license_links=tuple(str(link) for link in links),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            self._log_warning(f"Failed to parse image {artwork.image_id}: {e}")
            raise MalformedResponseError(f"{self.name} returned unreadable image data.") from e


@register
class AICSearchSource(AICArtworkSource):
    """
    Asks the AIC search endpoint for one random artwork.

    The search applies the acceptance filters server-side and scores results
    with a random function seeded by the candidate, so most attempts succeed
    first time. Results are still validated locally.
    """

    name = "Art Institute of Chicago (search)"
    short_name = "AIC-SEARCH"
    search_url = f"{API_BASE_URL}/search"

    # Courtesy of the AIC API team
    SEARCH_PARAMS = [
        ("query[function_score][query][bool][filter][][term][is_public_domain]", "true"),
        ("query[function_score][query][bool][filter][][term][has_not_been_viewed_much]", "true"),
        ("query[function_score][query][bool][filter][][exists][field]", "image_id"),
        ("query[function_score][boost_mode]", "replace"),
        ("query[function_score][random_score][field]", "id"),
        ("resources", "artworks"),
        ("boost", "false"),
        ("limit", "1"),
    ]
    SEED_PARAM = "query[function_score][random_score][seed]"

    def _do_fetch_artwork(self, candidate: int) -> ArtworkRecord:
        params = [("fields", self.fields_param(ARTWORK_FIELDS))]
        params.extend(self.SEARCH_PARAMS)
        params.append((self.SEED_PARAM, str(candidate)))

        payload = self._get_json(self.search_url, params=params)

        # The search endpoint returns an array of results
        results = payload.get("data")
        if not isinstance(results, list):
            raise MalformedResponseError(f"{self.name} response has no result list.")
        if not results:
            raise MalformedResponseError(f"{self.name} found no artworks.")
        return self._parse_artwork(results[0], payload)
